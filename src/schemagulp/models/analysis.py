"""Models for the per-file content analysis results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .field import FieldType


class ContentKind(str, Enum):
    """Structural family assigned to an analyzed file."""

    STRUCTURED = "structured"
    TABULAR = "tabular"
    CONTENT = "content"
    DOCUMENT = "document"


class FieldShape(BaseModel):
    """Inferred shape of one field discovered in a file."""

    model_config = ConfigDict(frozen=True)

    type: FieldType = Field(..., description="Inferred primitive type")
    required: bool = Field(False, description="Whether the field looks mandatory")
    related_table: str | None = Field(None, description="Child table for relation fields")
    child_structure: dict[str, FieldShape] | None = Field(
        None, description="Shape of the first child element for relation fields"
    )


class FileAnalysis(BaseModel):
    """Analysis result for a single file."""

    file_name: str = Field(..., description="Original file name")
    extension: str = Field(..., description="Extension used for analyzer dispatch")
    kind: ContentKind = Field(..., description="Structural family of the content")
    fields: dict[str, FieldShape] | None = Field(
        None, description="Discovered fields, None when nothing could be inferred"
    )

    @property
    def field_count(self) -> int:
        """Number of top-level fields discovered."""
        return len(self.fields) if self.fields else 0


class AnalysisSummary(BaseModel):
    """Aggregated analysis of every file in one run."""

    files: list[FileAnalysis] = Field(default_factory=list, description="Per-file results")
    common_fields: set[str] = Field(
        default_factory=set, description="Union of field names across all files"
    )
    failed_files: list[str] = Field(
        default_factory=list, description="Files that could not be analyzed"
    )

    def add(self, analysis: FileAnalysis) -> None:
        """Merge one file's analysis into the summary."""
        self.files.append(analysis)
        if analysis.fields:
            self.common_fields.update(analysis.fields)


FieldShape.model_rebuild()
