"""Result model returned by the generation pipeline."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from .field import TableSpec


class SchemaResult(BaseModel):
    """Complete output of one generation run."""

    sql: str = Field(..., description="Rendered schema text for the selected dialect")
    tables: list[TableSpec] = Field(default_factory=list, description="Generated tables in order")
    total_fields: int = Field(0, ge=0, description="Sum of field counts across tables")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Analysis byproducts")
    relationships: list[dict[str, Any]] = Field(
        default_factory=list, description="Reserved, currently always empty"
    )
    project_name: str = Field("my_project", description="Project name used in headers")
    database_type: str = Field("mysql", description="Dialect the schema was rendered for")
    generated_at: datetime = Field(
        default_factory=datetime.now, description="When the schema was generated"
    )

    @property
    def table_count(self) -> int:
        """Number of generated tables."""
        return len(self.tables)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the display/export representation."""
        return {
            "projectName": self.project_name,
            "databaseType": self.database_type,
            "schema": self.sql,
            "tables": [table.to_dict() for table in self.tables],
            "totalFields": self.total_fields,
            "metadata": self.metadata,
            "relationships": self.relationships,
            "timestamp": self.generated_at.isoformat(),
        }
