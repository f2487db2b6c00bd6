"""File descriptor models for uploaded content."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FileDescriptor(BaseModel):
    """One uploaded item handed to the pipeline by the upload layer.

    Exactly one content handle must be set: ``path`` for a file on disk or
    ``content`` for an in-memory buffer. The descriptor never deletes the
    backing file; that stays with whoever created it.
    """

    model_config = ConfigDict(frozen=True)

    original_name: str = Field(..., min_length=1, description="Name the file was uploaded as")
    extension: str = Field("", description="Lower-cased, dot-prefixed extension")
    size: int = Field(0, ge=0, description="File size in bytes")
    path: Path | None = Field(None, description="Path to the uploaded file")
    content: bytes | str | None = Field(None, description="In-memory file content")

    @model_validator(mode="before")
    @classmethod
    def _fill_derived(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)

        extension = data.get("extension") or Path(str(data.get("original_name", ""))).suffix
        extension = extension.lower()
        if extension and not extension.startswith("."):
            extension = f".{extension}"
        data["extension"] = extension

        if not data.get("size"):
            content = data.get("content")
            path = data.get("path")
            if isinstance(content, bytes):
                data["size"] = len(content)
            elif isinstance(content, str):
                data["size"] = len(content.encode("utf-8"))
            elif path is not None and Path(path).exists():
                data["size"] = Path(path).stat().st_size
        return data

    @model_validator(mode="after")
    def _check_handle(self) -> "FileDescriptor":
        if (self.path is None) == (self.content is None):
            raise ValueError("Exactly one of 'path' or 'content' must be provided")
        return self

    @classmethod
    def from_path(cls, path: str | Path, original_name: str | None = None) -> "FileDescriptor":
        """Create a descriptor for a file on disk."""
        path = Path(path)
        return cls(original_name=original_name or path.name, path=path)

    @classmethod
    def from_content(cls, original_name: str, content: bytes | str) -> "FileDescriptor":
        """Create a descriptor for an in-memory buffer."""
        return cls(original_name=original_name, content=content)

    @property
    def size_mb(self) -> float:
        """File size in megabytes."""
        return self.size / (1024 * 1024)

    def read_text(self, encoding: str = "utf-8") -> str:
        """Read the full content as text.

        Raises:
            OSError: If the backing file cannot be read
            UnicodeDecodeError: If the content is not valid in ``encoding``
        """
        if self.content is not None:
            if isinstance(self.content, bytes):
                return self.content.decode(encoding)
            return self.content
        return self.path.read_text(encoding=encoding)
