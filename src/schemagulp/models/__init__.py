"""Data models for SchemaGulp."""

from .analysis import AnalysisSummary, ContentKind, FieldShape, FileAnalysis
from .field import FieldSpec, FieldType, TableSpec
from .file_info import FileDescriptor
from .schema_result import SchemaResult

__all__ = [
    "FieldType",
    "FieldSpec",
    "TableSpec",
    "FileDescriptor",
    "ContentKind",
    "FieldShape",
    "FileAnalysis",
    "AnalysisSummary",
    "SchemaResult",
]
