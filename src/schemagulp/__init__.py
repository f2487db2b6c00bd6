"""SchemaGulp - Database schema generation from website content files."""

__version__ = "0.1.0"

from schemagulp.config import Config
from schemagulp.models import FieldSpec, FieldType, FileDescriptor, SchemaResult, TableSpec
from schemagulp.schemagulp import SchemaGulp, generate_schema

__all__ = [
    "SchemaGulp",
    "generate_schema",
    "Config",
    "SchemaResult",
    "TableSpec",
    "FieldSpec",
    "FieldType",
    "FileDescriptor",
]
