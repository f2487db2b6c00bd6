"""Analysis tools for understanding uploaded content."""

from .name_sanitizer import sanitize_field_name
from .type_inference import infer_type, is_date, is_numeric, is_timestamp

__all__ = [
    "infer_type",
    "is_date",
    "is_numeric",
    "is_timestamp",
    "sanitize_field_name",
]
