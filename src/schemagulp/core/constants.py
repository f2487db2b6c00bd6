"""Centralized constants for SchemaGulp.

This module contains the constants used throughout the SchemaGulp codebase,
organized by category for easy access and maintenance.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class InferenceConstants:
    """Constants for value type inference and content analysis."""

    # Strings longer than this are inferred as long text
    MAX_STRING_LENGTH: Final[int] = 255

    # Structured-object recursion limit
    MAX_NESTING_DEPTH: Final[int] = 3

    # Patterns (compiled with re.ASCII)
    DATE_PATTERN: Final[str] = r"^\d{4}-\d{2}-\d{2}$"
    TIMESTAMP_PATTERN: Final[str] = r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2}"
    NUMERIC_PATTERN: Final[str] = r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$"
    EMBEDDED_DATE_PATTERN: Final[str] = r"\d{4}-\d{2}-\d{2}"
    XML_ELEMENT_PATTERN: Final[str] = r"<(\w+)>([^<]*)</\1>"


@dataclass(frozen=True)
class TypeDefaults:
    """Fallback sizes used when a field does not declare its own."""

    STRING_LENGTH: Final[int] = 255
    DECIMAL_PRECISION: Final[int] = 10
    DECIMAL_SCALE: Final[int] = 2


@dataclass(frozen=True)
class FileExtensions:
    """File extensions recognized by the content analyzers."""

    STRUCTURED: Final[tuple[str, ...]] = (".json",)
    TABULAR: Final[tuple[str, ...]] = (".csv",)
    MARKUP: Final[tuple[str, ...]] = (".xml",)
    CONTENT: Final[tuple[str, ...]] = (".md", ".txt")

    # Accepted for upload but analyzed as plain documents
    DOCUMENT: Final[tuple[str, ...]] = (".pdf", ".doc", ".docx")


# Human readable descriptions for the supported upload types
FILE_TYPE_DESCRIPTIONS: Final[dict[str, str]] = {
    ".pdf": "PDF Documents",
    ".doc": "Microsoft Word (Legacy)",
    ".docx": "Microsoft Word",
    ".txt": "Text Files",
    ".json": "JSON Files",
    ".xml": "XML Files",
    ".csv": "CSV Files",
    ".md": "Markdown Files",
}


# Create singleton instances for easy access
INFERENCE = InferenceConstants()
TYPE_DEFAULTS = TypeDefaults()
FILE_EXTENSIONS = FileExtensions()
