"""Custom exceptions for SchemaGulp."""


class SchemaGulpError(Exception):
    """Base exception for all SchemaGulp errors."""

    pass


class AnalysisError(SchemaGulpError):
    """Raised when a single file cannot be read or parsed.

    The pipeline recovers from this error locally: the file is logged and
    left out of the aggregated analysis.
    """

    def __init__(self, message: str, file_name: str | None = None):
        super().__init__(message)
        self.file_name = file_name


class ConfigurationError(SchemaGulpError):
    """Raised when configuration is invalid."""

    pass


class CatalogError(SchemaGulpError):
    """Raised when a table catalog or table model violates an invariant."""

    pass


class RenderError(SchemaGulpError):
    """Raised when a dialect renderer cannot render a table model."""

    pass


class GenerationError(SchemaGulpError):
    """Raised when schema generation fails as a whole."""

    pass


class UnsupportedFormatError(SchemaGulpError):
    """Raised when an export format is not supported."""

    pass
