"""Configuration model for SchemaGulp."""

import codecs
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.exceptions import ConfigurationError


class Config(BaseModel):
    """Configuration for one SchemaGulp generator.

    A config is read once per generation run and never changed by it.
    """

    model_config = ConfigDict(validate_assignment=True)

    # Generation options
    website_type: str | None = Field(
        None,
        description="Website type: blog, portfolio, ecommerce, documentation, corporate, custom",
    )
    database_type: str = Field(
        "mysql", description="Target dialect: mysql, postgresql, sqlite or mongodb"
    )
    table_prefix: str = Field("", description="String prepended to every table name")
    include_metadata: bool = Field(False, description="Append a generic metadata table")
    include_images: bool = Field(False, description="Append a media/asset table")
    project_name: str = Field("my_project", description="Project name used in output headers")

    # File handling
    encoding: str = Field("utf-8", description="Encoding used to decode uploaded files")
    max_file_size_mb: float = Field(
        100.0, ge=0.1, description="Files larger than this are skipped during analysis"
    )

    # Telemetry
    enable_telemetry: bool = Field(False, description="Enable OpenTelemetry metrics")

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_file: Path | None = Field(None, description="Log file path")

    @field_validator("database_type")
    @classmethod
    def _normalize_database_type(cls, value: str) -> str:
        return value.strip().lower() or "mysql"

    @field_validator("website_type")
    @classmethod
    def _normalize_website_type(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip().lower() or None

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Unknown encoding: {value}") from None
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables.

        This method will automatically load from a .env file if present, then read
        configuration from ``SCHEMAGULP_*`` environment variables.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        import os

        from dotenv import load_dotenv

        # Load .env file if it exists (will not override existing env vars)
        load_dotenv()

        def flag(name: str, default: str = "false") -> bool:
            return os.getenv(name, default).strip().lower() == "true"

        try:
            return cls(
                website_type=os.getenv("SCHEMAGULP_WEBSITE_TYPE"),
                database_type=os.getenv("SCHEMAGULP_DATABASE_TYPE", "mysql"),
                table_prefix=os.getenv("SCHEMAGULP_TABLE_PREFIX", ""),
                include_metadata=flag("SCHEMAGULP_INCLUDE_METADATA"),
                include_images=flag("SCHEMAGULP_INCLUDE_IMAGES"),
                project_name=os.getenv("SCHEMAGULP_PROJECT_NAME", "my_project"),
                encoding=os.getenv("SCHEMAGULP_ENCODING", "utf-8"),
                max_file_size_mb=float(os.getenv("SCHEMAGULP_MAX_FILE_SIZE_MB", "100")),
                enable_telemetry=flag("SCHEMAGULP_ENABLE_TELEMETRY"),
                log_level=os.getenv("SCHEMAGULP_LOG_LEVEL", "INFO"),
                log_file=os.getenv("SCHEMAGULP_LOG_FILE") or None,
            )
        except (ValidationError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
