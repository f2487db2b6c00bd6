"""Exporters for alternate representations of a generated schema."""

from ..core.exceptions import UnsupportedFormatError
from ..models.schema_result import SchemaResult
from .base_exporter import BaseExporter
from .json_exporter import JSONExporter
from .prisma_exporter import PrismaExporter
from .sql_exporter import SQLExporter
from .typescript_exporter import TypeScriptExporter

EXPORTERS: dict[str, type[BaseExporter]] = {
    exporter.format: exporter
    for exporter in (SQLExporter, JSONExporter, PrismaExporter, TypeScriptExporter)
}


def get_exporter(fmt: str) -> BaseExporter:
    """Instantiate the exporter for ``fmt``.

    Raises:
        UnsupportedFormatError: If no exporter handles ``fmt``
    """
    try:
        return EXPORTERS[fmt.lower()]()
    except KeyError:
        supported = ", ".join(EXPORTERS)
        raise UnsupportedFormatError(
            f"Unsupported export format '{fmt}' (supported: {supported})"
        ) from None


def export_result(result: SchemaResult, fmt: str) -> str:
    """Render ``result`` in the requested format."""
    return get_exporter(fmt).export(result)


def export_filename(result: SchemaResult, fmt: str) -> str:
    """Suggested download file name for ``result`` in ``fmt``."""
    return get_exporter(fmt).filename(result)


__all__ = [
    "BaseExporter",
    "SQLExporter",
    "JSONExporter",
    "PrismaExporter",
    "TypeScriptExporter",
    "EXPORTERS",
    "get_exporter",
    "export_result",
    "export_filename",
]
