"""Exporter returning the rendered schema text unchanged."""

from ..models.schema_result import SchemaResult
from .base_exporter import BaseExporter


class SQLExporter(BaseExporter):
    """Rendered dialect output as produced by the pipeline."""

    format = "sql"
    filename_template = "{project}_schema.sql"

    def export(self, result: SchemaResult) -> str:
        return result.sql
