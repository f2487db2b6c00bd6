"""Exporter for the full result as JSON."""

import json

from ..models.schema_result import SchemaResult
from .base_exporter import BaseExporter


class JSONExporter(BaseExporter):
    """Pretty-printed JSON of the complete result."""

    format = "json"
    filename_template = "{project}_schema.json"

    def __init__(self, indent: int = 2):
        self.indent = indent

    def export(self, result: SchemaResult) -> str:
        return json.dumps(result.to_dict(), indent=self.indent, default=str)
