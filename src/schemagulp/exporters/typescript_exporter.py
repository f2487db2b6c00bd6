"""Exporter for TypeScript interfaces."""

from ..models.field import FieldType
from ..models.schema_result import SchemaResult
from .base_exporter import BaseExporter, capitalize

TYPESCRIPT_TYPES = {
    FieldType.INTEGER: "number",
    FieldType.STRING: "string",
    FieldType.TEXT: "string",
    FieldType.BOOLEAN: "boolean",
    FieldType.DATE: "Date",
    FieldType.TIMESTAMP: "Date",
}


class TypeScriptExporter(BaseExporter):
    """One exported interface per table; optional fields get ``?``."""

    format = "typescript"
    filename_template = "{project}_types.ts"

    def export(self, result: SchemaResult) -> str:
        lines = [f"// Generated TypeScript types for {result.project_name}", ""]
        for table in result.tables:
            lines.append(f"export interface {capitalize(table.name)} {{")
            for field in table.fields:
                optional = "" if field.required else "?"
                ts_type = TYPESCRIPT_TYPES.get(field.type, "any")
                lines.append(f"  {field.name}{optional}: {ts_type};")
            lines.append("}")
            lines.append("")

        return "\n".join(lines) + "\n"
