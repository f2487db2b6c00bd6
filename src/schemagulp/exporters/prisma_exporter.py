"""Exporter for a Prisma ORM schema."""

from ..models.field import FieldType
from ..models.schema_result import SchemaResult
from .base_exporter import BaseExporter, capitalize

PRISMA_TYPES = {
    FieldType.INTEGER: "Int",
    FieldType.STRING: "String",
    FieldType.TEXT: "String",
    FieldType.BOOLEAN: "Boolean",
    FieldType.DATE: "DateTime",
    FieldType.TIMESTAMP: "DateTime",
}


class PrismaExporter(BaseExporter):
    """Datasource, generator and one model block per table.

    Only the field names and types are carried over; unmapped types become
    ``String``.
    """

    format = "prisma"
    filename_template = "schema.prisma"

    def export(self, result: SchemaResult) -> str:
        lines = [
            "datasource db {",
            f'  provider = "{result.database_type}"',
            '  url      = env("DATABASE_URL")',
            "}",
            "",
            "generator client {",
            '  provider = "prisma-client-js"',
            "}",
            "",
        ]
        for table in result.tables:
            lines.append(f"model {capitalize(table.name)} {{")
            for field in table.fields:
                lines.append(f"  {field.name} {PRISMA_TYPES.get(field.type, 'String')}")
            lines.append("}")
            lines.append("")

        return "\n".join(lines) + "\n"
