"""MySQL dialect renderer."""

from ..models.field import FieldSpec, FieldType, TableSpec
from .base_renderer import SQLRenderer, decimal, varchar


class MySQLRenderer(SQLRenderer):
    """Backtick-quoted InnoDB tables with a trailing PRIMARY KEY clause."""

    dialect = "mysql"
    display_name = "MySQL"
    quote_char = "`"
    table_suffix = " ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci"

    TYPE_MAP = {
        FieldType.INTEGER: "INT",
        FieldType.STRING: varchar,
        FieldType.TEXT: "TEXT",
        FieldType.BOOLEAN: "BOOLEAN",
        FieldType.DATE: "DATE",
        FieldType.TIMESTAMP: "TIMESTAMP DEFAULT CURRENT_TIMESTAMP",
        FieldType.DECIMAL: decimal,
        FieldType.JSON: "VARCHAR(255)",
        FieldType.RELATION: "VARCHAR(255)",
    }

    def column_definition(self, field: FieldSpec) -> str:
        parts = [self.quote(field.name), self.map_type(field)]
        if field.required:
            parts.append("NOT NULL")
        if field.auto_increment:
            parts.append("AUTO_INCREMENT")
        if field.has_default:
            parts.append(f"DEFAULT {self.format_default(field.default)}")
        if field.unique:
            parts.append("UNIQUE")
        return " ".join(parts)

    def table_constraints(self, table: TableSpec) -> list[str]:
        primary_keys = table.primary_keys
        if not primary_keys:
            return []
        columns = ", ".join(self.quote(f.name) for f in primary_keys)
        return [f"PRIMARY KEY ({columns})"]
