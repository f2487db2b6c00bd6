"""PostgreSQL dialect renderer."""

from ..models.field import FieldSpec, FieldType, TableSpec
from .base_renderer import SQLRenderer, decimal, varchar


class PostgreSQLRenderer(SQLRenderer):
    """Double-quoted tables; auto-increment keys become SERIAL columns."""

    dialect = "postgresql"
    display_name = "PostgreSQL"

    TYPE_MAP = {
        FieldType.INTEGER: "INTEGER",
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
        if field.is_identity:
            return f"{self.quote(field.name)} SERIAL PRIMARY KEY"
        return " ".join([self.quote(field.name), self.map_type(field), *self._modifiers(field)])

    def table_constraints(self, table: TableSpec) -> list[str]:
        # Only needed when the key is not already a SERIAL column
        primary_keys = table.primary_keys
        if not primary_keys or any(f.is_identity for f in primary_keys):
            return []
        columns = ", ".join(self.quote(f.name) for f in primary_keys)
        return [f"PRIMARY KEY ({columns})"]
