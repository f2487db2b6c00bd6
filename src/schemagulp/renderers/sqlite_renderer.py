"""SQLite dialect renderer."""

from ..models.field import FieldSpec, FieldType
from .base_renderer import SQLRenderer


class SQLiteRenderer(SQLRenderer):
    """Double-quoted tables with inline key modifiers and storage classes."""

    dialect = "sqlite"
    display_name = "SQLite"

    TYPE_MAP = {
        FieldType.INTEGER: "INTEGER",
        FieldType.STRING: "TEXT",
        FieldType.TEXT: "TEXT",
        FieldType.BOOLEAN: "INTEGER",
        FieldType.DATE: "TEXT",
        FieldType.TIMESTAMP: "TEXT",
        FieldType.DECIMAL: "REAL",
        FieldType.JSON: "TEXT",
        FieldType.RELATION: "TEXT",
    }

    def column_definition(self, field: FieldSpec) -> str:
        parts = [self.quote(field.name), self.map_type(field)]
        if field.primary_key:
            parts.append("PRIMARY KEY")
        if field.auto_increment:
            parts.append("AUTOINCREMENT")
        parts.extend(self._modifiers(field))
        return " ".join(parts)
