"""MongoDB schema-validator renderer."""

import json
import re
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from ..models.field import FieldSpec, FieldType, TableSpec
from .base_renderer import BaseRenderer


class MongoDBRenderer(BaseRenderer):
    """Renders one ``$jsonSchema`` validator per table as a JSON document.

    Auto-increment fields are left out entirely because MongoDB supplies
    ``_id`` itself. Per-field modifiers other than ``required`` are ignored.
    """

    dialect = "mongodb"
    display_name = "MongoDB"

    TYPE_MAP = {
        FieldType.INTEGER: "int",
        FieldType.STRING: "string",
        FieldType.TEXT: "string",
        FieldType.BOOLEAN: "bool",
        FieldType.DATE: "date",
        FieldType.TIMESTAMP: "date",
        FieldType.DECIMAL: "double",
        FieldType.JSON: "string",
        FieldType.RELATION: "string",
    }

    def render(
        self,
        tables: Sequence[TableSpec],
        project_name: str,
        generated_at: datetime | None = None,
    ) -> str:
        schema = {
            "project": project_name,
            "generated_at": self._timestamp(generated_at),
            "database": database_name(project_name),
            "collections": [self.collection(table) for table in tables],
        }
        return json.dumps(schema, indent=2)

    def collection(self, table: TableSpec) -> dict[str, Any]:
        """Build the collection entry with its validator for one table."""
        stored = [f for f in table.fields if not f.auto_increment]
        return {
            "name": table.name,
            "validator": {
                "$jsonSchema": {
                    "bsonType": "object",
                    "required": [f.name for f in stored if f.required],
                    "properties": {f.name: self.field_schema(f) for f in stored},
                }
            },
        }

    def field_schema(self, field: FieldSpec) -> dict[str, str]:
        """Build the property schema for one field."""
        return {"bsonType": self.map_type(field), "description": f"{field.name} field"}


def database_name(project_name: str) -> str:
    """Lower-case the project name and replace whitespace runs with underscores."""
    return re.sub(r"\s+", "_", project_name.lower())
