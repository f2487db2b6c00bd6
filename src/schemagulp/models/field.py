"""Field and table models shared by the templates and renderers."""

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Shape of a sanitized identifier: lowercase words joined by single underscores
_IDENTIFIER = re.compile(r"^[a-z0-9]+(_[a-z0-9]+)*$")


class FieldType(str, Enum):
    """Primitive field types used throughout the table model."""

    INTEGER = "integer"
    STRING = "string"
    TEXT = "text"
    BOOLEAN = "boolean"
    DATE = "date"
    TIMESTAMP = "timestamp"
    DECIMAL = "decimal"
    JSON = "json"
    RELATION = "relation"


class FieldSpec(BaseModel):
    """A single column/property of a table."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Sanitized identifier")
    type: FieldType = Field(..., description="Primitive field type")
    required: bool = Field(False, description="Whether the field is NOT NULL")
    primary_key: bool = Field(False, description="Part of the primary key")
    auto_increment: bool = Field(False, description="Value generated by the database")
    unique: bool = Field(False, description="Values must be unique")
    default: str | int | float | bool | None = Field(None, description="Literal default value")
    length: int | None = Field(None, ge=1, description="Maximum width for string fields")
    precision: int | None = Field(None, ge=1, description="Total digits for decimal fields")
    scale: int | None = Field(None, ge=0, description="Fraction digits for decimal fields")
    related_table: str | None = Field(None, description="Target table for relation fields")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not _IDENTIFIER.match(value):
            raise ValueError(f"Field name {value!r} is not a sanitized identifier")
        return value

    @model_validator(mode="after")
    def _check_modifiers(self) -> "FieldSpec":
        if self.length is not None and self.type != FieldType.STRING:
            raise ValueError(f"length is only valid for string fields ({self.name})")
        has_decimal_size = self.precision is not None or self.scale is not None
        if has_decimal_size and self.type != FieldType.DECIMAL:
            raise ValueError(f"precision/scale are only valid for decimal fields ({self.name})")
        if self.related_table is not None and self.type != FieldType.RELATION:
            raise ValueError(f"related_table is only valid for relation fields ({self.name})")
        return self

    @property
    def has_default(self) -> bool:
        """Whether a literal default value is declared."""
        return self.default is not None

    @property
    def is_identity(self) -> bool:
        """Whether this is an auto-incrementing primary key."""
        return self.primary_key and self.auto_increment


class TableSpec(BaseModel):
    """A table and its ordered fields."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Table name, including any prefix")
    fields: tuple[FieldSpec, ...] = Field(..., description="Fields in declaration order")

    @model_validator(mode="after")
    def _check_fields(self) -> "TableSpec":
        names = [f.name for f in self.fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate field names in {self.name}: {', '.join(duplicates)}")

        identity_fields = [f.name for f in self.fields if f.is_identity]
        if len(identity_fields) > 1:
            raise ValueError(
                f"Table {self.name} has more than one auto-increment primary key: "
                f"{', '.join(identity_fields)}"
            )
        if identity_fields and len(self.primary_keys) > 1:
            raise ValueError(
                f"Table {self.name} mixes an auto-increment key with other primary key fields"
            )
        return self

    @property
    def field_names(self) -> list[str]:
        """Field names in declaration order."""
        return [f.name for f in self.fields]

    @property
    def primary_keys(self) -> list[FieldSpec]:
        """Fields flagged as part of the primary key."""
        return [f for f in self.fields if f.primary_key]

    def with_prefix(self, prefix: str) -> "TableSpec":
        """Return a copy of the table with ``prefix`` prepended to its name."""
        if not prefix:
            return self
        return self.model_copy(update={"name": f"{prefix}{self.name}"})

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the display/export representation."""
        return {
            "name": self.name,
            "fields": [f.model_dump(mode="json", exclude_none=True) for f in self.fields],
        }
