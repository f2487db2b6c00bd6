"""Base classes for dialect renderers."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from ..core.constants import TYPE_DEFAULTS
from ..core.exceptions import RenderError
from ..models.field import FieldSpec, FieldType, TableSpec

TypeMapping = str | Callable[[FieldSpec], str]


def varchar(field: FieldSpec) -> str:
    """VARCHAR sized from the field's declared length."""
    return f"VARCHAR({field.length or TYPE_DEFAULTS.STRING_LENGTH})"


def decimal(field: FieldSpec) -> str:
    """DECIMAL sized from the field's declared precision and scale."""
    precision = field.precision or TYPE_DEFAULTS.DECIMAL_PRECISION
    scale = field.scale if field.scale is not None else TYPE_DEFAULTS.DECIMAL_SCALE
    return f"DECIMAL({precision},{scale})"


class BaseRenderer(ABC):
    """
    Abstract base class for all dialect renderers.

    Every concrete renderer declares a ``TYPE_MAP`` with one entry per
    ``FieldType``; a subclass with an incomplete map fails at class
    definition time. Entries are native type names or callables receiving
    the field, for sized types.
    """

    dialect: str = ""
    display_name: str = ""
    TYPE_MAP: dict[FieldType, TypeMapping] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "TYPE_MAP" in cls.__dict__:
            missing = [t.value for t in FieldType if t not in cls.TYPE_MAP]
            if missing:
                raise TypeError(
                    f"{cls.__name__}.TYPE_MAP is missing mappings for: {', '.join(missing)}"
                )

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def map_type(self, field: FieldSpec) -> str:
        """Return the native type for a field."""
        try:
            mapping = self.TYPE_MAP[field.type]
        except KeyError:
            raise RenderError(
                f"{self.display_name} has no type mapping for '{field.type}'"
            ) from None
        return mapping(field) if callable(mapping) else mapping

    @abstractmethod
    def render(
        self,
        tables: Sequence[TableSpec],
        project_name: str,
        generated_at: datetime | None = None,
    ) -> str:
        """
        Render the tables as schema text.

        Args:
            tables: Tables in output order
            project_name: Project name for the header
            generated_at: Generation time (defaults to now, UTC)

        Returns:
            Schema text
        """
        pass

    @staticmethod
    def _timestamp(generated_at: datetime | None) -> str:
        return (generated_at or datetime.now(timezone.utc)).isoformat()


class SQLRenderer(BaseRenderer):
    """Shared layout for the SQL dialects.

    Output is a two-line header comment followed by one
    ``CREATE TABLE IF NOT EXISTS`` statement per table, one column per line.
    """

    quote_char: str = '"'
    table_suffix: str = ""

    def render(
        self,
        tables: Sequence[TableSpec],
        project_name: str,
        generated_at: datetime | None = None,
    ) -> str:
        lines = [
            f"-- Generated {self.display_name} Schema for {project_name}",
            f"-- Generated at: {self._timestamp(generated_at)}",
            "",
        ]
        for table in tables:
            lines.append(self.render_table(table))
            lines.append("")

        self.logger.debug(f"Rendered {len(tables)} tables")
        return "\n".join(lines)

    def render_table(self, table: TableSpec) -> str:
        """Render one CREATE TABLE statement."""
        definitions = [f"  {self.column_definition(field)}" for field in table.fields]
        definitions.extend(f"  {constraint}" for constraint in self.table_constraints(table))
        header = f"CREATE TABLE IF NOT EXISTS {self.quote(table.name)} ("
        body = ",\n".join(definitions)
        return f"{header}\n{body}\n){self.table_suffix};"

    @abstractmethod
    def column_definition(self, field: FieldSpec) -> str:
        """Render a single column definition (without indentation)."""
        pass

    def table_constraints(self, table: TableSpec) -> list[str]:
        """Extra table-level clauses appended after the columns."""
        return []

    def quote(self, identifier: str) -> str:
        """Quote an identifier, doubling any embedded quote character."""
        q = self.quote_char
        return f"{q}{identifier.replace(q, q * 2)}{q}"

    @staticmethod
    def format_default(value: str | int | float | bool) -> str:
        """Render a default value as an escaped single-quoted literal."""
        if isinstance(value, bool):
            text = "true" if value else "false"
        else:
            text = str(value)
        return "'" + text.replace("'", "''") + "'"

    def _modifiers(self, field: FieldSpec) -> list[str]:
        """NOT NULL / DEFAULT / UNIQUE clauses shared by the SQL dialects."""
        parts = []
        if field.required:
            parts.append("NOT NULL")
        if field.has_default:
            parts.append(f"DEFAULT {self.format_default(field.default)}")
        if field.unique:
            parts.append("UNIQUE")
        return parts
