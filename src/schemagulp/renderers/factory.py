"""Registry of dialect renderers."""

import logging

from .base_renderer import BaseRenderer
from .mongodb_renderer import MongoDBRenderer
from .mysql_renderer import MySQLRenderer
from .postgresql_renderer import PostgreSQLRenderer
from .sqlite_renderer import SQLiteRenderer

logger = logging.getLogger(__name__)

DEFAULT_DIALECT = "mysql"


class RendererRegistry:
    """Maps dialect tags to renderer classes.

    Unknown dialects resolve to the MySQL renderer.
    """

    def __init__(self):
        self._renderers: dict[str, type[BaseRenderer]] = {}
        for renderer_class in (MySQLRenderer, PostgreSQLRenderer, SQLiteRenderer, MongoDBRenderer):
            self.register(renderer_class)

    def register(self, renderer_class: type[BaseRenderer]) -> None:
        """Register a renderer class under its dialect tag."""
        self._renderers[renderer_class.dialect] = renderer_class

    def get_renderer(self, dialect: str | None) -> BaseRenderer:
        """Instantiate the renderer for ``dialect``."""
        key = (dialect or DEFAULT_DIALECT).strip().lower()
        renderer_class = self._renderers.get(key)
        if renderer_class is None:
            logger.warning(f"Unknown database type '{dialect}', using '{DEFAULT_DIALECT}'")
            renderer_class = self._renderers[DEFAULT_DIALECT]
        return renderer_class()

    def is_supported(self, dialect: str) -> bool:
        """Whether a renderer is registered for ``dialect``."""
        return dialect.strip().lower() in self._renderers

    @property
    def dialects(self) -> list[str]:
        """Registered dialect tags."""
        return list(self._renderers)


def get_renderer(dialect: str | None) -> BaseRenderer:
    """Convenience function returning a renderer from the default registry."""
    return RendererRegistry().get_renderer(dialect)
