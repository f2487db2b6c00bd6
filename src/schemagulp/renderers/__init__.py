"""Dialect renderers turning table models into schema text."""

from .base_renderer import BaseRenderer, SQLRenderer
from .factory import RendererRegistry, get_renderer
from .mongodb_renderer import MongoDBRenderer
from .mysql_renderer import MySQLRenderer
from .postgresql_renderer import PostgreSQLRenderer
from .sqlite_renderer import SQLiteRenderer

__all__ = [
    "BaseRenderer",
    "SQLRenderer",
    "MySQLRenderer",
    "PostgreSQLRenderer",
    "SQLiteRenderer",
    "MongoDBRenderer",
    "RendererRegistry",
    "get_renderer",
]
