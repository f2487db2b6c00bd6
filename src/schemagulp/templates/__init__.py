"""Website-type templates and optional feature tables."""

from .base import CatalogTemplate, DomainTemplate
from .catalog import DomainCatalog
from .features import add_media_table, add_metadata_table, apply_features
from .registry import TemplateBuilder, TemplateRegistry

__all__ = [
    "DomainCatalog",
    "DomainTemplate",
    "CatalogTemplate",
    "TemplateRegistry",
    "TemplateBuilder",
    "add_metadata_table",
    "add_media_table",
    "apply_features",
]
