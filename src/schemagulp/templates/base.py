"""Website-type template strategies."""

import logging
from abc import ABC, abstractmethod

from ..models.analysis import AnalysisSummary
from ..models.field import TableSpec
from .catalog import DomainCatalog


class DomainTemplate(ABC):
    """
    Abstract base class for website-type templates.

    A template decides which tables a website type gets. Templates receive
    the aggregated content analysis so a template may use it, but the
    built-in templates return their curated catalog tables unchanged.
    """

    tag: str = ""
    aliases: tuple[str, ...] = ()
    description: str = ""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def build_tables(self, analysis: AnalysisSummary, catalog: DomainCatalog) -> list[TableSpec]:
        """
        Build the unprefixed table set for this website type.

        Args:
            analysis: Aggregated analysis of the uploaded files
            catalog: Curated table catalog

        Returns:
            Ordered list of tables
        """
        pass


class CatalogTemplate(DomainTemplate):
    """Template that returns the catalog entry for its tag."""

    def build_tables(self, analysis: AnalysisSummary, catalog: DomainCatalog) -> list[TableSpec]:
        tables = list(catalog.tables_for(self.tag))
        # Discovered fields are not merged into curated tables
        self.logger.debug(
            f"Using {len(tables)} curated tables for '{self.tag}' "
            f"({len(analysis.common_fields)} discovered fields not merged)"
        )
        return tables


class BlogTemplate(CatalogTemplate):
    """Posts, categories, tags, authors and comments."""

    tag = "blog"
    aliases = ("content-site",)
    description = "Blog / content site"


class PortfolioTemplate(CatalogTemplate):
    """Projects and skills."""

    tag = "portfolio"
    description = "Portfolio"


class EcommerceTemplate(CatalogTemplate):
    """Products, categories and orders."""

    tag = "ecommerce"
    aliases = ("storefront",)
    description = "E-commerce storefront"


class DocumentationTemplate(CatalogTemplate):
    """Pages and sections."""

    tag = "documentation"
    aliases = ("knowledge-base",)
    description = "Documentation / knowledge base"


class CorporateTemplate(CatalogTemplate):
    """Pages, team members and services."""

    tag = "corporate"
    aliases = ("corporate-site",)
    description = "Corporate site"


class CustomTemplate(CatalogTemplate):
    """Single generic content table, also used for unknown website types."""

    tag = "custom"
    description = "Custom"
