"""Registry of website-type templates and the table-set builder."""

import logging

from ..models.analysis import AnalysisSummary
from ..models.field import TableSpec
from .base import (
    BlogTemplate,
    CorporateTemplate,
    CustomTemplate,
    DocumentationTemplate,
    DomainTemplate,
    EcommerceTemplate,
    PortfolioTemplate,
)
from .catalog import DomainCatalog

logger = logging.getLogger(__name__)

FALLBACK_TAG = "custom"


class TemplateRegistry:
    """Maps website-type tags and their aliases to template strategies."""

    def __init__(self, templates: list[DomainTemplate] | None = None):
        self._templates: dict[str, DomainTemplate] = {}
        self._aliases: dict[str, str] = {}
        for template in templates or []:
            self.register(template)

    @classmethod
    def default(cls) -> "TemplateRegistry":
        """Registry with every built-in website type."""
        return cls(
            [
                BlogTemplate(),
                PortfolioTemplate(),
                EcommerceTemplate(),
                DocumentationTemplate(),
                CorporateTemplate(),
                CustomTemplate(),
            ]
        )

    def register(self, template: DomainTemplate) -> None:
        """Register a template under its tag and aliases."""
        self._templates[template.tag] = template
        for alias in template.aliases:
            self._aliases[alias] = template.tag

    def resolve(self, tag: str | None) -> DomainTemplate | None:
        """Return the template for a tag or alias, or None if unknown."""
        if not tag:
            return None
        key = tag.strip().lower()
        key = self._aliases.get(key, key)
        return self._templates.get(key)

    @property
    def tags(self) -> list[str]:
        """Canonical tags in registration order."""
        return list(self._templates)


class TemplateBuilder:
    """Builds the prefixed table set for a website type."""

    def __init__(self, catalog: DomainCatalog, registry: TemplateRegistry | None = None):
        self.catalog = catalog
        self.registry = registry or TemplateRegistry.default()

    def build(
        self, website_type: str | None, analysis: AnalysisSummary, table_prefix: str = ""
    ) -> list[TableSpec]:
        """
        Build the table set for ``website_type``.

        Unknown or missing website types fall back to the custom template.

        Args:
            website_type: Website-type tag or alias
            analysis: Aggregated file analysis
            table_prefix: String prepended to every table name

        Returns:
            Ordered list of prefixed tables
        """
        template = self.registry.resolve(website_type)
        if template is None:
            if website_type:
                logger.warning(
                    f"Unknown website type '{website_type}', using '{FALLBACK_TAG}' template"
                )
            template = self.registry.resolve(FALLBACK_TAG)

        tables = template.build_tables(analysis, self.catalog)
        return [table.with_prefix(table_prefix) for table in tables]
