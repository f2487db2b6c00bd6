"""Curated table catalog for each supported website type.

The catalog is reference data: table order, field order and every field
attribute are part of the generated output. It is built once by
``DomainCatalog.default()`` and shared read-only by every generation run.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..core.exceptions import CatalogError
from ..models.field import FieldSpec, FieldType, TableSpec

INTEGER = FieldType.INTEGER
STRING = FieldType.STRING
TEXT = FieldType.TEXT
BOOLEAN = FieldType.BOOLEAN
DATE = FieldType.DATE
TIMESTAMP = FieldType.TIMESTAMP
DECIMAL = FieldType.DECIMAL


def _f(name: str, type: FieldType, required: bool, **modifiers) -> FieldSpec:
    return FieldSpec(name=name, type=type, required=required, **modifiers)


def _id() -> FieldSpec:
    return _f("id", INTEGER, True, primary_key=True, auto_increment=True)


def _table(name: str, *fields: FieldSpec) -> TableSpec:
    return TableSpec(name=name, fields=fields)


def _blog_tables() -> tuple[TableSpec, ...]:
    return (
        _table(
            "posts",
            _id(),
            _f("title", STRING, True, length=255),
            _f("slug", STRING, True, length=255, unique=True),
            _f("content", TEXT, True),
            _f("excerpt", TEXT, False),
            _f("author_id", INTEGER, False),
            _f("category_id", INTEGER, False),
            _f("status", STRING, True, default="draft", length=20),
            _f("published_at", TIMESTAMP, False),
            _f("created_at", TIMESTAMP, True),
            _f("updated_at", TIMESTAMP, True),
        ),
        _table(
            "categories",
            _id(),
            _f("name", STRING, True, length=100),
            _f("slug", STRING, True, length=100, unique=True),
            _f("description", TEXT, False),
            _f("parent_id", INTEGER, False),
            _f("created_at", TIMESTAMP, True),
        ),
        _table(
            "tags",
            _id(),
            _f("name", STRING, True, length=50, unique=True),
            _f("slug", STRING, True, length=50, unique=True),
            _f("created_at", TIMESTAMP, True),
        ),
        _table(
            "post_tags",
            _f("post_id", INTEGER, True),
            _f("tag_id", INTEGER, True),
            _f("created_at", TIMESTAMP, True),
        ),
        _table(
            "authors",
            _id(),
            _f("name", STRING, True, length=100),
            _f("email", STRING, True, length=255, unique=True),
            _f("bio", TEXT, False),
            _f("avatar_url", STRING, False, length=500),
            _f("created_at", TIMESTAMP, True),
        ),
        _table(
            "comments",
            _id(),
            _f("post_id", INTEGER, True),
            _f("author_name", STRING, True, length=100),
            _f("author_email", STRING, True, length=255),
            _f("content", TEXT, True),
            _f("status", STRING, True, default="pending", length=20),
            _f("parent_id", INTEGER, False),
            _f("created_at", TIMESTAMP, True),
        ),
    )


def _portfolio_tables() -> tuple[TableSpec, ...]:
    return (
        _table(
            "projects",
            _id(),
            _f("title", STRING, True, length=255),
            _f("slug", STRING, True, length=255, unique=True),
            _f("description", TEXT, True),
            _f("client", STRING, False, length=100),
            _f("project_url", STRING, False, length=500),
            _f("github_url", STRING, False, length=500),
            _f("featured", BOOLEAN, True, default=False),
            _f("completed_at", DATE, False),
            _f("created_at", TIMESTAMP, True),
            _f("updated_at", TIMESTAMP, True),
        ),
        _table(
            "skills",
            _id(),
            _f("name", STRING, True, length=50, unique=True),
            _f("category", STRING, False, length=50),
            _f("proficiency", INTEGER, False),
            _f("created_at", TIMESTAMP, True),
        ),
        _table(
            "project_skills",
            _f("project_id", INTEGER, True),
            _f("skill_id", INTEGER, True),
        ),
    )


def _ecommerce_tables() -> tuple[TableSpec, ...]:
    return (
        _table(
            "products",
            _id(),
            _f("name", STRING, True, length=255),
            _f("slug", STRING, True, length=255, unique=True),
            _f("description", TEXT, True),
            _f("price", DECIMAL, True, precision=10, scale=2),
            _f("compare_price", DECIMAL, False, precision=10, scale=2),
            _f("sku", STRING, False, length=100, unique=True),
            _f("stock_quantity", INTEGER, True, default=0),
            _f("category_id", INTEGER, False),
            _f("status", STRING, True, default="active", length=20),
            _f("created_at", TIMESTAMP, True),
            _f("updated_at", TIMESTAMP, True),
        ),
        _table(
            "categories",
            _id(),
            _f("name", STRING, True, length=100),
            _f("slug", STRING, True, length=100, unique=True),
            _f("parent_id", INTEGER, False),
            _f("created_at", TIMESTAMP, True),
        ),
        _table(
            "orders",
            _id(),
            _f("order_number", STRING, True, length=50, unique=True),
            _f("customer_id", INTEGER, False),
            _f("total", DECIMAL, True, precision=10, scale=2),
            _f("status", STRING, True, default="pending", length=20),
            _f("created_at", TIMESTAMP, True),
            _f("updated_at", TIMESTAMP, True),
        ),
    )


def _documentation_tables() -> tuple[TableSpec, ...]:
    return (
        _table(
            "pages",
            _id(),
            _f("title", STRING, True, length=255),
            _f("slug", STRING, True, length=255, unique=True),
            _f("content", TEXT, True),
            _f("parent_id", INTEGER, False),
            _f("order", INTEGER, True, default=0),
            _f("version", STRING, False, length=20),
            _f("created_at", TIMESTAMP, True),
            _f("updated_at", TIMESTAMP, True),
        ),
        _table(
            "sections",
            _id(),
            _f("name", STRING, True, length=100),
            _f("slug", STRING, True, length=100, unique=True),
            _f("order", INTEGER, True, default=0),
            _f("created_at", TIMESTAMP, True),
        ),
    )


def _corporate_tables() -> tuple[TableSpec, ...]:
    return (
        _table(
            "pages",
            _id(),
            _f("title", STRING, True, length=255),
            _f("slug", STRING, True, length=255, unique=True),
            _f("content", TEXT, True),
            _f("meta_title", STRING, False, length=255),
            _f("meta_description", TEXT, False),
            _f("template", STRING, False, length=50),
            _f("status", STRING, True, default="draft", length=20),
            _f("created_at", TIMESTAMP, True),
            _f("updated_at", TIMESTAMP, True),
        ),
        _table(
            "team_members",
            _id(),
            _f("name", STRING, True, length=100),
            _f("position", STRING, True, length=100),
            _f("bio", TEXT, False),
            _f("email", STRING, False, length=255),
            _f("photo_url", STRING, False, length=500),
            _f("order", INTEGER, True, default=0),
            _f("created_at", TIMESTAMP, True),
        ),
        _table(
            "services",
            _id(),
            _f("title", STRING, True, length=255),
            _f("slug", STRING, True, length=255, unique=True),
            _f("description", TEXT, True),
            _f("icon", STRING, False, length=100),
            _f("featured", BOOLEAN, True, default=False),
            _f("created_at", TIMESTAMP, True),
        ),
    )


def _custom_tables() -> tuple[TableSpec, ...]:
    return (
        _table(
            "content",
            _id(),
            _f("title", STRING, True, length=255),
            _f("slug", STRING, True, length=255, unique=True),
            _f("body", TEXT, True),
            _f("type", STRING, True, length=50),
            _f("status", STRING, True, default="draft", length=20),
            _f("created_at", TIMESTAMP, True),
            _f("updated_at", TIMESTAMP, True),
        ),
    )


def _feature_tables() -> tuple[TableSpec, ...]:
    return (
        _table(
            "metadata",
            _id(),
            _f("entity_type", STRING, True, length=50),
            _f("entity_id", INTEGER, True),
            _f("meta_key", STRING, True, length=100),
            _f("meta_value", TEXT, False),
            _f("created_at", TIMESTAMP, True),
        ),
        _table(
            "media",
            _id(),
            _f("filename", STRING, True, length=255),
            _f("original_name", STRING, True, length=255),
            _f("mime_type", STRING, True, length=100),
            _f("size", INTEGER, True),
            _f("url", STRING, True, length=500),
            _f("alt_text", STRING, False, length=255),
            _f("width", INTEGER, False),
            _f("height", INTEGER, False),
            _f("uploaded_at", TIMESTAMP, True),
        ),
    )


@dataclass(frozen=True)
class DomainCatalog:
    """Immutable mapping of website type to its curated, unprefixed tables.

    ``features`` holds the optional tables appended by the feature
    augmenters, keyed by table name.
    """

    domains: Mapping[str, tuple[TableSpec, ...]]
    features: Mapping[str, TableSpec] = field(default_factory=dict)

    def __post_init__(self):
        for tag, tables in self.domains.items():
            if not tables:
                raise CatalogError(f"Website type '{tag}' has no tables")
        object.__setattr__(self, "domains", MappingProxyType(dict(self.domains)))
        object.__setattr__(self, "features", MappingProxyType(dict(self.features)))

    @classmethod
    def default(cls) -> "DomainCatalog":
        """Build the built-in catalog."""
        return cls.from_tables(
            {
                "blog": _blog_tables(),
                "portfolio": _portfolio_tables(),
                "ecommerce": _ecommerce_tables(),
                "documentation": _documentation_tables(),
                "corporate": _corporate_tables(),
                "custom": _custom_tables(),
            },
            features=_feature_tables(),
        )

    @classmethod
    def from_tables(
        cls,
        domains: Mapping[str, Iterable[TableSpec]],
        features: Iterable[TableSpec] = (),
    ) -> "DomainCatalog":
        """Build a catalog from plain table sequences."""
        return cls(
            domains={tag: tuple(tables) for tag, tables in domains.items()},
            features={table.name: table for table in features},
        )

    @property
    def tags(self) -> list[str]:
        """Website types present in the catalog."""
        return list(self.domains)

    def __contains__(self, tag: object) -> bool:
        return tag in self.domains

    def tables_for(self, tag: str) -> tuple[TableSpec, ...]:
        """Return the curated tables for ``tag``.

        Raises:
            CatalogError: If the catalog has no entry for ``tag``
        """
        try:
            return self.domains[tag]
        except KeyError:
            raise CatalogError(f"No tables defined for website type '{tag}'") from None

    def feature_table(self, name: str) -> TableSpec:
        """Return an optional feature table by unprefixed name.

        Raises:
            CatalogError: If no such feature table exists
        """
        try:
            return self.features[name]
        except KeyError:
            raise CatalogError(f"No feature table named '{name}'") from None
