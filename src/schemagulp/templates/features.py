"""Optional tables appended after the website-type template."""

import logging

from ..models.field import TableSpec
from .catalog import DomainCatalog

logger = logging.getLogger(__name__)

METADATA_TABLE = "metadata"
MEDIA_TABLE = "media"


def add_metadata_table(
    tables: list[TableSpec], catalog: DomainCatalog, table_prefix: str = ""
) -> list[TableSpec]:
    """Append the generic entity/attribute/value metadata table."""
    return _append_feature(tables, catalog, METADATA_TABLE, table_prefix)


def add_media_table(
    tables: list[TableSpec], catalog: DomainCatalog, table_prefix: str = ""
) -> list[TableSpec]:
    """Append the uploaded-asset media table."""
    return _append_feature(tables, catalog, MEDIA_TABLE, table_prefix)


def apply_features(
    tables: list[TableSpec],
    catalog: DomainCatalog,
    table_prefix: str = "",
    include_metadata: bool = False,
    include_images: bool = False,
) -> list[TableSpec]:
    """Apply every enabled feature augmenter in a fixed order."""
    if include_metadata:
        tables = add_metadata_table(tables, catalog, table_prefix)
    if include_images:
        tables = add_media_table(tables, catalog, table_prefix)
    return tables


def _append_feature(
    tables: list[TableSpec], catalog: DomainCatalog, name: str, table_prefix: str
) -> list[TableSpec]:
    table = catalog.feature_table(name).with_prefix(table_prefix)
    if any(existing.name == table.name for existing in tables):
        logger.debug(f"Table {table.name} already present, not adding it again")
        return list(tables)
    return [*tables, table]
