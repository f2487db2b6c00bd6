"""Tests for website-type templates and feature tables."""

import logging

import pytest

from schemagulp.models import AnalysisSummary, ContentKind, FieldShape, FieldType, FileAnalysis
from schemagulp.templates import (
    CatalogTemplate,
    TemplateBuilder,
    TemplateRegistry,
    add_media_table,
    add_metadata_table,
    apply_features,
)
from schemagulp.templates.features import MEDIA_TABLE, METADATA_TABLE


@pytest.fixture
def builder(catalog) -> TemplateBuilder:
    return TemplateBuilder(catalog)


class TestTemplateRegistry:
    """Test tag and alias resolution."""

    def test_canonical_tags(self):
        """Test the built-in tags in registration order."""
        assert TemplateRegistry.default().tags == [
            "blog",
            "portfolio",
            "ecommerce",
            "documentation",
            "corporate",
            "custom",
        ]

    @pytest.mark.parametrize(
        "alias, tag",
        [
            ("content-site", "blog"),
            ("storefront", "ecommerce"),
            ("knowledge-base", "documentation"),
            ("corporate-site", "corporate"),
            ("  Blog ", "blog"),
        ],
    )
    def test_aliases(self, alias, tag):
        """Test that aliases resolve to their canonical template."""
        assert TemplateRegistry.default().resolve(alias).tag == tag

    @pytest.mark.parametrize("tag", [None, "", "forum"])
    def test_unknown(self, tag):
        """Test that unknown tags do not resolve."""
        assert TemplateRegistry.default().resolve(tag) is None

    def test_register_custom_template(self, builder, empty_analysis):
        """Test that new website types plug in without touching the builder."""

        class LandingTemplate(CatalogTemplate):
            tag = "custom"
            aliases = ("landing",)

        builder.registry.register(LandingTemplate())
        tables = builder.build("landing", empty_analysis)

        assert [t.name for t in tables] == ["content"]


class TestTemplateBuilder:
    """Test building prefixed table sets."""

    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("blog", ["posts", "categories", "tags", "post_tags", "authors", "comments"]),
            ("portfolio", ["projects", "skills", "project_skills"]),
            ("ecommerce", ["products", "categories", "orders"]),
            ("documentation", ["pages", "sections"]),
            ("corporate", ["pages", "team_members", "services"]),
            ("custom", ["content"]),
        ],
    )
    def test_tables_per_tag(self, builder, empty_analysis, tag, expected):
        """Test the table list for each website type."""
        tables = builder.build(tag, empty_analysis)

        assert [t.name for t in tables] == expected

    def test_deterministic(self, builder, empty_analysis):
        """Test that repeated builds are identical."""
        assert builder.build("blog", empty_analysis) == builder.build("blog", empty_analysis)

    @pytest.mark.parametrize("tag", [None, "", "forum"])
    def test_fallback_to_custom(self, builder, empty_analysis, tag):
        """Test that unknown or missing tags use the custom template."""
        tables = builder.build(tag, empty_analysis)

        assert [t.name for t in tables] == ["content"]

    def test_unknown_tag_warns(self, builder, empty_analysis, caplog):
        """Test that an unknown tag is logged at WARNING."""
        with caplog.at_level(logging.WARNING):
            builder.build("forum", empty_analysis)

        assert "Unknown website type 'forum'" in caplog.text

    def test_prefix(self, builder, empty_analysis):
        """Test that the prefix is applied to every table."""
        tables = builder.build("ecommerce", empty_analysis, table_prefix="shop_")

        assert [t.name for t in tables] == ["shop_products", "shop_categories", "shop_orders"]

    def test_catalog_unchanged_by_prefix(self, builder, catalog, empty_analysis):
        """Test that prefixing does not leak into the shared catalog."""
        builder.build("blog", empty_analysis, table_prefix="x_")

        assert catalog.tables_for("blog")[0].name == "posts"

    def test_analysis_not_merged(self, builder, empty_analysis):
        """Test that discovered fields do not change the curated tables."""
        analysis = AnalysisSummary()
        analysis.add(
            FileAnalysis(
                file_name="products.csv",
                extension=".csv",
                kind=ContentKind.TABULAR,
                fields={
                    "title": FieldShape(type=FieldType.STRING),
                    "warranty_years": FieldShape(type=FieldType.INTEGER),
                },
            )
        )

        assert builder.build("ecommerce", analysis) == builder.build("ecommerce", empty_analysis)


class TestFeatures:
    """Test the optional feature augmenters."""

    def test_metadata_table(self, builder, catalog, empty_analysis):
        """Test that exactly one metadata table is appended."""
        tables = builder.build("blog", empty_analysis)
        augmented = add_metadata_table(tables, catalog)

        assert len(augmented) == len(tables) + 1
        assert augmented[-1].name == METADATA_TABLE
        assert augmented[-1].field_names == [
            "id",
            "entity_type",
            "entity_id",
            "meta_key",
            "meta_value",
            "created_at",
        ]

    def test_media_table(self, builder, catalog, empty_analysis):
        """Test that exactly one media table is appended."""
        tables = builder.build("custom", empty_analysis)
        augmented = add_media_table(tables, catalog, table_prefix="wp_")

        assert [t.name for t in augmented] == ["content", "wp_media"]
        assert augmented[-1].field_names == catalog.feature_table(MEDIA_TABLE).field_names

    def test_idempotent(self, catalog):
        """Test that applying an augmenter twice adds one table."""
        once = add_media_table([], catalog, "p_")
        twice = add_media_table(once, catalog, "p_")

        assert [t.name for t in twice] == ["p_media"]

    def test_input_not_mutated(self, builder, catalog, empty_analysis):
        """Test that augmenters return a new list."""
        tables = builder.build("portfolio", empty_analysis)
        add_metadata_table(tables, catalog)

        assert len(tables) == 3

    @pytest.mark.parametrize("tag", ["blog", "portfolio", "ecommerce", "custom"])
    def test_apply_features(self, builder, catalog, empty_analysis, tag):
        """Test both features together for every website type."""
        tables = builder.build(tag, empty_analysis, "t_")
        augmented = apply_features(
            tables, catalog, table_prefix="t_", include_metadata=True, include_images=True
        )

        assert [t.name for t in augmented[-2:]] == ["t_metadata", "t_media"]
        assert len(augmented) == len(tables) + 2

    def test_apply_features_disabled(self, builder, catalog, empty_analysis):
        """Test that nothing is appended when features are off."""
        tables = builder.build("blog", empty_analysis)

        assert apply_features(tables, catalog) == tables
