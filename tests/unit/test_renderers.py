"""Tests for the dialect renderers."""

import json
from datetime import datetime, timezone

import pytest

from schemagulp.core.exceptions import RenderError
from schemagulp.models import FieldSpec, FieldType, TableSpec
from schemagulp.renderers import (
    BaseRenderer,
    MongoDBRenderer,
    MySQLRenderer,
    PostgreSQLRenderer,
    RendererRegistry,
    SQLiteRenderer,
    SQLRenderer,
    get_renderer,
)
from schemagulp.templates import TemplateBuilder, apply_features

SQL_RENDERERS = [MySQLRenderer, PostgreSQLRenderer, SQLiteRenderer]
ALL_RENDERERS = [*SQL_RENDERERS, MongoDBRenderer]


def _without_timestamp(text: str) -> str:
    return "\n".join(
        line
        for line in text.splitlines()
        if not line.startswith("-- Generated at:") and '"generated_at"' not in line
    )


def _all_tables(catalog, empty_analysis) -> list[TableSpec]:
    builder = TemplateBuilder(catalog)
    tables = []
    for tag in catalog.tags:
        tables.extend(
            apply_features(
                builder.build(tag, empty_analysis, f"{tag}_"),
                catalog,
                table_prefix=f"{tag}_",
                include_metadata=True,
                include_images=True,
            )
        )
    return tables


class TestSQLLayout:
    """Test the layout shared by the SQL dialects."""

    @pytest.mark.parametrize(
        "renderer_class, display_name",
        [(MySQLRenderer, "MySQL"), (PostgreSQLRenderer, "PostgreSQL"), (SQLiteRenderer, "SQLite")],
    )
    def test_header(self, renderer_class, display_name, sample_table, generated_at):
        """Test the two header comment lines and blank separator."""
        lines = renderer_class().render([sample_table], "shop", generated_at).splitlines()

        assert lines[0] == f"-- Generated {display_name} Schema for shop"
        assert lines[1] == "-- Generated at: 2024-01-15T10:00:00+00:00"
        assert lines[2] == ""
        assert lines[3].startswith("CREATE TABLE IF NOT EXISTS ")

    @pytest.mark.parametrize("renderer_class", SQL_RENDERERS)
    def test_every_table_and_field_in_order(self, renderer_class, catalog, empty_analysis):
        """Test that every table appears with one line per field, in order."""
        renderer = renderer_class()
        tables = _all_tables(catalog, empty_analysis)
        output = renderer.render(tables, "site")

        position = 0
        for table in tables:
            statement = f"CREATE TABLE IF NOT EXISTS {renderer.quote(table.name)} ("
            position = output.index(statement, position)
            for field in table.fields:
                column = f"\n  {renderer.quote(field.name)} "
                position = output.index(column, position)

    @pytest.mark.parametrize("renderer_class", SQL_RENDERERS)
    def test_statement_per_table(self, renderer_class, sample_table):
        """Test that each statement is closed and followed by a blank line."""
        output = renderer_class().render([sample_table, sample_table.with_prefix("x_")], "p")

        assert output.count("CREATE TABLE IF NOT EXISTS") == 2
        assert output.endswith(";\n")
        assert ";\n\nCREATE TABLE" in output

    @pytest.mark.parametrize("renderer_class", ALL_RENDERERS)
    def test_deterministic(self, renderer_class, catalog, empty_analysis):
        """Test that output only differs in the timestamp between runs."""
        tables = _all_tables(catalog, empty_analysis)
        first = renderer_class().render(tables, "site", datetime(2024, 1, 1, tzinfo=timezone.utc))
        second = renderer_class().render(tables, "site")

        assert _without_timestamp(first) == _without_timestamp(second)

    def test_default_escaping(self):
        """Test that quotes in default values are doubled."""
        table = TableSpec(
            name="notes",
            fields=(FieldSpec(name="label", type=FieldType.STRING, default="it's"),),
        )

        for renderer_class in SQL_RENDERERS:
            assert "DEFAULT 'it''s'" in renderer_class().render([table], "p")

    @pytest.mark.parametrize(
        "value, expected", [(False, "'false'"), (True, "'true'"), (0, "'0'"), ("draft", "'draft'")]
    )
    def test_format_default(self, value, expected):
        """Test literal default rendering."""
        assert SQLRenderer.format_default(value) == expected

    def test_identifier_quote_doubled(self):
        """Test that a quote character inside an identifier is escaped."""
        assert MySQLRenderer().quote("we`ird") == "`we``ird`"
        assert PostgreSQLRenderer().quote('we"ird') == '"we""ird"'


class TestMySQLRenderer:
    """Test MySQL output."""

    def test_table(self, sample_table, generated_at):
        """Test the full statement for a table."""
        output = MySQLRenderer().render([sample_table], "shop", generated_at)

        assert (
            "CREATE TABLE IF NOT EXISTS `articles` (\n"
            "  `id` INT NOT NULL AUTO_INCREMENT,\n"
            "  `title` VARCHAR(120) NOT NULL,\n"
            "  `slug` VARCHAR(255) NOT NULL UNIQUE,\n"
            "  `body` TEXT,\n"
            "  `price` DECIMAL(8,3),\n"
            "  `published` BOOLEAN NOT NULL DEFAULT 'false',\n"
            "  `status` VARCHAR(20) DEFAULT 'draft',\n"
            "  `created_at` TIMESTAMP DEFAULT CURRENT_TIMESTAMP NOT NULL,\n"
            "  PRIMARY KEY (`id`)\n"
            ") ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci;"
        ) in output

    def test_no_primary_key(self, catalog):
        """Test that join tables have no PRIMARY KEY clause."""
        post_tags = catalog.tables_for("blog")[3]
        statement = MySQLRenderer().render_table(post_tags)

        assert "PRIMARY KEY" not in statement

    def test_json_and_relation_fallback(self):
        """Test that json and relation fields use the unmapped fallback."""
        renderer = MySQLRenderer()

        assert renderer.map_type(FieldSpec(name="a", type=FieldType.JSON)) == "VARCHAR(255)"
        assert renderer.map_type(FieldSpec(name="b", type=FieldType.RELATION)) == "VARCHAR(255)"


class TestPostgreSQLRenderer:
    """Test PostgreSQL output."""

    def test_serial_identity(self, sample_table):
        """Test that the identity column becomes SERIAL PRIMARY KEY."""
        statement = PostgreSQLRenderer().render_table(sample_table)

        assert '  "id" SERIAL PRIMARY KEY,\n' in statement
        assert '  "title" VARCHAR(120) NOT NULL,\n' in statement
        assert '  "published" BOOLEAN NOT NULL DEFAULT \'false\',\n' in statement
        assert statement.count("PRIMARY KEY") == 1
        assert statement.endswith(");")

    def test_composite_key(self):
        """Test that non-identity keys get a table-level constraint."""
        table = TableSpec(
            name="links",
            fields=(
                FieldSpec(name="a_id", type=FieldType.INTEGER, required=True, primary_key=True),
                FieldSpec(name="b_id", type=FieldType.INTEGER, required=True, primary_key=True),
            ),
        )
        statement = PostgreSQLRenderer().render_table(table)

        assert '  PRIMARY KEY ("a_id", "b_id")' in statement


class TestSQLiteRenderer:
    """Test SQLite output."""

    def test_inline_key(self, sample_table):
        """Test inline key modifiers and storage classes."""
        statement = SQLiteRenderer().render_table(sample_table)

        assert '  "id" INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,\n' in statement
        assert '  "title" TEXT NOT NULL,\n' in statement
        assert '  "price" REAL,\n' in statement
        assert '  "published" INTEGER NOT NULL DEFAULT \'false\',\n' in statement
        assert '  "created_at" TEXT NOT NULL\n' in statement


class TestMongoDBRenderer:
    """Test MongoDB validator output."""

    def test_document(self, sample_table, generated_at):
        """Test the validator document for one table."""
        output = MongoDBRenderer().render([sample_table], "My Shop  Site", generated_at)
        document = json.loads(output)

        assert document["project"] == "My Shop  Site"
        assert document["generated_at"] == "2024-01-15T10:00:00+00:00"
        assert document["database"] == "my_shop_site"

        collection = document["collections"][0]
        schema = collection["validator"]["$jsonSchema"]
        assert collection["name"] == "articles"
        assert schema["bsonType"] == "object"
        assert schema["required"] == ["title", "slug", "published", "created_at"]
        assert list(schema["properties"]) == [
            "title",
            "slug",
            "body",
            "price",
            "published",
            "status",
            "created_at",
        ]
        assert schema["properties"]["price"] == {
            "bsonType": "double",
            "description": "price field",
        }
        assert schema["properties"]["published"]["bsonType"] == "bool"
        assert schema["properties"]["created_at"]["bsonType"] == "date"

    def test_excludes_auto_increment(self, catalog, empty_analysis):
        """Test that no auto-increment field appears anywhere."""
        tables = _all_tables(catalog, empty_analysis)
        document = json.loads(MongoDBRenderer().render(tables, "site"))

        assert [c["name"] for c in document["collections"]] == [t.name for t in tables]
        for collection in document["collections"]:
            schema = collection["validator"]["$jsonSchema"]
            assert "id" not in schema["properties"]
            assert "id" not in schema["required"]

    def test_project_and_timestamp_on_own_lines(self, sample_table, generated_at):
        """Test that the header data sits on separate lines."""
        lines = MongoDBRenderer().render([sample_table], "shop", generated_at).splitlines()

        assert lines[1] == '  "project": "shop",'
        assert lines[2] == '  "generated_at": "2024-01-15T10:00:00+00:00",'


class TestTypeMapCoverage:
    """Test that every renderer maps every field type."""

    @pytest.mark.parametrize("renderer_class", ALL_RENDERERS)
    def test_complete(self, renderer_class):
        """Test that the built-in maps cover every FieldType."""
        assert set(renderer_class.TYPE_MAP) == set(FieldType)

    def test_incomplete_map_rejected(self):
        """Test that defining a renderer with a missing mapping fails."""
        with pytest.raises(TypeError, match="missing mappings for: relation"):

            class BrokenRenderer(MySQLRenderer):
                TYPE_MAP = {t: "TEXT" for t in FieldType if t != FieldType.RELATION}

    def test_map_type_error(self):
        """Test that a lookup failure raises RenderError."""
        renderer = MySQLRenderer()
        renderer.TYPE_MAP = {}

        with pytest.raises(RenderError):
            renderer.map_type(FieldSpec(name="a", type=FieldType.STRING))

    def test_base_is_abstract(self):
        """Test that the base renderer cannot be instantiated."""
        with pytest.raises(TypeError):
            BaseRenderer()


class TestRendererRegistry:
    """Test dialect dispatch."""

    @pytest.mark.parametrize(
        "dialect, renderer_class",
        [
            ("mysql", MySQLRenderer),
            ("PostgreSQL", PostgreSQLRenderer),
            ("sqlite", SQLiteRenderer),
            ("mongodb", MongoDBRenderer),
        ],
    )
    def test_known(self, dialect, renderer_class):
        """Test the registered dialects."""
        assert isinstance(get_renderer(dialect), renderer_class)

    @pytest.mark.parametrize("dialect", [None, "", "oracle"])
    def test_fallback(self, dialect):
        """Test that unknown dialects use MySQL."""
        assert isinstance(get_renderer(dialect), MySQLRenderer)

    def test_dialects(self):
        """Test the dialect listing."""
        registry = RendererRegistry()

        assert registry.dialects == ["mysql", "postgresql", "sqlite", "mongodb"]
        assert registry.is_supported("SQLite")
        assert not registry.is_supported("oracle")
