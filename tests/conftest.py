"""Pytest configuration and shared fixtures."""

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from schemagulp.config import Config
from schemagulp.models import (
    AnalysisSummary,
    FieldSpec,
    FieldType,
    FileDescriptor,
    TableSpec,
)
from schemagulp.templates import DomainCatalog

FIXED_TIME = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def config() -> Config:
    """Configuration that never touches the environment."""
    return Config(log_level="WARNING")


@pytest.fixture
def catalog() -> DomainCatalog:
    """The built-in table catalog."""
    return DomainCatalog.default()


@pytest.fixture
def empty_analysis() -> AnalysisSummary:
    """Analysis of a run without any usable files."""
    return AnalysisSummary()


@pytest.fixture
def generated_at() -> datetime:
    """Fixed generation time for deterministic rendering."""
    return FIXED_TIME


@pytest.fixture
def sample_table() -> TableSpec:
    """A small table exercising every modifier."""
    return TableSpec(
        name="articles",
        fields=(
            FieldSpec(
                name="id",
                type=FieldType.INTEGER,
                required=True,
                primary_key=True,
                auto_increment=True,
            ),
            FieldSpec(name="title", type=FieldType.STRING, required=True, length=120),
            FieldSpec(name="slug", type=FieldType.STRING, required=True, unique=True),
            FieldSpec(name="body", type=FieldType.TEXT),
            FieldSpec(name="price", type=FieldType.DECIMAL, precision=8, scale=3),
            FieldSpec(name="published", type=FieldType.BOOLEAN, required=True, default=False),
            FieldSpec(name="status", type=FieldType.STRING, default="draft", length=20),
            FieldSpec(name="created_at", type=FieldType.TIMESTAMP, required=True),
        ),
    )


@pytest.fixture
def csv_file() -> FileDescriptor:
    """In-memory CSV upload."""
    return FileDescriptor.from_content("products.csv", "title,price\nWidget,9.99\n")


@pytest.fixture
def json_file() -> FileDescriptor:
    """In-memory JSON upload with nested values."""
    data = {
        "Post Title": "Hello",
        "views": 10,
        "rating": 4.5,
        "published": True,
        "author": {"name": "Ann"},
        "tags": [{"label": "news", "weight": 2}],
    }
    return FileDescriptor.from_content("posts.json", json.dumps(data))


@pytest.fixture
def markdown_file(tmp_path: Path) -> FileDescriptor:
    """Markdown file on disk."""
    path = tmp_path / "about.md"
    path.write_text("# About\n\nWritten 2024-01-15 by ann@example.com\n", encoding="utf-8")
    return FileDescriptor.from_path(path)
