"""Analyzer for free-text content (Markdown, plain text and documents)."""

import re

from ..core.constants import INFERENCE
from ..models.analysis import ContentKind, FieldShape
from ..models.field import FieldType
from .base_analyzer import BaseAnalyzer

_EMBEDDED_DATE = re.compile(INFERENCE.EMBEDDED_DATE_PATTERN, re.ASCII)


class TextAnalyzer(BaseAnalyzer):
    """Emits a fixed article-like shape with a few pattern-based extras."""

    kind = ContentKind.CONTENT

    def __init__(self, kind: ContentKind = ContentKind.CONTENT):
        super().__init__()
        self.kind = kind

    def analyze(self, content: str) -> dict[str, FieldShape] | None:
        fields = {
            "title": FieldShape(type=FieldType.STRING, required=True),
            "content": FieldShape(type=FieldType.TEXT, required=True),
            "excerpt": FieldShape(type=FieldType.TEXT),
        }

        # Crude email detection
        if "@" in content and "." in content:
            fields["author_email"] = FieldShape(type=FieldType.STRING)

        if _EMBEDDED_DATE.search(content):
            fields["published_date"] = FieldShape(type=FieldType.DATE)

        return fields
