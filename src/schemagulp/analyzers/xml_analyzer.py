"""Analyzer for simple tag-delimited (XML) content."""

import re

from ..core.constants import INFERENCE
from ..models.analysis import ContentKind, FieldShape
from ..tools.analysis import infer_type, sanitize_field_name
from .base_analyzer import BaseAnalyzer

_ELEMENT = re.compile(INFERENCE.XML_ELEMENT_PATTERN, re.ASCII)


class XMLAnalyzer(BaseAnalyzer):
    """Infers fields from leaf elements with text content.

    Only ``<tag>text</tag>`` pairs without nested markup are considered; the
    first occurrence of each tag name decides its type.
    """

    kind = ContentKind.STRUCTURED

    def analyze(self, content: str) -> dict[str, FieldShape] | None:
        fields: dict[str, FieldShape] = {}

        for match in _ELEMENT.finditer(content):
            field_name = sanitize_field_name(match.group(1))
            if field_name and field_name not in fields:
                fields[field_name] = FieldShape(type=infer_type(match.group(2)))

        return fields
