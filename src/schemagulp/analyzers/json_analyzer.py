"""Analyzer for structured-object (JSON) content."""

import json
from typing import Any

from ..core.constants import INFERENCE
from ..core.exceptions import AnalysisError
from ..models.analysis import ContentKind, FieldShape
from ..models.field import FieldType
from ..tools.analysis import infer_type, sanitize_field_name
from .base_analyzer import BaseAnalyzer


class JSONAnalyzer(BaseAnalyzer):
    """Infers fields from a parsed JSON tree.

    Arrays are represented by their first element. Nested objects become
    ``json`` fields and nested arrays become ``relation`` fields carrying the
    inferred shape of their first element.
    """

    kind = ContentKind.STRUCTURED

    def __init__(self, max_depth: int = INFERENCE.MAX_NESTING_DEPTH):
        super().__init__()
        self.max_depth = max_depth

    def analyze(self, content: str) -> dict[str, FieldShape] | None:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise AnalysisError(f"Invalid JSON: {e}") from e
        except RecursionError as e:
            raise AnalysisError("JSON nested too deeply to parse") from e

        return self.infer_structure(data)

    def infer_structure(self, obj: Any, depth: int = 0) -> dict[str, FieldShape] | None:
        """Recursively infer the structure of a JSON value.

        Args:
            obj: Parsed JSON value
            depth: Current nesting depth

        Returns:
            Field mapping, or None past the depth limit or for empty arrays
        """
        if depth > self.max_depth:
            return None

        if isinstance(obj, list):
            if obj:
                return self.infer_structure(obj[0], depth + 1)
            return None

        structure: dict[str, FieldShape] = {}
        if not isinstance(obj, dict):
            return structure

        for key, value in obj.items():
            field_name = sanitize_field_name(key)
            if not field_name:
                self.logger.debug(f"Skipping key {key!r} with no usable characters")
                continue

            if isinstance(value, list):
                child = self.infer_structure(value[0], depth + 1) if value else None
                structure[field_name] = FieldShape(
                    type=FieldType.RELATION,
                    related_table=field_name,
                    child_structure=child,
                )
            elif isinstance(value, dict):
                structure[field_name] = FieldShape(type=FieldType.JSON)
            else:
                structure[field_name] = FieldShape(type=infer_type(_to_text(value)))

        return structure


def _to_text(value: Any) -> str | None:
    """Render a JSON scalar the way it appears in the source document."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
