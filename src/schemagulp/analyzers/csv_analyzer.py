"""Analyzer for tabular (comma-delimited) content."""

from ..models.analysis import ContentKind, FieldShape
from ..models.field import FieldType
from ..tools.analysis import infer_type, sanitize_field_name
from .base_analyzer import BaseAnalyzer


class CSVAnalyzer(BaseAnalyzer):
    """Infers fields from a header row and one sample row.

    Lines are split naively on commas, so quoted values containing commas
    shift the columns after them.
    """

    kind = ContentKind.TABULAR

    def __init__(self, delimiter: str = ","):
        super().__init__()
        self.delimiter = delimiter

    def analyze(self, content: str) -> dict[str, FieldShape] | None:
        lines = [line for line in content.splitlines() if line.strip()]
        if not lines:
            return None

        headers = [h.strip() for h in lines[0].split(self.delimiter)]
        sample = [v.strip() for v in lines[1].split(self.delimiter)] if len(lines) > 1 else None

        fields: dict[str, FieldShape] = {}
        for index, header in enumerate(headers):
            field_name = sanitize_field_name(header)
            if not field_name:
                continue

            field_type = FieldType.STRING
            if sample is not None:
                value = sample[index] if index < len(sample) else None
                field_type = infer_type(value)

            fields[field_name] = FieldShape(type=field_type)

        self.logger.debug(f"Inferred {len(fields)} columns from {len(headers)} headers")
        return fields
