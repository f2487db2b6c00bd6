"""Tool for inferring the primitive type of a single raw value."""

import re
from typing import Any

from ...core.constants import INFERENCE
from ...models.field import FieldType

_NUMERIC = re.compile(INFERENCE.NUMERIC_PATTERN, re.ASCII)
_DATE = re.compile(INFERENCE.DATE_PATTERN, re.ASCII)
_TIMESTAMP = re.compile(INFERENCE.TIMESTAMP_PATTERN, re.ASCII)


def infer_type(value: Any) -> FieldType:
    """
    Decide the most specific primitive type for a raw value.

    Rules are applied in priority order: missing values are strings, then
    booleans, numbers, ISO dates, ISO timestamps, long text and finally
    short strings.

    Args:
        value: Raw value as read from a file (usually a string)

    Returns:
        Inferred FieldType
    """
    if value is None:
        return FieldType.STRING

    value_str = str(value).strip()

    if value_str.lower() in ("true", "false"):
        return FieldType.BOOLEAN
    if is_numeric(value_str):
        return FieldType.DECIMAL if "." in value_str else FieldType.INTEGER
    if is_date(value_str):
        return FieldType.DATE
    if is_timestamp(value_str):
        return FieldType.TIMESTAMP
    if len(value_str) > INFERENCE.MAX_STRING_LENGTH:
        return FieldType.TEXT

    return FieldType.STRING


def is_numeric(value: str) -> bool:
    """Check if value is a plain number.

    Empty strings are not numeric. A single leading sign and an exponent are
    accepted; thousands separators, underscores, hex and inf/nan are not.
    """
    return bool(_NUMERIC.match(value.strip()))


def is_date(value: str) -> bool:
    """Check if value is exactly an ISO ``YYYY-MM-DD`` date."""
    return bool(_DATE.match(value))


def is_timestamp(value: str) -> bool:
    """Check if value starts with an ISO date followed by a time of day."""
    return bool(_TIMESTAMP.match(value))
