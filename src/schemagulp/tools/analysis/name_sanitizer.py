"""Tool for turning arbitrary keys and headers into safe identifiers."""

import re

_INVALID_CHARS = re.compile(r"[^a-z0-9_]")
_UNDERSCORE_RUNS = re.compile(r"_+")


def sanitize_field_name(name: str) -> str:
    """
    Normalize a source key or column header into an identifier.

    The result is lowercase, contains only ``[a-z0-9_]``, has no leading or
    trailing underscore and never two underscores in a row. Sanitizing an
    already sanitized name returns it unchanged.

    Args:
        name: Raw key, header or tag name

    Returns:
        Sanitized identifier, possibly empty (callers must skip empty names)
    """
    sanitized = _INVALID_CHARS.sub("_", str(name).lower())
    sanitized = _UNDERSCORE_RUNS.sub("_", sanitized)
    return sanitized.strip("_")
