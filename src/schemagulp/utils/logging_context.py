"""Context-aware logging utilities for SchemaGulp."""

import contextvars
import logging
from collections.abc import Mapping
from typing import Any

# Context variables for tracking the current generation run
current_project = contextvars.ContextVar[str | None]("current_project", default=None)
current_file = contextvars.ContextVar[str | None]("current_file", default=None)
current_operation = contextvars.ContextVar[str | None]("current_operation", default=None)

_CONTEXT_FIELDS = (
    ("project", current_project),
    ("file", current_file),
    ("operation", current_operation),
)
_MESSAGE_LABELS = {"project": "project", "file": "file", "operation": "op"}


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context information."""

    def process(self, msg: str, kwargs: Mapping[str, Any]) -> tuple[str, Mapping[str, Any]]:
        """Add context information to log records."""
        extra = dict(kwargs.get("extra") or {})
        context_parts = []

        for key, var in _CONTEXT_FIELDS:
            value = var.get()
            if value:
                extra[key] = value
                context_parts.append(f"{_MESSAGE_LABELS[key]}={value}")

        kwargs["extra"] = extra

        if context_parts:
            msg = f"[{', '.join(context_parts)}] {msg}"

        return msg, kwargs


def get_contextual_logger(name: str) -> ContextualLogger:
    """Get a logger that automatically includes context information.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(logging.getLogger(name), {})


class _ContextScope:
    """Sets a context variable for the duration of a ``with`` block."""

    var: contextvars.ContextVar[str | None]

    def __init__(self, value: str):
        self.value = value
        self.token = None

    def __enter__(self):
        self.token = self.var.set(self.value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token:
            self.var.reset(self.token)


class ProjectContext(_ContextScope):
    """Context manager for tracking the project being generated."""

    var = current_project


class FileContext(_ContextScope):
    """Context manager for tracking the file being analyzed."""

    var = current_file


class OperationContext(_ContextScope):
    """Context manager for tracking the current pipeline step."""

    var = current_operation


def setup_contextual_logging():
    """Set up contextual logging with structured format.

    This should be called once at application startup.
    """
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s - "
        "%(project)s %(file)s %(operation)s",
        defaults={"project": "", "file": "", "operation": ""},
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.setFormatter(formatter)
