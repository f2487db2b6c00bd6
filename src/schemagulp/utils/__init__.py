"""Utility functions for SchemaGulp."""

from .logging_context import (
    FileContext,
    OperationContext,
    ProjectContext,
    get_contextual_logger,
    setup_contextual_logging,
)

__all__ = [
    "FileContext",
    "OperationContext",
    "ProjectContext",
    "get_contextual_logger",
    "setup_contextual_logging",
]
