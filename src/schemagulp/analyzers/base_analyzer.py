"""Base class for content analyzers."""

import logging
from abc import ABC, abstractmethod

from ..models.analysis import ContentKind, FieldShape


class BaseAnalyzer(ABC):
    """
    Abstract base class for all content analyzers.

    An analyzer turns the full text of one file into a mapping from
    sanitized field name to inferred field shape. Analyzers are stateless
    and safe to share between concurrent analyses.
    """

    kind: ContentKind = ContentKind.DOCUMENT

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def analyze(self, content: str) -> dict[str, FieldShape] | None:
        """
        Infer the field structure of ``content``.

        Args:
            content: Full decoded file content

        Returns:
            Mapping of field name to shape, or None when nothing can be inferred

        Raises:
            AnalysisError: If the content cannot be parsed
        """
        pass

    @property
    def analyzer_type(self) -> str:
        """Return the analyzer type for logging."""
        return self.__class__.__name__.replace("Analyzer", "").lower()
