"""Factory for selecting a content analyzer by file extension."""

import logging

from ..core.constants import FILE_EXTENSIONS
from ..models.analysis import ContentKind
from .base_analyzer import BaseAnalyzer
from .csv_analyzer import CSVAnalyzer
from .json_analyzer import JSONAnalyzer
from .text_analyzer import TextAnalyzer
from .xml_analyzer import XMLAnalyzer

logger = logging.getLogger(__name__)


class AnalyzerFactory:
    """Registry mapping file extensions to analyzer instances.

    Extensions without a registered analyzer fall back to a free-text
    analyzer that labels the file as a plain document.
    """

    def __init__(self):
        self._analyzers: dict[str, BaseAnalyzer] = {}
        self._fallback = TextAnalyzer(kind=ContentKind.DOCUMENT)

        for extension in FILE_EXTENSIONS.STRUCTURED:
            self.register(extension, JSONAnalyzer())
        for extension in FILE_EXTENSIONS.TABULAR:
            self.register(extension, CSVAnalyzer())
        for extension in FILE_EXTENSIONS.MARKUP:
            self.register(extension, XMLAnalyzer())
        for extension in FILE_EXTENSIONS.CONTENT:
            self.register(extension, TextAnalyzer())

    def register(self, extension: str, analyzer: BaseAnalyzer) -> None:
        """Register (or replace) the analyzer for an extension."""
        extension = _normalize(extension)
        if extension in self._analyzers:
            logger.debug(f"Replacing analyzer for {extension}")
        self._analyzers[extension] = analyzer

    def get_analyzer(self, extension: str) -> BaseAnalyzer:
        """Return the analyzer for ``extension``, or the free-text fallback."""
        return self._analyzers.get(_normalize(extension), self._fallback)

    def is_registered(self, extension: str) -> bool:
        """Whether a dedicated analyzer exists for ``extension``."""
        return _normalize(extension) in self._analyzers

    @property
    def extensions(self) -> list[str]:
        """Extensions with a dedicated analyzer."""
        return sorted(self._analyzers)


def _normalize(extension: str) -> str:
    extension = extension.lower()
    if extension and not extension.startswith("."):
        extension = f".{extension}"
    return extension


# Global factory instance
_factory: AnalyzerFactory | None = None


def get_factory() -> AnalyzerFactory:
    """Get the global analyzer factory instance."""
    global _factory
    if _factory is None:
        _factory = AnalyzerFactory()
    return _factory


def create_analyzer(extension: str) -> BaseAnalyzer:
    """Convenience function returning the registered analyzer for an extension."""
    return get_factory().get_analyzer(extension)


def register_analyzer(extension: str, analyzer_class: type[BaseAnalyzer]) -> None:
    """Register an analyzer class for an extension with the global factory."""
    get_factory().register(extension, analyzer_class())
