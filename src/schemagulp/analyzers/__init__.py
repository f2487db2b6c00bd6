"""Content analyzers for the supported file families."""

from .base_analyzer import BaseAnalyzer
from .csv_analyzer import CSVAnalyzer
from .factory import AnalyzerFactory, create_analyzer, get_factory, register_analyzer
from .json_analyzer import JSONAnalyzer
from .text_analyzer import TextAnalyzer
from .xml_analyzer import XMLAnalyzer

__all__ = [
    "BaseAnalyzer",
    "JSONAnalyzer",
    "CSVAnalyzer",
    "XMLAnalyzer",
    "TextAnalyzer",
    "AnalyzerFactory",
    "create_analyzer",
    "get_factory",
    "register_analyzer",
]
