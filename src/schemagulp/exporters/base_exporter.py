"""Base class for result exporters."""

from abc import ABC, abstractmethod

from ..models.schema_result import SchemaResult


class BaseExporter(ABC):
    """Turns a finished SchemaResult into a downloadable representation."""

    format: str = ""
    filename_template: str = "{project}_schema.txt"

    @abstractmethod
    def export(self, result: SchemaResult) -> str:
        """Render ``result`` in this exporter's format."""
        pass

    def filename(self, result: SchemaResult) -> str:
        """Suggested download file name."""
        return self.filename_template.format(project=result.project_name)


def capitalize(name: str) -> str:
    """Upper-case the first character only."""
    return name[:1].upper() + name[1:]
