"""Main SchemaGulp class."""

import asyncio
import logging
import time
from collections.abc import Sequence
from contextlib import nullcontext
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .analyzers import get_factory
from .config import Config
from .core.constants import FILE_TYPE_DESCRIPTIONS
from .core.exceptions import (
    AnalysisError,
    ConfigurationError,
    GenerationError,
    SchemaGulpError,
)
from .exporters import EXPORTERS, export_filename, export_result
from .models import AnalysisSummary, FileAnalysis, FileDescriptor, SchemaResult, TableSpec
from .renderers import RendererRegistry
from .telemetry import MetricsCollector
from .templates import DomainCatalog, TemplateBuilder, TemplateRegistry, apply_features
from .templates.registry import FALLBACK_TAG
from .utils import FileContext, OperationContext, ProjectContext, get_contextual_logger

logger = get_contextual_logger(__name__)

FileInput = FileDescriptor | str | Path


class SchemaGulp:
    """Main class for generating database schemas from website content files."""

    def __init__(
        self,
        config: Config | None = None,
        metrics_collector: MetricsCollector | None = None,
        **kwargs,
    ):
        """Initialize SchemaGulp.

        Args:
            config: Configuration object. If None, loads from environment.
            metrics_collector: Collector to report metrics to. When omitted, one is
                created only if ``enable_telemetry`` is set.
            **kwargs: Config overrides, e.g. ``database_type="postgresql"``
        """
        # Load base config
        if config is None:
            config = Config.from_env()
        else:
            config = config.model_copy()

        # Apply overrides
        for key, value in kwargs.items():
            if hasattr(config, key):
                try:
                    setattr(config, key, value)
                except ValidationError as e:
                    raise ConfigurationError(f"Invalid value for {key}: {e}") from e
            else:
                logger.warning(f"Ignoring unknown config option: {key}")

        self.config = config
        self._setup_logging()

        # Initialize components
        self._catalog = DomainCatalog.default()
        self._templates = TemplateRegistry.default()
        self._template_builder = TemplateBuilder(self._catalog, self._templates)
        self._analyzers = get_factory()
        self._renderers = RendererRegistry()

        if metrics_collector is None and config.enable_telemetry:
            metrics_collector = MetricsCollector()
        self._metrics = metrics_collector

        logger.info(f"SchemaGulp initialized with config: {config}")

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        logging.basicConfig(
            level=getattr(logging, self.config.log_level.upper()),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            filename=self.config.log_file,
        )

    async def generate(self, files: Sequence[FileInput]) -> SchemaResult:
        """Generate a schema from a set of uploaded files.

        Files that cannot be read or parsed are logged and left out of the
        analysis; they never abort the run.

        Args:
            files: File descriptors, or paths to files on disk

        Returns:
            SchemaResult with the rendered schema and the generated tables

        Raises:
            GenerationError: If the tables cannot be built or rendered
        """
        start_time = time.time()
        descriptors = [self._to_descriptor(f) for f in files]

        with ProjectContext(self.config.project_name):
            logger.info(f"Starting schema generation for {len(descriptors)} files")

            analysis = await self.analyze_files(descriptors)
            website_type = self._resolve_website_type(self.config.website_type)
            renderer = self._renderers.get_renderer(self.config.database_type)
            generated_at = datetime.now(timezone.utc)

            try:
                with OperationContext("build_tables"), self._timed("build_tables"):
                    tables = self.build_tables(analysis)
                with OperationContext("render"), self._timed("render"):
                    sql = renderer.render(tables, self.config.project_name, generated_at)
            except (SchemaGulpError, ValueError) as e:
                logger.error(f"Schema generation failed: {e}")
                raise GenerationError(f"Failed to generate schema: {e}") from e

            result = SchemaResult(
                sql=sql,
                tables=tables,
                total_fields=sum(len(table.fields) for table in tables),
                metadata={
                    "files_analyzed": len(analysis.files),
                    "files_failed": len(analysis.failed_files),
                    "failed_files": list(analysis.failed_files),
                    "common_fields": sorted(analysis.common_fields),
                    "website_type": website_type,
                    "database_type": renderer.dialect,
                },
                project_name=self.config.project_name,
                database_type=renderer.dialect,
                generated_at=generated_at,
            )

            generation_time = time.time() - start_time
            if self._metrics is not None:
                self._metrics.record_generation(
                    website_type, renderer.dialect, result.table_count, generation_time
                )

            logger.info(
                f"Generation completed in {generation_time:.2f}s. "
                f"Built {result.table_count} tables with {result.total_fields} fields."
            )

        return result

    async def analyze_files(self, files: Sequence[FileInput]) -> AnalysisSummary:
        """Analyze every file and merge the discovered field names.

        Files are read and analyzed concurrently in worker threads; the merge
        runs afterwards on the calling task, in input order.
        """
        descriptors = [self._to_descriptor(f) for f in files]

        with OperationContext("analyze"), self._timed("analyze"):
            results = await asyncio.gather(
                *(asyncio.to_thread(self._analyze_file, d) for d in descriptors)
            )

        summary = AnalysisSummary()
        for descriptor, analysis in zip(descriptors, results):
            if analysis is None:
                summary.failed_files.append(descriptor.original_name)
            else:
                summary.add(analysis)

        logger.info(
            f"Analyzed {len(summary.files)} files "
            f"({len(summary.failed_files)} failed, {len(summary.common_fields)} fields)"
        )
        return summary

    def build_tables(self, analysis: AnalysisSummary) -> list[TableSpec]:
        """Build the prefixed table set for the configured website type."""
        tables = self._template_builder.build(
            self.config.website_type, analysis, self.config.table_prefix
        )
        return apply_features(
            tables,
            self._catalog,
            table_prefix=self.config.table_prefix,
            include_metadata=self.config.include_metadata,
            include_images=self.config.include_images,
        )

    def _analyze_file(self, descriptor: FileDescriptor) -> FileAnalysis | None:
        """Analyze one file, returning None if it cannot be read or parsed."""
        with FileContext(descriptor.original_name):
            analyzer = self._analyzers.get_analyzer(descriptor.extension)
            try:
                self._validate_file(descriptor)
                content = descriptor.read_text(self.config.encoding)
                fields = analyzer.analyze(content)
            except (AnalysisError, OSError, UnicodeDecodeError) as e:
                logger.error(f"Failed to analyze file: {e}")
                if self._metrics is not None:
                    self._metrics.record_file_analyzed(
                        descriptor.extension, success=False, error_type=type(e).__name__
                    )
                return None

            logger.debug(f"{analyzer.analyzer_type} analyzer found {len(fields or {})} fields")
            if self._metrics is not None:
                self._metrics.record_file_analyzed(descriptor.extension)

            return FileAnalysis(
                file_name=descriptor.original_name,
                extension=descriptor.extension,
                kind=analyzer.kind,
                fields=fields,
            )

    def _validate_file(self, descriptor: FileDescriptor) -> None:
        """Validate that the file is within size limits."""
        if descriptor.size_mb > self.config.max_file_size_mb:
            raise AnalysisError(
                f"File too large: {descriptor.size_mb:.1f}MB "
                f"(max: {self.config.max_file_size_mb}MB)",
                file_name=descriptor.original_name,
            )

    def _timed(self, operation: str):
        """Time a pipeline stage when metrics are enabled."""
        if self._metrics is None:
            return nullcontext()
        return self._metrics.measure_time(operation)

    def _resolve_website_type(self, website_type: str | None) -> str:
        template = self._templates.resolve(website_type)
        return template.tag if template is not None else FALLBACK_TAG

    @staticmethod
    def _to_descriptor(file: FileInput) -> FileDescriptor:
        if isinstance(file, FileDescriptor):
            return file
        return FileDescriptor.from_path(file)

    def export(self, result: SchemaResult, fmt: str) -> str:
        """Render a generated schema in an export format.

        Raises:
            UnsupportedFormatError: If ``fmt`` is not a supported export format
        """
        return export_result(result, fmt)

    def export_filename(self, result: SchemaResult, fmt: str) -> str:
        """Suggested download file name for an export."""
        return export_filename(result, fmt)

    def get_supported_formats(self) -> list[str]:
        """Get list of supported export formats."""
        return list(EXPORTERS)

    def get_supported_extensions(self) -> list[dict[str, Any]]:
        """Get the accepted upload file types with their descriptions."""
        return [
            {"extension": extension, "description": description}
            for extension, description in FILE_TYPE_DESCRIPTIONS.items()
        ]

    def get_website_types(self) -> list[str]:
        """Get list of supported website types."""
        return self._templates.tags

    def get_database_types(self) -> list[str]:
        """Get list of supported database types."""
        return self._renderers.dialects


def generate_schema(files: Sequence[FileInput], config: Config | None = None) -> SchemaResult:
    """Generate a schema synchronously.

    Convenience wrapper around ``SchemaGulp(config).generate(files)`` for
    callers without a running event loop.
    """
    return asyncio.run(SchemaGulp(config).generate(files))
