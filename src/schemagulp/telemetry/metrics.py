"""General metrics collection for SchemaGulp."""

import logging
import time
from contextlib import contextmanager

from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import (
    ConsoleMetricExporter,
    MetricExporter,
    MetricReader,
    PeriodicExportingMetricReader,
)

logger = logging.getLogger(__name__)


class MetricsCollector:
    """Collect and export metrics using OpenTelemetry."""

    def __init__(
        self,
        service_name: str = "schemagulp",
        exporter: MetricExporter | None = None,
        reader: MetricReader | None = None,
        export_interval_millis: int = 60000,  # 1 minute
    ):
        """Initialize metrics collector.

        The collector owns its meter provider, so several generators in one
        process never overwrite each other's global provider.

        Args:
            service_name: Name of the service
            exporter: Optional custom metric exporter
            reader: Optional metric reader, used instead of a periodic exporter
            export_interval_millis: Export interval in milliseconds
        """
        if reader is None:
            if exporter is None:
                exporter = ConsoleMetricExporter()
            reader = PeriodicExportingMetricReader(
                exporter=exporter, export_interval_millis=export_interval_millis
            )

        self.provider = MeterProvider(metric_readers=[reader])
        self.meter = self.provider.get_meter(service_name)

        self._create_instruments()

    def _create_instruments(self):
        """Create common metric instruments."""
        # Counters
        self.files_analyzed = self.meter.create_counter(
            name="schemagulp.files_analyzed", description="Number of files analyzed", unit="files"
        )

        self.files_failed = self.meter.create_counter(
            name="schemagulp.files_failed",
            description="Number of files that could not be analyzed",
            unit="files",
        )

        self.tables_generated = self.meter.create_counter(
            name="schemagulp.tables_generated",
            description="Number of tables generated",
            unit="tables",
        )

        # Histograms
        self.generation_duration = self.meter.create_histogram(
            name="schemagulp.generation_duration",
            description="Time to generate one schema",
            unit="seconds",
        )

    def record_file_analyzed(
        self, extension: str, success: bool = True, error_type: str | None = None
    ):
        """Record metrics for one analyzed file.

        Args:
            extension: File extension used for analyzer dispatch
            success: Whether analysis succeeded
            error_type: Exception class name if analysis failed
        """
        attributes = {"extension": extension or "none"}

        if success:
            self.files_analyzed.add(1, attributes)
        else:
            self.files_failed.add(1, {**attributes, "error_type": error_type or "unknown"})

    def record_generation(
        self, website_type: str, database_type: str, table_count: int, duration_seconds: float
    ):
        """Record metrics for one completed generation run."""
        attributes = {"website_type": website_type, "database_type": database_type}
        if table_count > 0:
            self.tables_generated.add(table_count, attributes)
        self.generation_duration.record(duration_seconds, attributes)

    @contextmanager
    def measure_time(self, operation: str):
        """Context manager to measure operation time.

        Example:
            with metrics_collector.measure_time("render"):
                sql = renderer.render(tables, project_name)
        """
        start_time = time.time()

        try:
            yield
        finally:
            duration = time.time() - start_time

            # Create a histogram for this specific operation if not exists
            if not hasattr(self, f"time_{operation}"):
                histogram = self.meter.create_histogram(
                    name=f"schemagulp.time.{operation}",
                    description=f"Time for {operation} operation",
                    unit="seconds",
                )
                setattr(self, f"time_{operation}", histogram)

            histogram = getattr(self, f"time_{operation}")
            histogram.record(duration)
            logger.debug(f"{operation} took {duration:.4f}s")

    def shutdown(self) -> None:
        """Flush and shut down the meter provider."""
        self.provider.shutdown()
