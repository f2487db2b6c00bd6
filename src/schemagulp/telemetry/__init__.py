"""Telemetry module for tracking generation metrics."""

from .metrics import MetricsCollector

__all__ = ["MetricsCollector"]
