"""
Monitoring for wallet operations.
"""

from .metrics import (
    MetricsRegistry, Metric, MetricType, Counter, Gauge,
    get_registry
)

__all__ = [
    "MetricsRegistry",
    "Metric",
    "MetricType",
    "Counter",
    "Gauge",
    "get_registry",
]
