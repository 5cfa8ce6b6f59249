"""
Metrics collection and registry.

Thread-safe counters and gauges with label support, used to record wallet
operation outcomes.
"""

import threading
from abc import ABC, abstractmethod
from collections import defaultdict
from enum import Enum
from typing import Dict, List, Optional


class MetricType(Enum):
    """Types of metrics."""
    COUNTER = "counter"
    GAUGE = "gauge"


class Metric(ABC):
    """
    Abstract base class for metrics.

    Defines the interface for all metric types with thread-safe
    operations and label support.
    """

    def __init__(self, name: str, description: str = "", labels: Optional[Dict[str, str]] = None):
        """
        Initialize metric.

        Args:
            name: Metric name
            description: Metric description
            labels: Default labels
        """
        self.name = name
        self.description = description
        self.default_labels = labels or {}
        self._lock = threading.RLock()
        self._values: Dict[str, float] = defaultdict(float)

    @property
    @abstractmethod
    def metric_type(self) -> MetricType:
        """Get metric type."""
        pass

    def get_value(self, labels: Optional[Dict[str, str]] = None) -> float:
        """Get current value for a label set."""
        with self._lock:
            return self._values.get(self._labels_to_key(self._merge_labels(labels)), 0.0)

    def get_all_values(self) -> Dict[str, float]:
        """Get values for every label set seen."""
        with self._lock:
            return dict(self._values)

    def reset(self) -> None:
        """Reset metric to initial state."""
        with self._lock:
            self._values.clear()

    def _merge_labels(self, labels: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Merge provided labels with default labels."""
        merged = self.default_labels.copy()
        if labels:
            merged.update(labels)
        return merged

    def _labels_to_key(self, labels: Dict[str, str]) -> str:
        """Convert labels to a stable string key."""
        if not labels:
            return ""
        return ",".join(f"{k}={v}" for k, v in sorted(labels.items()))


class Counter(Metric):
    """Counter metric that only increases."""

    @property
    def metric_type(self) -> MetricType:
        return MetricType.COUNTER

    def increment(self, amount: float = 1.0, labels: Optional[Dict[str, str]] = None) -> None:
        """
        Increment counter.

        Args:
            amount: Amount to increment (must be >= 0)
            labels: Optional labels
        """
        if amount < 0:
            raise ValueError("Counter increment must be >= 0")

        with self._lock:
            self._values[self._labels_to_key(self._merge_labels(labels))] += amount


class Gauge(Metric):
    """Gauge metric that can go up and down."""

    @property
    def metric_type(self) -> MetricType:
        return MetricType.GAUGE

    def set(self, value: float, labels: Optional[Dict[str, str]] = None) -> None:
        """Set gauge value."""
        with self._lock:
            self._values[self._labels_to_key(self._merge_labels(labels))] = value


class MetricsRegistry:
    """
    Registry for metrics.

    Metrics are created on first use and shared by name afterwards.
    """

    def __init__(self):
        """Initialize metrics registry."""
        self._metrics: Dict[str, Metric] = {}
        self._lock = threading.RLock()

    def _get_or_create(self, cls, name: str, description: str, labels: Optional[Dict[str, str]]) -> Metric:
        with self._lock:
            if name in self._metrics:
                metric = self._metrics[name]
                if not isinstance(metric, cls):
                    raise ValueError(f"Metric {name} exists but is not a {cls.__name__}")
                return metric

            metric = cls(name, description, labels)
            self._metrics[name] = metric
            return metric

    def counter(self, name: str, description: str = "", labels: Optional[Dict[str, str]] = None) -> Counter:
        """Get or create a counter metric."""
        return self._get_or_create(Counter, name, description, labels)

    def gauge(self, name: str, description: str = "", labels: Optional[Dict[str, str]] = None) -> Gauge:
        """Get or create a gauge metric."""
        return self._get_or_create(Gauge, name, description, labels)

    def get_metric(self, name: str) -> Optional[Metric]:
        """Get metric by name."""
        with self._lock:
            return self._metrics.get(name)

    def list_metrics(self) -> List[str]:
        """Get list of metric names."""
        with self._lock:
            return list(self._metrics.keys())

    def collect_all(self) -> Dict[str, Dict[str, float]]:
        """
        Collect all metric values.

        Returns:
            Metric name -> values per label set
        """
        with self._lock:
            return {
                name: metric.get_all_values()
                for name, metric in self._metrics.items()
            }

    def reset_all(self) -> None:
        """Reset all metrics."""
        with self._lock:
            for metric in self._metrics.values():
                metric.reset()

    def clear(self) -> None:
        """Clear all metrics from registry."""
        with self._lock:
            self._metrics.clear()


# Global registry instance
_global_registry = MetricsRegistry()


def get_registry() -> MetricsRegistry:
    """Get the global metrics registry."""
    return _global_registry


__all__ = [
    "MetricsRegistry",
    "Metric",
    "Counter",
    "Gauge",
    "MetricType",
    "get_registry",
]
