"""Sink base class and shared formatting helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


def _format_metric_value(value: Any) -> str:
    """Format a metric value for console display."""
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (list, tuple)):
        n = len(value)
        if n > 0 and isinstance(value[0], (int, float)):
            return _format_number(sum(value) / n) + f" (n={n})"
        return f"[{n} items]"
    if isinstance(value, float):
        return _format_number(value)
    return str(value)


def _format_number(value: float) -> str:
    """Format a numeric value with appropriate precision."""
    if value != 0 and (abs(value) < 0.001 or abs(value) > 10000):
        return f"{value:.4e}"
    return f"{value:.6f}"


class MetricSink(ABC):
    """Base class for metric output destinations."""

    @abstractmethod
    def emit(self, metrics: dict[str, Any], step: int):
        """Receive metrics for one runner step.

        Args:
            metrics: Namespaced metric dict (e.g., "update/q_value": 0.73).
            step: Episode number the metrics belong to (1-indexed).
        """
        ...

    def flush(self):
        """Flush any buffered output. Called at end of the run."""
        pass
