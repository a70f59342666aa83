"""Metric sinks that consume runner output."""

from .base import MetricSink
from .console import ConsoleSink

__all__ = [
    'MetricSink',
    'ConsoleSink',
]
