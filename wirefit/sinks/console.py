"""Console sink for Rich-based metric display."""

from __future__ import annotations

from typing import Any

from rich import box
from rich.table import Table

from console import WFConsole
from .base import MetricSink, _format_metric_value


class ConsoleSink(MetricSink):
    """Display metrics in a Rich table via WFConsole.

    Metrics are averaged over a window of ``every`` steps so the console
    isn't spammed on every update. Non-numeric values keep their latest
    value. ``flush()`` prints whatever is left in a partial window.
    """

    def __init__(self, every: int = 50):
        if every <= 0:
            raise ValueError(f"every must be > 0, got {every}")
        self.every = every
        self._console = WFConsole()
        self._sums: dict[str, float] = {}
        self._counts: dict[str, int] = {}
        self._latest: dict[str, Any] = {}
        self._first_step: int | None = None
        self._last_step: int | None = None

    def emit(self, metrics: dict[str, Any], step: int):
        if not metrics:
            return
        if self._first_step is None:
            self._first_step = step
        self._last_step = step

        for key, value in metrics.items():
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                self._sums[key] = self._sums.get(key, 0.0) + float(value)
                self._counts[key] = self._counts.get(key, 0) + 1
            else:
                self._latest[key] = value

        if step % self.every == 0:
            self._emit_table()

    def flush(self):
        self._emit_table()

    def buffered_keys(self) -> list[str]:
        return sorted(set(self._sums) | set(self._latest))

    def _emit_table(self):
        if self._first_step is None:
            return
        rows = {key: self._sums[key] / self._counts[key] for key in self._sums}
        rows.update(self._latest)

        table = Table(
            box=box.SIMPLE,
            show_header=True,
            header_style="table.header",
            title=f"Metrics (steps {self._first_step}-{self._last_step})",
            title_style="detail",
            padding=(0, 1),
        )
        table.add_column("Group", style="sink.name")
        table.add_column("Metric", style="label")
        table.add_column("Value", justify="right", style="metric.value")

        for key in sorted(rows.keys()):
            parts = key.split("/", 1)
            group = parts[0] if len(parts) > 1 else ""
            metric_name = parts[1] if len(parts) > 1 else parts[0]
            table.add_row(group, metric_name, _format_metric_value(rows[key]))

        self._console.print(table)

        self._sums.clear()
        self._counts.clear()
        self._latest.clear()
        self._first_step = None
        self._last_step = None
