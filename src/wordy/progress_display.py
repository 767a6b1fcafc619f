"""
Rich-based live progress panel for long index parses.

Parsing a full noun index takes a few seconds; the panel shows line and
record counts without scrolling the terminal. A disabled display accepts the
same calls and draws nothing, so callers need no separate code path.
"""

import time
from typing import Any, Dict, Optional

from rich import box
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


class ProgressDisplay:
    """
    Context manager showing live-updating counters.

    Usage:
        with ProgressDisplay("Parsing index.noun") as progress:
            for line_num, line in enumerate(f, 1):
                progress.update(Lines=line_num, Records=count)
    """

    def __init__(
        self,
        title: str = "Progress",
        enabled: bool = True,
        refresh_per_second: int = 10,
        update_interval: int = 1000,
    ):
        """
        Args:
            title: Panel title
            enabled: When False, nothing is rendered
            refresh_per_second: Live refresh rate
            update_interval: Redraw every N calls to update()
        """
        self.title = title
        self.enabled = enabled
        self.refresh_per_second = refresh_per_second
        self.update_interval = update_interval

        self.metrics: Dict[str, Any] = {}
        self.live: Optional[Live] = None
        self.start_time: float = 0.0
        self.calls: int = 0
        self._rate_metric: Optional[str] = None

    def __enter__(self):
        self.start_time = time.time()
        if self.enabled:
            self.live = Live(self._make_panel(), refresh_per_second=self.refresh_per_second)
            self.live.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.live:
            self._refresh_timing()
            self.live.update(self._make_panel())
            self.live.__exit__(exc_type, exc_val, exc_tb)
            self.live = None
        return False

    def update(self, **metrics):
        """Record counters; the first counter ever passed drives the rate."""
        self.calls += 1
        self.metrics.update(metrics)

        if self._rate_metric is None and metrics:
            self._rate_metric = next(iter(metrics))

        if self.live and self.calls % self.update_interval == 0:
            self._refresh_timing()
            self.live.update(self._make_panel())

    def _refresh_timing(self):
        elapsed = time.time() - self.start_time
        self.metrics["Elapsed"] = elapsed
        count = self.metrics.get(self._rate_metric) if self._rate_metric else None
        if elapsed > 0 and isinstance(count, (int, float)):
            self.metrics["Rate"] = count / elapsed

    def _make_panel(self) -> Panel:
        grid = Table.grid(padding=(0, 2))
        grid.add_column(justify="left", no_wrap=True)
        grid.add_column(justify="right", no_wrap=True)

        for key, value in self.metrics.items():
            grid.add_row(
                Text(f"{key}:", style="bold grey50"),
                Text(self._format_value(key, value), style="bright_cyan"),
            )

        return Panel(grid, title=self.title, box=box.SIMPLE, border_style="bright_black")

    @staticmethod
    def _format_value(key: str, value: Any) -> str:
        if key == "Elapsed" and isinstance(value, float):
            minutes, seconds = divmod(int(value), 60)
            return f"{minutes:02d}:{seconds:02d}"
        if key == "Rate" and isinstance(value, float):
            return f"{value:,.1f}/s"
        if isinstance(value, int):
            return f"{value:,}"
        if isinstance(value, float):
            return f"{value:,.2f}"
        return str(value)
