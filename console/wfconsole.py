import sys
import time
from typing import IO
from zoneinfo import ZoneInfo

from rich.console import Console, RenderableType
from rich.progress import (
    BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn,
    TimeElapsedColumn, TimeRemainingColumn,
)
from rich.style import Style
from rich.table import Column

from .config import ConsoleConfig, ConsoleMode
from .dataclasses import ContentItem
from .themes import WFDarkTheme
from .utils import apply_style


class WFConsole:
    """
    Process-wide output channel. The CLI, experiment runners and metric sinks
    print through it; library code never prints directly.

    ``WFConsole(cfg)`` reconfigures the shared instance when ``cfg`` differs
    from the current one; ``WFConsole()`` returns it unchanged.

    Mode behavior:

    - NORMAL: styled terminal output and progress bars.
    - LOGGING: plain text appended to ``cfg.log_file``, no progress bars.
    - SILENT: progress bars and errors only.
    - NULL: nothing.

    :raises ValueError: LOGGING mode without ``log_file``.
    :raises RuntimeError: ``log_file`` cannot be opened.
    """
    _instance = None
    _console: Console | None = None
    _cfg: ConsoleConfig | None = None
    _mode: ConsoleMode | None = None
    _log_file_handle: IO | None = None
    _tz_info: ZoneInfo | None = None
    _progress_bar: Progress | None = None
    _progress_tasks: dict = {}

    def __new__(cls, cfg: ConsoleConfig | None = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize(cfg)
        elif cfg is not None and cfg != cls._instance._cfg:
            cls._instance.print_warning("WFConsole reconfigured with a different config.")
            cls._instance._initialize(cfg)
        return cls._instance

    def _initialize(self, cfg: ConsoleConfig | None = None):
        self._release()
        if cfg is None:
            print("Warning: WFConsole initialized without explicit config.", file=sys.stderr)
            cfg = ConsoleConfig()
        self._cfg = cfg
        self._mode = cfg.mode
        self._tz_info = ZoneInfo(cfg.timezone) if cfg.timezone else None
        self._console = self._build_console(cfg)

    def _release(self):
        if self._progress_bar is not None:
            self._progress_bar.stop()
            self._progress_bar = None
        self._progress_tasks = {}
        if self._log_file_handle is not None:
            self._log_file_handle.close()
            self._log_file_handle = None

    def _build_console(self, cfg: ConsoleConfig) -> Console:
        if cfg.mode == ConsoleMode.NULL:
            return Console(quiet=True)

        if cfg.mode == ConsoleMode.LOGGING:
            if not cfg.log_file:
                raise ValueError("log_file must be specified in ConsoleConfig for logging mode")
            try:
                self._log_file_handle = open(cfg.log_file, "a+", encoding="utf-8")
            except OSError as e:
                raise RuntimeError(f"Failed to open log file {cfg.log_file}: {e}") from e
            return Console(file=self._log_file_handle, theme=WFDarkTheme(),
                           force_terminal=False, no_color=True)

        if cfg.mode in (ConsoleMode.NORMAL, ConsoleMode.SILENT):
            no_color = not cfg.use_colors or cfg.color_system is None
            return Console(
                theme=WFDarkTheme(),
                force_jupyter=False,
                no_color=no_color,
                color_system=None if no_color else cfg.color_system,
                highlight=False,
            )

        raise ValueError(f"Unsupported console mode: {cfg.mode}")

    @property
    def _draws_progress(self) -> bool:
        return self._mode in (ConsoleMode.NORMAL, ConsoleMode.SILENT)

    @property
    def _prints_messages(self) -> bool:
        return self._mode not in (ConsoleMode.NULL, ConsoleMode.SILENT)

    # --- Messages ---

    def print(self, content: str | ContentItem | RenderableType = "", style: str | Style = ""):
        """
        Print text (timestamped, optionally styled) or a Rich renderable such
        as a table, which is printed as-is.
        """
        if isinstance(content, ContentItem):
            item = content
        elif hasattr(content, "__rich_console__") or hasattr(content, "__rich__"):
            kind = type(content).__name__.lower()
            item = ContentItem(type=kind if kind in ("panel", "table") else "renderable", content=content)
        else:
            item = ContentItem(type="text", content=content, style=style or None, time=time.time())
        self._emit(item)

    def print_notification(self, content: str):
        self._emit(ContentItem(type="notification", content=content, time=time.time()))

    def print_warning(self, content: str):
        self._emit(ContentItem(type="warning", content=content, time=time.time()))

    def print_complete(self, content: str):
        self._emit(ContentItem(type="complete", content=content, time=time.time()))

    def print_error(self, content: str):
        """Print an error. Unlike other messages, errors also show in SILENT mode."""
        item = ContentItem(type="error", content=content, time=time.time())
        if self._mode == ConsoleMode.SILENT:
            self._console.print(str(item))
        else:
            self._emit(item)

    def rule(self, content, style: str | Style = ""):
        if self._prints_messages:
            self._console.rule(apply_style(content, "rule.text"), style=style or "rule.line")

    def _emit(self, item: ContentItem):
        if not self._prints_messages:
            return
        self._console.print(item.renderable if item.is_renderable else str(item))

    # --- Progress ---

    def create_progress_task(self, task_name: str, task_desc: str, total: float | None = None, **kwargs):
        """Add a named bar, starting the progress display if none is running."""
        if not self._draws_progress:
            return
        if self._progress_bar is None:
            self._progress_bar = self._build_progress()
            self._progress_bar.start()
        task_id = self._progress_bar.add_task(task_desc, total=total, **kwargs)
        self._progress_tasks[task_name] = {"id": task_id, "total": total, "completed": 0}

    def update_progress_task(self, task_name: str, completed: float | None = None, **kwargs) -> bool:
        """
        Set ``completed`` or step by ``advance=``. Returns False when the task
        is unknown or progress is not drawn in this mode.
        """
        task = self._progress_tasks.get(task_name) if self._draws_progress else None
        if task is None:
            return False
        if completed is not None:
            task["completed"] = completed
        elif "advance" in kwargs:
            task["completed"] += kwargs["advance"]
        self._progress_bar.update(task["id"], completed=completed, **kwargs)
        return True

    def remove_progress_task(self, task_name: str) -> bool:
        """Fill and drop a task. The display stops with its last task."""
        if not self._draws_progress or task_name not in self._progress_tasks:
            return False
        task = self._progress_tasks.pop(task_name)
        if task["total"] is not None:
            self._progress_bar.update(task["id"], completed=task["total"])
        self._progress_bar.remove_task(task["id"])
        if not self._progress_tasks:
            self._progress_bar.stop()
            self._progress_bar = None
        return True

    def has_progress_task(self, task_name: str) -> bool:
        return task_name in self._progress_tasks

    def _build_progress(self) -> Progress:
        return Progress(
            SpinnerColumn(table_column=Column(max_width=3)),
            TextColumn("[progress.description]{task.description}",
                       table_column=Column(min_width=15, max_width=30)),
            BarColumn(bar_width=None),
            TaskProgressColumn(table_column=Column(max_width=10)),
            TimeElapsedColumn(table_column=Column(max_width=15)),
            TimeRemainingColumn(table_column=Column(max_width=15)),
            console=self._console,
            transient=True,
            expand=True,
        )

    # --- Accessors ---

    def get_console_config(self) -> ConsoleConfig:
        return self._cfg

    def get_tz_info(self) -> ZoneInfo | None:
        return self._tz_info
