"""Rich-backed console output shared by the CLI, runners and metric sinks."""

from .config import ConsoleConfig, ConsoleMode, TimeFormat
from .dataclasses import ContentItem
from .themes import WFDarkTheme
from .utils import apply_style
from .wfconsole import WFConsole

__all__ = [
    "WFConsole",
    "ConsoleConfig",
    "ConsoleMode",
    "TimeFormat",
    "WFDarkTheme",
    "ContentItem",
    "apply_style",
]
