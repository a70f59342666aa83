import datetime
from dataclasses import dataclass
from typing import Literal

from rich.console import RenderableType
from rich.style import Style

from .utils import apply_style

# message type -> (theme style prefix, icon)
_ICONS = {
    "notification": ("notification", "ⓘ"),
    "complete": ("notification", "✔"),
    "warning": ("warning", "⚠"),
    "error": ("error", "ⓧ"),
}

_RENDERABLE_TYPES = ("panel", "table", "renderable")


@dataclass
class ContentItem:
    """
    One console message.

    Message types with an icon render as ``<icon> <content>`` in the
    ``<prefix>.icon`` / ``<prefix>.content`` theme styles. Renderable types
    carry a Rich object that is printed untouched.

    :ivar type: Message kind.
    :ivar content: Text, or a Rich renderable for renderable types.
    :ivar style: Overrides the type's default content style.
    :ivar time: Epoch seconds shown as a timestamp prefix, or None.
    """
    type: Literal["text", "notification", "complete", "warning", "error",
                  "panel", "table", "renderable"]
    content: str | RenderableType
    style: str | Style | None = None
    time: float | None = None

    @property
    def is_renderable(self) -> bool:
        return self.type in _RENDERABLE_TYPES

    @property
    def renderable(self) -> RenderableType | None:
        return self.content if self.is_renderable else None

    def _timestamp(self) -> str:
        from .wfconsole import WFConsole
        console = WFConsole()
        cfg = console.get_console_config()
        if not cfg.show_time or self.time is None:
            return ""
        stamp = datetime.datetime.fromtimestamp(self.time, tz=console.get_tz_info())
        return (
            "[time.brackets]\\[[/time.brackets]"
            f"[time.numbers]{stamp.strftime(cfg.time_format.value)}[/time.numbers]"
            "[time.brackets]][/time.brackets] "
        )

    def __str__(self) -> str:
        if self.is_renderable:
            return str(self.content)
        text = str(self.content)
        if self.type in _ICONS:
            prefix, icon = _ICONS[self.type]
            text = f"[{prefix}.icon]{icon}[/{prefix}.icon] {apply_style(text, self.style or f'{prefix}.content')}"
        elif self.style:
            text = apply_style(text, str(self.style))
        return self._timestamp() + text
