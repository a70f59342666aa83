from dataclasses import dataclass
from enum import Enum


class ConsoleMode(Enum):
    """Where console output goes."""
    NORMAL = "normal"   # styled terminal output
    LOGGING = "logging" # plain text appended to ConsoleConfig.log_file
    SILENT = "silent"   # progress bars and errors only
    NULL = "null"       # nothing


class TimeFormat(Enum):
    """strftime patterns for message timestamps."""
    TWELVE_HOUR = "%I:%M:%S %p"
    TWENTY_FOUR_HOUR = "%H:%M:%S"
    SHORT = "%H:%M"


@dataclass
class ConsoleConfig:
    """
    Settings for the WFConsole singleton.

    Two configs compare equal when every field matches; constructing
    WFConsole with an unequal config re-initializes it.

    :ivar mode: Output destination, see `ConsoleMode`.
    :ivar use_colors: Set False to force monochrome output.
    :ivar show_time: Prefix text messages with a timestamp.
    :ivar time_format: Timestamp pattern.
    :ivar timezone: IANA zone name for timestamps, or None for local time.
    :ivar log_file: Target file in LOGGING mode. Required there, ignored elsewhere.
    :ivar color_system: Rich color system name ("auto", "standard", "256",
        "truecolor"), or None for no color.
    """
    mode: ConsoleMode = ConsoleMode.NORMAL
    use_colors: bool = True
    show_time: bool = True
    time_format: TimeFormat = TimeFormat.TWENTY_FOUR_HOUR
    timezone: str | None = "UTC"
    log_file: str | None = None
    color_system: str | None = "auto"
