"""
Structured console logger

One process-wide Logger; modules bind it to a LogCategory once at import:

    log = get_logger().for_category(LogCategory.RENDER)
    log.info("Frame saved", path="out.png", size="1920x1080")

Output:

    [14:23:45] RENDER    ✓ Frame saved
               ├─ path: out.png
               └─ size: 1920x1080

Detail values are formatted for this engine: enums print their value,
parameter snapshots print as dicts, floats are shortened.
"""

import sys
from datetime import datetime
from enum import Enum
from typing import Any, NamedTuple, Optional, TextIO

from models.enums import LogLevel, LogCategory


# SGR parameters, wrapped as "\033[<code>m" by Logger._paint
RESET = "0"
DIM = "2"

CATEGORY_SGR = {
    LogCategory.CONFIG: "36",
    LogCategory.COLOR: "95",
    LogCategory.RENDER: "94",
    LogCategory.ANIMATION: "93",
    LogCategory.MOTION: "92",
    LogCategory.SURFACE: "96",
    LogCategory.SCHEDULER: "35",
    LogCategory.EVENT: "95",
    LogCategory.SESSION: "32",
    LogCategory.SYSTEM: "97",
}


class LevelStyle(NamedTuple):
    rank: int
    symbol: str
    sgr: str


LEVEL_STYLES = {
    LogLevel.DEBUG: LevelStyle(0, "·", DIM),
    LogLevel.INFO: LevelStyle(1, "✓", "32"),
    LogLevel.WARN: LevelStyle(2, "⚠", "33"),
    LogLevel.ERROR: LevelStyle(3, "✗", "31"),
}

DETAIL_INDENT = " " * 11


def format_value(value: Any) -> str:
    """Render a detail value: enum -> value, snapshot -> dict, float -> 3 places"""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".") or "0"
    if hasattr(value, "to_dict"):
        return str(value.to_dict())
    return str(value)


class Logger:
    """
    Console logger: one header line per message, then a tree of key/value details.

    Messages below min_level are dropped before any formatting happens.
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFO,
        use_colors: bool = True,
        stream: Optional[TextIO] = None,
    ):
        """
        Args:
            min_level: Lowest level that is written
            use_colors: Emit ANSI escapes (turn off when output is not a terminal)
            stream: Output stream (default: sys.stdout at write time)
        """
        self.min_level = min_level
        self.use_colors = use_colors
        self.stream = stream

    def is_enabled(self, level: LogLevel) -> bool:
        """True if a message at level would be written"""
        return LEVEL_STYLES[level].rank >= LEVEL_STYLES[self.min_level].rank

    def _paint(self, text: str, sgr: str) -> str:
        if self.use_colors:
            return f"\033[{sgr}m{text}\033[{RESET}m"
        return text

    def _write(self, line: str) -> None:
        print(line, file=self.stream or sys.stdout)

    def _header(self, category: LogCategory, level: LogLevel, message: str) -> str:
        style = LEVEL_STYLES[level]
        clock = datetime.now().strftime('[%H:%M:%S]')
        name = self._paint(category.name.ljust(9), CATEGORY_SGR.get(category, "37"))
        return f"{clock} {name} {self._paint(style.symbol, style.sgr)} {self._paint(message, style.sgr)}"

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[list] = None,
        **kwargs
    ):
        """
        Write one message.

        details are preformatted lines placed before the key/value pairs
        taken from kwargs, e.g.

            logger.log(LogCategory.CONFIG, "Parameter clamped", field="speed", value=100)
        """
        if not self.is_enabled(level):
            return

        self._write(self._header(category, level, message))

        lines = list(details or [])
        lines.extend(f"{k}: {format_value(v)}" for k, v in kwargs.items())

        last = len(lines) - 1
        for i, line in enumerate(lines):
            branch = self._paint("└─" if i == last else "├─", DIM)
            self._write(f"{DETAIL_INDENT}{branch} {line}")

    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self, category)


class BoundLogger:
    """Logger view with a fixed category, held at module level."""

    def __init__(self, base: Logger, category: LogCategory):
        self.base = base
        self.category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, **kw):
        self.base.log(self.category, message, level, **kw)

    def is_enabled(self, level: LogLevel) -> bool:
        return self.base.is_enabled(level)

    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)


_logger = Logger()


def get_logger() -> Logger:
    return _logger


def get_category_logger(category: LogCategory) -> BoundLogger:
    return _logger.for_category(category)


def configure_logger(
    min_level: LogLevel = LogLevel.INFO,
    use_colors: bool = True,
    stream: Optional[TextIO] = None,
):
    """
    Reconfigure the shared Logger in place; BoundLoggers created at import
    time see the change.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
    _logger.stream = stream
