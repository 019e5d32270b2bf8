"""
Console sink with tracked foreground/background color state.

Color state is shared by every monitor writing to the same console and is not
locked; interleaved writes from several threads can mix colors.
"""
from __future__ import annotations
import sys
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Mapping, TextIO
from colorama import just_fix_windows_console
from gamelog.core.colors import (
    ConsoleColor, DEFAULT_LEVEL_COLORS, RESET, back_code, colors_disabled, fore_code,
)
from gamelog.core.errors import GameLogError
from gamelog.core.levels import LogLevel
from gamelog.core.logging import logger

__all__ = ["Console", "ConsoleProfile", "default_console", "probe_color_support"]

class Console:
    def __init__(self, stream: TextIO | None = None):
        self._stream = stream
        self.foreground: ConsoleColor | None = None
        self.background: ConsoleColor | None = None

    def _resolve(self) -> TextIO | None:
        # Resolve sys.stdout lazily so redirection after startup is honoured
        stream = self._stream if self._stream is not None else sys.stdout
        if stream is None or getattr(stream, "closed", False):
            return None
        return stream

    @property
    def available(self) -> bool:
        return self._resolve() is not None

    @property
    def stream(self) -> TextIO:
        stream = self._resolve()
        if stream is None:
            raise GameLogError("No console stream is available")
        return stream

    def set_foreground(self, color: ConsoleColor | None):
        if color is not None and not isinstance(color, ConsoleColor):
            raise TypeError(f"Expected ConsoleColor, got {type(color).__name__}")
        self.stream  # raises when there is nothing to color
        self.foreground = color

    def set_background(self, color: ConsoleColor | None):
        if color is not None and not isinstance(color, ConsoleColor):
            raise TypeError(f"Expected ConsoleColor, got {type(color).__name__}")
        self.background = color

    def reset_color(self):
        """Reset the foreground. The background stays until reset_background()."""
        self.foreground = None

    def reset_background(self):
        self.background = None

    def write_line(self, text: str, colored: bool = False):
        """Write one line; does nothing when there is no console to write to."""
        out = self._resolve()
        if out is None:
            return
        if colored:
            out.write(f"{back_code(self.background)}{fore_code(self.foreground)}{text}{RESET}\n")
        else:
            out.write(f"{text}\n")
        out.flush()


@lru_cache(maxsize=None)
def default_console() -> Console:
    return Console()


def probe_color_support(console: Console) -> bool:
    """Set the foreground to itself; any failure means no color support."""
    if colors_disabled():
        return False
    try:
        console.set_foreground(console.foreground)
        return True
    except Exception as e:
        logger.debug("ConsoleColorUnsupported", error=str(e))
        return False


@dataclass(frozen=True)
class ConsoleProfile:
    """Process-wide console facts, computed once and shared by all monitors."""
    supports_color: bool
    colors: Mapping[LogLevel, ConsoleColor] = field(default_factory=lambda: DEFAULT_LEVEL_COLORS)

    def color_for(self, level: LogLevel) -> ConsoleColor:
        return self.colors[LogLevel(level)]

    @staticmethod
    @lru_cache(maxsize=None)
    def detect() -> "ConsoleProfile":
        just_fix_windows_console()
        supported = probe_color_support(default_console())
        logger.debug("ConsoleProfileDetected", supports_color=supported)
        return ConsoleProfile(supports_color=supported)
