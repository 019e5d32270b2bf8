"""
Per-source logging facade.

A Monitor formats `[HH:mm:ss LEVEL SOURCE] message` lines and sends them to
the console (optional, color aware) and to the log file (always).
"""
from __future__ import annotations
import warnings
from datetime import datetime
from typing import Callable, Optional
from gamelog.console import Console, ConsoleProfile, default_console
from gamelog.core.colors import ConsoleColor
from gamelog.core.errors import GameLogError, InvalidArgumentError
from gamelog.core.levels import LogLevel, level_label
from gamelog.exit import ExitHandler
from gamelog.log_file import LineSink

__all__ = ["Monitor"]

class Monitor:
    def __init__(
        self,
        source: str,
        log_file: LineSink,
        *,
        profile: Optional[ConsoleProfile] = None,
        console: Optional[Console] = None,
        exit_handler: Optional[ExitHandler] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if source is None or not str(source).strip():
            raise InvalidArgumentError("source", "The log source cannot be empty.")
        if log_file is None:
            raise InvalidArgumentError("log_file", "The log file manager cannot be None.")
        self._source = source
        self._log_file = log_file
        self._profile = profile
        self._console = console
        self._exit_handler = exit_handler
        self._clock = clock or datetime.now
        # Runtime toggles owned by the host application
        self.show_trace_in_console: bool = False
        self.write_to_console: bool = True

    @property
    def source(self) -> str:
        return self._source

    @property
    def profile(self) -> ConsoleProfile:
        if self._profile is None:
            self._profile = ConsoleProfile.detect()
        return self._profile

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = default_console()
        return self._console

    def log(self, message: str, level: LogLevel = LogLevel.DEBUG):
        """Log a message for the player or developer."""
        self._log_impl(self._source, message, self.profile.color_for(level), level)

    def log_fatal(self, message: str):
        """
        Log a fatal error: white text on a red background with the ERROR label.
        The red background is left in place after the call; callers that need
        the previous background must restore it themselves.
        """
        self.console.set_background(ConsoleColor.RED)
        self._log_impl(self._source, message, ConsoleColor.WHITE, LogLevel.ERROR)

    def legacy_log(self, source: str, message: str, color: ConsoleColor, level: LogLevel = LogLevel.DEBUG):
        """Deprecated: log with an explicit source and color. Use log() instead."""
        if not isinstance(color, ConsoleColor):
            raise TypeError(f"Expected ConsoleColor, got {type(color).__name__}")
        warnings.warn(
            "Monitor.legacy_log is provided for backwards compatibility only; use Monitor.log instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        self._log_impl(source, message, color, level)

    def exit_game_immediately(self, reason: str):
        """Ask the host to exit right away. Only for irrecoverable errors."""
        if self._exit_handler is None:
            raise GameLogError(f"No exit handler is configured for monitor '{self._source}'")
        self._exit_handler.exit_immediately(self._source, reason)

    def format_line(self, source: str, message: str, level: LogLevel, when: Optional[datetime] = None) -> str:
        when = when or self._clock()
        return f"[{when:%H:%M:%S} {level_label(level)} {source}] {message}"

    def _log_impl(self, source: str, message: str, color: ConsoleColor, level: LogLevel):
        line = self.format_line(source, message, level)

        # A detached console (pythonw, closed stdout) only skips the console write
        console = self.console
        if self.write_to_console and (self.show_trace_in_console or level != LogLevel.TRACE) and console.available:
            if self.profile.supports_color:
                console.set_foreground(color)
                console.write_line(line, colored=True)
                console.reset_color()
            else:
                console.write_line(line)
        self._log_file.write_line(line)

    def __repr__(self):
        return f"Monitor(source={self._source!r})"
