"""
Internal diagnostics for gamelog itself (settings, log file, color probe, exits).
Records go to stderr as `event key=value` lines, colored like monitor output.
"""
from __future__ import annotations
import sys
from datetime import datetime
from typing import Any, TextIO, Union
from gamelog.core.colors import DEFAULT_LEVEL_COLORS, RESET, fore_code
from gamelog.core.errors import InvalidArgumentError
from gamelog.core.levels import LogLevel

LevelLike = Union[LogLevel, str]

def _as_level(level: LevelLike) -> LogLevel:
    return level if isinstance(level, LogLevel) else LogLevel.parse(str(level))

class Logger:
    def __init__(self, level: LevelLike = LogLevel.WARN, stream: TextIO | None = None):
        self.threshold = _as_level(level)
        self._stream = stream

    def set_level(self, level: LevelLike):
        try:
            self.threshold = _as_level(level)
        except InvalidArgumentError:
            self.threshold = LogLevel.WARN

    def enabled(self, level: LevelLike) -> bool:
        return _as_level(level) >= self.threshold

    def _emit(self, level: LogLevel, event: str, **extra: Any):
        if level < self.threshold:
            return
        ts = datetime.now().isoformat(timespec="seconds")
        fields = "".join(f" {k}={v}" for k, v in extra.items())
        color = fore_code(DEFAULT_LEVEL_COLORS[level])
        stream = self._stream or sys.stderr
        if stream is not None:
            stream.write(f"{color}{ts} [gamelog {level.name}] {event}{fields}{RESET}\n")

    def debug(self, event: str, **kw): self._emit(LogLevel.DEBUG, event, **kw)
    def info(self, event: str, **kw): self._emit(LogLevel.INFO, event, **kw)
    def warn(self, event: str, **kw): self._emit(LogLevel.WARN, event, **kw)
    def error(self, event: str, **kw): self._emit(LogLevel.ERROR, event, **kw)

logger = Logger()
