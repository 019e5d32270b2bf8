"""Log severity levels and their fixed-width display labels."""
from __future__ import annotations
from enum import IntEnum
from gamelog.core.errors import InvalidArgumentError

__all__ = ["LogLevel", "MAX_LEVEL_LENGTH", "level_label"]

class LogLevel(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    ALERT = 5

    @classmethod
    def parse(cls, text: str) -> "LogLevel":
        key = (text or "").strip().upper()
        try:
            return cls[key]
        except KeyError:
            names = ", ".join(lvl.name.lower() for lvl in cls)
            raise InvalidArgumentError("level", f"unknown level '{text}' (expected one of: {names})") from None


# Longest level name, computed once for the whole process
MAX_LEVEL_LENGTH = max(len(lvl.name) for lvl in LogLevel)

_LABELS = {lvl: lvl.name.upper().ljust(MAX_LEVEL_LENGTH) for lvl in LogLevel}


def level_label(level: LogLevel) -> str:
    """Uppercase level name right-padded to MAX_LEVEL_LENGTH."""
    return _LABELS[LogLevel(level)]
