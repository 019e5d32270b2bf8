"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class GameLogError(Exception):
    pass

class InvalidArgumentError(GameLogError, ValueError):
    def __init__(self, name: str, detail: str):
        super().__init__(f"Invalid argument '{name}': {detail}")
        self.name = name
        self.detail = detail

class LogFileError(GameLogError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Log file {path}: {detail}")
        self.path = path
        self.detail = detail
