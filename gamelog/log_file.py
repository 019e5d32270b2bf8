"""
Log file sink.

Monitors only need an object with `write_line(text)`; LogFileManager is the
default one, writing UTF-8 lines to a single file that is truncated on open.
"""
from __future__ import annotations
import threading
from pathlib import Path
from typing import Protocol, TextIO
from gamelog.core.errors import LogFileError
from gamelog.core.logging import logger

__all__ = ["LineSink", "LogFileManager"]

class LineSink(Protocol):
    def write_line(self, text: str) -> None: ...


class LogFileManager:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._stream: TextIO | None = self.path.open("w", encoding="utf-8")
        except OSError as e:
            raise LogFileError(str(self.path), str(e)) from e
        logger.debug("LogFileOpened", path=str(self.path))

    @property
    def closed(self) -> bool:
        return self._stream is None

    def write_line(self, text: str):
        # Serializes concurrent writers; OS errors are left to the caller
        with self._lock:
            if self._stream is None:
                raise LogFileError(str(self.path), "cannot write to a closed log file")
            self._stream.write(text + "\n")
            self._stream.flush()

    def close(self):
        with self._lock:
            if self._stream is not None:
                self._stream.close()
                self._stream = None
                logger.debug("LogFileClosed", path=str(self.path))

    def __enter__(self) -> "LogFileManager":
        return self

    def __exit__(self, *exc):
        self.close()
