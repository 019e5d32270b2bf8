"""
Process-exit collaborator.

Monitors only request an exit; an ExitHandler decides how the host stops.
"""
from __future__ import annotations
import sys
from typing import TYPE_CHECKING, Callable, Optional, Protocol
from gamelog.core.logging import logger

if TYPE_CHECKING:
    from gamelog.monitor import Monitor

__all__ = ["ExitHandler", "ProcessExit"]

class ExitHandler(Protocol):
    def exit_immediately(self, source: str, reason: str) -> None: ...


class ProcessExit:
    def __init__(self, monitor: Optional["Monitor"] = None, exit_code: int = 1,
                 terminate: Callable[[int], object] = sys.exit):
        self.monitor = monitor
        self.exit_code = exit_code
        self._terminate = terminate

    def exit_immediately(self, source: str, reason: str):
        logger.warn("ExitRequested", source=source, reason=reason)
        if self.monitor is not None:
            self.monitor.log_fatal(f"{source} requested an immediate game shutdown: {reason}")
        self._terminate(self.exit_code)
