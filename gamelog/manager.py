from __future__ import annotations
from datetime import datetime
from typing import Callable, Dict, Optional
from gamelog.console import Console, ConsoleProfile
from gamelog.core.logging import logger
from gamelog.exit import ExitHandler, ProcessExit
from gamelog.log_file import LineSink, LogFileManager
from gamelog.monitor import Monitor
from gamelog.system.settings import Settings, SettingsData

HOST_SOURCE = "GameLog"

class LogManager:
    """
    Owns the shared log file and hands out one Monitor per source.

    show_trace_in_console and write_to_console follow settings changes live.
    log_path and color_disabled are fixed when the manager is built; changing
    them later only takes effect in a new LogManager.
    """

    def __init__(self, settings: Settings, log_file: Optional[LineSink] = None,
                 profile: Optional[ConsoleProfile] = None, console: Optional[Console] = None,
                 exit_handler: Optional[ExitHandler] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.settings = settings
        self._owns_file = log_file is None
        self.log_file: LineSink = log_file if log_file is not None else LogFileManager(settings.data.log_path)
        if profile is None:
            profile = ConsoleProfile.detect()
        if settings.data.color_disabled:
            profile = ConsoleProfile(supports_color=False, colors=profile.colors)
        self.profile = profile
        self._fixed = {"log_path": settings.data.log_path, "color_disabled": settings.data.color_disabled}
        self.console = console
        self._clock = clock
        self._monitors: Dict[str, Monitor] = {}
        logger.set_level(settings.data.internal_log_level)
        self.exit_handler: Optional[ExitHandler] = exit_handler
        if self.exit_handler is None:
            self.exit_handler = ProcessExit(self._new_monitor(HOST_SOURCE))
        settings.on_change(self._apply_settings)

    def _new_monitor(self, source: str) -> Monitor:
        monitor = Monitor(source, self.log_file, profile=self.profile, console=self.console,
                          exit_handler=self.exit_handler, clock=self._clock)
        self._configure(monitor, self.settings.data)
        return monitor

    def get_monitor(self, source: str) -> Monitor:
        monitor = self._monitors.get(source)
        if monitor is None:
            monitor = self._new_monitor(source)
            self._monitors[source] = monitor
            logger.debug("MonitorCreated", source=source)
        return monitor

    def monitors(self):
        return dict(self._monitors)

    @staticmethod
    def _configure(monitor: Monitor, data: SettingsData):
        monitor.show_trace_in_console = data.show_trace_in_console
        monitor.write_to_console = data.write_to_console

    def _apply_settings(self, data: SettingsData):
        for monitor in self._monitors.values():
            self._configure(monitor, data)
        if isinstance(self.exit_handler, ProcessExit) and self.exit_handler.monitor is not None:
            self._configure(self.exit_handler.monitor, data)
        for name, applied in self._fixed.items():
            if getattr(data, name) != applied:
                logger.warn("SettingNeedsNewLogManager", setting=name, active=applied, requested=getattr(data, name))

    def close(self):
        if self._owns_file and isinstance(self.log_file, LogFileManager):
            self.log_file.close()

    def __enter__(self) -> "LogManager":
        return self

    def __exit__(self, *exc):
        self.close()
