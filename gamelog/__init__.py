"""
gamelog: leveled console + log file logging for game hosts.

    from gamelog import LogFileManager, Monitor, LogLevel
    monitor = Monitor("Core", LogFileManager("logs/game.log"))
    monitor.log("Started", LogLevel.INFO)
"""
from gamelog.core.colors import ConsoleColor
from gamelog.core.errors import GameLogError, InvalidArgumentError, LogFileError
from gamelog.core.levels import LogLevel, MAX_LEVEL_LENGTH, level_label
from gamelog.console import Console, ConsoleProfile
from gamelog.exit import ProcessExit
from gamelog.log_file import LogFileManager
from gamelog.manager import LogManager
from gamelog.monitor import Monitor
from gamelog.system.settings import Settings, SettingsData

__all__ = [
    "Console", "ConsoleColor", "ConsoleProfile", "GameLogError", "InvalidArgumentError",
    "LogFileError", "LogFileManager", "LogLevel", "LogManager", "MAX_LEVEL_LENGTH",
    "Monitor", "ProcessExit", "Settings", "SettingsData", "level_label",
]
