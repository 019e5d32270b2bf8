from __future__ import annotations
import argparse
import sys
from typing import List, Optional
from rich.console import Console as RichConsole
from rich.table import Table
from rich.box import ROUNDED
from gamelog.core.colors import ConsoleColor
from gamelog.core.errors import GameLogError, InvalidArgumentError
from gamelog.core.levels import LogLevel, MAX_LEVEL_LENGTH, level_label
from gamelog.console import ConsoleProfile
from gamelog.manager import LogManager
from gamelog.system.settings import Settings

# Rich style names for the classic console palette
RICH_STYLES = {
    ConsoleColor.BLACK: "black",
    ConsoleColor.DARK_BLUE: "blue",
    ConsoleColor.DARK_GREEN: "green",
    ConsoleColor.DARK_CYAN: "cyan",
    ConsoleColor.DARK_RED: "red",
    ConsoleColor.DARK_MAGENTA: "magenta",
    ConsoleColor.DARK_YELLOW: "yellow",
    ConsoleColor.GRAY: "white",
    ConsoleColor.DARK_GRAY: "bright_black",
    ConsoleColor.BLUE: "bright_blue",
    ConsoleColor.GREEN: "bright_green",
    ConsoleColor.CYAN: "bright_cyan",
    ConsoleColor.RED: "bright_red",
    ConsoleColor.MAGENTA: "bright_magenta",
    ConsoleColor.YELLOW: "bright_yellow",
    ConsoleColor.WHITE: "bright_white",
}

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gamelog", description="Leveled console and file logging for game hosts")
    parser.add_argument("--settings", help="Path to a gamelog settings JSON file")
    sub = parser.add_subparsers(dest="command", required=True)

    log_cmd = sub.add_parser("log", help="Write one message to the console and the log file")
    log_cmd.add_argument("source", help="Name of the module logging the message")
    log_cmd.add_argument("message", help="Message text")
    log_cmd.add_argument("--level", default="debug", help="trace, debug, info, warn, error or alert")
    log_cmd.add_argument("--log-file", help="Override the log file path")
    log_cmd.add_argument("--show-trace", action="store_true", help="Show TRACE messages in the console")
    log_cmd.add_argument("--no-console", action="store_true", help="Only write to the log file")
    log_cmd.add_argument("--fatal", action="store_true", help="Log as a fatal error")

    sub.add_parser("levels", help="Show the log levels and their console colors")
    return parser

def show_levels(profile: ConsoleProfile, console: Optional[RichConsole] = None):
    console = console or RichConsole()
    table = Table(title="Log levels", box=ROUNDED)
    table.add_column("Level")
    table.add_column(f"Label ({MAX_LEVEL_LENGTH} wide)")
    table.add_column("Color")
    table.add_column("Console by default")
    for level in LogLevel:
        color = profile.color_for(level)
        style = RICH_STYLES.get(color, "") if profile.supports_color else ""
        table.add_row(level.name.title(), f"'{level_label(level)}'", color.value, "no" if level == LogLevel.TRACE else "yes", style=style)
    console.print(table)

def _log(args, settings: Settings) -> int:
    level = LogLevel.parse(args.level)
    changes = {}
    if args.log_file:
        changes["log_path"] = args.log_file
    if args.show_trace:
        changes["show_trace_in_console"] = True
    if args.no_console:
        changes["write_to_console"] = False
    if changes:
        settings.update(**changes)
    with LogManager(settings) as manager:
        monitor = manager.get_monitor(args.source)
        if args.fatal:
            monitor.log_fatal(args.message)
            monitor.console.reset_background()
        else:
            monitor.log(args.message, level)
    return 0

def run(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings.load(args.settings)
    try:
        if args.command == "levels":
            profile = ConsoleProfile.detect()
            if settings.data.color_disabled:
                profile = ConsoleProfile(supports_color=False, colors=profile.colors)
            show_levels(profile)
            return 0
        return _log(args, settings)
    except InvalidArgumentError as e:
        print(f"gamelog: {e}", file=sys.stderr)
        return 2
    except GameLogError as e:
        print(f"gamelog: {e}", file=sys.stderr)
        return 1

def main():
    sys.exit(run())

if __name__ == "__main__":
    main()
