"""
Console colors and their ANSI codes.
Codes come from colorama; a color without a code renders uncolored.
"""
from __future__ import annotations
import os
from enum import Enum
from types import MappingProxyType
from typing import Mapping
from colorama import Back, Fore, Style
from gamelog.core.errors import InvalidArgumentError
from gamelog.core.levels import LogLevel

COLOR_DISABLED_ENV = "GAMELOG_COLOR_DISABLED"

class ConsoleColor(Enum):
    BLACK = "black"
    DARK_BLUE = "dark_blue"
    DARK_GREEN = "dark_green"
    DARK_CYAN = "dark_cyan"
    DARK_RED = "dark_red"
    DARK_MAGENTA = "dark_magenta"
    DARK_YELLOW = "dark_yellow"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    BLUE = "blue"
    GREEN = "green"
    CYAN = "cyan"
    RED = "red"
    MAGENTA = "magenta"
    YELLOW = "yellow"
    WHITE = "white"

    @classmethod
    def parse(cls, text: str) -> "ConsoleColor":
        key = (text or "").strip().lower().replace("-", "_").replace(" ", "_")
        for color in cls:
            if color.value == key or color.name.lower() == key:
                return color
        raise InvalidArgumentError("color", f"unknown console color '{text}'")


# Classic 16-color console palette: dark shades are the normal ANSI colors,
# bright shades the LIGHT*_EX variants.
_FORE = {
    ConsoleColor.BLACK: Fore.BLACK,
    ConsoleColor.DARK_BLUE: Fore.BLUE,
    ConsoleColor.DARK_GREEN: Fore.GREEN,
    ConsoleColor.DARK_CYAN: Fore.CYAN,
    ConsoleColor.DARK_RED: Fore.RED,
    ConsoleColor.DARK_MAGENTA: Fore.MAGENTA,
    ConsoleColor.DARK_YELLOW: Fore.YELLOW,
    ConsoleColor.GRAY: Fore.WHITE,
    ConsoleColor.DARK_GRAY: Fore.LIGHTBLACK_EX,
    ConsoleColor.BLUE: Fore.LIGHTBLUE_EX,
    ConsoleColor.GREEN: Fore.LIGHTGREEN_EX,
    ConsoleColor.CYAN: Fore.LIGHTCYAN_EX,
    ConsoleColor.RED: Fore.LIGHTRED_EX,
    ConsoleColor.MAGENTA: Fore.LIGHTMAGENTA_EX,
    ConsoleColor.YELLOW: Fore.LIGHTYELLOW_EX,
    ConsoleColor.WHITE: Fore.LIGHTWHITE_EX,
}

_BACK = {
    ConsoleColor.BLACK: Back.BLACK,
    ConsoleColor.DARK_BLUE: Back.BLUE,
    ConsoleColor.DARK_GREEN: Back.GREEN,
    ConsoleColor.DARK_CYAN: Back.CYAN,
    ConsoleColor.DARK_RED: Back.RED,
    ConsoleColor.DARK_MAGENTA: Back.MAGENTA,
    ConsoleColor.DARK_YELLOW: Back.YELLOW,
    ConsoleColor.GRAY: Back.WHITE,
    ConsoleColor.DARK_GRAY: Back.LIGHTBLACK_EX,
    ConsoleColor.BLUE: Back.LIGHTBLUE_EX,
    ConsoleColor.GREEN: Back.LIGHTGREEN_EX,
    ConsoleColor.CYAN: Back.LIGHTCYAN_EX,
    ConsoleColor.RED: Back.LIGHTRED_EX,
    ConsoleColor.MAGENTA: Back.LIGHTMAGENTA_EX,
    ConsoleColor.YELLOW: Back.LIGHTYELLOW_EX,
    ConsoleColor.WHITE: Back.LIGHTWHITE_EX,
}

RESET = Style.RESET_ALL

DEFAULT_LEVEL_COLORS: Mapping[LogLevel, ConsoleColor] = MappingProxyType({
    LogLevel.TRACE: ConsoleColor.DARK_GRAY,
    LogLevel.DEBUG: ConsoleColor.DARK_GRAY,
    LogLevel.INFO: ConsoleColor.WHITE,
    LogLevel.WARN: ConsoleColor.YELLOW,
    LogLevel.ERROR: ConsoleColor.RED,
    LogLevel.ALERT: ConsoleColor.MAGENTA,
})


def colors_disabled() -> bool:
    return os.environ.get(COLOR_DISABLED_ENV) == '1'

def fore_code(color: ConsoleColor | None) -> str:
    """ANSI foreground sequence for a color, or '' when there is none."""
    if color is None:
        return ''
    return _FORE.get(color, '')

def back_code(color: ConsoleColor | None) -> str:
    if color is None:
        return ''
    return _BACK.get(color, '')
