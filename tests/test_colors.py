import pytest
from colorama import Back, Fore
from gamelog.core.colors import (
    ConsoleColor, DEFAULT_LEVEL_COLORS, back_code, colors_disabled, fore_code,
)
from gamelog.core.errors import InvalidArgumentError
from gamelog.core.levels import LogLevel

def test_default_level_colors():
    assert DEFAULT_LEVEL_COLORS[LogLevel.TRACE] is ConsoleColor.DARK_GRAY
    assert DEFAULT_LEVEL_COLORS[LogLevel.DEBUG] is ConsoleColor.DARK_GRAY
    assert DEFAULT_LEVEL_COLORS[LogLevel.INFO] is ConsoleColor.WHITE
    assert DEFAULT_LEVEL_COLORS[LogLevel.WARN] is ConsoleColor.YELLOW
    assert DEFAULT_LEVEL_COLORS[LogLevel.ERROR] is ConsoleColor.RED
    assert DEFAULT_LEVEL_COLORS[LogLevel.ALERT] is ConsoleColor.MAGENTA

def test_default_level_colors_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_LEVEL_COLORS[LogLevel.INFO] = ConsoleColor.GREEN  # type: ignore[index]

def test_every_color_has_codes():
    for color in ConsoleColor:
        assert fore_code(color)
        assert back_code(color)

def test_codes():
    assert fore_code(ConsoleColor.RED) == Fore.LIGHTRED_EX
    assert back_code(ConsoleColor.RED) == Back.LIGHTRED_EX
    assert fore_code(None) == ''
    assert back_code(None) == ''

def test_parse_color():
    assert ConsoleColor.parse("dark gray") is ConsoleColor.DARK_GRAY
    assert ConsoleColor.parse("Yellow") is ConsoleColor.YELLOW
    with pytest.raises(InvalidArgumentError):
        ConsoleColor.parse("chartreuse")

def test_colors_disabled_env(monkeypatch):
    monkeypatch.delenv("GAMELOG_COLOR_DISABLED", raising=False)
    assert not colors_disabled()
    monkeypatch.setenv("GAMELOG_COLOR_DISABLED", "1")
    assert colors_disabled()
