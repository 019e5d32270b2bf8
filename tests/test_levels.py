import pytest
from gamelog.core.errors import InvalidArgumentError
from gamelog.core.levels import LogLevel, MAX_LEVEL_LENGTH, level_label

def test_levels_are_ordered():
    names = [lvl.name for lvl in sorted(LogLevel)]
    assert names == ["TRACE", "DEBUG", "INFO", "WARN", "ERROR", "ALERT"]

def test_max_level_length_is_longest_name():
    assert MAX_LEVEL_LENGTH == 5

@pytest.mark.parametrize("level", list(LogLevel))
def test_labels_are_padded_to_max_length(level):
    label = level_label(level)
    assert len(label) == MAX_LEVEL_LENGTH
    assert label.rstrip() == level.name.upper()

def test_short_names_gain_trailing_space():
    assert level_label(LogLevel.INFO) == "INFO "
    assert level_label(LogLevel.WARN) == "WARN "
    assert level_label(LogLevel.ALERT) == "ALERT"

def test_parse_is_case_insensitive():
    assert LogLevel.parse("warn") is LogLevel.WARN
    assert LogLevel.parse(" Trace ") is LogLevel.TRACE

def test_parse_unknown_level():
    with pytest.raises(InvalidArgumentError) as exc:
        LogLevel.parse("verbose")
    assert exc.value.name == "level"
