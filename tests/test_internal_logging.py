import io
from gamelog.core.logging import Logger

def test_threshold_filters():
    stream = io.StringIO()
    log = Logger("WARN", stream=stream)
    log.info("Quiet")
    log.warn("Loud", path="/tmp/x")
    out = stream.getvalue()
    assert "Quiet" not in out
    assert "[gamelog WARN] Loud path=/tmp/x" in out

def test_set_level_falls_back_to_warn():
    log = Logger("DEBUG", stream=io.StringIO())
    log.set_level("info")
    assert log.enabled("INFO") and not log.enabled("DEBUG")
    log.set_level("bogus")
    assert not log.enabled("INFO") and log.enabled("WARN")

def test_records_use_level_colors():
    from gamelog.core.colors import DEFAULT_LEVEL_COLORS, fore_code
    from gamelog.core.levels import LogLevel
    stream = io.StringIO()
    log = Logger(LogLevel.DEBUG, stream=stream)
    log.error("SaveFailed")
    assert stream.getvalue().startswith(fore_code(DEFAULT_LEVEL_COLORS[LogLevel.ERROR]))
