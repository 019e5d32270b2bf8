from __future__ import annotations
import io
from datetime import datetime
from gamelog.console import Console, ConsoleProfile
from gamelog.monitor import Monitor

FIXED = datetime(2024, 5, 1, 14, 5, 9)

class RecordingSink:
    """In-memory file sink."""
    def __init__(self):
        self.lines = []

    def write_line(self, text: str):
        self.lines.append(text)

def make_monitor(source="Core", color=False, sink=None, **kw):
    sink = sink if sink is not None else RecordingSink()
    stream = io.StringIO()
    monitor = Monitor(source, sink, profile=ConsoleProfile(supports_color=color),
                      console=Console(stream), clock=lambda: FIXED, **kw)
    return monitor, sink, stream
