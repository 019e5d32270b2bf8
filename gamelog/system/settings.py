from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields, replace
from pathlib import Path
from typing import Any, Callable, List
from gamelog.core.errors import InvalidArgumentError
from gamelog.core.logging import logger

SETTINGS_FILENAME = ".gamelog_settings.json"
SETTINGS_ENV = "GAMELOG_SETTINGS"
INTERNAL_LEVELS = {"DEBUG","INFO","WARN","ERROR"}

@dataclass
class SettingsData:
    show_trace_in_console: bool = False   # TRACE lines go to the file only unless set
    write_to_console: bool = True         # disable when the host has no console
    log_path: str = "logs/game.log"
    color_disabled: bool = False
    internal_log_level: str = "WARN"      # gamelog's own diagnostics: DEBUG / INFO / WARN / ERROR

    def normalize(self):
        defaults = SettingsData()
        for name in ("show_trace_in_console", "write_to_console", "color_disabled"):
            if not isinstance(getattr(self, name), bool):
                setattr(self, name, getattr(defaults, name))
        if not isinstance(self.log_path, str) or not self.log_path.strip():
            self.log_path = defaults.log_path
        lvl = str(self.internal_log_level).upper()
        self.internal_log_level = lvl if lvl in INTERNAL_LEVELS else defaults.internal_log_level

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = Path(path)
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        env = os.environ.get(SETTINGS_ENV)
        if env:
            return Path(env)
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: str | Path | None = None) -> "Settings":
        path = Path(path) if path is not None else cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                if not isinstance(raw, dict):
                    raise ValueError("settings file must contain a JSON object")
                # Backfill missing fields (migration safe)
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", path=str(self.path), error=str(e))

    def update(self, **changes: Any):
        unknown = set(changes) - {f.name for f in fields(SettingsData)}
        if unknown:
            raise InvalidArgumentError("settings", f"unknown settings: {', '.join(sorted(unknown))}")
        self.data = replace(self.data, **changes)
        self.data.normalize()
        logger.set_level(self.data.internal_log_level)
        self._notify()

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)
