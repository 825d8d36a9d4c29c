"""Configuration manager for gendesk. Reads settings from ~/.config/gendesk/settings.json."""

import json
import os
from pathlib import Path
from typing import Any

CONFIG_DIR = Path(os.environ.get("GENDESK_CONFIG_DIR", Path.home() / ".config" / "gendesk"))
SETTINGS_FILE = CONFIG_DIR / "settings.json"
CACHE_DIR = Path(os.environ.get("GENDESK_CACHE_DIR", Path.home() / ".cache" / "gendesk"))

DEFAULTS: dict[str, Any] = {
    "icon_search_url": "https://admin.fedoraproject.org/pkgdb/appicon/show/%s",
    "default_icon": "/usr/share/pixmaps/default.png",
    "default_pkgbuild": "../PKGBUILD",
    "download_timeout": 15,
    "terminal": False,
    "startup_notify": False,
}


class Config:
    """Singleton settings manager, user settings merged over DEFAULTS."""

    _instance: "Config | None" = None

    def __new__(cls) -> "Config":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._loaded = False
        return cls._instance

    def __init__(self) -> None:
        if self._loaded:
            return
        self._data: dict[str, Any] = dict(DEFAULTS)
        self._load()
        self._loaded = True

    def _load(self) -> None:
        if SETTINGS_FILE.exists():
            try:
                with open(SETTINGS_FILE, "r") as f:
                    saved = json.load(f)
                if isinstance(saved, dict):
                    self._data.update(saved)
            except (json.JSONDecodeError, OSError):
                pass

    def get(self, key: str, fallback: Any = None) -> Any:
        return self._data.get(key, fallback if fallback is not None else DEFAULTS.get(key))

    @classmethod
    def reload(cls) -> "Config":
        """Drop the cached instance and read the settings file again."""
        cls._instance = None
        return cls()
