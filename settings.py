from __future__ import annotations

import json
from pathlib import Path
from typing import Any


SETTINGS_PATH = Path(__file__).with_name("settings.json")


def load_settings(path: Path = SETTINGS_PATH) -> dict[str, Any]:
    """Read the settings file, returning an empty mapping when it is absent."""
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return {}


_SETTINGS = load_settings()


def get_setting(key: str, default: Any = None) -> Any:
    """Return the configured value for ``key`` or ``default`` if missing."""
    return _SETTINGS.get(key, default)


_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def get_flag(key: str, default: bool) -> bool:
    """Return ``key`` as a boolean, accepting JSON booleans or yes/no style strings."""
    value = _SETTINGS.get(key, default)
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _TRUE | _FALSE:
        return value.strip().lower() in _TRUE
    raise ValueError(f"setting {key!r} must be a boolean, got {value!r}")
