"""
User preferences: connection target and window geometry. Stored as JSON in the user data directory.
Connection state itself is never persisted; every run starts Disconnected.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from ..db.connection import ConnectionConfig

logger = logging.getLogger(__name__)

# Environment variable -> ConnectionConfig field. Applied on top of preferences.json.
ENV_OVERRIDES = {
    "MYSQL_TOGGLE_HOST": "host",
    "MYSQL_TOGGLE_PORT": "port",
    "MYSQL_TOGGLE_DATABASE": "database",
    "MYSQL_TOGGLE_USER": "user",
    "MYSQL_TOGGLE_PASSWORD": "password",
    "MYSQL_TOGGLE_CONNECT_TIMEOUT": "connect_timeout",
}


def get_data_dir() -> Path:
    """Return the user data directory (preferences, log file). Created if missing."""
    env = os.environ.get("MYSQL_TOGGLE_DATA")
    base = Path(env) if env else Path.home() / ".mysql_toggle"
    base.mkdir(parents=True, exist_ok=True)
    return base


def _preferences_path() -> Path:
    return get_data_dir() / "preferences.json"


def load_preferences() -> dict[str, Any]:
    """Load preferences from disk. Returns dict; missing file or invalid JSON => {}."""
    path = _preferences_path()
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError):
        logger.warning("Could not read %s; using defaults", path)
        return {}
    return data if isinstance(data, dict) else {}


def save_preferences(prefs: dict[str, Any]) -> None:
    """Save preferences to disk."""
    path = _preferences_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(prefs, f, indent=2)


def load_connection_config() -> ConnectionConfig:
    """
    Connection target from preferences ("connection" object), then environment overrides.
    An invalid value anywhere falls back to the defaults for the whole target.
    """
    stored = load_preferences().get("connection")
    options: dict[str, Any] = dict(stored) if isinstance(stored, dict) else {}
    for env_name, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value is not None:
            options[key] = value
    try:
        return ConnectionConfig.from_mapping(options)
    except ValueError as e:
        logger.warning("Invalid connection settings (%s); using defaults", e)
        return ConnectionConfig()


def save_connection_config(config: ConnectionConfig) -> None:
    """Persist the connection target. The password is not written to disk."""
    prefs = load_preferences()
    prefs["connection"] = config.to_mapping(include_password=False)
    save_preferences(prefs)


def get_window_geometry() -> str | None:
    """Saved main window geometry (base64). None if not set."""
    prefs = load_preferences()
    return prefs.get("window_geometry")


def set_window_geometry(geometry_b64: str) -> None:
    """Save main window geometry (base64 from QMainWindow.saveGeometry())."""
    prefs = load_preferences()
    prefs["window_geometry"] = geometry_b64
    save_preferences(prefs)
