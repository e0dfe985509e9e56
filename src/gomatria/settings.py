"""Per-user configuration for gomatria.

The config directory holds user cipher definitions (``*.json``), the
reverse index database and a small ``settings.json``. Its location is the
platform user config directory plus ``gomatria``; the ``GOMATRIA_HOME``
environment variable (also read from a ``.env`` file) overrides it.
"""

from __future__ import annotations

import json
import logging
import os
import platform
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

_APP_NAME = "gomatria"
_SETTINGS_FILE = "settings.json"
_DATABASE_FILE = "gomatria.db"
_HOME_ENV = "GOMATRIA_HOME"

DEFAULT_CIPHER = "aq36"

load_dotenv(find_dotenv(usecwd=True))


def _get_user_config_dir() -> Path:
    """Return a platform-appropriate per-user config directory root."""
    system = platform.system()
    home = Path.home()
    if system == "Windows":
        appdata = os.getenv("APPDATA")
        if appdata:
            return Path(appdata)
        return home / "AppData" / "Roaming"
    if system == "Darwin":
        return home / "Library" / "Application Support"
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return home / ".config"


def config_dir() -> Path:
    override = os.getenv(_HOME_ENV)
    if override:
        return Path(override).expanduser()
    return _get_user_config_dir() / _APP_NAME


def ensure_config_dir() -> Path:
    d = config_dir()
    d.mkdir(parents=True, exist_ok=True)
    # restrict permissions on POSIX systems where the filesystem allows it
    if os.name == "posix":
        try:
            d.chmod(0o700)
        except OSError:
            logger.debug("could not restrict permissions on %s", d)
    return d


def settings_path() -> Path:
    return config_dir() / _SETTINGS_FILE


def load_settings() -> Dict[str, Any]:
    p = settings_path()
    if not p.exists():
        return {}
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: not a JSON object", p)
        return {}
    return data


def save_settings(data: Dict[str, Any]) -> None:
    p = ensure_config_dir() / _SETTINGS_FILE
    # atomic write: write to temp then replace
    tmp = p.with_suffix(".tmp")
    try:
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(str(tmp), str(p))
    finally:
        if tmp.exists():
            tmp.unlink()


def get_setting(key: str, default: Optional[Any] = None) -> Any:
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> None:
    s = load_settings()
    s[key] = value
    save_settings(s)


def database_path() -> Path:
    """Location of the reverse index database.

    A ``database`` setting (absolute, or relative to the config directory)
    takes precedence over ``<config dir>/gomatria.db``.
    """
    val = get_setting("database")
    if val:
        p = Path(val).expanduser()
        if not p.is_absolute():
            p = config_dir() / p
        return p
    return config_dir() / _DATABASE_FILE


def get_default_cipher() -> str:
    val = get_setting("default_cipher")
    if isinstance(val, str) and val:
        return val
    return DEFAULT_CIPHER


def set_default_cipher(name: str) -> None:
    """Persist the cipher used when ``-c`` is not given."""
    if not name:
        return
    set_setting("default_cipher", name)
