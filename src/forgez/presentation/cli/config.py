"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

from forgez.core.log import get_logger
from forgez.data.session_store import SessionStore

_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_SESSION_ID = "local"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Forgez"
        return Path.home() / "Forgez"
    return Path.home() / ".config" / "forgez"


def get_default_config_path() -> Path:
    return get_user_data_dir() / "config.json"


def get_sessions_dir() -> Path:
    """Return the directory holding per-session snapshots."""
    return get_user_data_dir() / "sessions"


def debug_enabled() -> bool:
    """Return True only when FORGEZ_DEBUG is explicitly set to '1'."""
    return os.getenv("FORGEZ_DEBUG") == "1"


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize_session_id(value: object) -> str:
    try:
        return SessionStore.validate_session_id(value)  # type: ignore[arg-type]
    except ValueError:
        return _DEFAULT_SESSION_ID


def _defaults() -> Dict[str, str]:
    return {"log_level": _DEFAULT_LOG_LEVEL, "session_id": _DEFAULT_SESSION_ID}


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return _defaults()
    except (OSError, ValueError) as exc:
        get_logger(__name__).warning("Ignoring unreadable config %s: %s", config_path, exc)
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    return {
        "log_level": _normalize_log_level(raw.get("log_level")),
        "session_id": _normalize_session_id(raw.get("session_id")),
    }


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "log_level": _normalize_log_level(config.get("log_level")),
        "session_id": _normalize_session_id(config.get("session_id")),
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
