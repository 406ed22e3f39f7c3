"""Unified configuration layer for capi_chat.

Goals
-----
* Centralize defaults for the ambient concerns of the package (logging).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``CAPI_CHAT_CONFIG_FILE``
    3. Environment variables (``CAPI_CHAT_LOG_LEVEL``, ``CAPI_CHAT_LOG_JSON``,
       ``CAPI_CHAT_LOG_FILE``)
    4. In-code overrides passed to :func:`get_settings`
* Provide a single call site: ``get_settings()``.

Conversion semantics are deliberately absent from the settings: the wire
converter is a pure function of its input.

External Config File (Optional)
-------------------------------
If ``CAPI_CHAT_CONFIG_FILE`` is set to a path, JSON is attempted first and
YAML (via PyYAML) second. Structure example:

```
log_level: DEBUG
log_json: false
log_file: ~/.capi_chat/wire.log
```
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

import yaml

from .defaults import (
    CONFIG_FILE_ENV,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_JSON,
    DEFAULT_LOG_LEVEL,
    ENV_PREFIX,
)


@dataclass(frozen=True)
class Settings:
    """Resolved settings.

    Attributes:
        log_level: Level name for the shared ``capi_chat`` logger.
        log_json: Emit JSON lines (True) or plain text (False).
        log_file: Optional path of a rotating log file.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = DEFAULT_LOG_JSON
    log_file: Optional[str] = DEFAULT_LOG_FILE


_FIELD_NAMES = tuple(f.name for f in fields(Settings))
_FILE_CACHE: Optional[Dict[str, Any]] = None


def _str_to_bool(val: Any) -> bool:
    """Return True if the value looks truthy ("1", "true", "yes", "on")."""
    if isinstance(val, bool):
        return val
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).expanduser().is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).expanduser().read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = {k: v for k, v in data.items() if k in _FIELD_NAMES}
    return _FILE_CACHE


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in _FIELD_NAMES:
        val = os.getenv(f"{ENV_PREFIX}{name.upper()}")
        if val is not None:
            out[name] = val
    return out


def _coerce(values: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(values)
    if "log_json" in out:
        out["log_json"] = _str_to_bool(out["log_json"])
    if "log_level" in out:
        out["log_level"] = str(out["log_level"]).strip().upper()
    if out.get("log_file") == "":
        out["log_file"] = None
    return out


def get_settings(overrides: Optional[Dict[str, Any]] = None) -> Settings:
    """Return merged settings.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    merged: Dict[str, Any] = {}
    merged |= _load_external_config()
    merged |= _env_overrides()
    if overrides:
        merged |= {k: v for k, v in overrides.items() if k in _FIELD_NAMES and v is not None}
    return replace(Settings(), **_coerce(merged))


def reset_settings_cache() -> None:
    """Forget the cached config file contents (tests and reloads)."""
    global _FILE_CACHE
    _FILE_CACHE = None


__all__ = [
    "Settings",
    "get_settings",
    "reset_settings_cache",
]
