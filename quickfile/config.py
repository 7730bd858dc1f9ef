"""Persistent JSON config helpers.

Stores the listing endpoint, request timeout, workspace roots, UI theme and
preferred opener. Reads are defensive: malformed or missing config falls
back to defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from platformdirs import user_config_dir

from .remote.listing import DEFAULT_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

APP_NAME = "quickfile"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
ENDPOINT_ENV_VAR = "QUICKFILE_ENDPOINT"
OPENER_NAMES = ("editor", "print")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored so that a read-only
    config directory never breaks navigation.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_value(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def load_endpoint() -> str | None:
    """Return the listing endpoint URL; the environment variable wins over the file."""
    from_env = os.environ.get(ENDPOINT_ENV_VAR, "").strip()
    if from_env:
        return from_env
    return _load_string("endpoint")


def save_endpoint(endpoint: str) -> None:
    stripped = endpoint.strip()
    if stripped:
        _save_value("endpoint", stripped)


def load_timeout() -> float:
    """Return the request timeout in seconds; non-positive or non-numeric values fall back."""
    value = load_config().get("timeout")
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return DEFAULT_TIMEOUT_SECONDS
    return float(value)


def load_query_param() -> str | None:
    return _load_string("query_param")


def load_workspace_roots() -> list[str]:
    """Return configured workspace roots, keeping only non-empty strings."""
    value = load_config().get("workspace_roots")
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def save_workspace_roots(roots: list[str]) -> None:
    _save_value("workspace_roots", [root for root in roots if root.strip()])


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme")


def save_theme_name(theme_name: str) -> None:
    stripped = str(theme_name).strip()
    if stripped:
        _save_value("theme", stripped)


def load_opener() -> str | None:
    value = _load_string("opener")
    return value if value in OPENER_NAMES else None


def load_local_root() -> str | None:
    """Local directory mirroring the first workspace root, used by the editor opener."""
    return _load_string("local_root")


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ENDPOINT_ENV_VAR",
    "OPENER_NAMES",
    "load_config",
    "save_config",
    "load_endpoint",
    "save_endpoint",
    "load_timeout",
    "load_query_param",
    "load_workspace_roots",
    "save_workspace_roots",
    "load_theme_name",
    "save_theme_name",
    "load_opener",
    "load_local_root",
]
