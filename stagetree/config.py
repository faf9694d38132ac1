"""stagetree settings kept as one JSON object under the user config dir.

Keys: ``git_timeout_seconds``, ``include_untracked`` and ``theme``. Each typed
loader returns its default when the key is absent or holds the wrong type.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .git_backend import DEFAULT_GIT_TIMEOUT_SECONDS

APP_NAME = "stagetree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Read stagetree settings from ``CONFIG_PATH``.

    Anything other than a readable JSON object yields ``{}`` so every typed
    accessor below falls back to its default.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Write stagetree settings back to ``CONFIG_PATH``.

    A read-only or missing config directory never blocks building the tree,
    so write failures are dropped.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_git_timeout_seconds() -> float:
    """Return the per-command git timeout; only positive numbers are accepted."""
    value = load_config().get("git_timeout_seconds")
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return DEFAULT_GIT_TIMEOUT_SECONDS
    return float(value)


def load_include_untracked() -> bool:
    """Return whether untracked files join the change list (default ``True``)."""
    value = load_config().get("include_untracked")
    return value if isinstance(value, bool) else True


def load_theme_name() -> str | None:
    """Return the saved ``theme`` key stripped, or ``None`` when blank or not a string."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Store ``theme_name`` as the default for later runs; blank names are ignored."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)
