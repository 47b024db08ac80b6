"""Persistent JSON config helpers.

Stores the reviewer name, preferred review type, and the status filter the
dashboard opens with. Missing or malformed config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from platformdirs import user_config_dir

from ..model import REVIEW_TYPE_PLAN, REVIEW_TYPES
from ..tree_model import STATUS_FILTER_ALL, STATUS_FILTERS

logger = logging.getLogger(__name__)

APP_NAME = "lazyreview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


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
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("could not write config %s: %s", CONFIG_PATH, exc)


def _save_key(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def default_reviewer() -> str:
    """Best-effort reviewer name from the login environment."""
    return os.environ.get("USER") or os.environ.get("USERNAME") or ""


def load_reviewer() -> str:
    """Return the configured reviewer, or the login name when unset."""
    value = load_config().get("reviewer")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default_reviewer()


def save_reviewer(reviewer: str) -> None:
    _save_key("reviewer", reviewer.strip())


def load_review_type() -> str:
    """Return the configured review type; unknown values fall back to ``plan``."""
    value = load_config().get("review_type")
    return value if isinstance(value, str) and value in REVIEW_TYPES else REVIEW_TYPE_PLAN


def save_review_type(review_type: str) -> None:
    if review_type not in REVIEW_TYPES:
        raise ValueError(f"unknown review type: {review_type}")
    _save_key("review_type", review_type)


def load_status_filter() -> str:
    value = load_config().get("status_filter")
    return value if isinstance(value, str) and value in STATUS_FILTERS else STATUS_FILTER_ALL


def save_status_filter(status_filter: str) -> None:
    if status_filter not in STATUS_FILTERS:
        raise ValueError(f"unknown status filter: {status_filter}")
    _save_key("status_filter", status_filter)
