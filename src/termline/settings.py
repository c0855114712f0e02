"""Render settings with JSON file and environment overrides.

Settings are stored as camelCase JSON, for example::

    {
      "completionMargin": 2,
      "styles": {"currentCompletion": "1;7", "tokens": {"variable": "36"}}
    }

Values from the file are merged over the defaults; ``TERMLINE_SETTINGS``
names such a file and ``TERMLINE_WRITE_LOG`` names a file that receives a
copy of everything written to the terminal.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Mapping

from termline.styles import Styles

logger = logging.getLogger(__name__)

SETTINGS_ENV = "TERMLINE_SETTINGS"
WRITE_LOG_ENV = "TERMLINE_WRITE_LOG"

_SETTINGS_KEYS = {
    "completionMargin": "completion_margin",
    "navigationMargin": "navigation_margin",
    "defaultColumns": "default_columns",
    "defaultRows": "default_rows",
    "writeLogPath": "write_log_path",
}

_STYLE_KEYS = {
    "prompt": "prompt",
    "rprompt": "rprompt",
    "mode": "mode",
    "tip": "tip",
    "completed": "completed",
    "completedHistory": "completed_history",
    "currentCompletion": "current_completion",
    "selectedFile": "selected_file",
    "tokens": "tokens",
}


class SettingsError(ValueError):
    """A settings file could not be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass
class RenderSettings:
    """Layout constants, fallbacks and styles used by the renderer."""

    completion_margin: int = 2
    navigation_margin: int = 1
    # Used when the output is not a terminal and has no size.
    default_columns: int = 80
    default_rows: int = 24
    write_log_path: str = ""
    styles: Styles = field(default_factory=Styles)

    # -- factories ----------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RenderSettings:
        """Build settings from camelCase *data* merged over the defaults."""
        merged = deep_merge_settings(_defaults_as_dict(), dict(data))

        kwargs: dict[str, Any] = {}
        for key, value in merged.items():
            if key == "styles":
                continue
            name = _SETTINGS_KEYS.get(key)
            if name is None:
                logger.debug("Ignoring unknown setting %r", key)
                continue
            kwargs[name] = value

        style_kwargs: dict[str, Any] = {}
        for key, value in merged.get("styles", {}).items():
            name = _STYLE_KEYS.get(key)
            if name is None:
                logger.debug("Ignoring unknown style %r", key)
                continue
            style_kwargs[name] = dict(value) if name == "tokens" else value

        return cls(styles=Styles(**style_kwargs), **kwargs)

    @classmethod
    def load(cls, path: str) -> RenderSettings:
        """Read settings from the JSON file at *path*.

        A missing file yields the defaults; an unreadable or malformed one
        raises :class:`SettingsError`.
        """
        data = _load_from_file(path)
        return cls.from_dict(data)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RenderSettings:
        """Settings from ``TERMLINE_SETTINGS`` and ``TERMLINE_WRITE_LOG``."""
        env = os.environ if environ is None else environ
        path = env.get(SETTINGS_ENV, "")
        settings = cls.load(path) if path else cls()
        write_log = env.get(WRITE_LOG_ENV, "")
        if write_log:
            settings.write_log_path = write_log
        return settings


# --- Deep merge ---


def deep_merge_settings(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge overrides into base settings.

    For nested dicts, merge recursively. For primitives and arrays,
    override value wins completely.
    """
    result = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge_settings(result[key], value)
        else:
            result[key] = value
    return result


# --- Helpers ---


def _defaults_as_dict() -> dict[str, Any]:
    defaults = RenderSettings()
    data = {key: getattr(defaults, name) for key, name in _SETTINGS_KEYS.items()}
    styles = asdict(defaults.styles)
    data["styles"] = {key: styles[name] for key, name in _STYLE_KEYS.items()}
    return data


def _load_from_file(path: str) -> dict[str, Any]:
    if not os.path.exists(path):
        logger.debug("Settings file %s not found, using defaults", path)
        return {}
    try:
        content = Path(path).read_text(encoding="utf-8")
        data = json.loads(content)
    except OSError as e:
        raise SettingsError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise SettingsError(path, f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise SettingsError(path, "top level must be an object")
    return data
