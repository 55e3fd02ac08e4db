#!/usr/bin/env python3
"""
Workflow Hints - Configuration

Reads settings from a JSON config file using dot-notation paths.

Example wf-hints.json:
    {
      "theme": "pirate",
      "suggestions": {"limit": 3, "maxAliases": 2}
    }

Environment:
    WF_HINTS_INSTALL_DIR  - Base directory (default ~/.config/wf-hints)
    WF_HINTS_CONFIG_FILE  - Config file path (default <install>/config/wf-hints.json)
    WF_HINTS_THEME        - Theme override
"""

import json
import os
from pathlib import Path
from typing import Optional

from .matcher import DEFAULT_MAX_ALIASES, DEFAULT_SUGGESTION_LIMIT
from .templates import THEME_HEADERS, THEME_STANDARD


def get_install_dir() -> str:
    """Base directory for config and logs."""
    return os.environ.get(
        "WF_HINTS_INSTALL_DIR",
        str(Path.home() / ".config" / "wf-hints")
    )


def get_config_value(path: str, config_file: str):
    """Read a value from JSON config using dot-notation path. Returns the value or None."""
    parts = path.split('.')

    try:
        with open(config_file, 'r') as f:
            data = json.load(f)
    except (OSError, ValueError):
        return None

    for part in parts:
        if isinstance(data, dict):
            data = data.get(part)
        else:
            return None

    return data


class HintConfig:
    """Configuration for hint rendering and suggestions."""

    def __init__(self, config_file: Optional[str] = None):
        """Initialize config. Values are read lazily from the file."""
        self.install_dir = get_install_dir()
        self.config_file = config_file or os.environ.get(
            "WF_HINTS_CONFIG_FILE",
            os.path.join(self.install_dir, "config", "wf-hints.json")
        )

    def _get_positive_int(self, path: str, default: int) -> int:
        value = get_config_value(path, self.config_file)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            return default
        return value

    @property
    def theme(self) -> str:
        """Hint header theme: 'standard' or 'pirate'."""
        theme = os.environ.get("WF_HINTS_THEME") or get_config_value("theme", self.config_file)
        if theme not in THEME_HEADERS:
            return THEME_STANDARD
        return theme

    @property
    def suggestion_limit(self) -> int:
        return self._get_positive_int("suggestions.limit", DEFAULT_SUGGESTION_LIMIT)

    @property
    def max_aliases(self) -> int:
        return self._get_positive_int("suggestions.maxAliases", DEFAULT_MAX_ALIASES)

    @property
    def log_dir(self) -> Path:
        return Path(self.install_dir) / "logs"
