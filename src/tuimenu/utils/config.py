"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional

from rich.errors import StyleSyntaxError
from rich.style import Style

from tuimenu.utils.exceptions import ConfigurationError


def get_tuimenu_dir() -> Path:
    """Get the tuimenu data directory (XDG-compliant)."""
    if env_dir := os.environ.get("TUIMENU_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "tuimenu"


class Config:
    """Application configuration."""

    # Settings that TUIMENU_<NAME> env vars may override, with their type
    ENV_OVERRIDES: dict[str, type] = {
        "items": list,
        "title": str,
        "highlight_style": str,
        "debug": bool,
    }

    def __init__(self, tuimenu_dir: Optional[Path] = None):
        """Load config from directory."""
        self.tuimenu_dir = tuimenu_dir or get_tuimenu_dir()
        self._config_file = self.tuimenu_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        from tuimenu.utils.constants import (
            DEFAULT_HIGHLIGHT_STYLE,
            DEFAULT_ITEMS,
            DEFAULT_TITLE,
        )

        # Set defaults
        self.items: list[str] = list(DEFAULT_ITEMS)
        self.title = DEFAULT_TITLE
        self.highlight_style = DEFAULT_HIGHLIGHT_STYLE
        self.debug = False

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
            except (json.JSONDecodeError, IOError):
                data = {}
            # Top level must be an object; anything else counts as unparseable
            if not isinstance(data, dict):
                data = {}
            self.items = data.get("items", list(DEFAULT_ITEMS))
            self.title = data.get("title", DEFAULT_TITLE)
            self.highlight_style = data.get(
                "highlight_style", DEFAULT_HIGHLIGHT_STYLE
            )
            self.debug = data.get("debug", False)

        # Shell env vars override the file
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply shell TUIMENU_* vars on top of file values."""
        prefix = "TUIMENU_"

        for attr_name, kind in self.ENV_OVERRIDES.items():
            value = os.environ.get(prefix + attr_name.upper())
            if value is None:
                continue
            if kind is bool:
                setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
            elif kind is list:
                setattr(
                    self,
                    attr_name,
                    [part.strip() for part in value.split(",") if part.strip()],
                )
            else:
                setattr(self, attr_name, value)

    def get_items(self) -> list[str]:
        """Return the configured menu labels.

        Raises:
            ConfigurationError: if ``items`` is not a list of strings
        """
        if not isinstance(self.items, list) or not all(
            isinstance(item, str) for item in self.items
        ):
            raise ConfigurationError(
                "'items' must be a list of strings, "
                f"got {type(self.items).__name__}"
            )
        return list(self.items)

    def get_title(self) -> str:
        """Return the panel title.

        Raises:
            ConfigurationError: if ``title`` is not a string
        """
        if not isinstance(self.title, str):
            raise ConfigurationError(
                f"'title' must be a string, got {type(self.title).__name__}"
            )
        return self.title

    def get_highlight_style(self) -> str:
        """Return the selected-entry style, checked against rich's style syntax.

        Raises:
            ConfigurationError: if ``highlight_style`` is not a valid rich style
        """
        if not isinstance(self.highlight_style, str):
            raise ConfigurationError(
                "'highlight_style' must be a string, "
                f"got {type(self.highlight_style).__name__}"
            )
        try:
            Style.parse(self.highlight_style)
        except StyleSyntaxError as e:
            raise ConfigurationError(f"'highlight_style' is not a style: {e}") from e
        return self.highlight_style

    def save(self):
        """Save config to file."""
        self.tuimenu_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "items": self.items,
            "title": self.title,
            "highlight_style": self.highlight_style,
            "debug": self.debug,
        }
        self._config_file.write_text(json.dumps(data, indent=2))

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self.save()

    def get_debug(self) -> bool:
        """Get debug mode status."""
        return self.debug

    @property
    def debug_log_path(self) -> Path:
        """Path of the debug log file."""
        return self.tuimenu_dir / "debug.log"
