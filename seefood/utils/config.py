"""Configuration Management

Loads configuration from a YAML file and environment variables.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from ..services.credentials import default_search_dir


class Config:
    """Configuration manager for the application."""

    DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "settings.yaml"

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration.

        Args:
            config_path: Optional path to configuration file.
        """
        # Load environment variables from .env file
        load_dotenv()

        self.config_path = Path(
            config_path or os.environ.get("CONFIG_FILE", self.DEFAULT_CONFIG_PATH)
        )

        self._config = self._load_config()

    def _load_config(self) -> dict:
        """Read the settings file.

        A missing file, or one whose top level is not a mapping, yields
        an empty configuration so every property falls back to its default.
        """
        if not self.config_path.is_file():
            return {}
        with self.config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as ``ui.banner_font_size``."""
        node = self._config
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    @property
    def credentials_dir(self) -> Path:
        """Get the folder scanned for the service account key.

        Returns:
            Path to the credentials folder.
        """
        path = os.environ.get("SEEFOOD_CREDENTIALS_DIR")
        if path:
            return Path(path)
        folder = self.get("credentials.search_dir")
        if folder:
            return Path(folder)
        return default_search_dir()

    @property
    def credentials_pattern(self) -> str:
        """Get the glob pattern a credentials file must match."""
        return self.get("credentials.pattern", "*.json")

    @property
    def match_text(self) -> str:
        """Get the label substring that means "hot dog"."""
        return self.get("vision.match_text", "Hot dog")

    @property
    def initial_dir(self) -> Path:
        """Get the folder the file picker opens in."""
        return Path(self.get("ui.initial_dir", "src/images"))

    @property
    def banner_font_size(self) -> int:
        """Get the banner font size in pixels."""
        return self.get("ui.banner_font_size", 36)

    @property
    def log_level(self) -> str:
        """Get logging level.

        Returns:
            Log level string.
        """
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[Path]:
        """Get log file path.

        Returns:
            Path to log file, or None to log to the console only.
        """
        path = self.get("logging.file")
        return Path(path) if path else None

    @property
    def debug(self) -> bool:
        """Check if debug mode is enabled.

        Returns:
            True if debug mode is enabled.
        """
        return os.environ.get("DEBUG", "").lower() in ("true", "1", "yes")
