"""
Configuration module for the nonprofit directory.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        overrides = {
            "SUPABASE_URL": "url",
            "SUPABASE_ANON_KEY": "anon_key",
            "SUPABASE_TABLE": "table",
        }
        for env_name, key in overrides.items():
            value = os.getenv(env_name)
            if value:
                if "datastore" not in self.config:
                    self.config["datastore"] = {}
                self.config["datastore"][key] = value

        # Environment
        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present."""
        required_config = {
            "datastore": ["url", "anon_key"],
        }

        missing_sections = [
            section for section in required_config if section not in self.config
        ]
        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if not self.config[section].get(key):
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        page_size = self.get("directory.default_page_size")
        if page_size is not None and page_size not in constants.PAGE_SIZE_OPTIONS:
            raise ValueError(
                f"directory.default_page_size must be one of {constants.PAGE_SIZE_OPTIONS}, "
                f"got {page_size}"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'datastore.url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def datastore_url(self) -> str:
        """Get datastore base URL."""
        return self.get("datastore.url", "")

    @property
    def datastore_anon_key(self) -> str:
        """Get datastore public (anon) API key."""
        return self.get("datastore.anon_key", "")

    @property
    def datastore_table(self) -> str:
        """Get the table holding organization records."""
        return self.get("datastore.table", constants.DEFAULT_TABLE)

    @property
    def datastore_timeout(self) -> int:
        """Get request timeout in seconds."""
        return self.get("datastore.timeout", constants.DEFAULT_TIMEOUT)

    @property
    def datastore_max_retries(self) -> int:
        """Get maximum transport retry attempts."""
        return self.get("datastore.max_retries", constants.DEFAULT_MAX_RETRIES)

    @property
    def datastore_verify_ssl(self) -> bool:
        """Get SSL verification setting."""
        return self.get("datastore.verify_ssl", True)

    @property
    def default_page_size(self) -> int:
        """Get the initial page size."""
        return self.get("directory.default_page_size", constants.DEFAULT_PAGE_SIZE)

    @property
    def timezone(self) -> str:
        """Get display timezone."""
        return self.get("display.timezone", constants.DEFAULT_TIMEZONE)

    @property
    def log_level(self) -> str:
        """Get log level."""
        return self.get("logging.level", "INFO")

    @property
    def console_log_level(self) -> str:
        """Get the level shown on the console."""
        return self.get("logging.console_level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get the log file path (None when unset, "" to disable file logging)."""
        return self.get("logging.file")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, env={self.get('environment')})"
