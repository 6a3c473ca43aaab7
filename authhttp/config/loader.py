"""Configuration loader for authhttp.

This module loads the YAML configuration files from the config/ directory
and provides a singleton config object for easy access throughout the library.
"""

import os
from pathlib import Path
from typing import Any, cast

import yaml

from authhttp.exceptions import ConfigurationError

CONFIG_DIR_ENV = "AUTHHTTP_CONFIG_DIR"


class Config:
    """Configuration manager that loads and provides access to all config files."""

    def __init__(self, config_dict: dict[str, Any] | None = None):
        """
        Initialize the configuration manager.

        Args:
            config_dict: Optional dictionary of config values for testing.
                        If provided, config files won't be loaded from disk.
        """
        self._configs: dict[str, Any]
        self._config_dir: Path | None

        if config_dict is not None:
            # Testing mode: use provided config
            self._configs = config_dict
            self._config_dir = None
        else:
            # Normal mode: load from files
            self._configs = {}
            self._config_dir = self._find_config_dir()
            self._load_all_configs()

    def _find_config_dir(self) -> Path | None:
        """Find the config directory (env override, then project root)."""
        override = os.environ.get(CONFIG_DIR_ENV)
        if override:
            config_dir = Path(override)
            if not config_dir.is_dir():
                raise FileNotFoundError(
                    f"Config directory not found at {config_dir} (set via {CONFIG_DIR_ENV})."
                )
            return config_dir

        # Go up from authhttp/config/loader.py to project root
        project_root = Path(__file__).resolve().parent.parent.parent
        config_dir = project_root / "config"

        if not config_dir.is_dir():
            print(f"Warning: Config directory not found at {config_dir}. Using built-in defaults.")
            return None

        return config_dir

    def _load_all_configs(self):
        """Load all YAML configuration files from the config directory."""
        if self._config_dir is None:
            return

        config_files = {
            "http": "http_config.yaml",
            "logging": "logging_config.yaml",
        }

        for key, filename in config_files.items():
            config_path = self._config_dir / filename
            if config_path.exists():
                with open(config_path, encoding="utf-8") as f:
                    loaded_config = yaml.safe_load(f)

                # Validate that loaded config is a dictionary
                if not isinstance(loaded_config, dict):
                    print(
                        f"Warning: Config file {filename} must contain a dictionary, "
                        f"got {type(loaded_config).__name__}. Using empty config."
                    )
                    self._configs[key] = {}
                else:
                    self._configs[key] = loaded_config
            else:
                print(f"Warning: Config file {filename} not found at {config_path}")
                self._configs[key] = {}

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            path: Dot-separated path to the config value (e.g., "http.timeouts.request")
            default: Default value to return if path is not found

        Returns:
            The configuration value or default if not found

        Example:
            >>> config.get("http.timeouts.request")
            30
            >>> config.get("logging.mask_pii")
            True
        """
        parts = path.split(".")
        value = self._configs

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def get_required(self, path: str) -> Any:
        """Get a configuration value that must be present.

        Raises:
            ConfigurationError: If the path is missing or set to null
        """
        value = self.get(path)
        if value is None:
            raise ConfigurationError("required value is missing", config_key=path)
        return value

    @property
    def http(self) -> dict[str, Any]:
        """Get HTTP session configuration."""
        # Safe cast: _load_all_configs validates all config values are dicts
        return cast(dict[str, Any], self._configs.get("http", {}))

    @property
    def logging(self) -> dict[str, Any]:
        """Get logging configuration."""
        return cast(dict[str, Any], self._configs.get("logging", {}))

    def reload(self):
        """Reload all configuration files."""
        self._configs.clear()
        self._load_all_configs()


# Create a singleton instance
config = Config()
