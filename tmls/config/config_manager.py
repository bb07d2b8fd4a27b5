"""Configuration management for tmls."""

import os
import yaml
from typing import Dict, Any, Optional
from .config_validator import ConfigValidator
from ..core.models import DEFAULT_MOUNT_ROOT, DEFAULT_STORE_NAME


class ConfigManager:
    """Loads the optional configuration file holding defaults for the flags."""

    DEFAULT_CONFIG_LOCATIONS = [
        "tmls.yaml",
        "tmls.yml",
        os.path.expanduser("~/.tmls/config.yaml"),
        os.path.expanduser("~/.tmls/config.yml"),
        "/etc/tmls/config.yaml",
        "/etc/tmls/config.yml"
    ]

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to config file. If not provided,
                        the default locations are searched.
        """
        self.config_path = config_path
        self.config_data: Dict[str, Any] = {}
        self.validator = ConfigValidator()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file, if there is one.

        Returns:
            Dictionary containing configuration data with defaults applied.

        Raises:
            FileNotFoundError: If an explicitly given config file is missing.
            ValueError: If the config file is invalid.
        """
        config_file = self._find_config_file()
        self.config_data = {}

        if config_file:
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    self.config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in config file {config_file}: {e}")
            except OSError as e:
                raise ValueError(f"Error reading config file {config_file}: {e}")

        # Validate configuration
        self.validator.validate(self.config_data)

        # Fill in defaults for missing or empty keys
        self._set_defaults()

        return self.config_data

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file.

        Returns:
            Path to configuration file, or None when no file exists.

        Raises:
            FileNotFoundError: If the explicitly given file does not exist.
        """
        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if os.path.exists(location):
                return location

        return None

    def _set_defaults(self):
        """Set default values for optional configuration parameters."""
        defaults = {
            'backups': {
                'mount_root': DEFAULT_MOUNT_ROOT,
                'store_name': DEFAULT_STORE_NAME
            },
            'listing': {
                'computer': None,
                'disk': None,
                'all': False,
                'single_column': False,
                'match_disk': False,
                'verbose': False
            },
            'logging': {
                'level': 'WARNING',
                'file': None
            }
        }

        # Merge defaults with existing config
        for section, section_defaults in defaults.items():
            if self.config_data.get(section) is None:
                self.config_data[section] = {}
            for key, value in section_defaults.items():
                if self.config_data[section].get(key) is None:
                    self.config_data[section][key] = value

    def get_backups_config(self) -> Dict[str, Any]:
        """Get backup layout configuration."""
        return self.config_data.get('backups', {})

    def get_listing_config(self) -> Dict[str, Any]:
        """Get defaults for the listing flags."""
        return self.config_data.get('listing', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return self.config_data.get('logging', {})
