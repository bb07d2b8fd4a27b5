"""Configuration validation for tmls."""

from typing import Dict, Any


class ConfigValidator:
    """Validates tmls configuration."""

    KNOWN_SECTIONS = ['backups', 'listing', 'logging']
    STRING_FIELDS = {
        'backups': ['mount_root', 'store_name'],
        'listing': ['computer', 'disk'],
        'logging': ['level', 'file'],
    }
    BOOLEAN_FIELDS = {
        'listing': ['all', 'single_column', 'match_disk', 'verbose'],
    }
    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration data.

        Args:
            config: Configuration dictionary to validate.

        Raises:
            ValueError: If configuration is invalid.
        """
        self._validate_structure(config)
        for section in self.KNOWN_SECTIONS:
            if config.get(section) is not None:
                self._validate_section(section, config[section])

        backups = config.get('backups') or {}
        if backups.get('mount_root') is not None and not backups['mount_root'].startswith('/'):
            raise ValueError(f"backups.mount_root must be an absolute path: {backups['mount_root']}")

        level = (config.get('logging') or {}).get('level')
        if level is not None and level.upper() not in self.LOG_LEVELS:
            raise ValueError(f"Invalid logging.level: {level}")

    def _validate_structure(self, config: Dict[str, Any]) -> None:
        """Validate basic configuration structure.

        Raises:
            ValueError: If the configuration or a section is not a mapping.
        """
        if not isinstance(config, dict):
            raise ValueError("Configuration must be a mapping")

        unknown = [section for section in config if section not in self.KNOWN_SECTIONS]
        if unknown:
            raise ValueError(f"Unknown configuration sections: {unknown}")

        for section, value in config.items():
            if value is not None and not isinstance(value, dict):
                raise ValueError(f"Configuration section {section} must be a mapping")

    def _validate_section(self, section: str, values: Dict[str, Any]) -> None:
        for key in self.STRING_FIELDS.get(section, []):
            value = values.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{section}.{key} must be a string")

        for key in self.BOOLEAN_FIELDS.get(section, []):
            value = values.get(key)
            if value is not None and not isinstance(value, bool):
                raise ValueError(f"{section}.{key} must be true or false")

        known = self.STRING_FIELDS.get(section, []) + self.BOOLEAN_FIELDS.get(section, [])
        unknown = [key for key in values if key not in known]
        if unknown:
            raise ValueError(f"Unknown keys in {section}: {unknown}")
