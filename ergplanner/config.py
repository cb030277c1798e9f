"""
Configuration module for Erg Planner.

This module provides centralized access to configuration settings
used throughout the Erg Planner application.
"""

import os
import logging

import yaml

from .constants import RESERVED_SHEET, SUMMARY_NAME_WIDTH


class Config:
    """Configuration manager for Erg Planner."""

    # Default values
    _defaults = {
        'reserved_sheet': RESERVED_SHEET,
        'output_dir': '.',
        'summary_name_width': SUMMARY_NAME_WIDTH,
    }

    # Singleton instance
    _instance = None

    @classmethod
    def get_instance(cls):
        """Get the singleton instance of Config."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self, config_file=None):
        """
        Initialize with default configuration.

        Args:
            config_file: Optional path of the YAML file to load instead of
                ~/.erg_planner/config.yaml
        """
        self._config_file = config_file
        self._config = self._defaults.copy()
        self._load_config()

    def _load_config(self):
        """Load configuration from file if it exists."""
        config_file = self._get_config_file_path()

        if not os.path.exists(config_file):
            return

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logging.warning(f"Error loading configuration file {config_file}: {e}")
            return

        if not isinstance(loaded_config, dict):
            logging.warning(f"Ignoring configuration file {config_file}: expected a mapping")
            return

        self._config.update(loaded_config)
        logging.debug(f"Loaded configuration from {config_file}")

    def save(self):
        """
        Save the current configuration to file.

        Returns:
            True if successful, False otherwise
        """
        config_file = self._get_config_file_path()
        config_dir = os.path.dirname(config_file)

        try:
            os.makedirs(config_dir, exist_ok=True)
            with open(config_file, 'w', encoding='utf-8') as f:
                yaml.safe_dump(self._config, f, default_flow_style=False)
        except OSError as e:
            logging.error(f"Failed to save configuration to {config_file}: {e}")
            return False

        logging.debug(f"Saved configuration to {config_file}")
        return True

    def _get_config_file_path(self):
        """Get the path to the configuration file."""
        if self._config_file:
            return self._config_file
        config_dir = os.path.expanduser('~/.erg_planner')
        return os.path.join(config_dir, 'config.yaml')

    def get(self, key, default=None):
        """
        Get a configuration value.

        Args:
            key: Configuration key
            default: Default value if the key is not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def set(self, key, value):
        """
        Set a configuration value and persist it.

        Args:
            key: Configuration key
            value: Value to set

        Returns:
            True if successful, False otherwise
        """
        self._config[key] = value
        return self.save()

    def get_reserved_sheet(self):
        """Get the name of the worksheet that is never converted."""
        return self._config.get('reserved_sheet', self._defaults['reserved_sheet'])

    def get_output_dir(self):
        """Get the directory ERG files are written to, expanding ~ if needed."""
        return os.path.expanduser(self._config.get('output_dir', self._defaults['output_dir']))

    def get_summary_name_width(self):
        """Get the padding of the file name column in the summary report."""
        return int(self._config.get('summary_name_width', self._defaults['summary_name_width']))

# Global function to get the configuration instance
def get_config():
    """Get the configuration instance."""
    return Config.get_instance()
