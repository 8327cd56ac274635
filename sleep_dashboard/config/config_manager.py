# sleep_dashboard/config/config_manager.py
import copy
import logging
import os
import re

import yaml

from sleep_dashboard.utils.constants import default_values

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'config/config.yaml'

CLOCK_PATTERN = re.compile(r'^\s*([01]?\d|2[0-3]):[0-5]\d\s*$')

DEFAULT_CONFIG = {
    'data': {
        'path': default_values['data_path'],
    },
    'targets': {
        'bed_time': default_values['target_bed_time'],
        'wake_time': default_values['target_wake_time'],
    },
    'analysis': {
        'top_correlation_count': default_values['top_correlation_count'],
    },
    'logging': {
        'level': default_values['log_level'],
        'file': None,
    },
}


def _merge(base, override):
    """Recursively merge override into a copy of base"""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """Central configuration manager"""

    def __init__(self, config_path=None):
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._explicit_path = config_path is not None
        self.config = self._load_config()

    def _load_config(self):
        """Load configuration from file, falling back to built-in defaults"""
        if not os.path.exists(self.config_path):
            if self._explicit_path:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")
            logger.info(f"No config file at {self.config_path}, using defaults")
            return copy.deepcopy(DEFAULT_CONFIG)

        with open(self.config_path, 'r') as file:
            try:
                loaded = yaml.safe_load(file)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in config file {self.config_path}: {e}")

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {self.config_path} must contain a mapping, got {type(loaded).__name__}")

        return _merge(DEFAULT_CONFIG, loaded)

    def get(self, key, default=None):
        """Get configuration value"""
        # Support nested keys with dot notation
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def _clock_setting(self, key, default):
        """Read a clock time setting as an 'H:MM' string"""
        value = self.get(key, default)
        # YAML 1.1 reads an unquoted 6:20 as the base-60 integer 380
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value < 24 * 60:
            value = f"{value // 60}:{value % 60:02d}"
        if not isinstance(value, str) or not CLOCK_PATTERN.match(value):
            raise ValueError(f"Invalid clock time for {key}: {value!r} (expected 'H:MM')")
        return value.strip()

    def analysis_config(self):
        """
        Flat config dict consumed by the metrics functions.

        Raises:
            ValueError: If a target time is not a valid 'H:MM' clock time
        """
        return {
            'target_bed_time': self._clock_setting('targets.bed_time', default_values['target_bed_time']),
            'target_wake_time': self._clock_setting('targets.wake_time', default_values['target_wake_time']),
            'top_correlation_count': self.get(
                'analysis.top_correlation_count', default_values['top_correlation_count']
            ),
        }
