# resthub/config/config_manager.py
import os
import logging

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'config/config.yaml'


class ConfigManager:
    """Central configuration manager"""
    
    def __init__(self, config_path=None):
        self.config_path = config_path or os.getenv('RESTHUB_CONFIG', DEFAULT_CONFIG_PATH)
        self.config = self._load_config()
    
    def _load_config(self):
        """Load configuration from file, falling back to an empty config"""
        if not os.path.exists(self.config_path):
            logger.warning(f"Config file not found: {self.config_path}, using built-in defaults")
            return {}
        with open(self.config_path, 'r') as file:
            return yaml.safe_load(file) or {}
    
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


_config = None

def get_config():
    """Return the process-wide configuration, loading it on first use"""
    global _config
    if _config is None:
        _config = ConfigManager()
    return _config
