from resthub.config.config_manager import ConfigManager, get_config

__all__ = ['ConfigManager', 'get_config']
