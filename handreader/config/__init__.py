from .loader import ConfigError, DEFAULT_CONFIG, load_config

__all__ = ['ConfigError', 'DEFAULT_CONFIG', 'load_config']
