"""Configuration module."""

from isocontext.config.loader import get_default_config, load_config
from isocontext.config.models import ConfigError, IsocontextConfig
from isocontext.config.paths import get_config_path, get_isocontext_home

__all__ = [
    "ConfigError",
    "IsocontextConfig",
    "get_config_path",
    "get_default_config",
    "get_isocontext_home",
    "load_config",
]
