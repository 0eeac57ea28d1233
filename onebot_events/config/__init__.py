"""Configuration schema and loader."""

from onebot_events.config.loader import get_config_path, load_config, save_config
from onebot_events.config.schema import Config, DescriptionConfig, LoggingConfig

__all__ = [
    "Config",
    "DescriptionConfig",
    "LoggingConfig",
    "get_config_path",
    "load_config",
    "save_config",
]
