"""Configuration management for fsseam."""

from fsseam.core.config.loader import detect_format, load_app_config, load_config
from fsseam.core.config.models import AppConfig, ConfigBase, ImportConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "ConfigBase",
    "ImportConfig",
    "LoggingConfig",
    "detect_format",
    "load_app_config",
    "load_config",
]
