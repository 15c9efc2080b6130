"""Configuration management for Date & Time Explorer."""

from date_explorer.config.schema import AppConfig
from date_explorer.config.manager import ConfigManager

__all__ = ["AppConfig", "ConfigManager"]
