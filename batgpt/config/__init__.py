"""Configuration management."""

from .global_config import GlobalConfig, default_config_path

__all__ = ["GlobalConfig", "default_config_path"]
