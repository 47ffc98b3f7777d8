"""SimpleTopics utilities."""

from .config_loader import load_config, get_config_path, DEFAULT_CONFIG_PATH

__all__ = ["load_config", "get_config_path", "DEFAULT_CONFIG_PATH"]
