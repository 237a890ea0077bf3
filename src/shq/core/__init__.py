"""Core utilities: config"""

from .config import CONFIG_FILENAME, ShqConfig, find_config_file

__all__ = ["CONFIG_FILENAME", "ShqConfig", "find_config_file"]
