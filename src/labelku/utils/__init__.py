"""
LabelKu - Utils Package

Utility modules for the application.
"""

from labelku.utils.config_manager import ConfigManager, get_config_manager
from labelku.utils.logger import logger

__all__ = [
    "logger",
    "ConfigManager",
    "get_config_manager",
]
