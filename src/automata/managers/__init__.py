"""
Managers for configuration
"""

from .animation_manager import AnimationManager
from .config_manager import ConfigManager

__all__ = ['AnimationManager', 'ConfigManager']
