"""
Player Data Manager - Managers Package

Contains manager classes for configuration.
"""

from .config_manager import ConfigManager, DEFAULT_CONFIG

__all__ = [
    'ConfigManager',
    'DEFAULT_CONFIG'
]
