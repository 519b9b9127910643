"""
Player Data Manager - Configuration Error Exception

Exception raised at startup when required configuration is missing or invalid.
"""

from .player_data_error import PlayerDataError


class ConfigurationError(PlayerDataError):
    """Exception for missing or invalid configuration."""
    pass
