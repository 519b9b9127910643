"""
Player Data Manager - Unauthorized Error Exception

Exception raised when a write request lacks the configured admin token.
"""

from .player_data_error import PlayerDataError


class UnauthorizedError(PlayerDataError):
    """Exception for missing or invalid admin tokens."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
