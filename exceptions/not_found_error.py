"""
Player Data Manager - Not Found Error Exception

Exception raised when a username does not resolve to a user id.
"""

from .player_data_error import PlayerDataError


class NotFoundError(PlayerDataError):
    """Exception for unresolved usernames."""

    status_code = 404

    def __init__(self, message: str = "Username not found"):
        super().__init__(message)
