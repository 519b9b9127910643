"""
Player Data Manager - Bad Request Error Exception

Exception raised for malformed edit requests. Never reaches the network.
"""

from .player_data_error import PlayerDataError


class BadRequestError(PlayerDataError):
    """Exception for malformed edit paths."""

    status_code = 400
