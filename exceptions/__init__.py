"""
Player Data Manager - Exceptions Package

Contains all exception classes raised by the player data core.
Each exception carries the HTTP status the route layer reports to the caller.
"""

from .player_data_error import PlayerDataError
from .bad_request_error import BadRequestError
from .not_found_error import NotFoundError
from .unauthorized_error import UnauthorizedError
from .conflict_error import ConflictError
from .http_error import HttpError
from .configuration_error import ConfigurationError

__all__ = [
    'PlayerDataError',
    'BadRequestError',
    'NotFoundError',
    'UnauthorizedError',
    'ConflictError',
    'HttpError',
    'ConfigurationError'
]
