"""
Player Data Manager - API Models Package

This package contains Pydantic models for all API endpoints.
"""

from models.api.player import (
    PlayerEntryResponse,
    SetSectionRequest,
    SetSectionResponse,
    ErrorResponse,
    ConflictResponse
)

__all__ = [
    'PlayerEntryResponse',
    'SetSectionRequest',
    'SetSectionResponse',
    'ErrorResponse',
    'ConflictResponse',
]
