"""
Player Data Manager - Models Package

This package contains all data models for the player data manager:
- api: Pydantic models for the HTTP endpoints
- infrastructure: Dataclass models for configuration and Data Store entries
"""

# Re-export all models for convenient importing
from models.api import *
from models.infrastructure import *
