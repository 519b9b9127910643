"""
Player Data Manager - Infrastructure Models Package

This package contains dataclass models for infrastructure components
like application configuration, entry locators and Data Store entries.
"""

from models.infrastructure.app_config import AppConfig
from models.infrastructure.entry_locator import EntryLocator
from models.infrastructure.datastore_entry import DataStoreEntry

__all__ = [
    'AppConfig',
    'EntryLocator',
    'DataStoreEntry',
]
