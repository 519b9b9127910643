"""
Player Data Manager - Entry Locator Model

Dataclass identifying a single Data Store entry.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EntryLocator:
    """Fully-qualified location of a player's Data Store entry"""
    entry_id: str  # e.g. 'Player_42'
    url: str
