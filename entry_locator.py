"""
Player Data Manager - Entry Locator

Derives the Open Cloud entry URL and entry id for a player.
"""

from urllib.parse import quote

from models.infrastructure import AppConfig, EntryLocator

# Entry ids are '<prefix>_<user id>'
ENTRY_ID_PREFIX = "Player"


def BuildEntryId(user_id: int) -> str:
    return f"{ENTRY_ID_PREFIX}_{user_id}"


def BuildEntryLocator(config: AppConfig, user_id: int) -> EntryLocator:
    """
    Build the locator of a player's Data Store entry

    Args:
        config: Application configuration (universe, data store, scope)
        user_id: Resolved Roblox user id

    Returns:
        EntryLocator with the entry id and its fully-qualified URL
    """
    entry_id = BuildEntryId(user_id)
    url = (
        f"{config.cloud_base_url.rstrip('/')}"
        f"/universes/{quote(str(config.universe_id), safe='')}"
        f"/data-stores/{quote(str(config.datastore_id), safe='')}"
        f"/scopes/{quote(str(config.scope), safe='')}"
        f"/entries/{quote(entry_id, safe='')}"
    )
    return EntryLocator(entry_id=entry_id, url=url)
