"""
Player Data Manager - Player Data Operations

This module implements the read path and the ETag-protected write path for a
player's Data Store entry.

Write sequence (strictly sequential):
1. Validate the edit path (before any network call)
2. Resolve the username to a user id
3. Read the latest entry and its ETag
4. Reject if the caller's expected ETag is stale
5. Apply the patch and write back with If-Match set to the ETag just read

Conflicts are surfaced to the caller; there is no automatic conflict retry.
"""

import logging
from typing import Any, Dict, List, Tuple

from exceptions import ConflictError, HttpError, NotFoundError
from http_client import OpenCloudHttpClient
from identity import ResolveUserId
from entry_locator import BuildEntryLocator
from models.infrastructure import AppConfig, DataStoreEntry, EntryLocator
from patch_engine import BuildPatchedValue, ValidateEditPath

logger = logging.getLogger(__name__)

# Remote statuses that mean the If-Match precondition failed
PRECONDITION_FAILED_STATUSES = (409, 412)


def LocatePlayerEntry(http_client: OpenCloudHttpClient, config: AppConfig, username: str) -> Tuple[int, EntryLocator]:
    """
    Resolve a username and locate its entry

    Returns:
        Tuple of (user_id, EntryLocator)

    Raises:
        NotFoundError: If the username does not resolve
        HttpError: If the lookup fails
    """
    user_id = ResolveUserId(http_client, config.users_base_url, username)
    if user_id is None:
        raise NotFoundError()

    return user_id, BuildEntryLocator(config, user_id)


def FetchEntry(http_client: OpenCloudHttpClient, locator: EntryLocator) -> Dict[str, Any]:
    """Read the raw Open Cloud representation of an entry"""
    return http_client.FetchJson(locator.url)


def ReadPlayerEntry(http_client: OpenCloudHttpClient, config: AppConfig, username: str) -> Dict[str, Any]:
    """
    Read a player's Data Store entry

    Args:
        http_client: Outbound HTTP client
        config: Application configuration
        username: Roblox username

    Returns:
        dict: username, userId, entryId and the raw entry under data

    Raises:
        NotFoundError: If the username does not resolve
        HttpError: If a remote call fails
    """
    user_id, locator = LocatePlayerEntry(http_client, config, username)
    data = FetchEntry(http_client, locator)

    logger.info(f"Read entry {locator.entry_id} for '{username}'")

    return {
        "username": username,
        "userId": user_id,
        "entryId": locator.entry_id,
        "data": data
    }


def SetPlayerSection(http_client: OpenCloudHttpClient, config: AppConfig, username: str,
                     edit_path: Any, value: Any, expected_etag: Any = None) -> Dict[str, Any]:
    """
    Replace one subtree of a player's entry value, guarded by ETag

    Args:
        http_client: Outbound HTTP client
        config: Application configuration
        username: Roblox username
        edit_path: List of keys, starting with the mutable root key
        value: Replacement value for the addressed subtree
        expected_etag: ETag the caller last observed (optional)

    Returns:
        dict: ok flag, entryId and the server's representation after the write

    Raises:
        BadRequestError: If the edit path is invalid (no remote call is made)
        NotFoundError: If the username does not resolve
        ConflictError: If the entry changed since expected_etag, or the
            conditional write was rejected
        HttpError: If any other remote call fails
    """
    path: List[str] = ValidateEditPath(edit_path)

    _, locator = LocatePlayerEntry(http_client, config, username)

    # 1) Read latest
    current = DataStoreEntry.FromApi(FetchEntry(http_client, locator))
    current_etag = current.etag

    if expected_etag and current_etag and expected_etag != current_etag:
        logger.warning(
            f"ETag mismatch on {locator.entry_id}: expected {expected_etag}, current {current_etag}"
        )
        raise ConflictError(expected_etag, current_etag)

    # 2) Apply patch
    new_value = BuildPatchedValue(current.value, path, value)

    # 3) Write back with If-Match using the freshest known ETag
    headers = {"If-Match": current_etag} if current_etag else {}
    try:
        updated = http_client.FetchJson(
            locator.url,
            method="PATCH",
            headers=headers,
            json_body={"value": new_value}
        )
    except HttpError as e:
        if e.status in PRECONDITION_FAILED_STATUSES:
            logger.warning(f"Conditional write on {locator.entry_id} rejected (HTTP {e.status})")
            raise ConflictError(expected_etag, current_etag) from e
        raise

    logger.info(
        f"Updated {locator.entry_id} at {'.'.join(path)} for '{username}' "
        f"(etag {current_etag} -> {updated.get('etag') if isinstance(updated, dict) else None})"
    )

    return {
        "ok": True,
        "entryId": locator.entry_id,
        "updated": updated
    }
