"""
Player Data Manager - Identity Resolver

Maps a Roblox username to its numeric user id through the users service.
Resolved fresh on every request; nothing is cached.
"""

import logging
from typing import Optional

from exceptions import HttpError
from http_client import OpenCloudHttpClient

logger = logging.getLogger(__name__)

USERNAME_LOOKUP_PATH = "/v1/usernames/users"


def ResolveUserId(http_client: OpenCloudHttpClient, users_base_url: str, username: str) -> Optional[int]:
    """
    Resolve a username to a user id

    Args:
        http_client: Outbound HTTP client
        users_base_url: Base URL of the users service
        username: Roblox username

    Returns:
        int: User id of the first match, or None if the username is unknown

    Raises:
        HttpError: If the lookup call fails or returns a malformed body
    """
    user_lookup = http_client.FetchJson(
        f"{users_base_url.rstrip('/')}{USERNAME_LOOKUP_PATH}",
        method="POST",
        json_body={"usernames": [username], "excludeBannedUsers": False}
    )

    matches = user_lookup.get("data") if isinstance(user_lookup, dict) else None
    if not matches:
        logger.info(f"Username '{username}' did not resolve")
        return None

    first = matches[0] if isinstance(matches, list) else None
    if not isinstance(first, dict) or "id" not in first:
        logger.error(f"Unexpected username lookup response for '{username}': {user_lookup!r}")
        raise HttpError(None, user_lookup, message="Unexpected username lookup response")

    user_id = first["id"]
    logger.debug(f"Resolved username '{username}' to user id {user_id}")
    return user_id
