"""
Player Data Manager - Admin Token Gate

Optional protection for write endpoints. When ADMIN_TOKEN is configured,
callers must send it in the x-admin-token header or as a bearer token.
When it is not configured the gate lets every request through.
"""

import logging
import secrets
from typing import Optional

from exceptions import UnauthorizedError
from models.infrastructure import AppConfig

logger = logging.getLogger(__name__)

ADMIN_TOKEN_HEADER = "x-admin-token"


def ExtractAdminToken(x_admin_token: Optional[str], authorization: Optional[str]) -> str:
    """
    Pick the token supplied by the caller

    Args:
        x_admin_token: Value of the x-admin-token header
        authorization: Value of the Authorization header

    Returns:
        str: Supplied token, or an empty string if none was sent
    """
    if x_admin_token:
        return x_admin_token

    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer":
            return credentials.strip()

    return ""


def VerifyAdminToken(config: AppConfig, x_admin_token: Optional[str], authorization: Optional[str]) -> None:
    """
    Require the configured admin token on write endpoints

    Args:
        config: Application configuration
        x_admin_token: Value of the x-admin-token header
        authorization: Value of the Authorization header

    Raises:
        UnauthorizedError: If a token is configured and the caller's does not match
    """
    if not config.AdminGateEnabled():
        return

    supplied = ExtractAdminToken(x_admin_token, authorization)
    if not secrets.compare_digest(supplied.encode("utf-8"), config.admin_token.encode("utf-8")):
        logger.warning("Rejected write request with missing or invalid admin token")
        raise UnauthorizedError()
