"""
Player Data Manager - Player Endpoints

This module contains the endpoints that read a player's Data Store entry
and update one section of it under ETag protection.

Handlers are plain (non-async) functions so FastAPI runs the blocking
outbound HTTP calls on its worker threadpool.
"""

import logging
from typing import Any, Optional
from fastapi import APIRouter, Body, Depends, Header
from fastapi.responses import JSONResponse

from auth import ADMIN_TOKEN_HEADER, VerifyAdminToken
from dependencies import GetAppConfig, GetHttpClient
from exceptions import PlayerDataError
from http_client import OpenCloudHttpClient
from models.api import (
    PlayerEntryResponse, SetSectionRequest, SetSectionResponse,
    ErrorResponse, ConflictResponse
)
from models.infrastructure import AppConfig
from player_data import ReadPlayerEntry, SetPlayerSection


# Create logger
logger = logging.getLogger(__name__)

# Create router instance
router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ConflictResponse},
}


def ErrorToResponse(error: PlayerDataError) -> JSONResponse:
    """Convert a player data error into the JSON error response"""
    return JSONResponse(status_code=error.status_code, content=error.ToResponseBody())


# ==================== Player Endpoints ====================

@router.get("/api/player/{username}", response_model=PlayerEntryResponse,
            responses=ERROR_RESPONSES, tags=["Player"])
def get_player(
    username: str,
    config: AppConfig = Depends(GetAppConfig),
    http_client: OpenCloudHttpClient = Depends(GetHttpClient)
):
    """
    Read a player's entry by username

    Args:
        username: Roblox username

    Returns:
        PlayerEntryResponse with the raw Open Cloud entry under data
    """
    try:
        return ReadPlayerEntry(http_client, config, username)
    except PlayerDataError as e:
        logger.warning(f"Read for '{username}' failed: {e}")
        return ErrorToResponse(e)


@router.post("/api/player/{username}/set-section", response_model=SetSectionResponse,
             responses=ERROR_RESPONSES, tags=["Player"])
def set_player_section(
    username: str,
    body: Any = Body(None),
    x_admin_token: Optional[str] = Header(None, alias=ADMIN_TOKEN_HEADER),
    authorization: Optional[str] = Header(None),
    config: AppConfig = Depends(GetAppConfig),
    http_client: OpenCloudHttpClient = Depends(GetHttpClient)
):
    """
    Update one section under entry.value.Data (ETag protected)

    Args:
        username: Roblox username
        body: Expected ETag, edit path and replacement value; anything
            that is not a JSON object is treated as an empty request

    Returns:
        SetSectionResponse with the server's representation after the write
    """
    request = SetSectionRequest(**body) if isinstance(body, dict) else SetSectionRequest()

    try:
        VerifyAdminToken(config, x_admin_token, authorization)

        return SetPlayerSection(
            http_client,
            config,
            username,
            edit_path=request.editPath,
            value=request.value,
            expected_etag=request.expectedEtag
        )
    except PlayerDataError as e:
        logger.warning(f"Set-section for '{username}' failed: {e}")
        return ErrorToResponse(e)
