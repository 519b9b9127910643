"""
Player Data Manager - Player API Models

Pydantic models for the player read and set-section endpoints.
Field names follow the camelCase used by the browser UI.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel


class PlayerEntryResponse(BaseModel):
    """Response model for GET /api/player/{username}"""
    username: str
    userId: int
    entryId: str
    data: Dict[str, Any]  # Raw Open Cloud entry (value, etag, revisionId, ...)


class SetSectionRequest(BaseModel):
    """Request model for POST /api/player/{username}/set-section"""
    expectedEtag: Any = None  # Compared as sent; non-string tokens never match a remote ETag
    editPath: Any = None  # List of keys; validated by the patch engine so bad paths get a 400
    value: Any = None


class SetSectionResponse(BaseModel):
    """Response model for a successful set-section"""
    ok: bool
    entryId: str
    updated: Dict[str, Any]  # Open Cloud representation after the write


class ErrorResponse(BaseModel):
    """Error body for 400/401/404 and passthrough remote failures"""
    error: str
    details: Optional[Any] = None


class ConflictResponse(BaseModel):
    """Error body for 409 ETag mismatches"""
    error: str
    expectedEtag: Any = None  # Echoed as the caller sent it
    currentEtag: Optional[str] = None
