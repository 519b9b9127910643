"""
Player Data Manager - Conflict Error Exception

Exception raised when the entry changed since the caller last read it,
either detected locally against the caller's expected ETag or reported by
the remote store when the If-Match precondition failed.
"""

from typing import Any, Dict, Optional

from .player_data_error import PlayerDataError


class ConflictError(PlayerDataError):
    """Exception for ETag mismatches."""

    status_code = 409

    def __init__(self, expected_etag: Optional[str], current_etag: Optional[str],
                 message: str = "ETag mismatch (someone updated this entry). Reload and try again."):
        super().__init__(message)
        self.expected_etag = expected_etag
        self.current_etag = current_etag

    def ToResponseBody(self) -> Dict[str, Any]:
        return {
            "error": str(self),
            "expectedEtag": self.expected_etag,
            "currentEtag": self.current_etag
        }
