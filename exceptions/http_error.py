"""
Player Data Manager - HTTP Error Exception

Exception raised when a remote REST call fails, either with a non-retryable
status or after the retry budget is exhausted.
"""

from typing import Any, Dict, Optional

from .player_data_error import PlayerDataError


class HttpError(PlayerDataError):
    """
    Exception for failed outbound HTTP calls.

    Attributes:
        status: Remote HTTP status, or None for transport-level failures
        details: Decoded response body ({"raw": text} if it was not JSON)
    """

    def __init__(self, status: Optional[int], details: Any = None, message: Optional[str] = None):
        if message is None:
            message = f"HTTP {status}" if status is not None else "HTTP request failed"
        super().__init__(message)
        self.status = status
        self.details = details

    @property
    def status_code(self) -> int:
        # Mirror the remote status; transport failures surface as 500
        return self.status or 500

    def ToResponseBody(self) -> Dict[str, Any]:
        return {"error": str(self), "details": self.details}
