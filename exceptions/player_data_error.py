"""
Player Data Manager - Base Error Exception

Base exception class for all player data errors.
"""

from typing import Any, Dict


class PlayerDataError(Exception):
    """Base exception for player data errors."""

    status_code = 500

    def ToResponseBody(self) -> Dict[str, Any]:
        """Build the JSON body returned to the API caller."""
        return {"error": str(self)}
