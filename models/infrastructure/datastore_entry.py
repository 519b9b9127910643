"""
Player Data Manager - Data Store Entry Model

Dataclass view over the JSON returned by the Open Cloud entries endpoint.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class DataStoreEntry:
    """
    A remote key-value entry

    Only value is ever written back; etag and revision_id are owned
    by the remote store.
    """
    value: Any
    etag: Optional[str] = None
    revision_id: Optional[str] = None

    @classmethod
    def FromApi(cls, payload: Dict[str, Any]) -> "DataStoreEntry":
        """Build an entry from an Open Cloud response body"""
        if not isinstance(payload, dict):
            return cls(value=None)
        return cls(
            value=payload.get("value"),
            etag=payload.get("etag") or None,
            revision_id=payload.get("revisionId")
        )
