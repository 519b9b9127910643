"""
Player Data Manager - Path-Scoped Patch Engine

Replaces one subtree of a nested JSON document. Client edits are confined
to the mutable root key so metadata fields are never overwritten.
"""

import copy
from typing import Any, Dict, List

from exceptions import BadRequestError

# Only value.Data.* may be edited
MUTABLE_ROOT_KEY = "Data"


def IsPlainObject(value: Any) -> bool:
    """Check if a JSON value is a mapping (not a list, scalar or null)"""
    return isinstance(value, dict)


def ValidateEditPath(path: Any) -> List[str]:
    """
    Validate a client-supplied edit path

    Args:
        path: Value of editPath from the request body

    Returns:
        The path as a list

    Raises:
        BadRequestError: If the path is missing, empty, or outside the mutable root
    """
    if not isinstance(path, list) or len(path) == 0:
        raise BadRequestError("Body must include { editPath: [..], value: ... }")

    if path[0] != MUTABLE_ROOT_KEY:
        raise BadRequestError(f"Edits are only allowed within value.{MUTABLE_ROOT_KEY}.*")

    for segment in path:
        if not isinstance(segment, str):
            raise BadRequestError("editPath segments must be strings")

    return path


def SetAtPath(root: Dict[str, Any], path: List[str], value: Any) -> Dict[str, Any]:
    """
    Set root[path[0]][path[1]]... = value, creating mappings along the way

    Any intermediate value that is missing, null or not a mapping is replaced
    with an empty mapping; the old content is discarded. The final key is set
    to value as given, without merging.

    Args:
        root: Document to mutate in place
        path: Non-empty list of keys
        value: Replacement value

    Returns:
        The mutated root
    """
    if not path:
        raise BadRequestError("editPath must not be empty")

    current = root
    for key in path[:-1]:
        if not IsPlainObject(current.get(key)):
            current[key] = {}
        current = current[key]

    current[path[-1]] = value
    return root


def BuildPatchedValue(current_value: Any, path: List[str], value: Any) -> Dict[str, Any]:
    """
    Produce the new entry value without touching current_value

    Args:
        current_value: Entry value as read from the Data Store
        path: Validated edit path
        value: Replacement value

    Returns:
        New top-level value with only the addressed subtree replaced
    """
    new_value = dict(current_value) if IsPlainObject(current_value) else {}

    mutable_root = new_value.get(MUTABLE_ROOT_KEY)
    new_value[MUTABLE_ROOT_KEY] = copy.deepcopy(mutable_root) if IsPlainObject(mutable_root) else {}

    return SetAtPath(new_value, path, value)
