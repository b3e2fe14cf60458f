from __future__ import annotations

from collections.abc import Mapping
from typing import Any

SENTINEL = "_"


def is_sentinel(value: Any) -> bool:
    """True for a non-empty string made only of underscores ('_', '__', ...)."""
    return isinstance(value, str) and value != "" and value.strip(SENTINEL) == ""


def resolve_sentinels(value: Any) -> Any:
    """Turn placeholder tokens in a request body into None.

    Strings made only of underscores become None. Every other string has
    its underscores removed, so "a_b" comes back as "ab".

    Lists, tuples and mappings are rebuilt with each item resolved; any
    other value is returned as-is.
    """
    if isinstance(value, str):
        if is_sentinel(value):
            return None
        # FIXME: confirm with the API owners whether underscores inside
        # ordinary values should really be dropped.
        return value.replace(SENTINEL, "")
    if isinstance(value, Mapping):
        return {k: resolve_sentinels(v) for k, v in value.items()}
    if isinstance(value, list):
        return [resolve_sentinels(v) for v in value]
    if isinstance(value, tuple):
        return tuple(resolve_sentinels(v) for v in value)
    return value
