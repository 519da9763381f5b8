"""Recursive freezing of plain data graphs.

Used by callers that hand entity projections to code that must not modify
them. Works on acyclic graphs of plain data only.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


def deep_freeze(obj: Any) -> Any:
    """Return a read-only copy of ``obj`` with every nested container frozen.

    - Mappings become ``MappingProxyType`` views over a new dict.
    - Lists and tuples become tuples; sets become frozensets.
    - Scalars, dates and other immutable values are returned unchanged.

    Freezing an already frozen graph returns an equal frozen graph.

    Example:
        >>> frozen = deep_freeze({"name": "Movie", "tags": ["a", "b"]})
        >>> frozen["tags"]
        ('a', 'b')
        >>> frozen["name"] = "Other"
        Traceback (most recent call last):
        ...
        TypeError: 'mappingproxy' object does not support item assignment
    """
    if isinstance(obj, Mapping):
        return MappingProxyType({key: deep_freeze(value) for key, value in obj.items()})
    if isinstance(obj, (list, tuple)):
        return tuple(deep_freeze(item) for item in obj)
    if isinstance(obj, (set, frozenset)):
        return frozenset(deep_freeze(item) for item in obj)
    return obj
