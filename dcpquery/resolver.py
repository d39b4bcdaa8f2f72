"""Dot-path lookup over registry records."""

from __future__ import annotations

import re
from typing import Any, Mapping

_INDEXED_SEGMENT = re.compile(r"^(\w+)\[(\d+)\]$")


def resolve(record: Any, path: str) -> Any:
    """Return the value at ``path`` inside ``record`` or ``None``.

    Segments are separated by dots. ``name[n]`` indexes into a list stored
    under ``name``; a bare numeric segment indexes into the current list.
    Lookups never raise: any missing step resolves the whole path to ``None``.
    """
    current = record
    for segment in path.split("."):
        if current is None:
            return None
        indexed = _INDEXED_SEGMENT.match(segment)
        if indexed:
            container = _lookup(current, indexed.group(1))
            current = _index(container, int(indexed.group(2))) if isinstance(container, list) else None
        else:
            current = _lookup(current, segment)
    return current


def _lookup(current: Any, key: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(key)
    if isinstance(current, list) and key.isdigit():
        return _index(current, int(key))
    return None


def _index(items: list, position: int) -> Any:
    if position < len(items):
        return items[position]
    return None


__all__ = ["resolve"]
