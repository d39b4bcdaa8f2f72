"""Occurrence counting for summaries."""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterable, TypeVar

T = TypeVar("T")


def group_by(items: Iterable[T], key_fn: Callable[[T], Hashable]) -> Dict[Any, int]:
    """Count items per key.

    Keys appear in the order they are first seen and are never sorted, so
    consumers can diff summaries between runs.
    """
    groups: Dict[Any, int] = {}
    for item in items:
        key = key_fn(item)
        groups[key] = groups.get(key, 0) + 1
    return groups


__all__ = ["group_by"]
