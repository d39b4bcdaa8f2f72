"""Token tree flattening and categorisation."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .models import FlatToken


def flatten_tokens(tree: Mapping[str, Any], prefix: str = "") -> Dict[str, FlatToken]:
    """Walk a token tree and return ``path -> FlatToken`` in document order.

    A mapping carrying a ``value`` key is a token leaf. Any other mapping is a
    group and is walked recursively. Scalars and lists sitting directly in a
    group are not tokens and are left out of the projection.
    """
    result: Dict[str, FlatToken] = {}
    for key, node in tree.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if not isinstance(node, Mapping):
            continue
        if "value" in node:
            result[path] = FlatToken.from_leaf(path, node)
        else:
            result.update(flatten_tokens(node, path))
    return result


def category_of(path: str) -> str:
    """Return the top-level group a token path belongs to."""
    return path.split(".")[0]


__all__ = ["category_of", "flatten_tokens"]
