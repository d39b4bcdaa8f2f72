"""Result summaries for overview output."""

from __future__ import annotations

from typing import Any, Dict, Sequence

from .grouping import group_by
from ..executors.complexity import complexity_level
from ..models import Component, FlatToken, Query
from ..tokens import category_of

SAMPLE_SIZE = 5


def summarize(results: Any, query: Query) -> Any:
    """Reduce component or token results to counts and a short sample.

    Usage results are already aggregated and pass through unchanged.
    """
    if query.type == "components":
        return summarize_components(results)
    if query.type == "tokens":
        return summarize_tokens(results)
    return results


def summarize_components(components: Sequence[Component]) -> Dict[str, Any]:
    return {
        "total": len(components),
        "categories": group_by(components, lambda component: component.category),
        "complexity": group_by(components, complexity_level),
        "sampleComponents": [component.name for component in components[:SAMPLE_SIZE]],
    }


def summarize_tokens(tokens: Sequence[FlatToken]) -> Dict[str, Any]:
    return {
        "total": len(tokens),
        "categories": group_by(tokens, lambda token: category_of(token.path)),
        "types": group_by(tokens, lambda token: token.type),
        "sampleTokens": [token.path for token in tokens[:SAMPLE_SIZE]],
    }


__all__ = ["SAMPLE_SIZE", "summarize", "summarize_components", "summarize_tokens"]
