"""Component complexity scoring."""

from __future__ import annotations

from typing import Dict

from ..models import Component

COMPLEXITY_LEVELS = ("simple", "moderate", "complex")

PROP_WEIGHT = 2
VARIANT_WEIGHT = 3
CHILDREN_WEIGHT = 5
EXAMPLE_WEIGHT = 1

MODERATE_THRESHOLD = 5
COMPLEX_THRESHOLD = 15


def complexity_score(component: Component) -> int:
    score = len(component.props) * PROP_WEIGHT
    score += len(component.variants) * VARIANT_WEIGHT
    score += CHILDREN_WEIGHT if component.has_children else 0
    score += len(component.examples) * EXAMPLE_WEIGHT
    return score


def complexity_level(component: Component) -> str:
    """Bucket a component's API surface into simple, moderate or complex."""
    score = complexity_score(component)
    if score < MODERATE_THRESHOLD:
        return "simple"
    if score < COMPLEX_THRESHOLD:
        return "moderate"
    return "complex"


def empty_distribution() -> Dict[str, int]:
    return {level: 0 for level in COMPLEXITY_LEVELS}


__all__ = ["COMPLEXITY_LEVELS", "complexity_level", "complexity_score", "empty_distribution"]
