"""Usage analytics over components and tokens."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence

from .base import QueryExecutor
from .complexity import complexity_level, empty_distribution
from ..matcher import matches_value
from ..models import Filter, FlatToken
from ..tokens import category_of, flatten_tokens

USAGE_SECTIONS = ("components", "tokens", "patterns")


class UsageQueryExecutor(QueryExecutor):
    """Builds component, token and registry-wide usage statistics.

    Filters naming one of ``components``, ``tokens`` or ``patterns`` narrow
    that section by entry key. Other filters are ignored.
    """

    query_type = "usage"

    def execute(self, filters: Sequence[Filter]) -> Dict[str, Dict[str, Any]]:
        flat = flatten_tokens(self.registry.tokens)
        results: Dict[str, Dict[str, Any]] = {
            "components": self._component_usage(),
            "tokens": self._token_usage(flat),
            "patterns": self._usage_patterns(flat),
        }
        for filter_ in filters:
            if filter_.property in results:
                results[filter_.property] = _filter_keys(results[filter_.property], filter_)
        return results

    def _component_usage(self) -> Dict[str, Any]:
        usage: Dict[str, Any] = {}
        for component in self.registry.components:
            usage[component.name] = {
                "props": len(component.props),
                "variants": len(component.variants),
                "examples": len(component.examples),
                "category": component.category,
                "complexity": complexity_level(component),
            }
        return usage

    def _token_usage(self, flat: Mapping[str, FlatToken]) -> Dict[str, Any]:
        usage: Dict[str, Any] = {}
        for path in flat:
            entry = usage.setdefault(category_of(path), {"count": 0, "tokens": []})
            entry["count"] += 1
            entry["tokens"].append(path)
        return usage

    def _usage_patterns(self, flat: Mapping[str, FlatToken]) -> Dict[str, Any]:
        distribution = empty_distribution()
        for component in self.registry.components:
            distribution[complexity_level(component)] += 1
        return {
            "totalComponents": len(self.registry.components),
            "totalTokens": len(flat),
            "categoriesUsed": self._categories_used(),
            "complexityDistribution": distribution,
        }

    def _categories_used(self) -> List[str]:
        categories: List[str] = []
        for component in self.registry.components:
            if component.category and component.category not in categories:
                categories.append(component.category)
        for group in self.registry.tokens:
            if group not in categories:
                categories.append(group)
        return categories


def _filter_keys(section: Mapping[str, Any], filter_: Filter) -> Dict[str, Any]:
    return {key: value for key, value in section.items() if matches_value(key, filter_)}
