"""Query executors and lookup by query type."""

from __future__ import annotations

from typing import Callable, Dict

from .base import QueryExecutor
from .complexity import complexity_level, complexity_score
from .components import ComponentQueryExecutor
from .tokens import TokenQueryExecutor
from .usage import UsageQueryExecutor
from ..errors import UnknownQueryTypeError
from ..models import Registry

_EXECUTOR_FACTORIES: Dict[str, Callable[[Registry], QueryExecutor]] = {
    "components": ComponentQueryExecutor,
    "tokens": TokenQueryExecutor,
    "usage": UsageQueryExecutor,
}

QUERY_TYPES = tuple(_EXECUTOR_FACTORIES)


def executor_for(query_type: str, registry: Registry) -> QueryExecutor:
    """Return the executor answering ``query_type`` queries."""
    factory = _EXECUTOR_FACTORIES.get(query_type)
    if factory is None:
        raise UnknownQueryTypeError(query_type)
    return factory(registry)


__all__ = [
    "ComponentQueryExecutor",
    "QUERY_TYPES",
    "QueryExecutor",
    "TokenQueryExecutor",
    "UsageQueryExecutor",
    "complexity_level",
    "complexity_score",
    "executor_for",
]
