"""Base class for query executors."""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from ..models import Filter, Registry


class QueryExecutor(ABC):
    """Contract for executors that answer one query type against a registry."""

    query_type: str = ""

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    @abstractmethod
    def execute(self, filters: Sequence[Filter]) -> Any:
        """Return the results for the given filters without mutating the registry."""
