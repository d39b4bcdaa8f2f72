"""Component query execution."""

from __future__ import annotations

from typing import List, Sequence

from .base import QueryExecutor
from ..matcher import matches_record
from ..models import Component, Filter


class ComponentQueryExecutor(QueryExecutor):
    """Filters registry components; every filter must match."""

    query_type = "components"

    def execute(self, filters: Sequence[Filter]) -> List[Component]:
        if not filters:
            return list(self.registry.components)
        # One record per component per query; filters resolve against it.
        candidates = [(component, component.as_record()) for component in self.registry.components]
        for filter_ in filters:
            candidates = [
                (component, record)
                for component, record in candidates
                if matches_record(record, filter_)
            ]
        return [component for component, _ in candidates]
