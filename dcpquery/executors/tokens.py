"""Token query execution."""

from __future__ import annotations

from typing import List, Sequence

from .base import QueryExecutor
from ..matcher import matches_token
from ..models import Filter, FlatToken
from ..tokens import flatten_tokens


class TokenQueryExecutor(QueryExecutor):
    """Flattens the token tree on every call and filters the leaves."""

    query_type = "tokens"

    def execute(self, filters: Sequence[Filter]) -> List[FlatToken]:
        results = list(flatten_tokens(self.registry.tokens).values())
        for filter_ in filters:
            results = [token for token in results if matches_token(token, filter_)]
        return results
