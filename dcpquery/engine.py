"""Entry point answering selectors against a registry snapshot."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .errors import QueryFailedError
from .executors import executor_for
from .models import Query, Registry
from .postproc import add_metadata, summarize
from .postproc.metadata import Clock
from .selector import parse_selector

SUMMARY_FORMAT = "summary"


class QueryEngine:
    """Runs selectors against one read-only registry.

    The engine keeps no state between calls: token trees are flattened again
    for every query, so repeated calls with the same selector return the same
    results. The registry is never modified and may be shared freely.
    """

    def __init__(
        self,
        registry: Union[Registry, Mapping[str, Any]],
        *,
        clock: Optional[Clock] = None,
    ) -> None:
        self.registry = registry if isinstance(registry, Registry) else Registry.from_dict(registry)
        self._clock = clock

    def query(
        self,
        selector: str,
        *,
        include_metadata: bool = False,
        format: Optional[str] = None,
    ) -> Any:
        """Answer ``selector``.

        Returns bare results by default, a summary when ``format="summary"``
        and a ``{"results", "metadata"}`` envelope when ``include_metadata`` is
        set. Any failure is raised as :class:`QueryFailedError`.
        """
        try:
            parsed = parse_selector(selector)
            results = self.execute(parsed)
            output = summarize(results, parsed) if format == SUMMARY_FORMAT else results
            if include_metadata:
                output = add_metadata(output, parsed, clock=self._clock, count_of=results)
            return output
        except Exception as exc:
            raise QueryFailedError(selector, exc) from exc

    def execute(self, parsed: Query) -> Any:
        return executor_for(parsed.type, self.registry).execute(parsed.filters)


def query(
    registry: Union[Registry, Mapping[str, Any]],
    selector: str,
    *,
    include_metadata: bool = False,
    format: Optional[str] = None,
) -> Any:
    """Run a single selector against ``registry``."""
    return QueryEngine(registry).query(
        selector, include_metadata=include_metadata, format=format
    )


__all__ = ["QueryEngine", "SUMMARY_FORMAT", "query"]
