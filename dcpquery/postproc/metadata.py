"""Metadata envelope for query results."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Sized

from ..models import Query

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ISO-8601 UTC with millisecond precision."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def result_count(results: Any) -> int:
    """Return list length, or the number of keys for mapping-shaped results."""
    return len(results) if isinstance(results, Sized) else 0


def add_metadata(
    results: Any,
    query: Query,
    *,
    clock: Optional[Clock] = None,
    count_of: Any = None,
) -> Dict[str, Any]:
    """Wrap ``results`` with a description of the query that produced them.

    ``count_of`` overrides the value counted for ``metadata.count``; it is used
    when the wrapped results are a summary of a larger result set.
    """
    moment = (clock or _utc_now)()
    counted = results if count_of is None else count_of
    return {
        "results": results,
        "metadata": {
            "query": query.original,
            "type": query.type,
            "filters": [filter_.to_dict() for filter_ in query.filters],
            "count": result_count(counted),
            "executedAt": format_timestamp(moment),
        },
    }


__all__ = ["Clock", "add_metadata", "format_timestamp", "result_count"]
