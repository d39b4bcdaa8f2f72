"""Rendering of query results for terminal output."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Sequence

from .matcher import string_form
from .models import Component, FlatToken, Prop
from .postproc import result_count

DESCRIPTION_WIDTH = 50


def to_jsonable(value: Any) -> Any:
    """Convert result records into plain JSON-compatible structures."""
    if isinstance(value, Component):
        return value.as_record()
    if isinstance(value, FlatToken):
        return value.to_dict()
    if isinstance(value, dict):
        # A component without a category is grouped under None; the JS tool printed "undefined".
        return {("null" if key is None else str(key)): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def format_json(results: Any, *, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(to_jsonable(results), indent=2, ensure_ascii=False)
    return json.dumps(to_jsonable(results), separators=(",", ":"), ensure_ascii=False)


def format_count(results: Any, query_type: str) -> str:
    return f"{result_count(results)} {query_type} found"


def format_list(results: Any, query_type: str) -> str:
    if not _is_record_list(results):
        return format_json(results, pretty=True)
    return "\n".join(_record_label(record) for record in results)


def format_table(results: Any, query_type: str) -> str:
    if not _is_record_list(results):
        return format_json(results, pretty=True)
    rows: List[Dict[str, str]] = []
    for record in results:
        if isinstance(record, FlatToken):
            rows.append(
                {
                    "Token": record.path,
                    "Value": _cell(record.value),
                    "Type": record.type or "unknown",
                }
            )
        else:
            rows.append(
                {
                    "Name": record.name,
                    "Props": str(len(record.props)),
                    "Variants": str(len(record.variants)),
                    "Description": _cell(record.extra.get("description"))[:DESCRIPTION_WIDTH],
                }
            )
    return render_table(rows)


def format_default(results: Any, query_type: str) -> str:
    if not _is_record_list(results):
        return format_json(results, pretty=True)
    lines = [f"Query Results ({query_type})", f"Found {len(results)} matches", ""]
    for record in results:
        if isinstance(record, FlatToken):
            lines.append(f"{record.path}: {_cell(record.value)}")
            continue
        lines.append(record.name)
        if record.props:
            lines.append(f"  Props: {', '.join(_prop_label(prop) for prop in record.props)}")
    return "\n".join(lines)


def render_table(rows: Sequence[Dict[str, str]]) -> str:
    """Draw ``rows`` as a box table; column order follows the first row."""
    if not rows:
        return "No results found"
    headers = list(rows[0])
    widths = [max(len(header), *(len(row.get(header, "")) for row in rows)) for header in headers]

    def _line(left: str, middle: str, right: str) -> str:
        return left + middle.join("─" * (width + 2) for width in widths) + right

    def _row(cells: Sequence[str]) -> str:
        return "│" + "│".join(f" {cell.ljust(width)} " for cell, width in zip(cells, widths)) + "│"

    lines = [_line("┌", "┬", "┐"), _row(headers), _line("├", "┼", "┤")]
    lines.extend(_row([row.get(header, "") for header in headers]) for row in rows)
    lines.append(_line("└", "┴", "┘"))
    return "\n".join(lines)


_FORMATTERS: Dict[str, Callable[[Any, str], str]] = {
    "count": format_count,
    "list": format_list,
    "table": format_table,
    "default": format_default,
}


def format_results(results: Any, query_type: str, fmt: str = "default", *, pretty: bool = False) -> str:
    """Render ``results`` in the requested output format."""
    if fmt == "json":
        return format_json(results, pretty=pretty)
    formatter = _FORMATTERS.get(fmt)
    if formatter is None:
        raise ValueError(f"Unknown output format: {fmt}")
    return formatter(results, query_type)


def _is_record_list(results: Any) -> bool:
    return isinstance(results, list) and all(
        isinstance(record, (Component, FlatToken)) for record in results
    )


def _record_label(record: Any) -> str:
    return record.path if isinstance(record, FlatToken) else record.name


def _prop_label(prop: Any) -> str:
    return prop.name if isinstance(prop, Prop) else _cell(prop)


def _cell(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return string_form(value) or ""


__all__ = [
    "format_count",
    "format_default",
    "format_json",
    "format_list",
    "format_results",
    "format_table",
    "render_table",
    "to_jsonable",
]
