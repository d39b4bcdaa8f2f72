"""Selector parsing for `type[prop][prop=value]` queries."""

from __future__ import annotations

import re
from typing import List

from .errors import SelectorSyntaxError
from .models import EXISTS, Filter, Literal, Query

_TYPE_PATTERN = re.compile(r"^(\w+)")
_FILTER_PATTERN = re.compile(r"\[([^=\]]+)(?:=([^\]]*))?\]")


def parse_selector(selector: str) -> Query:
    """Parse a selector string into a :class:`Query`.

    Only existence (``[prop]``) and equality (``[prop=value]``) filters can be
    written in selector text. An empty value (``[prop=]``) is treated as an
    existence check.
    """
    type_match = _TYPE_PATTERN.match(selector)
    if not type_match:
        raise SelectorSyntaxError(
            "Invalid selector: must start with type (components, tokens, usage)"
        )

    filters: List[Filter] = []
    for match in _FILTER_PATTERN.finditer(selector, type_match.end()):
        prop, raw_value = match.group(1), match.group(2)
        if raw_value:
            filters.append(
                Filter(property=prop.strip(), operator="=", value=Literal(raw_value.strip()))
            )
        else:
            filters.append(Filter(property=prop.strip(), operator="exists", value=EXISTS))

    return Query(type=type_match.group(1), filters=tuple(filters), original=selector)


__all__ = ["parse_selector"]
