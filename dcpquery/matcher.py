"""Filter evaluation for component and token queries."""

from __future__ import annotations

import json
import math
from typing import Any, Callable, Dict, Optional

from .models import Component, Filter, FlatToken
from .resolver import resolve

OPERATORS = ("exists", "=", "!=", "*=", "^=", "$=")

# Token filters may only address these fields.
TOKEN_PROPERTIES = ("category", "path", "value", "type")


def string_form(value: Any) -> Optional[str]:
    """Render a registry value the way it reads in the source JSON document."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join(string_form(item) or "" for item in value)
    if isinstance(value, dict):
        return json.dumps(value, default=str)
    return str(value)


def strict_equals(left: Any, right: Any) -> bool:
    # bool is an int subclass; True must not equal 1.
    if isinstance(left, bool) is not isinstance(right, bool):
        return False
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    return type(left) is type(right) and left == right


def _equals(actual: Any, expected: Any) -> bool:
    if actual is None:
        return False
    if strict_equals(actual, expected):
        return True
    if isinstance(expected, str) and string_form(actual) == expected:
        return True
    if isinstance(actual, (list, tuple)):
        return any(strict_equals(item, expected) for item in actual)
    return False


def _text_test(test: Callable[[str, str], bool]) -> Callable[[Any, Any], bool]:
    def _apply(actual: Any, expected: Any) -> bool:
        actual_text = string_form(actual)
        expected_text = string_form(expected)
        if actual_text is None or expected_text is None:
            return False
        return test(actual_text.lower(), expected_text.lower())

    return _apply


_OPERATOR_TESTS: Dict[str, Callable[[Any, Any], bool]] = {
    "exists": lambda actual, _: actual is not None,
    "=": _equals,
    "!=": lambda actual, expected: not _equals(actual, expected),
    "*=": _text_test(lambda actual, expected: expected in actual),
    "^=": _text_test(lambda actual, expected: actual.startswith(expected)),
    "$=": _text_test(lambda actual, expected: actual.endswith(expected)),
}


def matches_value(actual: Any, filter_: Filter) -> bool:
    """Apply ``filter_``'s operator to an already resolved value.

    Unknown operators match nothing.
    """
    test = _OPERATOR_TESTS.get(filter_.operator)
    if test is None:
        return False
    return test(actual, filter_.expected)


def matches_record(record: Any, filter_: Filter) -> bool:
    return matches_value(resolve(record, filter_.property), filter_)


def matches_component(component: Component, filter_: Filter) -> bool:
    return matches_record(component.as_record(), filter_)


def matches_token(token: FlatToken, filter_: Filter) -> bool:
    if filter_.property not in TOKEN_PROPERTIES:
        return False
    return matches_value(getattr(token, filter_.property), filter_)


__all__ = [
    "OPERATORS",
    "TOKEN_PROPERTIES",
    "matches_component",
    "matches_record",
    "matches_token",
    "matches_value",
    "string_form",
    "strict_equals",
]
