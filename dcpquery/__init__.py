"""Selector-based querying of design-system registries."""

from .engine import QueryEngine, query
from .errors import (
    ConfigError,
    QueryError,
    QueryFailedError,
    RegistryError,
    SelectorSyntaxError,
    UnknownQueryTypeError,
)
from .models import EXISTS, Component, Filter, FlatToken, Literal, Prop, Query, Registry
from .registry import load_registry
from .selector import parse_selector
from .tokens import category_of, flatten_tokens

__all__ = [
    "Component",
    "ConfigError",
    "EXISTS",
    "Filter",
    "FlatToken",
    "Literal",
    "Prop",
    "Query",
    "QueryEngine",
    "QueryError",
    "QueryFailedError",
    "Registry",
    "RegistryError",
    "SelectorSyntaxError",
    "UnknownQueryTypeError",
    "category_of",
    "flatten_tokens",
    "load_registry",
    "parse_selector",
    "query",
]
