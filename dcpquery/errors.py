"""Error types raised by dcpquery."""

from __future__ import annotations


class QueryError(RuntimeError):
    """Base class for every dcpquery failure."""


class SelectorSyntaxError(QueryError):
    """Raised when a selector does not start with a query type."""


class UnknownQueryTypeError(QueryError):
    """Raised when a parsed selector names an unsupported query type."""

    def __init__(self, query_type: str) -> None:
        super().__init__(f"Unknown query type: {query_type}")
        self.query_type = query_type


class QueryFailedError(QueryError):
    """Raised by the entry point for any failure while answering a selector."""

    def __init__(self, selector: str, cause: BaseException) -> None:
        super().__init__(f"Query failed: {cause}")
        self.selector = selector
        self.cause = cause


class RegistryError(QueryError):
    """Raised when a registry document cannot be loaded."""


class ConfigError(QueryError):
    """Raised when the configuration file cannot be parsed."""


__all__ = [
    "ConfigError",
    "QueryError",
    "QueryFailedError",
    "RegistryError",
    "SelectorSyntaxError",
    "UnknownQueryTypeError",
]
