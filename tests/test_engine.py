"""End-to-end tests for QueryEngine."""

from __future__ import annotations

import pytest

from dcpquery import query
from dcpquery.engine import QueryEngine
from dcpquery.errors import QueryFailedError, SelectorSyntaxError, UnknownQueryTypeError
from dcpquery.models import Component, FlatToken, Registry
from dcpquery.tokens import flatten_tokens


def _names(results: list[Component]) -> list[str]:
    return [component.name for component in results]


def test_component_category_scenario() -> None:
    registry = {
        "components": [
            {
                "name": "Button",
                "category": "actions",
                "props": [{"name": "variant"}],
                "variants": ["primary", "ghost"],
            }
        ]
    }

    results = query(registry, "components[category=actions]")

    assert _names(results) == ["Button"]


def test_token_category_scenario() -> None:
    registry = {"tokens": {"colors": {"primary": {"value": "#0066cc", "type": "color"}}}}

    results = query(registry, "tokens[category=colors]")

    assert [token.to_dict() for token in results] == [
        {"path": "colors.primary", "value": "#0066cc", "type": "color", "category": "colors"}
    ]


def test_token_summary_scenario() -> None:
    registry = {"tokens": {"colors": {"primary": {"value": "#0066cc", "type": "color"}}}}

    summary = query(registry, "tokens[type=color]", format="summary")

    assert summary == {
        "total": 1,
        "categories": {"colors": 1},
        "types": {"color": 1},
        "sampleTokens": ["colors.primary"],
    }


def test_unknown_type_is_wrapped(engine: QueryEngine) -> None:
    with pytest.raises(QueryFailedError) as excinfo:
        engine.query("bogus")

    assert excinfo.value.selector == "bogus"
    assert isinstance(excinfo.value.__cause__, UnknownQueryTypeError)
    assert str(excinfo.value) == "Query failed: Unknown query type: bogus"


def test_syntax_error_is_wrapped(engine: QueryEngine) -> None:
    with pytest.raises(QueryFailedError) as excinfo:
        engine.query("[category=actions]")

    assert isinstance(excinfo.value.cause, SelectorSyntaxError)
    assert excinfo.value.selector == "[category=actions]"


def test_missing_property_matches_nothing(engine: QueryEngine) -> None:
    assert engine.query("components[nonexistentprop=foo]") == []


def test_pass_through_keeps_declared_order(engine: QueryEngine, design_system: Registry) -> None:
    assert engine.query("components") == design_system.components


def test_queries_are_idempotent(engine: QueryEngine) -> None:
    for selector in ("components[category=actions]", "tokens", "usage[components=Button]"):
        assert engine.query(selector) == engine.query(selector)
    assert engine.query("tokens", include_metadata=True) == engine.query("tokens", include_metadata=True)


def test_filters_intersect(engine: QueryEngine) -> None:
    combined = _names(engine.query("components[category=actions][variants=primary]"))
    first = set(_names(engine.query("components[category=actions]")))
    second = set(_names(engine.query("components[variants=primary]")))

    assert set(combined) == first & second == {"Button"}


def test_flattened_paths_round_trip(engine: QueryEngine, design_system: Registry) -> None:
    for path in flatten_tokens(design_system.tokens):
        results = engine.query(f"tokens[path={path}]")
        assert [token.path for token in results] == [path]


def test_token_categories_follow_paths(engine: QueryEngine) -> None:
    tokens: list[FlatToken] = engine.query("tokens")

    assert tokens
    assert all(token.category == token.path.split(".")[0] for token in tokens)


def test_existence_filters(engine: QueryEngine) -> None:
    assert _names(engine.query("components[children]")) == ["Card"]
    assert _names(engine.query("components[description]")) == ["Button"]
    assert _names(engine.query("components[props.0.values]")) == ["Button"]


def test_nested_equality_on_props(engine: QueryEngine) -> None:
    assert _names(engine.query("components[props.0.name=variant]")) == ["Button"]
    assert _names(engine.query("components[props.1.name=label]")) == ["IconButton"]
    assert _names(engine.query("components[props.0.values=ghost]")) == ["Button"]


def test_metadata_envelope(engine: QueryEngine) -> None:
    wrapped = engine.query("components[category=actions]", include_metadata=True)

    assert _names(wrapped["results"]) == ["Button", "IconButton"]
    assert wrapped["metadata"] == {
        "query": "components[category=actions]",
        "type": "components",
        "filters": [{"property": "category", "value": "actions", "operator": "="}],
        "count": 2,
        "executedAt": "2024-05-01T12:30:45.123Z",
    }


def test_metadata_counts_usage_sections(engine: QueryEngine) -> None:
    wrapped = engine.query("usage", include_metadata=True)

    assert wrapped["metadata"]["count"] == 3


def test_component_summary(engine: QueryEngine) -> None:
    summary = engine.query("components", format="summary")

    assert summary == {
        "total": 4,
        "categories": {"actions": 2, "layout": 1, None: 1},
        "complexity": {"moderate": 3, "simple": 1},
        "sampleComponents": ["Button", "Card", "Icon", "IconButton"],
    }


def test_summary_with_metadata_wraps_summary(engine: QueryEngine) -> None:
    wrapped = engine.query("tokens[type=dimension]", include_metadata=True, format="summary")

    assert wrapped["results"]["total"] == 3
    assert wrapped["results"]["categories"] == {"spacing": 2, "typography": 1}
    assert wrapped["metadata"]["count"] == 3


def test_usage_summary_is_passthrough(engine: QueryEngine) -> None:
    assert engine.query("usage", format="summary") == engine.query("usage")


def test_unknown_format_returns_bare_results(engine: QueryEngine) -> None:
    assert engine.query("tokens", format="table") == engine.query("tokens")


def test_engine_accepts_plain_documents() -> None:
    engine = QueryEngine({"components": [{"name": "Badge"}]})

    assert _names(engine.query("components")) == ["Badge"]
    assert engine.query("tokens") == []


def test_engine_never_mutates_registry(engine: QueryEngine, design_system: Registry) -> None:
    snapshot = ([c.as_record() for c in design_system.components], repr(design_system.tokens))

    engine.query("usage[tokens=colors]", include_metadata=True, format="summary")
    engine.query("components[category=actions]", format="summary")

    assert ([c.as_record() for c in design_system.components], repr(design_system.tokens)) == snapshot


def test_bare_prop_names_count_toward_usage() -> None:
    results = query({"components": [{"name": "Card", "props": ["title", "size", "icon"]}]}, "usage")

    assert results["components"]["Card"]["props"] == 3
    assert results["components"]["Card"]["complexity"] == "moderate"


def test_structured_variants_are_addressable() -> None:
    registry = {"components": [{"name": "Button", "variants": [{"name": "primary"}, {"name": "ghost"}]}]}

    assert _names(query(registry, "components[variants.0.name=primary]")) == ["Button"]
    assert _names(query(registry, "components[variants.1.name=primary]")) == []
