"""Tests for registry loading and record construction."""

from __future__ import annotations

from pathlib import Path

import pytest

from dcpquery.errors import RegistryError
from dcpquery.models import Component, Registry
from dcpquery.registry import load_registry, resolve_registry_path
from tests._fixtures.registry_builder import RegistryBuilder


def _builder() -> RegistryBuilder:
    return (
        RegistryBuilder()
        .component("Button", category="actions", props=["variant"], variants=["primary"])
        .token("colors.primary", "#0066cc", "color")
    )


def test_load_registry_from_directory(tmp_path: Path) -> None:
    _builder().write(tmp_path / "registry")

    registry = load_registry(tmp_path / "registry")

    assert [component.name for component in registry.components] == ["Button"]
    assert registry.tokens == {"colors": {"primary": {"value": "#0066cc", "type": "color"}}}


def test_load_registry_from_yaml_file(tmp_path: Path) -> None:
    path = _builder().write(tmp_path, "design.yaml")

    registry = load_registry(path)

    assert registry.components[0].variants == ["primary"]


def test_resolve_registry_path_prefers_json(tmp_path: Path) -> None:
    _builder().write(tmp_path, "registry.yml")
    json_path = _builder().write(tmp_path, "registry.json")

    assert resolve_registry_path(tmp_path) == json_path


def test_load_registry_missing_path(tmp_path: Path) -> None:
    with pytest.raises(RegistryError):
        load_registry(tmp_path / "nope.json")
    with pytest.raises(RegistryError):
        load_registry(tmp_path)


def test_load_registry_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "registry.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(RegistryError, match="Failed to parse registry.json"):
        load_registry(path)


@pytest.mark.parametrize(
    "document",
    [
        [],
        {"components": {"Button": {}}},
        {"tokens": ["colors"]},
        {"components": [{"category": "actions"}]},
        {"components": ["Button"]},
    ],
)
def test_registry_from_dict_rejects_malformed_documents(document: object) -> None:
    with pytest.raises(RegistryError):
        Registry.from_dict(document)  # type: ignore[arg-type]


def test_registry_from_dict_defaults() -> None:
    registry = Registry.from_dict({})

    assert registry.components == []
    assert registry.tokens == {}


def test_component_from_dict_keeps_unknown_fields() -> None:
    component = Component.from_dict(
        {
            "name": "Button",
            "props": [{"name": "size", "type": "string", "deprecated": True}],
            "variants": {"primary": {}},
            "filePath": "src/Button.tsx",
        }
    )

    assert component.variants == []
    assert component.extra == {"filePath": "src/Button.tsx"}
    assert component.props[0].extra == {"deprecated": True}
    record = component.as_record()
    assert record["filePath"] == "src/Button.tsx"
    assert record["props"][0]["deprecated"] is True
    assert "children" not in record


def test_component_from_dict_keeps_bare_props_and_structured_variants() -> None:
    component = Component.from_dict(
        {
            "name": "Card",
            "props": ["title", {"name": "size"}],
            "variants": [{"name": "elevated", "shadow": 2}, "flat"],
        }
    )

    assert component.props[0] == "title"
    assert component.props[1].name == "size"
    assert component.variants == [{"name": "elevated", "shadow": 2}, "flat"]
    record = component.as_record()
    assert record["props"][0] == "title"
    assert record["props"][1]["name"] == "size"
