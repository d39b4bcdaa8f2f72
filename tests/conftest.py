from __future__ import annotations

from datetime import datetime, timezone

import pytest

from dcpquery.engine import QueryEngine
from dcpquery.models import Registry
from tests._fixtures.registry_builder import RegistryBuilder

FIXED_TIME = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)


@pytest.fixture
def registry_builder() -> RegistryBuilder:
    """Provide an empty registry builder."""
    return RegistryBuilder()


@pytest.fixture
def design_system() -> Registry:
    """A small design system exercising every query mode."""
    return (
        RegistryBuilder()
        .component(
            "Button",
            category="actions",
            props=[
                {"name": "variant", "type": "string", "required": True, "values": ["primary", "ghost"]},
                {"name": "size", "type": "string"},
                {"name": "disabled", "type": "boolean", "default": False},
            ],
            variants=["primary", "ghost"],
            examples=["<Button />"],
            description="Triggers an action",
        )
        .component("Card", category="layout", props=["title"], children=True)
        .component("Icon", props=["name"])
        .component("IconButton", category="actions", props=["icon", "label"], variants=["ghost"])
        .token("colors.primary", "#0066cc", "color", description="Brand colour")
        .token("colors.neutral.100", "#f5f5f5", "color")
        .token("spacing.sm", 4, "dimension")
        .token("spacing.md", 8, "dimension")
        .token("typography.body.size", "16px", "dimension")
        .build()
    )


@pytest.fixture
def engine(design_system: Registry) -> QueryEngine:
    return QueryEngine(design_system, clock=lambda: FIXED_TIME)
