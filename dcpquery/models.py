"""Core data models shared across dcpquery components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .errors import RegistryError

# Reserved keys on a token leaf; everything else travels in FlatToken.extra.
_TOKEN_FIELDS = ("value", "type", "description", "category")


@dataclass
class Prop:
    """A single component prop as extracted from source."""

    name: str
    type: Optional[str] = None
    required: bool = False
    description: Optional[str] = None
    default: Any = None
    values: Optional[List[Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Prop":
        known = {"name", "type", "required", "description", "default", "values"}
        values = data.get("values")
        return cls(
            name=str(data.get("name", "")),
            type=data.get("type"),
            required=bool(data.get("required", False)),
            description=data.get("description"),
            default=data.get("default"),
            values=list(values) if isinstance(values, list) else None,
            extra={key: value for key, value in data.items() if key not in known},
        )

    def as_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = dict(self.extra)
        record.update(
            name=self.name,
            type=self.type,
            required=self.required,
            description=self.description,
            default=self.default,
        )
        if self.values is not None:
            record["values"] = list(self.values)
        return record


@dataclass
class Component:
    """Extracted metadata for one UI component."""

    name: str
    category: Optional[str] = None
    # Non-mapping props (bare names) are kept verbatim alongside Prop records.
    props: List[Union[Prop, Any]] = field(default_factory=list)
    variants: List[Any] = field(default_factory=list)
    examples: List[Any] = field(default_factory=list)
    children: Any = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Component":
        if not isinstance(data, Mapping):
            raise RegistryError("Component entries must be mappings")
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise RegistryError("Component entry is missing a name")
        known = {"name", "category", "props", "variants", "examples", "children"}
        props = data.get("props")
        variants = data.get("variants")
        examples = data.get("examples")
        return cls(
            name=name,
            category=data.get("category"),
            props=[Prop.from_dict(item) if isinstance(item, Mapping) else item for item in props]
            if isinstance(props, list)
            else [],
            variants=list(variants) if isinstance(variants, list) else [],
            examples=list(examples) if isinstance(examples, list) else [],
            children=data.get("children"),
            extra={key: value for key, value in data.items() if key not in known},
        )

    def as_record(self) -> Dict[str, Any]:
        """Return the mapping view that dot-path filters are resolved against."""
        record: Dict[str, Any] = dict(self.extra)
        record.update(
            name=self.name,
            category=self.category,
            props=[prop.as_record() if isinstance(prop, Prop) else prop for prop in self.props],
            variants=list(self.variants),
            examples=list(self.examples),
        )
        if self.children is not None:
            record["children"] = self.children
        return record


@dataclass
class FlatToken:
    """A token leaf projected onto its dot-joined path."""

    path: str
    value: Any
    type: Optional[str] = None
    description: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def category(self) -> str:
        return self.path.split(".")[0]

    @classmethod
    def from_leaf(cls, path: str, leaf: Mapping[str, Any]) -> "FlatToken":
        return cls(
            path=path,
            value=leaf.get("value"),
            type=leaf.get("type"),
            description=leaf.get("description"),
            extra={key: value for key, value in leaf.items() if key not in _TOKEN_FIELDS},
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"path": self.path, "value": self.value, "type": self.type}
        if self.description is not None:
            data["description"] = self.description
        data.update(self.extra)
        data["category"] = self.category
        return data


@dataclass
class Registry:
    """Immutable snapshot of an extracted design system."""

    components: List[Component] = field(default_factory=list)
    tokens: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Registry":
        if not isinstance(data, Mapping):
            raise RegistryError("Registry document must contain a mapping at the root")
        components = data.get("components") or []
        tokens = data.get("tokens") or {}
        if not isinstance(components, list):
            raise RegistryError("Registry 'components' must be a list")
        if not isinstance(tokens, Mapping):
            raise RegistryError("Registry 'tokens' must be a mapping")
        return cls(
            components=[Component.from_dict(item) for item in components],
            tokens=dict(tokens),
        )


class Exists:
    """Sentinel filter value for `[property]` selectors."""

    _instance: Optional["Exists"] = None

    def __new__(cls) -> "Exists":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EXISTS"


EXISTS = Exists()


@dataclass(frozen=True)
class Literal:
    """Literal filter value for `[property=value]` selectors."""

    value: Any


FilterValue = Union[Exists, Literal]


@dataclass(frozen=True)
class Filter:
    """One `[property op value]` constraint."""

    property: str
    operator: str
    value: FilterValue = EXISTS

    @property
    def expected(self) -> Any:
        """Return the comparison operand; the existence marker compares as ``True``."""
        if isinstance(self.value, Literal):
            return self.value.value
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"property": self.property, "value": self.expected, "operator": self.operator}


@dataclass(frozen=True)
class Query:
    """Parsed selector."""

    type: str
    filters: tuple[Filter, ...]
    original: str


__all__ = [
    "Component",
    "EXISTS",
    "Exists",
    "Filter",
    "FilterValue",
    "FlatToken",
    "Literal",
    "Prop",
    "Query",
    "Registry",
]
