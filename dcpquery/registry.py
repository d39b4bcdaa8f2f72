"""Registry document loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .errors import RegistryError
from .logging import get_logger
from .models import Registry

REGISTRY_FILENAMES = ("registry.json", "registry.yml", "registry.yaml")

_logger = get_logger("registry")


def resolve_registry_path(path: Path) -> Path:
    """Return the registry file for ``path``, which may be a file or a directory."""
    path = path.expanduser()
    if path.is_dir():
        for name in REGISTRY_FILENAMES:
            candidate = path / name
            if candidate.is_file():
                return candidate
        raise RegistryError(f"No registry file found in {path}")
    if not path.exists():
        raise RegistryError(f"Registry not found: {path}")
    return path


def load_registry(path: Path) -> Registry:
    """Read a JSON or YAML registry document into a :class:`Registry`."""
    registry_file = resolve_registry_path(path)
    _logger.debug("Loading registry from %s", registry_file)
    data = _read_document(registry_file)
    registry = Registry.from_dict(data)
    _logger.debug(
        "Loaded %d components and %d token groups",
        len(registry.components),
        len(registry.tokens),
    )
    return registry


def _read_document(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RegistryError(f"Failed to read {path}: {exc}") from exc

    if path.suffix.lower() in {".yml", ".yaml"}:
        try:
            return yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise RegistryError(f"Failed to parse {path.name}: {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise RegistryError(f"Failed to parse {path.name}: {exc}") from exc


__all__ = ["REGISTRY_FILENAMES", "load_registry", "resolve_registry_path"]
