"""Configuration loading for dcpquery (.dcpquery.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .logging import get_logger

CONFIG_FILENAME = ".dcpquery.yml"
OUTPUT_FORMATS = ("default", "json", "table", "list", "count")

_logger = get_logger("config")


@dataclass
class OutputConfig:
    """Default rendering options for the query command."""

    format: str = "default"
    pretty: bool = False
    include_metadata: bool = False
    summary: bool = False


@dataclass
class QueryConfig:
    """Represents the settings defined in .dcpquery.yml."""

    root: Path
    registry_path: Optional[Path] = None
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path) -> QueryConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return QueryConfig(root=root)

    _logger.debug("Loading configuration from %s", config_file)
    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    registry_str = _as_str(data.get("registry"))
    registry_path = root / registry_str if registry_str else None

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        fmt = _as_str(output_data.get("format"))
        if fmt is not None:
            if fmt not in OUTPUT_FORMATS:
                raise ConfigError(
                    f"Unsupported output format '{fmt}' (expected one of {', '.join(OUTPUT_FORMATS)})"
                )
            output.format = fmt
        output.pretty = _as_bool(output_data.get("pretty")) or False
        output.include_metadata = _as_bool(output_data.get("metadata")) or False
        output.summary = _as_bool(output_data.get("summary")) or False

    return QueryConfig(root=root, registry_path=registry_path, output=output)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "OUTPUT_FORMATS", "OutputConfig", "QueryConfig", "load_config"]
