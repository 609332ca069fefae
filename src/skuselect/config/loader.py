"""Load selector config from YAML or JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .schema import SelectorConfig


class ConfigLoadError(ValueError):
    """Raised when config cannot be loaded or parsed."""


def load_config(path: str | Path) -> SelectorConfig:
    """Load config file from YAML/JSON and validate with Pydantic."""
    data = load_document(path, error_cls=ConfigLoadError)
    return SelectorConfig.model_validate(data)


def load_document(path: str | Path, error_cls: type[ValueError] = ConfigLoadError) -> dict[str, Any]:
    """Read a YAML/JSON file whose root must be an object."""
    document_path = Path(path)
    if not document_path.exists():
        raise FileNotFoundError(f"File not found: {document_path}")

    suffix = document_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        data = _load_yaml(document_path)
    elif suffix == ".json":
        data = _load_json(document_path)
    else:
        raise error_cls(f"Unsupported file format '{suffix}'. Use .yaml/.yml or .json.")

    if not isinstance(data, dict):
        raise error_cls("Document root must be a JSON/YAML object.")
    return data


def _load_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as file:
        parsed = yaml.safe_load(file)

    return parsed or {}


def _load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as file:
        parsed = json.load(file)

    return parsed or {}
