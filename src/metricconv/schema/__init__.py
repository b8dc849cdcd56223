"""Convention schema: load, validate and resolve semantic convention YAML."""

from __future__ import annotations

import importlib.resources as _resources
from pathlib import Path
from typing import Any

from metricconv.config import DEFAULT_CONVENTIONS_VERSION
from metricconv.schema.loader import ModelHash, load_model
from metricconv.schema.model import (
    AttributeDef,
    AttributeRef,
    Conventions,
    EnumMember,
    MetricDef,
    RequirementLevel,
    build_conventions,
    infer_version,
)


def load_conventions(source: str | Path | Any, version: str | None = None) -> Conventions:
    """Load, validate and resolve a convention model.

    Args:
        source: YAML file or directory. See :func:`loader.load_model`.
        version: Convention version such as ``v1.32.0``. Inferred from the
            directory name when omitted.

    Raises:
        SchemaError: If the model is invalid or no version can be determined.
    """
    from metricconv import SchemaError

    if isinstance(source, str):
        source = Path(source)
    if version is None:
        version = infer_version(source.name)
        if version is None:
            raise SchemaError(f"Cannot infer a convention version from '{source.name}'; pass one explicitly")
    else:
        normalized = infer_version(version)
        if normalized is None:
            raise SchemaError(f"Invalid convention version '{version}' (expected vX.Y.Z)")
        version = normalized

    groups, _ = load_model(source)
    return build_conventions(groups, version)


def bundled_path(version: str = DEFAULT_CONVENTIONS_VERSION) -> Any:
    """Return the packaged convention directory for *version*."""
    return _resources.files("metricconv.conventions").joinpath(version)


def bundled_conventions(version: str = DEFAULT_CONVENTIONS_VERSION) -> Conventions:
    """Load the convention set shipped with metricconv."""
    return load_conventions(bundled_path(version), version)


__all__ = [
    "AttributeDef",
    "AttributeRef",
    "Conventions",
    "EnumMember",
    "MetricDef",
    "ModelHash",
    "RequirementLevel",
    "build_conventions",
    "bundled_conventions",
    "bundled_path",
    "infer_version",
    "load_conventions",
    "load_model",
]
