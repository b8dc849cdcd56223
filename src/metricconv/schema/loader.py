"""Convention model loader: parse YAML, validate against JSON Schema, compute model hash."""

from __future__ import annotations

import hashlib
import importlib.resources as _resources
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 1_048_576  # 1 MB
YAML_SUFFIXES = (".yaml", ".yml")

# Lazy-loaded schema singleton
_schema_cache: dict | None = None


def _get_schema() -> dict:
    """Load and cache the JSON Schema for validation."""
    global _schema_cache  # noqa: PLW0603
    if _schema_cache is None:
        schema_text = (
            _resources.files("metricconv.schema").joinpath("metricconv-v1.schema.json").read_text(encoding="utf-8")
        )
        _schema_cache = json.loads(schema_text)
    return _schema_cache


@dataclass(frozen=True)
class ModelHash:
    """SHA256 over the file names and raw bytes of a convention model."""

    hex: str

    def __str__(self) -> str:
        return self.hex


def _model_files(source: Any) -> list[Any]:
    """Return the YAML files making up *source*, sorted by name."""
    from metricconv import SchemaError

    if source.is_file():
        return [source]
    if not source.is_dir():
        raise FileNotFoundError(f"No such file or directory: '{source}'")

    files = sorted(
        (entry for entry in source.iterdir() if entry.is_file() and entry.name.endswith(YAML_SUFFIXES)),
        key=lambda entry: entry.name,
    )
    if not files:
        raise SchemaError(f"No YAML files found in '{source}'")
    return files


def _read_file(entry: Any) -> bytes:
    """Read *entry*, checking its size on disk first where the entry supports stat."""
    from metricconv import SchemaError

    if hasattr(entry, "stat"):
        size = entry.stat().st_size
        if size > MAX_FILE_SIZE:
            raise SchemaError(f"{entry.name}: file too large ({size} bytes, max {MAX_FILE_SIZE})")
    return entry.read_bytes()


def _parse_file(name: str, raw_bytes: bytes) -> dict:
    """Parse one YAML document and validate it against the model schema."""
    from metricconv import SchemaError

    if len(raw_bytes) > MAX_FILE_SIZE:
        raise SchemaError(f"{name}: file too large ({len(raw_bytes)} bytes, max {MAX_FILE_SIZE})")

    try:
        data = yaml.safe_load(raw_bytes)
    except yaml.YAMLError as e:
        raise SchemaError(f"{name}: YAML parse error: {e}") from e

    if not isinstance(data, dict):
        raise SchemaError(f"{name}: YAML document must be a mapping")

    try:
        jsonschema.validate(instance=data, schema=_get_schema())
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise SchemaError(f"{name}: schema validation failed at {location}: {e.message}") from e

    return data


def _validate_unique_group_ids(groups: list[dict]) -> None:
    """Ensure group IDs are unique across all files of the model."""
    from metricconv import SchemaError

    ids: set[str] = set()
    for group in groups:
        group_id = group["id"]
        if group_id in ids:
            raise SchemaError(f"Duplicate group id: '{group_id}'")
        ids.add(group_id)


def load_model(source: str | Path | Any) -> tuple[list[dict], ModelHash]:
    """Load and validate a semantic convention model.

    Args:
        source: A YAML file, or a directory whose ``*.yaml``/``*.yml`` files
            are loaded in name order. Importlib resource traversables are
            accepted as well as paths.

    Returns:
        Tuple of (groups from every file, model hash).

    Raises:
        SchemaError: If a file is too large, is not valid YAML, is not a
            mapping, fails schema validation, or repeats a group id.
        FileNotFoundError: If *source* does not exist.
    """
    if isinstance(source, str):
        source = Path(source)

    digest = hashlib.sha256()
    groups: list[dict] = []
    for entry in _model_files(source):
        raw_bytes = _read_file(entry)
        digest.update(entry.name.encode("utf-8"))
        digest.update(b"\0")
        digest.update(raw_bytes)
        data = _parse_file(entry.name, raw_bytes)
        logger.debug("Loaded %d groups from %s", len(data["groups"]), entry.name)
        groups.extend(data["groups"])

    _validate_unique_group_ids(groups)
    return groups, ModelHash(hex=digest.hexdigest())
