"""Attribute pairs and helpers shared by generated convention instruments."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from opentelemetry.util.types import AttributeValue

KeyValue = tuple[str, AttributeValue]


def attribute_value(val: Any) -> AttributeValue:
    """Return the raw attribute value for *val*.

    Convention enums are open: a member is unwrapped to its value, and any
    other value (including strings outside the declared members) passes
    through unchanged.
    """
    if isinstance(val, Enum):
        return val.value
    return val


def merge(
    attrs: Iterable[KeyValue],
    required: Mapping[str, AttributeValue] | None = None,
) -> dict[str, AttributeValue]:
    """Build the attribute mapping for a single measurement.

    Optional pairs are applied first and *required* last, so a required key
    always wins over an optional pair with the same key.
    """
    out = dict(attrs)
    if required:
        out.update(required)
    return out
