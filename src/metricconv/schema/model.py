"""Convention model: attribute definitions, metric definitions, and the resolved set.

``build_conventions`` turns the raw groups returned by the loader into an
immutable model. Attribute definitions from every group form one registry;
metric groups reference them by id (``ref``) or define them inline (``id``).
"""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from metricconv.instrument import InstrumentKind, ValueType

SCHEMA_URL_PREFIX = "https://opentelemetry.io/schemas/"

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)$")

_SYNC_KINDS = {
    "counter": InstrumentKind.COUNTER,
    "updowncounter": InstrumentKind.UP_DOWN_COUNTER,
    "histogram": InstrumentKind.HISTOGRAM,
    "gauge": InstrumentKind.GAUGE,
}

_ASYNC_KINDS = {
    "counter": InstrumentKind.OBSERVABLE_COUNTER,
    "updowncounter": InstrumentKind.OBSERVABLE_UP_DOWN_COUNTER,
    "gauge": InstrumentKind.OBSERVABLE_GAUGE,
}


class RequirementLevel(Enum):
    """How strongly a convention asks for an attribute on a metric."""

    REQUIRED = "required"
    CONDITIONALLY_REQUIRED = "conditionally_required"
    RECOMMENDED = "recommended"
    OPT_IN = "opt_in"

    @classmethod
    def parse(cls, raw: str | dict | None) -> RequirementLevel:
        """Parse a requirement level as written in YAML.

        Conditional and annotated levels are mappings with a single key,
        e.g. ``{conditionally_required: "If available."}``.
        """
        if raw is None:
            return cls.RECOMMENDED
        if isinstance(raw, dict):
            (raw,) = raw.keys()
        return cls(raw)


@dataclass(frozen=True)
class EnumMember:
    """One declared value of an enum attribute."""

    id: str
    value: str | int
    brief: str = ""


@dataclass(frozen=True)
class AttributeDef:
    """A semantic convention attribute."""

    id: str
    type: str  # primitive type name, or "enum"
    brief: str = ""
    members: tuple[EnumMember, ...] = ()
    deprecated: bool = False

    @property
    def is_enum(self) -> bool:
        return self.type == "enum"

    @property
    def enum_value_type(self) -> str | None:
        """``"string"`` or ``"int"`` for enums, None otherwise."""
        if not self.is_enum:
            return None
        return "int" if isinstance(self.members[0].value, int) else "string"


@dataclass(frozen=True)
class AttributeRef:
    """An attribute as used by one metric, with its requirement level."""

    attribute: AttributeDef
    requirement_level: RequirementLevel = RequirementLevel.RECOMMENDED
    brief: str = ""

    @property
    def id(self) -> str:
        return self.attribute.id

    @property
    def is_required(self) -> bool:
        return self.requirement_level is RequirementLevel.REQUIRED

    @property
    def effective_brief(self) -> str:
        return self.brief or self.attribute.brief


@dataclass(frozen=True)
class MetricDef:
    """A semantic convention metric."""

    id: str
    metric_name: str
    kind: InstrumentKind
    unit: str
    brief: str
    value_type: ValueType = ValueType.DOUBLE
    attributes: tuple[AttributeRef, ...] = ()
    stability: str = "development"
    deprecated: bool = False

    @property
    def namespace(self) -> str:
        return self.metric_name.split(".", 1)[0]

    @property
    def required_attributes(self) -> tuple[AttributeRef, ...]:
        return tuple(a for a in self.attributes if a.is_required)

    @property
    def optional_attributes(self) -> tuple[AttributeRef, ...]:
        return tuple(a for a in self.attributes if not a.is_required)


@dataclass(frozen=True)
class Conventions:
    """A resolved semantic convention set for one version."""

    version: str
    attributes: dict[str, AttributeDef] = field(default_factory=dict)
    metrics: tuple[MetricDef, ...] = ()

    @property
    def schema_url(self) -> str:
        return SCHEMA_URL_PREFIX + self.version.lstrip("v")

    def metric(self, metric_name: str) -> MetricDef:
        """Look up a metric by name. Raises KeyError if absent."""
        for m in self.metrics:
            if m.metric_name == metric_name:
                return m
        raise KeyError(metric_name)

    def namespaces(self) -> dict[str, list[MetricDef]]:
        """Group non-deprecated metrics by namespace, sorted by metric name."""
        grouped: dict[str, list[MetricDef]] = defaultdict(list)
        for m in sorted(self.metrics, key=lambda m: m.metric_name):
            if not m.deprecated:
                grouped[m.namespace].append(m)
        return dict(sorted(grouped.items()))


def infer_version(name: str) -> str | None:
    """Return ``vX.Y.Z`` if *name* looks like a convention version."""
    match = _VERSION_RE.match(name)
    if match is None:
        return None
    return "v" + match.group(1)


def _parse_attribute(raw: dict) -> AttributeDef:
    from metricconv import SchemaError

    raw_type = raw["type"]
    if not isinstance(raw_type, dict):
        return AttributeDef(
            id=raw["id"],
            type=raw_type,
            brief=raw.get("brief", "").strip(),
            deprecated="deprecated" in raw,
        )

    members: list[EnumMember] = []
    seen: set[str] = set()
    for m in raw_type["members"]:
        if m["id"] in seen:
            raise SchemaError(f"Attribute '{raw['id']}': duplicate enum member id '{m['id']}'")
        seen.add(m["id"])
        members.append(EnumMember(id=m["id"], value=m["value"], brief=m.get("brief", "").strip()))

    value_types = {type(m.value) for m in members}
    if len(value_types) > 1:
        raise SchemaError(f"Attribute '{raw['id']}': enum members mix string and integer values")

    return AttributeDef(
        id=raw["id"],
        type="enum",
        brief=raw.get("brief", "").strip(),
        members=tuple(members),
        deprecated="deprecated" in raw,
    )


def _collect_attributes(groups: list[dict]) -> dict[str, AttributeDef]:
    """Build the attribute registry from every inline definition."""
    from metricconv import SchemaError

    registry: dict[str, AttributeDef] = {}
    for group in groups:
        for raw in group.get("attributes", []):
            if "id" not in raw:
                continue
            if raw["id"] in registry:
                raise SchemaError(f"Duplicate attribute id: '{raw['id']}' (group '{group['id']}')")
            registry[raw["id"]] = _parse_attribute(raw)
    return registry


def _parse_metric(group: dict, registry: dict[str, AttributeDef]) -> MetricDef:
    from metricconv import SchemaError

    codegen = group.get("annotations", {}).get("code_generation", {})
    instrument = group["instrument"]
    if codegen.get("asynchronous", False):
        if instrument not in _ASYNC_KINDS:
            raise SchemaError(f"Metric '{group['metric_name']}': {instrument} instruments cannot be asynchronous")
        kind = _ASYNC_KINDS[instrument]
    else:
        kind = _SYNC_KINDS[instrument]

    refs: list[AttributeRef] = []
    seen: set[str] = set()
    for raw in group.get("attributes", []):
        attr_id = raw.get("ref", raw.get("id"))
        if attr_id not in registry:
            raise SchemaError(f"Unknown attribute reference '{attr_id}' in group '{group['id']}'")
        if attr_id in seen:
            raise SchemaError(f"Metric '{group['metric_name']}': attribute '{attr_id}' listed more than once")
        seen.add(attr_id)
        refs.append(
            AttributeRef(
                attribute=registry[attr_id],
                requirement_level=RequirementLevel.parse(raw.get("requirement_level")),
                brief=raw.get("brief", "").strip() if "ref" in raw else "",
            )
        )

    return MetricDef(
        id=group["id"],
        metric_name=group["metric_name"],
        kind=kind,
        unit=group["unit"],
        brief=group["brief"].strip(),
        value_type=ValueType(codegen.get("metric_value_type", "double")),
        attributes=tuple(refs),
        stability=group.get("stability", "development"),
        deprecated="deprecated" in group,
    )


def build_conventions(groups: list[dict[str, Any]], version: str) -> Conventions:
    """Resolve loader output into a :class:`Conventions` model.

    Raises:
        SchemaError: On duplicate attribute ids, unknown references,
            duplicate metric names, repeated attributes within one metric,
            malformed enums, or asynchronous histograms.
    """
    from metricconv import SchemaError

    registry = _collect_attributes(groups)

    metrics: list[MetricDef] = []
    names: set[str] = set()
    for group in groups:
        if group["type"] != "metric":
            continue
        metric = _parse_metric(group, registry)
        if metric.metric_name in names:
            raise SchemaError(f"Duplicate metric name: '{metric.metric_name}'")
        names.add(metric.metric_name)
        metrics.append(metric)

    return Conventions(version=version, attributes=registry, metrics=tuple(metrics))
