"""Render Python modules of typed convention instruments from a Conventions model.

Every generated module follows the same template: a header, one ``Enum``
per enum attribute used by the namespace, then one ``SemconvInstrument``
subclass per metric with typed measurement methods and ``attr_*`` helpers.
"""

from __future__ import annotations

import json
import logging
import textwrap
from collections.abc import Iterable
from pathlib import Path

from metricconv import naming
from metricconv.instrument import InstrumentKind, ValueType
from metricconv.schema.model import AttributeDef, AttributeRef, Conventions, MetricDef

logger = logging.getLogger(__name__)

HEADER = "# Code generated by metricconv from semantic convention definitions. DO NOT EDIT."

_DOC_WIDTH = 79
_MAX_LINE = 99
_RESERVED_PARAMS = frozenset({"self", "value", "attrs", "context"})

_PRIMITIVE_ANNOTATIONS = {
    "string": "str",
    "int": "int",
    "double": "float",
    "boolean": "bool",
    "string[]": "Sequence[str]",
    "int[]": "Sequence[int]",
    "double[]": "Sequence[float]",
    "boolean[]": "Sequence[bool]",
}

_VALUE_ANNOTATIONS = {ValueType.INT: "int", ValueType.DOUBLE: "float"}

_ADD_KINDS = frozenset({InstrumentKind.COUNTER, InstrumentKind.UP_DOWN_COUNTER})
_RECORD_KINDS = frozenset({InstrumentKind.HISTOGRAM, InstrumentKind.GAUGE})


def _literal(value: str | int) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _doc_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


def _docstring(summary: str, body: Iterable[str] = (), indent: int = 4) -> list[str]:
    """Render a docstring: a summary line plus wrapped body paragraphs."""
    pad = " " * indent
    paragraphs = [p for p in body if p]
    single = f'{pad}"""{_doc_text(summary)}"""'
    if not paragraphs and len(single) <= _MAX_LINE:
        return [single]

    lines = [f'{pad}"""{_doc_text(summary)}']
    for paragraph in paragraphs:
        lines.append("")
        lines.extend(textwrap.wrap(_doc_text(paragraph), width=_DOC_WIDTH, initial_indent=pad, subsequent_indent=pad))
    lines.append(f'{pad}"""')
    return lines


class _ModuleNames:
    """Identifier table for one namespace module.

    Attributes whose names collide after prefix stripping fall back to their
    full, unstripped ids.
    """

    def __init__(self, namespace: str, attributes: Iterable[AttributeDef]) -> None:
        self.namespace = namespace
        attrs = list(attributes)
        short = {a.id: naming.strip_namespace(a.id, namespace) for a in attrs}
        seen: dict[str, list[str]] = {}
        for attr_id, base in short.items():
            seen.setdefault(naming.snake_name(base), []).append(attr_id)
        self._base = {}
        for ids in seen.values():
            for attr_id in ids:
                self._base[attr_id] = short[attr_id] if len(ids) == 1 else attr_id

    def enum_class(self, attr_id: str) -> str:
        return naming.class_name(self._base[attr_id]) + "Attr"

    def param(self, attr_id: str) -> str:
        name = naming.snake_name(self._base[attr_id])
        if name in _RESERVED_PARAMS:
            name += "_"
        return name

    def method(self, attr_id: str) -> str:
        return "attr_" + naming.snake_name(self._base[attr_id]).rstrip("_")

    def annotation(self, attr: AttributeDef) -> str:
        if attr.is_enum:
            fallback = "int" if attr.enum_value_type == "int" else "str"
            return f"{self.enum_class(attr.id)} | {fallback}"
        return _PRIMITIVE_ANNOTATIONS[attr.type]

    def value_expr(self, attr: AttributeDef, name: str) -> str:
        if attr.is_enum:
            return f"attribute_value({name})"
        return name


def _namespace_attributes(metrics: list[MetricDef]) -> list[AttributeDef]:
    found: dict[str, AttributeDef] = {}
    for m in metrics:
        for ref in m.attributes:
            found.setdefault(ref.id, ref.attribute)
    return [found[k] for k in sorted(found)]


def _member_names(attr: AttributeDef) -> list[str]:
    """Return the Python member names for the members of enum *attr*.

    Raises:
        CodegenError: If a member id has no usable name, or two member ids
            map to the same name.
    """
    from metricconv import CodegenError

    names: dict[str, str] = {}
    for member in attr.members:
        try:
            name = naming.member_name(member.id)
        except ValueError as e:
            raise CodegenError(f"Attribute '{attr.id}': {e}") from e
        if name in names:
            raise CodegenError(
                f"Attribute '{attr.id}': members '{names[name]}' and '{member.id}' both map to enum member '{name}'"
            )
        names[name] = member.id
    return list(names)


def _render_enum(attr: AttributeDef, names: _ModuleNames) -> list[str]:
    base = "int" if attr.enum_value_type == "int" else "str"
    lines = [f"class {names.enum_class(attr.id)}({base}, Enum):"]
    lines += _docstring(f"Values of the ``{attr.id}`` attribute.", [attr.brief])
    lines.append("")
    for member, name in zip(attr.members, _member_names(attr)):
        if member.brief:
            lines += textwrap.wrap(member.brief, width=_DOC_WIDTH, initial_indent="    # ", subsequent_indent="    # ")
        lines.append(f"    {name} = {_literal(member.value)}")
    return lines


def _render_measure(metric: MetricDef, names: _ModuleNames) -> list[str]:
    """Render the add/record/observation method of one instrument class."""
    value_ann = _VALUE_ANNOTATIONS[metric.value_type]
    required = metric.required_attributes

    if metric.kind in _ADD_KINDS:
        method, delegate, verb = "add", "_add", "Add *value* to the instrument"
    elif metric.kind in _RECORD_KINDS:
        method, delegate, verb = "record", "_record", "Record *value*"
    else:
        method, delegate, verb = "observation", "_observation", "Return an Observation of *value* for use in a callback"
    observable = metric.kind.is_observable

    lines = [f"    def {method}(", "        self,", f"        value: {value_ann},"]
    for ref in required:
        lines.append(f"        {names.param(ref.id)}: {names.annotation(ref.attribute)},")
    lines.append("        *attrs: KeyValue,")
    if not observable:
        lines.append("        context: Context | None = None,")
    lines.append(f"    ) -> {'Observation' if observable else 'None'}:")

    summary = f"{verb} with the required attributes." if required else f"{verb}."
    body = ["Optional attributes built with the ``attr_*`` helpers are included in the measurement."]
    if required:
        lines += _docstring(summary, body, indent=8)[:-1]
        lines += ["", "        Args:"]
        for ref in required:
            lines += textwrap.wrap(
                f"{names.param(ref.id)}: {ref.effective_brief}",
                width=_DOC_WIDTH,
                initial_indent=" " * 12,
                subsequent_indent=" " * 16,
            )
        lines.append('        """')
    else:
        lines += _docstring(summary, body, indent=8)

    call_tail = "attrs)" if observable else "attrs, context)"
    prefix = "return " if observable else ""
    if not required:
        lines.append(f"        {prefix}self.{delegate}(value, None, {call_tail}")
        return lines

    lines.append(f"        {prefix}self.{delegate}(")
    lines.append("            value,")
    lines.append("            {")
    for ref in required:
        expr = names.value_expr(ref.attribute, names.param(ref.id))
        lines.append(f"                {_literal(ref.id)}: {expr},")
    lines.append("            },")
    lines.append("            attrs,")
    if not observable:
        lines.append("            context,")
    lines.append("        )")
    return lines


def _render_attr_helper(ref: AttributeRef, names: _ModuleNames) -> list[str]:
    lines = [
        "    @staticmethod",
        f"    def {names.method(ref.id)}(val: {names.annotation(ref.attribute)}) -> KeyValue:",
    ]
    lines += _docstring(f"Optional ``{ref.id}`` attribute.", [ref.effective_brief], indent=8)
    lines.append(f"        return ({_literal(ref.id)}, {names.value_expr(ref.attribute, 'val')})")
    return lines


def _metric_classes(metrics: list[MetricDef], namespace: str, taken: Iterable[str]) -> dict[str, str]:
    """Map each metric name to its class name.

    Raises:
        CodegenError: If two metrics, or a metric and an enum attribute, map
            to the same class name.
    """
    from metricconv import CodegenError

    owners = {name: "an enum attribute" for name in taken}
    classes = {}
    for m in metrics:
        cls = naming.class_name(naming.strip_namespace(m.metric_name, namespace))
        if cls in owners:
            raise CodegenError(
                f"Metric '{m.metric_name}' and {owners[cls]} both map to class name '{cls}' "
                f"in namespace '{namespace}'"
            )
        owners[cls] = f"metric '{m.metric_name}'"
        classes[m.metric_name] = cls
    return classes


def _render_metric(metric: MetricDef, cls: str, names: _ModuleNames) -> list[str]:
    lines = [f"class {cls}(SemconvInstrument):"]
    lines += _docstring(f"Instrument for the ``{metric.metric_name}`` semantic convention.", [metric.brief])
    lines += [
        "",
        f"    NAME = {_literal(metric.metric_name)}",
        f"    UNIT = {_literal(metric.unit)}",
        f"    DESCRIPTION = {_literal(metric.brief)}",
        f"    KIND = InstrumentKind.{metric.kind.name}",
        f"    VALUE_TYPE = ValueType.{metric.value_type.name}",
        "",
    ]
    lines += _render_measure(metric, names)
    for ref in metric.optional_attributes:
        lines.append("")
        lines += _render_attr_helper(ref, names)
    return lines


def _imports(metrics: list[MetricDef], attributes: list[AttributeDef]) -> list[str]:
    has_enum = any(a.is_enum for a in attributes)
    has_sequence = any(a.type.endswith("[]") for a in attributes)
    has_sync = any(not m.kind.is_observable for m in metrics)
    has_observable = any(m.kind.is_observable for m in metrics)

    lines = ["from __future__ import annotations", ""]
    stdlib = []
    if has_sequence:
        stdlib.append("from collections.abc import Sequence")
    if has_enum:
        stdlib.append("from enum import Enum")
    if stdlib:
        lines += stdlib + [""]

    third_party = []
    if has_sync:
        third_party.append("from opentelemetry.context import Context")
    if has_observable:
        third_party.append("from opentelemetry.metrics import Observation")
    if third_party:
        lines += third_party + [""]

    lines.append(f"from metricconv.attribute import {'KeyValue, attribute_value' if has_enum else 'KeyValue'}")
    lines.append("from metricconv.instrument import InstrumentKind, SemconvInstrument, ValueType")
    return lines


def render_module(conventions: Conventions, namespace: str) -> str:
    """Render the generated module for *namespace*.

    Raises:
        CodegenError: If *namespace* has no generatable metrics, or its
            classes or enum members cannot be given distinct names.
    """
    from metricconv import CodegenError

    metrics = conventions.namespaces().get(namespace)
    if not metrics:
        raise CodegenError(f"Unknown namespace '{namespace}' in conventions {conventions.version}")

    attributes = _namespace_attributes(metrics)
    names = _ModuleNames(namespace, attributes)
    enums = [a for a in attributes if a.is_enum]
    enum_classes = [names.enum_class(a.id) for a in enums]
    metric_classes = _metric_classes(metrics, namespace, enum_classes)
    exported = sorted(enum_classes + list(metric_classes.values()))

    lines = [HEADER]
    lines += _docstring(
        f'Instruments for the "{namespace}" semantic convention namespace ({conventions.version}).', indent=0
    )
    lines.append("")
    lines += _imports(metrics, attributes)
    lines += ["", "__all__ = ["]
    lines += [f"    {_literal(name)}," for name in exported]
    lines.append("]")

    for attr in enums:
        lines += ["", ""]
        lines += _render_enum(attr, names)
    for metric in metrics:
        lines += ["", ""]
        lines += _render_metric(metric, metric_classes[metric.metric_name], names)

    return "\n".join(lines) + "\n"


def render_package_init(conventions: Conventions, namespaces: Iterable[str]) -> str:
    """Render the ``__init__.py`` of a generated version package."""
    modules = [naming.module_name(ns) for ns in namespaces]
    lines = [HEADER]
    lines += _docstring(
        f"Semantic convention instruments generated from convention version {conventions.version}.",
        [f"Modules: {', '.join(modules)}."],
        indent=0,
    )
    lines += [
        "",
        f"VERSION = {_literal(conventions.version)}",
        f"SCHEMA_URL = {_literal(conventions.schema_url)}",
        "",
        "MODULES = (",
    ]
    lines += [f"    {_literal(m)}," for m in modules]
    lines += [")", "", '__all__ = ["MODULES", "SCHEMA_URL", "VERSION"]']
    return "\n".join(lines) + "\n"


def generate(
    conventions: Conventions,
    output_dir: str | Path,
    namespaces: Iterable[str] | None = None,
) -> list[Path]:
    """Write a generated version package into *output_dir*.

    Args:
        conventions: The resolved convention model.
        output_dir: The package directory to write, created if missing.
        namespaces: Namespaces to generate. All namespaces when omitted.

    Returns:
        The written paths, ``__init__.py`` first.

    Raises:
        CodegenError: If a requested namespace has no generatable metrics.
    """
    from metricconv import CodegenError

    available = conventions.namespaces()
    selected = sorted(set(namespaces)) if namespaces is not None else list(available)
    unknown = [ns for ns in selected if ns not in available]
    if unknown:
        raise CodegenError(f"Unknown namespace(s): {', '.join(unknown)}")

    for m in conventions.metrics:
        if m.deprecated and m.namespace in selected:
            logger.info("Skipping deprecated metric %s", m.metric_name)

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written = []
    init_path = out / "__init__.py"
    init_path.write_text(render_package_init(conventions, selected), encoding="utf-8")
    written.append(init_path)

    for ns in selected:
        path = out / f"{naming.module_name(ns)}.py"
        path.write_text(render_module(conventions, ns), encoding="utf-8")
        logger.info("Generated %s (%d instruments)", path, len(available[ns]))
        written.append(path)

    return written
