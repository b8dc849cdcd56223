"""OpenTelemetry meter and span helpers.

Resolves meters for convention instruments and spans for generator runs.
Both degrade to no-ops when telemetry is disabled through the environment.
"""

from __future__ import annotations

from typing import Any

from opentelemetry import metrics, trace

from metricconv import noop
from metricconv.config import MetricConvConfig

_NOOP_PROVIDER = noop.MeterProvider()
_NOOP_TRACER = trace.NoOpTracer()


def get_meter(
    name: str,
    version: str | None = None,
    schema_url: str | None = None,
    config: MetricConvConfig | None = None,
) -> metrics.Meter:
    """Return a meter for *name*.

    Uses the globally configured OpenTelemetry MeterProvider, or the no-op
    provider when ``OTEL_SDK_DISABLED`` is set.
    """
    cfg = config or MetricConvConfig.from_env()
    if cfg.telemetry_disabled:
        return _NOOP_PROVIDER.get_meter(name, version=version, schema_url=schema_url)
    return metrics.get_meter(name, version or "", schema_url=schema_url)


def start_span(
    name: str,
    attributes: dict[str, Any] | None = None,
    config: MetricConvConfig | None = None,
) -> Any:
    """Start a span for a metricconv operation.

    Returns a context manager. When telemetry is disabled the span comes
    from a no-op tracer.
    """
    cfg = config or MetricConvConfig.from_env()
    tracer = _NOOP_TRACER if cfg.telemetry_disabled else trace.get_tracer("metricconv")
    return tracer.start_as_current_span(name, attributes=attributes)
