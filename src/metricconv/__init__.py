"""metricconv: typed OpenTelemetry semantic-convention metric instruments.

Provides a no-op implementation of the OpenTelemetry metrics API, a runtime
for strongly-typed convention instruments, and a generator that renders
those instruments from semantic convention YAML definitions.
"""

from __future__ import annotations

__version__ = "0.1.0"


class MetricConvError(Exception):
    """Base class for all metricconv errors."""


class SchemaError(MetricConvError):
    """Raised when convention definitions are unreadable or invalid."""


class CodegenError(MetricConvError):
    """Raised when the generator is given input it cannot render."""


class InstrumentCreationError(MetricConvError):
    """Raised when a meter fails to create a convention instrument."""

    def __init__(self, name: str, cause: Exception) -> None:
        super().__init__(f"Failed to create instrument '{name}': {cause}")
        self.name = name
        self.cause = cause


from metricconv.attribute import KeyValue, attribute_value  # noqa: E402
from metricconv.instrument import InstrumentKind, SemconvInstrument, ValueType  # noqa: E402
from metricconv.telemetry import get_meter  # noqa: E402

__all__ = [
    "CodegenError",
    "InstrumentCreationError",
    "InstrumentKind",
    "KeyValue",
    "MetricConvError",
    "SchemaError",
    "SemconvInstrument",
    "ValueType",
    "__version__",
    "attribute_value",
    "get_meter",
]
