"""SemconvInstrument base class, InstrumentKind and ValueType enums.

A SemconvInstrument wraps one real OpenTelemetry instrument and binds it to
a semantic convention: a fixed metric name, unit and description. Generated
subclasses add typed ``add``/``record``/``observation`` methods that take the
convention's required attributes as parameters, plus ``attr_*`` helpers for
the optional ones.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from typing import Any, ClassVar

from opentelemetry.context import Context
from opentelemetry.metrics import CallbackT, Meter, Observation
from opentelemetry.util.types import AttributeValue

from metricconv import noop
from metricconv.attribute import KeyValue, merge

logger = logging.getLogger(__name__)


class InstrumentKind(Enum):
    """The OpenTelemetry instrument a convention metric is reported with."""

    COUNTER = "counter"
    UP_DOWN_COUNTER = "up_down_counter"
    HISTOGRAM = "histogram"
    GAUGE = "gauge"
    OBSERVABLE_COUNTER = "observable_counter"
    OBSERVABLE_UP_DOWN_COUNTER = "observable_up_down_counter"
    OBSERVABLE_GAUGE = "observable_gauge"

    @property
    def is_observable(self) -> bool:
        return self.value.startswith("observable_")


class ValueType(Enum):
    """Numeric type of the measurements an instrument reports."""

    INT = "int"
    DOUBLE = "double"


_NOOP_TYPES: dict[InstrumentKind, type] = {
    InstrumentKind.COUNTER: noop.Counter,
    InstrumentKind.UP_DOWN_COUNTER: noop.UpDownCounter,
    InstrumentKind.HISTOGRAM: noop.Histogram,
    InstrumentKind.GAUGE: noop.Gauge,
    InstrumentKind.OBSERVABLE_COUNTER: noop.ObservableCounter,
    InstrumentKind.OBSERVABLE_UP_DOWN_COUNTER: noop.ObservableUpDownCounter,
    InstrumentKind.OBSERVABLE_GAUGE: noop.ObservableGauge,
}

_FACTORY_METHODS: dict[InstrumentKind, str] = {
    InstrumentKind.COUNTER: "create_counter",
    InstrumentKind.UP_DOWN_COUNTER: "create_up_down_counter",
    InstrumentKind.HISTOGRAM: "create_histogram",
    InstrumentKind.GAUGE: "create_gauge",
    InstrumentKind.OBSERVABLE_COUNTER: "create_observable_counter",
    InstrumentKind.OBSERVABLE_UP_DOWN_COUNTER: "create_observable_up_down_counter",
    InstrumentKind.OBSERVABLE_GAUGE: "create_observable_gauge",
}


class SemconvInstrument:
    """Base class for instruments conforming to a semantic convention.

    Subclasses set the class constants below. Construction creates the
    underlying instrument from *meter*; when *meter* is ``None`` the no-op
    instrument for ``KIND`` is used instead, so callers that have not
    configured metrics pay nothing.

    Args:
        meter: The meter to create the instrument with, or ``None``.
        unit: Overrides the convention unit passed to the meter.
        description: Overrides the convention description passed to the meter.
        callbacks: Callbacks for observable kinds. Ignored otherwise.
        explicit_bucket_boundaries_advisory: Bucket advice for histograms.

    Raises:
        InstrumentCreationError: If the meter fails to create the instrument.
    """

    NAME: ClassVar[str]
    UNIT: ClassVar[str]
    DESCRIPTION: ClassVar[str]
    KIND: ClassVar[InstrumentKind]
    VALUE_TYPE: ClassVar[ValueType] = ValueType.DOUBLE

    def __init__(
        self,
        meter: Meter | None = None,
        *,
        unit: str | None = None,
        description: str | None = None,
        callbacks: Sequence[CallbackT] | None = None,
        explicit_bucket_boundaries_advisory: Sequence[float] | None = None,
    ) -> None:
        if meter is None:
            logger.debug("No meter supplied for %s; using a no-op instrument", self.NAME)
            self._inst = _NOOP_TYPES[self.KIND](self.NAME, unit=self.UNIT, description=self.DESCRIPTION)
            return

        kwargs: dict[str, Any] = {
            "unit": self.UNIT if unit is None else unit,
            "description": self.DESCRIPTION if description is None else description,
        }
        if self.KIND.is_observable:
            kwargs["callbacks"] = callbacks
        elif self.KIND is InstrumentKind.HISTOGRAM and explicit_bucket_boundaries_advisory is not None:
            kwargs["explicit_bucket_boundaries_advisory"] = explicit_bucket_boundaries_advisory

        try:
            self._inst = getattr(meter, _FACTORY_METHODS[self.KIND])(self.NAME, **kwargs)
        except Exception as exc:
            from metricconv import InstrumentCreationError

            raise InstrumentCreationError(self.NAME, exc) from exc

    @property
    def inst(self) -> Any:
        """The underlying OpenTelemetry instrument."""
        return self._inst

    @property
    def name(self) -> str:
        """The semantic convention name of the instrument."""
        return self.NAME

    @property
    def unit(self) -> str:
        """The semantic convention unit of the instrument."""
        return self.UNIT

    @property
    def description(self) -> str:
        """The semantic convention description of the instrument."""
        return self.DESCRIPTION

    def _add(
        self,
        value: int | float,
        required: Mapping[str, AttributeValue] | None,
        attrs: Iterable[KeyValue],
        context: Context | None,
    ) -> None:
        self._inst.add(value, attributes=merge(attrs, required), context=context)

    def _record(
        self,
        value: int | float,
        required: Mapping[str, AttributeValue] | None,
        attrs: Iterable[KeyValue],
        context: Context | None,
    ) -> None:
        attributes = merge(attrs, required)
        if self.KIND is InstrumentKind.GAUGE:
            self._inst.set(value, attributes=attributes, context=context)
        else:
            self._inst.record(value, attributes=attributes, context=context)

    def _observation(
        self,
        value: int | float,
        required: Mapping[str, AttributeValue] | None,
        attrs: Iterable[KeyValue],
    ) -> Observation:
        return Observation(value, merge(attrs, required))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.NAME!r}, kind={self.KIND.value}, inst={type(self._inst).__name__})"
