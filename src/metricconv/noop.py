"""No-op implementation of the OpenTelemetry metrics API.

Every provider, meter and instrument here records nothing and keeps no
state beyond what the API base classes require. Passing a no-op
:class:`MeterProvider` (or one of its meters) anywhere the metrics API is
expected effectively disables metrics.

The classes subclass the abstract types in :mod:`opentelemetry.metrics`, so
``isinstance`` checks against the API succeed.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from opentelemetry import metrics as api
from opentelemetry.context import Context

# The synchronous gauge is only re-exported privately by the public module.
from opentelemetry.metrics._internal.instrument import Gauge as _APIGauge
from opentelemetry.util.types import Attributes


class MeterProvider(api.MeterProvider):
    """A MeterProvider that hands out meters which produce no telemetry."""

    def get_meter(
        self,
        name: str,
        version: str | None = None,
        schema_url: str | None = None,
        attributes: Attributes | None = None,
    ) -> Meter:
        """Return a Meter that does not record any telemetry."""
        return Meter(name, version=version, schema_url=schema_url)


class Meter(api.Meter):
    """A Meter whose instruments produce no telemetry.

    Creating an instrument never fails and never registers anything, so
    duplicate names are silently accepted.
    """

    def __init__(
        self,
        name: str,
        version: str | None = None,
        schema_url: str | None = None,
        attributes: Attributes | None = None,
    ) -> None:
        super().__init__(name, version=version, schema_url=schema_url)

    def create_counter(self, name: str, unit: str = "", description: str = "") -> Counter:
        return Counter(name, unit=unit, description=description)

    def create_up_down_counter(self, name: str, unit: str = "", description: str = "") -> UpDownCounter:
        return UpDownCounter(name, unit=unit, description=description)

    def create_histogram(
        self,
        name: str,
        unit: str = "",
        description: str = "",
        *,
        explicit_bucket_boundaries_advisory: Sequence[float] | None = None,
    ) -> Histogram:
        return Histogram(name, unit=unit, description=description)

    def create_gauge(self, name: str, unit: str = "", description: str = "") -> Gauge:
        return Gauge(name, unit=unit, description=description)

    def create_observable_counter(
        self,
        name: str,
        callbacks: Sequence[api.CallbackT] | None = None,
        unit: str = "",
        description: str = "",
    ) -> ObservableCounter:
        return ObservableCounter(name, callbacks, unit=unit, description=description)

    def create_observable_gauge(
        self,
        name: str,
        callbacks: Sequence[api.CallbackT] | None = None,
        unit: str = "",
        description: str = "",
    ) -> ObservableGauge:
        return ObservableGauge(name, callbacks, unit=unit, description=description)

    def create_observable_up_down_counter(
        self,
        name: str,
        callbacks: Sequence[api.CallbackT] | None = None,
        unit: str = "",
        description: str = "",
    ) -> ObservableUpDownCounter:
        return ObservableUpDownCounter(name, callbacks, unit=unit, description=description)

    def register_callback(
        self,
        callback: Callable[[Observer], None],
        *instruments: api.Asynchronous,
    ) -> Registration:
        """Return a Registration without ever invoking *callback*."""
        return Registration()


class Observer:
    """Records measurements for several instruments inside a callback.

    Every observation is discarded.
    """

    def observe(
        self,
        instrument: api.Asynchronous,
        value: int | float,
        attributes: Attributes = None,
    ) -> None:
        """Perform no operation."""


class Registration:
    """A callback registration with a no-op Meter."""

    def unregister(self) -> None:
        """Perform no operation.

        Nothing was recorded when the callback was registered, so there is
        nothing to release and this never fails.
        """


class Counter(api.Counter):
    """A Counter that produces no telemetry."""

    def __init__(self, name: str, unit: str = "", description: str = "") -> None:
        super().__init__(name, unit=unit, description=description)

    def add(
        self,
        amount: int | float,
        attributes: Attributes = None,
        context: Context | None = None,
    ) -> None:
        """Perform no operation."""


class UpDownCounter(api.UpDownCounter):
    """An UpDownCounter that produces no telemetry."""

    def __init__(self, name: str, unit: str = "", description: str = "") -> None:
        super().__init__(name, unit=unit, description=description)

    def add(
        self,
        amount: int | float,
        attributes: Attributes = None,
        context: Context | None = None,
    ) -> None:
        """Perform no operation."""


class Histogram(api.Histogram):
    """A Histogram that produces no telemetry."""

    def __init__(self, name: str, unit: str = "", description: str = "") -> None:
        super().__init__(name, unit=unit, description=description)

    def record(
        self,
        amount: int | float,
        attributes: Attributes = None,
        context: Context | None = None,
    ) -> None:
        """Perform no operation."""


class Gauge(_APIGauge):
    """A synchronous Gauge that produces no telemetry."""

    def __init__(self, name: str, unit: str = "", description: str = "") -> None:
        super().__init__(name, unit=unit, description=description)

    def set(
        self,
        amount: int | float,
        attributes: Attributes = None,
        context: Context | None = None,
    ) -> None:
        """Perform no operation."""


class ObservableCounter(api.ObservableCounter):
    """An ObservableCounter that never invokes its callbacks."""

    def __init__(
        self,
        name: str,
        callbacks: Sequence[api.CallbackT] | None = None,
        unit: str = "",
        description: str = "",
    ) -> None:
        super().__init__(name, callbacks=None, unit=unit, description=description)


class ObservableGauge(api.ObservableGauge):
    """An ObservableGauge that never invokes its callbacks."""

    def __init__(
        self,
        name: str,
        callbacks: Sequence[api.CallbackT] | None = None,
        unit: str = "",
        description: str = "",
    ) -> None:
        super().__init__(name, callbacks=None, unit=unit, description=description)


class ObservableUpDownCounter(api.ObservableUpDownCounter):
    """An ObservableUpDownCounter that never invokes its callbacks."""

    def __init__(
        self,
        name: str,
        callbacks: Sequence[api.CallbackT] | None = None,
        unit: str = "",
        description: str = "",
    ) -> None:
        super().__init__(name, callbacks=None, unit=unit, description=description)


__all__ = [
    "Counter",
    "Gauge",
    "Histogram",
    "Meter",
    "MeterProvider",
    "ObservableCounter",
    "ObservableGauge",
    "ObservableUpDownCounter",
    "Observer",
    "Registration",
    "UpDownCounter",
]
