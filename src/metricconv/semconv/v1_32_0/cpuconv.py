# Code generated by metricconv from semantic convention definitions. DO NOT EDIT.
"""Instruments for the "cpu" semantic convention namespace (v1.32.0)."""

from __future__ import annotations

from enum import Enum

from opentelemetry.context import Context
from opentelemetry.metrics import Observation

from metricconv.attribute import KeyValue, attribute_value
from metricconv.instrument import InstrumentKind, SemconvInstrument, ValueType

__all__ = [
    "Frequency",
    "ModeAttr",
    "Time",
    "Utilization",
]


class ModeAttr(str, Enum):
    """Values of the ``cpu.mode`` attribute.

    The mode of the CPU.
    """

    USER = "user"
    SYSTEM = "system"
    NICE = "nice"
    IDLE = "idle"
    IOWAIT = "iowait"
    INTERRUPT = "interrupt"
    STEAL = "steal"
    KERNEL = "kernel"


class Frequency(SemconvInstrument):
    """Instrument for the ``cpu.frequency`` semantic convention.

    Operating frequency of the logical CPU in Hertz.
    """

    NAME = "cpu.frequency"
    UNIT = "Hz"
    DESCRIPTION = "Operating frequency of the logical CPU in Hertz."
    KIND = InstrumentKind.GAUGE
    VALUE_TYPE = ValueType.INT

    def record(
        self,
        value: int,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value*.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.
        """
        self._record(value, None, attrs, context)

    @staticmethod
    def attr_logical_number(val: int) -> KeyValue:
        """Optional ``cpu.logical_number`` attribute.

        The logical CPU number [0..n-1].
        """
        return ("cpu.logical_number", val)


class Time(SemconvInstrument):
    """Instrument for the ``cpu.time`` semantic convention.

    Seconds each logical CPU spent on each mode.
    """

    NAME = "cpu.time"
    UNIT = "s"
    DESCRIPTION = "Seconds each logical CPU spent on each mode."
    KIND = InstrumentKind.OBSERVABLE_COUNTER
    VALUE_TYPE = ValueType.DOUBLE

    def observation(
        self,
        value: float,
        *attrs: KeyValue,
    ) -> Observation:
        """Return an Observation of *value* for use in a callback.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.
        """
        return self._observation(value, None, attrs)

    @staticmethod
    def attr_logical_number(val: int) -> KeyValue:
        """Optional ``cpu.logical_number`` attribute.

        The logical CPU number [0..n-1].
        """
        return ("cpu.logical_number", val)

    @staticmethod
    def attr_mode(val: ModeAttr | str) -> KeyValue:
        """Optional ``cpu.mode`` attribute.

        The mode of the CPU.
        """
        return ("cpu.mode", attribute_value(val))


class Utilization(SemconvInstrument):
    """Instrument for the ``cpu.utilization`` semantic convention.

    For each logical CPU, the utilization is calculated as the change in
    cumulative CPU time (cpu.time) over a measurement interval, divided by the
    elapsed time.
    """

    NAME = "cpu.utilization"
    UNIT = "1"
    DESCRIPTION = "For each logical CPU, the utilization is calculated as the change in cumulative CPU time (cpu.time) over a measurement interval, divided by the elapsed time."
    KIND = InstrumentKind.GAUGE
    VALUE_TYPE = ValueType.INT

    def record(
        self,
        value: int,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value*.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.
        """
        self._record(value, None, attrs, context)

    @staticmethod
    def attr_logical_number(val: int) -> KeyValue:
        """Optional ``cpu.logical_number`` attribute.

        The logical CPU number [0..n-1].
        """
        return ("cpu.logical_number", val)

    @staticmethod
    def attr_mode(val: ModeAttr | str) -> KeyValue:
        """Optional ``cpu.mode`` attribute.

        The mode of the CPU.
        """
        return ("cpu.mode", attribute_value(val))
