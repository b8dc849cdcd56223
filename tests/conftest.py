"""Shared test fixtures."""

from __future__ import annotations

import pytest

from metricconv.schema import bundled_conventions


class RecordingInstrument:
    """Stands in for an SDK instrument and keeps every measurement."""

    def __init__(self, kind: str, name: str, **kwargs):
        self.kind = kind
        self.name = name
        self.kwargs = kwargs
        self.calls = []

    def add(self, amount, attributes=None, context=None):
        self.calls.append(("add", amount, attributes, context))

    def record(self, amount, attributes=None, context=None):
        self.calls.append(("record", amount, attributes, context))

    def set(self, amount, attributes=None, context=None):
        self.calls.append(("set", amount, attributes, context))


class RecordingMeter:
    """Meter double that records which instruments were created."""

    def __init__(self):
        self.created = []

    def _create(self, kind, name, **kwargs):
        inst = RecordingInstrument(kind, name, **kwargs)
        self.created.append(inst)
        return inst

    def create_counter(self, name, **kwargs):
        return self._create("counter", name, **kwargs)

    def create_up_down_counter(self, name, **kwargs):
        return self._create("up_down_counter", name, **kwargs)

    def create_histogram(self, name, **kwargs):
        return self._create("histogram", name, **kwargs)

    def create_gauge(self, name, **kwargs):
        return self._create("gauge", name, **kwargs)

    def create_observable_counter(self, name, **kwargs):
        return self._create("observable_counter", name, **kwargs)

    def create_observable_up_down_counter(self, name, **kwargs):
        return self._create("observable_up_down_counter", name, **kwargs)

    def create_observable_gauge(self, name, **kwargs):
        return self._create("observable_gauge", name, **kwargs)


class FailingMeter:
    """Meter double whose instrument factories always raise."""

    def __getattr__(self, attr):
        if not attr.startswith("create_"):
            raise AttributeError(attr)

        def _fail(name, **kwargs):
            raise ValueError(f"instrument {name} already registered with a different kind")

        return _fail


@pytest.fixture
def meter():
    """A RecordingMeter."""
    return RecordingMeter()


@pytest.fixture
def failing_meter():
    """A meter that cannot create instruments."""
    return FailingMeter()


@pytest.fixture(scope="session")
def conventions():
    """The bundled v1.32.0 convention set."""
    return bundled_conventions()
