"""Tests for rendering and writing generated instrument modules."""

from __future__ import annotations

import importlib
import importlib.util
import inspect
import logging
from enum import Enum
from pathlib import Path

import pytest
from opentelemetry.metrics import Observation

from metricconv import CodegenError, SemconvInstrument, naming
from metricconv.codegen import HEADER, generate, render_module, render_package_init
from metricconv.schema import build_conventions, load_conventions

FIXTURES = Path(__file__).parent / "test_schema" / "fixtures"


def _import_file(path: Path, name: str):
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def model():
    return load_conventions(FIXTURES / "v1.2.3")


@pytest.fixture
def testconv(model, tmp_path):
    path = tmp_path / "testconv.py"
    path.write_text(render_module(model, "test"), encoding="utf-8")
    return _import_file(path, "generated_testconv")


class TestRenderModule:
    def test_header_and_docstring(self, model):
        source = render_module(model, "test")
        assert source.startswith(HEADER + "\n")
        assert '"""Instruments for the "test" semantic convention namespace (v1.2.3)."""' in source

    def test_compiles(self, model):
        compile(render_module(model, "test"), "testconv.py", "exec")

    def test_sequence_import_only_when_needed(self, model):
        assert "from collections.abc import Sequence" in render_module(model, "test")
        assert "Sequence" not in render_module(model, "other")

    def test_observation_import_only_when_needed(self, model):
        assert "from opentelemetry.metrics import Observation" in render_module(model, "test")
        assert "Observation" not in render_module(model, "other")

    def test_unknown_namespace(self, model):
        with pytest.raises(CodegenError, match="Unknown namespace 'nope'"):
            render_module(model, "nope")

    def test_exports(self, testconv):
        assert testconv.__all__ == ["Active", "MethodAttr", "QueueDepth", "RequestDuration"]

    def test_enum_members(self, testconv):
        assert testconv.MethodAttr.GET.value == "GET"
        assert testconv.MethodAttr.OTHER.value == "_OTHER"
        assert issubclass(testconv.MethodAttr, str)

    def test_class_constants(self, testconv):
        cls = testconv.RequestDuration
        assert issubclass(cls, SemconvInstrument)
        assert cls.NAME == "test.request.duration"
        assert cls.UNIT == "s"
        assert cls.DESCRIPTION == "Duration of test requests."

    def test_record_with_required_and_optional(self, testconv, meter):
        cls = testconv.RequestDuration
        cls(meter).record(
            0.5,
            testconv.MethodAttr.GET,
            cls.attr_status(200),
            cls.attr_server_port(8080),
            cls.attr_tags(["a", "b"]),
        )
        assert meter.created[0].kind == "histogram"
        assert meter.created[0].calls == [
            (
                "record",
                0.5,
                {"test.status": 200, "server.port": 8080, "test.tags": ["a", "b"], "test.method": "GET"},
                None,
            )
        ]

    def test_open_enum_accepts_plain_string(self, testconv, meter):
        testconv.RequestDuration(meter).record(1.0, "PURGE")
        assert meter.created[0].calls[0][2] == {"test.method": "PURGE"}

    def test_add_without_required(self, testconv, meter):
        testconv.Active(meter).add(1)
        assert meter.created[0].calls == [("add", 1, {}, None)]

    def test_observation(self, testconv):
        cls = testconv.QueueDepth
        observation = cls().observation(3, cls.attr_method(testconv.MethodAttr.OTHER))
        assert isinstance(observation, Observation)
        assert observation.attributes == {"test.method": "_OTHER"}

    def test_required_attributes_have_no_helper(self, testconv):
        assert not hasattr(testconv.RequestDuration, "attr_method")


class TestNameCollisions:
    def _model(self):
        attributes = [
            {"id": "test.server.port", "type": "int", "brief": "Test server port."},
            {"id": "server.port", "type": "int", "brief": "Server port."},
            {"id": "test.value", "type": "string", "brief": "A value."},
        ]
        metric = {
            "id": "metric.test.count",
            "type": "metric",
            "metric_name": "test.count",
            "brief": "Counts.",
            "instrument": "counter",
            "unit": "1",
            "attributes": [
                {"ref": "test.value", "requirement_level": "required"},
                {"ref": "test.server.port"},
                {"ref": "server.port"},
            ],
        }
        groups = [{"id": "registry.test", "type": "attribute_group", "attributes": attributes}, metric]
        return build_conventions(groups, "v1.0.0")

    def test_colliding_names_use_full_ids(self):
        source = render_module(self._model(), "test")
        assert "def attr_test_server_port(val: int)" in source
        assert "def attr_server_port(val: int)" in source

    def test_reserved_parameter_renamed(self, tmp_path, meter):
        path = tmp_path / "collide.py"
        path.write_text(render_module(self._model(), "test"), encoding="utf-8")
        module = _import_file(path, "generated_collide")
        module.Count(meter).add(2, value_="x")
        assert meter.created[0].calls[0][2] == {"test.value": "x"}

    @staticmethod
    def _metric(name, attributes=()):
        return {
            "id": f"metric.{name}",
            "type": "metric",
            "metric_name": name,
            "brief": "A test metric.",
            "instrument": "histogram",
            "unit": "s",
            "attributes": list(attributes),
        }

    @staticmethod
    def _enum_group(*member_ids):
        members = [{"id": member_id, "value": f"v{i}"} for i, member_id in enumerate(member_ids)]
        attr = {"id": "test.state", "type": {"members": members}, "brief": "State."}
        return {"id": "registry.test", "type": "attribute_group", "attributes": [attr]}

    def test_metric_class_collision(self):
        groups = [self._metric("test.request_duration"), self._metric("test.request.duration")]
        conventions = build_conventions(groups, "v1.0.0")
        with pytest.raises(CodegenError) as excinfo:
            render_module(conventions, "test")
        message = str(excinfo.value)
        assert "'test.request_duration'" in message
        assert "'test.request.duration'" in message
        assert "'RequestDuration'" in message

    def test_metric_class_collides_with_enum_class(self):
        attr = {"id": "test.mode", "type": {"members": [{"id": "on", "value": "on"}]}, "brief": "Mode."}
        groups = [
            {"id": "registry.test", "type": "attribute_group", "attributes": [attr]},
            self._metric("test.mode_attr", [{"ref": "test.mode"}]),
        ]
        with pytest.raises(CodegenError, match="'test.mode_attr' and an enum attribute .* 'ModeAttr'"):
            render_module(build_conventions(groups, "v1.0.0"), "test")

    def test_enum_member_collision(self):
        groups = [self._enum_group("in-progress", "in_progress"), self._metric("test.duration", [{"ref": "test.state"}])]
        with pytest.raises(CodegenError, match="'in-progress' and 'in_progress' both map to enum member 'IN_PROGRESS'"):
            render_module(build_conventions(groups, "v1.0.0"), "test")

    def test_enum_member_without_name(self):
        groups = [self._enum_group("ok", "_"), self._metric("test.duration", [{"ref": "test.state"}])]
        with pytest.raises(CodegenError, match="test.state.*Cannot derive an enum member name from '_'"):
            render_module(build_conventions(groups, "v1.0.0"), "test")


class TestRenderPackageInit:
    def test_contents(self, model):
        source = render_package_init(model, ["other", "test"])
        namespace = {}
        exec(compile(source, "__init__.py", "exec"), namespace)
        assert namespace["VERSION"] == "v1.2.3"
        assert namespace["SCHEMA_URL"] == "https://opentelemetry.io/schemas/1.2.3"
        assert namespace["MODULES"] == ("otherconv", "testconv")


class TestGenerate:
    def test_writes_package(self, model, tmp_path):
        out = tmp_path / "v1_2_3"
        written = generate(model, out)
        assert [p.name for p in written] == ["__init__.py", "otherconv.py", "testconv.py"]
        assert all(p.read_text(encoding="utf-8").startswith(HEADER) for p in written)

    def test_selected_namespaces(self, model, tmp_path):
        written = generate(model, tmp_path, ["test"])
        assert [p.name for p in written] == ["__init__.py", "testconv.py"]

    def test_unknown_namespace(self, model, tmp_path):
        with pytest.raises(CodegenError, match="Unknown namespace\\(s\\): nope"):
            generate(model, tmp_path, ["test", "nope"])
        assert not (tmp_path / "__init__.py").exists()

    def test_logs(self, model, tmp_path, caplog):
        with caplog.at_level(logging.INFO, logger="metricconv.codegen"):
            generate(model, tmp_path)
        assert "Skipping deprecated metric test.legacy" in caplog.text
        assert "testconv.py (3 instruments)" in caplog.text

    def test_generated_package_importable(self, model, tmp_path, monkeypatch):
        generate(model, tmp_path / "genpkg")
        monkeypatch.syspath_prepend(str(tmp_path))
        module = importlib.import_module("genpkg.testconv")
        assert module.RequestDuration.NAME == "test.request.duration"


class TestBundledCatalog:
    @pytest.mark.parametrize("namespace", ["cpu", "db", "gen_ai", "http"])
    def test_render_matches_committed_exports(self, conventions, namespace, tmp_path):
        path = tmp_path / f"{namespace}.py"
        path.write_text(render_module(conventions, namespace), encoding="utf-8")
        rendered = _import_file(path, f"rendered_{namespace}")
        committed = importlib.import_module(f"metricconv.semconv.v1_32_0.{naming.module_name(namespace)}")
        assert rendered.__all__ == committed.__all__

    @pytest.mark.parametrize("namespace", ["cpu", "db", "gen_ai", "http"])
    def test_render_matches_committed_interfaces(self, conventions, namespace, tmp_path):
        path = tmp_path / f"{namespace}.py"
        path.write_text(render_module(conventions, namespace), encoding="utf-8")
        rendered = _import_file(path, f"rendered_api_{namespace}")
        committed = importlib.import_module(f"metricconv.semconv.v1_32_0.{naming.module_name(namespace)}")

        for name in committed.__all__:
            want, got = getattr(committed, name), getattr(rendered, name)
            if issubclass(want, Enum):
                assert [(m.name, m.value) for m in got] == [(m.name, m.value) for m in want], name
                continue
            assert (got.NAME, got.UNIT, got.DESCRIPTION) == (want.NAME, want.UNIT, want.DESCRIPTION)
            methods = sorted(n for n in vars(want) if n in ("add", "record", "observation") or n.startswith("attr_"))
            assert methods == sorted(n for n in vars(got) if n in ("add", "record", "observation") or n.startswith("attr_"))
            for method in methods:
                assert str(inspect.signature(getattr(got, method))) == str(inspect.signature(getattr(want, method)))
