"""Tests for the metricconv command line."""

from pathlib import Path

import pytest

from metricconv import __version__
from metricconv.cli import main

FIXTURES = Path(__file__).parent / "test_schema" / "fixtures"
VALID_MODEL = FIXTURES / "v1.2.3"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("METRICCONV_CONVENTIONS_VERSION", raising=False)
    monkeypatch.setenv("OTEL_SDK_DISABLED", "true")


class TestValidate:
    def test_valid_model(self, capsys):
        assert main(["validate", str(VALID_MODEL)]) == 0
        out = capsys.readouterr().out
        assert "6 groups, 4 attributes, 5 metrics (v1.2.3, sha256 " in out

    def test_version_from_parent_directory(self, capsys):
        assert main(["validate", str(VALID_MODEL / "registry.yaml")]) == 0
        assert "1 groups, 4 attributes, 0 metrics (v1.2.3, sha256" in capsys.readouterr().out

    def test_version_from_environment(self, capsys, monkeypatch, tmp_path):
        registry = tmp_path / "registry.yaml"
        registry.write_bytes((VALID_MODEL / "registry.yaml").read_bytes())
        monkeypatch.setenv("METRICCONV_CONVENTIONS_VERSION", "v9.9.9")
        assert main(["validate", str(registry)]) == 0
        assert "1 groups, 4 attributes, 0 metrics (v9.9.9" in capsys.readouterr().out

    def test_version_flag(self, capsys):
        assert main(["validate", str(VALID_MODEL), "--conventions-version", "2.0.0"]) == 0
        assert "(v2.0.0, sha256" in capsys.readouterr().out

    def test_invalid_version_flag(self, capsys):
        assert main(["validate", str(VALID_MODEL), "--conventions-version", "next"]) == 1
        assert "Invalid convention version" in capsys.readouterr().err

    def test_invalid_model(self, capsys):
        assert main(["validate", str(FIXTURES / "unknown_ref.yaml")]) == 1
        assert "error: Unknown attribute reference 'test.missing'" in capsys.readouterr().err

    def test_missing_path(self, capsys, tmp_path):
        assert main(["validate", str(tmp_path / "missing")]) == 1
        assert capsys.readouterr().err.startswith("error: ")


class TestList:
    def test_all(self, capsys):
        assert main(["list", str(VALID_MODEL)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "other.count\tcounter\t1",
            "test.active\tup_down_counter\t{request}",
            "test.queue.depth\tobservable_gauge\t{item}",
            "test.request.duration\thistogram\ts",
        ]

    def test_namespace_filter(self, capsys):
        assert main(["list", str(VALID_MODEL), "--namespace", "other"]) == 0
        assert capsys.readouterr().out.splitlines() == ["other.count\tcounter\t1"]


class TestGenerate:
    def test_generate(self, capsys, tmp_path):
        out = tmp_path / "v1_2_3"
        assert main(["generate", str(VALID_MODEL), "--output", str(out)]) == 0
        printed = capsys.readouterr().out.splitlines()
        assert [Path(p).name for p in printed] == ["__init__.py", "otherconv.py", "testconv.py"]
        assert (out / "testconv.py").is_file()

    def test_namespace_option(self, capsys, tmp_path):
        assert main(["generate", str(VALID_MODEL), "-o", str(tmp_path), "--namespace", "test"]) == 0
        assert not (tmp_path / "otherconv.py").exists()

    def test_unknown_namespace(self, capsys, tmp_path):
        assert main(["generate", str(VALID_MODEL), "-o", str(tmp_path), "--namespace", "nope"]) == 1
        assert "Unknown namespace(s): nope" in capsys.readouterr().err

    def test_enum_member_collision_reported(self, capsys, tmp_path):
        model = tmp_path / "v1.0.0"
        model.mkdir()
        (model / "model.yaml").write_text(
            "groups:\n"
            "  - id: registry.test\n"
            "    type: attribute_group\n"
            "    attributes:\n"
            "      - id: test.state\n"
            "        brief: State.\n"
            "        type:\n"
            "          members:\n"
            "            - {id: in-progress, value: a}\n"
            "            - {id: in_progress, value: b}\n"
            "  - id: metric.test.duration\n"
            "    type: metric\n"
            "    metric_name: test.duration\n"
            "    brief: Duration.\n"
            "    instrument: histogram\n"
            "    unit: s\n"
            "    attributes:\n"
            "      - ref: test.state\n",
            encoding="utf-8",
        )
        assert main(["generate", str(model), "-o", str(tmp_path / "out")]) == 1
        assert "both map to enum member 'IN_PROGRESS'" in capsys.readouterr().err


class TestParser:
    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])
