"""Tests for the generated v1.32.0 instrument catalog."""

import importlib

import pytest
from opentelemetry.metrics import Observation

from metricconv import SemconvInstrument, noop
from metricconv.semconv import v1_32_0
from metricconv.semconv.v1_32_0 import cpuconv, dbconv, genaiconv, httpconv


def _instrument_classes():
    for module_name in v1_32_0.MODULES:
        module = importlib.import_module(f"metricconv.semconv.v1_32_0.{module_name}")
        for name in module.__all__:
            obj = getattr(module, name)
            if isinstance(obj, type) and issubclass(obj, SemconvInstrument):
                yield obj


class TestPackage:
    def test_version(self, conventions):
        assert v1_32_0.VERSION == conventions.version
        assert v1_32_0.SCHEMA_URL == conventions.schema_url

    def test_modules(self):
        assert v1_32_0.MODULES == ("cpuconv", "dbconv", "genaiconv", "httpconv")

    @pytest.mark.parametrize("cls", list(_instrument_classes()), ids=lambda cls: cls.NAME)
    def test_constants_match_conventions(self, conventions, cls):
        metric = conventions.metric(cls.NAME)
        assert cls.UNIT == metric.unit
        assert cls.DESCRIPTION == metric.brief
        assert cls.KIND is metric.kind
        assert cls.VALUE_TYPE is metric.value_type

    def test_every_metric_has_an_instrument(self, conventions):
        catalog = {cls.NAME for cls in _instrument_classes()}
        expected = {m.metric_name for metrics in conventions.namespaces().values() for m in metrics}
        assert catalog == expected

    @pytest.mark.parametrize(
        "module, count",
        [(cpuconv, 3), (dbconv, 11), (genaiconv, 5), (httpconv, 10)],
        ids=lambda v: getattr(v, "__name__", str(v)),
    )
    def test_namespace_sizes(self, module, count):
        classes = [getattr(module, n) for n in module.__all__]
        assert sum(1 for c in classes if issubclass(c, SemconvInstrument)) == count


class TestHTTP:
    def test_server_request_duration(self, meter):
        cls = httpconv.ServerRequestDuration
        cls(meter).record(
            0.25,
            httpconv.RequestMethodAttr.GET,
            "https",
            cls.attr_route("/users/{id}"),
            cls.attr_response_status_code(200),
        )
        assert meter.created[0].name == "http.server.request.duration"
        assert meter.created[0].calls[0][2] == {
            "http.route": "/users/{id}",
            "http.response.status_code": 200,
            "http.request.method": "GET",
            "url.scheme": "https",
        }

    def test_undeclared_method(self, meter):
        httpconv.ServerRequestDuration(meter).record(0.1, "PURGE", "http")
        assert meter.created[0].calls[0][2]["http.request.method"] == "PURGE"

    def test_required_attribute_wins(self, meter):
        httpconv.ServerRequestDuration(meter).record(0.1, "GET", "https", ("url.scheme", "ftp"))
        assert meter.created[0].calls[0][2]["url.scheme"] == "https"

    def test_active_requests(self, meter):
        active = httpconv.ServerActiveRequests(meter)
        active.add(1, httpconv.RequestMethodAttr.POST, "http")
        active.add(-1, httpconv.RequestMethodAttr.POST, "http")
        assert [c[1] for c in meter.created[0].calls] == [1, -1]
        assert meter.created[0].kind == "up_down_counter"

    def test_client_request_duration(self, meter):
        cls = httpconv.ClientRequestDuration
        cls(meter).record(1.5, "GET", "example.com", 443, cls.attr_error_type(httpconv.ErrorTypeAttr.OTHER))
        assert meter.created[0].calls[0][2] == {
            "error.type": "_OTHER",
            "http.request.method": "GET",
            "server.address": "example.com",
            "server.port": 443,
        }

    def test_client_active_requests(self, meter):
        cls = httpconv.ClientActiveRequests
        cls(meter).add(1, "example.com", 443, cls.attr_request_method(httpconv.RequestMethodAttr.GET))
        assert meter.created[0].kind == "up_down_counter"
        assert meter.created[0].calls[0][2] == {
            "http.request.method": "GET",
            "server.address": "example.com",
            "server.port": 443,
        }

    def test_client_open_connections(self, meter):
        cls = httpconv.ClientOpenConnections
        cls(meter).add(2, httpconv.ConnectionStateAttr.IDLE, "example.com", 80, cls.attr_url_scheme("http"))
        assert meter.created[0].name == "http.client.open_connections"
        assert meter.created[0].calls[0][2] == {
            "url.scheme": "http",
            "http.connection.state": "idle",
            "server.address": "example.com",
            "server.port": 80,
        }

    def test_client_connection_duration(self, meter):
        cls = httpconv.ClientConnectionDuration
        cls(meter).record(3.2, "example.com", 443, cls.attr_network_peer_address("10.1.2.80"))
        assert meter.created[0].kind == "histogram"
        assert meter.created[0].calls[0][2]["network.peer.address"] == "10.1.2.80"

    def test_client_and_server_address_briefs(self, conventions):
        client = {a.id: a.effective_brief for a in conventions.metric("http.client.request.duration").attributes}
        server = {a.id: a.effective_brief for a in conventions.metric("http.server.request.duration").attributes}
        assert client["server.address"].startswith("Host identifier of the URI origin")
        assert client["server.port"].startswith("Port identifier of the URI origin")
        assert server["server.address"].startswith("Name of the local HTTP server")
        assert "Host identifier of the URI origin" in httpconv.ClientRequestDuration.record.__doc__

    @pytest.mark.parametrize(
        "cls, name",
        [
            (httpconv.ClientRequestBodySize, "http.client.request.body.size"),
            (httpconv.ClientResponseBodySize, "http.client.response.body.size"),
        ],
    )
    def test_client_body_sizes(self, meter, cls, name):
        cls(meter).record(512, "POST", "example.com", 443, cls.attr_url_template("/users/{id}"))
        assert meter.created[0].name == name
        assert meter.created[0].kwargs["unit"] == "By"
        assert meter.created[0].calls[0][1:3] == (
            512,
            {
                "url.template": "/users/{id}",
                "http.request.method": "POST",
                "server.address": "example.com",
                "server.port": 443,
            },
        )

    def test_server_response_body_size(self, meter):
        cls = httpconv.ServerResponseBodySize
        cls(meter).record(2048, "GET", "https", cls.attr_route("/"))
        assert cls.VALUE_TYPE.value == "int"
        assert meter.created[0].calls[0][2] == {"http.route": "/", "http.request.method": "GET", "url.scheme": "https"}

    def test_defaults_to_noop(self):
        inst = httpconv.ServerRequestDuration()
        assert isinstance(inst.inst, noop.Histogram)
        inst.record(0.1, "GET", "https")


class TestCPU:
    def test_time_is_observable(self, meter):
        def callback(options):
            return []

        cpuconv.Time(meter, callbacks=[callback])
        assert meter.created[0].kind == "observable_counter"
        assert meter.created[0].kwargs["callbacks"] == [callback]

    def test_time_observation(self):
        cls = cpuconv.Time
        observation = cls().observation(12.5, cls.attr_mode(cpuconv.ModeAttr.USER), cls.attr_logical_number(0))
        assert isinstance(observation, Observation)
        assert observation.value == 12.5
        assert observation.attributes == {"cpu.mode": "user", "cpu.logical_number": 0}

    def test_frequency_is_gauge(self, meter):
        cpuconv.Frequency(meter).record(2_400_000_000, cpuconv.Frequency.attr_logical_number(3))
        assert meter.created[0].kind == "gauge"
        assert meter.created[0].calls == [("set", 2_400_000_000, {"cpu.logical_number": 3}, None)]


class TestGenAI:
    def test_token_usage(self, meter):
        cls = genaiconv.ClientTokenUsage
        cls(meter).record(
            42,
            genaiconv.OperationNameAttr.CHAT,
            genaiconv.SystemAttr.ANTHROPIC,
            genaiconv.TokenTypeAttr.INPUT,
            cls.attr_request_model("claude"),
        )
        assert meter.created[0].calls[0][2] == {
            "gen_ai.request.model": "claude",
            "gen_ai.operation.name": "chat",
            "gen_ai.system": "anthropic",
            "gen_ai.token.type": "input",
        }

    def test_dotted_member_value(self):
        assert genaiconv.SystemAttr.AZ_AI_INFERENCE.value == "az.ai.inference"

    def test_server_request_duration(self, meter):
        cls = genaiconv.ServerRequestDuration
        cls(meter).record(
            1.2,
            genaiconv.OperationNameAttr.CHAT,
            "openai",
            cls.attr_error_type(genaiconv.ErrorTypeAttr.OTHER),
            cls.attr_server_port(8000),
        )
        assert meter.created[0].name == "gen_ai.server.request.duration"
        assert meter.created[0].calls[0][2] == {
            "error.type": "_OTHER",
            "server.port": 8000,
            "gen_ai.operation.name": "chat",
            "gen_ai.system": "openai",
        }

    @pytest.mark.parametrize(
        "cls, name",
        [
            (genaiconv.ServerTimePerOutputToken, "gen_ai.server.time_per_output_token"),
            (genaiconv.ServerTimeToFirstToken, "gen_ai.server.time_to_first_token"),
        ],
    )
    def test_server_token_latency(self, meter, cls, name):
        cls(meter).record(0.05, "chat", genaiconv.SystemAttr.MISTRAL_AI, cls.attr_response_model("mistral-large"))
        assert meter.created[0].name == name
        assert meter.created[0].kwargs["unit"] == "s"
        assert meter.created[0].calls[0][2] == {
            "gen_ai.response.model": "mistral-large",
            "gen_ai.operation.name": "chat",
            "gen_ai.system": "mistral_ai",
        }
        assert not hasattr(cls, "attr_error_type")


class TestDB:
    def test_connection_count(self, meter):
        dbconv.ClientConnectionCount(meter).add(1, "main", dbconv.ClientConnectionStateAttr.USED)
        assert meter.created[0].calls[0][2] == {
            "db.client.connection.pool.name": "main",
            "db.client.connection.state": "used",
        }

    def test_operation_duration(self, meter):
        cls = dbconv.ClientOperationDuration
        cls(meter).record(0.003, dbconv.SystemNameAttr.POSTGRESQL, cls.attr_operation_name("SELECT"))
        assert meter.created[0].calls[0][2] == {"db.operation.name": "SELECT", "db.system.name": "postgresql"}

    def test_connection_timeouts(self, meter):
        dbconv.ClientConnectionTimeouts(meter).add(1, "main")
        assert meter.created[0].kind == "counter"

    @pytest.mark.parametrize(
        "cls, kind",
        [
            (dbconv.ClientConnectionCreateTime, "histogram"),
            (dbconv.ClientConnectionIdleMax, "up_down_counter"),
            (dbconv.ClientConnectionIdleMin, "up_down_counter"),
            (dbconv.ClientConnectionMax, "up_down_counter"),
            (dbconv.ClientConnectionPendingRequests, "up_down_counter"),
            (dbconv.ClientConnectionUseTime, "histogram"),
            (dbconv.ClientConnectionWaitTime, "histogram"),
        ],
        ids=lambda v: getattr(v, "NAME", v),
    )
    def test_pool_instruments(self, meter, cls, kind):
        inst = cls(meter)
        measure = inst.record if kind == "histogram" else inst.add
        measure(1, "main")
        assert meter.created[0].kind == kind
        assert meter.created[0].calls[0][2] == {"db.client.connection.pool.name": "main"}

    def test_returned_rows(self, meter):
        cls = dbconv.ClientResponseReturnedRows
        cls(meter).record(25, dbconv.SystemNameAttr.MYSQL, cls.attr_collection_name("users"), cls.attr_query_text("SELECT 1"))
        assert cls.UNIT == "{row}"
        assert meter.created[0].calls[0][1:3] == (
            25,
            {"db.collection.name": "users", "db.query.text": "SELECT 1", "db.system.name": "mysql"},
        )
        assert not hasattr(cls, "attr_stored_procedure_name")
