# Code generated by metricconv from semantic convention definitions. DO NOT EDIT.
"""Instruments for the "http" semantic convention namespace (v1.32.0)."""

from __future__ import annotations

from enum import Enum

from opentelemetry.context import Context

from metricconv.attribute import KeyValue, attribute_value
from metricconv.instrument import InstrumentKind, SemconvInstrument, ValueType

__all__ = [
    "ClientActiveRequests",
    "ClientConnectionDuration",
    "ClientOpenConnections",
    "ClientRequestBodySize",
    "ClientRequestDuration",
    "ClientResponseBodySize",
    "ConnectionStateAttr",
    "ErrorTypeAttr",
    "RequestMethodAttr",
    "ServerActiveRequests",
    "ServerRequestBodySize",
    "ServerRequestDuration",
    "ServerResponseBodySize",
    "UserAgentSyntheticTypeAttr",
]


class ErrorTypeAttr(str, Enum):
    """Values of the ``error.type`` attribute.

    Describes a class of error the operation ended with.
    """

    # A fallback error value to be used when the instrumentation doesn't define
    # a custom value.
    OTHER = "_OTHER"


class ConnectionStateAttr(str, Enum):
    """Values of the ``http.connection.state`` attribute.

    State of the HTTP connection in the HTTP connection pool.
    """

    # Active state.
    ACTIVE = "active"
    # Idle state.
    IDLE = "idle"


class RequestMethodAttr(str, Enum):
    """Values of the ``http.request.method`` attribute.

    HTTP request method.
    """

    # CONNECT method.
    CONNECT = "CONNECT"
    # DELETE method.
    DELETE = "DELETE"
    # GET method.
    GET = "GET"
    # HEAD method.
    HEAD = "HEAD"
    # OPTIONS method.
    OPTIONS = "OPTIONS"
    # PATCH method.
    PATCH = "PATCH"
    # POST method.
    POST = "POST"
    # PUT method.
    PUT = "PUT"
    # TRACE method.
    TRACE = "TRACE"
    # Any HTTP method that the instrumentation has no prior knowledge of.
    OTHER = "_OTHER"


class UserAgentSyntheticTypeAttr(str, Enum):
    """Values of the ``user_agent.synthetic.type`` attribute.

    Specifies the category of synthetic traffic, such as tests or bots.
    """

    # Bot source.
    BOT = "bot"
    # Synthetic test source.
    TEST = "test"


class ClientActiveRequests(SemconvInstrument):
    """Instrument for the ``http.client.active_requests`` semantic convention.

    Number of active HTTP requests.
    """

    NAME = "http.client.active_requests"
    UNIT = "{request}"
    DESCRIPTION = "Number of active HTTP requests."
    KIND = InstrumentKind.UP_DOWN_COUNTER
    VALUE_TYPE = ValueType.INT

    def add(
        self,
        value: int,
        server_address: str,
        server_port: int,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Add *value* to the instrument with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            server_address: Server domain name if available without reverse DNS
                lookup; otherwise, IP address or Unix domain socket name.
            server_port: Port identifier of the URI origin HTTP request is sent
                to.
        """
        self._add(
            value,
            {
                "server.address": server_address,
                "server.port": server_port,
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_url_template(val: str) -> KeyValue:
        """Optional ``url.template`` attribute.

        The low-cardinality template of an absolute path reference.
        """
        return ("url.template", val)

    @staticmethod
    def attr_request_method(val: RequestMethodAttr | str) -> KeyValue:
        """Optional ``http.request.method`` attribute.

        HTTP request method.
        """
        return ("http.request.method", attribute_value(val))

    @staticmethod
    def attr_url_scheme(val: str) -> KeyValue:
        """Optional ``url.scheme`` attribute.

        The URI scheme component identifying the used protocol.
        """
        return ("url.scheme", val)


class ClientConnectionDuration(SemconvInstrument):
    """Instrument for the ``http.client.connection.duration`` semantic convention.

    The duration of the successfully established outbound HTTP connections.
    """

    NAME = "http.client.connection.duration"
    UNIT = "s"
    DESCRIPTION = "The duration of the successfully established outbound HTTP connections."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.DOUBLE

    def record(
        self,
        value: float,
        server_address: str,
        server_port: int,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            server_address: Server domain name if available without reverse DNS
                lookup; otherwise, IP address or Unix domain socket name.
            server_port: Port identifier of the URI origin HTTP request is sent
                to.
        """
        self._record(
            value,
            {
                "server.address": server_address,
                "server.port": server_port,
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_network_peer_address(val: str) -> KeyValue:
        """Optional ``network.peer.address`` attribute.

        Peer address of the network connection - IP address or Unix domain
        socket name.
        """
        return ("network.peer.address", val)

    @staticmethod
    def attr_network_protocol_version(val: str) -> KeyValue:
        """Optional ``network.protocol.version`` attribute.

        The actual version of the protocol used for network communication.
        """
        return ("network.protocol.version", val)

    @staticmethod
    def attr_url_scheme(val: str) -> KeyValue:
        """Optional ``url.scheme`` attribute.

        The URI scheme component identifying the used protocol.
        """
        return ("url.scheme", val)


class ClientOpenConnections(SemconvInstrument):
    """Instrument for the ``http.client.open_connections`` semantic convention.

    Number of outbound HTTP connections that are currently active or idle on
    the client.
    """

    NAME = "http.client.open_connections"
    UNIT = "{connection}"
    DESCRIPTION = "Number of outbound HTTP connections that are currently active or idle on the client."
    KIND = InstrumentKind.UP_DOWN_COUNTER
    VALUE_TYPE = ValueType.INT

    def add(
        self,
        value: int,
        connection_state: ConnectionStateAttr | str,
        server_address: str,
        server_port: int,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Add *value* to the instrument with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            connection_state: State of the HTTP connection in the HTTP
                connection pool.
            server_address: Server domain name if available without reverse DNS
                lookup; otherwise, IP address or Unix domain socket name.
            server_port: Port identifier of the URI origin HTTP request is sent
                to.
        """
        self._add(
            value,
            {
                "http.connection.state": attribute_value(connection_state),
                "server.address": server_address,
                "server.port": server_port,
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_network_peer_address(val: str) -> KeyValue:
        """Optional ``network.peer.address`` attribute.

        Peer address of the network connection - IP address or Unix domain
        socket name.
        """
        return ("network.peer.address", val)

    @staticmethod
    def attr_network_protocol_version(val: str) -> KeyValue:
        """Optional ``network.protocol.version`` attribute.

        The actual version of the protocol used for network communication.
        """
        return ("network.protocol.version", val)

    @staticmethod
    def attr_url_scheme(val: str) -> KeyValue:
        """Optional ``url.scheme`` attribute.

        The URI scheme component identifying the used protocol.
        """
        return ("url.scheme", val)


class ClientRequestBodySize(SemconvInstrument):
    """Instrument for the ``http.client.request.body.size`` semantic convention.

    Size of HTTP client request bodies.
    """

    NAME = "http.client.request.body.size"
    UNIT = "By"
    DESCRIPTION = "Size of HTTP client request bodies."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.INT

    def record(
        self,
        value: int,
        request_method: RequestMethodAttr | str,
        server_address: str,
        server_port: int,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            request_method: HTTP request method.
            server_address: Host identifier of the URI origin HTTP request is
                sent to.
            server_port: Port identifier of the URI origin HTTP request is sent
                to.
        """
        self._record(
            value,
            {
                "http.request.method": attribute_value(request_method),
                "server.address": server_address,
                "server.port": server_port,
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_error_type(val: ErrorTypeAttr | str) -> KeyValue:
        """Optional ``error.type`` attribute.

        Describes a class of error the operation ended with.
        """
        return ("error.type", attribute_value(val))

    @staticmethod
    def attr_response_status_code(val: int) -> KeyValue:
        """Optional ``http.response.status_code`` attribute.

        HTTP response status code.
        """
        return ("http.response.status_code", val)

    @staticmethod
    def attr_network_protocol_name(val: str) -> KeyValue:
        """Optional ``network.protocol.name`` attribute.

        OSI application layer or non-OSI equivalent.
        """
        return ("network.protocol.name", val)

    @staticmethod
    def attr_url_template(val: str) -> KeyValue:
        """Optional ``url.template`` attribute.

        The low-cardinality template of an absolute path reference.
        """
        return ("url.template", val)

    @staticmethod
    def attr_network_protocol_version(val: str) -> KeyValue:
        """Optional ``network.protocol.version`` attribute.

        The actual version of the protocol used for network communication.
        """
        return ("network.protocol.version", val)

    @staticmethod
    def attr_url_scheme(val: str) -> KeyValue:
        """Optional ``url.scheme`` attribute.

        The URI scheme component identifying the used protocol.
        """
        return ("url.scheme", val)


class ClientRequestDuration(SemconvInstrument):
    """Instrument for the ``http.client.request.duration`` semantic convention.

    Duration of HTTP client requests.
    """

    NAME = "http.client.request.duration"
    UNIT = "s"
    DESCRIPTION = "Duration of HTTP client requests."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.DOUBLE

    def record(
        self,
        value: float,
        request_method: RequestMethodAttr | str,
        server_address: str,
        server_port: int,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            request_method: HTTP request method.
            server_address: Host identifier of the URI origin HTTP request is
                sent to.
            server_port: Port identifier of the URI origin HTTP request is sent
                to.
        """
        self._record(
            value,
            {
                "http.request.method": attribute_value(request_method),
                "server.address": server_address,
                "server.port": server_port,
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_error_type(val: ErrorTypeAttr | str) -> KeyValue:
        """Optional ``error.type`` attribute.

        Describes a class of error the operation ended with.
        """
        return ("error.type", attribute_value(val))

    @staticmethod
    def attr_response_status_code(val: int) -> KeyValue:
        """Optional ``http.response.status_code`` attribute.

        HTTP response status code.
        """
        return ("http.response.status_code", val)

    @staticmethod
    def attr_network_protocol_name(val: str) -> KeyValue:
        """Optional ``network.protocol.name`` attribute.

        OSI application layer or non-OSI equivalent.
        """
        return ("network.protocol.name", val)

    @staticmethod
    def attr_network_protocol_version(val: str) -> KeyValue:
        """Optional ``network.protocol.version`` attribute.

        The actual version of the protocol used for network communication.
        """
        return ("network.protocol.version", val)

    @staticmethod
    def attr_url_scheme(val: str) -> KeyValue:
        """Optional ``url.scheme`` attribute.

        The URI scheme component identifying the used protocol.
        """
        return ("url.scheme", val)

    @staticmethod
    def attr_url_template(val: str) -> KeyValue:
        """Optional ``url.template`` attribute.

        The low-cardinality template of an absolute path reference.
        """
        return ("url.template", val)


class ClientResponseBodySize(SemconvInstrument):
    """Instrument for the ``http.client.response.body.size`` semantic convention.

    Size of HTTP client response bodies.
    """

    NAME = "http.client.response.body.size"
    UNIT = "By"
    DESCRIPTION = "Size of HTTP client response bodies."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.INT

    def record(
        self,
        value: int,
        request_method: RequestMethodAttr | str,
        server_address: str,
        server_port: int,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            request_method: HTTP request method.
            server_address: Host identifier of the URI origin HTTP request is
                sent to.
            server_port: Port identifier of the URI origin HTTP request is sent
                to.
        """
        self._record(
            value,
            {
                "http.request.method": attribute_value(request_method),
                "server.address": server_address,
                "server.port": server_port,
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_error_type(val: ErrorTypeAttr | str) -> KeyValue:
        """Optional ``error.type`` attribute.

        Describes a class of error the operation ended with.
        """
        return ("error.type", attribute_value(val))

    @staticmethod
    def attr_response_status_code(val: int) -> KeyValue:
        """Optional ``http.response.status_code`` attribute.

        HTTP response status code.
        """
        return ("http.response.status_code", val)

    @staticmethod
    def attr_network_protocol_name(val: str) -> KeyValue:
        """Optional ``network.protocol.name`` attribute.

        OSI application layer or non-OSI equivalent.
        """
        return ("network.protocol.name", val)

    @staticmethod
    def attr_url_template(val: str) -> KeyValue:
        """Optional ``url.template`` attribute.

        The low-cardinality template of an absolute path reference.
        """
        return ("url.template", val)

    @staticmethod
    def attr_network_protocol_version(val: str) -> KeyValue:
        """Optional ``network.protocol.version`` attribute.

        The actual version of the protocol used for network communication.
        """
        return ("network.protocol.version", val)

    @staticmethod
    def attr_url_scheme(val: str) -> KeyValue:
        """Optional ``url.scheme`` attribute.

        The URI scheme component identifying the used protocol.
        """
        return ("url.scheme", val)


class ServerActiveRequests(SemconvInstrument):
    """Instrument for the ``http.server.active_requests`` semantic convention.

    Number of active HTTP server requests.
    """

    NAME = "http.server.active_requests"
    UNIT = "{request}"
    DESCRIPTION = "Number of active HTTP server requests."
    KIND = InstrumentKind.UP_DOWN_COUNTER
    VALUE_TYPE = ValueType.INT

    def add(
        self,
        value: int,
        request_method: RequestMethodAttr | str,
        url_scheme: str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Add *value* to the instrument with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            request_method: HTTP request method.
            url_scheme: The URI scheme component identifying the used protocol.
        """
        self._add(
            value,
            {
                "http.request.method": attribute_value(request_method),
                "url.scheme": url_scheme,
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_server_address(val: str) -> KeyValue:
        """Optional ``server.address`` attribute.

        Name of the local HTTP server that received the request.
        """
        return ("server.address", val)

    @staticmethod
    def attr_server_port(val: int) -> KeyValue:
        """Optional ``server.port`` attribute.

        Port of the local HTTP server that received the request.
        """
        return ("server.port", val)


class ServerRequestBodySize(SemconvInstrument):
    """Instrument for the ``http.server.request.body.size`` semantic convention.

    Size of HTTP server request bodies.
    """

    NAME = "http.server.request.body.size"
    UNIT = "By"
    DESCRIPTION = "Size of HTTP server request bodies."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.INT

    def record(
        self,
        value: int,
        request_method: RequestMethodAttr | str,
        url_scheme: str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            request_method: HTTP request method.
            url_scheme: The URI scheme component identifying the used protocol.
        """
        self._record(
            value,
            {
                "http.request.method": attribute_value(request_method),
                "url.scheme": url_scheme,
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_error_type(val: ErrorTypeAttr | str) -> KeyValue:
        """Optional ``error.type`` attribute.

        Describes a class of error the operation ended with.
        """
        return ("error.type", attribute_value(val))

    @staticmethod
    def attr_response_status_code(val: int) -> KeyValue:
        """Optional ``http.response.status_code`` attribute.

        HTTP response status code.
        """
        return ("http.response.status_code", val)

    @staticmethod
    def attr_route(val: str) -> KeyValue:
        """Optional ``http.route`` attribute.

        The matched route, that is, the path template in the format used by the
        respective server framework.
        """
        return ("http.route", val)

    @staticmethod
    def attr_network_protocol_name(val: str) -> KeyValue:
        """Optional ``network.protocol.name`` attribute.

        OSI application layer or non-OSI equivalent.
        """
        return ("network.protocol.name", val)

    @staticmethod
    def attr_network_protocol_version(val: str) -> KeyValue:
        """Optional ``network.protocol.version`` attribute.

        The actual version of the protocol used for network communication.
        """
        return ("network.protocol.version", val)

    @staticmethod
    def attr_server_address(val: str) -> KeyValue:
        """Optional ``server.address`` attribute.

        Name of the local HTTP server that received the request.
        """
        return ("server.address", val)

    @staticmethod
    def attr_server_port(val: int) -> KeyValue:
        """Optional ``server.port`` attribute.

        Port of the local HTTP server that received the request.
        """
        return ("server.port", val)

    @staticmethod
    def attr_user_agent_synthetic_type(val: UserAgentSyntheticTypeAttr | str) -> KeyValue:
        """Optional ``user_agent.synthetic.type`` attribute.

        Specifies the category of synthetic traffic, such as tests or bots.
        """
        return ("user_agent.synthetic.type", attribute_value(val))


class ServerRequestDuration(SemconvInstrument):
    """Instrument for the ``http.server.request.duration`` semantic convention.

    Duration of HTTP server requests.
    """

    NAME = "http.server.request.duration"
    UNIT = "s"
    DESCRIPTION = "Duration of HTTP server requests."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.DOUBLE

    def record(
        self,
        value: float,
        request_method: RequestMethodAttr | str,
        url_scheme: str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            request_method: HTTP request method.
            url_scheme: The URI scheme component identifying the used protocol.
        """
        self._record(
            value,
            {
                "http.request.method": attribute_value(request_method),
                "url.scheme": url_scheme,
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_error_type(val: ErrorTypeAttr | str) -> KeyValue:
        """Optional ``error.type`` attribute.

        Describes a class of error the operation ended with.
        """
        return ("error.type", attribute_value(val))

    @staticmethod
    def attr_response_status_code(val: int) -> KeyValue:
        """Optional ``http.response.status_code`` attribute.

        HTTP response status code.
        """
        return ("http.response.status_code", val)

    @staticmethod
    def attr_route(val: str) -> KeyValue:
        """Optional ``http.route`` attribute.

        The matched route, that is, the path template in the format used by the
        respective server framework.
        """
        return ("http.route", val)

    @staticmethod
    def attr_network_protocol_name(val: str) -> KeyValue:
        """Optional ``network.protocol.name`` attribute.

        OSI application layer or non-OSI equivalent.
        """
        return ("network.protocol.name", val)

    @staticmethod
    def attr_network_protocol_version(val: str) -> KeyValue:
        """Optional ``network.protocol.version`` attribute.

        The actual version of the protocol used for network communication.
        """
        return ("network.protocol.version", val)

    @staticmethod
    def attr_server_address(val: str) -> KeyValue:
        """Optional ``server.address`` attribute.

        Name of the local HTTP server that received the request.
        """
        return ("server.address", val)

    @staticmethod
    def attr_server_port(val: int) -> KeyValue:
        """Optional ``server.port`` attribute.

        Port of the local HTTP server that received the request.
        """
        return ("server.port", val)

    @staticmethod
    def attr_user_agent_synthetic_type(val: UserAgentSyntheticTypeAttr | str) -> KeyValue:
        """Optional ``user_agent.synthetic.type`` attribute.

        Specifies the category of synthetic traffic, such as tests or bots.
        """
        return ("user_agent.synthetic.type", attribute_value(val))


class ServerResponseBodySize(SemconvInstrument):
    """Instrument for the ``http.server.response.body.size`` semantic convention.

    Size of HTTP server response bodies.
    """

    NAME = "http.server.response.body.size"
    UNIT = "By"
    DESCRIPTION = "Size of HTTP server response bodies."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.INT

    def record(
        self,
        value: int,
        request_method: RequestMethodAttr | str,
        url_scheme: str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            request_method: HTTP request method.
            url_scheme: The URI scheme component identifying the used protocol.
        """
        self._record(
            value,
            {
                "http.request.method": attribute_value(request_method),
                "url.scheme": url_scheme,
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_error_type(val: ErrorTypeAttr | str) -> KeyValue:
        """Optional ``error.type`` attribute.

        Describes a class of error the operation ended with.
        """
        return ("error.type", attribute_value(val))

    @staticmethod
    def attr_response_status_code(val: int) -> KeyValue:
        """Optional ``http.response.status_code`` attribute.

        HTTP response status code.
        """
        return ("http.response.status_code", val)

    @staticmethod
    def attr_route(val: str) -> KeyValue:
        """Optional ``http.route`` attribute.

        The matched route, that is, the path template in the format used by the
        respective server framework.
        """
        return ("http.route", val)

    @staticmethod
    def attr_network_protocol_name(val: str) -> KeyValue:
        """Optional ``network.protocol.name`` attribute.

        OSI application layer or non-OSI equivalent.
        """
        return ("network.protocol.name", val)

    @staticmethod
    def attr_network_protocol_version(val: str) -> KeyValue:
        """Optional ``network.protocol.version`` attribute.

        The actual version of the protocol used for network communication.
        """
        return ("network.protocol.version", val)

    @staticmethod
    def attr_server_address(val: str) -> KeyValue:
        """Optional ``server.address`` attribute.

        Name of the local HTTP server that received the request.
        """
        return ("server.address", val)

    @staticmethod
    def attr_server_port(val: int) -> KeyValue:
        """Optional ``server.port`` attribute.

        Port of the local HTTP server that received the request.
        """
        return ("server.port", val)

    @staticmethod
    def attr_user_agent_synthetic_type(val: UserAgentSyntheticTypeAttr | str) -> KeyValue:
        """Optional ``user_agent.synthetic.type`` attribute.

        Specifies the category of synthetic traffic, such as tests or bots.
        """
        return ("user_agent.synthetic.type", attribute_value(val))
