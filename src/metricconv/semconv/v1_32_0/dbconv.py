# Code generated by metricconv from semantic convention definitions. DO NOT EDIT.
"""Instruments for the "db" semantic convention namespace (v1.32.0)."""

from __future__ import annotations

from enum import Enum

from opentelemetry.context import Context

from metricconv.attribute import KeyValue, attribute_value
from metricconv.instrument import InstrumentKind, SemconvInstrument, ValueType

__all__ = [
    "ClientConnectionCount",
    "ClientConnectionCreateTime",
    "ClientConnectionIdleMax",
    "ClientConnectionIdleMin",
    "ClientConnectionMax",
    "ClientConnectionPendingRequests",
    "ClientConnectionStateAttr",
    "ClientConnectionTimeouts",
    "ClientConnectionUseTime",
    "ClientConnectionWaitTime",
    "ClientOperationDuration",
    "ClientResponseReturnedRows",
    "ErrorTypeAttr",
    "SystemNameAttr",
]


class ClientConnectionStateAttr(str, Enum):
    """Values of the ``db.client.connection.state`` attribute.

    The state of a client connection in a pool.
    """

    IDLE = "idle"
    USED = "used"


class SystemNameAttr(str, Enum):
    """Values of the ``db.system.name`` attribute.

    The database management system (DBMS) product as identified by the client
    instrumentation.
    """

    # Some other SQL database. Fallback only.
    OTHER_SQL = "other_sql"
    # Amazon DynamoDB.
    AWS_DYNAMODB = "aws.dynamodb"
    # Azure Cosmos DB.
    AZURE_COSMOSDB = "azure.cosmosdb"
    # Apache Cassandra.
    CASSANDRA = "cassandra"
    # ClickHouse.
    CLICKHOUSE = "clickhouse"
    # CockroachDB.
    COCKROACHDB = "cockroachdb"
    # Apache CouchDB.
    COUCHDB = "couchdb"
    # Elasticsearch.
    ELASTICSEARCH = "elasticsearch"
    # MariaDB.
    MARIADB = "mariadb"
    # Microsoft SQL Server.
    MICROSOFT_SQL_SERVER = "microsoft.sql_server"
    # MongoDB.
    MONGODB = "mongodb"
    # MySQL.
    MYSQL = "mysql"
    # Oracle Database.
    ORACLE_DB = "oracle.db"
    # PostgreSQL.
    POSTGRESQL = "postgresql"
    # Redis.
    REDIS = "redis"
    # SQLite.
    SQLITE = "sqlite"


class ErrorTypeAttr(str, Enum):
    """Values of the ``error.type`` attribute.

    Describes a class of error the operation ended with.
    """

    # A fallback error value to be used when the instrumentation doesn't define
    # a custom value.
    OTHER = "_OTHER"


class ClientConnectionCount(SemconvInstrument):
    """Instrument for the ``db.client.connection.count`` semantic convention.

    The number of connections that are currently in state described by the
    `state` attribute.
    """

    NAME = "db.client.connection.count"
    UNIT = "{connection}"
    DESCRIPTION = "The number of connections that are currently in state described by the `state` attribute."
    KIND = InstrumentKind.UP_DOWN_COUNTER
    VALUE_TYPE = ValueType.INT

    def add(
        self,
        value: int,
        client_connection_pool_name: str,
        client_connection_state: ClientConnectionStateAttr | str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Add *value* to the instrument with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            client_connection_pool_name: The name of the connection pool;
                unique within the instrumented application.
            client_connection_state: The state of a client connection in a
                pool.
        """
        self._add(
            value,
            {
                "db.client.connection.pool.name": client_connection_pool_name,
                "db.client.connection.state": attribute_value(client_connection_state),
            },
            attrs,
            context,
        )


class ClientConnectionCreateTime(SemconvInstrument):
    """Instrument for the ``db.client.connection.create_time`` semantic convention.

    The time it took to create a new connection.
    """

    NAME = "db.client.connection.create_time"
    UNIT = "s"
    DESCRIPTION = "The time it took to create a new connection."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.DOUBLE

    def record(
        self,
        value: float,
        client_connection_pool_name: str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            client_connection_pool_name: The name of the connection pool;
                unique within the instrumented application.
        """
        self._record(
            value,
            {
                "db.client.connection.pool.name": client_connection_pool_name,
            },
            attrs,
            context,
        )


class ClientConnectionIdleMax(SemconvInstrument):
    """Instrument for the ``db.client.connection.idle.max`` semantic convention.

    The maximum number of idle open connections allowed.
    """

    NAME = "db.client.connection.idle.max"
    UNIT = "{connection}"
    DESCRIPTION = "The maximum number of idle open connections allowed."
    KIND = InstrumentKind.UP_DOWN_COUNTER
    VALUE_TYPE = ValueType.INT

    def add(
        self,
        value: int,
        client_connection_pool_name: str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Add *value* to the instrument with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            client_connection_pool_name: The name of the connection pool;
                unique within the instrumented application.
        """
        self._add(
            value,
            {
                "db.client.connection.pool.name": client_connection_pool_name,
            },
            attrs,
            context,
        )


class ClientConnectionIdleMin(SemconvInstrument):
    """Instrument for the ``db.client.connection.idle.min`` semantic convention.

    The minimum number of idle open connections allowed.
    """

    NAME = "db.client.connection.idle.min"
    UNIT = "{connection}"
    DESCRIPTION = "The minimum number of idle open connections allowed."
    KIND = InstrumentKind.UP_DOWN_COUNTER
    VALUE_TYPE = ValueType.INT

    def add(
        self,
        value: int,
        client_connection_pool_name: str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Add *value* to the instrument with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            client_connection_pool_name: The name of the connection pool;
                unique within the instrumented application.
        """
        self._add(
            value,
            {
                "db.client.connection.pool.name": client_connection_pool_name,
            },
            attrs,
            context,
        )


class ClientConnectionMax(SemconvInstrument):
    """Instrument for the ``db.client.connection.max`` semantic convention.

    The maximum number of open connections allowed.
    """

    NAME = "db.client.connection.max"
    UNIT = "{connection}"
    DESCRIPTION = "The maximum number of open connections allowed."
    KIND = InstrumentKind.UP_DOWN_COUNTER
    VALUE_TYPE = ValueType.INT

    def add(
        self,
        value: int,
        client_connection_pool_name: str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Add *value* to the instrument with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            client_connection_pool_name: The name of the connection pool;
                unique within the instrumented application.
        """
        self._add(
            value,
            {
                "db.client.connection.pool.name": client_connection_pool_name,
            },
            attrs,
            context,
        )


class ClientConnectionPendingRequests(SemconvInstrument):
    """Instrument for the ``db.client.connection.pending_requests`` semantic convention.

    The number of current pending requests for an open connection.
    """

    NAME = "db.client.connection.pending_requests"
    UNIT = "{request}"
    DESCRIPTION = "The number of current pending requests for an open connection."
    KIND = InstrumentKind.UP_DOWN_COUNTER
    VALUE_TYPE = ValueType.INT

    def add(
        self,
        value: int,
        client_connection_pool_name: str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Add *value* to the instrument with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            client_connection_pool_name: The name of the connection pool;
                unique within the instrumented application.
        """
        self._add(
            value,
            {
                "db.client.connection.pool.name": client_connection_pool_name,
            },
            attrs,
            context,
        )



class ClientConnectionTimeouts(SemconvInstrument):
    """Instrument for the ``db.client.connection.timeouts`` semantic convention.

    The number of connection timeouts that have occurred trying to obtain a
    connection from the pool.
    """

    NAME = "db.client.connection.timeouts"
    UNIT = "{timeout}"
    DESCRIPTION = "The number of connection timeouts that have occurred trying to obtain a connection from the pool."
    KIND = InstrumentKind.COUNTER
    VALUE_TYPE = ValueType.INT

    def add(
        self,
        value: int,
        client_connection_pool_name: str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Add *value* to the instrument with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            client_connection_pool_name: The name of the connection pool;
                unique within the instrumented application.
        """
        self._add(
            value,
            {
                "db.client.connection.pool.name": client_connection_pool_name,
            },
            attrs,
            context,
        )


class ClientConnectionUseTime(SemconvInstrument):
    """Instrument for the ``db.client.connection.use_time`` semantic convention.

    The time between borrowing a connection and returning it to the pool.
    """

    NAME = "db.client.connection.use_time"
    UNIT = "s"
    DESCRIPTION = "The time between borrowing a connection and returning it to the pool."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.DOUBLE

    def record(
        self,
        value: float,
        client_connection_pool_name: str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            client_connection_pool_name: The name of the connection pool;
                unique within the instrumented application.
        """
        self._record(
            value,
            {
                "db.client.connection.pool.name": client_connection_pool_name,
            },
            attrs,
            context,
        )


class ClientConnectionWaitTime(SemconvInstrument):
    """Instrument for the ``db.client.connection.wait_time`` semantic convention.

    The time it took to obtain an open connection from the pool.
    """

    NAME = "db.client.connection.wait_time"
    UNIT = "s"
    DESCRIPTION = "The time it took to obtain an open connection from the pool."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.DOUBLE

    def record(
        self,
        value: float,
        client_connection_pool_name: str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            client_connection_pool_name: The name of the connection pool;
                unique within the instrumented application.
        """
        self._record(
            value,
            {
                "db.client.connection.pool.name": client_connection_pool_name,
            },
            attrs,
            context,
        )



class ClientOperationDuration(SemconvInstrument):
    """Instrument for the ``db.client.operation.duration`` semantic convention.

    Duration of database client operations.
    """

    NAME = "db.client.operation.duration"
    UNIT = "s"
    DESCRIPTION = "Duration of database client operations."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.DOUBLE

    def record(
        self,
        value: float,
        system_name: SystemNameAttr | str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            system_name: The database management system (DBMS) product as
                identified by the client instrumentation.
        """
        self._record(
            value,
            {
                "db.system.name": attribute_value(system_name),
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_collection_name(val: str) -> KeyValue:
        """Optional ``db.collection.name`` attribute.

        The name of a collection (table, container) within the database.
        """
        return ("db.collection.name", val)

    @staticmethod
    def attr_namespace(val: str) -> KeyValue:
        """Optional ``db.namespace`` attribute.

        The name of the database, fully qualified within the server address and
        port.
        """
        return ("db.namespace", val)

    @staticmethod
    def attr_operation_name(val: str) -> KeyValue:
        """Optional ``db.operation.name`` attribute.

        The name of the operation or command being executed.
        """
        return ("db.operation.name", val)

    @staticmethod
    def attr_response_status_code(val: str) -> KeyValue:
        """Optional ``db.response.status_code`` attribute.

        Database response status code.
        """
        return ("db.response.status_code", val)

    @staticmethod
    def attr_error_type(val: ErrorTypeAttr | str) -> KeyValue:
        """Optional ``error.type`` attribute.

        Describes a class of error the operation ended with.
        """
        return ("error.type", attribute_value(val))

    @staticmethod
    def attr_server_port(val: int) -> KeyValue:
        """Optional ``server.port`` attribute.

        Server port number.
        """
        return ("server.port", val)

    @staticmethod
    def attr_query_summary(val: str) -> KeyValue:
        """Optional ``db.query.summary`` attribute.

        Low cardinality representation of a database query text.
        """
        return ("db.query.summary", val)

    @staticmethod
    def attr_stored_procedure_name(val: str) -> KeyValue:
        """Optional ``db.stored_procedure.name`` attribute.

        The name of a stored procedure within the database.
        """
        return ("db.stored_procedure.name", val)

    @staticmethod
    def attr_network_peer_address(val: str) -> KeyValue:
        """Optional ``network.peer.address`` attribute.

        Peer address of the network connection - IP address or Unix domain
        socket name.
        """
        return ("network.peer.address", val)

    @staticmethod
    def attr_network_peer_port(val: int) -> KeyValue:
        """Optional ``network.peer.port`` attribute.

        Peer port number of the network connection.
        """
        return ("network.peer.port", val)

    @staticmethod
    def attr_server_address(val: str) -> KeyValue:
        """Optional ``server.address`` attribute.

        Name of the database host.
        """
        return ("server.address", val)

    @staticmethod
    def attr_query_text(val: str) -> KeyValue:
        """Optional ``db.query.text`` attribute.

        The database query being executed.
        """
        return ("db.query.text", val)


class ClientResponseReturnedRows(SemconvInstrument):
    """Instrument for the ``db.client.response.returned_rows`` semantic convention.

    The actual number of records returned by the database operation.
    """

    NAME = "db.client.response.returned_rows"
    UNIT = "{row}"
    DESCRIPTION = "The actual number of records returned by the database operation."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.INT

    def record(
        self,
        value: int,
        system_name: SystemNameAttr | str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            system_name: The database management system (DBMS) product as
                identified by the client instrumentation.
        """
        self._record(
            value,
            {
                "db.system.name": attribute_value(system_name),
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_collection_name(val: str) -> KeyValue:
        """Optional ``db.collection.name`` attribute.

        The name of a collection (table, container) within the database.
        """
        return ("db.collection.name", val)

    @staticmethod
    def attr_namespace(val: str) -> KeyValue:
        """Optional ``db.namespace`` attribute.

        The name of the database, fully qualified within the server address and
        port.
        """
        return ("db.namespace", val)

    @staticmethod
    def attr_operation_name(val: str) -> KeyValue:
        """Optional ``db.operation.name`` attribute.

        The name of the operation or command being executed.
        """
        return ("db.operation.name", val)

    @staticmethod
    def attr_response_status_code(val: str) -> KeyValue:
        """Optional ``db.response.status_code`` attribute.

        Database response status code.
        """
        return ("db.response.status_code", val)

    @staticmethod
    def attr_error_type(val: ErrorTypeAttr | str) -> KeyValue:
        """Optional ``error.type`` attribute.

        Describes a class of error the operation ended with.
        """
        return ("error.type", attribute_value(val))

    @staticmethod
    def attr_server_port(val: int) -> KeyValue:
        """Optional ``server.port`` attribute.

        Server port number.
        """
        return ("server.port", val)

    @staticmethod
    def attr_query_summary(val: str) -> KeyValue:
        """Optional ``db.query.summary`` attribute.

        Low cardinality representation of a database query text.
        """
        return ("db.query.summary", val)

    @staticmethod
    def attr_network_peer_address(val: str) -> KeyValue:
        """Optional ``network.peer.address`` attribute.

        Peer address of the network connection - IP address or Unix domain
        socket name.
        """
        return ("network.peer.address", val)

    @staticmethod
    def attr_network_peer_port(val: int) -> KeyValue:
        """Optional ``network.peer.port`` attribute.

        Peer port number of the network connection.
        """
        return ("network.peer.port", val)

    @staticmethod
    def attr_server_address(val: str) -> KeyValue:
        """Optional ``server.address`` attribute.

        Name of the database host.
        """
        return ("server.address", val)

    @staticmethod
    def attr_query_text(val: str) -> KeyValue:
        """Optional ``db.query.text`` attribute.

        The database query being executed.
        """
        return ("db.query.text", val)
