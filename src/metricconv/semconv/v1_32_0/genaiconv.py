# Code generated by metricconv from semantic convention definitions. DO NOT EDIT.
"""Instruments for the "gen_ai" semantic convention namespace (v1.32.0)."""

from __future__ import annotations

from enum import Enum

from opentelemetry.context import Context

from metricconv.attribute import KeyValue, attribute_value
from metricconv.instrument import InstrumentKind, SemconvInstrument, ValueType

__all__ = [
    "ClientOperationDuration",
    "ClientTokenUsage",
    "ErrorTypeAttr",
    "OperationNameAttr",
    "ServerRequestDuration",
    "ServerTimePerOutputToken",
    "ServerTimeToFirstToken",
    "SystemAttr",
    "TokenTypeAttr",
]


class ErrorTypeAttr(str, Enum):
    """Values of the ``error.type`` attribute.

    Describes a class of error the operation ended with.
    """

    # A fallback error value to be used when the instrumentation doesn't define
    # a custom value.
    OTHER = "_OTHER"


class OperationNameAttr(str, Enum):
    """Values of the ``gen_ai.operation.name`` attribute.

    The name of the operation being performed.
    """

    # Chat completion operation such as OpenAI Chat API.
    CHAT = "chat"
    # Text completions operation such as OpenAI Completions API (Legacy).
    TEXT_COMPLETION = "text_completion"
    # Embeddings operation such as OpenAI Create embeddings API.
    EMBEDDINGS = "embeddings"
    # Create GenAI agent.
    CREATE_AGENT = "create_agent"
    # Execute a tool.
    EXECUTE_TOOL = "execute_tool"


class SystemAttr(str, Enum):
    """Values of the ``gen_ai.system`` attribute.

    The Generative AI product as identified by the client or server
    instrumentation.
    """

    # OpenAI.
    OPENAI = "openai"
    # Vertex AI.
    VERTEX_AI = "vertex_ai"
    # Gemini.
    GEMINI = "gemini"
    # Anthropic.
    ANTHROPIC = "anthropic"
    # Cohere.
    COHERE = "cohere"
    # Azure AI Inference.
    AZ_AI_INFERENCE = "az.ai.inference"
    # Azure OpenAI.
    AZ_AI_OPENAI = "az.ai.openai"
    # IBM Watsonx AI.
    IBM_WATSONX_AI = "ibm.watsonx.ai"
    # AWS Bedrock.
    AWS_BEDROCK = "aws.bedrock"
    # Perplexity.
    PERPLEXITY = "perplexity"
    # xAI.
    XAI = "xai"
    # DeepSeek.
    DEEPSEEK = "deepseek"
    # Groq.
    GROQ = "groq"
    # Mistral AI.
    MISTRAL_AI = "mistral_ai"


class TokenTypeAttr(str, Enum):
    """Values of the ``gen_ai.token.type`` attribute.

    The type of token being counted.
    """

    # Input tokens (prompt, input, etc.)
    INPUT = "input"
    # Output tokens (completion, response, etc.)
    OUTPUT = "output"


class ClientOperationDuration(SemconvInstrument):
    """Instrument for the ``gen_ai.client.operation.duration`` semantic convention.

    GenAI operation duration.
    """

    NAME = "gen_ai.client.operation.duration"
    UNIT = "s"
    DESCRIPTION = "GenAI operation duration."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.DOUBLE

    def record(
        self,
        value: float,
        operation_name: OperationNameAttr | str,
        system: SystemAttr | str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            operation_name: The name of the operation being performed.
            system: The Generative AI product as identified by the client or
                server instrumentation.
        """
        self._record(
            value,
            {
                "gen_ai.operation.name": attribute_value(operation_name),
                "gen_ai.system": attribute_value(system),
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
    def attr_request_model(val: str) -> KeyValue:
        """Optional ``gen_ai.request.model`` attribute.

        The name of the GenAI model a request is being made to.
        """
        return ("gen_ai.request.model", val)

    @staticmethod
    def attr_server_port(val: int) -> KeyValue:
        """Optional ``server.port`` attribute.

        GenAI server port.
        """
        return ("server.port", val)

    @staticmethod
    def attr_response_model(val: str) -> KeyValue:
        """Optional ``gen_ai.response.model`` attribute.

        The name of the model that generated the response.
        """
        return ("gen_ai.response.model", val)

    @staticmethod
    def attr_server_address(val: str) -> KeyValue:
        """Optional ``server.address`` attribute.

        GenAI server address.
        """
        return ("server.address", val)


class ClientTokenUsage(SemconvInstrument):
    """Instrument for the ``gen_ai.client.token.usage`` semantic convention.

    Measures number of input and output tokens used.
    """

    NAME = "gen_ai.client.token.usage"
    UNIT = "{token}"
    DESCRIPTION = "Measures number of input and output tokens used."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.INT

    def record(
        self,
        value: int,
        operation_name: OperationNameAttr | str,
        system: SystemAttr | str,
        token_type: TokenTypeAttr | str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            operation_name: The name of the operation being performed.
            system: The Generative AI product as identified by the client or
                server instrumentation.
            token_type: The type of token being counted.
        """
        self._record(
            value,
            {
                "gen_ai.operation.name": attribute_value(operation_name),
                "gen_ai.system": attribute_value(system),
                "gen_ai.token.type": attribute_value(token_type),
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_request_model(val: str) -> KeyValue:
        """Optional ``gen_ai.request.model`` attribute.

        The name of the GenAI model a request is being made to.
        """
        return ("gen_ai.request.model", val)

    @staticmethod
    def attr_server_port(val: int) -> KeyValue:
        """Optional ``server.port`` attribute.

        GenAI server port.
        """
        return ("server.port", val)

    @staticmethod
    def attr_response_model(val: str) -> KeyValue:
        """Optional ``gen_ai.response.model`` attribute.

        The name of the model that generated the response.
        """
        return ("gen_ai.response.model", val)

    @staticmethod
    def attr_server_address(val: str) -> KeyValue:
        """Optional ``server.address`` attribute.

        GenAI server address.
        """
        return ("server.address", val)


class ServerRequestDuration(SemconvInstrument):
    """Instrument for the ``gen_ai.server.request.duration`` semantic convention.

    Generative AI server request duration such as time-to-last byte or last
    output token.
    """

    NAME = "gen_ai.server.request.duration"
    UNIT = "s"
    DESCRIPTION = "Generative AI server request duration such as time-to-last byte or last output token."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.DOUBLE

    def record(
        self,
        value: float,
        operation_name: OperationNameAttr | str,
        system: SystemAttr | str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            operation_name: The name of the operation being performed.
            system: The Generative AI product as identified by the client or
                server instrumentation.
        """
        self._record(
            value,
            {
                "gen_ai.operation.name": attribute_value(operation_name),
                "gen_ai.system": attribute_value(system),
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
    def attr_request_model(val: str) -> KeyValue:
        """Optional ``gen_ai.request.model`` attribute.

        The name of the GenAI model a request is being made to.
        """
        return ("gen_ai.request.model", val)

    @staticmethod
    def attr_server_port(val: int) -> KeyValue:
        """Optional ``server.port`` attribute.

        GenAI server port.
        """
        return ("server.port", val)

    @staticmethod
    def attr_response_model(val: str) -> KeyValue:
        """Optional ``gen_ai.response.model`` attribute.

        The name of the model that generated the response.
        """
        return ("gen_ai.response.model", val)

    @staticmethod
    def attr_server_address(val: str) -> KeyValue:
        """Optional ``server.address`` attribute.

        GenAI server address.
        """
        return ("server.address", val)


class ServerTimePerOutputToken(SemconvInstrument):
    """Instrument for the ``gen_ai.server.time_per_output_token`` semantic convention.

    Time per output token generated after the first token for successful
    responses.
    """

    NAME = "gen_ai.server.time_per_output_token"
    UNIT = "s"
    DESCRIPTION = "Time per output token generated after the first token for successful responses."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.DOUBLE

    def record(
        self,
        value: float,
        operation_name: OperationNameAttr | str,
        system: SystemAttr | str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            operation_name: The name of the operation being performed.
            system: The Generative AI product as identified by the client or
                server instrumentation.
        """
        self._record(
            value,
            {
                "gen_ai.operation.name": attribute_value(operation_name),
                "gen_ai.system": attribute_value(system),
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_request_model(val: str) -> KeyValue:
        """Optional ``gen_ai.request.model`` attribute.

        The name of the GenAI model a request is being made to.
        """
        return ("gen_ai.request.model", val)

    @staticmethod
    def attr_server_port(val: int) -> KeyValue:
        """Optional ``server.port`` attribute.

        GenAI server port.
        """
        return ("server.port", val)

    @staticmethod
    def attr_response_model(val: str) -> KeyValue:
        """Optional ``gen_ai.response.model`` attribute.

        The name of the model that generated the response.
        """
        return ("gen_ai.response.model", val)

    @staticmethod
    def attr_server_address(val: str) -> KeyValue:
        """Optional ``server.address`` attribute.

        GenAI server address.
        """
        return ("server.address", val)


class ServerTimeToFirstToken(SemconvInstrument):
    """Instrument for the ``gen_ai.server.time_to_first_token`` semantic convention.

    Time to generate first token for successful responses.
    """

    NAME = "gen_ai.server.time_to_first_token"
    UNIT = "s"
    DESCRIPTION = "Time to generate first token for successful responses."
    KIND = InstrumentKind.HISTOGRAM
    VALUE_TYPE = ValueType.DOUBLE

    def record(
        self,
        value: float,
        operation_name: OperationNameAttr | str,
        system: SystemAttr | str,
        *attrs: KeyValue,
        context: Context | None = None,
    ) -> None:
        """Record *value* with the required attributes.

        Optional attributes built with the ``attr_*`` helpers are included in
        the measurement.

        Args:
            operation_name: The name of the operation being performed.
            system: The Generative AI product as identified by the client or
                server instrumentation.
        """
        self._record(
            value,
            {
                "gen_ai.operation.name": attribute_value(operation_name),
                "gen_ai.system": attribute_value(system),
            },
            attrs,
            context,
        )

    @staticmethod
    def attr_request_model(val: str) -> KeyValue:
        """Optional ``gen_ai.request.model`` attribute.

        The name of the GenAI model a request is being made to.
        """
        return ("gen_ai.request.model", val)

    @staticmethod
    def attr_server_port(val: int) -> KeyValue:
        """Optional ``server.port`` attribute.

        GenAI server port.
        """
        return ("server.port", val)

    @staticmethod
    def attr_response_model(val: str) -> KeyValue:
        """Optional ``gen_ai.response.model`` attribute.

        The name of the model that generated the response.
        """
        return ("gen_ai.response.model", val)

    @staticmethod
    def attr_server_address(val: str) -> KeyValue:
        """Optional ``server.address`` attribute.

        GenAI server address.
        """
        return ("server.address", val)
