"""llm-sfn - stream functions answering LLM tool calls."""

from .handler import SfnHandler
from .function import StreamFunction
from .context import Context, FunctionCall, ArgumentError, REDUCER_TAG
from .response import Success, TransportFailure, FunctionResult, to_text
from .schema import (
    python_type_to_json_schema,
    generate_arguments_schema,
    validate_against_schema
)
from .exports import dispatch, list_functions, subscribed_tags

__version__ = "0.1.0"

__all__ = [
    "SfnHandler",
    "StreamFunction",
    "Context",
    "FunctionCall",
    "ArgumentError",
    "REDUCER_TAG",
    "Success",
    "TransportFailure",
    "FunctionResult",
    "to_text",
    "python_type_to_json_schema",
    "generate_arguments_schema",
    "validate_against_schema",
    "dispatch",
    "list_functions",
    "subscribed_tags",
]
