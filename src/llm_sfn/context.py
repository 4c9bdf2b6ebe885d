"""Per-invocation host context.

The host delivers each function call as a message carrying a data tag and a
JSON envelope::

    {"req_id": "...", "tool_call_id": "...", "function_name": "get-weather",
     "arguments": "{\"latitude\": 51.5074, \"longitude\": -0.1278}"}

``arguments`` is the JSON string produced by the model. The function's answer
goes back on :data:`REDUCER_TAG` as the same envelope with ``result`` set.
"""

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar

from .schema import generate_arguments_schema, validate_against_schema

REDUCER_TAG = 0xE001

T = TypeVar("T")

Writer = Callable[[int, bytes], None]


class ArgumentError(Exception):
    """The incoming message or its arguments could not be deserialized."""


@dataclass
class FunctionCall:
    """Function-call envelope exchanged with the host."""

    req_id: str = ""
    tool_call_id: str = ""
    function_name: str = ""
    arguments: str = ""
    result: Optional[str] = None

    @classmethod
    def from_bytes(cls, data: bytes) -> "FunctionCall":
        try:
            payload = json.loads(data) if data.strip() else {}
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ArgumentError(f"Invalid function call payload: {e}") from e
        if not isinstance(payload, dict):
            raise ArgumentError("Function call payload must be a JSON object")

        known = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in payload.items() if k in known})

    def to_bytes(self) -> bytes:
        return json.dumps(dataclasses.asdict(self)).encode("utf-8")


class Context:
    """What a function sees of the host during one invocation.

    A context is created per incoming message and never shared, so functions
    may be invoked concurrently without coordination.
    """

    def __init__(self, tag: int, data: bytes, writer: Optional[Writer] = None):
        """Initialize a context.

        Args:
            tag: Data tag of the incoming message
            data: Raw payload of the incoming message
            writer: Callback receiving ``(tag, data)`` for every outbound
                message; when omitted messages are only kept in ``written``
        """
        self._tag = tag
        self._data = data
        self._writer = writer
        self._call: Optional[FunctionCall] = None
        self.written: List[Tuple[int, bytes]] = []

    def tag(self) -> int:
        return self._tag

    def data(self) -> bytes:
        return self._data

    def write(self, tag: int, data: bytes) -> None:
        """Forward data downstream on ``tag``."""
        self.written.append((tag, data))
        if self._writer is not None:
            self._writer(tag, data)

    @property
    def function_call(self) -> FunctionCall:
        if self._call is None:
            self._call = FunctionCall.from_bytes(self._data)
        return self._call

    def read_llm_arguments(self, arguments: Type[T]) -> T:
        """Deserialize the model's arguments into an ``arguments`` dataclass.

        Values are checked for type conformance against the dataclass schema.
        Ranges are not enforced.

        Raises:
            ArgumentError: If the arguments are not valid JSON or do not fit
                the dataclass
        """
        raw = self.function_call.arguments
        try:
            parsed: Any = json.loads(raw) if raw and raw.strip() else {}
        except json.JSONDecodeError as e:
            raise ArgumentError(f"Invalid JSON arguments: {e}") from e
        if not isinstance(parsed, dict):
            raise ArgumentError("Arguments must be a JSON object")

        validation_error = validate_against_schema(parsed, generate_arguments_schema(arguments))
        if validation_error:
            raise ArgumentError(f"Argument validation failed: {validation_error}")

        known = {f.name for f in dataclasses.fields(arguments)}
        values: Dict[str, Any] = {k: v for k, v in parsed.items() if k in known}
        return arguments(**values)

    def write_llm_result(self, result: str) -> None:
        """Send the result text back to the model."""
        call = self.function_call
        call.result = result
        self.write(REDUCER_TAG, call.to_bytes())

    def llm_result(self) -> Optional[str]:
        """The result written during this invocation, if any."""
        if self._call is None:
            return None
        return self._call.result
