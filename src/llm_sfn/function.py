"""Stream function descriptors."""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from .context import ArgumentError, Context
from .response import error_text
from .schema import generate_arguments_schema

logger = logging.getLogger(__name__)


class StreamFunction:
    """A function the host can route model tool calls to.

    Bundles what the host needs for registration (name, description, input
    schema, subscribed data tags) with the callable that produces the result.
    The callable receives the deserialized arguments dataclass and returns
    the result text; it never sees the host context.
    """

    def __init__(
        self,
        func: Callable[[Any], str],
        name: Optional[str] = None,
        description: Optional[str] = None,
        arguments: Optional[type] = None,
        tags: Optional[Iterable[int]] = None
    ):
        """Initialize a stream function.

        Args:
            func: Callable taking an ``arguments`` instance (or nothing when
                ``arguments`` is None) and returning text
            name: Function name (defaults to ``func.__name__``)
            description: Description shown to the model (defaults to the
                docstring)
            arguments: Dataclass describing the arguments
            tags: Data tags this function subscribes to
        """
        self.func = func
        self.name = name or func.__name__
        self.description = description or (func.__doc__ or "").strip()
        self.arguments = arguments
        self.input_schema = generate_arguments_schema(arguments)
        self.data_tags: List[int] = sorted(set(tags or []))
        if not self.data_tags:
            raise ValueError(f"Function {self.name} subscribes to no data tags")

    @classmethod
    def from_function(
        cls,
        func: Callable[[Any], str],
        name: Optional[str] = None,
        description: Optional[str] = None,
        arguments: Optional[type] = None,
        tags: Optional[Iterable[int]] = None
    ) -> "StreamFunction":
        return cls(func, name, description, arguments, tags)

    def to_dict(self) -> Dict[str, Any]:
        """Registration record handed to the host."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
            "dataTags": list(self.data_tags)
        }

    def invoke(self, args: Any = None) -> str:
        """Run the function on already deserialized arguments."""
        if self.arguments is None:
            return self.func()
        return self.func(args)

    def call(self, ctx: Context) -> None:
        """Handle one incoming message.

        Reads the arguments from ``ctx``, runs the function and writes its
        text back with ``ctx.write_llm_result``. Failures are logged and
        reported to the model as an error text; they never reach the host.
        """
        try:
            call = ctx.function_call
        except ArgumentError as e:
            # No envelope means no ids to answer to
            logger.error("%s: dropping message on tag %#x: %s", self.name, ctx.tag(), e)
            return

        try:
            args = ctx.read_llm_arguments(self.arguments) if self.arguments is not None else None
            result = self.invoke(args)
        except ArgumentError as e:
            logger.error("%s: %s", self.name, e)
            result = error_text(str(e))
        except Exception as e:
            logger.exception("%s: function failed for tool call %s", self.name, call.tool_call_id)
            result = error_text(f"Function execution failed: {e}")

        ctx.write_llm_result(str(result))

    def __repr__(self) -> str:
        tags = ", ".join(f"{tag:#x}" for tag in self.data_tags)
        return f"StreamFunction(name='{self.name}', tags=[{tags}])"
