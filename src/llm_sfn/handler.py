"""Main handler class for stream functions."""

from typing import Callable, Dict, Iterable, Optional

from .function import StreamFunction


class SfnHandler:
    """Registry of the stream functions a module exposes to the host.

    Functions are declared with a decorator and become routable by data tag
    as soon as they are registered.
    """

    def __init__(self, name: str = "llm-sfn-handler"):
        """Initialize a handler.

        Args:
            name: Handler name for identification
        """
        self.name = name
        self._functions: Dict[str, StreamFunction] = {}
        self.functions = self._functions

    def function(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        arguments: Optional[type] = None,
        tags: Optional[Iterable[int]] = None
    ) -> Callable[[Callable[..., str]], Callable[..., str]]:
        """Decorator registering a stream function.

        Usage:
            @handler.function(name="get-weather", arguments=Arguments, tags=[0x62])
            def get_weather(args: Arguments) -> str:
                return "..."
        """
        def decorator(func: Callable[..., str]) -> Callable[..., str]:
            fn = StreamFunction.from_function(
                func,
                name=name,
                description=description,
                arguments=arguments,
                tags=tags
            )
            self.add(fn)
            return func

        return decorator

    def add(self, fn: StreamFunction) -> StreamFunction:
        """Register an already built stream function."""
        if fn.name in self._functions:
            raise ValueError(f"Function already registered: {fn.name}")
        self._functions[fn.name] = fn

        from .exports import register_function
        register_function(fn)
        return fn

    def get(self, name: str) -> StreamFunction:
        return self._functions[name]

    def build(self) -> "SfnHandler":
        """Return the handler for export."""
        return self

    def __repr__(self) -> str:
        return f"SfnHandler(name='{self.name}', functions={len(self._functions)})"
