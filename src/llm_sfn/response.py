"""Tagged results returned by stream functions."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Success:
    """The upstream call completed; ``text`` is its body, untouched."""

    text: str


@dataclass(frozen=True)
class TransportFailure:
    """The upstream call never produced a body."""

    error: BaseException

    @property
    def message(self) -> str:
        return str(self.error)


FunctionResult = Union[Success, TransportFailure]


def to_text(result: FunctionResult, fallback: str) -> str:
    """Collapse a tagged result into the text handed back to the model.

    Args:
        result: Result of the upstream call
        fallback: Text used in place of a transport failure

    Returns:
        ``result.text`` on success, ``fallback`` otherwise
    """
    if isinstance(result, Success):
        return result.text
    return fallback


def error_text(message: str) -> str:
    """Text written back when a function could not run at all."""
    return f"error: {message}"
