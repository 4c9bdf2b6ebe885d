"""Dispatch of host messages to registered stream functions.

The host subscribes each function to its data tags and hands every incoming
message to :func:`dispatch`.
"""

import logging
from typing import Any, Dict, List, Optional

from .context import Context, Writer
from .function import StreamFunction

logger = logging.getLogger(__name__)

# Data tag -> functions subscribed to it
_function_registry: Dict[int, List[StreamFunction]] = {}


def register_function(fn: StreamFunction) -> None:
    """Subscribe ``fn`` to each of its data tags."""
    for tag in fn.data_tags:
        subscribers = _function_registry.setdefault(tag, [])
        if fn not in subscribers:
            subscribers.append(fn)
    logger.debug("registered %r", fn)


def subscribed_tags() -> List[int]:
    """Data tags the host should deliver to this module."""
    return sorted(_function_registry)


def list_functions() -> List[Dict[str, Any]]:
    """Registration records of every function, once each."""
    seen = []
    for subscribers in _function_registry.values():
        for fn in subscribers:
            if fn not in seen:
                seen.append(fn)
    return [fn.to_dict() for fn in seen]


def dispatch(tag: int, data: bytes, writer: Optional[Writer] = None) -> Context:
    """Deliver one incoming message.

    A fresh :class:`Context` is created for the message and passed to every
    function subscribed to ``tag``. Messages on other tags are ignored.

    Args:
        tag: Data tag of the message
        data: Raw message payload
        writer: Receives the outbound ``(tag, data)`` messages

    Returns:
        The context used, with the outbound messages in ``written``
    """
    ctx = Context(tag, data, writer)
    subscribers = _function_registry.get(tag)
    if not subscribers:
        logger.warning("no function subscribed to tag %#x, dropping message", tag)
        return ctx

    for fn in subscribers:
        fn.call(ctx)
    return ctx


def clear_registry() -> None:
    """Forget every registered function.

    This is mainly useful for testing.
    """
    _function_registry.clear()
