"""get-weather: current weather for LLM tool calls, served as a stream function."""

from .app import (
    DATA_TAG,
    DESCRIPTION,
    FALLBACK_MESSAGE,
    LLMArguments,
    build_request_url,
    fetch_weather,
    get_weather,
    handler,
)

__version__ = "0.1.0"

__all__ = [
    "DATA_TAG",
    "DESCRIPTION",
    "FALLBACK_MESSAGE",
    "LLMArguments",
    "build_request_url",
    "fetch_weather",
    "get_weather",
    "handler",
]
