"""Shared fixtures."""

import pytest

from llm_sfn import exports


@pytest.fixture(autouse=True)
def isolated_registry():
    """Restore the tag registry after each test."""
    saved = {tag: list(fns) for tag, fns in exports._function_registry.items()}
    yield
    exports._function_registry.clear()
    exports._function_registry.update(saved)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("OPENWEATHERMAP_API_KEY", "test-key")
    return "test-key"
