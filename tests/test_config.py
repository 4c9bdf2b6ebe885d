"""Tests for configuration module."""

import pytest
from llm_sfn_host import config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("TEST_KEY", raising=False)
    monkeypatch.delenv("MISSING_KEY", raising=False)


class TestConfig:
    """Test configuration functions."""

    def test_get_from_environment(self, monkeypatch):
        """Test reading a value from the process environment."""
        monkeypatch.setenv("TEST_KEY", "from_env")
        assert config.get("TEST_KEY") == "from_env"

    def test_get_missing(self):
        """Test a key that is not set."""
        assert config.get("MISSING_KEY") is None

    def test_environment_read_on_every_call(self, monkeypatch):
        """Test that values are not cached between calls."""
        monkeypatch.setenv("TEST_KEY", "first")
        assert config.get("TEST_KEY") == "first"

        monkeypatch.setenv("TEST_KEY", "second")
        assert config.get("TEST_KEY") == "second"

        monkeypatch.delenv("TEST_KEY")
        assert config.get("TEST_KEY") is None

    def test_get_with_default(self, monkeypatch):
        """Test default handling."""
        assert config.get_with_default("MISSING_KEY", "fallback") == "fallback"

        monkeypatch.setenv("TEST_KEY", "")
        assert config.get_with_default("TEST_KEY", "fallback") == ""
