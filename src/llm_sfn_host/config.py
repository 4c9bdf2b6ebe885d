"""Configuration access for stream functions.

Values come from the process environment, read on every call so a key
changed while the function is deployed takes effect on the next invocation.
"""

import os
from typing import Optional


def get(key: str) -> Optional[str]:
    """Get a configuration value by key.

    Args:
        key: Configuration key, e.g. ``OPENWEATHERMAP_API_KEY``

    Returns:
        Configuration value or None if not set
    """
    return os.environ.get(key)


def get_with_default(key: str, default: str) -> str:
    """Get a configuration value, or ``default`` when it is not set."""
    value = get(key)
    return value if value is not None else default
