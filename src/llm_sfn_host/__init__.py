"""Host capabilities for stream functions.

- HTTP client for outbound requests
- Configuration access
"""

from . import http
from . import config

__version__ = "0.1.0"

__all__ = [
    "http",
    "config",
]
