"""Outbound HTTP client for stream functions."""

import urllib.error
import urllib.request
from http.client import HTTPException
from typing import Dict, Optional


class TransportError(Exception):
    """Raised when a request could not be delivered or its body could not be read.

    HTTP error statuses are not transport errors; they come back as a
    regular :class:`Response`.
    """

    def __init__(self, url: str, cause: BaseException):
        self.url = url
        self.cause = cause
        super().__init__(f"{url}: {cause}")


class Request:
    """Outbound GET request."""

    method = "GET"

    def __init__(self, url: str, headers: Optional[Dict[str, str]] = None):
        self.url = url
        self.headers = headers or {}


class Response:
    """HTTP response wrapper."""

    def __init__(self, status: int, headers: Dict[str, str], body: bytes):
        self._status = status
        self._headers = headers
        self._body = body
        self._text: Optional[str] = None

    @property
    def status(self) -> int:
        return self._status

    @property
    def headers(self) -> Dict[str, str]:
        return self._headers

    @property
    def body(self) -> bytes:
        """Raw response body, exactly as received."""
        return self._body

    def text(self) -> str:
        """Get response body as text.

        Valid UTF-8 decodes unchanged. Other bytes are replaced with U+FFFD,
        since the result travels inside a JSON text envelope that cannot
        carry them; such a body is therefore not byte-identical afterwards.
        """
        if self._text is None:
            self._text = self._body.decode('utf-8', errors='replace')
        return self._text


def send(request: Request) -> Response:
    """Send a request and read the whole body.

    No timeout is applied and nothing is retried: the call blocks until the
    server answers or the connection fails.

    Returns:
        Response object, for any HTTP status

    Raises:
        TransportError: If the connection fails or the body cannot be read
    """
    try:
        urllib_request = urllib.request.Request(
            request.url,
            headers=request.headers,
            method=request.method
        )
        with urllib.request.urlopen(urllib_request) as response:
            status = response.getcode()
            headers = dict(response.headers)
            body = response.read()
        return Response(status, headers, body)
    except urllib.error.HTTPError as e:
        # Error statuses still carry a body worth returning
        headers = dict(e.headers) if e.headers else {}
        try:
            body = e.read()
        except (OSError, HTTPException) as read_error:
            raise TransportError(request.url, read_error) from read_error
        return Response(e.code, headers, body)
    except (OSError, HTTPException, ValueError) as e:
        raise TransportError(request.url, e) from e


def get(url: str, headers: Optional[Dict[str, str]] = None) -> Response:
    """Send GET request.

    Args:
        url: Target URL
        headers: Optional headers

    Returns:
        Response object
    """
    return send(Request(url, headers=headers))
