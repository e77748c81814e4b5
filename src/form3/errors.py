# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .http.models import HttpResponse


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    import socket
    import ssl as ssl_module

    import httpx

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    # httpx wraps the underlying OSError; look through the chain for TLS/DNS causes.
    seen: set[int] = set()
    cause: BaseException | None = exc
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        if isinstance(cause, (ssl_module.SSLError, ssl_module.CertificateError)):
            return ErrorCategory.SSL_ERROR
        if isinstance(cause, (socket.gaierror, socket.herror)):
            return ErrorCategory.DNS_ERROR
        cause = cause.__cause__ or cause.__context__

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


class Form3Error(Exception):
    """Base class for every error raised by the client."""


class InvalidURLError(Form3Error, ValueError):
    """The base URL or the relative reference could not be parsed."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"invalid URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class SerializationError(Form3Error, ValueError):
    """The request body could not be encoded as JSON."""


class TransportError(Form3Error):
    """Network or connection level failure raised by the underlying transport."""

    def __init__(self, method: str, url: str, exc: BaseException):
        super().__init__(f"{method} {url}: {exc}")
        self.method = method
        self.url = url
        self.category = categorize_exception(exc)
        self.error_type = type(exc).__name__


class ApiError(Form3Error):
    """
    The server answered with a status outside 200-299.

    ``message`` is the ``error_message`` field of a structured error body, the raw body
    text when the body is not structured that way, or an empty string for an empty body.
    """

    def __init__(self, response: HttpResponse, message: str = ""):
        self.response = response
        self.message = message
        super().__init__(str(self))

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def method(self) -> str:
        return self.response.request.method

    @property
    def url(self) -> str:
        # Final URL after redirects when the transport reports one.
        return self.response.url or self.response.request.url

    def __str__(self) -> str:
        return f"{self.method} {self.url}: {self.status_code} {self.message}"


class DecodeError(Form3Error, ValueError):
    """A successful response body did not match the expected shape."""

    def __init__(self, response: HttpResponse, detail: str):
        super().__init__(
            f"{response.request.method} {response.url or response.request.url}: {response.status_code} undecodable body: {detail}"
        )
        self.response = response
        self.detail = detail


__all__ = [
    "ApiError",
    "DecodeError",
    "ErrorCategory",
    "Form3Error",
    "InvalidURLError",
    "SerializationError",
    "TransportError",
    "categorize_exception",
]
