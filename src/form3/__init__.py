# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Form3 client package entrypoint.

Typed client for the organisation accounts API. Every operation runs the same
pipeline: build the request, send it through an injectable HttpClient, classify
the response by status code and decode the JSON payload into typed dataclasses.
"""

from .config import ClientSettings, load_client_settings
from .errors import (
    ApiError,
    DecodeError,
    ErrorCategory,
    Form3Error,
    InvalidURLError,
    SerializationError,
    TransportError,
)
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import AccountAttributes, AccountData, AccountEnvelope, Links, ResourceEnvelope
from .runtime import Form3Client
from .services import AccountService
from .utils import request_context
from .version import __version__

__all__ = [
    "AccountAttributes",
    "AccountData",
    "AccountEnvelope",
    "AccountService",
    "ApiError",
    "ClientSettings",
    "DecodeError",
    "ErrorCategory",
    "Form3Client",
    "Form3Error",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "InvalidURLError",
    "Links",
    "ResourceEnvelope",
    "SerializationError",
    "StubHttpClient",
    "TransportError",
    "__version__",
    "create_default_http_client",
    "load_client_settings",
    "request_context",
    "setup_logging",
]
