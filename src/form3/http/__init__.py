# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP pipeline exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .headers import header_value, normalize_headers
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .request import build_request, encode_body
from .response import check_response, decode_response, error_message_from_body
from .url import parse_base_url, resolve_url

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "build_request",
    "check_response",
    "create_default_http_client",
    "decode_response",
    "encode_body",
    "error_message_from_body",
    "header_value",
    "normalize_headers",
    "parse_base_url",
    "resolve_url",
]
