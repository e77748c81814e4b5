# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response classification and decoding."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

from ..errors import ApiError, DecodeError
from .models import HttpResponse

T = TypeVar("T")


def error_message_from_body(content: bytes) -> str:
    """
    Extract a human-readable message from an error body.

    Uses the ``error_message`` field when the body is a JSON object carrying it as a
    string, the raw body text otherwise.
    """
    if not content:
        return ""
    try:
        payload = json.loads(content)
    except (ValueError, RecursionError):
        return content.decode("utf-8", errors="replace")
    if isinstance(payload, dict) and isinstance(payload.get("error_message"), str):
        return payload["error_message"]
    return content.decode("utf-8", errors="replace")


def check_response(response: HttpResponse) -> None:
    """Raise ApiError unless the status code is within 200-299 inclusive."""
    if response.ok:
        return
    raise ApiError(response, error_message_from_body(response.content))


def decode_response(response: HttpResponse, decoder: Callable[[Any], T]) -> T:
    """Parse the JSON body and hand it to ``decoder``; failures raise DecodeError."""
    try:
        payload = response.json()
    except (ValueError, RecursionError) as exc:
        content_type = response.header("Content-Type", "unknown content type")
        raise DecodeError(response, f"malformed JSON ({content_type}): {exc}") from exc
    try:
        return decoder(payload)
    except (TypeError, ValueError, KeyError) as exc:
        raise DecodeError(response, str(exc)) from exc


__all__ = ["check_response", "decode_response", "error_message_from_body"]
