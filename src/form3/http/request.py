# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request builder: URL resolution, headers and JSON body encoding."""

from __future__ import annotations

import json
from typing import Any

from ..config import DEFAULT_USER_AGENT, MEDIA_TYPE_JSON
from ..errors import SerializationError
from .models import HttpRequest
from .url import resolve_url


def _to_jsonable(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_body(body: Any) -> bytes:
    """Serialize ``body`` to compact UTF-8 JSON, keeping field order."""
    try:
        return json.dumps(
            body,
            default=_to_jsonable,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(f"could not encode request body: {exc}") from exc


def build_request(
    method: str,
    base_url: str,
    path: str,
    body: Any = None,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: float | None = None,
) -> HttpRequest:
    """
    Build a fully-formed request for ``path`` resolved against ``base_url``.

    Every request asks for JSON and carries the configured User-Agent; only requests
    with a body declare a Content-Type.
    """
    url = resolve_url(base_url, path)
    headers = {
        "Accept": MEDIA_TYPE_JSON,
        "User-Agent": user_agent,
    }
    content: bytes | None = None
    if body is not None:
        content = encode_body(body)
        headers["Content-Type"] = MEDIA_TYPE_JSON

    return HttpRequest(
        url=url,
        method=method.upper(),
        headers=headers,
        body=content,
        timeout=timeout,
    )


__all__ = ["build_request", "encode_body"]
