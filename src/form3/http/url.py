# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for resolving API paths against the configured base URL."""

from __future__ import annotations

import re
from urllib.parse import urljoin, urlsplit

from ..errors import InvalidURLError

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _check_reference(value: str) -> None:
    if _CONTROL_CHARS_RE.search(value):
        raise InvalidURLError(value, "contains control characters")
    if _BAD_ESCAPE_RE.search(value):
        raise InvalidURLError(value, "invalid percent-escape")
    try:
        parts = urlsplit(value)
        # Accessing port validates it (raises ValueError for out-of-range values).
        parts.port
    except ValueError as exc:
        raise InvalidURLError(value, str(exc)) from exc


def parse_base_url(base_url: str) -> str:
    """Validate an absolute base URL and return it unchanged."""
    raw = str(base_url or "")
    _check_reference(raw)
    parts = urlsplit(raw)
    if not parts.scheme or not parts.netloc:
        raise InvalidURLError(raw, "base URL must be absolute (scheme and host)")
    return raw


def resolve_url(base_url: str, reference: str) -> str:
    """
    Resolve ``reference`` (path plus optional query) against ``base_url``.

    Follows RFC 3986 reference resolution, so ``/v1/x`` replaces the base path while
    ``v1/x`` is appended to the base's directory.

    Example:
      resolve_url("http://host:8080", "/v1/organisation/accounts") ->
      "http://host:8080/v1/organisation/accounts"
    """
    base = parse_base_url(base_url)
    ref = str(reference or "")
    _check_reference(ref)
    return urljoin(base, ref)


__all__ = ["parse_base_url", "resolve_url"]
