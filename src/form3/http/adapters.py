# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory HttpClient implementations."""

from __future__ import annotations

from collections.abc import Callable

from ..errors import TransportError
from .client import HttpClient
from .headers import normalize_headers
from .models import HttpRequest, HttpResponse

Responder = Callable[[HttpRequest], HttpResponse]


class StubHttpClient(HttpClient):
    """Deterministic, programmable HttpClient for tests."""

    def __init__(self, responders: dict[tuple[str, str], Responder] | None = None):
        self._responders = responders or {}
        self.requests: list[HttpRequest] = []

    def add(
        self,
        method: str,
        url: str,
        status_code: int,
        body: bytes | str = b"",
        headers: dict[str, str] | None = None,
    ) -> None:
        """Register a canned response for ``method`` + ``url``."""
        content = body.encode("utf-8") if isinstance(body, str) else body

        def respond(request: HttpRequest) -> HttpResponse:
            return HttpResponse(
                request=request,
                status_code=status_code,
                headers=normalize_headers(headers),
                content=content,
                url=request.url,
            )

        self._responders[(method.upper(), url)] = respond

    def add_responder(self, method: str, url: str, responder: Responder) -> None:
        self._responders[(method.upper(), url)] = responder

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        responder = self._responders.get((request.method.upper(), request.url))
        if responder is None:
            raise TransportError(request.method, request.url, ConnectionError("No stubbed response configured"))
        return responder(request)

    def close(self) -> None:
        return None
