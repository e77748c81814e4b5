# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging

import httpx

from ..config import ClientSettings
from ..errors import TransportError
from ..utils.context import get_request_context
from .client import HttpClient
from .headers import normalize_headers
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper."""

    def __init__(self, settings: ClientSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or ClientSettings()
        self._client = client or httpx.Client(
            follow_redirects=True,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)

        timeout = request.timeout
        if timeout is None:
            context_timeout = get_request_context().timeout
            timeout = context_timeout if context_timeout is not None else self.settings.timeout

        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                content=request.body,
                timeout=timeout,
            ) as resp:
                content = bytearray()
                for chunk in resp.iter_bytes():
                    content.extend(chunk)
        except httpx.HTTPError as exc:
            logger.debug("%s %s failed: %s", request.method, request.url, exc)
            raise TransportError(request.method, request.url, exc) from exc

        return HttpResponse(
            request=request,
            status_code=resp.status_code,
            headers=normalize_headers(resp.headers),
            content=bytes(content),
            url=str(resp.url),
            encoding=resp.encoding,
        )

    def close(self) -> None:
        self._client.close()
