# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client facade: configuration, verb helpers and the request/response dispatch loop."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress
from dataclasses import replace
from typing import Any, TypeVar

from .config import ClientSettings, load_client_settings
from .errors import ApiError, InvalidURLError
from .http.client import HttpClient, create_default_http_client
from .http.models import HttpRequest, HttpResponse
from .http.request import build_request
from .http.response import check_response, decode_response
from .http.url import parse_base_url
from .services.accounts import AccountService

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Form3Client:
    """
    Entry point for the API.

    Holds the configuration (base URL, user agent, transport) shared by every resource
    service it exposes. Configuration changes go through the fluent ``with_*`` mutators
    and should happen before the client is used.
    """

    def __init__(self, http_client: HttpClient | None = None, settings: ClientSettings | None = None):
        self.settings = replace(settings) if settings is not None else ClientSettings()
        parse_base_url(self.settings.base_url)
        self._owns_http_client = http_client is None
        self.http_client = http_client or create_default_http_client(self.settings)
        self.accounts = AccountService(self)

    @classmethod
    def from_env(cls, http_client: HttpClient | None = None) -> Form3Client:
        """Build a client configured from FORM3_* environment variables."""
        return cls(http_client=http_client, settings=load_client_settings())

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    @property
    def user_agent(self) -> str:
        return self.settings.user_agent

    def with_base_url(self, base_url: str) -> Form3Client:
        """Set the base URL; an unparsable value keeps the current one."""
        try:
            self.settings.base_url = parse_base_url(base_url)
        except InvalidURLError as exc:
            logger.warning("Ignoring base URL %r: %s", base_url, exc.reason)
        return self

    def with_user_agent(self, user_agent: str) -> Form3Client:
        self.settings.user_agent = user_agent
        return self

    def with_http_client(self, http_client: HttpClient) -> Form3Client:
        if self._owns_http_client:
            self.close()
        self.http_client = http_client
        self._owns_http_client = False
        return self

    def get(self, path: str, *, timeout: float | None = None) -> HttpRequest:
        return self._build("GET", path, timeout=timeout)

    def post(self, path: str, body: Any, *, timeout: float | None = None) -> HttpRequest:
        return self._build("POST", path, body, timeout=timeout)

    def delete(self, path: str, *, timeout: float | None = None) -> HttpRequest:
        return self._build("DELETE", path, timeout=timeout)

    def _build(self, method: str, path: str, body: Any = None, *, timeout: float | None = None) -> HttpRequest:
        return build_request(
            method,
            self.settings.base_url,
            path,
            body,
            user_agent=self.settings.user_agent,
            timeout=timeout,
        )

    def do(
        self,
        request: HttpRequest,
        decoder: Callable[[Any], T] | None = None,
    ) -> tuple[T | None, HttpResponse]:
        """
        Send ``request`` and classify the response.

        Raises ApiError for non-2xx statuses before any decoding is attempted. When
        ``decoder`` is given the JSON body is decoded through it, otherwise the decoded
        value is None.
        """
        response = self.http_client.request(request)
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)

        try:
            check_response(response)
        except ApiError as exc:
            logger.debug("API error: %s", exc)
            raise

        if decoder is None:
            return None, response
        return decode_response(response, decoder), response

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> Form3Client:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        if self._owns_http_client:
            self.close()


__all__ = ["Form3Client"]
