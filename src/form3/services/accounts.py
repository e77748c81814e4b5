# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Organisation accounts resource: fetch, create and delete."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from ..http.models import HttpResponse
from ..models.account import AccountData
from ..models.envelope import ResourceEnvelope

if TYPE_CHECKING:
    from ..runtime import Form3Client

ACCOUNTS_PATH = "/v1/organisation/accounts"


def account_path(account_id: str) -> str:
    return f"{ACCOUNTS_PATH}/{quote(str(account_id), safe='')}"


class AccountService:
    """Account operations; each call is a single request/response round trip."""

    def __init__(self, client: Form3Client):
        self._client = client

    def fetch(
        self, account_id: str, *, timeout: float | None = None
    ) -> tuple[ResourceEnvelope[AccountData], HttpResponse]:
        """Get a single account by ID."""
        request = self._client.get(account_path(account_id), timeout=timeout)
        envelope, response = self._client.do(request, ResourceEnvelope.decoder(AccountData))
        return envelope, response

    def create(
        self, account: AccountData, *, timeout: float | None = None
    ) -> tuple[ResourceEnvelope[AccountData], HttpResponse]:
        """Register an existing bank account or create a new one."""
        body = ResourceEnvelope(data=account)
        request = self._client.post(ACCOUNTS_PATH, body, timeout=timeout)
        envelope, response = self._client.do(request, ResourceEnvelope.decoder(AccountData))
        return envelope, response

    def delete(self, account_id: str, version: int, *, timeout: float | None = None) -> HttpResponse:
        """
        Delete an account by ID and version.

        A successful deletion answers 204 with an empty body; callers inspect
        ``response.status_code``.
        """
        path = f"{account_path(account_id)}?version={int(version)}"
        request = self._client.delete(path, timeout=timeout)
        _, response = self._client.do(request)
        return response


__all__ = ["ACCOUNTS_PATH", "AccountService", "account_path"]
