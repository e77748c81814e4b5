# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for the Form3 client."""

from .account import ACCOUNT_TYPE, AccountAttributes, AccountData, AccountEnvelope
from .envelope import Links, Resource, ResourceEnvelope

__all__ = [
    "ACCOUNT_TYPE",
    "AccountAttributes",
    "AccountData",
    "AccountEnvelope",
    "Links",
    "Resource",
    "ResourceEnvelope",
]
