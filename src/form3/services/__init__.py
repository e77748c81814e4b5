# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Resource services."""

from .accounts import ACCOUNTS_PATH, AccountService

__all__ = ["ACCOUNTS_PATH", "AccountService"]
