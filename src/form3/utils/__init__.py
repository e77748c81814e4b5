# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Utility exports."""

from .context import RequestContext, get_request_context, request_context

__all__ = ["RequestContext", "get_request_context", "request_context"]
