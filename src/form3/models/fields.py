# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Typed accessors for JSON payload fields."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(f"{what} must be a JSON object, got {type(value).__name__}")
    return value


def optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"{key} must be a string, got {type(value).__name__}")


def optional_bool(data: Mapping[str, Any], key: str) -> bool | None:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise TypeError(f"{key} must be a boolean, got {type(value).__name__}")


def optional_int(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    # bool is an int subclass; JSON true/false is not a valid integer here.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise TypeError(f"{key} must be an integer, got {type(value).__name__}")


def optional_str_list(data: Mapping[str, Any], key: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    raise TypeError(f"{key} must be a list of strings")


def compact(values: Mapping[str, Any]) -> dict[str, Any]:
    """Drop absent (None) entries so they are not serialized."""
    return {key: value for key, value in values.items() if value is not None}


__all__ = [
    "compact",
    "optional_bool",
    "optional_int",
    "optional_str",
    "optional_str_list",
    "require_mapping",
]
