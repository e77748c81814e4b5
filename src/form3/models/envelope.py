# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Generic ``{data, links}`` payload envelope shared by every resource type."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any, Generic, Protocol, TypeVar

from .fields import optional_str, require_mapping


class Resource(Protocol):
    """Shape every enveloped entity implements."""

    def to_dict(self) -> dict[str, Any]: ...

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Any: ...


T = TypeVar("T", bound=Resource)


@dataclass
class Links:
    self_url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"self": self.self_url}

    @classmethod
    def from_mapping(cls, data: Any) -> Links:
        mapping = require_mapping(data, "links")
        return cls(self_url=optional_str(mapping, "self") or "")


@dataclass
class ResourceEnvelope(Generic[T]):
    """
    Wrapper used symmetrically for request and response payloads.

    ``data`` is always serialized (``null`` when absent); ``links`` only when present.
    """

    data: T | None = None
    links: Links | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"data": self.data.to_dict() if self.data is not None else None}
        if self.links is not None:
            payload["links"] = self.links.to_dict()
        return payload

    @classmethod
    def from_mapping(cls, payload: Any, data_type: type[T]) -> ResourceEnvelope[T]:
        mapping = require_mapping(payload, "response envelope")
        raw_data = mapping.get("data")
        raw_links = mapping.get("links")
        return cls(
            data=data_type.from_mapping(raw_data) if raw_data is not None else None,
            links=Links.from_mapping(raw_links) if raw_links is not None else None,
        )

    @classmethod
    def decoder(cls, data_type: type[T]) -> Callable[[Any], ResourceEnvelope[T]]:
        """Return a decoder suitable for ``decode_response`` that yields envelopes of ``data_type``."""
        return partial(cls.from_mapping, data_type=data_type)


__all__ = ["Links", "Resource", "ResourceEnvelope"]
