# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Organisation account domain models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .envelope import ResourceEnvelope
from .fields import (
    compact,
    optional_bool,
    optional_int,
    optional_str,
    optional_str_list,
    require_mapping,
)

ACCOUNT_TYPE = "accounts"


@dataclass
class AccountAttributes:
    """
    Account attributes. Every field is optional.

    ``None`` means the field is absent and it is left out of the JSON payload, while
    falsy values such as ``False`` are sent as-is.
    """

    account_classification: str | None = None
    account_matching_opt_out: bool | None = None
    account_number: str | None = None
    alternative_names: list[str] | None = None
    bank_id: str | None = None
    bank_id_code: str | None = None
    base_currency: str | None = None
    bic: str | None = None
    country: str | None = None
    iban: str | None = None
    joint_account: bool | None = None
    name: list[str] | None = None
    secondary_identification: str | None = None
    status: str | None = None
    switched: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return compact(
            {
                "account_classification": self.account_classification,
                "account_matching_opt_out": self.account_matching_opt_out,
                "account_number": self.account_number,
                "alternative_names": list(self.alternative_names) if self.alternative_names is not None else None,
                "bank_id": self.bank_id,
                "bank_id_code": self.bank_id_code,
                "base_currency": self.base_currency,
                "bic": self.bic,
                "country": self.country,
                "iban": self.iban,
                "joint_account": self.joint_account,
                "name": list(self.name) if self.name is not None else None,
                "secondary_identification": self.secondary_identification,
                "status": self.status,
                "switched": self.switched,
            }
        )

    @classmethod
    def from_mapping(cls, data: Any) -> AccountAttributes:
        mapping = require_mapping(data, "attributes")
        return cls(
            account_classification=optional_str(mapping, "account_classification"),
            account_matching_opt_out=optional_bool(mapping, "account_matching_opt_out"),
            account_number=optional_str(mapping, "account_number"),
            alternative_names=optional_str_list(mapping, "alternative_names"),
            bank_id=optional_str(mapping, "bank_id"),
            bank_id_code=optional_str(mapping, "bank_id_code"),
            base_currency=optional_str(mapping, "base_currency"),
            bic=optional_str(mapping, "bic"),
            country=optional_str(mapping, "country"),
            iban=optional_str(mapping, "iban"),
            joint_account=optional_bool(mapping, "joint_account"),
            name=optional_str_list(mapping, "name"),
            secondary_identification=optional_str(mapping, "secondary_identification"),
            status=optional_str(mapping, "status"),
            switched=optional_bool(mapping, "switched"),
        )


@dataclass
class AccountData:
    """An organisation account: identity, owner, type tag, version and attributes."""

    id: str = ""
    organisation_id: str = ""
    type: str = ACCOUNT_TYPE
    version: int | None = None
    attributes: AccountAttributes | None = None

    def to_dict(self) -> dict[str, Any]:
        # Identity strings are omitted when empty; version 0 is a real value and is kept.
        payload: dict[str, Any] = {}
        if self.attributes is not None:
            payload["attributes"] = self.attributes.to_dict()
        if self.id:
            payload["id"] = self.id
        if self.organisation_id:
            payload["organisation_id"] = self.organisation_id
        if self.type:
            payload["type"] = self.type
        if self.version is not None:
            payload["version"] = self.version
        return payload

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AccountData:
        mapping = require_mapping(data, "data")
        raw_attributes = mapping.get("attributes")
        return cls(
            id=optional_str(mapping, "id") or "",
            organisation_id=optional_str(mapping, "organisation_id") or "",
            type=optional_str(mapping, "type") or "",
            version=optional_int(mapping, "version"),
            attributes=AccountAttributes.from_mapping(raw_attributes) if raw_attributes is not None else None,
        )


AccountEnvelope = ResourceEnvelope[AccountData]

__all__ = ["ACCOUNT_TYPE", "AccountAttributes", "AccountData", "AccountEnvelope"]
