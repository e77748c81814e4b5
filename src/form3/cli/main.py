# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Form3 accounts CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..config import ClientSettings, load_client_settings
from ..errors import Form3Error
from ..log import setup_logging
from ..models import AccountData, ResourceEnvelope
from ..runtime import Form3Client


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="form3", description="Form3 organisation accounts client")
    parser.add_argument("--base-url", help="API base URL (default: $FORM3_BASE_URL or http://localhost:8080)")
    parser.add_argument("--user-agent", help="User-Agent header value")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-level", help="Logging level (default: $FORM3_LOG_LEVEL or WARNING)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch = subparsers.add_parser("fetch", help="Fetch an account by ID")
    fetch.add_argument("account_id")

    create = subparsers.add_parser("create", help="Create an account from a JSON file ('-' for stdin)")
    create.add_argument("file")

    delete = subparsers.add_parser("delete", help="Delete an account by ID and version")
    delete.add_argument("account_id")
    delete.add_argument("--version", type=int, required=True)
    return parser


def _load_account(path: str) -> AccountData:
    if path == "-":
        payload = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as handle:
            payload = json.load(handle)
    # Accept either a bare account object or a full {"data": ...} envelope.
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        payload = payload["data"]
    return AccountData.from_mapping(payload)


def _print_json(data: Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")


def _pretty_print(envelope: ResourceEnvelope[AccountData]) -> None:
    account = envelope.data
    if account is None:
        print("(no account data)")
        return
    attributes = account.attributes
    print(f"Account: {account.id}")
    print(f"Organisation: {account.organisation_id or '-'}")
    print(f"Version: {account.version if account.version is not None else '-'}")
    if attributes is not None:
        if attributes.name:
            print(f"Name: {', '.join(attributes.name)}")
        if attributes.country:
            print(f"Country: {attributes.country}")
        if attributes.bank_id:
            print(f"Bank: {attributes.bank_id} ({attributes.bank_id_code or '-'})")
        if attributes.status:
            print(f"Status: {attributes.status}")
    if envelope.links is not None and envelope.links.self_url:
        print(f"Link: {envelope.links.self_url}")


def _settings_from_args(args: argparse.Namespace) -> ClientSettings:
    settings = load_client_settings()
    if args.base_url:
        settings.base_url = args.base_url
    if args.user_agent:
        settings.user_agent = args.user_agent
    if args.timeout is not None and args.timeout > 0:
        settings.timeout = args.timeout
    return settings


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        settings = _settings_from_args(args)
        with Form3Client(settings=settings) as client:
            if args.command == "fetch":
                envelope, _ = client.accounts.fetch(args.account_id)
            elif args.command == "create":
                envelope, _ = client.accounts.create(_load_account(args.file))
            else:
                response = client.accounts.delete(args.account_id, args.version)
                if args.json:
                    _print_json({"status_code": response.status_code})
                else:
                    print(f"Deleted {args.account_id} (status {response.status_code})")
                return 0
    except (Form3Error, OSError, TypeError, ValueError) as exc:
        print(f"form3: {exc}", file=sys.stderr)
        return 1

    if args.json:
        _print_json(envelope)
    else:
        _pretty_print(envelope)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
