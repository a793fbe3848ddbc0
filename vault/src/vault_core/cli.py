"""Command line for operating a local record vault."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import ValidationError

from vault_core.config import get_settings
from vault_core.context import Context
from vault_core.domain.models import StorageTier
from vault_core.domain.payloads import GrantPayload, RecordPayload
from vault_core.errors import VaultError

LOGGER = logging.getLogger("vault_core.cli")


def _facade():
    # Imported lazily so --help works without touching the database.
    from vault_core.service.facade import get_vault_facade

    return get_vault_facade()


def _context(args: argparse.Namespace) -> Context:
    return Context(caller=args.caller, now=args.now)


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _load_record_payload(args: argparse.Namespace) -> RecordPayload:
    if args.json:
        return RecordPayload.from_json(Path(args.json).read_text(encoding="utf-8"))
    return RecordPayload(
        title=args.title,
        integrity_hash=args.hash,
        payload=args.payload,
        category=getattr(args, "category", None),
        tags=list(args.tag or []),
    )


def init_db(args: argparse.Namespace) -> int:
    from vault_core.db.migrations import upgrade_database

    upgrade_database(args.database_url)
    print("Vault schema is up to date.")
    return 0


def create_record(args: argparse.Namespace) -> int:
    data = _load_record_payload(args)
    store = _facade().store_for(args.tier)
    entry_id = store.create(
        _context(args),
        title=data.title,
        integrity_hash=data.integrity_hash,
        payload=data.payload,
        category=data.category,
        tags=data.tags,
    )
    _emit({"id": entry_id, "tier": store.tier.value})
    return 0


def update_record(args: argparse.Namespace) -> int:
    data = _load_record_payload(args)
    store = _facade().store_for(args.tier)
    update = store.update_lenient if args.lenient else store.update
    update(
        _context(args),
        args.id,
        title=data.title,
        integrity_hash=data.integrity_hash,
        payload=data.payload,
        tags=data.tags,
    )
    _emit({"id": args.id, "updated": True})
    return 0


def grant_access(args: argparse.Namespace) -> int:
    data = GrantPayload(
        grantee=args.grantee,
        level=args.level,
        duration=args.duration,
        modification_rights=args.modify,
    )
    facade = _facade()
    facade.grant_access(
        _context(args),
        args.id,
        grantee=data.grantee,
        level=data.level,
        duration=data.duration,
        modification_rights=data.modification_rights,
    )
    _emit(facade.get_grant(args.id, data.grantee).to_dict())
    return 0


def show_record(args: argparse.Namespace) -> int:
    from vault_core.service.access import describe_grant_state

    facade = _facade()
    record = facade.store_for(args.tier).get(args.id)
    if record is None:
        print(f"Record '{args.id}' not found.", file=sys.stderr)
        return 1
    payload: dict[str, Any] = {"record": record.to_dict()}
    if args.grantee:
        grant = facade.get_grant(args.id, args.grantee)
        payload["grant"] = grant.to_dict() if grant else None
        if args.now is not None:
            payload["grant_state"] = describe_grant_state(grant, args.now)
    _emit(payload)
    return 0


def check_access(args: argparse.Namespace) -> int:
    decision = _facade().check_access(
        _context(args),
        args.id,
        required_level=args.level,
        require_modification=args.modify,
    )
    _emit(decision.to_dict())
    return 0


def _add_context_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--caller", required=True, help="Principal performing the operation.")
    parser.add_argument("--now", required=True, type=int, help="Current logical time.")


def _add_record_args(parser: argparse.ArgumentParser, *, with_category: bool) -> None:
    parser.add_argument("--json", help="Read record fields from a JSON file instead of flags.")
    parser.add_argument("--title")
    parser.add_argument("--hash", help="64 character integrity hash.")
    parser.add_argument("--payload")
    if with_category:
        parser.add_argument("--category")
    parser.add_argument("--tag", action="append", help="Record tag; repeat for several.")
    parser.add_argument(
        "--tier",
        choices=[tier.value for tier in StorageTier],
        default=StorageTier.PRIMARY.value,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vault-admin", description="Manage a local record vault.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Apply database migrations.")
    init_parser.add_argument("--database-url", help="Override the configured database URL.")
    init_parser.set_defaults(func=init_db)

    create_parser = subparsers.add_parser("create", help="Create a record.")
    _add_context_args(create_parser)
    _add_record_args(create_parser, with_category=True)
    create_parser.set_defaults(func=create_record)

    update_parser = subparsers.add_parser("update", help="Replace a record's content.")
    _add_context_args(update_parser)
    update_parser.add_argument("--id", required=True, type=int)
    _add_record_args(update_parser, with_category=False)
    update_parser.add_argument("--lenient", action="store_true", help="Skip field-format validation.")
    update_parser.set_defaults(func=update_record)

    grant_parser = subparsers.add_parser("grant", help="Grant time-bounded access to a record.")
    _add_context_args(grant_parser)
    grant_parser.add_argument("--id", required=True, type=int)
    grant_parser.add_argument("--grantee", required=True)
    grant_parser.add_argument("--level", required=True)
    grant_parser.add_argument("--duration", required=True, type=int)
    grant_parser.add_argument("--modify", action="store_true", help="Include modification rights.")
    grant_parser.set_defaults(func=grant_access)

    show_parser = subparsers.add_parser("show", help="Show a record and optionally one grant.")
    show_parser.add_argument("--id", required=True, type=int)
    show_parser.add_argument(
        "--tier",
        choices=[tier.value for tier in StorageTier],
        default=StorageTier.PRIMARY.value,
    )
    show_parser.add_argument("--grantee")
    show_parser.add_argument("--now", type=int, help="Logical time used to report grant state.")
    show_parser.set_defaults(func=show_record)

    check_parser = subparsers.add_parser("check", help="Check a caller's access to a record.")
    _add_context_args(check_parser)
    check_parser.add_argument("--id", required=True, type=int)
    check_parser.add_argument("--level", default="viewer")
    check_parser.add_argument("--modify", action="store_true", help="Require modification rights.")
    check_parser.set_defaults(func=check_access)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except VaultError as exc:
        print(json.dumps(exc.to_dict(), sort_keys=True), file=sys.stderr)
        return 1
    except ValidationError as exc:
        LOGGER.error("Malformed payload: %s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
