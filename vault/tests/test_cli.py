import json

import pytest

from conftest import HASH_A
from vault_core.cli import build_parser, main


def _create_args(*extra):
    return [
        "create",
        "--caller", "alice",
        "--now", "1",
        "--title", "Deed",
        "--hash", HASH_A,
        "--payload", "lot 7",
        "--category", "legal",
        "--tag", "real-estate",
        *extra,
    ]


def test_create_and_show(capsys):
    assert main(_create_args()) == 0
    assert json.loads(capsys.readouterr().out) == {"id": 1, "tier": "primary"}

    assert main(["show", "--id", "1"]) == 0
    shown = json.loads(capsys.readouterr().out)
    assert shown["record"]["owner"] == "alice"
    assert shown["record"]["tags"] == ["real-estate"]


def test_create_from_json_file(tmp_path, capsys):
    source = tmp_path / "record.json"
    source.write_text(
        json.dumps(
            {
                "title": "Deed",
                "integrityHash": HASH_A,
                "payload": "lot 7",
                "category": "legal",
                "tags": ["a", "b"],
            }
        ),
        encoding="utf-8",
    )
    assert main(["create", "--caller", "alice", "--now", "1", "--json", str(source), "--tier", "enhanced"]) == 0
    assert json.loads(capsys.readouterr().out) == {"id": 1, "tier": "enhanced"}


def test_failures_are_reported_with_their_code(capsys):
    assert main(_create_args("--tag", "x" * 31)) == 1
    error = json.loads(capsys.readouterr().err)
    assert error["code"] == 104
    assert error["error"] == "content_validation_failed"


def test_update_grant_and_check(capsys):
    main(_create_args())
    capsys.readouterr()

    assert main(
        [
            "update", "--caller", "bob", "--now", "2", "--id", "1",
            "--title", "Deed v2", "--hash", HASH_A, "--payload", "lot 7", "--tag", "x",
        ]
    ) == 1
    assert json.loads(capsys.readouterr().err)["error"] == "forbidden"

    assert main(
        [
            "grant", "--caller", "alice", "--now", "10", "--id", "1",
            "--grantee", "bob", "--level", "editor", "--duration", "100", "--modify",
        ]
    ) == 0
    grant = json.loads(capsys.readouterr().out)
    assert grant["expires_at"] == 110
    assert grant["modification_rights"] is True

    assert main(["check", "--caller", "bob", "--now", "50", "--id", "1", "--level", "editor"]) == 0
    assert json.loads(capsys.readouterr().out)["privilege_level"] == "editor"

    assert main(["check", "--caller", "bob", "--now", "200", "--id", "1"]) == 1
    assert json.loads(capsys.readouterr().err)["error"] == "grant_expired"

    assert main(["show", "--id", "1", "--grantee", "bob", "--now", "200"]) == 0
    assert json.loads(capsys.readouterr().out)["grant_state"] == "expired"


def test_lenient_update_flag(capsys):
    main(_create_args())
    capsys.readouterr()
    assert main(
        [
            "update", "--caller", "alice", "--now", "2", "--id", "1", "--lenient",
            "--title", "T", "--hash", "short", "--payload", "p", "--tag", "x",
        ]
    ) == 0
    assert json.loads(capsys.readouterr().out) == {"id": 1, "updated": True}


def test_missing_fields_are_a_payload_error():
    assert main(["create", "--caller", "alice", "--now", "1", "--title", "Deed"]) == 2


def test_show_missing_record(capsys):
    assert main(["show", "--id", "9"]) == 1
    assert "not found" in capsys.readouterr().err


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
