import json
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from pathfinder.cli import (
    DATE_PARSING_ENV_VAR,
    RECURSIVE_MARKER,
    main,
    to_json_value,
)
from pathfinder.node import BAD_VALUE


@pytest.fixture
def invoice_path(fixture_path_factory: Callable[[str, str], Path]) -> Path:
    return fixture_path_factory("documents", "invoice.yml")


def test_main(invoice_path: Path) -> None:
    result = CliRunner().invoke(
        main, [str(invoice_path), "client.name", "missing|title"]
    )

    assert result.exit_code == 0
    assert json.loads(result.output) == [
        {
            "path": "client.name",
            "type": "string",
            "result": {
                "status": "OK",
                "summary": "OK: client.name (string)",
                "value": "ACME Corp",
            },
        },
        {
            "path": "missing|title",
            "type": "string",
            "result": {
                "status": "OK",
                "summary": "OK: missing|title (string)",
                "value": "Website relaunch",
            },
        },
    ]


def test_main_errors(invoice_path: Path) -> None:
    result = CliRunner().invoke(
        main,
        ["--type", "integer", "--only-errors", str(invoice_path), "amount", "title", "nope"],
    )

    assert result.exit_code == 1
    assert json.loads(result.output) == [
        {
            "path": "title",
            "type": "integer",
            "result": {
                "status": "ERROR",
                "summary": "ERROR: title",
                "reason": "INVALID",
                "error": "not an integer (String('Website relaunch'))",
            },
        },
        {
            "path": "nope",
            "type": "integer",
            "result": {
                "status": "ERROR",
                "summary": "ERROR: nope",
                "reason": "MISSING",
                "error": "field not found: `nope`",
            },
        },
    ]


def test_main_hash_value(invoice_path: Path) -> None:
    result = CliRunner().invoke(
        main, ["--type", "hash", str(invoice_path), "client.contact"]
    )

    assert result.exit_code == 0
    assert json.loads(result.output)[0]["result"]["value"] == {
        "email": "accounting@acme.example"
    }


def test_main_date_parsing(invoice_path: Path) -> None:
    result = CliRunner().invoke(
        main, ["--type", "date", "--date-parsing", str(invoice_path), "date"]
    )

    assert result.exit_code == 0
    assert json.loads(result.output)[0]["result"]["value"] == "2019-11-07"


def test_main_date_parsing_from_env(invoice_path: Path) -> None:
    result = CliRunner().invoke(
        main,
        ["--type", "date", str(invoice_path), "date"],
        env={DATE_PARSING_ENV_VAR: "true"},
    )

    assert result.exit_code == 0


def test_main_date_requires_date_parsing(invoice_path: Path) -> None:
    result = CliRunner().invoke(main, ["--type", "date", str(invoice_path), "date"])

    assert result.exit_code == 2
    assert "--date-parsing" in result.output


def test_main_rejects_whitespace(invoice_path: Path) -> None:
    result = CliRunner().invoke(main, [str(invoice_path), "offer.date | offer_date"])

    assert result.exit_code == 2
    assert "whitespaces" in result.output


def test_main_renders_non_json_values(
    fixture_path_factory: Callable[[str, str], Path],
) -> None:
    path = fixture_path_factory("documents", "attachments.yml")

    result = CliRunner().invoke(main, ["--type", "hash", str(path), "attachment"])

    assert result.exit_code == 0
    assert json.loads(result.output)[0]["result"]["value"] == {
        "name": "hello.txt",
        "blob": "BadValue(b'hello')",
        "tags": "BadValue({'draft'})",
    }


def test_main_renders_recursive_values(
    fixture_path_factory: Callable[[str, str], Path],
) -> None:
    path = fixture_path_factory("documents", "attachments.yml")

    result = CliRunner().invoke(main, ["--type", "hash", str(path), "loop"])

    assert result.exit_code == 0
    assert json.loads(result.output)[0]["result"]["value"] == {
        "name": "loop",
        "self": {"name": "loop", "self": RECURSIVE_MARKER},
    }


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (date(2019, 11, 7), "2019-11-07"),
        ((1, [2, b"3"]), [1, [2, "BadValue(b'3')"]]),
        ({1: None}, {"1": None}),
        (BAD_VALUE, "BadValue"),
    ],
)
def test_to_json_value(value: Any, expected: Any) -> None:
    assert to_json_value(value) == expected


def test_to_json_value_cycle() -> None:
    data: list[Any] = ["a"]
    data.append(data)

    assert to_json_value(data) == ["a", RECURSIVE_MARKER]
