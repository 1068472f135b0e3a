"""Tests for identifier cleaning."""

import re

import pytest

from sqlevents.core.identifiers import QUALIFIED_NAME, clean_identifier, extract_identifiers


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("users", "users"),
        ('"users"', "users"),
        ("`users`", "users"),
        ("'users'", "users"),
        ("public.", "public"),
        ('"public".', "public"),
        ("`auth`.", "auth"),
        # Doubled quotes are stripped, not collapsed to one quote.
        ('"user""table"', "usertable"),
        ("a..", "a."),
    ],
)
def test_clean_identifier(raw: str, expected: str) -> None:
    assert clean_identifier(raw) == expected


@pytest.mark.parametrize("raw", [None, "", '""', "``", "."])
def test_clean_identifier_absent(raw: "str | None") -> None:
    """Missing or fully stripped captures become None rather than empty strings."""
    assert clean_identifier(raw) is None


def test_extract_identifiers_with_schema() -> None:
    match = re.search(QUALIFIED_NAME, '"public"."user_table" (id INT)')
    assert match is not None

    schema, name = extract_identifiers(match)
    assert schema == "public"
    assert name == "user_table"


def test_extract_identifiers_without_schema() -> None:
    match = re.search(QUALIFIED_NAME, "users (id INT)")
    assert match is not None

    extracted = extract_identifiers(match)
    assert extracted.schema is None
    assert extracted.name == "users"


def test_extract_identifiers_missing_groups() -> None:
    match = re.search(r"(?P<name>\w+)", "trigger_name")
    assert match is not None

    assert extract_identifiers(match) == (None, "trigger_name")
