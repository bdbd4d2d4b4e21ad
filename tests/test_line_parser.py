# tests/test_line_parser.py

from __future__ import annotations

import pytest

from family_tree.core.exceptions import MalformedLineError
from family_tree.loader import is_ignorable, parse_line


def test_parse_line_parent_and_children() -> None:
    parsed = parse_line("Root:A,B", lineno=3)
    assert parsed.parent == "Root"
    assert parsed.children == ("A", "B")
    assert parsed.raw == "Root:A,B"
    assert parsed.lineno == 3


def test_parse_line_trims_tokens() -> None:
    parsed = parse_line("  Bungo  :  Bilbo , Belba  \n")
    assert parsed.parent == "Bungo"
    assert parsed.children == ("Bilbo", "Belba")
    assert parsed.raw == "  Bungo  :  Bilbo , Belba  "


def test_parse_line_splits_on_first_colon_only() -> None:
    parsed = parse_line("Time:12:30,Noon")
    assert parsed.parent == "Time"
    assert parsed.children == ("12:30", "Noon")


def test_empty_child_tokens_are_dropped() -> None:
    assert parse_line("A:B,,C, ").children == ("B", "C")
    assert parse_line("A: ,").children == ()


def test_blank_children_text_is_a_valid_line() -> None:
    parsed = parse_line("X:   ")
    assert parsed.parent == "X"
    assert parsed.children == ()

    assert parse_line("X:\t\n").children == ()


@pytest.mark.parametrize("line", ["", "   ", "\n", "#comment", "   # indented comment"])
def test_blank_and_comment_lines_are_ignored(line: str) -> None:
    assert is_ignorable(line)
    assert parse_line(line) is None


@pytest.mark.parametrize(
    "line, reason",
    [
        ("NoColonHere", MalformedLineError.NO_COLON),
        (":X", MalformedLineError.EMPTY_PARENT),
        ("   :X", MalformedLineError.EMPTY_PARENT),
        ("X:", MalformedLineError.NO_CHILDREN),
    ],
)
def test_malformed_lines_raise(line: str, reason: str) -> None:
    with pytest.raises(MalformedLineError) as excinfo:
        parse_line(line, lineno=7)

    err = excinfo.value
    assert err.reason == reason
    assert err.line == line
    assert err.lineno == 7
    assert "Line 7" in str(err)


def test_malformed_line_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_line("NoColonHere")
