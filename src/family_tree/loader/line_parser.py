# src/family_tree/loader/line_parser.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from family_tree.core.exceptions import MalformedLineError

COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class ParsedLine:
    """
    One ``parent:child,child`` line split into raw name tokens.

    Attributes:
        parent: Trimmed parent text (never empty).
        children: Trimmed, non-empty child texts in left-to-right order.
        raw: The original line without trailing newline characters.
        lineno: 1-based line number when read from a file, else None.
    """
    parent: str
    children: Tuple[str, ...]
    raw: str
    lineno: Optional[int] = None


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def is_ignorable(line: str) -> bool:
    """True for blank lines and ``#`` comments."""
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_PREFIX)


def parse_line(line: str, lineno: Optional[int] = None) -> Optional[ParsedLine]:
    """
    Split a tree line into parent and child tokens.

    Returns None for blank and comment lines. The line is split on the first
    colon; the right-hand side is split on commas. Empty child tokens are
    dropped, so ``"A: ,"`` and ``"A:   "`` are valid lines with no children.

    Raises:
        MalformedLineError: no colon, empty parent, or nothing after the colon.
    """
    raw = _strip_eol(line)
    if is_ignorable(raw):
        return None

    colon = raw.find(":")
    if colon < 0:
        raise MalformedLineError(raw, MalformedLineError.NO_COLON, lineno)

    parent = raw[:colon].strip()
    if not parent:
        raise MalformedLineError(raw, MalformedLineError.EMPTY_PARENT, lineno)

    # "X:" is malformed, "X:   " is a parent with no children
    if colon == len(raw) - 1:
        raise MalformedLineError(raw, MalformedLineError.NO_CHILDREN, lineno)

    children = tuple(
        kid for kid in (piece.strip() for piece in raw[colon + 1 :].split(",")) if kid
    )
    return ParsedLine(parent=parent, children=children, raw=raw, lineno=lineno)
