from __future__ import annotations

from typing import Any, Optional


class FamilyTreeError(Exception):
    """Base exception for family tree construction and queries."""


class MalformedLineError(FamilyTreeError, ValueError):
    """Raised when an input line does not follow ``parent:child,child``."""

    NO_COLON = "no_colon"
    EMPTY_PARENT = "empty_parent"
    NO_CHILDREN = "no_children"
    CYCLE = "cycle"

    _MESSAGES = {
        NO_COLON: "Bad line (no colon)",
        EMPTY_PARENT: "Empty parent name",
        NO_CHILDREN: "Bad line (no children)",
        CYCLE: "Link would make a node its own ancestor",
    }

    def __init__(self, line: str, reason: str, lineno: Optional[int] = None):
        self.line = line
        self.reason = reason
        self.lineno = lineno
        where = f"Line {lineno}: " if lineno is not None else ""
        super().__init__(f"{where}{self._MESSAGES.get(reason, reason)}: {line!r}")


class ConflictingParentError(FamilyTreeError):
    """Raised when a child is declared under a second, different parent."""

    def __init__(self, child: Any, existing_parent: Any, new_parent: Any, line: str = ""):
        self.child = child
        self.existing_parent = existing_parent
        self.new_parent = new_parent
        self.line = line
        super().__init__(
            f"Child {child} already has a different parent {existing_parent} "
            f"(cannot also be a child of {new_parent})"
        )


class NodeNotFoundError(FamilyTreeError, KeyError):
    """Raised when a query names a node that was never added."""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Node not found: {self.name}"


class ConversionError(FamilyTreeError, ValueError):
    """Raised when a name token cannot be converted to the tree's name type."""

    def __init__(self, token: str, message: Optional[str] = None):
        self.token = token
        super().__init__(message or f"Cannot convert name token: {token!r}")
