# src/family_tree/tree_builder.py

from __future__ import annotations

import logging
from typing import Callable, Generic, List, Optional, Tuple

from family_tree.core.exceptions import (
    ConflictingParentError,
    ConversionError,
    MalformedLineError,
)
from family_tree.loader.line_parser import ParsedLine, parse_line
from family_tree.logging import get_logger
from family_tree.tree.node import T, TreeNode
from family_tree.tree.registry import NodeRegistry

log = get_logger(__name__)


class TreeBuilder(Generic[T]):
    """
    Grows a NodeRegistry one ``parent:child,child`` line at a time.

    Each line is parsed, its names converted and every link checked before
    anything is created, so a rejected line leaves the registry untouched.
    """

    def __init__(self, registry: NodeRegistry[T], converter: Callable[[str], T]):
        if converter is None:
            raise TypeError("converter must be a callable, not None")
        self.registry = registry
        self.converter = converter

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def add_line(self, line: str, lineno: Optional[int] = None) -> Optional[TreeNode[T]]:
        """
        Apply one line and return its parent node.

        Blank and comment lines return None and change nothing.

        Raises:
            MalformedLineError: bad syntax, or a link that would form a cycle.
            ConflictingParentError: a child already has a different parent.
            ConversionError: the converter rejected a name token.
        """
        parsed = parse_line(line, lineno=lineno)
        if parsed is None:
            return None

        parent_name, child_names = self._convert_names(parsed)
        self._validate(parsed, parent_name, child_names)

        parent = self.registry.get_or_create(parent_name)
        for child_name in child_names:
            self.registry.add_child(parent, self.registry.get_or_create(child_name))

        self._recompute_root()
        log.debug(f"Linked {parent_name!r} -> {[str(c) for c in child_names]}")
        return parent

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _convert(self, token: str) -> T:
        try:
            return self.converter(token)
        except ConversionError:
            raise
        except Exception as exc:
            raise ConversionError(token, f"Cannot convert name token {token!r}: {exc}") from exc

    def _convert_names(self, parsed: ParsedLine) -> Tuple[T, List[T]]:
        parent_name = self._convert(parsed.parent)

        child_names: List[T] = []
        for token in parsed.children:
            name = self._convert(token)
            # Repeats within one line link once
            if name not in child_names:
                child_names.append(name)
        return parent_name, child_names

    def _validate(self, parsed: ParsedLine, parent_name: T, child_names: List[T]) -> None:
        parent = self.registry.get(parent_name)
        lineage = parent.lineage() if parent is not None else []

        for child_name in child_names:
            if child_name == parent_name:
                raise MalformedLineError(parsed.raw, MalformedLineError.CYCLE, parsed.lineno)

            child = self.registry.get(child_name)
            if child is None:
                continue
            if child.parent is not None and child.parent is not parent:
                raise ConflictingParentError(
                    child=child_name,
                    existing_parent=child.parent.name,
                    new_parent=parent_name,
                    line=parsed.raw,
                )
            if child in lineage:
                raise MalformedLineError(parsed.raw, MalformedLineError.CYCLE, parsed.lineno)

    def _recompute_root(self) -> None:
        root = self.registry.recompute_root()
        if log.isEnabledFor(logging.DEBUG):
            candidates = self.registry.parentless()
            if len(candidates) > 1:
                log.debug(
                    f"{len(candidates)} parentless nodes; root is {root.name!r} (earliest created)"
                )
