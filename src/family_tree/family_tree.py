"""
FamilyTree: build a tree from ``parent:child,child`` lines and query it.

Typical use:

    tree = FamilyTree()                      # names stay strings
    tree.add_lines(["Bungo:Bilbo", "Belladonna:Bungo"])
    tree.most_recent_common_ancestor("Bilbo", "Bungo").name   # 'Bungo'

    ages = FamilyTree(int)                   # names converted with int()

Not thread-safe: feed lines from a single thread. Once construction is
finished, concurrent read-only queries are fine.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generic, Iterable, Iterator, Optional, Union

from family_tree.config import get_config
from family_tree.core.exceptions import FamilyTreeError
from family_tree.loader.file_loader import iter_lines
from family_tree.logging import get_logger
from family_tree.query import most_recent_common_ancestor, require_node
from family_tree.tree.node import T, TreeNode
from family_tree.tree.registry import NodeRegistry
from family_tree.tree_builder import TreeBuilder

log = get_logger(__name__)


class FamilyTree(Generic[T]):
    """
    A family tree whose node names are produced by ``converter``.

    Attributes:
        registry: Name -> node index holding every node ever added.
        converter: Maps a raw name token to the tree's name type.
    """

    def __init__(self, converter: Callable[[str], T] = str):  # type: ignore[assignment]
        self.converter = converter
        self.registry: NodeRegistry[T] = NodeRegistry()
        self._builder: TreeBuilder[T] = TreeBuilder(self.registry, converter)

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    def add_line(self, line: str, lineno: Optional[int] = None) -> Optional[TreeNode[T]]:
        """Apply one ``parent:child,child`` line. See ``TreeBuilder.add_line``."""
        return self._builder.add_line(line, lineno=lineno)

    def add_lines(self, lines: Iterable[str]) -> "FamilyTree[T]":
        """Apply lines in order, stopping at the first failure."""
        for lineno, line in enumerate(lines, start=1):
            self.add_line(line, lineno=lineno)
        return self

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    @property
    def root(self) -> Optional[TreeNode[T]]:
        return self.registry.root

    def find(self, name: T) -> Optional[TreeNode[T]]:
        return self.registry.get(name)

    def get(self, name: T) -> TreeNode[T]:
        """Like ``find`` but raises NodeNotFoundError for unknown names."""
        return require_node(self.registry, name)

    def most_recent_common_ancestor(self, name1: T, name2: T) -> Optional[TreeNode[T]]:
        return most_recent_common_ancestor(self.registry, name1, name2)

    def __len__(self) -> int:
        return len(self.registry)

    def __contains__(self, name: object) -> bool:
        return name in self.registry

    def __iter__(self) -> Iterator[TreeNode[T]]:
        return iter(self.registry)

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def render(self) -> str:
        """Indented dump of the tree under its root (empty for an empty tree)."""
        return self.root.render() if self.root is not None else ""

    def __str__(self) -> str:
        return f"{get_config().header}\n\n{self.render()}"

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        root = self.root.name if self.root is not None else None
        return f"<FamilyTree nodes={len(self)} root={root!r}>"


def load_family_tree(
    path: Union[str, Path],
    converter: Callable[[str], T] = str,  # type: ignore[assignment]
    *,
    skip_errors: bool = False,
) -> FamilyTree[T]:
    """
    Build a FamilyTree from a text file.

    With ``skip_errors`` a failing line (malformed, conflicting parent,
    unconvertible name) is logged and skipped; otherwise the first failure
    propagates.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        FamilyTreeError: for the first bad line when ``skip_errors`` is False.
    """
    tree: FamilyTree[T] = FamilyTree(converter)
    skipped = 0

    log.info(f"Loading family tree: {path}")
    for lineno, line in iter_lines(path):
        try:
            tree.add_line(line, lineno=lineno)
        except FamilyTreeError as exc:
            if not skip_errors:
                log.error(f"{path}:{lineno}: {exc}")
                raise
            skipped += 1
            log.warning(f"Skipping line {lineno} of {path}: {exc}")

    log.info(f"Loaded {len(tree)} nodes from {path} ({skipped} lines skipped)")
    return tree
