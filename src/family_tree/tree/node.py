# src/family_tree/tree/node.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Hashable, Iterator, List, Optional, TypeVar

T = TypeVar("T", bound=Hashable)

INDENT_UNIT = "  "


@dataclass(eq=False)
class TreeNode(Generic[T]):
    """
    One person (or any named entity) in a family tree.

    Attributes:
        name: Identity of the node; used as the registry key.
        parent: The node's parent, or None for a root.
        children: Child nodes in the order they were first declared.

    Nodes compare and hash by identity. ``parent`` and ``children`` are only
    changed together, through ``add_child``.
    """

    name: T
    parent: Optional["TreeNode[T]"] = field(default=None, repr=False)
    children: List["TreeNode[T]"] = field(default_factory=list, repr=False)

    # ---------- Structure ----------

    def add_child(self, child: "TreeNode[T]") -> None:
        """Append ``child`` and point its parent link here (no-op if already linked)."""
        if child.parent is self and child in self.children:
            return
        self.children.append(child)
        child.parent = self

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def depth(self) -> int:
        return len(self.ancestors())

    # ---------- Traversal ----------

    def iter_subtree(self) -> Iterator["TreeNode[T]"]:
        """Yield this node and all descendants in depth-first (pre-order) order."""
        stack: List[TreeNode[T]] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find_node_with_name(self, target: T) -> Optional["TreeNode[T]"]:
        """Return the first node in this subtree (pre-order) named ``target``."""
        for node in self.iter_subtree():
            if node.name == target:
                return node
        return None

    def ancestors(self) -> List["TreeNode[T]"]:
        """Parent, grandparent, ... up to the root. Excludes this node."""
        chain: List[TreeNode[T]] = []
        cur = self.parent
        while cur is not None:
            chain.append(cur)
            cur = cur.parent
        return chain

    def lineage(self) -> List["TreeNode[T]"]:
        """This node followed by its ancestors, nearest first."""
        return [self, *self.ancestors()]

    # ---------- Rendering ----------

    def render(self, indent: str = "") -> str:
        """Indented dump of the subtree, one name per line."""
        lines = []
        stack = [(self, indent)]
        while stack:
            node, prefix = stack.pop()
            lines.append(f"{prefix}{node.name}\n")
            child_prefix = prefix + INDENT_UNIT
            for child in reversed(node.children):
                stack.append((child, child_prefix))
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        parent = f" parent={self.parent.name!r}" if self.parent is not None else ""
        return f"<TreeNode {self.name!r}{parent} children={len(self.children)}>"
