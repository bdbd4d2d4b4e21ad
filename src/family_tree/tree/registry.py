from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, Iterator, List, Optional

from family_tree.tree.node import T, TreeNode


@dataclass
class NodeRegistry(Generic[T]):
    """
    In-memory node store indexed by name.

    Every node is registered exactly once and never removed. Iteration and
    root discovery follow creation order. ``root`` starts out as the first
    node ever created and is corrected by ``recompute_root`` once a
    parentless node is known.
    """

    nodes_by_name: Dict[T, TreeNode[T]] = field(default_factory=dict)
    root: Optional[TreeNode[T]] = None

    def __len__(self) -> int:
        return len(self.nodes_by_name)

    def __contains__(self, name: object) -> bool:
        return name in self.nodes_by_name

    def __iter__(self) -> Iterator[TreeNode[T]]:
        return iter(self.nodes_by_name.values())

    def get(self, name: T) -> Optional[TreeNode[T]]:
        return self.nodes_by_name.get(name)

    def get_or_create(self, name: T) -> TreeNode[T]:
        node = self.nodes_by_name.get(name)
        if node is None:
            node = TreeNode(name)
            self.nodes_by_name[name] = node
            if self.root is None:
                self.root = node
        return node

    def add_child(self, parent: TreeNode[T], child: TreeNode[T]) -> None:
        parent.add_child(child)

    def parentless(self) -> List[TreeNode[T]]:
        return [n for n in self.nodes_by_name.values() if n.parent is None]

    def recompute_root(self) -> Optional[TreeNode[T]]:
        """Point ``root`` at the earliest-created node without a parent, if any."""
        for node in self.nodes_by_name.values():
            if node.parent is None:
                self.root = node
                break
        return self.root
