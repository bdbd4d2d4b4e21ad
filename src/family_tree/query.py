"""
Read-only ancestry queries over a NodeRegistry.
"""

from __future__ import annotations

from typing import List, Optional

from family_tree.core.exceptions import NodeNotFoundError
from family_tree.tree.node import T, TreeNode
from family_tree.tree.registry import NodeRegistry


def ancestor_chain(node: TreeNode[T]) -> List[TreeNode[T]]:
    """Ancestors of ``node``, immediate parent first and root last."""
    return node.ancestors()


def lineage(node: TreeNode[T]) -> List[TreeNode[T]]:
    """``node`` followed by its ancestors."""
    return node.lineage()


def require_node(registry: NodeRegistry[T], name: T) -> TreeNode[T]:
    node = registry.get(name)
    if node is None:
        raise NodeNotFoundError(name)
    return node


def most_recent_common_ancestor(
    registry: NodeRegistry[T], name1: T, name2: T
) -> Optional[TreeNode[T]]:
    """
    Return the deepest node that is an ancestor of both named nodes.

    A node counts as its own ancestor, so asking about a node and one of its
    descendants returns the node itself. Candidates are tried along
    ``name1``'s lineage, nearest first.

    Returns:
        The common ancestor, or None when the two nodes are in disconnected
        trees.

    Raises:
        NodeNotFoundError: if either name was never added.
    """
    node1 = require_node(registry, name1)
    node2 = require_node(registry, name2)

    lineage2 = set(node2.lineage())
    for candidate in node1.lineage():
        if candidate in lineage2:
            return candidate
    return None
