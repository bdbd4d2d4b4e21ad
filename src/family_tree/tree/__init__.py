from family_tree.tree.node import INDENT_UNIT, TreeNode
from family_tree.tree.registry import NodeRegistry

__all__ = [
    "INDENT_UNIT",
    "NodeRegistry",
    "TreeNode",
]
