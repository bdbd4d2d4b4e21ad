"""
family_tree: build genealogy trees from ``parent:child,child`` text and find
most recent common ancestors.
"""

from family_tree.core.exceptions import (
    ConflictingParentError,
    ConversionError,
    FamilyTreeError,
    MalformedLineError,
    NodeNotFoundError,
)
from family_tree.family_tree import FamilyTree, load_family_tree
from family_tree.tree import NodeRegistry, TreeNode

__version__ = "0.1.0"

__all__ = [
    "ConflictingParentError",
    "ConversionError",
    "FamilyTree",
    "FamilyTreeError",
    "MalformedLineError",
    "NodeNotFoundError",
    "NodeRegistry",
    "TreeNode",
    "load_family_tree",
]
