from family_tree.core.exceptions import (
    ConflictingParentError,
    ConversionError,
    FamilyTreeError,
    MalformedLineError,
    NodeNotFoundError,
)

__all__ = [
    "ConflictingParentError",
    "ConversionError",
    "FamilyTreeError",
    "MalformedLineError",
    "NodeNotFoundError",
]
