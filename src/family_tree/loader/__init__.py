# src/family_tree/loader/__init__.py

"""
Public interface for reading family tree descriptions.

    from family_tree.loader import ParsedLine, parse_line, is_ignorable, iter_lines
"""

from __future__ import annotations

from .line_parser import ParsedLine, is_ignorable, parse_line
from .file_loader import iter_lines

__all__ = [
    "ParsedLine",
    "is_ignorable",
    "parse_line",
    "iter_lines",
]
