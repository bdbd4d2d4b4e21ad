"""
Logging package for ``family_tree``.

Use ``get_logger(__name__)`` in modules to share the console and master log
handlers and to get a module-specific log file.
"""

from .logger import get_logger, list_active_loggers

__all__ = [
    "get_logger",
    "list_active_loggers",
]
