# src/family_tree/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union

from family_tree.config import get_config

# parents: [0] utils, [1] family_tree, [2] src, [3] project root
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

DEFAULT_TREE_FILE = "family.txt"


def project_root() -> Path:
    """Directory holding ``src/``, ``tests/``, ``config/`` and ``mock_files/``."""
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """Resolve a path relative to the project root; absolute paths pass through."""
    return project_root() / Path(relative)


def mock_file_path(filename: Union[str, Path]) -> Path:
    """Path to a sample tree file under ``mock_files/``."""
    return resolve_project_path(Path("mock_files") / filename)


def data_dir() -> Path:
    """
    Default directory for tree files (``paths.data_dir``).

    Falls back to the current directory when the configured one is missing.
    """
    configured = resolve_project_path(get_config().paths.get("data_dir", "data"))
    return configured if configured.is_dir() else Path(".").resolve()


def default_tree_file() -> Path:
    return data_dir() / DEFAULT_TREE_FILE
