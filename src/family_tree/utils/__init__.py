# src/family_tree/utils/__init__.py

from .pathing import (
    data_dir,
    default_tree_file,
    mock_file_path,
    project_root,
    resolve_project_path,
)

__all__ = [
    "data_dir",
    "default_tree_file",
    "mock_file_path",
    "project_root",
    "resolve_project_path",
]
