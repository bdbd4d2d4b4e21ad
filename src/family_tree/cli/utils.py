from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console

from family_tree.core.exceptions import FamilyTreeError
from family_tree.family_tree import FamilyTree, load_family_tree
from family_tree.logging import get_logger
from family_tree.utils import default_tree_file

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)
log = get_logger(__name__)


def name_converter(int_names: bool) -> Callable[[str], object]:
    return int if int_names else str


def resolve_tree_file(path: Optional[Path]) -> Path:
    """Use ``path`` if given, else ``<data_dir>/family.txt``."""
    resolved = path if path is not None else default_tree_file()
    if not resolved.is_file():
        err_console.print(f"[red]Family tree file not found:[/red] {resolved}")
        raise typer.Exit(code=1)
    return resolved


def load_tree(
    path: Optional[Path],
    *,
    int_names: bool = False,
    skip_bad_lines: bool = False,
    verbose: bool = False,
) -> FamilyTree:
    """
    Load a tree file for a CLI command.

    Tree errors are reported on stderr and turned into exit code 1.
    """
    tree_file = resolve_tree_file(path)
    t0 = time.perf_counter()

    try:
        tree = load_family_tree(
            tree_file,
            name_converter(int_names),
            skip_errors=skip_bad_lines,
        )
    except FamilyTreeError as exc:
        log.error(f"Could not build tree from {tree_file}: {exc}")
        err_console.print(f"[red]Input file trouble:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if verbose:
        console.log(f"Loaded {len(tree)} nodes in {time.perf_counter() - t0:.3f}s")

    return tree


def parse_name(text: str, int_names: bool):
    """Convert a name given on the command line the same way the file was."""
    try:
        return name_converter(int_names)(text)
    except ValueError as exc:
        err_console.print(f"[red]Invalid name:[/red] {text!r}")
        raise typer.Exit(code=2) from exc
