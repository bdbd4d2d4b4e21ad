from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from family_tree.cli.utils import load_tree

console = Console()


def show_command(
    tree_file: Optional[Path] = typer.Argument(
        None,
        help="Tree file (defaults to <data_dir>/family.txt)",
    ),
    int_names: bool = typer.Option(
        False,
        "--int-names",
        help="Treat node names as integers",
    ),
    skip_bad_lines: bool = typer.Option(
        False,
        "--skip-bad-lines",
        help="Skip lines that fail instead of aborting",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Print the family tree as an indented outline.
    """
    tree = load_tree(
        tree_file,
        int_names=int_names,
        skip_bad_lines=skip_bad_lines,
        verbose=verbose,
    )
    console.print(str(tree), end="", markup=False, highlight=False, soft_wrap=True)
