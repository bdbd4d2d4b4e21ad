from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from family_tree.cli.utils import err_console, load_tree, parse_name
from family_tree.core.exceptions import NodeNotFoundError

console = Console()


def mrca_command(
    name1: str = typer.Argument(..., help="First person"),
    name2: str = typer.Argument(..., help="Second person"),
    tree_file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
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
    Print the most recent common ancestor of two people.
    """
    tree = load_tree(
        tree_file,
        int_names=int_names,
        skip_bad_lines=skip_bad_lines,
        verbose=verbose,
    )
    first = parse_name(name1, int_names)
    second = parse_name(name2, int_names)

    try:
        ancestor = tree.most_recent_common_ancestor(first, second)
    except NodeNotFoundError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    if ancestor is None:
        err_console.print(f"{name1} and {name2} have no common ancestor")
        raise typer.Exit(code=1)

    console.print(
        f"Most recent common ancestor of {name1} and {name2} is {ancestor.name}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
