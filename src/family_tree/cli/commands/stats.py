from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from family_tree.cli.utils import load_tree
from family_tree.family_tree import FamilyTree

console = Console()


def tree_stats(tree: FamilyTree) -> dict:
    """Summary numbers for a loaded tree."""
    nodes = list(tree)
    largest = max(nodes, key=lambda n: len(n.children), default=None)
    return {
        "people": len(nodes),
        "root": tree.root.name if tree.root is not None else None,
        "roots": sum(1 for n in nodes if n.is_root),
        "generations": max((n.depth for n in nodes), default=-1) + 1,
        "leaves": sum(1 for n in nodes if n.is_leaf),
        "largest_family": (largest.name, len(largest.children)) if largest else None,
    }


def stats_command(
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
    Show summary statistics for a family tree file.
    """
    tree = load_tree(
        tree_file,
        int_names=int_names,
        skip_bad_lines=skip_bad_lines,
        verbose=verbose,
    )
    stats = tree_stats(tree)

    table = Table(title="Family Tree Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("People", str(stats["people"]))
    table.add_row("Root", str(stats["root"]))
    table.add_row("Parentless nodes", str(stats["roots"]))
    table.add_row("Generations", str(stats["generations"]))
    table.add_row("Leaves", str(stats["leaves"]))
    if stats["largest_family"] is not None:
        name, size = stats["largest_family"]
        table.add_row("Largest family", f"{name} ({size})")

    console.print(table)
