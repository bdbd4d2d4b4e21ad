"""
Read tree description files line by line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Tuple, Union

from family_tree.logging import get_logger

log = get_logger(__name__)


def iter_lines(path: Union[str, Path]) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(lineno, line)`` for every line of a UTF-8 text file.

    Line numbers are 1-based; trailing newline characters and a leading BOM
    are removed. Blank and comment lines are yielded too so that line
    numbers in error messages match the file.

    Raises:
        FileNotFoundError: if ``path`` is not an existing file.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Family tree file not found: {file_path}")

    log.debug(f"Reading lines from {file_path}")
    with file_path.open("r", encoding="utf-8-sig") as f:
        for lineno, raw_line in enumerate(f, start=1):
            yield lineno, raw_line.rstrip("\r\n")
