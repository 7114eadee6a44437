from __future__ import annotations

import logging
from pathlib import Path

from maze_racer.engine.grid_parser import COMMA, FREE, SPACE

logger = logging.getLogger(__name__)


def make_empty_maze_file(rows: int, columns: int, comma_separated: bool = False, directory: str | Path = ".") -> Path:
    """Write a blank maze of ``rows`` x ``columns`` free cells.

    The file is named ``<rows>_<columns>_empty_maze.txt`` (or ``.csv``) and is
    meant to be edited by hand: place one ``@`` and one ``X`` and draw barriers.
    The CSV header is padded with commas the way spreadsheet tools save it.
    An existing file with the same name is overwritten.

    Args:
        rows: Number of rows to write.
        columns: Number of cells per row.
        comma_separated: Write a ``.csv`` with commas instead of a ``.txt`` with spaces.
        directory: Folder to write into.

    Returns:
        Path of the written file.
    """
    if rows < 0 or columns < 0:
        raise ValueError(f"Maze sizes must be non-negative, got {rows} x {columns}")
    delimiter = COMMA if comma_separated else SPACE
    suffix = ".csv" if comma_separated else ".txt"
    path = Path(directory) / f"{rows}_{columns}_empty_maze{suffix}"

    header = f"{rows}{delimiter}{columns}"
    if comma_separated:
        header += COMMA * max(0, columns - 2)
    row = delimiter.join(FREE for _ in range(columns))

    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(header + "\n")
        for _ in range(rows):
            f.write(row + "\n")
    logger.info("Empty maze file `%s` was successfully created", path)
    return path
