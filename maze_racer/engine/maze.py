"""Maze aggregate.

A :class:`Maze` is built once from a ``.txt``/``.csv`` file or an in-memory
buffer and never changes afterwards, so any number of searches can share it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple

import numpy as np

from maze_racer.engine.adjacency import Neighbors, build_adjacency
from maze_racer.engine.errors import ErrorKind, MazeError
from maze_racer.engine.grid_parser import (
    COMMA,
    ParsedGrid,
    delimiter_for,
    parse_grid,
    trim_source_name,
)

logger = logging.getLogger(__name__)

PATH_MARKER = "*"


@dataclass(frozen=True, eq=False)
class Maze:
    """Immutable parsed grid plus its derived navigation graph.

    Attributes:
        name: Source name (file name or ``"<string>"``).
        row_count: Number of rows.
        column_count: Number of columns.
        cell_symbols: Row-major symbols, stored verbatim.
        free_mask: Read-only row-major boolean array; True for free, start and destination cells.
        start_index: Flattened index of the start cell.
        destination_index: Flattened index of the destination cell.
        adjacency: One :class:`Neighbors` record per flattened index.
    """
    name: str
    row_count: int
    column_count: int
    cell_symbols: Tuple[str, ...]
    free_mask: np.ndarray
    start_index: int
    destination_index: int
    adjacency: Tuple[Neighbors, ...]

    @staticmethod
    def from_grid(grid: ParsedGrid, name: str = "<string>") -> "Maze":
        """Build a maze from an already validated grid."""
        return Maze(
            name=name,
            row_count=grid.row_count,
            column_count=grid.column_count,
            cell_symbols=grid.cell_symbols,
            free_mask=grid.free_mask,
            start_index=grid.start_index,
            destination_index=grid.destination_index,
            adjacency=build_adjacency(grid.free_mask, grid.row_count, grid.column_count),
        )

    @staticmethod
    def from_text(text: str, delimiter: str = COMMA, name: str = "<string>") -> "Maze":
        """Parse a maze held in memory. ``delimiter`` is ``" "`` or ``","``."""
        return Maze.from_grid(parse_grid(text, delimiter, source=name), name=name)

    @staticmethod
    def from_file(filename: str | Path) -> "Maze":
        """Load a maze file; the extension (``.txt`` or ``.csv``) selects the delimiter.

        Raises:
            MazeError: For a blank name, unsupported extension, or malformed contents.
            FileNotFoundError: If the path is not an existing regular file.
        """
        name = trim_source_name(str(filename))
        delimiter = delimiter_for(name)
        path = Path(name)
        if not path.is_file():
            raise FileNotFoundError(f"Maze file not found: {path}")
        with path.open("rb") as f:
            raw = f.read()
        try:
            # utf-8-sig drops the byte order mark some spreadsheet tools write
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError as err:
            # single-byte exports (cp1252 and friends); every byte becomes one cell symbol
            logger.warning("Maze `%s` is not valid UTF-8 (%s); reading it as latin-1", name, err.reason)
            text = raw.decode("latin-1")
        maze = Maze.from_text(text, delimiter, name=name)
        logger.info("Maze `%s` has been successfully read (%d x %d)", name, maze.row_count, maze.column_count)
        return maze

    # --- Index helpers ---
    @property
    def size(self) -> int:
        return self.row_count * self.column_count

    def index(self, row: int, column: int) -> int:
        return row * self.column_count + column

    def coordinates(self, index: int) -> Tuple[int, int]:
        """``(row, column)`` of a flattened index."""
        return divmod(index, self.column_count)

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.row_count and 0 <= column < self.column_count

    def is_free(self, row: int, column: int, out_of_bounds_warning: bool = True) -> bool:
        """Whether the cell at ``(row, column)`` can be entered.

        Start and destination count as free. With ``out_of_bounds_warning``
        disabled an out-of-bounds probe simply returns False.

        Raises:
            MazeError: ``OUT_OF_BOUNDS`` when the position lies outside the
                grid and warnings are enabled.
        """
        if not self.in_bounds(row, column):
            if out_of_bounds_warning:
                logger.warning(
                    "Out of bounds access on `%s` at row %d, column %d; rows 0..%d, columns 0..%d",
                    self.name, row, column, self.row_count - 1, self.column_count - 1,
                )
                raise MazeError(
                    ErrorKind.OUT_OF_BOUNDS, source=self.name, row=row, column=column,
                    expected=f"rows 0..{self.row_count - 1} and columns 0..{self.column_count - 1}",
                    actual=f"({row}, {column})",
                )
            return False
        return bool(self.free_mask[self.index(row, column)])

    def neighbors(self, index: int) -> Neighbors:
        return self.adjacency[index]

    # --- Rendering ---
    def _render(self, symbols: Iterable[str]) -> str:
        cells = list(symbols)
        lines = []
        for row in range(self.row_count):
            start = row * self.column_count
            lines.append("".join(ch + " " for ch in cells[start:start + self.column_count]) + "\n")
        return "".join(lines)

    def stringify(self) -> str:
        """Fixed-width rendering: each symbol followed by a space, one line per row.

        This is for display only and is not a valid maze file.
        """
        return self._render(self.cell_symbols)

    def overlay(self, path: Iterable[int], marker: str = PATH_MARKER) -> str:
        """Render the maze with the cells of ``path`` drawn as ``marker``.

        Start and destination keep their own symbols.
        """
        symbols = list(self.cell_symbols)
        for index in path:
            if index not in (self.start_index, self.destination_index):
                symbols[index] = marker
        return self._render(symbols)

    def __str__(self) -> str:
        return self.stringify()
