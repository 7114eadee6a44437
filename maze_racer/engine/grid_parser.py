"""Grid parser for delimited maze text.

Maze sources come in two flavours that differ only in the delimiter:

- ``.txt`` files separate cells with a single space.
- ``.csv`` files separate cells with a single comma (spreadsheet friendly).

The first line is a header ``R<delim>C`` giving the row and column counts.
Every following line is one row of exactly ``C`` one-character cells:
``.`` free, ``@`` start, ``X``/``x`` destination, anything else a barrier.
Parsing is fail-fast: the first broken rule raises :class:`MazeError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PurePath
from typing import List, Optional, Tuple

import numpy as np

from maze_racer.engine.errors import ErrorKind, MazeError

logger = logging.getLogger(__name__)

SPACE = " "
COMMA = ","
DELIMITERS = {".txt": SPACE, ".csv": COMMA}

# Cell symbols
FREE = "."
START = "@"
DESTINATIONS = ("X", "x")

DIGITS = "0123456789"


@dataclass(frozen=True, eq=False)
class ParsedGrid:
    """Validated grid contents, flattened row-major.

    Attributes:
        row_count: Number of rows declared by the header (and found in the body).
        column_count: Number of cells per row.
        cell_symbols: One symbol per cell, stored verbatim.
        free_mask: Read-only boolean array, True where a cell can be entered.
        start_index: Flattened index of the ``@`` cell.
        destination_index: Flattened index of the ``X``/``x`` cell.
    """
    row_count: int
    column_count: int
    cell_symbols: Tuple[str, ...]
    free_mask: np.ndarray
    start_index: int
    destination_index: int


def trim_source_name(filename: str) -> str:
    """Strip surrounding whitespace from a maze source name; reject empty names."""
    trimmed = str(filename).strip()
    if not trimmed:
        raise MazeError(ErrorKind.EMPTY_INPUT, source=repr(filename))
    return trimmed


def delimiter_for(filename: str) -> str:
    """Pick the cell delimiter from a maze file name's extension.

    Raises:
        MazeError: ``EMPTY_INPUT`` for a blank name, ``INVALID_EXTENSION``
            for anything other than ``.txt`` or ``.csv``.
    """
    name = trim_source_name(filename)
    suffix = PurePath(name).suffix.lower()
    if suffix not in DELIMITERS:
        raise MazeError(
            ErrorKind.INVALID_EXTENSION,
            source=name,
            expected="`.txt` or `.csv`",
            actual=f"`{suffix}`" if suffix else "no extension",
        )
    return DELIMITERS[suffix]


def _parse_header(line: str, delimiter: str, source: str) -> Tuple[int, int]:
    """Read ``R<delim>C`` from the first line.

    The two sizes are separated by exactly one delimiter. Trailing delimiters
    after the column count are tolerated, since spreadsheet exports pad the
    header row out to the maze width.
    """
    sizes: List[str] = []
    current = ""
    for column, ch in enumerate(line):
        if ch in DIGITS:
            if not current and len(sizes) == 2:
                raise MazeError(
                    ErrorKind.INVALID_DIGIT, source=source, row=0, column=column,
                    expected="2 sizes", actual="a third number",
                )
            current += ch
        elif ch == delimiter:
            if current:
                sizes.append(current)
                current = ""
            elif len(sizes) < 2:
                raise MazeError(
                    ErrorKind.INVALID_DIGIT, source=source, row=0, column=column,
                    expected="a digit", actual=f"{delimiter!r} with no size before it",
                )
        else:
            raise MazeError(
                ErrorKind.INVALID_DIGIT, source=source, row=0, column=column,
                expected=f"a digit or {delimiter!r}", actual=repr(ch),
            )
    if current:
        sizes.append(current)
    if len(sizes) != 2:
        raise MazeError(
            ErrorKind.INVALID_DIGIT, source=source, row=0, column=len(line),
            expected="2 sizes", actual=f"{len(sizes)} size(s)",
        )
    return int(sizes[0]), int(sizes[1])


def parse_grid(text: str, delimiter: str, source: str = "<string>") -> ParsedGrid:
    """Parse and validate a whole maze description.

    Args:
        text: Complete maze source, header line included.
        delimiter: ``SPACE`` or ``COMMA``; chosen by the caller, never guessed.
        source: Name used in error messages and logs.

    Returns:
        A :class:`ParsedGrid` satisfying every grid invariant.

    Raises:
        MazeError: On the first malformed header, cell, row or marker.
        ValueError: If ``delimiter`` is not one of the supported delimiters.
    """
    if delimiter not in (SPACE, COMMA):
        raise ValueError(f"Unsupported delimiter {delimiter!r}; expected ' ' or ','")
    if not text.strip():
        raise MazeError(ErrorKind.EMPTY_INPUT, source=source)

    lines = text.split("\n")
    if lines[-1] == "":
        # newline-terminated last row
        lines.pop()

    row_count, column_count = _parse_header(lines[0].rstrip("\r"), delimiter, source)
    logger.debug("Maze `%s` header: %d rows x %d columns", source, row_count, column_count)

    # cells are appended row by row, so a bogus header never allocates a huge grid
    symbols: List[str] = []
    free: List[bool] = []
    start: Optional[int] = None
    destination: Optional[int] = None

    body = lines[1:]
    for row, line in enumerate(body, start=1):
        if row > row_count:
            raise MazeError(
                ErrorKind.INCORRECT_MAZE_SIZE, source=source, row=row, column=0,
                expected=f"{row_count} rows", actual=f"{len(body)} rows",
            )
        if line.endswith("\r"):
            line = line[:-1]

        cells = 0
        separated = True  # a row starts as if a delimiter was just read
        for column, ch in enumerate(line):
            if ch == delimiter:
                if separated:
                    raise MazeError(ErrorKind.EMPTY_CELL, source=source, row=row, column=column)
                separated = True
                continue
            if not separated:
                raise MazeError(
                    ErrorKind.DOUBLE_CHARACTER, source=source, row=row, column=column,
                    detail=f"Character {ch!r} follows another character with no delimiter.",
                )
            separated = False
            if cells == column_count:
                raise MazeError(
                    ErrorKind.INCORRECT_MAZE_SIZE, source=source, row=row, column=column,
                    expected=f"{column_count} columns", actual=f"at least {cells + 1} columns",
                )

            index = (row - 1) * column_count + cells
            if ch == START:
                if start is not None:
                    raise MazeError(
                        ErrorKind.DOUBLE_CHARACTER, source=source, row=row, column=column,
                        detail="Duplicate start position `@`.",
                    )
                start = index
            elif ch in DESTINATIONS:
                if destination is not None:
                    raise MazeError(
                        ErrorKind.DOUBLE_CHARACTER, source=source, row=row, column=column,
                        detail=f"Duplicate destination position `{ch}`.",
                    )
                destination = index
            symbols.append(ch)
            free.append(ch == FREE or ch == START or ch in DESTINATIONS)
            cells += 1

        if line and separated:
            # dangling delimiter before the line terminator
            raise MazeError(ErrorKind.EMPTY_CELL, source=source, row=row, column=len(line))
        if cells != column_count:
            raise MazeError(
                ErrorKind.INCORRECT_MAZE_SIZE, source=source, row=row, column=len(line),
                expected=f"{column_count} columns", actual=f"{cells} columns",
            )

    if len(body) < row_count:
        raise MazeError(
            ErrorKind.INCORRECT_MAZE_SIZE, source=source, row=len(body) + 1,
            expected=f"{row_count} rows", actual=f"{len(body)} rows",
        )
    if start is None:
        raise MazeError(ErrorKind.INVALID_MAZE, source=source, detail="No start position `@`.")
    if destination is None:
        raise MazeError(ErrorKind.INVALID_MAZE, source=source, detail="No destination position `X`.")

    free_mask = np.array(free, dtype=bool)
    free_mask.flags.writeable = False
    return ParsedGrid(
        row_count=row_count,
        column_count=column_count,
        cell_symbols=tuple(symbols),
        free_mask=free_mask,
        start_index=start,
        destination_index=destination,
    )
