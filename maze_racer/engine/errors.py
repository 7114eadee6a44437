"""Maze error type.

A single exception carries every parse-time and bounds failure. Callers
branch on ``err.kind`` rather than on a class hierarchy.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    EMPTY_INPUT = "Maze file names and contents cannot be empty."
    INVALID_EXTENSION = "Maze file name extensions must be `.txt` or `.csv`."
    INVALID_DIGIT = "Maze sizes must be two numbers made of the digits 0-9."
    EMPTY_CELL = "Every column of the maze must be filled."
    DOUBLE_CHARACTER = (
        "All positions must be one character wide and separated by the delimiter. "
        "There can only be one `@` and one `X` in a maze."
    )
    INCORRECT_MAZE_SIZE = "Maze must be the rectangular size specified in the first row."
    INVALID_MAZE = "There must be one start position `@` and one destination position `X` in a maze."
    OUT_OF_BOUNDS = "Attempting to access an element out of the bounds of the maze."

    @property
    def description(self) -> str:
        return self.value


class MazeError(ValueError):
    """Structured failure raised while loading or querying a maze.

    Attributes:
        kind: Which rule was broken.
        source: Name of the maze source (file name or ``"<string>"``).
        row: Line in the source (header is line 0) or queried grid row.
        column: Character offset in the line or queried grid column.
        expected: What the parser expected at this position, if meaningful.
        actual: What it found instead.
    """

    def __init__(
        self,
        kind: ErrorKind,
        source: str = "<string>",
        row: Optional[int] = None,
        column: Optional[int] = None,
        expected: Any = None,
        actual: Any = None,
        detail: str = "",
    ):
        self.kind = kind
        self.source = source
        self.row = row
        self.column = column
        self.expected = expected
        self.actual = actual
        self.detail = detail
        super().__init__(self._render())

    def _render(self) -> str:
        parts = [f"{self.kind.name} in `{self.source}`"]
        if self.row is not None and self.column is not None:
            parts.append(f"at row {self.row}, column {self.column}")
        elif self.row is not None:
            parts.append(f"at row {self.row}")
        msg = " ".join(parts) + ": "
        if self.detail:
            msg += self.detail + " "
        msg += self.kind.description
        if self.expected is not None or self.actual is not None:
            msg += f" (expected {self.expected}, got {self.actual})"
        return msg
