from __future__ import annotations

from typing import Iterator, NamedTuple, Optional, Sequence, Tuple

# Direction slots, in the fixed order searches expand them: 0:UP, 1:DOWN, 2:LEFT, 3:RIGHT
UP, DOWN, LEFT, RIGHT = 0, 1, 2, 3
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}


class Neighbors(NamedTuple):
    """Per-cell edge record. ``None`` marks a direction with no traversable edge."""
    up: Optional[int] = None
    down: Optional[int] = None
    left: Optional[int] = None
    right: Optional[int] = None

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield ``(direction, index)`` for each present edge, in slot order."""
        for direction, index in enumerate(self):
            if index is not None:
                yield direction, index


def free_at(free_mask: Sequence[bool], row_count: int, column_count: int, row: int, column: int) -> bool:
    """Whether ``(row, column)`` is inside the grid and free. Out of bounds reads as not free."""
    if row < 0 or row >= row_count or column < 0 or column >= column_count:
        return False
    return bool(free_mask[row * column_count + column])


def build_adjacency(free_mask: Sequence[bool], row_count: int, column_count: int) -> Tuple[Neighbors, ...]:
    """Derive the 4-directional adjacency table of a grid.

    An edge joins two grid-adjacent cells only when both are free, so barrier
    cells get an empty record and the table is symmetric.

    Args:
        free_mask: Row-major passability flags, length ``row_count * column_count``.
        row_count: Number of grid rows.
        column_count: Number of grid columns.

    Returns:
        One :class:`Neighbors` record per flattened cell index.
    """
    table = []
    for i in range(row_count * column_count):
        if not free_mask[i]:
            table.append(Neighbors())
            continue
        row, column = divmod(i, column_count)
        table.append(
            Neighbors(
                up=i - column_count if free_at(free_mask, row_count, column_count, row - 1, column) else None,
                down=i + column_count if free_at(free_mask, row_count, column_count, row + 1, column) else None,
                left=i - 1 if free_at(free_mask, row_count, column_count, row, column - 1) else None,
                right=i + 1 if free_at(free_mask, row_count, column_count, row, column + 1) else None,
            )
        )
    return tuple(table)
