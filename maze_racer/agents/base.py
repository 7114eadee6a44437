from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from maze_racer.engine.maze import Maze  # pragma: no cover


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search invocation.

    Attributes:
        agent: Name of the agent that produced the result.
        path: Flattened indices from start to destination, inclusive. Just
            ``(start_index,)`` when no route was found.
        completed: True if the destination was reached.
        nodes_explored: Cells taken off the frontier during this invocation.
    """
    agent: str
    path: Tuple[int, ...]
    completed: bool
    nodes_explored: int

    @property
    def length(self) -> int:
        """Number of moves along ``path``."""
        return len(self.path) - 1


def backtrack(predecessors: Dict[int, int], destination: int) -> Tuple[int, ...]:
    """Walk the predecessor map back from ``destination`` and return the start-to-destination path.

    The walk stops at the first node without a predecessor, which is the start.
    """
    path = [destination]
    node = destination
    while node in predecessors:
        node = predecessors[node]
        path.append(node)
    path.reverse()
    return tuple(path)


class SearchAgent:
    """Base class for path finders.

    An agent only holds configuration. Every piece of search state (frontier,
    visited flags, predecessors, counters) lives inside one ``pathfind`` call,
    so reusing an agent across trials never carries anything over.
    """

    name = "agent"

    def pathfind(self, maze: "Maze") -> SearchResult:
        raise NotImplementedError

    def _unreachable(self, maze: "Maze", nodes_explored: int) -> SearchResult:
        return SearchResult(agent=self.name, path=(maze.start_index,), completed=False, nodes_explored=nodes_explored)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
