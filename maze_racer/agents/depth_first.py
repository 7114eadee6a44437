from __future__ import annotations

import logging
from typing import Dict, List

import numpy as np

from maze_racer.agents.base import SearchAgent, SearchResult, backtrack
from maze_racer.engine.maze import Maze

logger = logging.getLogger(__name__)


class DepthFirstAgent(SearchAgent):
    """Unweighted depth-first search with an explicit stack.

    Neighbors are pushed in the fixed order up, down, left, right, so the
    last pushed (right) is expanded first. The first cell to push a
    neighbor becomes its predecessor. The path found is deterministic but not
    necessarily the shortest.
    """

    name = "depth_first"

    def pathfind(self, maze: Maze) -> SearchResult:
        goal = maze.destination_index
        stack: List[int] = [maze.start_index]
        visited = np.zeros(maze.size, dtype=bool)
        predecessors: Dict[int, int] = {}
        nodes_explored = 0
        found = False

        while stack:
            current = stack.pop()
            if visited[current]:
                # pushed more than once; already expanded
                continue
            nodes_explored += 1
            if current == goal:
                found = True
                break
            visited[current] = True
            for neighbor in maze.adjacency[current]:
                if neighbor is None or visited[neighbor]:
                    continue
                stack.append(neighbor)
                predecessors.setdefault(neighbor, current)

        if not found:
            logger.debug("%s: destination unreachable in `%s` after %d nodes", self.name, maze.name, nodes_explored)
            return self._unreachable(maze, nodes_explored)

        path = backtrack(predecessors, goal)
        logger.debug("%s: path of %d moves in `%s`, %d nodes explored", self.name, len(path) - 1, maze.name, nodes_explored)
        return SearchResult(agent=self.name, path=path, completed=True, nodes_explored=nodes_explored)
