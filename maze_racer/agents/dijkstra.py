from __future__ import annotations

import heapq
import logging
from typing import Dict, List, Tuple

import numpy as np

from maze_racer.agents.base import SearchAgent, SearchResult, backtrack
from maze_racer.engine.maze import Maze

logger = logging.getLogger(__name__)


class DijkstraAgent(SearchAgent):
    """Single-source shortest path with unit edge weights.

    Every cell starts in the frontier at infinite distance except the start.
    The frontier member with the smallest distance is finalized next; ties go
    to the lowest flattened index, which is the order a left-to-right scan of
    the frontier would pick. A heap of ``(distance, index)`` entries with lazy
    deletion reproduces that order exactly.
    """

    name = "dijkstra"

    def pathfind(self, maze: Maze) -> SearchResult:
        start, goal = maze.start_index, maze.destination_index
        distance = np.full(maze.size, np.inf)
        distance[start] = 0.0
        finalized = np.zeros(maze.size, dtype=bool)
        predecessors: Dict[int, int] = {}

        frontier: List[Tuple[float, int]] = [(0.0 if i == start else np.inf, i) for i in range(maze.size)]
        heapq.heapify(frontier)

        nodes_explored = 0
        reached = False
        while frontier:
            dist, current = heapq.heappop(frontier)
            if finalized[current] or dist > distance[current]:
                # stale entry superseded by a shorter distance
                continue
            finalized[current] = True
            nodes_explored += 1
            if current == goal:
                # drawn at infinite distance means nothing ever reached it
                reached = bool(np.isfinite(dist))
                break
            candidate = dist + 1.0
            for neighbor in maze.adjacency[current]:
                if neighbor is None or finalized[neighbor]:
                    continue
                if candidate < distance[neighbor]:
                    distance[neighbor] = candidate
                    predecessors[neighbor] = current
                    heapq.heappush(frontier, (candidate, neighbor))

        if not reached:
            logger.debug("%s: destination unreachable in `%s` after %d nodes", self.name, maze.name, nodes_explored)
            return self._unreachable(maze, nodes_explored)

        path = backtrack(predecessors, goal)
        logger.debug("%s: path of %d moves in `%s`, %d nodes explored", self.name, len(path) - 1, maze.name, nodes_explored)
        return SearchResult(agent=self.name, path=path, completed=True, nodes_explored=nodes_explored)
