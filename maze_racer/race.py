"""Timed races of search agents against one maze.

Each agent runs ``trials`` times against the same immutable maze. Every run
must reproduce the first one exactly; the timings are then summarised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from maze_racer.agents.base import SearchAgent, SearchResult
from maze_racer.engine.maze import Maze
from maze_racer.utils.timekeeper import (
    Timekeeper,
    run_average,
    run_percentage_difference,
    run_standard_deviation,
)

logger = logging.getLogger(__name__)


@dataclass
class TrialStats:
    """Timings and outcome of one agent's trials.

    Attributes:
        agent: Agent name.
        result: The result every trial produced.
        times: Seconds taken by each trial.
    """
    agent: str
    result: SearchResult
    times: List[float] = field(default_factory=list)

    @property
    def trials(self) -> int:
        return len(self.times)

    @property
    def average(self) -> float:
        return run_average(self.times)

    @property
    def standard_deviation(self) -> float:
        return run_standard_deviation(self.times)

    @property
    def total_nodes_explored(self) -> int:
        return self.result.nodes_explored * self.trials


def run_trials(agent: SearchAgent, maze: Maze, trials: int) -> TrialStats:
    """Run ``agent`` against ``maze`` ``trials`` times, timing each call.

    Raises:
        ValueError: If ``trials`` is less than 1.
        RuntimeError: If a trial returns a different result than the first.
    """
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")
    keeper = Timekeeper()
    times: List[float] = []
    first: SearchResult | None = None
    for trial in range(trials):
        keeper.start()
        result = agent.pathfind(maze)
        keeper.end()
        times.append(keeper.race_time())
        if first is None:
            first = result
        elif result != first:
            raise RuntimeError(
                f"{agent.name} is not deterministic on `{maze.name}`: trial {trial} returned "
                f"{result.length} moves / {result.nodes_explored} nodes, trial 0 returned "
                f"{first.length} moves / {first.nodes_explored} nodes"
            )
    stats = TrialStats(agent=agent.name, result=first, times=times)
    logger.info(
        "%s on `%s`: completed=%s moves=%d nodes=%d avg=%.3es over %d trials",
        agent.name, maze.name, first.completed, first.length, first.nodes_explored, stats.average, trials,
    )
    return stats


def race(maze: Maze, agents: Sequence[SearchAgent], trials: int) -> List[TrialStats]:
    return [run_trials(agent, maze, trials) for agent in agents]


def format_report(maze: Maze, stats: Sequence[TrialStats], show_paths: bool = True) -> str:
    """Human-readable summary of a race."""
    lines: List[str] = []
    for s in stats:
        lines.append(f"== {s.agent} ==")
        if s.result.completed:
            lines.append(f"path: {s.result.length} moves, nodes explored: {s.result.nodes_explored}")
            if show_paths:
                lines.append(maze.overlay(s.result.path).rstrip("\n"))
        else:
            lines.append(f"no path found, nodes explored: {s.result.nodes_explored}")
        lines.append(
            f"average: {s.average:.3e} s  std dev: {s.standard_deviation:.3e} s  "
            f"over {s.trials} trials ({s.total_nodes_explored} nodes in total)"
        )
        lines.append("")

    if len(stats) >= 2:
        fastest = min(stats, key=lambda s: s.average)
        slowest = max(stats, key=lambda s: s.average)
        pct = run_percentage_difference(slowest.average, fastest.average)
        lines.append(f"{fastest.agent} was {pct:.1f}% faster than {slowest.agent}")
    return "\n".join(lines).rstrip("\n") + "\n"
