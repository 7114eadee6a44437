from __future__ import annotations

from typing import Dict, List, Type

from maze_racer.agents.base import SearchAgent
from maze_racer.agents.depth_first import DepthFirstAgent
from maze_racer.agents.dijkstra import DijkstraAgent

AGENTS: Dict[str, Type[SearchAgent]] = {
    DepthFirstAgent.name: DepthFirstAgent,
    DijkstraAgent.name: DijkstraAgent,
}


def make_agent(name: str) -> SearchAgent:
    """Instantiate a registered agent by name (``"depth_first"`` or ``"dijkstra"``)."""
    key = str(name).lower()
    if key not in AGENTS:
        raise ValueError(f"Unknown agent `{name}`; choose from {', '.join(sorted(AGENTS))}")
    return AGENTS[key]()


def make_agents(names: List[str]) -> List[SearchAgent]:
    return [make_agent(n) for n in names]
