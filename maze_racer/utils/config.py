from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from maze_racer.agents.registry import AGENTS

DEFAULT_AGENTS = ["depth_first", "dijkstra"]
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


@dataclass
class RaceCfg:
    """Race configuration.

    Attributes:
        trials: Timed runs per agent against the same maze.
        agents: Registered agent names, raced in this order.
        show_maze: Print the parsed maze before racing.
        show_paths: Print each agent's path overlay in the report.
        log_level: Logging level name for the CLI.
        cell_size: Viewer cell size in pixels.
    """
    trials: int = 100
    agents: List[str] = field(default_factory=lambda: list(DEFAULT_AGENTS))
    show_maze: bool = True
    show_paths: bool = True
    log_level: str = "INFO"
    cell_size: int = 32

    def __post_init__(self) -> None:
        if self.trials < 1:
            raise ValueError(f"trials must be at least 1, got {self.trials}")
        if not self.agents:
            raise ValueError("at least one agent is required")
        unknown = [a for a in self.agents if a not in AGENTS]
        if unknown:
            raise ValueError(f"Unknown agent(s) {unknown}; choose from {sorted(AGENTS)}")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")
        if self.cell_size < 1:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")

    @staticmethod
    def from_json(path: Path) -> "RaceCfg":
        """Load a ``RaceCfg`` from a JSON file.

        Supported keys: ``trials``, ``agents``, ``show_maze``, ``show_paths``,
        ``log_level`` and ``cell_size``. Missing keys keep their defaults.
        """
        data = load_json(Path(path))
        if not isinstance(data, dict):
            raise ValueError(f"Config {path} must hold a JSON object, got {type(data).__name__}")
        return RaceCfg(
            trials=int(data.get("trials", 100)),
            agents=[str(a).lower() for a in data.get("agents", DEFAULT_AGENTS)],
            show_maze=bool(data.get("show_maze", True)),
            show_paths=bool(data.get("show_paths", True)),
            log_level=str(data.get("log_level", "INFO")).upper(),
            cell_size=int(data.get("cell_size", 32)),
        )
