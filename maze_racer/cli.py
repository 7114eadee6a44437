from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path
from typing import List

from maze_racer.agents.registry import AGENTS, make_agents
from maze_racer.engine.errors import MazeError
from maze_racer.engine.maze import Maze
from maze_racer.race import format_report, race
from maze_racer.utils.config import RaceCfg

logger = logging.getLogger("maze_racer")

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG = ROOT / "config" / "race.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maze-racer",
        description="Race depth-first and Dijkstra path finding on a maze file (.txt or .csv).",
    )
    parser.add_argument("maze", type=str, help="Path to a maze file")
    parser.add_argument("--config", type=str, default=None, help="Race config JSON (default: config/race.json)")
    parser.add_argument("--trials", type=int, default=None, help="Timed runs per agent")
    parser.add_argument("--agents", nargs="+", choices=sorted(AGENTS), default=None, help="Agents to race")
    parser.add_argument("--show", action="store_true", help="Open the maze viewer after the race")
    parser.add_argument("--log-level", type=str.upper, default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser


def load_cfg(args: argparse.Namespace) -> RaceCfg:
    if args.config:
        cfg = RaceCfg.from_json(Path(args.config))
    elif DEFAULT_CONFIG.exists():
        cfg = RaceCfg.from_json(DEFAULT_CONFIG)
    else:
        cfg = RaceCfg()
    overrides = {}
    if args.trials is not None:
        overrides["trials"] = args.trials
    if args.agents:
        overrides["agents"] = list(args.agents)
    if args.log_level:
        overrides["log_level"] = args.log_level
    return dataclasses.replace(cfg, **overrides) if overrides else cfg


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level or "INFO", format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = load_cfg(args)
    except (FileNotFoundError, ValueError) as err:
        logger.error("Invalid race configuration: %s", err)
        return 1
    logging.getLogger().setLevel(cfg.log_level)

    try:
        maze = Maze.from_file(args.maze)
    except (MazeError, FileNotFoundError) as err:
        logger.error("%s", err)
        return 1

    if cfg.show_maze:
        print(maze)
    stats = race(maze, make_agents(cfg.agents), cfg.trials)
    print(format_report(maze, stats, show_paths=cfg.show_paths))

    if args.show:
        from maze_racer.engine.maze_window import show_results

        show_results(maze, [s.result for s in stats], cell_size=cfg.cell_size)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
