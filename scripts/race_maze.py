from __future__ import annotations

import sys
from pathlib import Path

from maze_racer.cli import main

if __name__ == "__main__":
    root = Path(__file__).resolve().parents[1]
    maze = root / "mazes" / "10_10_test_maze.csv"
    argv = sys.argv[1:] or [str(maze), "--config", str(root / "config" / "race.json")]
    raise SystemExit(main(argv))
