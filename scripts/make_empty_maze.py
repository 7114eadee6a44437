from __future__ import annotations

import argparse
import logging

from maze_racer.engine.templates import make_empty_maze_file

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Write a blank maze template to fill in by hand")
    parser.add_argument("rows", type=int, help="Number of rows")
    parser.add_argument("columns", type=int, help="Number of columns")
    parser.add_argument("--csv", action="store_true", help="Write a comma separated .csv instead of a .txt")
    parser.add_argument("--dir", default=".", help="Output folder")
    args = parser.parse_args()

    logging.basicConfig(level="INFO", format="%(levelname)s %(name)s: %(message)s")
    path = make_empty_maze_file(args.rows, args.columns, comma_separated=args.csv, directory=args.dir)
    print(path)
