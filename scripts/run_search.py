from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from keymaze_core.config import load_config
from keymaze_core.parser import parse_maze_lines
from keymaze_core.render import render_ascii
from keymaze_core.variants import split_entrance
from search.runner import run_search

"""
Shortest walk that collects every key of a maze.

Usage:
  python -m scripts.run_search [maze.txt]      # reads stdin without a path
  python -m scripts.run_search maze.txt --split --strategy astar --h farthest
"""


def read_lines(path: Optional[str]) -> List[str]:
    if path is None:
        return sys.stdin.read().splitlines()
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Minimum steps to collect all keys of a maze")
    p.add_argument("maze", nargs="?", default=None, help="maze file (default: stdin)")
    p.add_argument("--config", type=str, default=None, help="YAML config, e.g. configs/solver.yaml")
    p.add_argument("--strategy", choices=["memo", "astar"], default=None)
    p.add_argument("--h", type=str, default=None, choices=["zero", "farthest"], help="heuristic (astar)")
    p.add_argument("--split", action="store_true", help="split the single entrance into four starts")
    p.add_argument("--on-dead-end", dest="on_dead_end", choices=["error", "zero"], default=None)
    p.add_argument("-v", "--verbose", action="count", default=0)
    args = p.parse_args(argv)

    cfg = load_config(args.config)
    level = cfg.log_level
    if args.verbose == 1:
        level = "INFO"
    elif args.verbose > 1:
        level = "DEBUG"
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    try:
        lines = read_lines(args.maze)
    except OSError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        if args.split or cfg.split_entrance:
            lines = split_entrance(lines)
        grid = parse_maze_lines(lines)
    except ValueError as e:
        print(f"bad maze: {e}", file=sys.stderr)
        return 1
    logging.getLogger(__name__).debug("maze:\n%s", render_ascii(grid))

    res = run_search(
        grid,
        strategy=args.strategy or cfg.strategy,
        heuristic=args.h or cfg.heuristic,
        on_dead_end=args.on_dead_end or cfg.on_dead_end,
        time_limit=cfg.time_limit,
        node_limit=cfg.node_limit,
    )
    if not res["success"]:
        if res.get("limited"):
            print("search limit reached before all keys were collected", file=sys.stderr)
        else:
            print("keys cannot all be collected", file=sys.stderr)
        return 1
    print(res["solution_len"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
