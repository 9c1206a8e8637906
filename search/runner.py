from __future__ import annotations
from typing import Optional
import logging
import time

from keymaze_core.grid import Grid
from heuristics.selector import get_heuristic
from .astar import Result, astar
from .memo import MemoTable
from .shortest import UnreachableGoal, solve

logger = logging.getLogger(__name__)


def run_search(
    grid: Grid,
    strategy: str = "memo",
    heuristic: str = "farthest",
    on_dead_end: str = "error",
    time_limit: Optional[float] = None,
    node_limit: Optional[int] = None,
) -> Result:
    """Solves `grid` with the chosen strategy; both report the same Result keys.

    `heuristic`, `time_limit` and `node_limit` only apply to astar;
    `on_dead_end` only applies to memo.
    """
    if strategy == "memo":
        t0 = time.time()
        table = MemoTable()
        try:
            length = solve(grid, on_dead_end=on_dead_end, table=table)
        except UnreachableGoal as e:
            logger.info("memo search failed: %s", e)
            return {"success": False, "nodes": len(table), "runtime": time.time() - t0}
        res: Result = {"success": True, "nodes": len(table), "runtime": time.time() - t0, "solution_len": length}
    elif strategy == "astar":
        res = astar(grid, get_heuristic(heuristic, grid), time_limit_s=time_limit, node_limit=node_limit)
    else:
        raise ValueError(f"unknown search strategy: {strategy}")
    logger.info("%s: success=%s nodes=%s runtime=%.3fs", strategy, res["success"], res["nodes"], res["runtime"])
    return res
