from __future__ import annotations
from typing import Optional
import logging

from keymaze_core.grid import Grid
from keymaze_core.moves import INF, successors, initial_state, is_goal
from keymaze_core.state import State
from .memo import MemoTable

logger = logging.getLogger(__name__)

DEAD_END_POLICIES = ("error", "zero")

class UnreachableGoal(ValueError):
    """No order of legal moves collects every key of the maze."""

def shortest_path(grid: Grid, state: State, table: MemoTable, on_dead_end: str = "error") -> int:
    """Length of the shortest walk from `state` to a state holding every key.

    `table` memoizes results by State.memo_key(); pass a fresh MemoTable per
    top-level call. A state with no legal move that still misses keys is a
    dead end: with on_dead_end="error" it costs INF (so any other branch
    wins), with "zero" it costs 0.
    """
    if is_goal(grid, state):
        return 0

    key = state.memo_key()
    cached = table.get(key)
    if cached is not None:
        return cached

    best: Optional[int] = None
    for cost, ns in successors(grid, state):
        dist = cost + shortest_path(grid, ns, table, on_dead_end)
        if best is None or dist < best:
            best = dist

    if best is None:
        best = 0 if on_dead_end == "zero" else INF
    best = min(best, INF)
    table.put(key, best)
    return best

def solve(grid: Grid, on_dead_end: str = "error", table: Optional[MemoTable] = None) -> int:
    """Minimum total steps for all agents to collect every key."""
    if on_dead_end not in DEAD_END_POLICIES:
        raise ValueError(f"unknown on_dead_end policy: {on_dead_end}")
    if table is None:
        table = MemoTable()
    res = shortest_path(grid, initial_state(grid), table, on_dead_end)
    logger.debug("memo: %d states, %d hits, %d misses", len(table), table.hits, table.misses)
    if res >= INF:
        raise UnreachableGoal("keys cannot all be collected: every key order hits a locked door")
    return res
