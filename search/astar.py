from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple
import heapq
import time

from keymaze_core.grid import Grid
from keymaze_core.moves import INF, successors, initial_state, is_goal
from keymaze_core.state import State

Result = Dict[str, object]

def astar(
    grid: Grid,
    h_fn: Callable[[State], int],
    start: Optional[State] = None,
    time_limit_s: Optional[float] = None,
    node_limit: Optional[int] = None,
) -> Result:
    """Best-first search over (agent landmarks, keys) states.

    Edge costs are path lengths, so with h_fn == 0 this is Dijkstra; any
    admissible h_fn keeps the result optimal.
    """
    t0 = time.time()
    if start is None:
        start = initial_state(grid)
    g: Dict[State, int] = {start: 0}
    h0 = h_fn(start)
    if h0 >= INF:
        # some key is out of reach from the start
        runtime = time.time() - t0
        return {"success": False, "nodes": 0, "runtime": runtime}

    openq: List[Tuple[int, int, int, State]] = []
    tiebreak = 0
    heapq.heappush(openq, (h0, tiebreak, 0, start))

    expanded = 0
    found: Optional[State] = None
    limited = False

    while openq:
        if time_limit_s is not None and (time.time() - t0) > time_limit_s:
            limited = True
            break
        _, _, gs, s = heapq.heappop(openq)
        if gs > g[s]:
            # stale entry, a cheaper route to s was queued later
            continue
        if is_goal(grid, s):
            found = s
            break
        expanded += 1
        if node_limit is not None and expanded >= node_limit:
            limited = True
            break

        for cost, ns in successors(grid, s):
            ng = gs + cost
            if ns not in g or ng < g[ns]:
                g[ns] = ng
                hn = h_fn(ns)
                if hn < INF:
                    tiebreak += 1
                    heapq.heappush(openq, (ng + hn, tiebreak, ng, ns))

    runtime = time.time() - t0
    if found is None:
        return {"success": False, "nodes": expanded, "runtime": runtime, "limited": limited}
    return {
        "success": True,
        "nodes": expanded,
        "runtime": runtime,
        "solution_len": g[found],
    }
