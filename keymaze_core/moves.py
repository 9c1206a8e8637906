from typing import List, Tuple

from .grid import Grid
from .state import State, has_key, contains_all

# cost of a state from which the keys cannot all be collected
INF = 10 ** 9


def successors(grid: Grid, state: State) -> List[Tuple[int, State]]:
    """Legal moves from `state` as (cost, next state) pairs.

    A move sends one agent along a precomputed path to a key it has not
    collected yet, provided every door on that path can already be opened.
    """
    succs: List[Tuple[int, State]] = []
    for i, cur in enumerate(state.cells):
        for p in grid.cell(cur).paths:
            if has_key(state.keys, p.key):
                continue
            if not contains_all(state.keys, p.req_keys):
                continue
            succs.append((p.length, state.move(i, p.dest, p.key)))
    return succs


def initial_state(grid: Grid) -> State:
    return State(cells=tuple(grid.start()), keys=0)


def is_goal(grid: Grid, state: State) -> bool:
    return state.keys == grid.keys
