from __future__ import annotations
from typing import Callable, Dict

import numpy as np
from keymaze_core.grid import Grid, KEY
from keymaze_core.moves import INF
from keymaze_core.state import State, iter_keys

def key_col(ch: str) -> int:
    return ord(ch) - ord("a")

# ---- classical heuristics

def h_zero(state: State) -> int:
    return 0

class KeyDistances:
    """Door-agnostic BFS distance from every landmark to every key.

    Rows are landmarks (Grid.landmarks() order), columns are the 26 key
    letters; INF where the key is absent or walled off.
    """
    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        landmarks = grid.landmarks()
        self.row_of: Dict[int, int] = {idx: i for i, idx in enumerate(landmarks)}
        self.table = np.full((len(landmarks), 26), INF, dtype=np.int64)
        for idx in landmarks:
            row = self.row_of[idx]
            cell = grid.cell(idx)
            if cell.kind == KEY:
                self.table[row, key_col(cell.char)] = 0
            for p in cell.paths:
                self.table[row, key_col(p.key)] = p.length

    def distance(self, idx: int, key: str) -> int:
        return int(self.table[self.row_of[idx], key_col(key)])

    def farthest_key(self, state: State) -> int:
        """max over missing keys of the distance from the nearest agent.

        Every missing key has to be reached by some agent, so this is a valid
        lower bound on the remaining cost.
        """
        missing = [key_col(k) for k in iter_keys(self.grid.keys & ~state.keys)]
        if not missing:
            return 0
        rows = [self.row_of[c] for c in state.cells]
        sub = self.table[np.ix_(rows, missing)]
        return int(sub.min(axis=0).max())

def h_farthest_key(grid: Grid) -> Callable[[State], int]:
    return KeyDistances(grid).farthest_key
