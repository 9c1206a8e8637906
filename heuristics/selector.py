from __future__ import annotations
from typing import Callable

from keymaze_core.grid import Grid
from heuristics.classic import h_zero, h_farthest_key


def get_heuristic(name: str, grid: Grid) -> Callable:
    name = name.lower()
    if name == "zero":
        return h_zero
    if name == "farthest":
        return h_farthest_key(grid)
    raise ValueError(f"unknown heuristic: {name}")
