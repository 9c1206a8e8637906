from __future__ import annotations
from typing import Dict, ItemsView, Optional, Tuple

MemoKey = Tuple[int, ...]


class MemoTable:
    """Remaining cost per canonical state key (State.memo_key()).

    One table belongs to one top-level search; do not share it between
    searches on different grids.
    """
    def __init__(self) -> None:
        self.best: Dict[MemoKey, int] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: MemoKey) -> Optional[int]:
        val = self.best.get(key)
        if val is None:
            self.misses += 1
        else:
            self.hits += 1
        return val

    def put(self, key: MemoKey, cost: int) -> None:
        self.best[key] = cost

    def items(self) -> ItemsView[MemoKey, int]:
        return self.best.items()

    def __contains__(self, key: object) -> bool:
        return key in self.best

    def __len__(self) -> int:
        return len(self.best)
