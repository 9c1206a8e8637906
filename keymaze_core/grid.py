from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

from .state import add_key

if TYPE_CHECKING:
    from .paths import Path

EMPTY = 0
START = 1
KEY = 2
DOOR = 3


def classify(ch: str) -> int:
    if ch == "@":
        return START
    if "a" <= ch <= "z":
        return KEY
    if "A" <= ch <= "Z":
        return DOOR
    return EMPTY


@dataclass(slots=True)
class Cell:
    """Non-wall cell. Neighbours are kept as indices into Grid.cells."""

    idx: int
    char: str
    kind: int
    adj: List[int] = field(default_factory=list)
    paths: List[Path] = field(default_factory=list)  # landmarks only

    @property
    def is_landmark(self) -> bool:
        return self.kind == START or self.kind == KEY


class Grid:
    """
    Maze as an arena of cells.

    Cell indexing: idx = r*width + c. Walls are stored as None.
    keys: bitset of every key present in the maze.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells: List[Optional[Cell]] = [None] * (width * height)
        self.keys = 0

    def idx_to_rc(self, idx: int) -> Tuple[int, int]:
        return (idx // self.width, idx % self.width)

    def rc_to_idx(self, r: int, c: int) -> int:
        return r * self.width + c

    def cell(self, idx: int) -> Cell:
        c = self.cells[idx]
        if c is None:
            raise KeyError(f"no cell at index {idx} (wall)")
        return c

    def _join(self, a: Cell, b: Cell) -> None:
        a.adj.append(b.idx)
        b.adj.append(a.idx)

    def add_cell(self, r: int, c: int, ch: str) -> Cell:
        """Places a cell and links it to any neighbour already placed."""
        idx = self.rc_to_idx(r, c)
        cell = Cell(idx=idx, char=ch, kind=classify(ch))
        self.cells[idx] = cell
        w = self.width
        if r > 0 and self.cells[idx - w] is not None:
            self._join(cell, self.cells[idx - w])
        if c > 0 and self.cells[idx - 1] is not None:
            self._join(cell, self.cells[idx - 1])
        if r + 1 < self.height and self.cells[idx + w] is not None:
            self._join(cell, self.cells[idx + w])
        if c + 1 < w and self.cells[idx + 1] is not None:
            self._join(cell, self.cells[idx + 1])
        if cell.kind == KEY:
            self.keys = add_key(self.keys, ch)
        return cell

    def __iter__(self) -> Iterator[Cell]:
        for c in self.cells:
            if c is not None:
                yield c

    def start(self) -> List[int]:
        """Start cells in row-major order; this order fixes agent indices."""
        return [c.idx for c in self if c.kind == START]

    def landmarks(self) -> List[int]:
        return [c.idx for c in self if c.is_landmark]

    def key_cells(self) -> Dict[str, int]:
        return {c.char: c.idx for c in self if c.kind == KEY}
