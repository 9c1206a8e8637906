from collections import deque
from dataclasses import dataclass
from typing import List
import logging

from .grid import Grid, KEY, DOOR
from .state import add_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Path:
    """Shortest route from a landmark to a key and the door keys it needs."""

    length: int
    dest: int
    key: str
    req_keys: int = 0


def find_paths(grid: Grid, origin: int) -> List[Path]:
    """BFS from `origin` over the adjacency graph.

    Doors are walked through here; the key each one needs is only recorded
    in req_keys of the route that crosses it. The first discovery of a cell
    fixes both its distance and its requirements. Doors whose key is not in
    the maze never lock, so they add nothing to req_keys.
    """
    paths: List[Path] = []
    visited = {origin}
    q = deque([(origin, 0, 0)])

    while q:
        cur, dist, req = q.popleft()
        cell = grid.cell(cur)
        if cell.kind == KEY and cur != origin:
            paths.append(Path(length=dist, dest=cur, key=cell.char, req_keys=req & grid.keys))
        for nb in cell.adj:
            if nb in visited:
                continue
            visited.add(nb)
            nb_cell = grid.cell(nb)
            nreq = add_key(req, nb_cell.char) if nb_cell.kind == DOOR else req
            q.append((nb, dist + 1, nreq))
    return paths


def build_paths(grid: Grid) -> None:
    """Fills Cell.paths for every start and key cell."""
    total = 0
    for cell in grid:
        if cell.is_landmark:
            cell.paths = find_paths(grid, cell.idx)
            total += len(cell.paths)
    logger.debug("built %d landmark paths (%dx%d grid)", total, grid.width, grid.height)
