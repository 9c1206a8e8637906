from typing import Iterable, Optional
from .grid import Grid, START


def render_ascii(grid: Grid, positions: Optional[Iterable[int]] = None) -> str:
    """ASCII view of the maze.

    If positions is given, start markers are dropped and an '@' is drawn on
    every listed cell instead (agents standing on a landmark).
    """
    agents = set(positions) if positions is not None else None
    out_lines = []
    for r in range(grid.height):
        row_chars = []
        for c in range(grid.width):
            idx = r * grid.width + c
            cell = grid.cells[idx]
            if cell is None:
                row_chars.append('#')
            elif agents is None:
                row_chars.append(cell.char)
            elif idx in agents:
                row_chars.append('@')
            elif cell.kind == START:
                row_chars.append('.')
            else:
                row_chars.append(cell.char)
        out_lines.append(''.join(row_chars))
    return "\n".join(out_lines)
