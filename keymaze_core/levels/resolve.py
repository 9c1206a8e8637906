from __future__ import annotations
from typing import Tuple

from ..grid import Grid
from ..parser import parse_maze_str
from .io import split_on_blank_lines


def parse_maze_id(maze_id: str) -> Tuple[str, int]:
    """Parses a string of the form "path/to/file.txt#3" into (path, index)."""
    if "#" not in maze_id:
        return maze_id, 0
    path, idx = maze_id.rsplit("#", 1)
    try:
        k = int(idx)
    except ValueError:
        raise ValueError(f"Bad maze index in id {maze_id!r}") from None
    return path, k


def load_maze_text_by_id(maze_id: str) -> str:
    """Reads block `idx` of the file named by "file#idx"."""
    path, wanted = parse_maze_id(maze_id)
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    blocks = split_on_blank_lines(content)
    if not blocks:
        raise ValueError(f"No mazes found in {path}")
    if wanted < 0 or wanted >= len(blocks):
        raise IndexError(f"Index {wanted} out of range for {path} (total {len(blocks)})")
    return blocks[wanted]


def load_maze_by_id(maze_id: str) -> Grid:
    return parse_maze_str(load_maze_text_by_id(maze_id))
