from typing import Iterable, List
from .grid import Grid
from .paths import build_paths

TOK_WALL = "#"
TOK_START = "@"
TOK_FLOOR = "."


def trim_blank_lines(lines: Iterable[str]) -> List[str]:
    """Drops empty lines before and after the maze; rows of spaces inside it are floor."""
    rows = [line.rstrip("\r\n") for line in lines]
    start, end = 0, len(rows)
    while start < end and rows[start] == "":
        start += 1
    while end > start and rows[end - 1] == "":
        end -= 1
    return rows[start:end]


def parse_maze_lines(lines: Iterable[str]) -> Grid:
    """Builds a Grid (with landmark paths) from maze rows.

    Supported characters:
      '#': wall
      '@': start (one per agent)
      'a'..'z': key
      'A'..'Z': door, opened by the matching lowercase key (always open
                if that key is not in the maze)
    Other characters are treated as open floor.
    """
    rows = trim_blank_lines(lines)
    if not rows:
        raise ValueError("Empty maze")
    width = len(rows[0])
    for r, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"Maze is not rectangular: row {r} has length {len(row)}, expected {width}")

    grid = Grid(width, len(rows))
    # row-major sweep: up/left neighbours are always placed before the cell
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch != TOK_WALL:
                grid.add_cell(r, c, ch)

    if not grid.start():
        raise ValueError("No start '@' found in maze")

    build_paths(grid)
    return grid


def parse_maze_str(maze_str: str) -> Grid:
    return parse_maze_lines(maze_str.splitlines())


def parse_maze_file(path: str) -> Grid:
    with open(path, "r", encoding="utf-8") as f:
        return parse_maze_lines(f.read().splitlines())
