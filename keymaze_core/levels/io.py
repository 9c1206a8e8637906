from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Optional
import os

from keymaze_core.parser import parse_maze_str

@dataclass
class MazeRef:
    path: str
    index: int  # position of the maze inside its file

    def __str__(self) -> str:
        return f"{self.path}#{self.index}"


def split_on_blank_lines(text: str) -> List[str]:
    blocks: List[str] = []
    cur: List[str] = []
    for line in text.splitlines():
        if line.strip() == "":
            if cur:
                blocks.append("\n".join(cur))
                cur = []
        else:
            cur.append(line.rstrip("\r\n"))
    if cur:
        blocks.append("\n".join(cur))
    return blocks


def iterate_maze_strings(root_dir: str, rel_dirs: List[str]) -> Iterator[Tuple[MazeRef, str]]:
    """Iterate over all .txt in the given subfolders and yield (maze reference, maze string)."""
    for rel in rel_dirs:
        abs_dir = os.path.join(root_dir, rel)
        if not os.path.isdir(abs_dir):
            continue
        for fname in sorted(os.listdir(abs_dir)):
            if not fname.endswith(".txt"):
                continue
            fpath = os.path.join(abs_dir, fname)
            with open(fpath, "r", encoding="utf-8") as f:
                content = f.read()
            for i, block in enumerate(split_on_blank_lines(content)):
                yield MazeRef(path=fpath, index=i), block


def count_keys(maze_str: str) -> int:
    return len({ch for ch in maze_str if "a" <= ch <= "z"})


def dims(maze_str: str) -> Tuple[int, int]:
    lines = [ln for ln in maze_str.splitlines() if ln.strip() != ""]
    h = len(lines)
    w = max((len(ln) for ln in lines), default=0)
    return w, h


def filter_maze(maze_str: str, *, max_w: Optional[int], max_h: Optional[int], min_k: Optional[int], max_k: Optional[int]) -> bool:
    w, h = dims(maze_str)
    k = count_keys(maze_str)
    if max_w is not None and w > max_w: return False
    if max_h is not None and h > max_h: return False
    if min_k is not None and k < min_k: return False
    if max_k is not None and k > max_k: return False
    # must parse
    try:
        parse_maze_str(maze_str)
    except ValueError:
        return False
    return True
