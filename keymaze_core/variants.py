from typing import List

from .parser import TOK_FLOOR, TOK_START, trim_blank_lines

# 3x3 block written over the entrance; the centre plus its four
# orthogonal neighbours become walls, the diagonals become starts.
SPLIT_BLOCK = ("@#@", "###", "@#@")


def split_entrance(lines: List[str]) -> List[str]:
    """Turns a single-entrance maze into its four-agent variant."""
    rows = trim_blank_lines(lines)
    starts = [(r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == TOK_START]
    if len(starts) != 1:
        raise ValueError(f"Expected exactly one start '@', found {len(starts)}")
    r0, c0 = starts[0]
    if r0 < 1 or c0 < 1 or r0 + 1 >= len(rows) or c0 + 1 >= len(rows[r0]):
        raise ValueError("Start is on the border; nothing to split")
    for r in range(r0 - 1, r0 + 2):
        for c in range(c0 - 1, c0 + 2):
            if (r, c) == (r0, c0):
                continue
            if c >= len(rows[r]) or rows[r][c] != TOK_FLOOR:
                raise ValueError(f"Cell ({r}, {c}) next to the start is not open floor")

    out = list(rows)
    for dr, block in enumerate(SPLIT_BLOCK):
        r = r0 - 1 + dr
        out[r] = out[r][:c0 - 1] + block + out[r][c0 + 2:]
    return out
