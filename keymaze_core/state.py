from dataclasses import dataclass
from typing import Iterable, Tuple

# KeySet helpers: bit i <-> key chr(ord('a') + i)
__all__ = [
    "State",
    "key_bit",
    "has_key",
    "add_key",
    "contains_all",
    "iter_keys",
    "keys_to_str",
]

def key_bit(ch: str) -> int:
    return 1 << (ord(ch.lower()) - ord("a"))

def has_key(mask: int, ch: str) -> bool:
    return mask & key_bit(ch) != 0

def add_key(mask: int, ch: str) -> int:
    return mask | key_bit(ch)

def contains_all(mask: int, sub: int) -> bool:
    """sub ⊆ mask."""
    return mask & sub == sub

def iter_keys(mask: int) -> Iterable[str]:
    i = 0
    m = mask
    while m:
        if m & 1:
            yield chr(ord("a") + i)
        m >>= 1
        i += 1

def keys_to_str(mask: int) -> str:
    return "".join(iter_keys(mask))


@dataclass(frozen=True, slots=True)
class State:
    """
    Point of the search space.

    cells: current landmark (cell index) of every agent, in start order.
    keys: bitset of collected keys.
    """

    cells: Tuple[int, ...]
    keys: int = 0


    def memo_key(self) -> Tuple[int, ...]:
        return (*self.cells, self.keys)


    def move(self, agent: int, dest: int, key: str) -> "State":
        """Agent `agent` walks to landmark `dest` and picks up `key`."""
        cells = self.cells[:agent] + (dest,) + self.cells[agent + 1:]
        return State(cells=cells, keys=add_key(self.keys, key))
