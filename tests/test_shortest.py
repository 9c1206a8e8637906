from itertools import permutations
from pathlib import Path as FsPath

import pytest
from keymaze_core.parser import parse_maze_str
from keymaze_core.moves import successors, initial_state, is_goal
from keymaze_core.state import State, key_bit
from keymaze_core.levels.io import split_on_blank_lines
from search.memo import MemoTable
from search.shortest import INF, UnreachableGoal, shortest_path, solve

EXAMPLES = FsPath(__file__).resolve().parents[1] / "keymaze_core" / "levels" / "examples"


def _mazes(fname):
    return split_on_blank_lines((EXAMPLES / fname).read_text(encoding="utf-8"))


@pytest.mark.parametrize("idx, expected", [(0, 8), (1, 86), (2, 132), (3, 81)])
def test_single_agent_examples(idx, expected):
    g = parse_maze_str(_mazes("single.txt")[idx])
    assert solve(g) == expected


@pytest.mark.parametrize("idx, expected", [(0, 8), (1, 24), (2, 32), (3, 72)])
def test_multi_agent_examples(idx, expected):
    g = parse_maze_str(_mazes("quadrants.txt")[idx])
    assert len(g.start()) == 4
    assert solve(g) == expected


def test_single_key_no_doors_is_bfs_distance():
    lvl = """
#######
#@....#
#.###.#
#...#a#
#######
"""
    g = parse_maze_str(lvl)
    (p,) = g.cell(g.start()[0]).paths
    assert p.length == 6
    assert solve(g) == 6


def test_no_keys_costs_nothing():
    g = parse_maze_str("####\n#@.#\n####")
    assert solve(g) == 0


def _oracle(g):
    """Cheapest visiting order over the precomputed landmark distances."""
    dist = {}
    for idx in g.landmarks():
        for p in g.cell(idx).paths:
            dist[(idx, p.dest)] = p.length
    keys = list(g.key_cells().values())
    best = None
    for order in permutations(keys):
        cur, total = g.start()[0], 0
        for k in order:
            total += dist[(cur, k)]
            cur = k
        if best is None or total < best:
            best = total
    return best


@pytest.mark.parametrize("lvl", [
    """
#########
#a.....b#
#.##@##.#
#c.....d#
#########
""",
    """
###########
#e..a.#...#
#.###.#.b.#
#...@.....#
#c###.##d.#
###########
""",
])
def test_door_free_matches_brute_force(lvl):
    g = parse_maze_str(lvl)
    assert solve(g) == _oracle(g)


def test_quadrants_sum_independent_parts():
    lines = [
        "#########",
        "#a.e#f..#",
        "#.@.#.@b#",
        "#########",
        "#.@.#.@.#",
        "#c..#..d#",
        "#########",
    ]
    total = solve(parse_maze_str("\n".join(lines)))
    parts = 0
    for r0, r1 in ((0, 4), (3, 7)):
        for c0, c1 in ((0, 5), (4, 9)):
            quad = [row[c0:c1] for row in lines[r0:r1]]
            parts += solve(parse_maze_str("\n".join(quad)))
    assert parts == 4 + 4 + 2 + 2
    assert total == parts


def test_idempotent_with_fresh_tables():
    g = parse_maze_str(_mazes("single.txt")[3])
    assert solve(g) == solve(g) == 81


def _naive(g, state):
    if is_goal(g, state):
        return 0
    best = INF
    for cost, ns in successors(g, state):
        best = min(best, cost + _naive(g, ns))
    return best


def test_memo_entries_match_unmemoized_recursion():
    g = parse_maze_str(_mazes("single.txt")[1])
    table = MemoTable()
    assert shortest_path(g, initial_state(g), table) == 86
    assert len(table) > 0
    for key, cached in table.items():
        st = State(cells=tuple(key[:-1]), keys=key[-1])
        assert cached == _naive(g, st)


def test_memo_table_is_reused_within_one_search():
    g = parse_maze_str(_mazes("single.txt")[3])
    table = MemoTable()
    solve(g, table=table)
    assert table.hits > 0


def test_door_gating_blocks_path():
    lvl = """
#######
#@.B.b#
#######
"""
    g = parse_maze_str(lvl)
    (p,) = g.cell(g.start()[0]).paths
    assert p.req_keys != 0
    assert successors(g, initial_state(g)) == []
    with pytest.raises(UnreachableGoal):
        solve(g)


def test_open_door_is_passed_once_key_is_held():
    lvl = """
#########
#a.@.A.b#
#########
"""
    g = parse_maze_str(lvl)
    assert solve(g) == 2 + 6


def test_dead_end_zero_policy_keeps_old_result():
    # b sits behind its own door B; legacy mode counts the dead end after c as 0
    lvl = """
#########
#c.@.B.b#
#########
"""
    g = parse_maze_str(lvl)
    assert solve(g, on_dead_end="zero") == 2
    with pytest.raises(UnreachableGoal):
        solve(g, on_dead_end="error")


def test_walled_off_key_is_unreachable():
    lvl = """
#######
#@.a#b#
#######
"""
    g = parse_maze_str(lvl)
    with pytest.raises(UnreachableGoal):
        solve(g)
    assert solve(g, on_dead_end="zero") == 2


def test_unknown_policy_rejected():
    g = parse_maze_str(_mazes("single.txt")[0])
    with pytest.raises(ValueError):
        solve(g, on_dead_end="ignore")


def test_keyless_doors_are_open():
    # doors B, G and I have no key in this maze
    g = parse_maze_str(_mazes("quadrants.txt")[2])
    assert not g.keys & (key_bit("b") | key_bit("g") | key_bit("i"))
    assert solve(g) == 32
    assert solve(g, on_dead_end="zero") == 32


def test_keyless_door_between_start_and_key():
    lvl = """
#########
#a.@.B.c#
#########
"""
    g = parse_maze_str(lvl)
    # a first (2) then c (6) beats c first (4) then a (6)
    assert solve(g) == 8
