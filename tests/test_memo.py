from search.memo import MemoTable


def test_memo_get_put_and_stats():
    t = MemoTable()
    key = (4, 9, 0b101)
    assert t.get(key) is None
    t.put(key, 17)
    assert key in t
    assert t.get(key) == 17
    assert len(t) == 1
    assert (t.hits, t.misses) == (1, 1)
    assert dict(t.items()) == {key: 17}


def test_memo_stores_zero():
    t = MemoTable()
    t.put((1, 0), 0)
    # 0 is a value, not a miss
    assert t.get((1, 0)) == 0
    assert t.hits == 1
