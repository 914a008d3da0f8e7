import pytest

from dsalgo.union_find import UnionFind


def test_initially_each_node_is_its_own_root():
    uf = UnionFind(6)
    assert [uf.find(i) for i in range(6)] == list(range(6))


def test_union_uses_smaller_root():
    uf = UnionFind(10)
    uf.union(7, 3)
    assert uf.find(7) == 3
    assert uf.find(3) == 3
    uf.union(5, 9)
    uf.union(9, 7)
    assert {uf.find(n) for n in (3, 5, 7, 9)} == {3}


def test_union_is_transitive_and_separate():
    uf = UnionFind(8)
    uf.union(0, 1)
    uf.union(1, 2)
    uf.union(4, 5)
    assert uf.find(0) == uf.find(2)
    assert uf.find(4) == uf.find(5)
    assert uf.find(0) != uf.find(4)
    assert uf.find(6) == 6


def test_long_chain_compresses_consistently():
    n = 200
    uf = UnionFind(n)
    for i in range(n - 1, 0, -1):
        uf.union(i, i - 1)
    assert all(uf.find(i) == 0 for i in range(n))
    assert all(uf.find(i) == 0 for i in range(n))


def test_errors():
    uf = UnionFind(3)
    with pytest.raises(IndexError):
        uf.find(3)
    with pytest.raises(IndexError):
        uf.union(-1, 0)
    with pytest.raises(ValueError):
        UnionFind(-1)