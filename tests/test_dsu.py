import pytest

from algokit.dsu import UnionFind


def test_starts_with_singletons():
    uf = UnionFind(5)
    assert uf.set_count() == 5
    assert [uf.find(i) for i in range(5)] == list(range(5))
    assert all(uf.set_size(i) == 1 for i in range(5))


def test_union_merges_sets():
    uf = UnionFind(4)
    assert uf.union(0, 1) is True
    assert uf.same_set(0, 1)
    assert not uf.same_set(0, 2)
    assert uf.set_size(1) == 2
    assert uf.set_count() == 3


def test_union_of_same_set_changes_nothing():
    uf = UnionFind(3)
    uf.union(0, 1)
    assert uf.union(1, 0) is False
    assert uf.set_count() == 2


def test_union_is_transitive():
    uf = UnionFind(6)
    uf.union(0, 1)
    uf.union(2, 3)
    uf.union(1, 3)
    assert uf.same_set(0, 2)
    assert uf.find(0) == uf.find(3)
    assert uf.set_size(2) == uf.set_size(0)
    assert not uf.same_set(0, 5)


def test_sizes_of_representatives_cover_all_items():
    uf = UnionFind(10)
    for a, b in [(0, 1), (1, 2), (3, 4), (5, 6), (6, 7), (7, 3)]:
        uf.union(a, b)
    roots = {uf.find(i) for i in range(10)}
    assert len(roots) == uf.set_count()
    assert sum(uf.set_size(root) for root in roots) == len(uf)


def test_out_of_range_item_raises():
    uf = UnionFind(2)
    with pytest.raises(IndexError):
        uf.find(2)
    with pytest.raises(IndexError):
        uf.union(-1, 0)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        UnionFind(-1)