import pytest

from algograph.exceptions import OutOfRangeVertexError
from algograph.lib.algorithms.union_find import DisjointSet


def test_singletons():
    ds = DisjointSet(4)
    assert len(ds) == 4
    assert ds.set_count == 4
    assert [ds.find(x) for x in range(4)] == [0, 1, 2, 3]


def test_union_reports_merges():
    ds = DisjointSet(4)
    assert ds.union(0, 1) is True
    assert ds.union(1, 0) is False
    assert ds.connected(0, 1)
    assert not ds.connected(0, 2)
    assert ds.set_count == 3


def test_equal_sizes_keep_smaller_root():
    ds = DisjointSet(4)
    ds.union(3, 1)
    assert ds.find(3) == 1


def test_smaller_set_goes_under_larger():
    ds = DisjointSet(5)
    ds.union(3, 4)
    ds.union(0, 3)
    assert ds.find(0) == 3
    assert ds.find(4) == 3


def test_find_compresses_path():
    ds = DisjointSet(4)
    ds.union(0, 1)
    ds.union(2, 3)
    ds.union(1, 3)  # root 2 goes under root 0, 3 still points at 2
    assert ds._parent[3] == 2
    assert ds.find(3) == 0
    assert ds._parent[3] == 0


def test_out_of_range():
    ds = DisjointSet(2)
    with pytest.raises(OutOfRangeVertexError):
        ds.find(2)
    with pytest.raises(OutOfRangeVertexError):
        ds.union(-1, 0)


def test_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)
