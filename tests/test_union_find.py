import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import pytest

from blobccl.ranking import rank_labels
from blobccl.union_find import InvariantViolation, UnionFind


def test_make_set_is_sequential():
    uf = UnionFind()
    assert [uf.make_set() for _ in range(4)] == [0, 1, 2, 3]
    assert len(uf) == 4
    assert all(uf.find(i) == i for i in range(4))


def test_union_attaches_first_under_second():
    uf = UnionFind()
    a, b, c = uf.make_set(), uf.make_set(), uf.make_set()
    assert uf.union(a, b) == b
    assert uf.find(a) == b
    assert uf.union(c, a) == b
    assert uf.find(c) == b


def test_find_compresses_path():
    uf = UnionFind()
    for _ in range(5):
        uf.make_set()
    uf.parent[:] = [0, 0, 1, 2, 3]
    assert uf.find(4) == 0
    assert uf.parent == [0, 0, 0, 0, 0]
    assert uf.find(4) == 0


def test_check_rejects_unallocated_labels():
    uf = UnionFind()
    uf.make_set()
    assert uf.check(0) == 0
    with pytest.raises(InvariantViolation):
        uf.check(1)
    with pytest.raises(InvariantViolation):
        uf.check(-1)


def test_rank_labels_aggregates_and_orders():
    uf = UnionFind()
    for size in (2, 5, 1, 3):
        uf.make_set(size)
    uf.union(2, 1)
    uf.union(3, 0)
    mapping, sizes = rank_labels(uf)
    assert sizes == [6, 5]
    assert mapping == [1, 0, 0, 1]
    assert uf.component_size(2) == 6
    assert uf.size[2] == 0


def test_rank_labels_follows_late_merges():
    uf = UnionFind()
    for size in (1, 1, 1, 4):
        uf.make_set(size)
    uf.union(1, 0)
    uf.union(0, 3)
    uf.add_size(2, 2)
    mapping, sizes = rank_labels(uf)
    assert sizes == [6, 3]
    assert mapping[0] == mapping[1] == mapping[3] == 0
    assert mapping[2] == 1


def test_rank_labels_empty():
    assert rank_labels(UnionFind()) == ([], [])
