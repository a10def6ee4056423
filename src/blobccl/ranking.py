"""Finalization shared by the generic and the image engines."""

from __future__ import annotations

from .union_find import UnionFind


def rank_labels(uf: UnionFind) -> tuple[list[int], list[int]]:
    """Aggregate sizes to roots, rank roots by size and compact their ids.

    Must only be called once pass 1 is complete: a raw label's root can
    change until the last union has been made.

    Returns ``(mapping, sizes)`` where ``mapping[raw]`` is the compact id of
    raw label ``raw`` and ``sizes[i]`` is the size of compact id ``i``.
    Compact id 0 is the largest class. Equal sizes keep the creation order
    of their roots.
    """
    n = len(uf)
    size = uf.size
    roots: list[int] = []
    for label in range(n):
        root = uf.find(label)
        if root == label:
            roots.append(label)
            continue
        size[root] += size[label]
        size[label] = 0
    roots.sort(key=lambda label: size[label], reverse=True)

    mapping = [0] * n
    for rank, root in enumerate(roots):
        mapping[root] = rank
    for label in range(n):
        root = uf.find(label)
        if root != label:
            mapping[label] = mapping[root]
    return mapping, [size[root] for root in roots]


__all__ = ["rank_labels"]
