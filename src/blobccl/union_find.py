"""Growable Union-Find over raw labels, used by both labeling engines."""

from __future__ import annotations


class InvariantViolation(RuntimeError):
    """A caller reported a label that was never allocated."""


class UnionFind:
    """Equivalence classes of raw labels with path-compressed lookups.

    Labels are handed out sequentially by :meth:`make_set`. Sizes are only
    accumulated per raw label; they are moved to the roots once, by
    :func:`blobccl.ranking.rank_labels`, after every union is done.
    """

    def __init__(self) -> None:
        self.parent: list[int] = []
        self.size: list[int] = []

    def __len__(self) -> int:
        return len(self.parent)

    def make_set(self, size: int = 0) -> int:
        label = len(self.parent)
        self.parent.append(label)
        self.size.append(size)
        return label

    def check(self, label: int) -> int:
        if not 0 <= label < len(self.parent):
            raise InvariantViolation(
                f"label {label} is outside the allocated range [0, {len(self.parent)})"
            )
        return int(label)

    def find(self, label: int) -> int:
        parent = self.parent
        root = label
        while parent[root] != root:
            root = parent[root]
        # Squash the chain so later lookups hit the root directly.
        while parent[label] != root:
            nxt = parent[label]
            parent[label] = root
            label = nxt
        return root

    def union(self, a: int, b: int) -> int:
        """Attach the class of ``a`` under the root of ``b``."""
        rb = self.find(b)
        self.parent[self.find(a)] = rb
        return rb

    def add_size(self, label: int, amount: int) -> None:
        self.size[label] += amount

    def component_size(self, label: int) -> int:
        return self.size[self.find(label)]


__all__ = ["InvariantViolation", "UnionFind"]
