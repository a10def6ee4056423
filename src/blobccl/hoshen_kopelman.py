"""Hoshen-Kopelman labeling over an arbitrary container of nodes."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from .ranking import rank_labels
from .union_find import InvariantViolation, UnionFind

NULL_LABEL = -1


@runtime_checkable
class NodeSource(Protocol):
    """A container of nodes that can be labeled.

    Nodes are visited in a causal order: every neighbour reported by
    :meth:`neighbor_labels` has been visited before the current node.
    All labels start as :data:`NULL_LABEL`.
    """

    def reset(self) -> None:
        """Rewind the traversal to before the first node."""

    def advance(self) -> bool:
        """Move to the next node; return ``False`` once none remain."""

    def neighbor_labels(self) -> Sequence[int]:
        """Labels of the already visited neighbours of the current node."""

    def get_label(self) -> int:
        ...

    def set_label(self, label: int) -> None:
        ...

    def size(self) -> int:
        """Contribution of the current node to the size of its label."""


def hoshen_kopelman(source: NodeSource, *, verbose: bool = False) -> list[int]:
    """Label every node of ``source`` and return the label sizes.

    After the call each visited node carries a compact label in
    ``[0, len(sizes))``; label 0 is the largest. ``sizes`` is sorted in
    descending order.
    """
    uf = UnionFind()
    source.reset()
    while source.advance():
        neighbors = source.neighbor_labels()
        if len(neighbors) == 0:
            label = uf.make_set(source.size())
            source.set_label(label)
            continue

        roots = [uf.find(uf.check(n)) for n in neighbors]
        smallest = min(roots)
        # Every neighbouring class ends up under the smallest root.
        for n, root in zip(neighbors, roots):
            uf.union(root, smallest)
            uf.find(n)
        source.set_label(smallest)
        uf.add_size(smallest, source.size())

    mapping, sizes = rank_labels(uf)
    if verbose:
        print(f"Hoshen-Kopelman: {len(uf)} raw labels -> {len(sizes)} clusters")

    source.reset()
    while source.advance():
        source.set_label(mapping[uf.check(source.get_label())])
    return sizes


__all__ = ["NULL_LABEL", "NodeSource", "hoshen_kopelman", "InvariantViolation"]
