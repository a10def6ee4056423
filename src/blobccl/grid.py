"""Reference :class:`~blobccl.hoshen_kopelman.NodeSource` over a 2-D grid."""

from __future__ import annotations

import numpy as np

from .hoshen_kopelman import NULL_LABEL, hoshen_kopelman


class GridSource:
    """Non-zero cells of ``data`` are foreground, 4-connected, raster order.

    ``weights`` optionally gives the size contribution of every cell.
    Labels are kept in :attr:`labels`, background cells stay ``NULL_LABEL``.
    """

    def __init__(self, data: np.ndarray, weights: np.ndarray | None = None) -> None:
        data = np.asarray(data)
        if data.ndim != 2:
            raise ValueError("data must be a 2D array")
        if weights is not None:
            weights = np.asarray(weights, dtype=np.int64)
            if weights.shape != data.shape:
                raise ValueError("weights must have the same shape as data")
        self.foreground = data != 0
        self._flat = self.foreground.ravel()
        self.weights = weights
        self.labels = np.full(data.shape, NULL_LABEL, dtype=np.int64)
        self._width = data.shape[1]
        self._pos = -1

    def reset(self) -> None:
        self._pos = -1

    def advance(self) -> bool:
        total = self._flat.size
        self._pos += 1
        while self._pos < total and not self._flat[self._pos]:
            self._pos += 1
        return self._pos < total

    def _cell(self) -> tuple[int, int]:
        return divmod(self._pos, self._width)

    def neighbor_labels(self) -> list[int]:
        y, x = self._cell()
        neighbors: list[int] = []
        if y > 0 and self.foreground[y - 1, x]:
            neighbors.append(int(self.labels[y - 1, x]))
        if x > 0 and self.foreground[y, x - 1]:
            neighbors.append(int(self.labels[y, x - 1]))
        return neighbors

    def get_label(self) -> int:
        return int(self.labels[self._cell()])

    def set_label(self, label: int) -> None:
        self.labels[self._cell()] = label

    def size(self) -> int:
        if self.weights is None:
            return 1
        return int(self.weights[self._cell()])


def label_grid(
    data: np.ndarray,
    weights: np.ndarray | None = None,
    *,
    verbose: bool = False,
) -> tuple[np.ndarray, list[int]]:
    """Label the 4-connected non-zero regions of ``data``.

    Returns the label array (``NULL_LABEL`` on background, compact ids
    ordered by decreasing size elsewhere) and the size of every label.
    """
    source = GridSource(data, weights)
    sizes = hoshen_kopelman(source, verbose=verbose)
    return source.labels, sizes


__all__ = ["GridSource", "label_grid"]
