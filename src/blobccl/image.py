"""Connected component labeling of RGBA images, in place.

The image itself stores the labels: after :func:`ccl_image` every pixel
holds the colour of its blob id (see :mod:`blobccl.codec`), background
pixels hold the all-zero colour. The original pixel values are lost.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Union

import numpy as np

from .codec import EMPTY_BLOB, blob_from_color, decode_blobs, encode_blobs
from .ranking import rank_labels
from .union_find import UnionFind

PROGRESS_EVERY = 1000

PALETTE = (
    (255, 0, 0, 255),
    (0, 255, 0, 255),
    (0, 0, 255, 255),
    (255, 255, 0, 255),
    (255, 0, 255, 255),
)
FALLBACK_COLOR = (255, 255, 255, 255)

_PALETTE = np.array(PALETTE, dtype=np.uint8)


class Blob(NamedTuple):
    id: int
    size: int


@dataclass
class RGBAImage:
    """Row-major ``(height, width, 4)`` uint8 buffer with a logical origin."""

    pix: np.ndarray
    origin: tuple[int, int] = (0, 0)

    def __post_init__(self) -> None:
        pix = self.pix
        if not isinstance(pix, np.ndarray) or pix.ndim != 3 or pix.shape[2] != 4:
            raise ValueError("pix must be an array of shape (height, width, 4)")
        if pix.dtype != np.uint8:
            raise ValueError(f"pix must be uint8, got {pix.dtype}")
        self.origin = (int(self.origin[0]), int(self.origin[1]))

    @classmethod
    def new(cls, width: int, height: int, origin: tuple[int, int] = (0, 0)) -> RGBAImage:
        return cls(np.zeros((height, width, 4), dtype=np.uint8), origin)

    @property
    def width(self) -> int:
        return self.pix.shape[1]

    @property
    def height(self) -> int:
        return self.pix.shape[0]

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """``(min_x, min_y, max_x, max_y)``, max exclusive."""
        x0, y0 = self.origin
        return x0, y0, x0 + self.width, y0 + self.height

    def _index(self, x: int, y: int) -> tuple[int, int]:
        x0, y0, x1, y1 = self.bounds
        if not (x0 <= x < x1 and y0 <= y < y1):
            raise IndexError(f"pixel ({x}, {y}) outside bounds {self.bounds}")
        return y - y0, x - x0

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        r, g, b, a = self.pix[self._index(x, y)].tolist()
        return r, g, b, a

    def set_pixel(self, x: int, y: int, color: tuple[int, int, int, int]) -> None:
        self.pix[self._index(x, y)] = color

    def blob_at(self, x: int, y: int) -> int:
        return blob_from_color(*self.pixel(x, y))


ImageLike = Union[RGBAImage, np.ndarray]


def _as_image(image: ImageLike) -> RGBAImage:
    if isinstance(image, RGBAImage):
        return image
    return RGBAImage(image)


def _require_zero_origin(image: RGBAImage) -> None:
    if image.origin != (0, 0):
        raise ValueError(f"image origin must be (0, 0), got bounds {image.bounds}")


def ccl_image(image: ImageLike, *, verbose: bool = False) -> list[Blob]:
    """Label the 4-connected non-black regions of ``image`` in place.

    A pixel is background when its R, G and B channels are all zero; alpha
    is not looked at. Returns one :class:`Blob` per region, ordered by
    decreasing size, with ``blobs[i].id == i``.
    """
    img = _as_image(image)
    _require_zero_origin(img)
    pix = img.pix
    height, width = img.height, img.width

    uf = UnionFind()
    size = uf.size
    above_row = [EMPTY_BLOB] * width
    row = [EMPTY_BLOB] * width
    for y in range(height):
        fg = pix[y, :, :3].any(axis=1).tolist()
        left = EMPTY_BLOB
        for x in range(width):
            if not fg[x]:
                cur = EMPTY_BLOB
            else:
                above = above_row[x]
                if above == EMPTY_BLOB and left == EMPTY_BLOB:
                    cur = uf.make_set()
                elif left == EMPTY_BLOB:
                    cur = uf.find(above)
                elif above == EMPTY_BLOB:
                    cur = uf.find(left)
                else:
                    uf.union(left, above)
                    cur = uf.find(left)
                size[cur] += 1
            row[x] = cur
            left = cur
        encode_blobs(row, out=pix[y])
        above_row, row = row, above_row
        if verbose and (y % PROGRESS_EVERY == 0 or y == height - 1):
            print(f"1st pass y {y}/{height}, labels {len(uf)}")

    mapping, sizes = rank_labels(uf)

    lookup = np.asarray(mapping, dtype=np.int64)
    for line in pix:
        ids = decode_blobs(line)
        labelled = ids != EMPTY_BLOB
        line[labelled] = encode_blobs(lookup[ids[labelled]])
    if verbose:
        print(f"2nd pass done, {len(sizes)} blobs")
    return [Blob(i, s) for i, s in enumerate(sizes)]


def collect_blobs(image: ImageLike) -> list[Blob]:
    """Count the pixels of every blob of an image labeled by :func:`ccl_image`.

    The result is indexed by blob id and runs up to the largest id present;
    ids without pixels get a size of 0.
    """
    img = _as_image(image)
    counts = np.zeros(0, dtype=np.int64)
    for line in img.pix:
        ids = decode_blobs(line)
        ids = ids[ids != EMPTY_BLOB]
        if ids.size == 0:
            continue
        row_counts = np.bincount(ids)
        if row_counts.size > counts.size:
            row_counts[: counts.size] += counts
            counts = row_counts
        else:
            counts[: row_counts.size] += row_counts
    return [Blob(i, int(c)) for i, c in enumerate(counts)]


def visualize(image: ImageLike) -> None:
    """Paint the largest blobs of a labeled image with :data:`PALETTE`.

    Blob ``i < len(PALETTE)`` gets ``PALETTE[i]``, any other blob gets
    :data:`FALLBACK_COLOR`. Background is left as is.
    """
    img = _as_image(image)
    _require_zero_origin(img)
    for line in img.pix:
        ids = decode_blobs(line)
        ranked = (ids != EMPTY_BLOB) & (ids < len(PALETTE))
        line[ranked] = _PALETTE[ids[ranked]]
        line[ids >= len(PALETTE)] = FALLBACK_COLOR


__all__ = [
    "Blob",
    "FALLBACK_COLOR",
    "PALETTE",
    "PROGRESS_EVERY",
    "RGBAImage",
    "ccl_image",
    "collect_blobs",
    "visualize",
]
