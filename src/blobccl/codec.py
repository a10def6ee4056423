"""Bijection between blob identifiers and RGBA colours.

A blob id is stored as ``id + 1`` written in base 256 over the four
channels, most significant digit in R. The empty blob ``-1`` is therefore
the all-zero colour. Ids must fit in 32 bits once offset, i.e. lie in
``[-1, 2**32 - 2]``; larger values are not detected and wrap.
"""

from __future__ import annotations

import numpy as np

EMPTY_BLOB = -1

_WEIGHTS = np.array([256**3, 256**2, 256, 1], dtype=np.int64)
_SHIFTS = np.array([24, 16, 8, 0], dtype=np.int64)


def blob_from_color(r: int, g: int, b: int, a: int) -> int:
    return int(r) * 256**3 + int(g) * 256**2 + int(b) * 256 + int(a) + EMPTY_BLOB


def color_from_blob(blob_id: int) -> tuple[int, int, int, int]:
    if blob_id == EMPTY_BLOB:
        return (0, 0, 0, 0)
    v = int(blob_id) - EMPTY_BLOB
    r, residue = divmod(v, 256**3)
    g, residue = divmod(residue, 256**2)
    b, a = divmod(residue, 256)
    return (r & 0xFF, g, b, a)


def decode_blobs(pixels: np.ndarray) -> np.ndarray:
    """Decode an ``(..., 4)`` uint8 array into an ``(...)`` int64 array of ids."""
    pixels = np.asarray(pixels)
    if pixels.shape[-1:] != (4,):
        raise ValueError("pixels must have 4 channels in the last axis")
    return pixels.astype(np.int64) @ _WEIGHTS + EMPTY_BLOB


def encode_blobs(ids: np.ndarray, out: np.ndarray | None = None) -> np.ndarray:
    """Encode an int array of ids into ``(..., 4)`` uint8 colours.

    ``out``, if given, is written in place and returned.
    """
    v = np.asarray(ids, dtype=np.int64) - EMPTY_BLOB
    channels = (v[..., None] >> _SHIFTS) & 0xFF
    if out is None:
        return channels.astype(np.uint8)
    out[...] = channels
    return out


__all__ = ["EMPTY_BLOB", "blob_from_color", "color_from_blob", "decode_blobs", "encode_blobs"]
