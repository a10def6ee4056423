"""Connected component labeling with the Hoshen-Kopelman algorithm."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS = {
    "NULL_LABEL": "hoshen_kopelman",
    "NodeSource": "hoshen_kopelman",
    "hoshen_kopelman": "hoshen_kopelman",
    "InvariantViolation": "union_find",
    "UnionFind": "union_find",
    "rank_labels": "ranking",
    "EMPTY_BLOB": "codec",
    "blob_from_color": "codec",
    "color_from_blob": "codec",
    "decode_blobs": "codec",
    "encode_blobs": "codec",
    "GridSource": "grid",
    "label_grid": "grid",
    "Blob": "image",
    "RGBAImage": "image",
    "ccl_image": "image",
    "collect_blobs": "image",
    "visualize": "image",
    "PALETTE": "image",
    "FALLBACK_COLOR": "image",
    "PROGRESS_EVERY": "image",
    "read_image": "imageio",
    "write_image": "imageio",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> Any:  # pragma: no cover - simple lazy import shim
    module_name = _EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module 'blobccl' has no attribute {name!r}")
    module = import_module(f"blobccl.{module_name}")
    return getattr(module, name)


def __dir__() -> list[str]:  # pragma: no cover - cosmetic helper
    return sorted(__all__)
