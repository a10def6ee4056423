"""Reading and writing :class:`~blobccl.image.RGBAImage` files with Pillow."""

from __future__ import annotations

import os

import numpy as np

from .image import RGBAImage


def _pil_image():
    try:
        from PIL import Image
    except ModuleNotFoundError as exc:  # pragma: no cover
        raise ModuleNotFoundError(
            "Pillow is required to read and write image files (pip install blobccl[image])"
        ) from exc
    return Image


def read_image(path: str | os.PathLike[str]) -> RGBAImage:
    Image = _pil_image()
    with Image.open(path) as img:
        pix = np.array(img.convert("RGBA"), dtype=np.uint8)
    return RGBAImage(pix)


def write_image(image: RGBAImage, path: str | os.PathLike[str]) -> None:
    """Save ``image`` as RGBA; the format follows the file extension.

    Use a lossless format (PNG) for labeled images, the colours are the ids.
    """
    Image = _pil_image()
    Image.fromarray(np.ascontiguousarray(image.pix)).save(path)


__all__ = ["read_image", "write_image"]
