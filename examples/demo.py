"""Small demonstration of Hoshen-Kopelman labeling on a grid and an image."""

from __future__ import annotations

import numpy as np

from blobccl import ccl_image, decode_blobs, label_grid


def make_grid() -> np.ndarray:
    return np.array(
        [
            [0, 1, 0, 0, 0, 0, 0, 1, 1],
            [1, 1, 1, 0, 1, 0, 0, 1, 0],
            [0, 1, 0, 0, 1, 0, 0, 1, 0],
            [0, 1, 1, 1, 1, 0, 0, 1, 0],
            [0, 0, 0, 1, 0, 0, 0, 1, 0],
            [0, 1, 0, 1, 1, 1, 1, 1, 0],
            [1, 1, 1, 0, 0, 0, 0, 0, 1],
            [1, 0, 1, 1, 1, 0, 0, 0, 1],
            [1, 1, 1, 0, 0, 0, 0, 1, 1],
            [1, 0, 1, 0, 1, 0, 1, 1, 1],
        ]
    )


def main() -> None:
    grid = make_grid()
    labels, sizes = label_grid(grid)
    print("Grid labels:")
    for row in labels:
        print(" ".join(f"{v:2d}" for v in row))
    print("label sizes:", sizes)

    pix = np.zeros(grid.shape + (4,), dtype=np.uint8)
    pix[grid != 0] = (255, 255, 255, 255)
    blobs = ccl_image(pix)
    print("Image blobs:", blobs)
    assert (decode_blobs(pix) == labels).all()


if __name__ == "__main__":
    main()
