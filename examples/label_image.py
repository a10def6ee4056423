"""Label an image file and write a colour-coded view of its largest blobs."""

from __future__ import annotations

import sys
from pathlib import Path

from blobccl import ccl_image, read_image, visualize, write_image


def main() -> None:
    if len(sys.argv) != 3:
        print(f"usage: {Path(sys.argv[0]).name} INPUT OUTPUT.png")
        raise SystemExit(2)
    src, dst = Path(sys.argv[1]), Path(sys.argv[2])
    image = read_image(src)
    blobs = ccl_image(image, verbose=True)
    print(f"{len(blobs)} blobs, largest: {blobs[:5]}")
    visualize(image)
    write_image(image, dst)


if __name__ == "__main__":
    main()
