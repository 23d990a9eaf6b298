"""Command line entry: carve seams out of a BMP image."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from seamcarve.bitmap import Bitmap, BitmapError
from seamcarve.carver import carve

SEAM_COUNT = 400
OUTPUT_NAME = "carvedImage.bmp"


def _error(message: str) -> int:
    print(f"Error: {message}")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Carve ``SEAM_COUNT`` seams from the named image into ``OUTPUT_NAME``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _error("Need at least one image to carve.")

    filename = args[0]
    image = Bitmap()
    try:
        image.open(filename)
    except BitmapError as exc:
        print(exc, file=sys.stderr)
        return 1

    if not image.is_image():
        print(f"{filename} is not a valid image.", file=sys.stderr)
        return 1

    try:
        carved = carve(image.to_pixel_matrix(), SEAM_COUNT)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    image.from_pixel_matrix(carved)
    try:
        image.save(OUTPUT_NAME)
    except BitmapError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())