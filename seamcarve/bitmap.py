"""Reading and writing uncompressed 24-bit Windows BMP images."""

from __future__ import annotations

import copy
import os
import struct
from dataclasses import dataclass
from typing import Iterable, List, Union

MIN_RGB = 0
MAX_RGB = 255

_MAGIC = b"BM"
_FILE_HEADER = struct.Struct("<IHHI")
_DIB_HEADER = struct.Struct("<IiiHHIIiiII")
_FILE_HEADER_AT = len(_MAGIC)
_DIB_HEADER_AT = _FILE_HEADER_AT + _FILE_HEADER.size

PIXEL_OFFSET = len(_MAGIC) + _FILE_HEADER.size + _DIB_HEADER.size
BITS_PER_PIXEL = 24
RESOLUTION = 2835

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Pixel:
    """An RGB colour; each component should lie between 0 and 255."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def is_valid(self) -> bool:
        """Return whether every component is within the 0..255 range."""
        return all(MIN_RGB <= c <= MAX_RGB for c in (self.red, self.green, self.blue))


PixelMatrix = List[List[Pixel]]


class BitmapError(Exception):
    """Raised when a bitmap cannot be read, written or is not supported."""


def _decode(data: bytes, name: str) -> PixelMatrix:
    if data[: len(_MAGIC)] != _MAGIC:
        raise BitmapError(f"{name} is not in proper BMP format.")
    if len(data) < PIXEL_OFFSET:
        raise BitmapError(f"{name} has a truncated BMP header.")

    *_, offset = _FILE_HEADER.unpack_from(data, _FILE_HEADER_AT)
    _, width, height, _, bits, compression, *_ = _DIB_HEADER.unpack_from(
        data, _DIB_HEADER_AT
    )

    # A positive height means rows are stored bottom-up.
    bottom_up = height >= 0
    height = abs(height)

    if bits != BITS_PER_PIXEL:
        raise BitmapError(
            f"{name} uses {bits} bits per pixel (bit depth). "
            "Bitmap only supports 24bit."
        )
    if compression != 0:
        raise BitmapError(
            f"{name} is compressed. Bitmap only supports uncompressed images."
        )

    width = max(width, 0)
    row_bytes = width * 3
    stride = row_bytes + width % 4

    rows: PixelMatrix = []
    for start in range(offset, offset + stride * height, stride) if stride else ():
        chunk = data[start : start + row_bytes]
        if len(chunk) < row_bytes:
            raise BitmapError(f"{name} ends before all pixel data was read.")
        rows.append(
            [
                Pixel(red, green, blue)
                for blue, green, red in zip(chunk[0::3], chunk[1::3], chunk[2::3])
            ]
        )
    if not stride:
        rows = [[] for _ in range(height)]
    if bottom_up:
        rows.reverse()
    return rows


class Bitmap:
    """A grid of pixels in row-major order, stored as a 24-bit BMP file."""

    def __init__(self, pixels: Iterable[Iterable[Pixel]] | None = None) -> None:
        self._pixels: PixelMatrix = []
        if pixels is not None:
            self.from_pixel_matrix(pixels)

    def open(self, filename: PathLike) -> None:
        """Read a BMP file into the pixel matrix, replacing what was held."""
        self._pixels = []
        name = os.fspath(filename)
        try:
            with open(filename, "rb") as stream:
                data = stream.read()
        except OSError as exc:
            raise BitmapError(
                f"{name} could not be opened. Does it exist? "
                "Is it already open by another program?"
            ) from exc
        self._pixels = _decode(data, name)

    def save(self, filename: PathLike) -> None:
        """Write the pixel matrix to a BMP file."""
        if not self.is_image():
            raise BitmapError("Bitmap cannot be saved. It is not a valid image.")

        height = len(self._pixels)
        width = len(self._pixels[0])
        file_size = (PIXEL_OFFSET + (height * 3 + width % 4) * height) & 0xFFFFFFFF

        out = bytearray(_MAGIC)
        out += _FILE_HEADER.pack(file_size, 0, 0, PIXEL_OFFSET)
        out += _DIB_HEADER.pack(
            _DIB_HEADER.size,
            width,
            height,
            1,
            BITS_PER_PIXEL,
            0,
            0,
            RESOLUTION,
            RESOLUTION,
            0,
            0,
        )
        padding = bytes(width % 4)
        for row in reversed(self._pixels):
            out += bytes(c for p in row for c in (p.blue, p.green, p.red))
            out += padding

        try:
            with open(filename, "wb") as stream:
                stream.write(out)
        except OSError as exc:
            raise BitmapError(
                f"{os.fspath(filename)} could not be opened for editing. "
                "Is it already open by another program or is it read-only?"
            ) from exc

    def is_image(self) -> bool:
        """Return whether the matrix is non-empty, rectangular and in range."""
        if not self._pixels or not self._pixels[0]:
            return False
        width = len(self._pixels[0])
        return all(
            len(row) == width and all(p.is_valid() for p in row)
            for row in self._pixels
        )

    def to_pixel_matrix(self) -> PixelMatrix:
        """Return a copy of the pixels, or an empty matrix if not a valid image."""
        return copy.deepcopy(self._pixels) if self.is_image() else []

    def from_pixel_matrix(self, values: Iterable[Iterable[Pixel]]) -> None:
        """Replace the pixels with a copy of ``values`` without validating it."""
        self._pixels = [[copy.copy(p) for p in row] for row in values]