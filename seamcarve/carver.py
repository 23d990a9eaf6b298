"""Seam carving: shrink an image's width by removing low-energy vertical seams."""

from __future__ import annotations

import copy
import math
from array import array
from typing import Iterable, List

from seamcarve.bitmap import Pixel, PixelMatrix

SEAM_COLOUR = (255, 0, 0)


def _distance(first: Pixel, second: Pixel) -> int:
    """Squared colour distance between two pixels."""
    return (
        (first.red - second.red) ** 2
        + (first.green - second.green) ** 2
        + (first.blue - second.blue) ** 2
    )


def _format_grid(grid: Iterable[Iterable[float]]) -> str:
    return "".join("".join(f"{value:g} " for value in row) + "\n" for row in grid)


class PixelTransformer:
    """Computes pixel energies and cumulative seam costs, and removes seams.

    Energies and seam costs are held as single-precision floats.
    """

    def __init__(self, pixels: Iterable[Iterable[Pixel]]) -> None:
        self._pixels: PixelMatrix = [[copy.copy(p) for p in row] for row in pixels]
        if not self._pixels or not self._pixels[0]:
            raise ValueError("cannot transform an empty image")
        self._rows = len(self._pixels)
        self._columns = len(self._pixels[0])
        self._seam: List[int] = [0] * self._rows
        self._reset_buffers()

    def _reset_buffers(self) -> None:
        self._grads = [array("f", [0.0]) * self._columns for _ in range(self._rows)]
        self._seams = [array("f", [0.0]) * self._columns for _ in range(self._rows)]

    @property
    def width(self) -> int:
        """Current number of columns."""
        return self._columns

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def pixels(self) -> PixelMatrix:
        """A copy of the current pixel matrix."""
        return copy.deepcopy(self._pixels)

    @property
    def gradients(self) -> List[List[float]]:
        """The energy of every pixel, as last calculated."""
        return [list(row) for row in self._grads]

    @property
    def seams(self) -> List[List[float]]:
        """The cumulative lowest seam cost ending at every pixel."""
        return [list(row) for row in self._seams]

    @property
    def seam(self) -> List[int]:
        """Column index, per row, of the seam that ``delete_seam`` removes."""
        return list(self._seam)

    def calculate_gradients(self) -> None:
        """Compute each pixel's energy from its horizontal and vertical neighbours."""
        last_row = self._rows - 1
        for i, line in enumerate(self._pixels):
            above = self._pixels[i - 1] if i > 0 else line
            below = self._pixels[i + 1] if i < last_row else line
            grad_row = self._grads[i]
            last_column = len(line) - 1
            for j, pixel in enumerate(line):
                left = line[j - 1] if j > 0 else pixel
                right = line[j + 1] if j < last_column else pixel
                fx = _distance(right, left)
                fy = _distance(below[j], above[j])
                grad_row[j] = math.sqrt(fx + fy)

    def calculate_seams(self) -> None:
        """Accumulate the cheapest connected path cost from the top row down."""
        self._seams[0][:] = self._grads[0]
        for previous, grad_row, seam_row in zip(
            self._seams, self._grads[1:], self._seams[1:]
        ):
            for j, grad in enumerate(grad_row):
                seam_row[j] = grad + min(previous[max(j - 1, 0) : j + 2])

    @staticmethod
    def _step(previous: array, index: int) -> int:
        """Pick the column in the row above that continues the seam."""
        last = len(previous) - 1
        if index == 0:
            if last > 0 and previous[1] < previous[0]:
                return 1
            return 0
        if index == last:
            return index - 1 if previous[index - 1] < previous[index] else index
        left, above, right = previous[index - 1 : index + 2]
        if left <= above and left <= right:
            return index - 1
        if right <= above and right <= left:
            return index + 1
        return index

    def remove_single_seam(self) -> None:
        """Trace the cheapest seam from the bottom up and mark it for deletion.

        Pixels on the seam below the top row are painted red.
        """
        if self._columns == 0:
            raise ValueError("no columns left to carve")
        bottom = self._seams[-1]
        index = min(range(self._columns), key=bottom.__getitem__)
        seam = [0] * self._rows
        for row in range(self._rows - 1, 0, -1):
            self._pixels[row][index] = Pixel(*SEAM_COLOUR)
            seam[row] = index
            index = self._step(self._seams[row - 1], index)
        seam[0] = index
        self._seam = seam

    def delete_seam(self) -> None:
        """Remove the marked seam's pixel from every row, narrowing the image."""
        if self._columns == 0:
            raise ValueError("no columns left to carve")
        for line, index in zip(self._pixels, self._seam):
            del line[min(index, len(line) - 1)]
        self._columns -= 1
        self._reset_buffers()

    def format_gradients(self) -> str:
        """Render the energies as text, one image row per line."""
        return _format_grid(self._grads)

    def format_seams(self) -> str:
        """Render the seam costs as text, one image row per line."""
        return _format_grid(self._seams)

    def format_pixels(self) -> str:
        """Render the pixels as ``(r, g, b)`` tuples, one image row per line."""
        return "".join(
            "".join(f"({p.red}, {p.green}, {p.blue})  " for p in line) + "\n"
            for line in self._pixels
        )


def carve(pixels: Iterable[Iterable[Pixel]], count: int) -> PixelMatrix:
    """Return a copy of ``pixels`` with ``count`` vertical seams removed."""
    transformer = PixelTransformer(pixels)
    if not 0 <= count < transformer.width:
        raise ValueError(
            f"cannot remove {count} seams from an image {transformer.width} wide"
        )
    for _ in range(count):
        transformer.calculate_gradients()
        transformer.calculate_seams()
        transformer.remove_single_seam()
        transformer.delete_seam()
    return transformer.pixels