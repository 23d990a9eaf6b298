# seamcarve

seamcarve narrows an image by removing low-energy vertical seams. The
detailed parts of the picture keep their proportions, and the plain
parts shrink.

It reads and writes only uncompressed 24-bit Windows BMP files. It has
no dependencies beyond the Python standard library and needs Python
3.10 or later.

## Installing

    pip install .

## Command line

    seamcarve picture.bmp

This command removes 400 vertical seams from `picture.bmp`. It writes
the result to `carvedImage.bmp` in the current directory.

- The exit status is 0 on success.
- If no file name is given, the command prints
  `Error: Need at least one image to carve.` and exits with status 1.
- The image must be wider than 400 pixels. If it is not, the command
  exits with status 1 and a message on standard error.
- If the file cannot be read, is not a valid 24-bit uncompressed BMP, or
  the output cannot be written, the command also exits with status 1
  and a message on standard error.

## Library use

```python
from seamcarve.bitmap import Bitmap, BitmapError
from seamcarve.carver import carve

image = Bitmap()
try:
    image.open("picture.bmp")
except BitmapError as exc:
    print(exc)
else:
    if image.is_image():
        narrowed = carve(image.to_pixel_matrix(), 50)
        image.from_pixel_matrix(narrowed)
        image.save("narrower.bmp")
```

### `seamcarve.bitmap`

- `Pixel(red, green, blue)` is a dataclass. Each component defaults
  to 0. `is_valid()` checks that every component lies in 0..255.
- `Bitmap` holds a matrix of pixels, one list per row.
  - `open(filename)` reads a BMP file into the bitmap. It handles both
    bottom-up and top-down row order.
  - `save(filename)` writes the bitmap as a bottom-up 24-bit BMP file.
  - `is_image()` is true when the matrix is non-empty and rectangular,
    and every pixel is in range.
  - `to_pixel_matrix()` returns a copy of the pixels. It returns an
    empty list when the matrix is not a valid image.
  - `from_pixel_matrix(values)` replaces the pixels with a copy of
    `values`. It does not validate them.
- `BitmapError` is raised in these cases:
  - the file cannot be opened or written;
  - the file is not a BMP file, or is truncated;
  - the file uses a bit depth other than 24, or is compressed;
  - `save` is called on a bitmap that is not a valid image.

### `seamcarve.carver`

`carve(pixels, count)` returns a copy of the image with `count` vertical
seams removed. It raises `ValueError` unless `0 <= count < width`.

To control each pass yourself, use `PixelTransformer(pixels)`. It raises
`ValueError` if the image is empty.

- `calculate_gradients()` computes each pixel's energy from the colour
  differences between its neighbours.
- `calculate_seams()` accumulates those energies into the cheapest
  connected seam cost, working from the top row down.
- `remove_single_seam()` traces the cheapest seam from the bottom up. It
  paints that seam's pixels red, except in the top row.
- `delete_seam()` removes the traced seam's pixel from every row, so the
  image becomes one column narrower.

The transformer also has these read-only properties: `width`, `height`,
`pixels`, `gradients`, `seams` and `seam`. The methods
`format_gradients()`, `format_seams()` and `format_pixels()` render the
intermediate state as text, one image row per line.

### `seamcarve.timer`

`Timer` is a small stopwatch that starts when it is created.

- `start()` restarts it.
- `stop()` returns the seconds elapsed since the last start, to the
  microsecond.
- `running` tells whether it is timing.

## What it does not do

- The command line cannot change the number of seams or the output file
  name. The command always removes 400 seams and always writes
  `carvedImage.bmp`. To use other values, call `carve` from Python.
- Only vertical seams are removed, so only the width shrinks. Images are
  never enlarged.
- No image formats other than uncompressed 24-bit BMP are supported.

## Running the tests

    pip install ".[test]"
    pytest