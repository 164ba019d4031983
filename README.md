# bmpfilters

A small toolkit for editing uncompressed BMP images. It handles two kinds of
image:

- **8-bit palette** images (a 54-byte header followed by a 256-entry colour
  table): negative, brightness, threshold, and 3×3 convolution filters.
- **24-bit colour** images: negative, grayscale conversion, and brightness.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Interactive use

```
bmpfilters
```

The command takes no options besides `--help`. A menu (in French) asks whether
to open an 8-bit or a 24-bit image, then for the path to it, then for the
operation to apply. For 8-bit images the choices are negative, brightness,
threshold, or one of the filters in `bmpfilters.cli.Kernel` (box blur,
Gaussian blur, outline, emboss, sharpen). For 24-bit images they are negative,
grayscale and brightness.

The result is written to the current directory:

- `image8bitsmodifie.bmp` for 8-bit images
- `resulta_24bits.bmp` for 24-bit images

If the file cannot be opened or is not of the chosen bit depth, an error is
printed and the command exits with status 1.

## Library use

```python
from bmpfilters.gray8 import Bitmap8, BmpFormatError
from bmpfilters.color24 import Bitmap24, Pixel
from bmpfilters.cli import Kernel

img = Bitmap8.load("photo8.bmp")
print(img.info())
img.threshold(128)
img.apply_filter(Kernel.SHARPEN.matrix)
img.save("photo8-out.bmp")

colour = Bitmap24.load("photo24.bmp")
colour.grayscale()
colour.brightness(40)
colour.save("photo24-out.bmp")
```

### `bmpfilters.gray8`

- `Bitmap8(width, height, data, ...)` holds one byte per pixel in `data`
  (a `bytearray` of `width * height` bytes, rows in file order), together with
  the raw 54-byte `header` and 1024-byte `color_table`. When built directly,
  a header and a linear gray colour table are supplied by default.
- `Bitmap8.load(path)` reads the file; `save(path)` writes it back, keeping the
  original header but updating its file size, data size, width and height.
- `info()` returns a short text describing dimensions, data size and colour
  depth.
- `negative()`, `brightness(value)` (clamped to 0..255) and
  `threshold(threshold)` (pixels at or above it become 255, the rest 0)
  change the pixels in place.
- `apply_filter(kernel)` convolves the interior pixels with a 3×3 kernel
  using single-precision arithmetic; border pixels are left unchanged. Any
  other kernel shape raises `ValueError`.

### `bmpfilters.color24`

- `Pixel(red, green, blue)` is an immutable RGB value; each channel must be in
  0..255.
- `Bitmap24(width, height, data)` holds rows of `Pixel`, top row first.
- `Bitmap24.load(path)` reads the file; `save(path)` writes an uncompressed
  24-bit BMP with freshly built headers.
- `negative()`, `grayscale()` (integer mean of the three channels) and
  `brightness(value)` (clamped per channel) change the pixels in place.

### Errors

`Bitmap8.load` and `Bitmap24.load` raise `bmpfilters.gray8.BmpFormatError`
(a subclass of `ValueError`) when a file is too short, truncated, or not of the
expected bit depth. A missing file raises the usual `OSError`.

## Limitations

- Only uncompressed images are read; the compression field is not checked.
- 8-bit pixel data is always read from just after the colour table, whatever
  offset the header gives.
- 24-bit images with a negative height (stored top-down) are rejected.
- There are no filters for 24-bit images beyond negative, grayscale and
  brightness, and the command has no non-interactive mode.

## Running the tests

```
pip install .[test]
pytest
```