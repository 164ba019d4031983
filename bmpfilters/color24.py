"""Reading, writing and filtering of 24-bit colour BMP images."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from bmpfilters.gray8 import BmpFormatError, StrPath

_FILE_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_HEADERS_SIZE = _FILE_HEADER.size + _INFO_HEADER.size
_BMP_MAGIC = 0x4D42


def _row_padding(width: int) -> int:
    return (4 - (width * 3) % 4) % 4


def _clamp(value: int) -> int:
    return 255 if value > 255 else 0 if value < 0 else value


@dataclass(frozen=True)
class Pixel:
    """One RGB pixel with 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"channel value {channel} out of range 0..255")


@dataclass
class Bitmap24:
    """A 24-bit BMP image held as rows of pixels, top row first."""

    width: int
    height: int
    data: List[List[Pixel]] = field(default_factory=list)
    color_depth: int = 24

    def __post_init__(self) -> None:
        self.data = [list(row) for row in self.data]
        if len(self.data) != self.height or any(len(row) != self.width for row in self.data):
            raise ValueError(
                f"pixel rows do not match a {self.width} x {self.height} image"
            )

    @classmethod
    def load(cls, path: StrPath) -> "Bitmap24":
        """Read a 24-bit BMP file."""
        raw = Path(path).read_bytes()
        if len(raw) < _HEADERS_SIZE:
            raise BmpFormatError(f"{path}: file too short for BMP headers")
        _type, _size, _res1, _res2, offset = _FILE_HEADER.unpack_from(raw, 0)
        (
            _info_size,
            width,
            height,
            _planes,
            bits,
            *_rest,
        ) = _INFO_HEADER.unpack_from(raw, _FILE_HEADER.size)

        if bits != 24:
            raise BmpFormatError(f"image is not 24 bits ({bits} bits)")
        if width < 0 or height < 0:
            raise BmpFormatError(f"unsupported dimensions {width} x {height}")

        row_bytes = width * 3
        stride = row_bytes + _row_padding(width)
        rows_bottom_up = []
        for file_row in range(height):
            start = offset + file_row * stride
            chunk = raw[start : start + row_bytes]
            if len(chunk) < row_bytes:
                raise BmpFormatError(f"{path}: truncated pixel data")
            channels = iter(chunk)
            rows_bottom_up.append(
                [Pixel(red, green, blue) for blue, green, red in zip(channels, channels, channels)]
            )
        return cls(width=width, height=height, data=rows_bottom_up[::-1], color_depth=bits)

    def save(self, path: StrPath) -> None:
        """Write the image as an uncompressed 24-bit BMP file."""
        padding = _row_padding(self.width)
        data_size = (self.width * 3 + padding) * self.height
        out = bytearray(
            _FILE_HEADER.pack(_BMP_MAGIC, _HEADERS_SIZE + data_size, 0, 0, _HEADERS_SIZE)
        )
        out += _INFO_HEADER.pack(
            _INFO_HEADER.size, self.width, self.height, 1, 24, 0, data_size, 0, 0, 0, 0
        )
        pad = bytes(padding)
        for row in reversed(self.data):
            for pixel in row:
                out += bytes((pixel.blue, pixel.green, pixel.red))
            out += pad
        Path(path).write_bytes(bytes(out))

    def _map(self, transform) -> None:
        self.data = [[transform(pixel) for pixel in row] for row in self.data]

    def negative(self) -> None:
        """Invert every channel of every pixel."""
        self._map(lambda p: Pixel(255 - p.red, 255 - p.green, 255 - p.blue))

    def grayscale(self) -> None:
        """Replace each pixel by the mean of its channels."""

        def to_gray(p: Pixel) -> Pixel:
            gray = (p.red + p.green + p.blue) // 3
            return Pixel(gray, gray, gray)

        self._map(to_gray)

    def brightness(self, value: int) -> None:
        """Add value to every channel, clamped to 0..255."""
        self._map(
            lambda p: Pixel(
                _clamp(p.red + value), _clamp(p.green + value), _clamp(p.blue + value)
            )
        )