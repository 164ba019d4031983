"""Reading, writing and filtering of 8-bit palette BMP images."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Sequence, Union

HEADER_SIZE = 54
COLOR_TABLE_SIZE = 1024
PIXELS_OFFSET = HEADER_SIZE + COLOR_TABLE_SIZE

_WIDTH_AT = 18
_HEIGHT_AT = 22
_BITS_AT = 28
_DATA_SIZE_AT = 34
_FILE_SIZE_AT = 2

StrPath = Union[str, "PathLike[str]"]


class BmpFormatError(ValueError):
    """Raised when a file is not a BMP image of the expected kind."""


def _row_padding(width: int) -> int:
    return (4 - width % 4) % 4


def _default_header() -> bytearray:
    header = bytearray(HEADER_SIZE)
    struct.pack_into(
        "<2sIHHIIIIHHIIiiII",
        header,
        0,
        b"BM",
        0,
        0,
        0,
        PIXELS_OFFSET,
        40,
        0,
        0,
        1,
        8,
        0,
        0,
        0,
        0,
        256,
        0,
    )
    return header


def _default_color_table() -> bytes:
    return bytes(v for level in range(256) for v in (level, level, level, 0))


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _clamp(value: int) -> int:
    return 255 if value > 255 else 0 if value < 0 else value


@dataclass
class Bitmap8:
    """An 8-bit BMP image: raw header, colour table and one byte per pixel."""

    width: int
    height: int
    data: bytearray
    header: bytearray = field(default_factory=_default_header)
    color_table: bytes = field(default_factory=_default_color_table)
    color_depth: int = 8
    data_size: int = 0

    def __post_init__(self) -> None:
        self.data = bytearray(self.data)
        self.header = bytearray(self.header)
        self.color_table = bytes(self.color_table)
        if len(self.data) != self.width * self.height:
            raise ValueError(
                f"pixel data holds {len(self.data)} bytes, "
                f"expected {self.width * self.height}"
            )
        if len(self.header) != HEADER_SIZE:
            raise ValueError(f"header must be {HEADER_SIZE} bytes")
        if len(self.color_table) != COLOR_TABLE_SIZE:
            raise ValueError(f"colour table must be {COLOR_TABLE_SIZE} bytes")

    @classmethod
    def load(cls, path: StrPath) -> "Bitmap8":
        """Read an 8-bit BMP file."""
        raw = Path(path).read_bytes()
        if len(raw) < HEADER_SIZE:
            raise BmpFormatError(f"{path}: file too short for a BMP header")
        header = bytearray(raw[:HEADER_SIZE])
        width, height = struct.unpack_from("<II", header, _WIDTH_AT)
        (depth,) = struct.unpack_from("<H", header, _BITS_AT)
        (data_size,) = struct.unpack_from("<I", header, _DATA_SIZE_AT)
        if depth != 8:
            raise BmpFormatError(f"unsupported image format ({depth} bits)")

        color_table = raw[HEADER_SIZE:PIXELS_OFFSET]
        if len(color_table) < COLOR_TABLE_SIZE:
            raise BmpFormatError(f"{path}: truncated colour table")

        stride = width + _row_padding(width)
        data = bytearray()
        for row_index in range(height):
            start = PIXELS_OFFSET + row_index * stride
            row = raw[start : start + width]
            if len(row) < width:
                raise BmpFormatError(f"{path}: truncated pixel data")
            data += row

        return cls(
            width=width,
            height=height,
            data=data,
            header=header,
            color_table=color_table,
            color_depth=depth,
            data_size=data_size,
        )

    def save(self, path: StrPath) -> None:
        """Write the image as an 8-bit BMP file, updating the header sizes."""
        padding = _row_padding(self.width)
        new_data_size = (self.width + padding) * self.height
        struct.pack_into("<I", self.header, _FILE_SIZE_AT, PIXELS_OFFSET + new_data_size)
        struct.pack_into("<I", self.header, _DATA_SIZE_AT, new_data_size)
        struct.pack_into("<I", self.header, _WIDTH_AT, self.width)
        struct.pack_into("<I", self.header, _HEIGHT_AT, self.height)

        out = bytearray(self.header)
        out += self.color_table
        pad = bytes(padding)
        for start in range(0, len(self.data), self.width or 1):
            out += self.data[start : start + self.width]
            out += pad
        Path(path).write_bytes(bytes(out))

    def info(self) -> str:
        """Describe the image's dimensions, data size and colour depth."""
        return "\n".join(
            [
                "Informations de l'image :",
                f"- Dimensions : {self.width} x {self.height}",
                f"- Taille des données : {self.data_size} octets",
                f"- Profondeur de couleur : {self.color_depth} bits",
            ]
        )

    def negative(self) -> None:
        """Invert every pixel."""
        self.data[:] = bytes(255 - v for v in self.data)

    def brightness(self, value: int) -> None:
        """Add value to every pixel, clamped to 0..255."""
        self.data[:] = bytes(_clamp(v + value) for v in self.data)

    def threshold(self, threshold: int) -> None:
        """Set pixels at or above threshold to 255 and the rest to 0."""
        self.data[:] = bytes(255 if v >= threshold else 0 for v in self.data)

    def apply_filter(self, kernel: Sequence[Sequence[float]]) -> None:
        """Convolve the interior pixels with a 3x3 kernel; borders are kept."""
        rows = [list(row) for row in kernel]
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError("kernel must be 3x3")
        weights = [[_to_float32(float(v)) for v in row] for row in rows]
        half = len(weights) // 2
        width, height = self.width, self.height
        source = bytes(self.data)

        for y in range(1, height - 1):
            for x in range(1, width - 1):
                total = 0.0
                for dy, weight_row in enumerate(weights):
                    base = (y + dy - half) * width + x - half
                    for dx, weight in enumerate(weight_row):
                        product = _to_float32(source[base + dx] * weight)
                        total = _to_float32(total + product)
                if total < 0:
                    total = 0.0
                if total > 255:
                    total = 255.0
                self.data[y * width + x] = int(total)