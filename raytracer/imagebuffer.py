"""An in-memory RGB image that can be written out as a PNG file."""

from __future__ import annotations

import os
import struct
import zlib
from typing import Union

from raytracer.vector import Vec3

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _png_chunk(kind: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(kind + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + kind + payload + struct.pack(">I", crc)


def _channel_byte(value: float) -> int:
    return int(255 * min(max(value, 0.0), 1.0))


class ImageBuffer:
    """Pixel colours for an image whose (0, 0) is the bottom-left pixel.

    Colours are RGB vectors with components nominally in ``[0, 1]``.  The
    buffer keeps track of the range of rows changed since the last call to
    :meth:`reset_modified`.
    """

    def __init__(self) -> None:
        self._width = 0
        self._height = 0
        self._pixels: list[Vec3] = []
        self.modified = False
        self.modified_lower = 0
        self.modified_upper = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def initialize(self, width: int, height: int) -> None:
        """Resize to ``width`` x ``height`` and fill with a grey checkerboard."""
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self._width = width
        self._height = height
        self._pixels = [
            Vec3(*(3 * (0.2 + (0.1 if ((y >> 4) + (x >> 4)) & 1 else 0.0),)))
            for y in range(height)
            for x in range(width)
        ]
        self.reset_modified()

    def reset_modified(self) -> None:
        """Forget which rows have been changed."""
        self.modified = False
        self.modified_lower = self._height
        self.modified_upper = 0

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height} image")
        return y * self._width + x

    def set_pixel(self, x: int, y: int, colour: Vec3) -> None:
        """Store ``colour`` at pixel ``(x, y)`` and mark its row as modified."""
        self._pixels[self._index(x, y)] = colour
        self.modified = True
        self.modified_lower = min(self.modified_lower, y)
        self.modified_upper = max(self.modified_upper, y + 1)

    def get_pixel(self, x: int, y: int) -> Vec3:
        """Colour stored at pixel ``(x, y)``."""
        return self._pixels[self._index(x, y)]

    def encode_png(self) -> bytes:
        """Encode the image as an 8-bit RGB PNG, top row first."""
        if self._width == 0 or self._height == 0:
            raise ValueError("trying to save an uninitialized image")
        rows = bytearray()
        for y in reversed(range(self._height)):
            rows.append(0)
            start = y * self._width
            for colour in self._pixels[start:start + self._width]:
                rows.extend(_channel_byte(c) for c in colour)
        header = struct.pack(">IIBBBBB", self._width, self._height, 8, 2, 0, 0, 0)
        return b"".join((
            _PNG_SIGNATURE,
            _png_chunk(b"IHDR", header),
            _png_chunk(b"IDAT", zlib.compress(bytes(rows))),
            _png_chunk(b"IEND", b""),
        ))

    def save_to_file(self, path: Union[str, os.PathLike]) -> None:
        """Write the image to ``path`` as a PNG file."""
        data = self.encode_png()
        print(f"ImageBuffer saving image to {os.fspath(path)}...")
        with open(path, "wb") as handle:
            handle.write(data)