"""RGBA images and tiles of pixel indices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np
from PIL import Image as _PILImage

RGBA_SIZE = 4


@dataclass(frozen=True)
class TileIterator:
    """A rectangle of pixel indices, iterated row by row."""

    start: tuple[int, int]
    end: tuple[int, int]

    def __iter__(self) -> Iterator[tuple[int, int]]:
        sx, sy = self.start
        ex, ey = self.end
        for y in range(sy, ey):
            for x in range(sx, ex):
                yield (x, y)

    def __len__(self) -> int:
        sx, sy = self.start
        ex, ey = self.end
        return max(0, ex - sx) * max(0, ey - sy)


def _color(value) -> np.ndarray:
    channels = [int(c) for c in value]
    if len(channels) != RGBA_SIZE:
        raise ValueError("a color needs exactly four RGBA channels")
    if any(c < 0 or c > 255 for c in channels):
        raise ValueError("color channels must lie in 0..255")
    return np.array(channels, dtype=np.uint8)


class Image:
    """An RGBA image with 8 bits per channel, stored top row first."""

    def __init__(self, width: int = 0, height: int = 0):
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self._pixels = np.zeros((height, width, RGBA_SIZE), dtype=np.uint8)
        self._offset = (0, 0)

    @classmethod
    def from_file(cls, filename) -> "Image":
        """Create an image from a PNG file."""
        image = cls()
        image.load(filename)
        return image

    def load(self, filename) -> None:
        """Replace size and pixels with the contents of an image file."""
        with _PILImage.open(filename) as source:
            rgba = source.convert("RGBA")
            self._pixels = np.array(rgba, dtype=np.uint8)

    def save(self, filename) -> None:
        """Write the image as a PNG file."""
        if self.num_pixels == 0:
            raise ValueError("cannot save an empty image")
        _PILImage.fromarray(np.ascontiguousarray(self._pixels)).save(
            filename, format="PNG"
        )

    def resize(self, width: int, height: int) -> None:
        """Change the size, keeping the pixel buffer's leading contents."""
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        flat = self._pixels.reshape(-1, RGBA_SIZE)
        resized = np.zeros((width * height, RGBA_SIZE), dtype=np.uint8)
        keep = min(len(flat), len(resized))
        resized[:keep] = flat[:keep]
        self._pixels = resized.reshape(height, width, RGBA_SIZE)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def num_pixels(self) -> int:
        return self.width * self.height

    @property
    def pixel_bytes(self) -> int:
        return RGBA_SIZE

    @property
    def total_bytes(self) -> int:
        return self.num_pixels * RGBA_SIZE

    @property
    def pixels(self) -> np.ndarray:
        """The pixel array, shaped (height, width, 4), top row first."""
        return self._pixels

    @property
    def offset(self) -> tuple[int, int]:
        """Where this image lands when injected into a larger one."""
        return self._offset

    @offset.setter
    def offset(self, value) -> None:
        x, y = (int(v) for v in value)
        if x < 0 or y < 0:
            raise ValueError("offset must not be negative")
        self._offset = (x, y)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")

    def __getitem__(self, index) -> tuple[int, int, int, int]:
        x, y = index
        self._check(x, y)
        return tuple(int(c) for c in self._pixels[y, x])

    def __setitem__(self, index, color) -> None:
        x, y = index
        self._check(x, y)
        self._pixels[y, x] = _color(color)

    def get_bottom_up(self, index) -> tuple[int, int, int, int]:
        """Read a pixel with y counted from the bottom row."""
        x, y = index
        return self[x, self.height - y - 1]

    def set_bottom_up(self, index, color) -> None:
        """Write a pixel with y counted from the bottom row."""
        x, y = index
        self[x, self.height - y - 1] = color

    def to_tiles(self, tile_size) -> list[TileIterator]:
        """Split the image into tiles, row of tiles by row of tiles."""
        tx, ty = (int(v) for v in tile_size)
        if tx <= 0 or ty <= 0:
            raise ValueError("tile size must be positive")
        width, height = self.size
        tiles = []
        for j in range(math.ceil(height / ty)):
            for i in range(math.ceil(width / tx)):
                start = (tx * i, ty * j)
                end = (min(start[0] + tx, width), min(start[1] + ty, height))
                tiles.append(TileIterator(start, end))
        return tiles

    def inject(self, other: "Image") -> None:
        """Copy a smaller image in at its offset, clipping at the edges."""
        ow, oh = other.size
        if ow > self.width or oh > self.height:
            raise ValueError("injected image is larger than the target")
        ox, oy = other.offset
        x1 = min(ox + ow, self.width)
        y1 = min(oy + oh, self.height)
        if x1 > ox and y1 > oy:
            self._pixels[oy:y1, ox:x1] = other._pixels[: y1 - oy, : x1 - ox]