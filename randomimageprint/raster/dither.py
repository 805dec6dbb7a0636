from __future__ import annotations

from typing import List, Tuple

from ..errors import UnsupportedPixelFormat
from .types import PixelFormat, Raster

THRESHOLD = 128
BLACK = 0
WHITE = 255

# (dx, dy, numerator) over a denominator of 16
DIFFUSION: Tuple[Tuple[int, int, int], ...] = (
    (1, 0, 7),
    (-1, 1, 3),
    (0, 1, 5),
    (1, 1, 1),
)


def _share(error: int, numerator: int) -> int:
    """Return ``error * numerator / 16`` truncated toward zero."""
    scaled = abs(error) * numerator // 16
    return scaled if error >= 0 else -scaled


def _clamp(value: int) -> int:
    if value < 0:
        return 0
    if value > 255:
        return 255
    return value


def floyd_steinberg(raster: Raster) -> Raster:
    """Convert a gray raster to a two-level raster with Floyd-Steinberg diffusion.

    A single forward pass over the rows, left to right. Quantization error is
    pushed into the unvisited neighbours with integer weights truncated
    toward zero, and every accumulated value is saturated to [0, 255].
    """
    if raster.fmt not in (PixelFormat.GRAY, PixelFormat.BINARY):
        raise UnsupportedPixelFormat(f"Dithering needs a single channel raster, got {raster.fmt.value}")
    width = raster.width
    height = raster.height
    pixels: List[int] = list(raster.pixels)
    for y in range(height):
        row = y * width
        for x in range(width):
            index = row + x
            old = pixels[index]
            new = WHITE if old > THRESHOLD else BLACK
            pixels[index] = new
            error = old - new
            if not error:
                continue
            for dx, dy, numerator in DIFFUSION:
                nx = x + dx
                ny = y + dy
                if nx < 0 or nx >= width or ny >= height:
                    continue
                target = ny * width + nx
                pixels[target] = _clamp(pixels[target] + _share(error, numerator))
    return Raster(bytes(pixels), width, height, PixelFormat.BINARY)


class Ditherer:
    def dither(self, raster: Raster) -> Raster:
        return floyd_steinberg(raster)
