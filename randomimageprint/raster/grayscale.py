from __future__ import annotations

from .types import PixelFormat, Raster

RED_WEIGHT = 0.3
GREEN_WEIGHT = 0.59
BLUE_WEIGHT = 0.11


def luminance(red: int, green: int, blue: int) -> int:
    """Return the perceptual gray level of an RGB triple, rounded half up."""
    value = int(RED_WEIGHT * red + GREEN_WEIGHT * green + BLUE_WEIGHT * blue + 0.5)
    return min(255, value)


def to_grayscale(raster: Raster) -> Raster:
    """Map a color raster to a single channel luminance raster.

    Single channel input is already gray and comes back as a GRAY copy.
    """
    if raster.fmt is not PixelFormat.RGB:
        return Raster(bytes(raster.pixels), raster.width, raster.height, PixelFormat.GRAY)
    data = raster.pixels
    out = bytearray(raster.width * raster.height)
    for i in range(len(out)):
        base = i * 3
        out[i] = luminance(data[base], data[base + 1], data[base + 2])
    return Raster(bytes(out), raster.width, raster.height, PixelFormat.GRAY)


class GrayscaleConverter:
    def convert(self, raster: Raster) -> Raster:
        return to_grayscale(raster)
