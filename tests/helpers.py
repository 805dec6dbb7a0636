from __future__ import annotations

from randomimageprint.raster import PixelFormat, Raster


def gray_raster(rows):
    height = len(rows)
    width = len(rows[0])
    data = bytes(value for row in rows for value in row)
    return Raster(data, width, height, PixelFormat.GRAY)


def binary_raster(width, height, black_rows=()):
    data = bytearray([255] * width * height)
    for y in black_rows:
        data[y * width : (y + 1) * width] = bytes(width)
    return Raster(bytes(data), width, height, PixelFormat.BINARY)
