from __future__ import annotations

from randomimageprint.raster import GrayscaleConverter, PixelFormat, Raster, luminance, to_grayscale


def test_luminance_weights():
    assert luminance(255, 0, 0) == 77  # 76.5 rounds up
    assert luminance(0, 255, 0) == 150
    assert luminance(0, 0, 255) == 28
    assert luminance(255, 255, 255) == 255
    assert luminance(0, 0, 0) == 0


def test_converts_rgb_to_gray_with_same_dimensions():
    raster = Raster(bytes([255, 0, 0, 10, 20, 30, 0, 0, 0, 200, 200, 200]), 2, 2, PixelFormat.RGB)
    gray = to_grayscale(raster)
    assert gray.fmt is PixelFormat.GRAY
    assert gray.size == (2, 2)
    assert list(gray.pixels) == [77, 18, 0, 200]


def test_idempotent_on_neutral_pixels():
    values = list(range(256))
    data = bytes(v for value in values for v in (value, value, value))
    raster = Raster(data, len(values), 1, PixelFormat.RGB)
    once = GrayscaleConverter().convert(raster)
    twice = GrayscaleConverter().convert(once)
    assert list(once.pixels) == values
    assert twice == once
