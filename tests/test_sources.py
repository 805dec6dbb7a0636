from __future__ import annotations

import random

import pytest
from PIL import Image

from randomimageprint.raster import PixelFormat
from randomimageprint.rendering import load_raster, normalize_image
from randomimageprint.sources import RandomImageSource


def test_candidates_filter_by_extension(image_dir):
    source = RandomImageSource(str(image_dir))
    names = [path.rsplit("/", 1)[-1] for path in source.candidates()]
    assert names == ["a.png", "b.JPG"]


def test_pick_uses_rng(image_dir):
    source = RandomImageSource(str(image_dir), rng=random.Random(0))
    picks = {source.pick() for _ in range(20)}
    assert picks <= set(source.candidates())


def test_next_raster_loads_image(image_dir):
    raster = RandomImageSource(str(image_dir), rng=random.Random(3)).next_raster()
    assert raster is not None
    assert raster.size == (100, 50)


def test_empty_directory_has_no_image(tmp_path):
    source = RandomImageSource(str(tmp_path))
    assert source.pick() is None
    assert source.next_raster() is None


def test_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        RandomImageSource(str(tmp_path / "nope")).candidates()


def test_transparency_is_flattened_onto_white():
    img = Image.new("RGBA", (2, 1), (0, 0, 0, 0))
    img.putpixel((1, 0), (0, 0, 0, 255))
    flat = normalize_image(img)
    assert flat.mode == "RGB"
    assert flat.getpixel((0, 0)) == (255, 255, 255)
    assert flat.getpixel((1, 0)) == (0, 0, 0)


def test_load_raster_keeps_grayscale(tmp_path):
    path = tmp_path / "g.png"
    Image.new("L", (4, 2), 77).save(path)
    raster = load_raster(str(path))
    assert raster.fmt is PixelFormat.GRAY
    assert set(raster.pixels) == {77}


def test_palette_alpha_is_flattened_onto_white():
    img = Image.new("PA", (2, 1))
    img.putpalette([0, 0, 0] * 256)
    img.putpixel((0, 0), (0, 0))
    img.putpixel((1, 0), (0, 255))
    flat = normalize_image(img)
    assert flat.mode == "RGB"
    assert flat.getpixel((0, 0)) == (255, 255, 255)
    assert flat.getpixel((1, 0)) == (0, 0, 0)
