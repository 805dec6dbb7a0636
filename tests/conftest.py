from __future__ import annotations

import pytest
from PIL import Image


@pytest.fixture
def gradient_image() -> Image.Image:
    img = Image.new("RGB", (100, 50))
    for x in range(100):
        for y in range(50):
            img.putpixel((x, y), (x * 2, y * 5, 128))
    return img


@pytest.fixture
def image_dir(tmp_path, gradient_image):
    gradient_image.save(tmp_path / "a.png")
    gradient_image.convert("L").save(tmp_path / "b.JPG", format="JPEG")
    (tmp_path / "notes.txt").write_text("not an image", encoding="utf-8")
    return tmp_path
