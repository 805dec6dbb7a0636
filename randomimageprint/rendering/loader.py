from __future__ import annotations

import os
from typing import Set

from PIL import Image, ImageOps

from ..raster.types import Raster

SUPPORTED_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg"}


def is_supported(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in SUPPORTED_EXTENSIONS


def load_image(path: str) -> Image.Image:
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img)
        return img.copy()


def normalize_image(img: Image.Image) -> Image.Image:
    """Bring an image into one of the modes a Raster accepts.

    Transparent areas print as paper, so alpha is flattened onto white.
    """
    if img.mode in ("RGBA", "LA", "PA") or (img.mode == "P" and "transparency" in img.info):
        img = img.convert("RGBA")
        white = Image.new("RGBA", img.size, (255, 255, 255, 255))
        return Image.alpha_composite(white, img).convert("RGB")
    if img.mode not in ("RGB", "L", "1"):
        return img.convert("RGB")
    return img


def load_raster(path: str) -> Raster:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
    return Raster.from_image(normalize_image(load_image(path)))
