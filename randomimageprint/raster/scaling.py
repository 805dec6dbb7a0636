from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from PIL import Image

from ..errors import InvalidDimensions
from .types import PixelFormat, Raster

RESAMPLE_FILTERS: Dict[str, int] = {
    "nearest": Image.NEAREST,
    "bilinear": Image.BILINEAR,
    "bicubic": Image.BICUBIC,
    "lanczos": Image.LANCZOS,
}
DEFAULT_RESAMPLE = "bilinear"


@dataclass(frozen=True)
class ScalingSpec:
    target_width: int

    def __post_init__(self) -> None:
        if self.target_width <= 0:
            raise InvalidDimensions(f"Target width must be greater than zero, got {self.target_width}")

    def target_height(self, source_width: int, source_height: int) -> int:
        """Height that keeps the source aspect ratio, rounded half up."""
        if source_width <= 0 or source_height <= 0:
            raise InvalidDimensions(f"Source must have a positive area, got {source_width}x{source_height}")
        numerator = self.target_width * source_height
        return max(1, (2 * numerator + source_width) // (2 * source_width))


class Scaler:
    def __init__(self, target_width: int, resample: str = DEFAULT_RESAMPLE) -> None:
        if resample not in RESAMPLE_FILTERS:
            raise ValueError(
                f"Unknown resample filter '{resample}'. Choose from: " + ", ".join(sorted(RESAMPLE_FILTERS))
            )
        self.spec = ScalingSpec(target_width)
        self.resample = resample

    def scale(self, raster: Raster) -> Raster:
        """Resize ``raster`` to the target width, preserving aspect ratio."""
        width = self.spec.target_width
        height = self.spec.target_height(raster.width, raster.height)
        fmt = PixelFormat.RGB if raster.fmt is PixelFormat.RGB else PixelFormat.GRAY
        if (width, height) == raster.size:
            return Raster(bytes(raster.pixels), width, height, fmt)
        img = raster.to_image().resize((width, height), RESAMPLE_FILTERS[self.resample])
        return Raster(img.tobytes(), width, height, fmt)


def scale_to_width(raster: Raster, target_width: int, resample: str = DEFAULT_RESAMPLE) -> Raster:
    return Scaler(target_width, resample).scale(raster)
