from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..errors import InvalidDimensions

DEFAULT_BAND_HEIGHT = 32


@dataclass(frozen=True)
class Band:
    """Horizontal slice ``[y_offset, y_offset + height)`` of a raster."""

    index: int
    y_offset: int
    height: int
    width: int

    @property
    def y_end(self) -> int:
        return self.y_offset + self.height


@dataclass(frozen=True)
class EncodedBand:
    index: int
    y_offset: int
    height: int
    width: int
    payload: bytes

    @property
    def hex(self) -> str:
        return self.payload.hex().upper()

    def markup(self) -> str:
        """Formatted-text form understood by ESC/POS text parsers."""
        return f"<img>{self.hex}</img>\n"


def segment(height: int, width: int, band_height: int = DEFAULT_BAND_HEIGHT) -> List[Band]:
    """Split ``height`` rows into contiguous bands; the last one may be shorter."""
    if band_height <= 0:
        raise InvalidDimensions(f"Band height must be greater than zero, got {band_height}")
    if height <= 0 or width <= 0:
        raise InvalidDimensions(f"Raster must have a positive area, got {width}x{height}")
    bands = []
    for index, y_offset in enumerate(range(0, height, band_height)):
        bands.append(Band(index, y_offset, min(band_height, height - y_offset), width))
    return bands
