from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from PIL import Image

from ..errors import InvalidDimensions, UnsupportedPixelFormat


class PixelFormat(Enum):
    RGB = "RGB"
    GRAY = "GRAY"
    BINARY = "BINARY"

    @property
    def channels(self) -> int:
        return 3 if self is PixelFormat.RGB else 1

    @property
    def image_mode(self) -> str:
        """Pillow mode used when the raster is turned back into an image."""
        return "RGB" if self is PixelFormat.RGB else "L"

    @classmethod
    def from_mode(cls, mode: str) -> "PixelFormat":
        if mode == "RGB":
            return cls.RGB
        if mode == "L":
            return cls.GRAY
        if mode == "1":
            return cls.BINARY
        raise UnsupportedPixelFormat(f"Unsupported image mode: {mode}")


@dataclass(frozen=True)
class Raster:
    """Row-major pixel buffer shared between pipeline stages.

    Binary rasters keep one byte per pixel holding 0 (black) or 255 (white).
    """

    pixels: bytes
    width: int
    height: int
    fmt: PixelFormat = PixelFormat.GRAY

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate dimensions against the buffer length."""
        if not isinstance(self.fmt, PixelFormat):
            raise UnsupportedPixelFormat(f"Unknown pixel format: {self.fmt!r}")
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(f"Raster must have a positive area, got {self.width}x{self.height}")
        expected = self.width * self.height * self.fmt.channels
        if len(self.pixels) != expected:
            raise InvalidDimensions(
                f"Pixel buffer holds {len(self.pixels)} bytes, expected {expected} "
                f"for {self.width}x{self.height} {self.fmt.value}"
            )
        if self.fmt is PixelFormat.BINARY:
            stray = set(self.pixels) - {0, 255}
            if stray:
                raise UnsupportedPixelFormat(
                    f"Binary raster may only hold 0 and 255, found {sorted(stray)[:4]}"
                )

    @property
    def size(self):
        return self.width, self.height

    @property
    def row_stride(self) -> int:
        return self.width * self.fmt.channels

    def row(self, y: int) -> bytes:
        """Return the raw bytes of row ``y``."""
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} out of range for height {self.height}")
        stride = self.row_stride
        return self.pixels[y * stride : (y + 1) * stride]

    def crop_rows(self, y_offset: int, height: int) -> "Raster":
        """Return a new raster holding rows ``[y_offset, y_offset + height)``."""
        if height <= 0 or y_offset < 0 or y_offset + height > self.height:
            raise InvalidDimensions(
                f"Row range {y_offset}+{height} outside raster of height {self.height}"
            )
        stride = self.row_stride
        data = self.pixels[y_offset * stride : (y_offset + height) * stride]
        return Raster(data, self.width, height, self.fmt)

    @classmethod
    def from_image(cls, img: Image.Image) -> "Raster":
        fmt = PixelFormat.from_mode(img.mode)
        if fmt is PixelFormat.BINARY:
            # mode "1" packs 8 pixels per byte; widen to one 0/255 byte each
            img = img.convert("L")
        return cls(img.tobytes(), img.width, img.height, fmt)

    def to_image(self) -> Image.Image:
        return Image.frombytes(self.fmt.image_mode, (self.width, self.height), self.pixels)
