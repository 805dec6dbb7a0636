from __future__ import annotations


class RasterError(ValueError):
    """Base class for errors raised by the raster pipeline."""


class InvalidDimensions(RasterError):
    """Zero-area raster, or a non-positive target width or band height."""


class UnsupportedPixelFormat(RasterError):
    """The raster's channel layout is not accepted by the stage."""
