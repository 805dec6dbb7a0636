from .dither import Ditherer, floyd_steinberg
from .grayscale import GrayscaleConverter, luminance, to_grayscale
from .scaling import DEFAULT_RESAMPLE, RESAMPLE_FILTERS, Scaler, ScalingSpec, scale_to_width
from .types import PixelFormat, Raster

__all__ = [
    "DEFAULT_RESAMPLE",
    "Ditherer",
    "floyd_steinberg",
    "GrayscaleConverter",
    "luminance",
    "PixelFormat",
    "Raster",
    "RESAMPLE_FILTERS",
    "Scaler",
    "ScalingSpec",
    "scale_to_width",
    "to_grayscale",
]
