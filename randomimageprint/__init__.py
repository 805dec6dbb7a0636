from .errors import InvalidDimensions, RasterError, UnsupportedPixelFormat
from .printing import PrintJobBuilder, PrintSettings
from .raster import PixelFormat, Raster

__all__ = [
    "InvalidDimensions",
    "PixelFormat",
    "PrintJobBuilder",
    "PrintSettings",
    "Raster",
    "RasterError",
    "UnsupportedPixelFormat",
]
