from .loader import SUPPORTED_EXTENSIONS, is_supported, load_image, load_raster, normalize_image

__all__ = ["is_supported", "load_image", "load_raster", "normalize_image", "SUPPORTED_EXTENSIONS"]
