from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .errors import InvalidDimensions
from .protocol import (
    DEFAULT_BAND_HEIGHT,
    DEFAULT_ENCODING,
    ENCODERS,
    BandEncoder,
    EncodedBand,
    assemble_job,
    encode_bands,
    get_encoder,
)
from .raster import DEFAULT_RESAMPLE, Scaler, floyd_steinberg, to_grayscale
from .raster.types import Raster
from .rendering import SUPPORTED_EXTENSIONS, is_supported, load_raster

log = logging.getLogger(__name__)

DEFAULT_TARGET_WIDTH = 384


@dataclass
class PrintSettings:
    target_width: int = DEFAULT_TARGET_WIDTH
    band_height: int = DEFAULT_BAND_HEIGHT
    encoding: str = DEFAULT_ENCODING
    resample: str = DEFAULT_RESAMPLE

    def validate(self) -> None:
        if self.target_width <= 0:
            raise InvalidDimensions(f"Target width must be greater than zero, got {self.target_width}")
        if self.band_height <= 0:
            raise InvalidDimensions(f"Band height must be greater than zero, got {self.band_height}")
        if self.encoding not in ENCODERS:
            raise ValueError(f"Unknown encoding '{self.encoding}'. Choose from: " + ", ".join(sorted(ENCODERS)))


class PrintJobBuilder:
    """Runs grayscale, scaling, dithering and band encoding for one image."""

    def __init__(self, settings: Optional[PrintSettings] = None, encoder: Optional[BandEncoder] = None) -> None:
        self.settings = settings or PrintSettings()
        self.settings.validate()
        self.encoder = encoder or get_encoder(self.settings.encoding)
        self.scaler = Scaler(self.settings.target_width, self.settings.resample)

    def prepare(self, raster: Raster) -> Raster:
        """Return the two-level raster that will be printed."""
        gray = to_grayscale(raster)
        log.info("Grayscale %dx%d", gray.width, gray.height)
        scaled = self.scaler.scale(gray)
        log.info("Scaled to %dx%d", scaled.width, scaled.height)
        dithered = floyd_steinberg(scaled)
        log.info("Dithering applied")
        return dithered

    def build_bands(self, raster: Raster) -> List[EncodedBand]:
        bands = encode_bands(self.prepare(raster), self.settings.band_height, self.encoder)
        log.info("Encoded %d bands", len(bands))
        return bands

    def build_job(self, raster: Raster) -> bytes:
        return assemble_job(self.build_bands(raster), self.encoder)

    def build_markup(self, raster: Raster) -> str:
        return "".join(band.markup() for band in self.build_bands(raster))

    def load(self, path: str) -> Raster:
        """Load a supported image file as the job's source raster."""
        self._validate_input_path(path)
        return load_raster(path)

    def build_from_file(self, path: str) -> bytes:
        return self.build_job(self.load(path))

    @staticmethod
    def _validate_input_path(path: str) -> None:
        if not is_supported(path):
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
