from __future__ import annotations

import logging
from itertools import groupby
from typing import Dict, Iterable, Iterator, List, Optional

from ..errors import UnsupportedPixelFormat
from ..raster.types import PixelFormat, Raster
from .bands import DEFAULT_BAND_HEIGHT, Band, EncodedBand, segment
from .commands import (
    Opcode,
    cat_packet,
    escpos_feed_lines_cmd,
    escpos_init_cmd,
    escpos_raster_header,
)

log = logging.getLogger(__name__)

BLACK = 0
MAX_RUN = 0x7F


def pack_row(row: bytes, lsb_first: bool = False) -> bytes:
    """Pack a row of 0/255 pixels into 1-bit dots, black set, padded white."""
    out = bytearray((len(row) + 7) // 8)
    for x, pix in enumerate(row):
        if pix == BLACK:
            out[x >> 3] |= (1 << (x & 7)) if lsb_first else (0x80 >> (x & 7))
    return bytes(out)


def rle_row(row: bytes) -> List[int]:
    """Run-length code a row: bit 7 is the dot (1 = black), bits 0-6 the run length."""
    codes: List[int] = []
    for pix, group in groupby(row):
        dot = 0x80 if pix == BLACK else 0x00
        full, rest = divmod(sum(1 for _ in group), MAX_RUN)
        codes.extend([dot | MAX_RUN] * full)
        if rest:
            codes.append(dot | rest)
    return codes


class BandEncoder:
    """Turns one band of a binary raster into its wire payload."""

    name = ""

    def prologue(self) -> bytes:
        return b""

    def encode(self, band: Raster) -> bytes:
        raise NotImplementedError

    def epilogue(self) -> bytes:
        return b""


class EscPosRasterEncoder(BandEncoder):
    """ESC/POS ``GS v 0`` raster bit image, one command per band."""

    name = "escpos"

    def __init__(self, feed_lines: int = 3) -> None:
        self.feed_lines = feed_lines

    def prologue(self) -> bytes:
        return escpos_init_cmd()

    def encode(self, band: Raster) -> bytes:
        width_bytes = (band.width + 7) // 8
        out = bytearray(escpos_raster_header(width_bytes, band.height))
        for y in range(band.height):
            out += pack_row(band.row(y))
        return bytes(out)

    def epilogue(self) -> bytes:
        return escpos_feed_lines_cmd(self.feed_lines)


class TiMiniLineEncoder(BandEncoder):
    """Cat printer packets: every row of the band becomes one raw or RLE packet."""

    name = "timini"

    def __init__(
        self,
        compress: bool = False,
        lsb_first: bool = True,
        new_format: bool = False,
        speed: int = 10,
        energy: int = 5000,
        density: int = 3,
        feed_padding: int = 12,
        dpi: int = 200,
    ) -> None:
        self.compress = compress
        self.lsb_first = lsb_first
        self.new_format = new_format
        self.speed = speed
        self.energy = energy
        self.density = max(1, min(5, density))
        self.feed_padding = feed_padding
        self.dpi = dpi

    def _packet(self, opcode: Opcode, payload: bytes) -> bytes:
        return cat_packet(opcode, payload, self.new_format)

    def _feed(self, amount: int) -> bytes:
        return self._packet(Opcode.FEED, bytes([amount & 0xFF]))

    def prologue(self) -> bytes:
        parts = [self._packet(Opcode.DENSITY, bytes([0x30 + self.density]))]
        if self.energy > 0:
            parts.append(self._packet(Opcode.ENERGY, self.energy.to_bytes(2, "little")))
        parts.append(self._packet(Opcode.PRINT_MODE, b"\x00"))
        parts.append(self._feed(self.speed))
        return b"".join(parts)

    def encode_row(self, row: bytes) -> bytes:
        if self.compress:
            codes = rle_row(row)
            if len(codes) <= (len(row) + 7) // 8:
                return self._packet(Opcode.RLE_ROW, bytes(codes))
        return self._packet(Opcode.RAW_ROW, pack_row(row, self.lsb_first))

    def encode(self, band: Raster) -> bytes:
        return b"".join(self.encode_row(band.row(y)) for y in range(band.height))

    def epilogue(self) -> bytes:
        paper = self._packet(Opcode.PAPER, b"\x48\x00" if self.dpi == 300 else b"\x30\x00")
        feed = self._feed(self.feed_padding)
        return feed + paper + paper + feed + self._packet(Opcode.DEVICE_STATE, b"\x00")


ENCODERS: Dict[str, type] = {
    EscPosRasterEncoder.name: EscPosRasterEncoder,
    TiMiniLineEncoder.name: TiMiniLineEncoder,
}
DEFAULT_ENCODING = EscPosRasterEncoder.name


def get_encoder(name: str) -> BandEncoder:
    encoder_cls = ENCODERS.get(name)
    if not encoder_cls:
        raise ValueError(f"Unknown encoding '{name}'. Choose from: " + ", ".join(sorted(ENCODERS)))
    return encoder_cls()


def encode_band(raster: Raster, band: Band, encoder: BandEncoder) -> EncodedBand:
    payload = encoder.encode(raster.crop_rows(band.y_offset, band.height))
    return EncodedBand(band.index, band.y_offset, band.height, band.width, payload)


def encode_bands(
    raster: Raster,
    band_height: int = DEFAULT_BAND_HEIGHT,
    encoder: Optional[BandEncoder] = None,
) -> List[EncodedBand]:
    """Slice a binary raster into bands and encode each, top to bottom."""
    if raster.fmt is not PixelFormat.BINARY:
        raise UnsupportedPixelFormat(f"Band encoding needs a binary raster, got {raster.fmt.value}")
    encoder = encoder or get_encoder(DEFAULT_ENCODING)
    bands = segment(raster.height, raster.width, band_height)
    encoded = [encode_band(raster, band, encoder) for band in bands]
    log.debug("Encoded %d %s bands of up to %d rows", len(encoded), encoder.name, band_height)
    return encoded


def check_band_order(bands: Iterable[EncodedBand]) -> List[EncodedBand]:
    """Return the bands as a list, raising if indices are not ``0..n-1`` in order."""
    ordered = list(bands)
    for expected, band in enumerate(ordered):
        if band.index != expected:
            raise ValueError(f"Band {band.index} out of order, expected {expected}")
    return ordered


def iter_job_frames(bands: Iterable[EncodedBand], encoder: BandEncoder) -> Iterator[bytes]:
    """Yield the job prologue, each band payload in index order, then the epilogue.

    Order is checked before the first frame, so a bad sequence yields nothing.
    """
    ordered = check_band_order(bands)
    prologue = encoder.prologue()
    if prologue:
        yield prologue
    for band in ordered:
        yield band.payload
    epilogue = encoder.epilogue()
    if epilogue:
        yield epilogue


def assemble_job(bands: Iterable[EncodedBand], encoder: BandEncoder) -> bytes:
    return b"".join(iter_job_frames(bands, encoder))
