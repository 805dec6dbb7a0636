from .bands import DEFAULT_BAND_HEIGHT, Band, EncodedBand, segment
from .commands import Opcode, cat_packet, crc8_value, escpos_raster_header
from .encoding import (
    DEFAULT_ENCODING,
    ENCODERS,
    BandEncoder,
    EscPosRasterEncoder,
    TiMiniLineEncoder,
    assemble_job,
    check_band_order,
    encode_band,
    encode_bands,
    get_encoder,
    iter_job_frames,
    pack_row,
    rle_row,
)

__all__ = [
    "assemble_job",
    "Band",
    "BandEncoder",
    "cat_packet",
    "check_band_order",
    "crc8_value",
    "DEFAULT_BAND_HEIGHT",
    "DEFAULT_ENCODING",
    "encode_band",
    "encode_bands",
    "EncodedBand",
    "ENCODERS",
    "EscPosRasterEncoder",
    "escpos_raster_header",
    "get_encoder",
    "iter_job_frames",
    "Opcode",
    "pack_row",
    "rle_row",
    "segment",
    "TiMiniLineEncoder",
]
