from __future__ import annotations

import asyncio
import logging
import time
from typing import Iterable, List

import serial

from ..protocol import BandEncoder, EncodedBand, check_band_order

SERIAL_BAUD_RATE = 115200

log = logging.getLogger(__name__)


class SerialTransport:
    """Streams a print job to a serial port (USB-serial or a bound rfcomm device).

    The job is sent as frames: the encoder's prologue, every band payload in
    index order, then the epilogue. Frames are split into ``chunk_size``
    writes with ``interval_ms`` between them so small printer buffers keep up.
    """

    def __init__(self, port: str, baud_rate: int = SERIAL_BAUD_RATE) -> None:
        self._port = port
        self._baud_rate = baud_rate

    async def send(
        self,
        bands: Iterable[EncodedBand],
        encoder: BandEncoder,
        chunk_size: int,
        interval_ms: int,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("Chunk size must be greater than zero")
        ordered = check_band_order(bands)
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._send_blocking, ordered, encoder, chunk_size, interval_ms)

    def _send_blocking(
        self,
        bands: List[EncodedBand],
        encoder: BandEncoder,
        chunk_size: int,
        interval_ms: int,
    ) -> None:
        interval = max(0.0, interval_ms / 1000.0)
        try:
            with serial.Serial(self._port, self._baud_rate, timeout=1, write_timeout=5) as port:
                self._write_frame(port, encoder.prologue(), chunk_size, interval)
                for band in bands:
                    log.debug("Band %d: rows %d-%d, %d bytes", band.index, band.y_offset,
                              band.y_offset + band.height - 1, len(band.payload))
                    self._write_frame(port, band.payload, chunk_size, interval)
                self._write_frame(port, encoder.epilogue(), chunk_size, interval)
                port.flush()
        except serial.SerialException as exc:
            raise RuntimeError(f"Serial connection failed: {exc}") from exc
        log.info("Sent %d bands to %s", len(bands), self._port)

    @staticmethod
    def _write_frame(port, frame: bytes, chunk_size: int, interval: float) -> None:
        view = memoryview(frame)
        for offset in range(0, len(view), chunk_size):
            port.write(view[offset : offset + chunk_size])
            if interval:
                time.sleep(interval)
