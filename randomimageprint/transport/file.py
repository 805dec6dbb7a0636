from __future__ import annotations

import asyncio
import sys
from typing import Iterable

from ..protocol import BandEncoder, EncodedBand, iter_job_frames


class FileTransport:
    """Writes a job to a file, or to stdout when the path is ``-``."""

    def __init__(self, path: str) -> None:
        self._path = path

    async def send(
        self,
        bands: Iterable[EncodedBand],
        encoder: BandEncoder,
        chunk_size: int = 0,
        interval_ms: int = 0,
    ) -> None:
        await self.write(b"".join(iter_job_frames(bands, encoder)))

    async def write(self, data: bytes) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._write_blocking, data)

    def _write_blocking(self, data: bytes) -> None:
        if self._path == "-":
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
            return
        with open(self._path, "wb") as handle:
            handle.write(data)
