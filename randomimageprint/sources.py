from __future__ import annotations

import logging
import os
import random
from typing import List, Optional

from .raster.types import Raster
from .rendering import is_supported, load_raster

log = logging.getLogger(__name__)


class RandomImageSource:
    """Picks one supported image at random from a directory."""

    def __init__(self, directory: str, rng: Optional[random.Random] = None) -> None:
        self.directory = directory
        self._rng = rng or random.Random()

    def candidates(self) -> List[str]:
        if not os.path.isdir(self.directory):
            raise FileNotFoundError(f"Image directory not found: {self.directory}")
        names = sorted(os.listdir(self.directory))
        paths = [os.path.join(self.directory, name) for name in names]
        return [path for path in paths if os.path.isfile(path) and is_supported(path)]

    def pick(self) -> Optional[str]:
        paths = self.candidates()
        if not paths:
            log.info("No images found in %s", self.directory)
            return None
        path = self._rng.choice(paths)
        log.info("Selected %s (%d candidates)", path, len(paths))
        return path

    def next_raster(self) -> Optional[Raster]:
        path = self.pick()
        if path is None:
            return None
        return load_raster(path)
