from __future__ import annotations

import math

import pytest

from randomimageprint.errors import InvalidDimensions, UnsupportedPixelFormat
from randomimageprint.protocol import EncodedBand, encode_bands, segment
from randomimageprint.raster import PixelFormat, Raster

from .helpers import binary_raster


def test_receipt_width_segmentation():
    bands = segment(100, 384, 32)
    assert [band.height for band in bands] == [32, 32, 32, 4]
    assert [band.y_offset for band in bands] == [0, 32, 64, 96]
    assert all(band.width == 384 for band in bands)


def test_spec_scenario_band_count():
    bands = encode_bands(binary_raster(384, 100), 32)
    assert len(bands) == math.ceil(100 / 32)
    assert bands[-1].height == 100 - 3 * 32


@pytest.mark.parametrize("height", [1, 15, 16, 17, 64, 101])
@pytest.mark.parametrize("band_height", [1, 16, 32, 200])
def test_bands_cover_raster_without_gaps(height, band_height):
    bands = segment(height, 8, band_height)
    assert len(bands) == math.ceil(height / band_height)
    covered = []
    for expected_index, band in enumerate(bands):
        assert band.index == expected_index
        assert 0 < band.height <= band_height
        covered.extend(range(band.y_offset, band.y_end))
    assert covered == list(range(height))


def test_invalid_band_height():
    with pytest.raises(InvalidDimensions):
        segment(10, 8, 0)
    with pytest.raises(InvalidDimensions):
        encode_bands(binary_raster(8, 4), -1)


def test_encode_bands_requires_binary_raster():
    with pytest.raises(UnsupportedPixelFormat):
        encode_bands(Raster(bytes(16), 4, 4, PixelFormat.GRAY), 2)


def test_bands_are_encoded_independently():
    raster = binary_raster(16, 6, black_rows=[0, 1])
    first, second, third = encode_bands(raster, 2)
    assert first.payload != second.payload
    assert second.payload == third.payload


def test_encoded_band_hex_and_markup():
    band = EncodedBand(0, 0, 1, 8, bytes([0x1D, 0xAB]))
    assert band.hex == "1DAB"
    assert band.markup() == "<img>1DAB</img>\n"
