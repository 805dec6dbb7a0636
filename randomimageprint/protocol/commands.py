from __future__ import annotations

from enum import IntEnum

import crc8

ESC = 0x1B
GS = 0x1D


# ESC/POS


def escpos_init_cmd() -> bytes:
    """ESC @: reset the printer before a job."""
    return bytes([ESC, 0x40])


def escpos_feed_lines_cmd(lines: int) -> bytes:
    """ESC d n: print the buffer and feed ``lines`` text lines."""
    return bytes([ESC, 0x64, max(0, min(255, lines))])


def escpos_raster_header(width_bytes: int, height: int) -> bytes:
    """GS v 0 m=0 header for a raster bit image of ``width_bytes`` x ``height``."""
    return bytes([GS, 0x76, 0x30, 0x00]) + width_bytes.to_bytes(2, "little") + height.to_bytes(2, "little")


# TiMini / cat printer packets


class Opcode(IntEnum):
    PAPER = 0xA1
    RAW_ROW = 0xA2
    DEVICE_STATE = 0xA3
    DENSITY = 0xA4
    ENERGY = 0xAF
    FEED = 0xBD
    PRINT_MODE = 0xBE
    RLE_ROW = 0xBF


PACKET_MAGIC = b"\x51\x78"
PACKET_END = 0xFF
NEW_FORMAT_PREFIX = b"\x12"


def crc8_value(data: bytes) -> int:
    """Return CRC8 checksum byte for the payload."""
    hasher = crc8.crc8()
    hasher.update(data)
    return hasher.digest()[0]


def cat_packet(opcode: Opcode, payload: bytes, new_format: bool = False) -> bytes:
    """Frame ``payload`` as ``51 78 op 00 len16 payload crc8 ff``.

    Newer firmware expects a leading 0x12 before every packet.
    """
    frame = bytearray(PACKET_MAGIC)
    frame.append(int(opcode))
    frame.append(0x00)
    frame += len(payload).to_bytes(2, "little")
    frame += payload
    frame.append(crc8_value(payload))
    frame.append(PACKET_END)
    if new_format:
        return NEW_FORMAT_PREFIX + bytes(frame)
    return bytes(frame)
