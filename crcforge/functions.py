"""One-shot CRC helpers that compute a checksum over a whole buffer."""

from __future__ import annotations

from collections.abc import Iterable

from .crc import CRC8, CRC12, CRC16, CRC32, CRC64, CRCBase
from .parameters import (
    CRC8_DEFAULT,
    CRC12_DEFAULT,
    CRC16_CCITT_FALSE,
    CRC16_DEFAULT,
    CRC32_DEFAULT,
    CRC64_DEFAULT,
)

__all__ = [
    "calc_crc8",
    "calc_crc12",
    "calc_crc16",
    "calc_crc32",
    "calc_crc64",
    "crc16_ccitt",
]

Data = bytes | bytearray | memoryview | Iterable[int]


def _run(engine: CRCBase, data: Data) -> int:
    engine.add(data)
    return engine.calc()


def calc_crc8(
    data: Data,
    polynome: int = CRC8_DEFAULT.polynome,
    initial: int = CRC8_DEFAULT.initial,
    xor_out: int = CRC8_DEFAULT.xor_out,
    reverse_in: bool = CRC8_DEFAULT.reverse_in,
    reverse_out: bool = CRC8_DEFAULT.reverse_out,
) -> int:
    """Return the 8-bit CRC of ``data``."""
    return _run(CRC8(polynome, initial, xor_out, reverse_in, reverse_out), data)


def calc_crc12(
    data: Data,
    polynome: int = CRC12_DEFAULT.polynome,
    initial: int = CRC12_DEFAULT.initial,
    xor_out: int = CRC12_DEFAULT.xor_out,
    reverse_in: bool = CRC12_DEFAULT.reverse_in,
    reverse_out: bool = CRC12_DEFAULT.reverse_out,
) -> int:
    """Return the 12-bit CRC of ``data``."""
    return _run(CRC12(polynome, initial, xor_out, reverse_in, reverse_out), data)


def calc_crc16(
    data: Data,
    polynome: int = CRC16_DEFAULT.polynome,
    initial: int = CRC16_DEFAULT.initial,
    xor_out: int = CRC16_DEFAULT.xor_out,
    reverse_in: bool = CRC16_DEFAULT.reverse_in,
    reverse_out: bool = CRC16_DEFAULT.reverse_out,
) -> int:
    """Return the 16-bit CRC of ``data``."""
    return _run(CRC16(polynome, initial, xor_out, reverse_in, reverse_out), data)


def calc_crc32(
    data: Data,
    polynome: int = CRC32_DEFAULT.polynome,
    initial: int = CRC32_DEFAULT.initial,
    xor_out: int = CRC32_DEFAULT.xor_out,
    reverse_in: bool = CRC32_DEFAULT.reverse_in,
    reverse_out: bool = CRC32_DEFAULT.reverse_out,
) -> int:
    """Return the 32-bit CRC of ``data``."""
    return _run(CRC32(polynome, initial, xor_out, reverse_in, reverse_out), data)


def calc_crc64(
    data: Data,
    polynome: int = CRC64_DEFAULT.polynome,
    initial: int = CRC64_DEFAULT.initial,
    xor_out: int = CRC64_DEFAULT.xor_out,
    reverse_in: bool = CRC64_DEFAULT.reverse_in,
    reverse_out: bool = CRC64_DEFAULT.reverse_out,
) -> int:
    """Return the 64-bit CRC of ``data``."""
    return _run(CRC64(polynome, initial, xor_out, reverse_in, reverse_out), data)


def crc16_ccitt(
    data: Data,
    polynome: int = CRC16_CCITT_FALSE.polynome,
    initial: int = CRC16_CCITT_FALSE.initial,
    xor_out: int = CRC16_CCITT_FALSE.xor_out,
    reverse_in: bool = CRC16_CCITT_FALSE.reverse_in,
    reverse_out: bool = CRC16_CCITT_FALSE.reverse_out,
) -> int:
    """Return the 16-bit CRC of ``data``, defaulting to CRC-16/CCITT-FALSE."""
    return calc_crc16(data, polynome, initial, xor_out, reverse_in, reverse_out)