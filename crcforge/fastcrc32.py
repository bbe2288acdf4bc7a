"""Table-driven CRC-32 using a 16-entry nibble table."""

from __future__ import annotations

from collections.abc import Iterable

from .parameters import CRC32_DEFAULT

__all__ = ["FastCRC32"]

_TABLE = (
    0x00000000, 0x1DB71064, 0x3B6E20C8, 0x26D930AC,
    0x76DC4190, 0x6B6B51F4, 0x4DB26158, 0x5005713C,
    0xEDB88320, 0xF00F9344, 0xD6D6A3E8, 0xCB61B38C,
    0x9B64C2B0, 0x86D3D2D4, 0xA00AE278, 0xBDBDF21C,
)


def _byte(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"byte values must be int, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


class FastCRC32:
    """Standard reflected CRC-32, processed four bits at a time."""

    def __init__(self) -> None:
        self.restart()

    def restart(self) -> None:
        """Start a new calculation."""
        self._crc = CRC32_DEFAULT.initial
        self._count = 0

    def calc(self) -> int:
        """Return the CRC-32 of the data added so far."""
        return self._crc ^ CRC32_DEFAULT.xor_out

    def count(self) -> int:
        """Return the number of bytes added since the last restart."""
        return self._count

    def add(self, data: int | bytes | bytearray | memoryview | Iterable[int]) -> None:
        """Feed one byte value or a sequence of bytes into the CRC."""
        if isinstance(data, str):
            raise TypeError("add() takes bytes, not str; encode the text first")
        if isinstance(data, int):
            chunk = bytes((_byte(data),))
        elif isinstance(data, (bytes, bytearray, memoryview)):
            chunk = bytes(data)
        else:
            chunk = bytes(_byte(b) for b in data)
        crc = self._crc
        for byte in chunk:
            crc = _TABLE[(crc ^ byte) & 0x0F] ^ (crc >> 4)
            crc = _TABLE[(crc ^ (byte >> 4)) & 0x0F] ^ (crc >> 4)
        self._crc = crc
        self._count += len(chunk)

    def __repr__(self) -> str:
        return f"FastCRC32(count={self._count}, crc=0x{self.calc():08X})"