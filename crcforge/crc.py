"""Incremental bitwise CRC engines for 8, 12, 16, 32 and 64-bit widths."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import ClassVar

from .parameters import (
    CRC8_DEFAULT,
    CRC12_DEFAULT,
    CRC16_DEFAULT,
    CRC32_DEFAULT,
    CRC64_DEFAULT,
    CrcParams,
)
from .reverse import (
    reverse8bits,
    reverse12bits,
    reverse16bits,
    reverse32bits,
    reverse64bits,
)

__all__ = ["CRCBase", "CRC8", "CRC12", "CRC16", "CRC32", "CRC64"]


class CRCBase:
    """A CRC accumulator of fixed width with configurable parameters.

    Bytes are fed with :meth:`add`; :meth:`calc` returns the CRC of everything
    added since the last :meth:`restart` without disturbing the running state.
    """

    width: ClassVar[int]
    _storage_bits: ClassVar[int]
    _defaults: ClassVar[CrcParams]
    _reflect: ClassVar[Callable[[int], int]]

    def __init__(
        self,
        polynome: int | None = None,
        initial: int | None = None,
        xor_out: int | None = None,
        reverse_in: bool | None = None,
        reverse_out: bool | None = None,
    ) -> None:
        if not hasattr(type(self), "width"):
            raise TypeError("CRCBase cannot be used directly; pick a CRC width class")
        self.reset(polynome, initial, xor_out, reverse_in, reverse_out)

    # -- configuration -------------------------------------------------------

    def _check(self, name: str, value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if not 0 <= value < (1 << self._storage_bits):
            raise ValueError(
                f"{name}=0x{value:X} does not fit in {self._storage_bits} bits"
            )
        return value

    @property
    def mask(self) -> int:
        """All-ones value of this CRC's width."""
        return (1 << self.width) - 1

    @property
    def polynome(self) -> int:
        return self._polynome

    @polynome.setter
    def polynome(self, value: int) -> None:
        self._polynome = self._check("polynome", value)

    @property
    def initial(self) -> int:
        """Seed value; takes effect on the next :meth:`restart`."""
        return self._initial

    @initial.setter
    def initial(self, value: int) -> None:
        self._initial = self._check("initial", value)

    @property
    def xor_out(self) -> int:
        return self._xor_out

    @xor_out.setter
    def xor_out(self, value: int) -> None:
        self._xor_out = self._check("xor_out", value)

    @property
    def reverse_in(self) -> bool:
        return self._reverse_in

    @reverse_in.setter
    def reverse_in(self, value: bool) -> None:
        self._reverse_in = bool(value)

    @property
    def reverse_out(self) -> bool:
        return self._reverse_out

    @reverse_out.setter
    def reverse_out(self, value: bool) -> None:
        self._reverse_out = bool(value)

    @property
    def params(self) -> CrcParams:
        """The current configuration as a :class:`CrcParams`."""
        return CrcParams(
            self.width,
            self._polynome & self.mask,
            self._initial & self.mask,
            self._xor_out & self.mask,
            self._reverse_in,
            self._reverse_out,
        )

    # -- operation -----------------------------------------------------------

    def reset(
        self,
        polynome: int | None = None,
        initial: int | None = None,
        xor_out: int | None = None,
        reverse_in: bool | None = None,
        reverse_out: bool | None = None,
    ) -> None:
        """Set all parameters (defaults of this width where omitted) and restart."""
        d = self._defaults
        self.polynome = d.polynome if polynome is None else polynome
        self.initial = d.initial if initial is None else initial
        self.xor_out = d.xor_out if xor_out is None else xor_out
        self.reverse_in = d.reverse_in if reverse_in is None else reverse_in
        self.reverse_out = d.reverse_out if reverse_out is None else reverse_out
        self.restart()

    def restart(self) -> None:
        """Start a new calculation with the current parameters."""
        self._crc = self._initial & self.mask
        self._count = 0

    def calc(self) -> int:
        """Return the CRC of the data added so far."""
        value = self._crc
        if self._reverse_out:
            value = type(self)._reflect(value)
        return (value ^ self._xor_out) & self.mask

    def count(self) -> int:
        """Return the number of bytes added since the last restart."""
        return self._count

    def add(self, data: int | bytes | bytearray | memoryview | Iterable[int]) -> None:
        """Feed one byte value or a sequence of bytes into the CRC."""
        if isinstance(data, str):
            raise TypeError("add() takes bytes, not str; encode the text first")
        if isinstance(data, int):
            self._add_byte(self._byte(data))
            self._count += 1
            return
        if isinstance(data, (bytes, bytearray, memoryview)):
            chunk = bytes(data)
        else:
            chunk = bytes(self._byte(b) for b in data)
        for byte in chunk:
            self._add_byte(byte)
        self._count += len(chunk)

    @staticmethod
    def _byte(value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"byte values must be int, got {type(value).__name__}")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        return value

    def _add_byte(self, value: int) -> None:
        if self._reverse_in:
            value = reverse8bits(value)
        mask = self.mask
        top = 1 << (self.width - 1)
        poly = self._polynome & mask
        crc = self._crc ^ (value << (self.width - 8))
        for _ in range(8):
            crc = ((crc << 1) ^ poly) if crc & top else (crc << 1)
            crc &= mask
        self._crc = crc

    def __repr__(self) -> str:
        digits = (self.width + 3) // 4
        return (
            f"{type(self).__name__}(polynome=0x{self._polynome:0{digits}X}, "
            f"initial=0x{self._initial:0{digits}X}, "
            f"xor_out=0x{self._xor_out:0{digits}X}, "
            f"reverse_in={self._reverse_in}, reverse_out={self._reverse_out})"
        )


class CRC8(CRCBase):
    """8-bit CRC."""

    width = 8
    _storage_bits = 8
    _defaults = CRC8_DEFAULT
    _reflect = staticmethod(reverse8bits)


class CRC12(CRCBase):
    """12-bit CRC; parameters are accepted as 16-bit values, only the low 12 bits count."""

    width = 12
    _storage_bits = 16
    _defaults = CRC12_DEFAULT
    _reflect = staticmethod(reverse12bits)


class CRC16(CRCBase):
    """16-bit CRC."""

    width = 16
    _storage_bits = 16
    _defaults = CRC16_DEFAULT
    _reflect = staticmethod(reverse16bits)


class CRC32(CRCBase):
    """32-bit CRC."""

    width = 32
    _storage_bits = 32
    _defaults = CRC32_DEFAULT
    _reflect = staticmethod(reverse32bits)


class CRC64(CRCBase):
    """64-bit CRC."""

    width = 64
    _storage_bits = 64
    _defaults = CRC64_DEFAULT
    _reflect = staticmethod(reverse64bits)