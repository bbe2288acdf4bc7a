"""Named CRC parameter sets and bare generator polynomials."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "CrcParams",
    "POLYNOMES",
    "preset",
    "presets",
    "CRC8_DEFAULT",
    "CRC12_DEFAULT",
    "CRC16_DEFAULT",
    "CRC16_CCITT_FALSE",
    "CRC32_DEFAULT",
    "CRC64_DEFAULT",
]


@dataclass(frozen=True)
class CrcParams:
    """A complete CRC definition: width, polynomial, seed, final xor and reflection."""

    width: int
    polynome: int
    initial: int = 0
    xor_out: int = 0
    reverse_in: bool = False
    reverse_out: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
        limit = self.mask
        for field_name in ("polynome", "initial", "xor_out"):
            value = getattr(self, field_name)
            if not 0 <= value <= limit:
                raise ValueError(
                    f"{field_name}=0x{value:X} does not fit in {self.width} bits"
                )

    @property
    def mask(self) -> int:
        """All-ones value of this width."""
        return (1 << self.width) - 1


def _p(width, polynome, initial, xor_out, reverse_in, reverse_out) -> CrcParams:
    return CrcParams(width, polynome, initial, xor_out, reverse_in, reverse_out)


_PRESETS: dict[str, CrcParams] = {
    # CRC 8
    "CRC8": _p(8, 0x07, 0x00, 0x00, False, False),
    "CRC8_SAEJ1850": _p(8, 0x1D, 0xFF, 0xFF, False, False),
    "CRC8_SAEJ1850_ZERO": _p(8, 0x1D, 0x00, 0x00, False, False),
    "CRC8_8H2F": _p(8, 0x2F, 0xFF, 0xFF, False, False),
    "CRC8_WCDMA": _p(8, 0x9B, 0xFF, 0x00, False, False),
    "CRC8_DARC": _p(8, 0x39, 0x00, 0x00, True, True),
    "CRC8_DVB_S2": _p(8, 0xD5, 0x00, 0x00, False, False),
    "CRC8_EBU": _p(8, 0x1D, 0xFF, 0x00, True, True),
    "CRC8_ICODE": _p(8, 0x1D, 0xFD, 0x00, False, False),
    "CRC8_ITU": _p(8, 0x07, 0x00, 0x55, False, False),
    "CRC8_DALLAS_MAXIM": _p(8, 0x31, 0x00, 0x00, True, True),
    "CRC8_ROHC": _p(8, 0x07, 0xFF, 0x00, True, True),
    # CRC 12
    "CRC12": _p(12, 0x080D, 0x0000, 0x0000, False, False),
    # CRC 16
    "CRC16": _p(16, 0x8001, 0x0000, 0x0000, False, False),
    "CRC16_CCITT": _p(16, 0x1021, 0x0000, 0x0000, False, False),
    "CRC16_CCITT_FALSE": _p(16, 0x1021, 0xFFFF, 0x0000, False, False),
    "CRC16_AUG_CCITT": _p(16, 0x1021, 0x1D0F, 0x0000, False, False),
    "CRC16_ARC": _p(16, 0x8005, 0x0000, 0x0000, True, True),
    "CRC16_BUYPASS": _p(16, 0x8005, 0x0000, 0x0000, False, False),
    "CRC16_CDMA2000": _p(16, 0xC867, 0xFFFF, 0x0000, False, False),
    "CRC16_DDS_110": _p(16, 0x8005, 0x800D, 0x0000, False, False),
    "CRC16_DECT_R": _p(16, 0x0589, 0x0000, 0x0001, False, False),
    "CRC16_DECT_X": _p(16, 0x0589, 0x0000, 0x0000, False, False),
    "CRC16_DNP": _p(16, 0x3D65, 0x0000, 0xFFFF, True, True),
    "CRC16_GENIBUS": _p(16, 0x1021, 0xFFFF, 0xFFFF, False, False),
    "CRC16_MAXIM": _p(16, 0x8005, 0x0000, 0xFFFF, True, True),
    "CRC16_MCRF4XX": _p(16, 0x1021, 0xFFFF, 0x0000, True, True),
    "CRC16_RIELLO": _p(16, 0x1021, 0xB2AA, 0x0000, True, True),
    "CRC16_T10_DIF": _p(16, 0x8BB7, 0x0000, 0x0000, False, False),
    "CRC16_TELEDISK": _p(16, 0xA097, 0x0000, 0x0000, False, False),
    "CRC16_TMS37157": _p(16, 0x1021, 0x89EC, 0x0000, True, True),
    "CRC16_USB": _p(16, 0x8005, 0xFFFF, 0xFFFF, True, True),
    "CRC16_A": _p(16, 0x1021, 0xC6C6, 0x0000, True, True),
    "CRC16_KERMIT": _p(16, 0x1021, 0x0000, 0x0000, True, True),
    "CRC16_MODBUS": _p(16, 0x8005, 0xFFFF, 0x0000, True, True),
    "CRC16_X_25": _p(16, 0x1021, 0xFFFF, 0xFFFF, True, True),
    "CRC16_XMODEM": _p(16, 0x1021, 0x0000, 0x0000, False, False),
    # CRC 32
    "CRC32": _p(32, 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, True, True),
    "CRC32_ISO3309": _p(32, 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, False, False),
    "CRC32_CASTAGNOLI": _p(32, 0x1EDC6F41, 0xFFFFFFFF, 0xFFFFFFFF, True, True),
    "CRC32_D": _p(32, 0xA833982B, 0xFFFFFFFF, 0xFFFFFFFF, True, True),
    "CRC32_Q": _p(32, 0x814141AB, 0x00000000, 0x00000000, False, False),
    # CRC 64
    "CRC64_ECMA64": _p(64, 0x42F0E1EBA9EA3693, 0, 0, False, False),
    "CRC64_ISO64": _p(
        64, 0x000000000000001B, 0xFFFFFFFFFFFFFFFF, 0xFFFFFFFFFFFFFFFF, True, True
    ),
}
_PRESETS["CRC64"] = _PRESETS["CRC64_ECMA64"]

# Generator polynomials known by name only, without a full parameter set.
POLYNOMES: dict[str, int] = {
    "CRC4": 0x03,
    "CRC4_ITU": 0x03,
    "CRC8_AUTOSAR": 0x2F,
    "CRC8_BLUETOOTH": 0xA7,
    "CRC8_CCITT": 0x07,
    "CRC8_GSM_B": 0x49,
    "CRC12_CCITT": 0x080F,
    "CRC12_CDMA2000": 0x0F13,
    "CRC12_GSM": 0x0D31,
    "CRC16_CHAKRAVARTY": 0x2F15,
    "CRC16_ARINC": 0xA02B,
    "CRC16_IBM": 0x8005,
    "CRC16_OPENSAFETY_A": 0x5935,
    "CRC16_OPENSAFETY_B": 0x755B,
    "CRC16_PROFIBUS": 0x1DCF,
    "CRC32_KOOPMAN": 0x741B8CD7,
    "CRC32_KOOPMAN_2": 0x32583499,
}


def _normalise(name: str) -> str:
    return name.strip().upper().replace("-", "_").replace(" ", "_")


def preset(name: str) -> CrcParams:
    """Return the named parameter set; names are case-insensitive and '-' equals '_'."""
    key = _normalise(name)
    try:
        return _PRESETS[key]
    except KeyError:
        raise KeyError(f"unknown CRC preset: {name!r}") from None


def presets(width: int) -> dict[str, CrcParams]:
    """Return all named parameter sets of the given width, in definition order."""
    found = {name: params for name, params in _PRESETS.items() if params.width == width}
    if not found:
        raise ValueError(f"no CRC presets of width {width}")
    return found


CRC8_DEFAULT = _PRESETS["CRC8"]
CRC12_DEFAULT = _PRESETS["CRC12"]
CRC16_DEFAULT = _PRESETS["CRC16"]
CRC16_CCITT_FALSE = _PRESETS["CRC16_CCITT_FALSE"]
CRC32_DEFAULT = _PRESETS["CRC32"]
CRC64_DEFAULT = _PRESETS["CRC64"]