# crcforge

Bitwise CRC calculators of 8, 12, 16, 32 and 64 bits, each configurable by
polynomial, initial value, final XOR and input/output bit reflection. The
package also has a table-driven CRC-32 and a catalogue of well-known
parameter presets. It has no dependencies outside the standard library.

## Installation

```
pip install crcforge
```

For running the tests:

```
pip install "crcforge[test]"
pytest
```

## One-shot functions

`crcforge.functions` computes a checksum over a whole buffer in one call:

```python
from crcforge.functions import calc_crc8, calc_crc16, calc_crc32, calc_crc64

data = b"123456789"

calc_crc8(data, 0x07)                                        # 0xF4
calc_crc16(data, 0x1021, 0xFFFF, 0x0000, False, False)       # 0x29B1 (CCITT-FALSE)
calc_crc32(data)                                             # 0xCBF43926 (standard CRC-32)
calc_crc64(data, 0x04C11DB704C11DB7)                         # 0xCE5CA2AD34A16112
```

The parameters are `data, polynome, initial, xor_out, reverse_in,
reverse_out`; any you leave out take the default for that width. `calc_crc12`
works the same way, and `crc16_ccitt` is `calc_crc16` with
CRC-16/CCITT-FALSE defaults.

## Incremental calculators

`crcforge.crc` provides `CRC8`, `CRC12`, `CRC16`, `CRC32` and `CRC64`, which
share the `CRCBase` interface:

```python
from crcforge.crc import CRC12

crc = CRC12()
crc.add(b"1234")
crc.add(b"56789")
crc.calc()      # 0xEFB
crc.count()     # 9
crc.restart()   # start a new checksum with the same parameters
crc.reset(0x80F, 0, 0, False, False)   # switch to new parameters and restart
```

- `add` takes a single byte value (an int from 0 to 255) or any bytes-like
  object or iterable of byte values. A `str` raises `TypeError`; a value out
  of byte range raises `ValueError`.
- `calc` does not change the running state, so you can read intermediate
  values and keep adding data.
- `reset` with no arguments restores the defaults of the width.
- The parameters are also readable and writable as the properties
  `polynome`, `initial`, `xor_out`, `reverse_in` and `reverse_out`; a new
  `initial` takes effect on the next `restart`. Values that do not fit the
  width raise `ValueError` (`CRC12` accepts 16-bit values and uses the low 12
  bits). `params` returns the current configuration as a `CrcParams`, and
  `mask` the all-ones value of the width.

## Fast CRC-32

`crcforge.fastcrc32.FastCRC32` calculates the standard reflected CRC-32 (the
same result as `CRC32()` with default parameters) using a 16-entry nibble
table. It has `add`, `calc`, `count` and `restart`, and its parameters are
fixed:

```python
from crcforge.fastcrc32 import FastCRC32

crc = FastCRC32()
crc.add(b"123456789")
crc.calc()      # 0xCBF43926
```

## Presets

`crcforge.parameters` holds the named parameter sets:

```python
from crcforge.parameters import preset, presets
from crcforge.functions import calc_crc16

modbus = preset("CRC16_MODBUS")
calc_crc16(b"123456789", modbus.polynome, modbus.initial, modbus.xor_out,
           modbus.reverse_in, modbus.reverse_out)   # 0x4B37

for name, params in presets(8).items():
    print(name, hex(params.polynome))
```

- `preset(name)` looks a set up by name; case does not matter and `-` equals
  `_`. An unknown name raises `KeyError`.
- `presets(width)` returns every set of that width in definition order, or
  raises `ValueError` if there is none.
- `CrcParams` is a frozen dataclass with `width`, `polynome`, `initial`,
  `xor_out`, `reverse_in`, `reverse_out` and a `mask` property.
- `POLYNOMES` maps further names to bare generator polynomials that have no
  full parameter set, such as `CRC16_PROFIBUS` or `CRC32_KOOPMAN`.
- `CRC8_DEFAULT`, `CRC12_DEFAULT`, `CRC16_DEFAULT`, `CRC16_CCITT_FALSE`,
  `CRC32_DEFAULT` and `CRC64_DEFAULT` are the sets the calculators and
  functions use as defaults.

## Bit reversal helpers

`crcforge.reverse` provides `reverse8bits`, `reverse12bits`, `reverse16bits`,
`reverse32bits` and `reverse64bits`. Each reverses the bit order of the low
bits of its width; a negative value raises `ValueError`.

## What it does not do

crcforge is a library only: it has no command-line tool and does not read
files or streams by itself. Feed the bytes to `add` or to the one-shot
functions.