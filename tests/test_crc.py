import zlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from crcforge.crc import CRC8, CRC12, CRC16, CRC32, CRC64, CRCBase

DATA = b"123456789"


def test_crc12_default_and_continued():
    crc = CRC12()
    crc.add(DATA)
    assert crc.calc() == 0xEFB
    crc.add(DATA)
    assert crc.calc() == 0x1B3
    assert crc.count() == 18


def test_crc8_default_check_value():
    crc = CRC8()
    crc.add(DATA)
    assert crc.calc() == 0xF4


@pytest.mark.parametrize(
    "args, expected",
    [
        ((0x9B, 0xFF), 0xDA),
        ((0x39, 0x00, 0x00, True, True), 0x15),
        ((0xD5,), 0xBC),
        ((0x07, 0x00, 0x55), 0xA1),
        ((0x31, 0x00, 0x00, True, True), 0xA1),
    ],
)
def test_crc8_parameters(args, expected):
    crc = CRC8(*args)
    crc.add(DATA)
    assert crc.calc() == expected


@pytest.mark.parametrize(
    "args, expected",
    [
        ((0x1021, 0xFFFF, 0x0000, False, False), 0x29B1),
        ((0x8005, 0x0000, 0x0000, True, True), 0xBB3D),
        ((0x1021, 0x0000, 0x0000, True, True), 0x2189),
        ((0x0589, 0x0000, 0x0001, False, False), 0x007E),
    ],
)
def test_crc16_parameters(args, expected):
    crc = CRC16(*args)
    crc.add(DATA)
    assert crc.calc() == expected


def test_crc32_default_check_value():
    crc = CRC32()
    crc.add(DATA)
    assert crc.calc() == 0xCBF43926


def test_crc64_custom_polynome():
    crc = CRC64(0x04C11DB704C11DB7)
    crc.add(DATA)
    assert crc.calc() == 0xCE5CA2AD34A16112


@given(st.binary(max_size=200))
def test_crc32_default_matches_zlib(data):
    crc = CRC32()
    crc.add(data)
    assert crc.calc() == zlib.crc32(data)


@given(st.binary(max_size=100), st.integers(min_value=0, max_value=100))
def test_split_feeding_gives_same_result(data, cut):
    whole = CRC16(0x8005, 0xFFFF, 0x0000, True, True)
    whole.add(data)
    parts = CRC16(0x8005, 0xFFFF, 0x0000, True, True)
    parts.add(data[:cut])
    for byte in data[cut:]:
        parts.add(byte)
    assert parts.calc() == whole.calc()
    assert parts.count() == whole.count() == len(data)


def test_add_accepts_iterable_of_ints():
    crc = CRC32()
    crc.add(list(DATA))
    assert crc.calc() == 0xCBF43926


def test_restart_clears_state():
    crc = CRC12()
    crc.add(DATA)
    crc.add(DATA)
    crc.restart()
    assert crc.count() == 0
    crc.add(DATA)
    assert crc.calc() == 0xEFB


def test_reset_restores_defaults():
    crc = CRC8(0x31, 0x00, 0x00, True, True)
    crc.add(DATA)
    crc.reset()
    assert crc.polynome == 0x07
    assert crc.reverse_in is False
    assert crc.count() == 0
    crc.add(DATA)
    assert crc.calc() == 0xF4


def test_setters_and_restart():
    crc = CRC8()
    crc.polynome = 0x9B
    crc.initial = 0xFF
    crc.restart()
    crc.add(DATA)
    assert crc.calc() == 0xDA


def test_calc_does_not_consume_state():
    crc = CRC16(0x1021, 0xFFFF)
    crc.add(DATA)
    first = crc.calc()
    second = crc.calc()
    assert first == 0x29B1
    assert second == 0x29B1
    assert crc.count() == 9


def test_crc12_result_fits_width():
    crc = CRC12(0x080D, 0x0FFF, 0xFFFF, True, True)
    crc.add(DATA * 3)
    assert 0 <= crc.calc() <= 0xFFF


def test_params_property():
    crc = CRC32()
    params = crc.params
    assert (params.width, params.polynome, params.reverse_out) == (32, 0x04C11DB7, True)


def test_out_of_range_parameter_rejected():
    with pytest.raises(ValueError):
        CRC8(polynome=0x100)
    with pytest.raises(ValueError):
        CRC12(initial=0x10000)


def test_bad_byte_values_rejected():
    crc = CRC8()
    with pytest.raises(ValueError):
        crc.add(256)
    with pytest.raises(ValueError):
        crc.add([1, -1])
    with pytest.raises(TypeError):
        crc.add("abc")


def test_base_class_not_usable():
    with pytest.raises(TypeError):
        CRCBase()