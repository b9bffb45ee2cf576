#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import struct

import pytest

from antfit import _extract
from antfit._profile import BASE_TYPE_NAMES, BASE_TYPES_BY_NAME


def test_unsigned():
    assert _extract.get_uint8(b'\xfe', 0) == (254, 1)
    assert _extract.get_uint16(b'\x01\x01', 0) == (257, 2)
    assert _extract.get_uint32(b'\x00\x01\x02\x03\x04', 1) == (0x04030201, 5)


def test_signed():
    assert _extract.get_int8(b'\xff', 0) == (-1, 1)
    assert _extract.get_int16(b'\x00\x80', 0) == (-32768, 2)
    assert _extract.get_int32(b'\xfe\xff\xff\xff', 0) == (-2, 4)


def test_little_endian_by_default():
    assert _extract.get_uint16(b'\x12\x34', 0)[0] == 0x3412
    assert _extract.get_uint16(b'\x12\x34', 0, big_endian=True)[0] == 0x1234
    assert _extract.get_int32(b'\xff\xff\xff\xfe', 0, big_endian=True) == (-2, 4)


def test_floats():
    assert _extract.get_float32(struct.pack('<f', 1.5), 0) == (1.5, 4)
    assert _extract.get_float64(struct.pack('<d', -0.25), 0) == (-0.25, 8)
    assert _extract.get_float32(struct.pack('>f', 2.0), 0,
                                big_endian=True) == (2.0, 4)


def test_short_buffer():
    with pytest.raises(struct.error):
        _extract.get_uint32(b'\x00\x00', 0)


def test_string_terminated():
    assert _extract.get_string(b'Edge 520\x00\xff\xff', 0) == ('Edge 520', 9)


def test_string_unterminated():
    assert _extract.get_string(b'xxabc', 2) == ('abc', 5)


def test_string_empty():
    assert _extract.get_string(b'\x00', 0) == ('', 1)
    assert _extract.get_string(b'', 0) == ('', 0)


def test_string_bad_utf8():
    text, pos = _extract.get_string(b'a\xffb\x00', 0)
    assert text == 'a\ufffdb'
    assert pos == 4


def test_bytes():
    assert _extract.get_bytes(b'\x01\x02\x03', 1) == (b'\x02\x03', 3)
    assert _extract.get_bytes(b'\x01\x02\x03', 0, size=2) == (b'\x01\x02', 2)


def test_every_base_type_has_an_extractor():
    assert set(_extract.EXTRACTORS) == set(BASE_TYPE_NAMES)
    assert len(BASE_TYPE_NAMES) == 14

    uint16z = BASE_TYPES_BY_NAME['uint16z']
    assert uint16z.extract is _extract.get_uint16
    assert uint16z.size == 2
    assert BASE_TYPES_BY_NAME['enum'].extract is _extract.get_uint8
