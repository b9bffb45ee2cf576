#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from antfit._crc import CRC_START, add_byte, compute_crc


def test_check_value():
    assert compute_crc(b'123456789') == 0xBB3D


def test_empty():
    assert compute_crc(b'') == CRC_START == 0


def test_continuation():
    first = compute_crc(b'12345')
    assert compute_crc(b'6789', first) == compute_crc(b'123456789')


def test_add_byte():
    crc = CRC_START
    for byte in b'.FIT':
        crc = add_byte(crc, byte)
    assert crc == compute_crc(b'.FIT')
