#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
The FIT flavour of CRC-16, from the FIT SDK release 20.03.00

The checksum is built a nibble at a time from a 16 entry lookup table; each
byte contributes its lower four bits first, then its upper four bits. The
same routine covers both the 14 byte file header and the whole-file trailer.

A stored CRC of zero means the writer did not bother computing one, in which
case no check is made.

"""
CRC_START = 0x0000

CRC_TABLE = (
    0x0000, 0xCC01, 0xD801, 0x1400, 0xF001, 0x3C00, 0x2800, 0xE401,
    0xA001, 0x6C00, 0x7800, 0xB401, 0x5000, 0x9C01, 0x8801, 0x4400,
)


def _step(crc, nibble):
    tmp = CRC_TABLE[crc & 0xF]
    crc = (crc >> 4) & 0x0FFF
    return crc ^ tmp ^ CRC_TABLE[nibble]


def add_byte(crc, byte):
    """Fold a single byte into a running CRC."""
    crc = _step(crc, byte & 0xF)            # lower four bits
    return _step(crc, (byte >> 4) & 0xF)    # upper four bits


def compute_crc(data, crc=CRC_START):
    """CRC of a bytes-like object, optionally continuing from `crc`.

        >>> '%04x' % compute_crc(b'123456789')
        'bb3d'
    """
    for byte in data:
        crc = add_byte(crc, byte)
    return crc
