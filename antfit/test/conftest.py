#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Build FIT byte streams in memory.

"""
import struct

import pytest

from antfit._crc import compute_crc


class FitBuilder:

    @staticmethod
    def header(data_size=0, *, size=14, protocol=0x10, profile=2093,
               crc=True, signature=b'.FIT'):
        head = struct.pack('<BBHI4s', size, protocol, profile, data_size,
                           signature)
        if size == 14:
            head += struct.pack('<H', compute_crc(head) if crc else 0)
        return head

    @staticmethod
    def definition(local_type, global_num, fields, *, architecture=0):
        """`fields` is a sequence of ``(num, size, type_byte)``."""
        endian = '>' if architecture == 1 else '<'
        head = bytes([0x40 | local_type, 0, architecture])
        head += struct.pack(endian + 'HB', global_num, len(fields))
        return head + b''.join(bytes(field) for field in fields)

    @staticmethod
    def data(local_type, payload):
        return bytes([local_type]) + payload

    @staticmethod
    def compressed(local_type, time_offset, payload):
        return bytes([0x80 | (local_type << 5) | time_offset]) + payload

    @classmethod
    def file(cls, *records, header_size=14, file_crc=True, data_size=None):
        body = b''.join(records)
        if data_size is None:
            data_size = len(body)
        whole = cls.header(data_size, size=header_size) + body
        if file_crc:
            whole += struct.pack('<H', compute_crc(whole))
        return whole


@pytest.fixture
def build():
    return FitBuilder


@pytest.fixture
def file_id_bytes(build):
    """A single file_id message saying the manufacturer is 257."""
    return build.file(
        build.definition(0, 0, [(1, 2, 0x84)]),
        build.data(0, b'\x01\x01'))


START = 1000000000   # 2021-09-08 01:46:40 UTC


@pytest.fixture
def activity_bytes(build):
    """Three records with a lap message between the second and third."""
    def record(offset, lat, lon, heart_rate):
        return build.data(1, struct.pack('<IiiB', START + offset, lat, lon,
                                         heart_rate))

    return build.file(
        build.definition(0, 0, [(0, 1, 0x00), (1, 2, 0x84)]),
        build.data(0, b'\x04\x01\x00'),    # activity file, garmin
        build.definition(1, 20, [(253, 4, 0x86), (0, 4, 0x85),
                                 (1, 4, 0x85), (3, 1, 0x02)]),
        record(0, 2**29, -2**30, 120),
        record(1, 2**29, -2**30, 125),
        build.definition(2, 19, [(253, 4, 0x86), (254, 2, 0x84)]),
        build.data(2, struct.pack('<IH', START + 1, 0)),
        record(2, 2**29, -2**30, 130))
