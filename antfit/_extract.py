#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Primitives for pulling single values out of a data message payload.

Every function takes a buffer and a position and returns the value found
there along with the position just past it::

    value, pos = get_uint16(payload, pos)

Multi-byte values are read little endian. The architecture byte of the
governing definition message is *not* consulted unless the caller asks for
``big_endian=True``; see `FitFile` for the switch that does so.

"""
from struct import Struct


_FORMATS = {
    'int8': 'b', 'uint8': 'B',
    'int16': 'h', 'uint16': 'H',
    'int32': 'i', 'uint32': 'I',
    'float32': 'f', 'float64': 'd',
}

# {(name, big_endian): Struct}
_STRUCTS = {(name, big): Struct(('>' if big else '<') + fmt)
            for name, fmt in _FORMATS.items() for big in (False, True)}


def _unpacker(name):
    little, big = _STRUCTS[name, False], _STRUCTS[name, True]
    size = little.size

    def extract(data, pos, *, big_endian=False):
        value, = (big if big_endian else little).unpack_from(data, pos)
        return value, pos + size

    extract.__name__ = 'get_' + name
    extract.__doc__ = 'Read a %d byte %s.' % (size, name)
    extract.size = size
    return extract


get_int8 = _unpacker('int8')
get_uint8 = _unpacker('uint8')
get_int16 = _unpacker('int16')
get_uint16 = _unpacker('uint16')
get_int32 = _unpacker('int32')
get_uint32 = _unpacker('uint32')
get_float32 = _unpacker('float32')
get_float64 = _unpacker('float64')


def get_string(data, pos, **ignore):
    """Read a NUL terminated string.

    The terminator is consumed but not returned. Without one the string
    runs to the end of the buffer.

        >>> get_string(b'AB\\x00CD', 0)
        ('AB', 3)
        >>> get_string(b'AB', 0)
        ('AB', 2)
    """
    data = bytes(data)
    end = data.find(b'\x00', pos)
    if end < 0:
        return data[pos:].decode('utf-8', 'replace'), len(data)
    return data[pos:end].decode('utf-8', 'replace'), end + 1


def get_bytes(data, pos, size=None, **ignore):
    """Read `size` raw bytes, or everything that is left."""
    end = len(data) if size is None else pos + size
    return bytes(data[pos:end]), end


get_string.size = 1
get_bytes.size = 1


EXTRACTORS = {
    'enum': get_uint8,
    'int8': get_int8,
    'uint8': get_uint8,
    'int16': get_int16,
    'uint16': get_uint16,
    'int32': get_int32,
    'uint32': get_uint32,
    'string': get_string,
    'float32': get_float32,
    'float64': get_float64,
    'uint8z': get_uint8,
    'uint16z': get_uint16,
    'uint32z': get_uint32,
    'byte': get_bytes,
}
