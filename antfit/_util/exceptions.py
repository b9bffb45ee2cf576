#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions for this package.

Everything that aborts the decoding of a file derives from `FITError`, so
callers handling a batch of files need only catch that.

"""


class FITError(Exception):
    """Base exception."""
    _default_message = ''

    def __init__(self, message=None):
        super().__init__(message if message else self._default_message)


class ReadError(FITError, IOError):
    """The source ran dry (or failed) part way through a read."""
    _default_message = 'unexpected end of data'

    def __init__(self, expected=None, got=None, what='bytes'):
        self.expected, self.got = expected, got
        if expected is None:
            message = None
        else:
            message = 'tried to read %d %s, only read %d' % (
                expected, what, got)
        super().__init__(message)


class FormatError(FITError):
    """The bytes read do not follow the FIT protocol."""
    _default_message = 'malformed FIT data'


class FileHeaderError(FormatError):
    pass


class InvalidFileError(FileHeaderError):
    def __init__(self, index, found, expected):
        self.index = index
        message = "bad signature char #%d: %r should be %r" % (
            index, chr(found), chr(expected))
        super().__init__(message)


class CRCError(FormatError):
    def __init__(self, computed, stored, where='header'):
        self.computed, self.stored = computed, stored
        message = 'bad %s CRC: %04x != %04x' % (where, computed, stored)
        super().__init__(message)


class UnknownLocalTypeError(FITError):
    def __init__(self, local_type):
        self.local_type = local_type
        super().__init__('unknown local message type (%d)' % local_type)
