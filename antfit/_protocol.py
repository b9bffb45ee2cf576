#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Implement the Flexible and Interoperable data Transfer (FIT) protocol.

A file is a header followed by a sequence of records. Each record is either a
definition, which describes a layout for a local message type, or data laid
out by the definition most recently given for its local type. Only the data
records make it out of here, as `Message` objects.

"""
from collections import namedtuple, UserDict
from contextlib import contextmanager
from io import BytesIO
import logging
from struct import unpack

from antfit._crc import CRC_START, compute_crc
from antfit._messages import Message, decode_message
from antfit._profile import (BASE_TYPES, BASE_TYPE_BYTE, GLOBAL_MESG_NUMS,
                             MESSAGE_INDEX_FIELD_NUM, TIMESTAMP_FIELD_NUM)
from antfit._types import DecodedFile
from antfit._util.exceptions import (CRCError, FileHeaderError, FormatError,
                                     InvalidFileError, ReadError,
                                     UnknownLocalTypeError)


log = logging.getLogger(__name__)

SIGNATURE = b'.FIT'
HEADER_SIZES = (12, 14)


class FitHeader(namedtuple('FitHeader', ['header_size', 'protocol_version',
                                         'profile_version', 'data_size',
                                         'crc'])):
    """From the FIT SDK release 20.03.00

    File Header Contents
    --------------------

    ======  =====================  ===========================================
     Byte    Parameter              Description
    ======  =====================  ===========================================
      0     Header size            12 or 14; 14 is preferred.
      1     Protocol version       Protocol version number.
     2-3    Profile version        Profile version number (little endian).
     4-7    Data size              Length of the data records section, in
                                   bytes (little endian). Does not include
                                   the header or the file CRC.
     8-11   Data type              ASCII ".FIT".
    12-13   CRC                    CRC of bytes 0-11, or 0x0000 to skip the
                                   check. 14 byte headers only.
    ======  =====================  ===========================================

    `crc` is None for 12 byte headers.
    """
    __slots__ = ()

    @property
    def protocol(self):
        """Protocol version as ``(major, minor)``, like the SDK decodes it."""
        return self.protocol_version >> 4, self.protocol_version & 0xF

    @property
    def profile(self):
        """Profile version as ``(major, minor)``, like the SDK decodes it."""
        return divmod(self.profile_version, 100)

    def __str__(self):
        return 'proto %d.%d profile %d.%02d data %d' % (
            self.protocol + self.profile + (self.data_size,))


class FieldDefinition(namedtuple('FieldDefinition', ['num', 'size',
                                                     'endian_sensitive',
                                                     'base_type'])):
    """From the FIT SDK release 20.03.00

    Field Definition Contents
    -------------------------

    ======  =================  ===============================================
     Byte    Name               Description
    ======  =================  ===============================================
      0     Field definition   Defined in the global FIT profile for the
            number             specified FIT message.
      1     Size               Size (in bytes) of the specified FIT message's
                               field.
      2     Base type          Base type of the specified FIT message's field.
                               Bit 7 flags multi-byte types; bits 0-3 give the
                               base type number.
    ======  =================  ===============================================

    """
    __slots__ = ()

    @classmethod
    def from_bytes(cls, data):
        num, size, type_byte = data
        return cls(num, size, bool(type_byte & 0x80), type_byte & 0xF)

    @property
    def base(self):
        return BASE_TYPES.get(self.base_type, BASE_TYPE_BYTE)

    @property
    def type_name(self):
        if self.num == TIMESTAMP_FIELD_NUM and self.base.name == 'uint32':
            return 'timestamp'
        if self.num == MESSAGE_INDEX_FIELD_NUM:
            return 'message_index'
        return self.base.name

    def __str__(self):
        return 'field %3d: %-13s %d bytes%s' % (
            self.num, self.type_name, self.size,
            ' (endian)' if self.endian_sensitive else '')


class Definition(namedtuple('Definition', ['local_type', 'little_endian',
                                           'global_num', 'fields',
                                           'total_bytes'])):
    """From the FIT SDK release 20.03.00

    The definition message is used to create an association between the local
    message type contained in the record header, and a Global Message Number
    that relates to the global FIT message.

    Definition Message Contents
    ---------------------------

    ======  =======================  =============  ===========================
    Byte    Description                 Length      Value
    (bytes)
    ======  =======================  =============  ===========================
      0     Reserved                       1         0
      1     Architecture                   1         0 or 1
                                                       0: little endian
                                                       1: big endian
     2-3    Global message number          2         Unique to each message
      4     Fields                         1         Number of fields in the
                                                     data message
      5     Field definition(s)            3         See `FieldDefinition`
     ...                              (per field)
    ======  =======================  =============  ===========================

    """
    __slots__ = ()

    @classmethod
    def build(cls, local_type, little_endian, global_num, fields):
        fields = tuple(fields)
        return cls(local_type, little_endian, global_num, fields,
                   sum(field.size for field in fields))

    @property
    def big_endian(self):
        return not self.little_endian

    @property
    def name(self):
        return GLOBAL_MESG_NUMS.get(self.global_num,
                                    'unknown#%d' % self.global_num)

    def __str__(self):
        return 'def: ltyp %d %s glbl %d (%s) %d bytes' % (
            self.local_type, 'little' if self.little_endian else 'big',
            self.global_num, self.name, self.total_bytes)


class LocalTypeTable(UserDict):
    """Definitions in force, keyed by local message type.

    Redefining a local type replaces the old definition.
    """
    def __missing__(self, local_type):
        raise UnknownLocalTypeError(local_type)

    def define(self, definition):
        self.data[definition.local_type] = definition
        return definition


class RecordHeader:
    """From the FIT SDK release 20.03.00

    The record header is a one byte bit field. There are actually two types of
    record header: normal header and compressed timestamp header. The header
    type is indicated in the most significant bit (msb) of the record header.
    The normal header identifies whether the record is a definition or data
    message, and identifies the local message type. A compressed timestamp
    header is a special compressed header that may also be used with some
    local data messages to allow a compressed time format.
    """
    __slots__ = ('is_definition', 'local_message_type', 'time_offset')

    def __repr__(self):
        return '%s(local_message_type=%d, time_offset=%d)' % (
            type(self).__name__, self.local_message_type, self.time_offset)

    @staticmethod
    def from_byte(header_byte):
        # A value of 0 in bit 7 indicates that this is a normal header.
        header_cls = (CompressedTimestampHeader if (header_byte & 0x80) else
                      NormalHeader)
        return header_cls(header_byte)


class NormalHeader(RecordHeader):
    """From the FIT SDK release 20.03.00

    Normal Header Bit Field Description
    -----------------------------------

    =====  =============  ========================
    Bit        Value      Description
    =====  =============  ========================
      7          0        Normal header
      6        0 or 1     Message type:
                            1: definition message
                            0: data message
      5     0 (default)   Message type specific
      4          0        Reserved
     0-3        0-15      Local message type
    =====  =============  ========================
    """
    __slots__ = ()

    def __init__(self, header_byte):
        self.is_definition = bool(header_byte & 0x40)
        self.local_message_type = header_byte & 0xF    # bits 0-3
        self.time_offset = 0


class CompressedTimestampHeader(RecordHeader):
    """From the FIT SDK release 20.03.00

    Compressed Timestamp Header Description
    ---------------------------------------

    The compressed timestamp header is a special form of record header that
    allows some timestamp information to be placed within the record header,
    rather than within the record content. In applicable use cases, this
    allows data to be recorded without the need of a 4 byte timestamp in every
    data record.

    =====  =============  ========================
    Bit        Value      Description
    =====  =============  ========================
      7          1        Compressed timestamp
     5-6        0-3       Local message type
     0-4        0-31      Time offset (seconds)
    =====  =============  ========================

    NOTE: this type of record header is used for a *data message only*. The
    time offset is kept on the message but not rolled into a timestamp.
    """
    __slots__ = ()

    def __init__(self, header_byte):
        self.is_definition = False
        self.local_message_type = (header_byte >> 5) & 0x3   # bits 5-6
        self.time_offset = header_byte & 0x1F                # bits 0-4


class FitFile:
    """A decoding session over one FIT byte stream.

    Attributes
    ----------
    reader : file-like
        Anything with a binary ``read`` method; only read forwards.
    name : str
        Where the bytes come from, for messages.
    header : FitHeader
        Set once `read_file_header` has run.
    bytes_left : int
        Body bytes not yet consumed, when the header declares a data size.
    crc : int
        Running CRC of every byte read so far.
    local_types : LocalTypeTable
        Definitions seen in this file.
    check_crc : bool
        Whether to verify the header and file CRCs.
    honor_architecture : bool
        Decode multi-byte fields big endian when a definition says so. Off by
        default: values are read little endian whatever the definition says.
    """
    def __init__(self, reader, *, name=None, check_crc=True,
                 honor_architecture=False):
        self.reader = reader
        self.name = name or getattr(reader, 'name', '<stream>')
        self.header = None
        self.bytes_left = 0
        self.crc = CRC_START
        self.local_types = LocalTypeTable()
        self.check_crc = check_crc
        self.honor_architecture = honor_architecture
        self.done = False

    def __str__(self):
        if self.header is None:
            return '%s: (header not read)' % self.name
        return '%s: %s' % (self.name, self.header)

    def _read_upto(self, size):
        """Read until `size` bytes are in or the source runs dry."""
        chunks, got = [], 0
        while got < size:
            chunk = self.reader.read(size - got)
            if not chunk:
                break
            chunks.append(chunk)
            got += len(chunk)
        return b''.join(chunks)

    def read(self, size, what='bytes'):
        """Read exactly `size` bytes, keeping track of bytes left and the CRC.
        """
        data = self._read_upto(size)
        if len(data) != size:
            raise ReadError(size, len(data), what)
        self._consumed(data)
        return data

    def _consumed(self, data):
        self.crc = compute_crc(data, self.crc)
        if self.header is not None:
            self.bytes_left -= len(data)

    @property
    def tracking_size(self):
        return self.header is not None and self.header.data_size > 0

    def read_record_header(self):
        """The next record's header, or None at the end of the stream."""
        data = self._read_upto(1)
        if not data:
            return None
        self._consumed(data)
        return RecordHeader.from_byte(data[0])

    def read_file_crc(self):
        """Read and check the 2 byte CRC that closes the file.

        A source ending right where the data records do is let off.
        """
        computed = self.crc
        data = self._read_upto(2)
        if not data:
            log.debug('%s: no file CRC', self.name)
            return None
        if len(data) != 2:
            raise ReadError(2, len(data), 'byte file CRC')

        stored, = unpack('<H', data)
        if stored == 0:
            log.debug('%s: file CRC unset, not checked', self.name)
        elif self.check_crc and stored != computed:
            raise CRCError(computed, stored, where='file')
        return stored

    def records(self):
        """Generate definitions and messages in file order.

        The file header must have been read.
        """
        while not self.done:
            record = read_record(self)
            if record is None:
                self.done = True
            else:
                yield record

    def __iter__(self):
        return (record for record in self.records()
                if isinstance(record, Message))


def read_file_header(fitfile):
    """Read the *.fit file header, setting `fitfile.header`.

    `fitfile.bytes_left` is set from the declared data size and the reader
    is left at the start of the first record header.
    """
    header_data = fitfile.read(12, 'byte header')

    header_size = header_data[0]
    if header_size not in HEADER_SIZES:
        raise FileHeaderError('irregular file header size (%d)' % header_size)

    for index, (found, expected) in enumerate(zip(header_data[8:12],
                                                  SIGNATURE)):
        if found != expected:
            raise InvalidFileError(index, found, expected)

    # Larger fields are explicitly little endian from SDK.
    protocol_version, profile_version, data_size = unpack(
        '<BHI', header_data[1:8])

    crc = None
    if header_size == 14:
        crc, = unpack('<H', fitfile.read(2, 'byte header CRC'))
        if crc == 0:
            log.debug('%s: header CRC unset, not checked', fitfile.name)
        elif fitfile.check_crc:
            computed = compute_crc(header_data)
            if computed != crc:
                raise CRCError(computed, crc, where='header')

    fitfile.header = FitHeader(header_size, protocol_version,
                               profile_version, data_size, crc)
    fitfile.bytes_left = data_size
    log.info('%s', fitfile)
    return fitfile.header


def read_definition(fitfile, record_header):
    """Parse a definition record and make it current for its local type."""
    __, architecture = fitfile.read(2, 'byte definition')  # ignore reserved
    if architecture not in (0, 1):
        raise FormatError('unsupported architecture (%d)' % architecture)
    endian = '>' if architecture else '<'

    global_num, field_count = unpack(endian + 'HB',
                                     fitfile.read(3, 'byte definition'))
    fields = [FieldDefinition.from_bytes(fitfile.read(3, 'byte field'))
              for _ in range(field_count)]

    definition = Definition.build(record_header.local_message_type,
                                  not architecture, global_num, fields)
    log.debug('%s', definition)
    return fitfile.local_types.define(definition)


def read_data(fitfile, record_header):
    """Read a data record into a `Message`."""
    definition = fitfile.local_types[record_header.local_message_type]
    payload = fitfile.read(definition.total_bytes, 'byte payload')
    return decode_message(
        definition, payload, time_offset=record_header.time_offset,
        big_endian=fitfile.honor_architecture and definition.big_endian)


def read_record(fitfile):
    """Parse a record (header + contents).

    Returns a `Definition` or a `Message`, or None once the stream is over.
    """
    if fitfile.tracking_size and fitfile.bytes_left == 0:
        fitfile.read_file_crc()
        return None

    record_header = fitfile.read_record_header()
    if record_header is None:
        return None

    if record_header.is_definition:
        record = read_definition(fitfile, record_header)
    else:
        record = read_data(fitfile, record_header)

    if fitfile.tracking_size and fitfile.bytes_left < 0:
        raise FormatError('record overruns the declared data size by %d '
                          'bytes' % -fitfile.bytes_left)
    return record


@contextmanager
def open_fit(source, **options):
    """Open a session over a path, a bytes-like object or a binary stream.

    Files opened here are closed again, whatever happens; streams passed in
    are left open.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        reader, close, name = BytesIO(source), False, '<bytes>'
    elif hasattr(source, 'read'):
        reader, close, name = source, False, None
    else:
        reader, close, name = open(source, 'rb'), True, str(source)

    try:
        yield FitFile(reader, name=name, **options)
    finally:
        if close:
            reader.close()


def gen_fit_messages(source, **options):
    """Generator function for iterating over *.fit file messages.

    Parameters
    ----------
    source : str, bytes or file-like
        Path to the ANT/Garmin fit file, its contents or an open binary
        stream.
    **options
        ``check_crc`` and ``honor_architecture``; see `FitFile`.

    Yields
    ------
    Message
        Parsed data messages from `source`, in file order.
    """
    with open_fit(source, **options) as fitfile:
        read_file_header(fitfile)
        yield from fitfile


def decode(source, *, check_crc=True, honor_architecture=False):
    """Decode a whole FIT file.

    Any error aborts the file: nothing decoded before it is returned.

    Returns
    -------
    DecodedFile
    """
    with open_fit(source, check_crc=check_crc,
                  honor_architecture=honor_architecture) as fitfile:
        header = read_file_header(fitfile)
        messages = tuple(fitfile)
    return DecodedFile(header, messages)
