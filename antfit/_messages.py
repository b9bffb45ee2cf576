#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Typed FIT messages.

One class per global message number listed in `_profile.MESSAGE_TYPES` is
generated at import time and registered in `MESSAGE_CLASSES`. Data records
for any other global number come out as an `UnknownMessage` holding a copy of
the raw payload.

Messages are read-only once built; every profile field is an attribute,
``None`` when the data record didn't carry it (or carried the invalid value).
A profile field whose name clashes with the message API gets a trailing
underscore (``hr_zone.name_``, ``device_settings.time_offset_``).

"""
from collections import namedtuple
import logging

from antfit._profile import (BASE_TYPES, BASE_TYPE_BYTE, GLOBAL_MESG_NUMS,
                             MESSAGE_TYPES, TYPES_INFO, resolve_base_type)
from antfit._util import misc
from antfit._util.exceptions import FormatError


log = logging.getLogger(__name__)

RESERVED = {'name', 'text', 'global_num', 'time_offset', 'unknown_fields',
            'decode', 'as_dict', 'value_name', 'from_payload', 'FIELDS',
            'ATTRS'}

_MISFIT = object()


class FieldSpec(namedtuple('FieldSpec', ['attr', 'name', 'type', 'base_type',
                                         'scale', 'offset', 'units',
                                         'accumulate'])):
    __slots__ = ()

    @property
    def extract(self):
        return self.base_type.extract

    @property
    def value_names(self):
        return TYPES_INFO.get(self.type, {})


def apply_scale_offset(spec, value):
    """From the FIT SDK release 20.03.00

    The FIT SDK supports applying a scale or offset to binary fields. This
    allows efficient representation of values within a particular range and
    provides a convenient method for representing floating point values in
    integer systems. A scale or offset may be specified in the FIT profile for
    binary fields (sint/uint etc.) only. When specified, the binary quantity
    is divided by the scale factor and then the offset is subtracted, yielding
    a floating point quantity.

    Fields with neither are left as they are. Arrays are scaled element-wise.
    """
    if isinstance(value, tuple):
        return tuple(apply_scale_offset(spec, v) for v in value)
    if isinstance(value, (bytes, str)) or value is None:
        return value
    if not (spec.scale or spec.offset):
        return value
    return value / (spec.scale or 1) - (spec.offset or 0)


def read_value(base_type, chunk, big_endian=False):
    """Decode a field's bytes as `base_type`.

    A chunk holding several values of the type gives a tuple. Invalid values
    become None, as does an array of nothing but invalid values. Returns the
    `_MISFIT` marker when the chunk size is no multiple of the type width.
    """
    if base_type.name == 'string':
        value, _ = base_type.extract(chunk, 0)
        return base_type.parse(value)
    if base_type is BASE_TYPE_BYTE:
        return base_type.parse(bytes(chunk))

    count, remainder = divmod(len(chunk), base_type.size)
    if remainder or not count:
        return _MISFIT

    values, pos = [], 0
    for _ in range(count):
        value, pos = base_type.extract(chunk, pos, big_endian=big_endian)
        values.append(base_type.parse(value))

    if count == 1:
        return values[0]
    if all(value is None for value in values):
        return None
    return tuple(values)


def _display(value):
    if isinstance(value, bytes):
        return value.hex()
    if isinstance(value, tuple):
        return ','.join(_display(v) for v in value)
    return str(value)


class Message:
    """Common behaviour of everything a data record decodes to."""
    __slots__ = ('time_offset',)

    name = None
    global_num = None

    def __setattr__(self, name, value):
        raise AttributeError("can't set attribute %r of a %s message"
                             % (name, self.name))

    def __delattr__(self, name):
        raise AttributeError("can't delete attribute %r of a %s message"
                             % (name, self.name))

    def _key(self):
        raise NotImplementedError

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self), self._key()))

    def __str__(self):
        return self.text


class DataMessage(Message):
    """A message the profile knows the fields of.

    Build one from the wire with `from_payload`, or directly from attribute
    values::

        >>> msg = MESSAGE_CLASSES_BY_NAME['file_id'](manufacturer=1, type=4)
        >>> msg.manufacturer_name(), msg.type_name()
        ('garmin', 'activity')

    """
    __slots__ = ('unknown_fields',)

    FIELDS = {}  # {field_num: FieldSpec}
    ATTRS = ()

    def __init__(self, time_offset=0, unknown_fields=(), **values):
        unexpected = set(values) - set(self.ATTRS)
        if unexpected:
            raise TypeError('%s has no field(s) %s'
                            % (self.name, ', '.join(sorted(unexpected))))
        for attr in self.ATTRS:
            object.__setattr__(self, attr, values.get(attr))
        object.__setattr__(self, 'time_offset', time_offset)
        object.__setattr__(self, 'unknown_fields', tuple(unknown_fields))

    @classmethod
    def from_payload(cls, definition, payload, *, time_offset=0,
                     big_endian=False):
        """Decode a data record's payload laid out by `definition`."""
        if len(payload) < definition.total_bytes:
            raise FormatError('%s payload holds %d bytes, definition needs %d'
                              % (cls.name, len(payload),
                                 definition.total_bytes))

        values, unknown_fields = {}, []
        pos = 0
        for field in definition.fields:
            end = pos + field.size
            chunk = payload[pos:end]
            pos = end

            spec = cls.FIELDS.get(field.num)
            if spec is None:
                log.debug('%s: skipping unrecognised field %d (%d bytes)',
                          cls.name, field.num, field.size)
                unknown_fields.append((field.num, bytes(chunk)))
                continue

            value = read_value(spec.base_type, chunk, big_endian)
            if value is _MISFIT:
                fallback = BASE_TYPES.get(field.base_type, BASE_TYPE_BYTE)
                value = read_value(fallback, chunk, big_endian)
            if value is _MISFIT:
                value = bytes(chunk)
            values[spec.attr] = value

        return cls(time_offset=time_offset, unknown_fields=unknown_fields,
                   **values)

    def _key(self):
        return (tuple(getattr(self, attr) for attr in self.ATTRS),
                self.unknown_fields, self.time_offset)

    def _specs(self):
        for num in sorted(self.FIELDS):
            yield self.FIELDS[num]

    def _spec(self, field):
        for spec in self.FIELDS.values():
            if field in (spec.attr, spec.name):
                return spec
        raise AttributeError('%s has no field %r' % (self.name, field))

    def value_name(self, field):
        """The profile's name for the value of an enumerated field.

        Values the profile has no name for are given back unchanged.
        """
        spec = self._spec(field)
        value = getattr(self, spec.attr)
        names = spec.value_names
        if value is None or not names:
            return value
        if isinstance(value, tuple):
            return tuple(names.get(v, v) for v in value)
        return names.get(value, value)

    def decode(self):
        """List the fields present as ``(name, value, units)`` tuples.

        Enumerations are given by name, scale and offset are applied and
        ``date_time`` fields become timezone aware datetimes, much like the
        SDK's FitCSVTool does it.
        """
        decoded = []
        for spec in self._specs():
            value = getattr(self, spec.attr)
            if value is None:
                continue
            units = spec.units
            if spec.type == 'date_time' and isinstance(value, int):
                value = misc.fit_datetime(value)
                if not isinstance(value, int):
                    units = ''
            elif spec.value_names:
                value = self.value_name(spec.attr)
            else:
                value = apply_scale_offset(spec, value)
            decoded.append((spec.name, value, units))
        return decoded

    def as_dict(self):
        """Raw values of the fields present, keyed by profile field name."""
        return {spec.name: getattr(self, spec.attr) for spec in self._specs()
                if getattr(self, spec.attr) is not None}

    @property
    def text(self):
        parts = [self.name]
        for spec in self._specs():
            value = getattr(self, spec.attr)
            if value is None:
                continue
            if spec.value_names:
                value = self.value_name(spec.attr)
            parts.append('%s=%s' % (spec.name, _display(value)))
        return ' '.join(parts)

    def __repr__(self):
        fields = ', '.join('%s=%r' % (attr, getattr(self, attr))
                           for attr in self.ATTRS
                           if getattr(self, attr) is not None)
        return '%s(%s)' % (type(self).__name__, fields)


class UnknownMessage(Message):
    """A data record whose global message number has no class."""
    __slots__ = ('global_num', 'raw')

    def __init__(self, global_num, raw, time_offset=0):
        object.__setattr__(self, 'global_num', global_num)
        object.__setattr__(self, 'raw', bytes(raw))
        object.__setattr__(self, 'time_offset', time_offset)

    @property
    def name(self):
        return 'unknown#%d' % self.global_num

    @property
    def text(self):
        known_as = GLOBAL_MESG_NUMS.get(self.global_num)
        return '%s%s %d bytes %s' % (
            self.name, ' (%s)' % known_as if known_as else '',
            len(self.raw), self.raw.hex())

    def _key(self):
        return (self.global_num, self.raw, self.time_offset)

    def __repr__(self):
        return 'UnknownMessage(%d, %r)' % (self.global_num, self.raw)


def _name_helper(attr):
    def helper(self):
        return self.value_name(attr)
    helper.__name__ = attr.rstrip('_') + '_name'
    helper.__doc__ = 'Name of the %s value.' % attr.rstrip('_')
    return helper


def make_message_class(global_num, name, fields):
    """Build the `DataMessage` subclass for one profile message."""
    specs = {}
    for num, info in fields.items():
        field_name = info['field_name']
        specs[num] = FieldSpec(
            attr=field_name + '_' if field_name in RESERVED else field_name,
            name=field_name,
            type=info['field_type'],
            base_type=resolve_base_type(info['field_type']),
            scale=info.get('scale'),
            offset=info.get('offset'),
            units=info.get('units', ''),
            accumulate=info.get('accumulate', False))

    attrs = tuple(specs[num].attr for num in sorted(specs))
    namespace = {
        '__slots__': attrs,
        '__doc__': 'The %r message (global number %d).' % (name, global_num),
        'name': name,
        'global_num': global_num,
        'FIELDS': specs,
        'ATTRS': attrs,
    }
    for spec in specs.values():
        helper = spec.attr.rstrip('_') + '_name'
        if (spec.value_names and helper not in attrs
                and not hasattr(DataMessage, helper)):
            namespace[helper] = _name_helper(spec.attr)

    class_name = ''.join(part.title() for part in name.split('_'))
    return type(class_name, (DataMessage,), namespace)


MESSAGE_CLASSES = {
    num: make_message_class(num, name, MESSAGE_TYPES[name])
    for num, name in GLOBAL_MESG_NUMS.items() if name in MESSAGE_TYPES}

MESSAGE_CLASSES_BY_NAME = {cls.name: cls for cls in MESSAGE_CLASSES.values()}


def decode_message(definition, payload, *, time_offset=0, big_endian=False):
    """Turn a data record's payload into a `Message`."""
    cls = MESSAGE_CLASSES.get(definition.global_num)
    if cls is None:
        return UnknownMessage(definition.global_num, payload,
                              time_offset=time_offset)
    return cls.from_payload(definition, payload, time_offset=time_offset,
                            big_endian=big_endian)
