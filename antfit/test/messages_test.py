#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from datetime import datetime
import logging

import pytest
import pytz

from antfit._messages import (MESSAGE_CLASSES, MESSAGE_CLASSES_BY_NAME,
                              UnknownMessage, decode_message)
from antfit._profile import (BASE_TYPE_NAMES, MESSAGE_TYPES, TYPES,
                             resolve_base_type)
from antfit._protocol import Definition, FieldDefinition
from antfit._util.exceptions import FormatError


REGISTERED = {
    0: 'file_id', 1: 'capabilities', 2: 'device_settings', 3: 'user_profile',
    4: 'hrm_profile', 5: 'sdm_profile', 6: 'bike_profile', 7: 'zones_target',
    8: 'hr_zone', 9: 'power_zone', 10: 'met_zone', 12: 'sport', 15: 'goal',
    18: 'session', 19: 'lap', 20: 'record', 21: 'event', 23: 'device_info',
    26: 'workout', 27: 'workout_step', 28: 'schedule', 30: 'weight_scale',
    31: 'course', 32: 'course_point', 33: 'totals', 34: 'activity',
    35: 'software', 37: 'file_capabilities', 38: 'mesg_capabilities',
    39: 'field_capabilities', 49: 'file_creator', 51: 'blood_pressure',
    53: 'speed_zone', 55: 'monitoring', 78: 'hrv', 101: 'length',
    103: 'monitoring_info', 105: 'pad', 106: 'slave_device',
    131: 'cadence_zone'}

Record = MESSAGE_CLASSES_BY_NAME['record']
Event = MESSAGE_CLASSES_BY_NAME['event']
FileId = MESSAGE_CLASSES_BY_NAME['file_id']


def definition(global_num, *fields):
    """`fields` as ``(num, size, type_byte)``."""
    return Definition.build(0, True, global_num,
                            [FieldDefinition.from_bytes(bytes(field))
                             for field in fields])


# Registry and profile
# --------------------

def test_registry():
    assert {num: cls.name for num, cls in MESSAGE_CLASSES.items()} == \
        REGISTERED
    assert MESSAGE_CLASSES[20] is Record
    assert Record.__name__ == 'Record'
    assert FileId.__name__ == 'FileId'


def test_every_field_type_resolves():
    for name, fields in MESSAGE_TYPES.items():
        for num, info in fields.items():
            assert resolve_base_type(info['field_type']).name in \
                BASE_TYPE_NAMES, (name, num)


def test_every_type_has_a_base_type():
    for name, info in TYPES.items():
        assert info['base_type'] in BASE_TYPE_NAMES, name


# Decoding payloads
# -----------------

def test_scalar_fields():
    message = decode_message(
        definition(20, (253, 4, 0x86), (3, 1, 0x02), (6, 2, 0x84)),
        b'\x00\xca\x9a\x3b\x8c\x88\x13')
    assert message.timestamp == 1000000000
    assert message.heart_rate == 140
    assert message.speed == 5000
    assert message.cadence is None


def test_array_field():
    message = decode_message(definition(78, (0, 6, 0x84)),
                             b'\x10\x00\xff\xff\x20\x00')
    assert message.time == (16, None, 32)
    assert message.decode() == [('time', (0.016, None, 0.032), 's')]


def test_all_invalid_array():
    message = decode_message(definition(78, (0, 4, 0x84)),
                             b'\xff\xff\xff\xff')
    assert message.time is None


def test_invalid_values():
    message = decode_message(
        definition(23, (2, 2, 0x84), (3, 4, 0x8C), (5, 2, 0x84)),
        b'\xff\xff\x00\x00\x00\x00\x0a\x00')
    assert message.manufacturer is None
    assert message.serial_number is None      # uint32z
    assert message.software_version == 10


def test_string_field():
    message = decode_message(definition(8, (254, 2, 0x84), (2, 8, 0x07)),
                             b'\x01\x00Zone 1\x00\x00')
    assert message.name == 'hr_zone'
    assert message.name_ == 'Zone 1'
    assert message.message_index == 1


def test_empty_string_field():
    message = decode_message(definition(8, (2, 4, 0x07)), b'\x00\x00\x00\x00')
    assert message.name_ is None


def test_unrecognised_field_is_skipped(caplog):
    with caplog.at_level(logging.DEBUG, logger='antfit._messages'):
        message = decode_message(
            definition(20, (3, 1, 0x02), (200, 2, 0x84), (4, 1, 0x02)),
            b'\x8c\x01\x02\x5a')
    assert message.heart_rate == 140
    assert message.cadence == 90
    assert message.unknown_fields == ((200, b'\x01\x02'),)
    assert 'skipping unrecognised field 200' in caplog.text


def test_field_size_mismatch():
    # 3 bytes is no multiple of a uint16, so the definition's type is used
    message = decode_message(definition(20, (6, 3, 0x02)), b'\x01\x02\x03')
    assert message.speed == (1, 2, 3)

    # ...and if that doesn't fit either the bytes are kept
    message = decode_message(definition(20, (6, 3, 0x84)), b'\x01\x02\x03')
    assert message.speed == b'\x01\x02\x03'


def test_short_payload():
    with pytest.raises(FormatError):
        decode_message(definition(20, (3, 1, 0x02), (4, 1, 0x02)), b'\x8c')


def test_empty_message():
    message = decode_message(definition(105), b'')
    assert message.name == 'pad'
    assert message.unknown_fields == ()


def test_time_offset():
    message = decode_message(definition(20, (3, 1, 0x02)), b'\x8c',
                             time_offset=9)
    assert message.time_offset == 9


# Unknown messages
# ----------------

def test_unknown_message_copies_payload():
    payload = bytearray(b'\x01\x02\x03')
    message = decode_message(definition(9999, (0, 3, 0x0D)), payload)
    payload[0] = 0xFF

    assert isinstance(message, UnknownMessage)
    assert message.raw == b'\x01\x02\x03'
    assert isinstance(message.raw, bytes)
    assert message.name == 'unknown#9999'
    assert message == UnknownMessage(9999, b'\x01\x02\x03')


def test_unknown_message_text():
    assert UnknownMessage(206, b'\xab').text == \
        'unknown#206 (field_description) 1 bytes ab'


# Message behaviour
# -----------------

def test_read_only():
    message = Record(heart_rate=140)
    with pytest.raises(AttributeError):
        message.heart_rate = 150
    with pytest.raises(AttributeError):
        del message.heart_rate
    with pytest.raises(AttributeError):
        message.not_a_field = 1
    with pytest.raises(AttributeError):
        UnknownMessage(1, b'').raw = b'\x00'


def test_equality():
    assert Record(heart_rate=140) == Record(heart_rate=140)
    assert Record(heart_rate=140) != Record(heart_rate=141)
    assert Record(heart_rate=140) != Record(heart_rate=140, time_offset=3)
    assert FileId() != Record()
    assert len({Record(heart_rate=140), Record(heart_rate=140)}) == 1


def test_unexpected_field():
    with pytest.raises(TypeError):
        Record(bogus=1)


def test_name_collisions():
    HrZone = MESSAGE_CLASSES_BY_NAME['hr_zone']
    DeviceSettings = MESSAGE_CLASSES_BY_NAME['device_settings']

    assert HrZone(name_='Z2').name == 'hr_zone'
    assert HrZone(name_='Z2').as_dict() == {'name': 'Z2'}

    settings = DeviceSettings(time_offset_=3600, time_offset=4)
    assert settings.time_offset_ == 3600
    assert settings.time_offset == 4


def test_value_names():
    message = Event(event=0, event_type=1)
    assert message.event_name() == 'timer'
    assert message.event_type_name() == 'stop'
    assert message.value_name('event') == 'timer'

    assert Event(event=200).event_name() == 200     # not in the profile
    assert Event().event_name() is None

    message = FileId(type=4, manufacturer=1)
    assert message.type_name() == 'activity'
    assert message.manufacturer_name() == 'garmin'


def test_text():
    assert Record(heart_rate=140, cadence=90).text == \
        'record heart_rate=140 cadence=90'
    assert str(Event(event=0, event_type=1)) == \
        'event event=timer event_type=stop'


def test_decode_scale_and_offset():
    message = Record(altitude=2600, heart_rate=140, speed=5000)
    assert message.decode() == [('altitude', 20.0, 'm'),
                                ('heart_rate', 140, 'bpm'),
                                ('speed', 5.0, 'm/s')]

    BikeProfile = MESSAGE_CLASSES_BY_NAME['bike_profile']
    assert BikeProfile(crank_length=130).decode() == \
        [('crank_length', 175.0, 'mm')]


def test_decode_enums():
    assert FileId(type=4, manufacturer=257).decode() == \
        [('type', 'activity', ''), ('manufacturer', 257, '')]


def test_decode_date_time():
    expected = datetime(2021, 9, 8, 1, 46, 40, tzinfo=pytz.utc)
    assert Record(timestamp=1000000000).decode() == \
        [('timestamp', expected, '')]

    # system time, relative to power up
    assert Record(timestamp=1000).decode() == [('timestamp', 1000, 's')]


def test_decode_odd_sized_date_time():
    # 3 bytes is no date_time; the definition's type is all there is
    message = decode_message(definition(20, (253, 3, 0x0D)), b'\x01\x02\x03')
    assert message.timestamp == b'\x01\x02\x03'
    assert message.decode() == [('timestamp', b'\x01\x02\x03', 's')]

    message = decode_message(definition(20, (253, 3, 0x07)), b'ab\x00')
    assert message.decode() == [('timestamp', 'ab', 's')]


def test_as_dict():
    assert Record(heart_rate=140, position_lat=1).as_dict() == \
        {'position_lat': 1, 'heart_rate': 140}
