#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from datetime import datetime, timedelta
import struct

import numpy as np
import pandas as pd
import pytz

import antfit
from antfit._util import misc


START = datetime(2021, 9, 8, 1, 46, 40, tzinfo=pytz.utc)


def test_gen_records(activity_bytes):
    records = list(antfit.gen_records(activity_bytes))
    assert len(records) == 3
    assert [r['lap'] for r in records] == [1, 1, 2]
    assert [r['heart_rate_bpm'] for r in records] == [120, 125, 130]
    assert records[0]['timestamp'] == START
    assert records[2]['timestamp'] == START + timedelta(seconds=2)
    assert records[0]['position_lat_semicircles'] == 2**29


def test_gen_records_other_messages(activity_bytes):
    laps = list(antfit.gen_records(activity_bytes, name='lap'))
    assert laps == [{'timestamp': START + timedelta(seconds=1),
                     'message_index': 0}]

    file_ids = list(antfit.gen_records(activity_bytes, name='file_id'))
    assert file_ids == [{'type': 'activity', 'manufacturer': 'garmin'}]


def test_gen_records_doc():
    assert 'Records' in antfit.gen_records.__doc__


def test_read(activity_bytes):
    data = antfit.read(activity_bytes)
    assert isinstance(data, antfit.FitFrame)
    assert len(data) == 3

    assert 'position_lat_semicircles' not in data
    assert np.allclose(data['position_lat_deg'], 45.0)
    assert np.allclose(data['position_long_deg'], -90.0)
    assert data['heart_rate_bpm'].tolist() == [120, 125, 130]
    assert data['lap'].tolist() == [1, 1, 2]

    assert isinstance(data.index, pd.TimedeltaIndex)
    assert data.index[-1] == pd.Timedelta(seconds=2)
    assert data.start == START
    assert data.header.data_size == len(activity_bytes) - 16


def test_read_with_timezone(activity_bytes):
    data = antfit.read(activity_bytes, tz_str='Europe/London')
    assert data.start == START         # same instant...
    assert str(data.start.tz) == 'Europe/London'


def test_metadata_survives_slicing(activity_bytes):
    data = antfit.read(activity_bytes)
    assert data.iloc[1:].start == data.start


def test_decoded_file_to_frame(activity_bytes):
    data = antfit.decode(activity_bytes).to_frame()
    assert list(data.columns) == list(antfit.read(activity_bytes).columns)
    assert data.header == antfit.decode(activity_bytes).header


def test_read_nothing(build):
    data = antfit.read(build.header())
    assert len(data) == 0
    assert data.start is None


def test_semicircles_to_degrees():
    assert misc.semicircles_to_degrees(2**30) == 90.0
    assert misc.semicircles_to_degrees(-2**30) == -90.0
    assert np.allclose(misc.semicircles_to_degrees([0, 2**29]), [0.0, 45.0])


def test_fit_datetime():
    assert misc.fit_datetime(1000000000) == START
    assert misc.fit_datetime(1000) == 1000
    local = misc.fit_datetime(1000000000, tz_str='Australia/Sydney')
    assert local == START
    assert local.hour == 11


def test_first_record_without_timestamp(build):
    raw = build.file(
        build.definition(0, 20, [(3, 1, 0x02)]),
        build.data(0, b'\x78'),
        build.definition(1, 20, [(253, 4, 0x86), (3, 1, 0x02)]),
        build.data(1, struct.pack('<IB', 1000000000, 125)),
        build.data(1, struct.pack('<IB', 1000000001, 130)))

    data = antfit.read(raw)
    assert data.start == START
    assert pd.isna(data.index[0])
    assert list(data.index[1:]) == [pd.Timedelta(0), pd.Timedelta(seconds=1)]
    assert data['heart_rate_bpm'].tolist() == [120, 125, 130]


def test_no_timestamps_at_all(build):
    raw = build.file(build.definition(0, 20, [(3, 1, 0x02)]),
                     build.data(0, b'\x78'))
    data = antfit.read(raw)
    assert data.start is None
    assert data['heart_rate_bpm'].tolist() == [120]


def test_odd_sized_fields(build):
    raw = build.file(
        build.definition(0, 20, [(253, 3, 0x0D), (0, 3, 0x0D),
                                 (3, 1, 0x02)]),
        build.data(0, b'\x01\x02\x03\x04\x05\x06\x78'))

    data = antfit.read(raw)
    assert data.start is None
    assert data['timestamp_s'].tolist() == [b'\x01\x02\x03']
    assert data['position_lat_deg'].isna().all()
    assert data['heart_rate_bpm'].tolist() == [120]
