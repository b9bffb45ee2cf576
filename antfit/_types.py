#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Containers for decoded files.

`DecodedFile` is what `decode` gives back; `FitFrame` is the tabular view of
one kind of message, with the file's start time and header along for the
ride.

"""
from numbers import Real

import numpy as np
import pandas as pd
from pandas import DataFrame
import pytz

from antfit._util import misc


def make_key(field):
    if field[2]:
        return field[0] + '_' + field[2]
    else:
        return field[0]


def format_message(message):
    decoded = message.decode()   # (name, value, units)
    return {make_key(field): field[1] for field in decoded}


def gen_rows(messages, name='record'):
    """Rows for the `name` messages among `messages`.

    Record rows get a 'lap' count, bumped by each lap message that goes by.
    """
    lap = 1
    for message in messages:
        if message.name == 'lap' and name != 'lap':
            lap += 1
        elif message.name == name:
            row = format_message(message)
            if name == 'record':
                row['lap'] = lap
            yield row


class FitFrame(DataFrame):
    """A `pandas.DataFrame` of decoded messages.

    Positions come in degrees (``position_lat_deg``) rather than
    semicircles. Where the messages carry a timestamp it becomes a
    ``TimedeltaIndex`` of offsets from `start`.

    Attributes
    ----------
    start : pandas.Timestamp or None
        Timestamp of the first row that has one, timezone aware. Rows
        without a timestamp get a ``NaT`` index entry.
    header : FitHeader or None
        Header of the file the rows came from.
    """
    _metadata = ['start', 'header']

    @property
    def _constructor(self):
        return self.__class__

    def __finalize__(self, other, method=None, **kwargs):
        """Propagate metadata from other to self."""
        for name in self._metadata:
            object.__setattr__(self, name, getattr(other, name, None))
        return self

    @classmethod
    def from_messages(cls, messages, *, name='record', tz_str=None,
                      header=None):
        data = cls.from_records(list(gen_rows(messages, name)))
        data._finish_up(tz_str=tz_str, header=header)
        return data

    def _finish_up(self, *, tz_str=None, header=None):
        self.header = header

        semicircles = [col for col in self.columns
                       if col.endswith('_semicircles')]
        for col in semicircles:
            # odd-sized fields come out as bytes or tuples
            values = self.pop(col).map(
                lambda v: v if isinstance(v, Real) else np.nan)
            degrees = misc.semicircles_to_degrees(values)
            self[col[:-len('_semicircles')] + '_deg'] = degrees

        self.start = None
        if 'timestamp' in self:
            timestamps = pd.to_datetime(self.pop('timestamp'), utc=True,
                                        errors='coerce')
            timezone = (pytz.timezone(tz_str) if tz_str is not None
                        else misc.TZ_UTC)
            timestamps = timestamps.dt.tz_convert(timezone)
            known = timestamps.dropna()
            if len(known):
                self.start = known.iloc[0]
                self.index = pd.TimedeltaIndex(timestamps - self.start,
                                               name='time')


class DecodedFile:
    """The header and data messages of a FIT file, in file order."""
    __slots__ = ('header', 'messages')

    def __init__(self, header, messages):
        self.header = header
        self.messages = tuple(messages)

    def by_name(self, name):
        """All messages called `name` ('record', 'unknown#99', ...)."""
        return [message for message in self.messages if message.name == name]

    def to_frame(self, name='record', *, tz_str=None):
        """Tabulate the `name` messages as a `FitFrame`."""
        return FitFrame.from_messages(self.messages, name=name, tz_str=tz_str,
                                      header=self.header)

    def __iter__(self):
        return iter(self.messages)

    def __len__(self):
        return len(self.messages)

    def __getitem__(self, index):
        return self.messages[index]

    def __eq__(self, other):
        if not isinstance(other, DecodedFile):
            return NotImplemented
        return (self.header, self.messages) == (other.header, other.messages)

    def __hash__(self):
        return hash((self.header, self.messages))

    def __repr__(self):
        return 'DecodedFile(%r, <%d messages>)' % (self.header,
                                                  len(self.messages))
