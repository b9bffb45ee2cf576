#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
General utilities to be used internally.

"""
from datetime import datetime, timedelta

import numpy as np
import pytz


TZ_UTC = pytz.timezone('UTC')

DATETIME_1990 = datetime(year=1989, month=12, day=31, tzinfo=TZ_UTC)

# date_time values below this are seconds relative to the device's power on,
# not since DATETIME_1990
MIN_DATETIME = 0x10000000


def semicircles_to_degrees(semicircles):
    """Positional data conversion for *.fit files

    https://github.com/kuperov/fit/blob/master/R/fit.R
    """
    semicircles = np.asarray(semicircles, dtype=np.float64)
    return (semicircles * 180 / 2**31 + 180) % 360 - 180


def fit_datetime(seconds, tz_str=None):
    """A FIT date_time as an aware datetime (UTC unless `tz_str` is given).

    System times, which aren't anchored to a date, are returned untouched.

        >>> fit_datetime(0x10000000)
        datetime.datetime(1998, 7, 3, 21, 24, 16, tzinfo=<UTC>)
    """
    if seconds < MIN_DATETIME:
        return seconds
    stamp = DATETIME_1990 + timedelta(seconds=seconds)
    if tz_str is not None:
        stamp = stamp.astimezone(pytz.timezone(tz_str))
    return stamp
