#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Translate the `_protocol` module functionality into tables.

"""
from antfit._protocol import gen_fit_messages, open_fit, read_file_header
from antfit._types import FitFrame, gen_rows
from antfit._util import drydoc


@drydoc.gen_records
def gen_records(source, *, name='record', **options):
    yield from gen_rows(gen_fit_messages(source, **options), name)


def read(source, *, name='record', tz_str=None, **options):
    """Read the `name` messages of a FIT file into a `FitFrame`.

    Parameters
    ----------
    source : str, bytes or file-like
        A path, the raw bytes or an open binary stream.
    name : str, optional
        Message to tabulate; one row per message.
    tz_str : str, optional
        Time zone (as understood by `pytz.timezone`) for the `start`
        attribute. UTC by default.
    **options
        Passed on to `FitFile`.
    """
    with open_fit(source, **options) as fitfile:
        header = read_file_header(fitfile)
        return FitFrame.from_messages(fitfile, name=name, tz_str=tz_str,
                                      header=header)
