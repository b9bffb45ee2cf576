#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Avoid repeating documentation. A bit hacky but it will do.

"""
import inspect


def gen_records(func):
    """Generator function for iterating over the messages of a FIT file as
    records.

    "Records" are dictionary objects representing a single message; i.e. a
    row in a tabular representation. Keys are profile field names, suffixed
    with the units where there are any (``speed_m/s``). Note this can be
    passed to the `from_records` constructor method of `pandas.DataFrame`s.

    Parameters
    ----------
    source : str, bytes or file-like
        A path, the raw bytes or an open binary stream.
    name : str, optional
        The message to tabulate; 'record' by default. A 'lap' column counting
        the lap messages seen so far is added to 'record' rows.
    **options
        Passed on to `FitFile`.
    """
    this_func = inspect.stack()[0][3]
    this_doc = globals().get(this_func).__doc__
    func.__doc__ = this_doc
    return func
