#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Console output for the command line tool: ANSI decorations and indentation
of nested listings (a definition's fields, say).

"""
import sys


TEXT_DECORATIONS = {
    'bold': '\033[1m',
    'fail': '\033[91m',
    'end': '\033[0m',
}


class indented_stdout:
    """Indent every line printed while active.

        >>> with indented_stdout(2):
        ...    print('field   3: uint8         1 bytes')
        ...
          field   3: uint8         1 bytes

    Whatever `sys.stdout` is on entry gets the output, so it nests and plays
    along with captured output.
    """
    def __init__(self, indent=4):
        self.prefix = ' ' * indent
        self.at_line_start = True
        self.target = None

    def write(self, text):
        if self.at_line_start and text:
            text = self.prefix + text
        self.target.write(text)
        if text:
            self.at_line_start = text.endswith('\n')

    def flush(self):
        self.target.flush()

    def __enter__(self):
        self.target, sys.stdout = sys.stdout, self
        return self

    def __exit__(self, *exc_info):
        sys.stdout = self.target


def decorate(text, *decorations):
    """Wrap `text` in the ANSI codes named by `decorations`."""
    codes = ''.join(TEXT_DECORATIONS[d] for d in decorations)
    return codes + text + TEXT_DECORATIONS['end']


def printd(text, *decorations, **kwargs):
    """Print decorated; `kwargs` go to `print`."""
    print(decorate(text, *decorations), **kwargs)
