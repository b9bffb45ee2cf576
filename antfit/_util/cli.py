#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
main is installed as an executable console_script with this package.

"""
from argparse import ArgumentParser
from functools import partial
import logging
from os import path
import sys

from antfit._protocol import Definition, open_fit, read_file_header
from antfit._types import DecodedFile
from antfit._util.console import indented_stdout, printd


def show_definition(definition):
    print(definition)
    with indented_stdout(2):
        for field in definition.fields:
            print(field)


def summarise(file_path, *, verbose=False, output=None):
    """Decode one file, printing as we go."""
    messages = []
    with open_fit(file_path) as fitfile:
        read_file_header(fitfile)
        if verbose:
            printd(str(fitfile), 'bold')

        for record in fitfile.records():
            if isinstance(record, Definition):
                if verbose:
                    show_definition(record)
            else:
                messages.append(record)
                if verbose:
                    print('data:', record.text)

    decoded = DecodedFile(fitfile.header, messages)
    print('%s, %d messages' % (fitfile, len(decoded)))

    if output is not None:
        bare, __ = path.splitext(path.basename(file_path))
        write = partial(decoded.to_frame().to_csv,
                        na_rep='NA', index_label='time', encoding='utf-8')
        write(path.join(output, bare + '.csv'))

    return decoded


def main(argv=None):

    # Argument handling
    parser = ArgumentParser(description='decode ANT+ FIT files')

    parser.add_argument('files',
                        type=str,
                        nargs='+',
                        metavar='file',
                        help='FIT file(s) to read')
    parser.add_argument('--verbose',
                        action='store_true',
                        help='optional; print every definition and message')
    parser.add_argument('--output',
                        type=str,
                        metavar='directory',
                        default=None,
                        help='optional; write record tables here as CSV')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr)

    # Script begins
    for file_path in args.files:
        try:
            summarise(file_path, verbose=args.verbose, output=args.output)
        except Exception as e:
            printd('!! Cannot read %s: %s' % (file_path, e), 'fail',
                   file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
