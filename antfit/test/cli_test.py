#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from antfit._types import DecodedFile
from antfit._util.cli import main


def write(directory, name, data):
    path = directory / name
    path.write_bytes(data)
    return str(path)


def test_summary(tmp_path, capsys, file_id_bytes):
    path = write(tmp_path, 'ride.fit', file_id_bytes)
    assert main([path]) == 0

    out = capsys.readouterr().out
    assert 'ride.fit: proto 1.0 profile 20.93 data 12, 1 messages' in out


def test_continues_after_failures(tmp_path, capsys, file_id_bytes):
    bad = write(tmp_path, 'bad.fit', b'this is not a FIT file')
    missing = str(tmp_path / 'missing.fit')
    good = write(tmp_path, 'good.fit', file_id_bytes)

    assert main([bad, missing, good]) == 0

    captured = capsys.readouterr()
    assert captured.err.count('!! Cannot read') == 2
    assert '!! Cannot read %s' % bad in captured.err
    assert '!! Cannot read %s' % missing in captured.err
    assert 'good.fit' in captured.out


def test_verbose(tmp_path, capsys, file_id_bytes):
    path = write(tmp_path, 'ride.fit', file_id_bytes)
    assert main(['--verbose', path]) == 0

    out = capsys.readouterr().out
    assert 'def: ltyp 0 little glbl 0 (file_id) 2 bytes' in out
    assert '\n  field   1: uint16' in out
    assert 'data: file_id manufacturer=257' in out


def test_output(tmp_path, capsys, activity_bytes):
    path = write(tmp_path, 'ride.fit', activity_bytes)
    out_dir = tmp_path / 'tables'
    out_dir.mkdir()

    assert main(['--output', str(out_dir), path]) == 0

    csv = (out_dir / 'ride.csv').read_text(encoding='utf-8')
    header = csv.splitlines()[0].split(',')
    assert header[0] == 'time'
    assert 'heart_rate_bpm' in header
    assert 'position_lat_deg' in header
    assert len(csv.splitlines()) == 4


def test_output_with_odd_sized_fields(tmp_path, capsys, build):
    raw = build.file(build.definition(0, 20, [(253, 3, 0x0D)]),
                     build.data(0, b'\x01\x02\x03'))
    path = write(tmp_path, 'odd.fit', raw)

    assert main(['--output', str(tmp_path), path]) == 0

    assert '!! Cannot read' not in capsys.readouterr().err
    assert (tmp_path / 'odd.csv').exists()


def test_any_failure_is_reported(tmp_path, capsys, monkeypatch,
                                 file_id_bytes):
    def broken(self, *args, **kwargs):
        raise ValueError('no table today')

    monkeypatch.setattr(DecodedFile, 'to_frame', broken)
    first = write(tmp_path, 'first.fit', file_id_bytes)
    second = write(tmp_path, 'second.fit', file_id_bytes)

    assert main(['--output', str(tmp_path), first, second]) == 0

    err = capsys.readouterr().err
    assert '!! Cannot read %s: no table today' % first in err
    assert '!! Cannot read %s: no table today' % second in err
