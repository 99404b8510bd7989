# The MIT License (MIT)
# 
# Copyright (c) 2020 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

import io
import logging

import pytest

from availtree.__main__ import main
from availtree.common.error import set_options

@pytest.fixture
def banks_file(tmp_path, banks):
  path = tmp_path / 'banks.txt'
  path.write_text('\n'.join(banks) + '\n')
  return str(path)

def test_demo(capsys):
  main(['demo'])
  assert capsys.readouterr().out == "10:00-17:00 is available\n15:00-21:00 is not available\n"

def test_demo_queries(capsys):
  main(['demo', '02:30-06:00', '07:00-09:00'])
  assert capsys.readouterr().out == "02:30-06:00 is available\n07:00-09:00 is not available\n"

def test_query(capsys, banks_file):
  main(['query', banks_file, '10:00-17:00', '15:00-21:00', '--no-reconcile'])
  assert capsys.readouterr().out == "10:00-17:00 is available\n15:00-21:00 is not available\n"

def test_dump(capsys, banks_file):
  main(['dump', banks_file])
  out = capsys.readouterr().out
  assert out.startswith("Windows (2, depth 2):\n  02:00-07:00\n  09:00-20:00\n")

def test_bad_query(capsys, banks_file):
  with pytest.raises(SystemExit) as e:
    main(['query', banks_file, '25:00-26:00'])
  assert e.value.code == 1
  assert 'availtree: error: ' in capsys.readouterr().err

def test_missing_args(capsys, tmp_path):
  with pytest.raises(SystemExit):
    main(['query'])
  with pytest.raises(SystemExit):
    main(['dump', str(tmp_path / 'nonexistent.txt')])
  assert 'failed to read' in capsys.readouterr().err

def test_stdin(capsys, monkeypatch, banks):
  monkeypatch.setattr('sys.stdin', io.StringIO('\n'.join(banks) + '\n'))
  main(['query', '-', '10:00-17:00'])
  assert capsys.readouterr().out == "10:00-17:00 is available\n"

def test_print_stack(banks_file):
  try:
    with pytest.raises(RuntimeError):
      main(['query', banks_file, '25:00-26:00', '--print-stack'])
  finally:
    set_options(print_stack=False)

def test_verbose(capsys, caplog, banks_file):
  caplog.set_level(logging.INFO)
  main(['-v', 'query', banks_file, '15:00-21:00'])
  assert capsys.readouterr().out == "15:00-21:00 is not available\n"
  assert "15:00-21:00: open sources: Royal Bank of Scotland, Morgan Stanley, JP Morgan" in caplog.text

def test_query_label(capsys, banks_file):
  main(['query', banks_file, '10:00-17:00 Morgan Stanley'])
  captured = capsys.readouterr()
  assert captured.out == "10:00-17:00 Morgan Stanley is available\n"
  assert "availtree: warning: ignoring trailing text" in captured.err
