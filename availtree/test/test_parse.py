# The MIT License (MIT)
# 
# Copyright (c) 2020 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

import pytest

import availtree.common.parse as PA
from availtree.common import interval as I
from availtree.common.error import ParseError, IntervalError
from availtree.common.location import Location

def test_read_time():
  assert PA.read_time('00:00') == 0
  assert PA.read_time('09:30') == 570
  assert PA.read_time(' 9:05 ') == 545
  assert PA.read_time('24:00') == 1440

@pytest.mark.parametrize('s', ['24:01', '25:00', '12:60', '12', 'noon', '12:5', ''])
def test_read_time_bad(s):
  with pytest.raises(ParseError):
    PA.read_time(s)

def test_read_range():
  iv, label = PA.read_range('09:00-16:00 Royal Bank of Scotland')
  assert iv == I.Interval(540, 960) and label == 'Royal Bank of Scotland'
  iv, label = PA.read_range('10:00-17:00')
  assert iv == I.Interval(600, 1020) and label == ''
  iv, label = PA.read_range('  02:00 - 07:00   NAB  ')
  assert iv == I.Interval(120, 420) and label == 'NAB'

@pytest.mark.parametrize('s', ['12-13', '09:00', '09:00-', '22:00-02:00', '09:00-16:00-17:00'])
def test_read_range_bad(s):
  with pytest.raises(ParseError):
    PA.read_range(s)

def test_error_location():
  with pytest.raises(ParseError) as e:
    PA.read_range('9-5 Somebody', Location('banks.txt', 3))
  assert str(e.value).startswith('banks.txt:3: ')
  with pytest.raises(ParseError) as e:
    PA.read_range('9-5')
  assert not str(e.value).startswith('?:?')

def test_format():
  assert PA.format_time(570) == '09:30'
  assert PA.format_time(1440) == '24:00'
  assert PA.format_range(I.Interval(120, 420)) == '02:00-07:00'
  for s in ['00:00', '07:59', '23:59']:
    assert PA.format_time(PA.read_time(s)) == s
  with pytest.raises(IntervalError):
    PA.format_time(-1)
