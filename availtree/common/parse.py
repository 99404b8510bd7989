# The MIT License (MIT)
# 
# Copyright (c) 2018-2020 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Parsing and formatting of times of day."""

import re

from availtree.common.error import ParseError, IntervalError
import availtree.common.interval as I

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

def read_time(s, loc=None):
  """Parse time of day e.g. "09:30" into minutes since midnight."""
  m = re.fullmatch(r'\s*([0-9]{1,2}):([0-9]{2})\s*', s)
  if m is None:
    raise ParseError(f"failed to parse time: '{s}'", loc)
  h = int(m.group(1))
  mins = int(m.group(2))
  # 24:00 is allowed to denote end of day
  if mins >= MINUTES_PER_HOUR or h * MINUTES_PER_HOUR + mins > MINUTES_PER_DAY:
    raise ParseError(f"time out of range: '{s.strip()}'", loc)
  return h * MINUTES_PER_HOUR + mins

def read_range(s, loc=None):
  """Parse availability e.g. "09:00-16:00 Royal Bank of Scotland".
     Returns interval in minutes and (possibly empty) label."""
  m = re.search(r'^\s*([^-\s]+)\s*-\s*(\S+)(?:\s+(.*?))?\s*$', s)
  if m is None:
    raise ParseError(f"failed to parse time range: '{s}'", loc)
  start = read_time(m.group(1), loc)
  end = read_time(m.group(2), loc)
  if start > end:
    raise ParseError(f"time range wraps around midnight: '{m.group(1)}-{m.group(2)}'", loc)
  return I.Interval(start, end), m.group(3) or ''

def format_time(t):
  """Format minutes since midnight as "HH:MM"."""
  if t < 0 or t > MINUTES_PER_DAY:
    raise IntervalError(f"offset outside of day: {t}")
  return '%02d:%02d' % divmod(t, MINUTES_PER_HOUR)

def format_range(iv):
  return f'{format_time(iv.start)}-{format_time(iv.end)}'
