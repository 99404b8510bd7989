# The MIT License (MIT)
# 
# Copyright (c) 2018-2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Error handling APIs."""

import sys
import os.path
from typing import NoReturn

from availtree.common.location import Location

_print_stack = False
_me = os.path.basename(sys.argv[0])

class IntervalError(ValueError):
  """Malformed interval passed to interval APIs (caller error)."""
  pass

class ParseError(ValueError):
  """Malformed time or availability string."""

  def __init__(self, msg, loc=None):
    super().__init__(msg)
    self.msg = msg
    self.loc = loc or Location()

  def __str__(self):
    if not self.loc:
      return self.msg
    return f"{self.loc}: {self.msg}"

def error(msg) -> NoReturn:
  """Prints pretty error message and terminates."""
  sys.stderr.write(f"{_me}: error: {msg}\n")
  if _print_stack:
    raise RuntimeError(msg)
  sys.exit(1)

def error_if(cond, msg):
  """Report error if condition is true."""
  if cond:
    error(msg)

def warn(msg):
  """Prints pretty warning message."""
  sys.stderr.write(f"{_me}: warning: {msg}\n")

def warn_if(cond, msg):
  """Report warning if condition is true."""
  if cond:
    warn(msg)

def set_basename(name):
  """Set program name for error reports."""
  global _me
  _me = name

def set_options(**kwargs):
  """Set other error-reporting options."""
  for k, v in kwargs.items():
    if k == 'print_stack':
      global _print_stack
      _print_stack = v
    else:
      error(f"unknown option: {k}")
