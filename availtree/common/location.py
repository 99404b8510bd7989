# The MIT License (MIT)
# 
# Copyright (c) 2020 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Locations of availability records in input files."""

class Location:
  """Line in availability file."""

  def __init__(self, filename=None, lineno=None):
    self.filename = filename
    self.lineno = lineno

  def __str__(self):
    if not self:
      return '?:?'
    if self.lineno is None:
      return self.filename
    return f'{self.filename}:{self.lineno}'

  def __bool__(self):
    return self.filename is not None
