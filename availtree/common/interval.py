# The MIT License (MIT)
# 
# Copyright (c) 2020 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.
#
# This file contains APIs for describing ranges of integer offsets
# (e.g. minutes since midnight) within a single cycle.

from availtree.common.error import IntervalError

def check_bounds(l, r):
  """Verify that [l, r] is a well-formed interval."""
  # bool is an int subclass but not a meaningful offset
  if any(not isinstance(x, int) or isinstance(x, bool) for x in (l, r)):
    raise IntervalError(f"interval bounds must be integers: [{l!r}, {r!r}]")
  if l < 0:
    raise IntervalError(f"interval starts before beginning of cycle: [{l}, {r}]")
  if l > r:
    raise IntervalError(f"interval ends before it starts: [{l}, {r}]")

class Interval:
  """Represents closed range [l, r] of offsets."""

  __slots__ = ['l', 'r']

  def __init__(self, l, r=None):
    if r is None:
      r = l
    check_bounds(l, r)
    self.l = l
    self.r = r

  @property
  def start(self):
    return self.l

  @property
  def end(self):
    return self.r

  def before(self, i):
    """Ends strictly before i starts (no shared endpoint)."""
    return self.r < i.l

  def after(self, i):
    return self.l > i.r

  def touches(self, i):
    """Overlaps i or shares an endpoint with it."""
    return not (self.before(i) or self.after(i))

  def covers(self, i):
    return self.l <= i.l and i.r <= self.r

  def __iter__(self):
    return iter((self.l, self.r))

  def __eq__(self, i):
    if not isinstance(i, Interval):
      return NotImplemented
    return self.l == i.l and self.r == i.r

  def __hash__(self):
    return hash((self.l, self.r))

  def __repr__(self):
    return '[%d, %d]' % (self.l, self.r)
