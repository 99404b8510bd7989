# The MIT License (MIT)
# 
# Copyright (c) 2020-2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Availabilities of several sources aggregated into a single timeline."""

import logging

from availtree.common.location import Location
import availtree.common.parse as PA
from availtree.store import IntervalStore

logger = logging.getLogger(__name__)

class AvailabilityBook:
  """Collects availabilities like "09:00-16:00 Royal Bank of Scotland"
     and answers whether a time range is covered by them."""

  def __init__(self, availabilities=(), reconcile=True):
    self.store = IntervalStore(reconcile)
    self.sources = []
    for a in availabilities:
      self.add(a)

  def add(self, text, loc=None):
    iv, label = PA.read_range(text, loc)
    logger.debug("%s: adding %s (%s)", loc or Location(), PA.format_range(iv), label or 'unnamed')
    self.store.insert(iv.start, iv.end)
    self.sources.append((iv, label))

  def load(self, filename, f):
    """Read availabilities from file, one per line ('#' starts a comment line)."""
    n = 0
    for lineno, line in enumerate(f, 1):
      line = line.strip()
      if not line or line.startswith('#'):
        continue
      self.add(line, Location(filename, lineno))
      n += 1
    logger.info("%s: loaded %d availabilities, %d merged windows",
                filename, n, len(self.store))

  def query(self, text, loc=None):
    """Check whether time range e.g. "10:00-17:00" is available."""
    iv, _ = PA.read_range(text, loc)
    return self.store.contains(iv.start, iv.end)

  def providers(self, text, loc=None):
    """Labels of sources which are open during some part of time range."""
    iv, _ = PA.read_range(text, loc)
    return [label for src, label in self.sources if src.touches(iv)]

  def dump(self, p):
    self.store.dump(p, PA.format_range)
    p.writeln(f"Sources ({len(self.sources)}):")
    with p:
      for iv, label in self.sources:
        p.writeln(f"{PA.format_range(iv)} {label}".rstrip())
