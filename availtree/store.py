# The MIT License (MIT)
# 
# Copyright (c) 2020-2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Binary search tree of disjoint availability windows.

The tree is keyed by window start. Inserting a window merges it with every
stored window it overlaps or touches so that stored windows always stay
pairwise disjoint and maximal. Thanks to that a query range is available
iff a single stored window covers it, which is found by one root-to-leaf walk.
"""

import logging

from availtree.common.error import IntervalError
import availtree.common.interval as I

logger = logging.getLogger(__name__)

class _Node:
  """Tree node which holds a single window."""

  __slots__ = ['start', 'end', 'left', 'right']

  def __init__(self, start, end):
    self.start = start
    self.end = end
    self.left = None
    self.right = None

def _pop_max(node):
  """Detach rightmost node of subtree. Returns it and new subtree root."""
  if node.right is None:
    return node, node.left
  parent = node
  last = node.right
  while last.right is not None:
    parent = last
    last = last.right
  parent.right = last.left
  return last, node

def _pop_min(node):
  """Detach leftmost node of subtree. Returns it and new subtree root."""
  if node.left is None:
    return node, node.right
  parent = node
  first = node.left
  while first.left is not None:
    parent = first
    first = first.left
  parent.left = first.right
  return first, node

class IntervalStore:
  """Set of availability windows with full-coverage queries.

  With reconcile=False a merge never looks at subtrees of the widened node,
  so a window which bridges two stored windows leaves them unmerged
  (this reproduces behavior of the first version of the platform)."""

  def __init__(self, reconcile=True):
    self.root = None
    self.reconcile = reconcile
    self._size = 0

  def _attach(self, start, end):
    logger.debug("new window [%d, %d]", start, end)
    self._size += 1
    return _Node(start, end)

  def _absorb_left(self, node):
    # Left subtree is sorted so only its rightmost windows may touch node
    while self.reconcile and node.left is not None:
      last = node.left
      while last.right is not None:
        last = last.right
      if last.end < node.start:
        break
      _, node.left = _pop_max(node.left)
      self._size -= 1
      logger.debug("window [%d, %d] absorbed into [%d, %d]",
                   last.start, last.end, node.start, node.end)
      node.start = min(node.start, last.start)

  def _absorb_right(self, node):
    while self.reconcile and node.right is not None:
      first = node.right
      while first.left is not None:
        first = first.left
      if first.start > node.end:
        break
      _, node.right = _pop_min(node.right)
      self._size -= 1
      logger.debug("window [%d, %d] absorbed into [%d, %d]",
                   first.start, first.end, node.start, node.end)
      node.end = max(node.end, first.end)

  def insert(self, start, end):
    """Add window [start, end], merging it with windows it touches."""
    I.check_bounds(start, end)

    if self.root is None:
      self.root = self._attach(start, end)
      return

    node = self.root
    while True:
      # Same key: (100, 200) + (100, 250) -> (100, 250)
      if start == node.start:
        if end > node.end:
          node.end = end
          self._absorb_right(node)
        return

      if start < node.start:
        # Disjoint on the left: (100, 200) + (50, 90) -> go left
        if end < node.start:
          if node.left is None:
            node.left = self._attach(start, end)
            return
          node = node.left
          continue
        # (100, 200) + (50, 150) -> (50, 200)
        node.start = start
        # (100, 200) + (50, 250) -> (50, 250)
        if end > node.end:
          node.end = end
          self._absorb_right(node)
        self._absorb_left(node)
        return

      # Disjoint on the right: (100, 200) + (250, 300) -> go right
      if start > node.end:
        if node.right is None:
          node.right = self._attach(start, end)
          return
        node = node.right
        continue
      # (100, 200) + (150, 250) -> (100, 250),
      # (100, 200) + (150, 180) is already covered
      if end > node.end:
        node.end = end
        self._absorb_right(node)
      return

  def contains(self, start, end):
    """Check whether [start, end] is fully covered by a stored window."""
    I.check_bounds(start, end)
    node = self.root
    while node is not None:
      if node.end < start:
        node = node.right
      elif node.start <= start and node.end >= end:
        return True
      else:
        node = node.left
    return False

  def intervals(self):
    """Iterate stored windows in ascending order."""
    stack = []
    node = self.root
    while stack or node is not None:
      if node is not None:
        stack.append(node)
        node = node.left
        continue
      node = stack.pop()
      yield I.Interval(node.start, node.end)
      node = node.right

  def depth(self):
    d = 0
    level = [self.root] if self.root is not None else []
    while level:
      d += 1
      level = [child for node in level
               for child in (node.left, node.right) if child is not None]
    return d

  def check(self):
    """Verify tree ordering and that windows are disjoint and not adjacent."""
    prev = None
    for iv in self.intervals():
      if prev is not None and prev.end >= iv.start:
        raise IntervalError(f"windows {prev} and {iv} overlap or are out of order")
      prev = iv

  def dump(self, p, fmt=str):
    p.writeln(f"Windows ({len(self)}, depth {self.depth()}):")
    with p:
      for iv in self.intervals():
        p.writeln(fmt(iv))

  def __len__(self):
    return self._size

  def __bool__(self):
    return self.root is not None

  def __repr__(self):
    return 'IntervalStore(%s)' % ', '.join(str(iv) for iv in self.intervals())
