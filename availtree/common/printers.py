# The MIT License (MIT)
# 
# Copyright (c) 2018-2020 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Pretty-printing APIs."""

import sys

class SourcePrinter:
  """Printer which indents nested sections:
       with p:
         p.writeln(...)"""

  def __init__(self, out=None, tab='  '):
    self.out = out or sys.stdout
    self.tab = tab
    self.level = 0

  def enter(self):
    self.level += 1
    return self

  def exit(self):
    assert self.level > 0
    self.level -= 1

  def __enter__(self):
    return self.enter()

  def __exit__(self, type, value, traceback):
    self.exit()

  def writeln(self, s=''):
    indent = self.tab * self.level
    for line in str(s).split('\n'):
      self.out.write((indent + line if line else '') + '\n')
