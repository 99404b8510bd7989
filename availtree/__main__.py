#!/usr/bin/env python3

# The MIT License (MIT)
# 
# Copyright (c) 2018-2022 Yury Gribov
# 
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Main driver for Availtree.

Run with --help for details.
"""

import sys
import argparse
import logging

from availtree.common.error import error, error_if, warn_if, set_basename, set_options, \
  ParseError, IntervalError
import availtree.common.parse as PA
import availtree.common.printers as PR
from availtree.book import AvailabilityBook

logger = logging.getLogger(__name__)

DEMO_AVAILABILITIES = [
  "09:00-16:00 Royal Bank of Scotland",
  "11:00-17:00 Morgan Stanley",
  "14:00-20:00 JP Morgan",
  "02:00-07:00 National Australia Bank",
]

DEMO_QUERIES = ["10:00-17:00", "15:00-21:00"]

def _load(filename, reconcile):
  book = AvailabilityBook(reconcile=reconcile)
  if filename == '-':
    book.load('<stdin>', sys.stdin)
  else:
    try:
      with open(filename, 'r') as f:
        book.load(filename, f)
    except OSError as e:
      error(f"failed to read '{filename}': {e.strerror}")
  return book

def _answer(book, queries):
  for q in queries:
    _, label = PA.read_range(q)
    warn_if(label, f"ignoring trailing text in query '{q.strip()}'")
    ok = book.query(q)
    print(f"{q.strip()} is {'available' if ok else 'not available'}")
    logger.info("%s: open sources: %s", q.strip(), ', '.join(book.providers(q)) or 'none')

def main(argv=None):
  set_basename('availtree')

  class Formatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawDescriptionHelpFormatter):
    pass
  parser = argparse.ArgumentParser(
    formatter_class=Formatter,
    description="Checks whether time ranges are covered by aggregated "
                "availabilities of several sources.",
    epilog="""\

ACTION should be one of
  demo      Answer sample queries against built-in availabilities.
  query     Answer QUERY ranges against availabilities in FILE.
  dump      Print merged availability windows (useful for debugging).

FILE contains one availability per line in "HH:MM-HH:MM [label]" format,
blank lines and lines starting with '#' are ignored.

Examples:
  Run the demo:
  $ {exe} demo

  Check a range against a file:
  $ {exe} query banks.txt 10:00-17:00 15:00-21:00

  Print merged windows:
  $ {exe} dump banks.txt\
""".format(exe='python -mavailtree'))
  parser.add_argument(
    'action',
    metavar='ACT',
    help="Action performed on availabilities.",
    choices=['demo', 'query', 'dump'])
  parser.add_argument(
    'file',
    metavar='FILE',
    help="Path to availabilities ('-' for stdin).",
    nargs='?')
  parser.add_argument(
    'queries',
    metavar='QUERY',
    help="Time range to check e.g. 10:00-17:00.",
    nargs='*')
  parser.add_argument(
    '--no-reconcile',
    help="Do not merge windows bridged by a later availability "
         "(compatibility with the first platform version).",
    dest='reconcile',
    action='store_false',
    default=True)
  parser.add_argument(
    '--verbose', '-v',
    help="Print diagnostic info.",
    action='count',
    default=0)
  parser.add_argument(
    '--print-stack',
    help="Print call stack on error (INTERNAL).",
    action='store_true')

  args = parser.parse_args(argv)

  v = min(2, args.verbose)
  loglevel = logging.WARNING - 10 * v
  logging.basicConfig(level=loglevel)

  set_options(print_stack=args.print_stack)

  try:
    if args.action == 'demo':
      book = AvailabilityBook(DEMO_AVAILABILITIES, args.reconcile)
      # There is no FILE for demo so first positional is a query
      queries = ([args.file] if args.file is not None else []) + args.queries
      _answer(book, queries or DEMO_QUERIES)
      return

    error_if(args.file is None, f"'{args.action}' requires availabilities FILE")
    book = _load(args.file, args.reconcile)

    if args.action == 'query':
      error_if(not args.queries, "no time ranges to query")
      _answer(book, args.queries)
    elif args.action == 'dump':
      error_if(args.queries, "'dump' does not take queries")
      book.dump(PR.SourcePrinter())
  except (ParseError, IntervalError) as e:
    error(str(e))

if __name__ == '__main__':
  main()
