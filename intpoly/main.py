#!/usr/bin/env python

"""
Main entry point for the intpoly calculator. Run with --help for options.

Input is a sequence of polynomials in the textual format understood by
`intpoly.parse` (pairs of `coefficient exponent`, each polynomial ended by
`0 0`).  The requested operation is applied to all of them, left to right.
"""

import sys
import argparse
import operator

from intpoly import common
from intpoly import logging
from intpoly import opts
from intpoly.parse import ParseError, reader_for
from intpoly.polynomials import Polynomial

# In-place operator for each folding operation.
FOLDS = {
    "add": operator.iadd,
    "sub": operator.isub,
    "mul": operator.imul,
}

OPERATIONS = ("show", "eq") + tuple(FOLDS)

def read_polynomials(f):
    """Read polynomials from the stream f until the input runs out."""
    reader = reader_for(f)
    polys = []
    while not reader.at_eof():
        with logging.step("reading polynomial", index=len(polys)):
            polys.append(Polynomial().read(reader))
    return polys

def fold(op, polys):
    result = polys[0].copy()
    for p in polys[1:]:
        result = logging.operation(op, FOLDS[op], result, p)
    return result

def all_equal(polys):
    return all(p == polys[0] for p in polys[1:])

def run(argv=None):
    """Entry point for the intpoly executable.

    Returns the process exit status.
    """

    parser = argparse.ArgumentParser(description='Integer polynomial calculator.')
    parser.add_argument("--op", choices=OPERATIONS, default="show",
                        help="show: print every polynomial; add/sub/mul: combine them left to right; " +
                             "eq: print whether they are all equal (default=show)")
    parser.add_argument("-o", "--output", metavar="FILE", default="-", help="Output file, use '-' for stdout (default)")
    parser.add_argument("--profile", metavar="FILE", default=None, help="Write step timings and operation counts to FILE")

    internal_opts = parser.add_argument_group("Formatting and logging")
    opts.setup(internal_opts)

    parser.add_argument("file", nargs="?", default=None, help="Input file (omit to use stdin)")
    args = parser.parse_args(argv)
    opts.read(args)

    try:
        with logging.step("reading input", file=args.file or "stdin"):
            with common.open_maybe_stdin(args.file or "-") as f:
                polys = read_polynomials(f)
    except (ParseError, OSError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    if args.op != "show" and not polys:
        print("Error: --op {} needs at least one polynomial".format(args.op), file=sys.stderr)
        return 1

    if args.op == "show":
        lines = [str(p) for p in polys]
    elif args.op == "eq":
        lines = ["true" if all_equal(polys) else "false"]
    else:
        lines = [str(fold(args.op, polys))]

    with common.open_maybe_stdout(args.output) as out:
        for line in lines:
            out.write(line + "\n")

    if args.profile:
        logging.dump_profile(args.profile)

    return 0

if __name__ == "__main__":
    sys.exit(run())
