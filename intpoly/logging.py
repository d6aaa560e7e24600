"""Progress log for reading and combining polynomials.

Important functions:
 - step: context manager around one stage of the calculator (reading a file,
   reading one polynomial); nested steps are indented and timed
 - term_read: note one (coefficient, exponent) pair applied by a read
 - operation: run one arithmetic operation, logging the storage sizes of
   both operands and of the result

Everything is written to standard error, and only when `verbose` is on.
Durations and counters are collected either way so `--profile` can report
them.
"""

from collections import Counter, defaultdict
from contextlib import contextmanager
import datetime
import sys

from intpoly.opts import Option

verbose = Option("verbose", bool, False, description="Log each step and every term read to stderr")

# Total seconds spent under each path of nested step names.
_durations = defaultdict(float)
_steps = []

# terms read, and how many times each operation ran
counts = Counter()

def _emit(message):
    if verbose.value:
        print("  " * len(_steps) + message, file=sys.stderr)

@contextmanager
def step(name, **details):
    if details:
        name_with_details = "{} ({})".format(name, ", ".join("{}={}".format(k, v) for k, v in sorted(details.items())))
    else:
        name_with_details = name
    _emit(name_with_details + "...")
    _steps.append(name)
    path = tuple(_steps)
    start = datetime.datetime.now()
    try:
        yield
    finally:
        seconds = (datetime.datetime.now() - start).total_seconds()
        _durations[path] += seconds
        _steps.pop()
        _emit("done: {} [{:.3}s]".format(name, seconds))

def term_read(coeff, exp):
    counts["terms read"] += 1
    _emit("term {} at exponent {}".format(coeff, exp))

def operation(op, f, left, right):
    """Return f(left, right), logging it as the operation `op`."""
    counts[op] += 1
    _emit("{}: sizes {} and {}".format(op, left.size, right.size))
    with step(op):
        result = f(left, right)
    _emit("{} result: size {}, degree {}".format(op, result.size, result.degree()))
    return result

def dump_profile(path):
    """Write counters and accumulated step durations to `path`."""
    with open(path, "w") as f:
        for name in sorted(counts):
            f.write("{:>10} {}\n".format(counts[name], name))
        for k in sorted(_durations, key=_durations.get, reverse=True):
            f.write("{:10.3}s {}\n".format(_durations[k], " > ".join(k)))
