"""Helpers shared by the polynomial type and the command-line driver.

 - check_type / @typechecked: reject non-integer coefficients and exponents
   at the call that introduced them, instead of failing later inside the
   arithmetic
 - open_maybe_stdin / open_maybe_stdout: "-" names the standard streams
 - AtomicWriteableFile: an output file that only appears once fully written
"""

from contextlib import contextmanager
from functools import wraps
import inspect
import os
import shutil
import sys
import tempfile

def check_type(value, ty, value_name="value"):
    """Assert that `value` has type `ty`.

    `ty` is a class, `[cls]` for a list whose entries all have that class, or
    None to accept anything.  `value_name` names the argument in the message,
    e.g. "exponent has type float, not int".
    """
    if ty is None:
        return
    if type(ty) is list:
        assert isinstance(value, list), "{} has type {}, not list".format(value_name, type(value).__name__)
        for i, v in enumerate(value):
            check_type(v, ty[0], "{}[{}]".format(value_name, i))
        return
    assert isinstance(value, ty), "{} has type {}, not {}".format(value_name, type(value).__name__, ty.__name__)

def typechecked(f):
    """Check the arguments and result of `f` against its annotations.

        @typechecked
        def set_coefficient(self, coeff : int, exp : int): ...

    Unannotated parameters (such as `self`) are not checked.
    """
    params = inspect.getfullargspec(f).args
    annotations = f.__annotations__
    @wraps(f)
    def checked(*args, **kwargs):
        for name, value in list(zip(params, args)) + list(kwargs.items()):
            check_type(value, annotations.get(name), name)
        result = f(*args, **kwargs)
        check_type(result, annotations.get("return"), "result of {}".format(f.__name__))
        return result
    return checked

@contextmanager
def AtomicWriteableFile(dst, mode="w"):
    """Write to a temporary file and move it to `dst` only on success.

    A calculation that fails half way through printing its results leaves an
    existing `dst` as it was.
    """
    fd, tmp = tempfile.mkstemp(text=True)
    with os.fdopen(fd, mode) as f:
        yield f
        f.flush()
        os.fsync(fd)
    shutil.move(src=tmp, dst=dst)

def open_maybe_stdin(path : str, mode="r"):
    """Open `path` for reading, or a private copy of stdin when it is "-".

    Close the result when done (use it in a `with` block).
    """
    if path == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(path, mode)

def open_maybe_stdout(path : str, mode="w"):
    """Open `path` atomically for writing, or a private copy of stdout for "-".

    Close the result when done (use it in a `with` block).
    """
    if path == "-":
        return os.fdopen(os.dup(sys.stdout.fileno()), mode)
    return AtomicWriteableFile(path, mode)
