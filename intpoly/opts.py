"""Tools to define local options.

A few intpoly modules have settings of their own: the variable symbol used
when printing a polynomial, whether the log is verbose, and so on.  Each
module declares an Option next to the code that reads it, e.g.

    variable = Option("variable", str, "x", description="...")
    ...
    symbol = variable.value

and the command-line driver calls `setup` to add every declared Option to an
argparse parser, then `read` to copy the parsed values back.  Tests use
`overridden` to change a value for the duration of a `with` block.
"""

from contextlib import contextmanager

# All Option objects that have ever been created, by name.
_OPTS = {}

# Values that should replace the default of Options declared later.
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None):
        assert type in (bool, str, int)
        assert name not in _OPTS, "option {!r} declared twice".format(name)
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        self.metavar = metavar
        _OPTS[name] = self

    def __bool__(self):
        raise Exception(
            "An attempt was made to convert an Option to a boolean. " +
            "If you intended to read the value of this Option, use `_.value`. " +
            "If you intended to check whether this object is None, use `_ is None`.")

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

def _argname(o):
    if o.type is bool:
        return ("no-" + o.name) if o.default else o.name
    return o.name

def _help(o):
    default = "default={!r}".format(o.default)
    if o.description:
        return "{} ({})".format(o.description, default)
    return default

def setup(parser):
    """Add a flag for every declared Option to `parser` (or an argument group)."""
    for o in _OPTS.values():
        flag = "--" + _argname(o)
        if o.type is bool:
            parser.add_argument(flag, action="store_true", default=False, help=o.description)
        else:
            parser.add_argument(flag, metavar=o.metavar, type=o.type, default=o.default, help=_help(o))

def read(args):
    """Copy parsed argparse values into the declared Options."""
    for o in _OPTS.values():
        value = getattr(args, _argname(o).replace("-", "_"))
        if o.type is bool and o.default:
            value = not value
        o.value = o.type(value)

def snapshot():
    """Produce a snapshot of current option values."""
    return { name : o.value for name, o in _OPTS.items() }

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES

    for name, o in _OPTS.items():
        o.value = snap.get(name, o.value)

    # Options from modules that have not been imported yet pick these up
    # when they are declared.
    _DEFAULT_VALUE_OVERRIDES = dict(snap)

@contextmanager
def overridden(**values):
    """Temporarily set the named options, e.g. `overridden(variable="y")`."""
    snap = snapshot()
    try:
        for name, value in values.items():
            o = _OPTS[name]
            o.value = o.type(value)
        yield
    finally:
        restore(snap)
