"""Reader for the textual polynomial format.

A polynomial is written as whitespace-separated integers read in pairs
`coefficient exponent`, terminated by the pair `0 0`:

    3 2 -1 0 0 0        (3x^2 - 1)

The important names are:
 - tokenize: str -> iterator of NUM tokens
 - TermReader: lazily pulls integers out of a text stream or string
 - reader_for: the TermReader attached to a stream, shared by every read
 - ParseError: raised for illegal characters and for input that ends before
   the terminating pair
"""

# builtin
import collections
import io
import weakref

# 3rd party
from ply import lex

class ParseError(Exception):
    def __init__(self, message, lineno=None):
        super().__init__(message)
        self.message = message
        self.lineno = lineno

    def __str__(self):
        if self.lineno is None:
            return self.message
        return "on line {}: {}".format(self.lineno, self.message)

# Lexer ########################################################################

tokens = ("NUM",)

def make_lexer():

    # ply discovers token rules by looking at the variables in scope here.

    def t_NUM(t):
        r"[+-]?\d+"
        t.value = int(t.value)
        return t

    def t_newline(t):
        r"\n+"
        t.lexer.lineno += len(t.value)

    t_ignore = " \t\r\f\v"

    def t_error(t):
        raise ParseError("Illegal character {}".format(repr(t.value[0])), lineno=t.lexer.lineno)

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Reader #######################################################################

TERMINATOR = (0, 0)

class TermReader(object):
    """Pulls integers out of a text source one line at a time.

    The source is either a string or any object with a `readline` method.
    Only as many lines as needed are consumed, so consecutive polynomials can
    be read from the same reader (or the same open file, by sharing one
    reader between reads).
    """

    def __init__(self, source):
        if isinstance(source, str):
            source = io.StringIO(source)
        self.source = source
        self.lineno = 0
        self._lexer = _lexer.clone()
        self._pending = collections.deque()

    def _fill(self):
        while not self._pending:
            line = self.source.readline()
            if not line:
                return False
            self.lineno += 1
            self._lexer.lineno = self.lineno
            self._lexer.input(line)
            for tok in iter(self._lexer.token, None):
                self._pending.append(tok.value)
        return True

    def _error_line(self):
        # nothing read yet: there is no line to point at
        return self.lineno or None

    def at_eof(self):
        return not self._fill()

    def next_int(self):
        """Return the next integer, or None at the end of the input."""
        if not self._fill():
            return None
        return self._pending.popleft()

    def next_pair(self):
        coeff = self.next_int()
        if coeff is None:
            raise ParseError("input ended before the terminating pair 0 0", lineno=self._error_line())
        exp = self.next_int()
        if exp is None:
            raise ParseError("input ended in the middle of a pair (coefficient {} has no exponent)".format(coeff), lineno=self._error_line())
        return (coeff, exp)

    def read_terms(self):
        """Yield (coefficient, exponent) pairs up to the terminating 0 0.

        The terminator itself is consumed but never yielded.
        """
        while True:
            pair = self.next_pair()
            if pair == TERMINATOR:
                return
            yield pair

# Readers stay attached to the stream they read from, so integers buffered
# past one polynomial's terminator are still there for the next read.
_stream_readers = weakref.WeakKeyDictionary()

def reader_for(source):
    """The TermReader to use for `source`.

    A TermReader is returned as is; a string gets a fresh reader; a stream
    gets the reader already attached to it, created on first use.
    """
    if isinstance(source, TermReader):
        return source
    if isinstance(source, str):
        return TermReader(source)
    reader = _stream_readers.get(source)
    if reader is None:
        reader = TermReader(source)
        # the registry must not keep the stream alive through its reader
        reader.source = weakref.proxy(source)
        _stream_readers[source] = reader
    return reader
