"""Class for representing polynomials of one variable with integer coefficients.

A Polynomial stores a dense list of coefficients indexed by exponent, so
`p.coeffs[5] == 4` means the polynomial has the term 4x^5.  The list always
has at least one entry (the constant term) and may carry trailing zeros;
equality ignores them.

Polynomials are mutable values: the compound operators (+=, -=, *=),
`set_coefficient`, `assign` and `read` change the receiver in place, while
+, - and * always build a new Polynomial and leave both operands alone.
Plain ints are accepted wherever a Polynomial operand is expected and are
treated as constant polynomials.
"""

from intpoly import logging
from intpoly.common import check_type, typechecked
from intpoly.opts import Option
from intpoly.parse import reader_for

variable = Option("variable", str, "x", description="Variable symbol used when printing polynomials", metavar="SYM")

def _as_polynomial(value):
    if isinstance(value, Polynomial):
        return value
    if isinstance(value, int):
        return Polynomial(value)
    return None

def _convolve(a, b):
    prod = [0] * (len(a) + len(b) - 1)
    for i in range(len(a)):
        for j in range(len(b)):
            prod[i + j] += a[i] * b[j]
    return prod

def _compare(smaller, larger):
    """Equality of two coefficient lists with len(smaller) <= len(larger)."""
    n = len(smaller)
    if smaller != larger[:n]:
        return False
    return all(c == 0 for c in larger[n:])

class Polynomial(object):
    __slots__ = ("coeffs",)

    # mutable
    __hash__ = None

    @typechecked
    def __init__(self, coeff : int = 0, exp : int = 0):
        """Build the single term coeff*x^|exp|.

        Polynomial() is the zero polynomial and Polynomial(c) the constant c.
        A negative exponent is read as its absolute value.
        """
        self.coeffs = [0] * abs(exp) + [int(coeff)]

    @classmethod
    def from_coefficients(cls, coefficients):
        """Build a polynomial whose storage is exactly `coefficients`.

        coefficients[i] is the coefficient of x^i.  An empty sequence gives
        the zero polynomial.
        """
        coeffs = list(coefficients)
        check_type(coeffs, [int], "coefficients")
        p = cls()
        if coeffs:
            p.coeffs = [int(c) for c in coeffs]
        return p

    @property
    def size(self):
        """Length of the coefficient storage, trailing zeros included."""
        return len(self.coeffs)

    def degree(self):
        for i in reversed(range(len(self.coeffs))):
            if self.coeffs[i] != 0:
                return i
        return 0

    def coefficients(self):
        return tuple(self.coeffs)

    def copy(self):
        return type(self).from_coefficients(self.coeffs)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def assign(self, other):
        """Replace this polynomial's storage with a copy of other's."""
        check_type(other, Polynomial, "other")
        if other is not self:
            self.coeffs = list(other.coeffs)
        return self

    # Coefficients #############################################################

    @typechecked
    def get_coefficient(self, exp : int) -> int:
        """The coefficient of x^exp; 0 for any exponent outside the storage."""
        if 0 <= exp < len(self.coeffs):
            return self.coeffs[exp]
        return 0

    @typechecked
    def set_coefficient(self, coeff : int, exp : int):
        """Set the coefficient of x^|exp|, growing the storage if needed."""
        index = abs(exp)
        self._grow_to(index + 1)
        self.coeffs[index] = int(coeff)

    def _grow_to(self, size):
        # extend only; new slots are zero
        if len(self.coeffs) < size:
            self.coeffs.extend([0] * (size - len(self.coeffs)))

    # Arithmetic ###############################################################

    def __add__(self, other):
        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        # copy the longer polynomial, then add the shorter one
        if len(self.coeffs) >= len(other.coeffs):
            longer, shorter = self, other
        else:
            longer, shorter = other, self
        total = type(self).from_coefficients(longer.coeffs)
        for i, c in enumerate(shorter.coeffs):
            total.coeffs[i] += c
        return total

    __radd__ = __add__

    def __sub__(self, other):
        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        diff = self.copy()
        diff._grow_to(len(other.coeffs))
        for i, c in enumerate(other.coeffs):
            diff.coeffs[i] -= c
        return diff

    def __rsub__(self, other):
        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        return type(self).from_coefficients(_convolve(self.coeffs, other.coeffs))

    __rmul__ = __mul__

    def __iadd__(self, other):
        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        self._grow_to(len(other.coeffs))
        for i, c in enumerate(other.coeffs):
            self.coeffs[i] += c
        return self

    def __isub__(self, other):
        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        self._grow_to(len(other.coeffs))
        for i, c in enumerate(other.coeffs):
            self.coeffs[i] -= c
        return self

    def __imul__(self, other):
        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        # the product is built from the original coefficients before the
        # storage is replaced, so p *= p is safe
        self.coeffs = _convolve(self.coeffs, other.coeffs)
        return self

    # Comparison ###############################################################

    def __eq__(self, other):
        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        if len(self.coeffs) > len(other.coeffs):
            return _compare(other.coeffs, self.coeffs)
        return _compare(self.coeffs, other.coeffs)

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    # Text #####################################################################

    def __str__(self):
        return format_polynomial(self)

    def __repr__(self):
        return "{}.from_coefficients({!r})".format(type(self).__name__, self.coeffs)

    def write(self, out):
        """Write the printed form of this polynomial to the stream `out`."""
        out.write(format_polynomial(self))
        return out

    def read(self, source):
        """Replace this polynomial's terms with ones read from `source`.

        `source` is a string, a text stream or a TermReader; the input is a
        list of `coefficient exponent` pairs ended by `0 0`.  Existing
        coefficients are zeroed first but the storage never shrinks.  If the
        input ends before the terminator a ParseError is raised and this
        polynomial is left untouched.
        """
        reader = reader_for(source)
        terms = list(reader.read_terms())
        for i in range(len(self.coeffs)):
            self.coeffs[i] = 0
        for coeff, exp in terms:
            logging.term_read(coeff, exp)
            self.set_coefficient(coeff, exp)
        return self

def format_polynomial(p, symbol=None):
    """Render p from highest to lowest exponent, e.g. " +3x^2 -1".

    Zero terms are skipped; a polynomial with no non-zero term is " 0".
    """
    if symbol is None:
        symbol = variable.value
    s = ""
    for i in reversed(range(len(p.coeffs))):
        c = p.coeffs[i]
        if c == 0:
            continue
        s += " "
        if c > 0:
            s += "+"
        s += str(c)
        if i > 0:
            s += symbol
        if i > 1:
            s += "^{}".format(i)
    return s or " 0"

def read_polynomial(source):
    """Build a new Polynomial from the textual input format."""
    return Polynomial().read(source)
