"""Single-variable polynomials with integer coefficients."""

from intpoly.parse import ParseError, TermReader, reader_for
from intpoly.polynomials import Polynomial, format_polynomial, read_polynomial
