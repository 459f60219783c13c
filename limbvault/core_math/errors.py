"""
Arithmetic error conditions for BigUint.

- UnderflowError: subtraction would produce a negative value
- DivisionByZeroError: division or modular reduction by zero

Both subclass the matching built-in so callers may catch either the
limbvault type or the standard Python one.
"""


class BigUintError(Exception):
    """Base class for BigUint arithmetic failures."""
    pass


class UnderflowError(BigUintError, ArithmeticError):
    """Raised when the minuend is smaller than the subtrahend."""
    pass


class DivisionByZeroError(BigUintError, ZeroDivisionError):
    """Raised when a divisor or modulus is zero."""
    pass
