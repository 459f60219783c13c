"""
Modular Arithmetic on BigUint

Implements the number-theoretic operations built from the BigUint core:
- Modular exponentiation (repeated multiplication)
- Fermat primality testing with a fixed witness set

Note: mod_pow multiplies once per unit of the exponent, so its cost grows
      with the exponent's value, not its bit length. There is no
      square-and-multiply shortcut here; use it with small exponents.
"""

from typing import Union

from .biguint import (
    BigUint, compare, multiply, divmod_, increment, decrement,
)
from .errors import DivisionByZeroError


# Bases tried by is_probable_prime
FERMAT_WITNESSES = (2, 3, 5, 7)


def _as_biguint(value: Union[BigUint, int]) -> BigUint:
    if isinstance(value, BigUint):
        return value
    return BigUint.from_int(value)


def mod_pow(base: Union[BigUint, int],
            exponent: Union[BigUint, int],
            modulus: Union[BigUint, int]) -> BigUint:
    """
    Modular exponentiation by repeated multiplication.

    Computes (base^exponent) mod modulus.

    Algorithm (memory-efficient accumulator method):
    1. If modulus is 1, the result is 0
    2. Reduce base modulo modulus once
    3. Start with result = 1
    4. Repeat exponent times: result = (result * base) mod modulus

    Only the running remainder is kept, so intermediate products stay
    below modulus^2.

    Time complexity: O(exponent) multiplications

    Args:
        base: The base number
        exponent: The exponent
        modulus: The modulus (must be non-zero)

    Returns:
        (base^exponent) mod modulus

    Raises:
        DivisionByZeroError: If modulus is zero
    """
    base = _as_biguint(base)
    exponent = _as_biguint(exponent)
    modulus = _as_biguint(modulus)

    if modulus.is_zero():
        raise DivisionByZeroError("Modulus must be non-zero")
    if modulus == BigUint.one():
        return BigUint.zero()

    base = divmod_(base, modulus)[1]
    result = BigUint.one()

    counter = BigUint.zero()
    while compare(counter, exponent) < 0:
        _, result = divmod_(multiply(result, base), modulus)
        counter = increment(counter)

    return result


def is_probable_prime(n: Union[BigUint, int]) -> bool:
    """
    Fermat primality test.

    For each witness a in FERMAT_WITNESSES, checks a^(n-1) mod n == 1.
    Any other result proves n composite. Passing every witness means n is
    probably prime: Fermat liars (e.g. Carmichael numbers coprime to all
    witnesses, such as 29341) pass too, so this is a heuristic
    and not a primality certificate.

    Args:
        n: Number to test

    Returns:
        False if n is definitely composite or below 2, True if n is
        probably prime
    """
    n = _as_biguint(n)

    if n < 2:
        return False
    # a witness equal to n gives a^(n-1) mod n == 0
    if any(n == witness for witness in FERMAT_WITNESSES):
        return True

    n_minus_one = decrement(n)
    for witness in FERMAT_WITNESSES:
        if mod_pow(witness, n_minus_one, n) != BigUint.one():
            return False

    return True
