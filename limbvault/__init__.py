"""
limbvault - arbitrary-precision unsigned integers for cryptographic
building blocks.

Modules:
  - core_math: BigUint, limb arithmetic, modular exponentiation, Fermat test
  - rsa: textbook RSA over BigUint
"""

from .core_math import (
    BigUint,
    BigUintError,
    UnderflowError,
    DivisionByZeroError,
    mod_pow,
    is_probable_prime,
)

__version__ = "1.0.0"

__all__ = [
    'BigUint',
    'BigUintError',
    'UnderflowError',
    'DivisionByZeroError',
    'mod_pow',
    'is_probable_prime',
]
