# Core Math Module
"""
Arbitrary-precision unsigned arithmetic:
- BigUint value type (16-bit limbs) - biguint.py
- Compare / Add / Subtract / Multiply / DivMod - biguint.py
- Modular exponentiation and Fermat primality - modular.py
- Arithmetic error types - errors.py
"""

from .errors import (
    BigUintError,
    UnderflowError,
    DivisionByZeroError,
)

from .biguint import (
    BigUint,
    LIMB_BITS,
    LIMB_MASK,
    NATIVE_BITS,
    compare,
    add,
    subtract,
    multiply,
    divmod_,
    divide,
    remainder,
    increment,
    decrement,
)

from .modular import (
    FERMAT_WITNESSES,
    mod_pow,
    is_probable_prime,
)

__all__ = [
    # Errors
    'BigUintError',
    'UnderflowError',
    'DivisionByZeroError',
    # Value type
    'BigUint',
    'LIMB_BITS',
    'LIMB_MASK',
    'NATIVE_BITS',
    'compare',
    'add',
    'subtract',
    'multiply',
    'divmod_',
    'divide',
    'remainder',
    'increment',
    'decrement',
    # Modular
    'FERMAT_WITNESSES',
    'mod_pow',
    'is_probable_prime',
]
