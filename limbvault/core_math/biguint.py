"""
Arbitrary-Precision Unsigned Integer

Implements the BigUint value type used by the modular arithmetic layer:
- Limb storage (16-bit words, least significant limb first)
- Conversion from/to Python integers and big-endian byte buffers
- Compare, Add, Subtract, Increment, Decrement
- Schoolbook multiplication
- Division by repeated subtraction

A value with limbs [l0, l1, ..., lk] represents

    l0 + l1 * 2^16 + ... + lk * 2^(16k)

Values are immutable. Every operation returns a new BigUint, so passing the
same object as both operands (add(a, a)) is always safe and a failed
operation never leaves an operand half-modified.

Note: Multiply costs O(n*m) limb products and DivMod costs O(quotient)
      subtractions. Both are kept deliberately simple so the arithmetic can
      be followed limb by limb; they are not meant for large workloads.
"""

from typing import Iterable, Optional, Tuple, Union

from .errors import UnderflowError, DivisionByZeroError


# Limb layout
LIMB_BITS = 16
LIMB_BASE = 1 << LIMB_BITS
LIMB_MASK = LIMB_BASE - 1

# Width of the integer returned by BigUint.to_int()
NATIVE_BITS = 64
NATIVE_LIMBS = NATIVE_BITS // LIMB_BITS


def _canonical(limbs: Iterable[int]) -> Tuple[int, ...]:
    """Drop high zero limbs, keeping a single zero limb for the value zero."""
    limbs = list(limbs)
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        return (0,)
    return tuple(limbs)


class BigUint:
    """
    Non-negative integer of arbitrary size.

    The limb tuple is always canonical: the most significant limb is
    non-zero, except for zero itself which is the single limb (0,).

    Example:
        >>> a = BigUint.from_int(70000)
        >>> a.limbs
        (4464, 1)
        >>> (a + a).to_bytes().hex()
        '0222e0'
    """

    __slots__ = ('_limbs',)

    def __init__(self, limbs: Iterable[int] = (0,)):
        """
        Build a value from raw limbs.

        Args:
            limbs: 16-bit words, least significant first. High zero limbs
                   are stripped; an empty sequence is zero.

        Raises:
            ValueError: If a limb is outside 0..0xFFFF
        """
        limbs = tuple(limbs)
        for limb in limbs:
            if not 0 <= limb <= LIMB_MASK:
                raise ValueError(f"Limb {limb!r} out of range 0..{LIMB_MASK:#x}")
        self._limbs = _canonical(limbs)

    @classmethod
    def _wrap(cls, limbs) -> 'BigUint':
        # limbs are already known to be in range
        value = object.__new__(cls)
        value._limbs = _canonical(limbs)
        return value

    # ------------------------------------------------------------------
    # Construction & conversion
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls) -> 'BigUint':
        return cls._wrap((0,))

    @classmethod
    def one(cls) -> 'BigUint':
        return cls._wrap((1,))

    @classmethod
    def from_int(cls, value: int) -> 'BigUint':
        """
        Convert a non-negative Python integer.

        The low 16 bits are split off repeatedly until nothing remains,
        so any size of integer is accepted.

        Raises:
            ValueError: If value is negative
        """
        if value < 0:
            raise ValueError(f"BigUint is unsigned, got negative value {value}")

        limbs = []
        while value > 0:
            limbs.append(value & LIMB_MASK)
            value >>= LIMB_BITS
        return cls._wrap(limbs)

    def to_int(self) -> int:
        """
        Convert to a 64-bit unsigned integer.

        Only the first four limbs are combined. Higher limbs are dropped
        without error, so check bit_length() first when the value may not
        fit in 64 bits.
        """
        value = 0
        for k, limb in enumerate(self._limbs[:NATIVE_LIMBS]):
            value |= limb << (LIMB_BITS * k)
        return value

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> 'BigUint':
        """
        Decode a big-endian unsigned integer.

        Bytes are paired from the end of the buffer: the last two bytes
        become limb 0, the two before them limb 1, and so on. An odd
        leading byte becomes the most significant limb on its own.

        Args:
            data: Big-endian bytes. An empty buffer decodes to zero and
                  leading zero bytes are ignored.

        Returns:
            The decoded value
        """
        data = bytes(data)
        limbs = []
        for i in range(len(data) - 1, -1, -2):
            if i == 0:
                limbs.append(data[0])
            else:
                limbs.append((data[i - 1] << 8) | data[i])
        return cls._wrap(limbs)

    def to_bytes(self) -> bytes:
        """
        Encode as big-endian bytes with leading zero bytes removed.

        Zero encodes to b'\\x00', never to an empty buffer.
        """
        out = bytearray()
        for limb in reversed(self._limbs):
            out.append(limb >> 8)
            out.append(limb & 0xFF)
        return bytes(out).lstrip(b"\x00") or b"\x00"

    # ------------------------------------------------------------------
    # Size queries
    # ------------------------------------------------------------------

    @property
    def limbs(self) -> Tuple[int, ...]:
        """Limbs, least significant first."""
        return self._limbs

    @property
    def limb_count(self) -> int:
        return len(self._limbs)

    def bit_length(self) -> int:
        """Number of significant bits (0 for zero)."""
        top = self._limbs[-1]
        return (len(self._limbs) - 1) * LIMB_BITS + top.bit_length()

    def is_zero(self) -> bool:
        return self._limbs == (0,)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"BigUint(limbs={list(self._limbs)})"

    def __hash__(self) -> int:
        # equal ints must hash alike since __eq__ accepts them
        return hash(int.from_bytes(self.to_bytes(), byteorder='big'))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other) -> bool:
        if isinstance(other, int) and other < 0:
            return NotImplemented
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) >= 0

    def __add__(self, other) -> 'BigUint':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    __radd__ = __add__

    def __sub__(self, other) -> 'BigUint':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other) -> 'BigUint':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other) -> 'BigUint':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return multiply(self, other)

    __rmul__ = __mul__

    def __divmod__(self, other) -> Tuple['BigUint', 'BigUint']:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return divmod_(self, other)

    def __floordiv__(self, other) -> 'BigUint':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return divide(self, other)

    def __mod__(self, other) -> 'BigUint':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return remainder(self, other)


def _coerce(value) -> Optional[BigUint]:
    """Accept a BigUint or a non-negative int as an operand."""
    if isinstance(value, BigUint):
        return value
    if isinstance(value, int):
        return BigUint.from_int(value)
    return None


# ============================================================================
# Arithmetic core
# ============================================================================

def compare(a: BigUint, b: BigUint) -> int:
    """
    Three-way comparison.

    Canonical values with more limbs are larger, so limb contents are only
    scanned (most significant first) when the lengths match.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    x, y = a.limbs, b.limbs
    if len(x) != len(y):
        return -1 if len(x) < len(y) else 1

    for left, right in zip(reversed(x), reversed(y)):
        if left != right:
            return -1 if left < right else 1
    return 0


def add(a: BigUint, b: BigUint) -> BigUint:
    """
    Schoolbook addition with carry propagation.

    The result has as many limbs as the longer operand, plus one when a
    final carry remains.
    """
    x, y = a.limbs, b.limbs
    if len(x) < len(y):
        x, y = y, x

    result = []
    carry = 0
    for i in range(len(x)):
        total = x[i] + (y[i] if i < len(y) else 0) + carry
        result.append(total & LIMB_MASK)
        carry = total >> LIMB_BITS

    if carry:
        result.append(carry)
    return BigUint._wrap(result)


def subtract(a: BigUint, b: BigUint) -> BigUint:
    """
    Limb-wise subtraction with borrow.

    Args:
        a: Minuend
        b: Subtrahend (must not exceed a)

    Returns:
        a - b in canonical form

    Raises:
        UnderflowError: If a < b
    """
    order = compare(a, b)
    if order < 0:
        raise UnderflowError(
            f"Cannot subtract a {b.bit_length()}-bit value from a smaller "
            f"{a.bit_length()}-bit value"
        )
    if order == 0:
        return BigUint.zero()

    result = list(a.limbs)
    borrow = 0
    for i, limb in enumerate(b.limbs):
        diff = result[i] - limb - borrow
        if diff < 0:
            diff += LIMB_BASE
            borrow = 1
        else:
            borrow = 0
        result[i] = diff

    # a > b guarantees a higher non-zero limb absorbs what is left
    i = len(b.limbs)
    while borrow:
        diff = result[i] - borrow
        if diff < 0:
            diff += LIMB_BASE
            borrow = 1
        else:
            borrow = 0
        result[i] = diff
        i += 1

    return BigUint._wrap(result)


def increment(a: BigUint) -> BigUint:
    return add(a, BigUint.one())


def decrement(a: BigUint) -> BigUint:
    """a - 1; raises UnderflowError for zero."""
    return subtract(a, BigUint.one())


# ============================================================================
# Derived operations
# ============================================================================

def multiply(a: BigUint, b: BigUint) -> BigUint:
    """
    Schoolbook multiplication.

    Every limb pair a[i] * b[j] yields a 32-bit partial product placed at
    limb index i + j; the partial products are summed with add(). Cost is
    O(n*m) limb products, each followed by an O(n+m) addition.
    """
    if a.is_zero() or b.is_zero():
        return BigUint.zero()

    total = BigUint.zero()
    for i, x in enumerate(a.limbs):
        for j, y in enumerate(b.limbs):
            product = x * y
            if product == 0:
                continue
            partial = [0] * (i + j)
            partial.append(product & LIMB_MASK)
            partial.append(product >> LIMB_BITS)
            total = add(total, BigUint._wrap(partial))
    return total


def divmod_(a: BigUint, b: BigUint) -> Tuple[BigUint, BigUint]:
    """
    Division by repeated subtraction.

    b is subtracted from a working copy of a until the working value drops
    below b, counting the subtractions. This takes O(quotient) iterations,
    so it is only suitable when the quotient is known to be small.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Tuple (quotient, remainder) with a == quotient * b + remainder
        and remainder < b

    Raises:
        DivisionByZeroError: If b is zero
    """
    if b.is_zero():
        raise DivisionByZeroError("Division by zero")

    order = compare(a, b)
    if order < 0:
        return BigUint.zero(), a
    if order == 0:
        return BigUint.one(), BigUint.zero()

    quotient = BigUint.zero()
    working = a
    while compare(working, b) >= 0:
        working = subtract(working, b)
        quotient = increment(quotient)
    return quotient, working


def divide(a: BigUint, b: BigUint) -> BigUint:
    """Quotient of a / b."""
    return divmod_(a, b)[0]


def remainder(a: BigUint, b: BigUint) -> BigUint:
    """Remainder of a / b."""
    return divmod_(a, b)[1]
