"""
Security tests for limbvault.

Tests specifically for error paths and hostile inputs:
- Underflow on subtraction / decrement
- Division by zero
- Malformed construction input
- Operands left untouched after a failure
"""

import pytest

from limbvault.core_math.biguint import (
    BigUint, subtract, decrement, divmod_, divide, remainder,
)
from limbvault.core_math.errors import (
    BigUintError, UnderflowError, DivisionByZeroError,
)
from limbvault.core_math.modular import mod_pow
from limbvault.rsa.keypair import RSAKeyPair


class TestUnderflow:
    """Subtraction can never produce a negative value."""

    def test_subtract_smaller_minuend(self):
        """3 - 5 raises UnderflowError."""
        with pytest.raises(UnderflowError):
            subtract(BigUint.from_int(3), BigUint.from_int(5))

    def test_subtract_shorter_minuend(self):
        """A minuend with fewer limbs underflows."""
        with pytest.raises(UnderflowError):
            subtract(BigUint.from_int(0xFFFF), BigUint.from_int(0x10000))

    def test_decrement_zero(self):
        """Decrementing zero underflows."""
        with pytest.raises(UnderflowError):
            decrement(BigUint.zero())

    def test_sub_operator_underflow(self):
        """The - operator raises the same error."""
        with pytest.raises(UnderflowError):
            BigUint.from_int(1) - BigUint.from_int(2)

    def test_underflow_is_arithmetic_error(self):
        """UnderflowError can be caught as ArithmeticError or BigUintError."""
        assert issubclass(UnderflowError, ArithmeticError)
        assert issubclass(UnderflowError, BigUintError)

    def test_operands_unchanged_after_underflow(self):
        """A failed subtraction leaves both operands intact."""
        a = BigUint.from_int(3)
        b = BigUint.from_int(5)
        with pytest.raises(UnderflowError):
            subtract(a, b)
        assert a.limbs == (3,)
        assert b.limbs == (5,)


class TestDivisionByZero:
    """Zero divisors and moduli are rejected."""

    def test_divmod_by_zero(self):
        """divmod_ by zero raises DivisionByZeroError."""
        with pytest.raises(DivisionByZeroError):
            divmod_(BigUint.from_int(17), BigUint.zero())

    def test_divide_and_remainder_by_zero(self):
        """Wrappers surface the same error."""
        with pytest.raises(DivisionByZeroError):
            divide(BigUint.from_int(1), BigUint.zero())
        with pytest.raises(DivisionByZeroError):
            remainder(BigUint.from_int(1), BigUint.zero())

    def test_zero_by_zero(self):
        """0 / 0 is still division by zero."""
        with pytest.raises(DivisionByZeroError):
            divmod_(BigUint.zero(), BigUint.zero())

    def test_mod_pow_zero_modulus(self):
        """A zero modulus is rejected."""
        with pytest.raises(DivisionByZeroError):
            mod_pow(4, 13, 0)

    def test_mod_pow_zero_modulus_zero_exponent(self):
        """A zero modulus is rejected even when no multiplication happens."""
        with pytest.raises(DivisionByZeroError):
            mod_pow(4, 0, 0)

    def test_catchable_as_zero_division_error(self):
        """Callers may catch the built-in ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            BigUint.from_int(5) // 0
        with pytest.raises(ZeroDivisionError):
            BigUint.from_int(5) % 0


class TestMalformedInput:
    """Construction rejects values the type cannot represent."""

    def test_negative_int_rejected(self):
        """BigUint is unsigned."""
        with pytest.raises(ValueError):
            BigUint.from_int(-3)

    def test_negative_operand_rejected(self):
        """Negative int operands are rejected by the operators."""
        with pytest.raises(ValueError):
            BigUint.from_int(3) + (-1)

    def test_limb_out_of_range(self):
        """Limbs must fit in 16 bits."""
        with pytest.raises(ValueError):
            BigUint([0x10000])
        with pytest.raises(ValueError):
            BigUint([1, -1])

    def test_unsupported_operand_type(self):
        """Non-integer operands are not coerced."""
        with pytest.raises(TypeError):
            BigUint.from_int(1) + "1"
        assert BigUint.from_int(1) != "1"

    def test_empty_buffer_is_zero(self):
        """Zero-length input decodes to zero rather than failing."""
        assert BigUint.from_bytes(b"").is_zero()

    def test_all_zero_buffer(self):
        """An all-zero buffer decodes and re-encodes as one zero byte."""
        assert BigUint.from_bytes(b"\x00" * 9).to_bytes() == b"\x00"


class TestImmutability:
    """Values cannot be modified after construction."""

    def test_limbs_are_tuple(self):
        """Exposed limbs are immutable."""
        a = BigUint.from_int(70000)
        with pytest.raises(TypeError):
            a.limbs[0] = 1

    def test_no_new_attributes(self):
        """Instances have no __dict__."""
        a = BigUint.from_int(1)
        with pytest.raises(AttributeError):
            a.extra = 1

    def test_hash_consistent_with_equality(self):
        """Equal values hash equally."""
        a = BigUint.from_int(123456789)
        b = BigUint.from_bytes(a.to_bytes())
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1


class TestIntInterop:
    """Mixing BigUint and int keeps Python's equality rules."""

    def test_hash_matches_int(self):
        """An equal int hashes the same."""
        a = BigUint.from_int(70000)
        assert a == 70000
        assert hash(a) == hash(70000)
        assert hash(BigUint.zero()) == hash(0)

    def test_int_in_set_and_dict(self):
        """BigUint finds int members and keys, and vice versa."""
        a = BigUint.from_int(70000)
        assert a in {70000}
        assert 70000 in {a}
        assert {70000: "x"}[a] == "x"

    def test_equality_with_negative_int(self):
        """Comparing with a negative int is False, not an error."""
        a = BigUint.from_int(1)
        assert (a == -1) is False
        assert (a != -1) is True
        assert (BigUint.zero() == -1) is False

    def test_arithmetic_with_negative_int_still_rejected(self):
        """Negative operands remain invalid for arithmetic."""
        with pytest.raises(ValueError):
            BigUint.from_int(5) - (-1)


class TestRSAInputValidation:
    """Textbook RSA rejects out-of-range messages."""

    def test_message_too_large(self):
        """Messages must be below the modulus."""
        keypair = RSAKeyPair.from_numbers(e=7, d=103, n=143)
        with pytest.raises(ValueError):
            keypair.encrypt(BigUint.from_int(143))
        with pytest.raises(ValueError):
            keypair.sign(BigUint.from_int(200))

    def test_mismatched_moduli(self):
        """Public and private keys must share n."""
        n1, n2 = BigUint.from_int(143), BigUint.from_int(187)
        with pytest.raises(ValueError):
            RSAKeyPair((BigUint.from_int(7), n1), (BigUint.from_int(103), n2))

    def test_bytes_too_long(self):
        """Byte messages must encode a value below n."""
        keypair = RSAKeyPair.from_numbers(e=7, d=103, n=143)
        with pytest.raises(ValueError):
            keypair.encrypt_bytes(b"\xff")
