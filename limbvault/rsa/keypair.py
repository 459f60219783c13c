"""
Textbook RSA over BigUint

Implements unpadded RSA using the BigUint modular arithmetic:
- Encryption / decryption (m^e mod n, c^d mod n)
- Signing / verification
- Import of RSA key material from the cryptography library

Security Note:
    Textbook RSA has no padding and is NOT secure. mod_pow also costs one
    multiplication per unit of the exponent, and each reduction is a
    division by repeated subtraction, so exponentiation is refused for
    moduli wider than MAX_EXPONENTIATION_BITS. Importing and inspecting
    real keys (modulus, exponents, prime factors) works at any size.
"""

from typing import Optional, Tuple, Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ..core_math.biguint import BigUint, multiply
from ..core_math.modular import mod_pow


# (exponent, modulus)
RSAKey = Tuple[BigUint, BigUint]

# Widest modulus mod_pow is allowed to run against
MAX_EXPONENTIATION_BITS = 10


def _as_biguint(value: Union[BigUint, int]) -> BigUint:
    if isinstance(value, BigUint):
        return value
    return BigUint.from_int(value)


def _check_toy_modulus(n: BigUint):
    if n.bit_length() > MAX_EXPONENTIATION_BITS:
        raise ValueError(
            f"{n.bit_length()}-bit modulus is too large for repeated-"
            f"multiplication mod_pow (limit {MAX_EXPONENTIATION_BITS} bits)"
        )


def public_key_numbers(public_key: rsa.RSAPublicKey) -> RSAKey:
    """
    Extract (e, n) from a cryptography RSA public key.

    Args:
        public_key: RSA public key object

    Returns:
        Tuple (e, n) as BigUint values
    """
    numbers = public_key.public_numbers()
    return BigUint.from_int(numbers.e), BigUint.from_int(numbers.n)


def load_public_key_pem(data: bytes) -> RSAKey:
    """
    Load (e, n) from a PEM-encoded SubjectPublicKeyInfo.

    Raises:
        ValueError: If the PEM data is malformed or not an RSA key
    """
    public_key = serialization.load_pem_public_key(data)
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise ValueError("PEM data does not contain an RSA public key")
    return public_key_numbers(public_key)


def rsa_encrypt(message: BigUint, public_key: RSAKey) -> BigUint:
    """
    Raise a BigUint message to the public exponent.

    Computes ciphertext = message^e mod n

    Args:
        message: Plaintext value, below n
        public_key: Tuple (e, n)

    Returns:
        Ciphertext as a BigUint

    Raises:
        ValueError: If message >= n or n exceeds MAX_EXPONENTIATION_BITS
    """
    e, n = public_key
    _check_toy_modulus(n)
    if message >= n:
        raise ValueError("Message must be less than modulus n")
    return mod_pow(message, e, n)


def rsa_decrypt(ciphertext: BigUint, private_key: RSAKey) -> BigUint:
    """Computes message = ciphertext^d mod n (toy moduli only)."""
    d, n = private_key
    _check_toy_modulus(n)
    return mod_pow(ciphertext, d, n)


def rsa_sign(message: BigUint, private_key: RSAKey) -> BigUint:
    """
    Unpadded signature: message^d mod n.

    Args:
        message: Digest value, below n
        private_key: Tuple (d, n)

    Raises:
        ValueError: If message >= n or n exceeds MAX_EXPONENTIATION_BITS
    """
    d, n = private_key
    _check_toy_modulus(n)
    if message >= n:
        raise ValueError("Message must be less than modulus n")
    return mod_pow(message, d, n)


def rsa_verify(message: BigUint, signature: BigUint, public_key: RSAKey) -> bool:
    """True when signature^e mod n equals message."""
    e, n = public_key
    _check_toy_modulus(n)
    return mod_pow(signature, e, n) == message


class RSAKeyPair:
    """
    RSA key pair held as BigUint values.

    Pairs imported from the cryptography library can be inspected
    (modulus, exponents, check_modulus) but their exponentiating
    operations raise ValueError once n is wider than
    MAX_EXPONENTIATION_BITS.

    Example:
        >>> keypair = RSAKeyPair.from_numbers(e=7, d=103, n=143)
        >>> ciphertext = keypair.encrypt(BigUint.from_int(42))
        >>> keypair.decrypt(ciphertext).to_int()
        42
    """

    def __init__(self, public_key: RSAKey, private_key: RSAKey,
                 primes: Optional[Tuple[BigUint, BigUint]] = None):
        """
        Args:
            public_key: (e, n) as BigUint
            private_key: (d, n) as BigUint, sharing n with public_key
            primes: Prime factors (p, q) of n, when known
        """
        if public_key[1] != private_key[1]:
            raise ValueError("Public and private keys use different moduli")

        self._public_key = public_key
        self._private_key = private_key
        self._e, self._n = public_key
        self._d, _ = private_key
        self._primes = primes

    @classmethod
    def from_numbers(cls, e: Union[BigUint, int], d: Union[BigUint, int],
                     n: Union[BigUint, int]) -> 'RSAKeyPair':
        """Build a key pair from raw exponents and modulus."""
        e, d, n = _as_biguint(e), _as_biguint(d), _as_biguint(n)
        return cls((e, n), (d, n))

    @classmethod
    def from_cryptography(cls, private_key: rsa.RSAPrivateKey) -> 'RSAKeyPair':
        """
        Import a private key generated by the cryptography library.

        Args:
            private_key: RSA private key object

        Returns:
            New RSAKeyPair carrying e, d, n and the prime factors
        """
        numbers = private_key.private_numbers()
        e, n = public_key_numbers(private_key.public_key())
        d = BigUint.from_int(numbers.d)
        primes = (BigUint.from_int(numbers.p), BigUint.from_int(numbers.q))
        return cls((e, n), (d, n), primes)

    @property
    def public_key(self) -> RSAKey:
        """(e, n) tuple."""
        return self._public_key

    @property
    def private_key(self) -> RSAKey:
        """(d, n) tuple."""
        return self._private_key

    @property
    def modulus(self) -> BigUint:
        return self._n

    @property
    def public_exponent(self) -> BigUint:
        return self._e

    @property
    def private_exponent(self) -> BigUint:
        return self._d

    @property
    def primes(self) -> Optional[Tuple[BigUint, BigUint]]:
        return self._primes

    @property
    def key_size(self) -> int:
        """Bit length of n."""
        return self._n.bit_length()

    def check_modulus(self) -> bool:
        """
        Verify that n == p * q using BigUint multiplication.

        Returns False when the prime factors are unknown.
        """
        if self._primes is None:
            return False
        p, q = self._primes
        return multiply(p, q) == self._n

    def encrypt(self, message: BigUint) -> BigUint:
        return rsa_encrypt(message, self._public_key)

    def decrypt(self, ciphertext: BigUint) -> BigUint:
        return rsa_decrypt(ciphertext, self._private_key)

    def sign(self, message: BigUint) -> BigUint:
        return rsa_sign(message, self._private_key)

    def verify(self, message: BigUint, signature: BigUint) -> bool:
        return rsa_verify(message, signature, self._public_key)

    def encrypt_bytes(self, data: bytes) -> bytes:
        """Big-endian ciphertext, left-padded to the byte width of n."""
        message = BigUint.from_bytes(data)
        if message >= self._n:
            raise ValueError("Data too long for key size")
        ciphertext = self.encrypt(message).to_bytes()
        return ciphertext.rjust(len(self._n.to_bytes()), b"\x00")

    def decrypt_bytes(self, data: bytes, length: Optional[int] = None) -> bytes:
        """
        Decrypt a big-endian ciphertext back to plaintext bytes.

        The plaintext is recovered as a number, so leading zero bytes of the
        original message are lost unless its length is passed back in.

        Args:
            data: Ciphertext bytes
            length: Plaintext length; the result is left-padded with zero
                    bytes to this width

        Raises:
            ValueError: If the plaintext does not fit in length bytes
        """
        plaintext = self.decrypt(BigUint.from_bytes(data)).to_bytes()
        if length is None:
            return plaintext
        # zero still exports as one byte
        if plaintext == b"\x00":
            plaintext = b""
        if len(plaintext) > length:
            raise ValueError(f"Plaintext does not fit in {length} bytes")
        return plaintext.rjust(length, b"\x00")

    def __repr__(self) -> str:
        return f"RSAKeyPair(bits={self.key_size}, e={self._e.to_int()})"
