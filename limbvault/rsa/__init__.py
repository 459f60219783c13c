# RSA Module
"""
Textbook RSA built on BigUint modular exponentiation, with key import
from the cryptography library.
"""

from .keypair import (
    MAX_EXPONENTIATION_BITS,
    RSAKeyPair,
    public_key_numbers,
    load_public_key_pem,
    rsa_encrypt,
    rsa_decrypt,
    rsa_sign,
    rsa_verify,
)

__all__ = [
    'MAX_EXPONENTIATION_BITS',
    'RSAKeyPair',
    'public_key_numbers',
    'load_public_key_pem',
    'rsa_encrypt',
    'rsa_decrypt',
    'rsa_sign',
    'rsa_verify',
]
