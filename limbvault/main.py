"""
limbvault - Main Entry Point
Command line access to BigUint arithmetic.
"""

import argparse
import sys
from typing import List, Optional

from .core_math.biguint import BigUint, divmod_, multiply, subtract
from .core_math.errors import BigUintError
from .core_math.modular import mod_pow, is_probable_prime, FERMAT_WITNESSES
from .rsa.keypair import RSAKeyPair


def to_decimal(value: BigUint) -> int:
    """Exact Python int for display, via the big-endian byte export."""
    return int.from_bytes(value.to_bytes(), byteorder='big')


def print_banner():
    print("=" * 50)
    print("Welcome to limbvault")
    print("=" * 50)
    print("\nAvailable commands:")
    print("  modpow BASE EXP MOD   (BASE^EXP) mod MOD")
    print("  isprime N             Fermat test with witnesses 2, 3, 5, 7")
    print("  divmod A B            Quotient and remainder")
    print("  bytes N               Big-endian byte export (hex)")
    print("  demo                  Walk through every operation")
    print()


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def run_demo():
    """Walk through each BigUint operation, reporting PASS/FAIL per step."""
    all_passed = True

    def report(label, passed):
        nonlocal all_passed
        all_passed = all_passed and passed
        print(f"  {label}: {'✓ PASS' if passed else '✗ FAIL'}")

    print_header("[1] Limb storage and conversion")
    big = BigUint.from_int(4611686018427387901)
    print(f"  4611686018427387901 -> limbs {list(big.limbs)}")
    report("Limbs", big.limbs == (65533, 65535, 65535, 16383))
    encoded = BigUint.from_int(3545084735).to_bytes()
    print(f"  3545084735 -> bytes {encoded.hex()}")
    report("Byte export", encoded == bytes([0xD3, 0x4D, 0xB3, 0x3F]))

    print_header("[2] Add / Subtract / Multiply")
    a = BigUint.from_int(0xFFFF_FFFF)
    b = BigUint.from_int(1)
    total = a + b
    print(f"  0xFFFFFFFF + 1 = {total.to_bytes().hex()}")
    report("Carry propagation", total.limbs == (0, 0, 1))
    report("Cancellation", subtract(total, b) == a)
    product = multiply(a, a)
    print(f"  0xFFFFFFFF^2 = {product.to_bytes().hex()}")
    report("Multiply", to_decimal(product) == 0xFFFF_FFFF ** 2)

    print_header("[3] DivMod")
    q, r = divmod_(BigUint.from_int(17), BigUint.from_int(5))
    print(f"  17 = {q.to_int()} * 5 + {r.to_int()}")
    report("DivMod", (q.to_int(), r.to_int()) == (3, 2))

    print_header("[4] Modular exponentiation and primality")
    result = mod_pow(4, 13, 497)
    print(f"  4^13 mod 497 = {result.to_int()}")
    report("ModPow", result.to_int() == 445)
    print(f"  Witnesses: {FERMAT_WITNESSES}")
    report("17 is probably prime", is_probable_prime(17))
    report("15 is composite", not is_probable_prime(15))

    print_header("[5] Textbook RSA (n = 11 * 13)")
    keypair = RSAKeyPair.from_numbers(e=7, d=103, n=143)
    message = BigUint.from_int(42)
    ciphertext = keypair.encrypt(message)
    print(f"  {keypair}")
    print(f"  Encrypted 42 -> {ciphertext.to_int()}")
    report("Decrypt", keypair.decrypt(ciphertext) == message)
    signature = keypair.sign(message)
    report("Signature verifies", keypair.verify(message, signature))

    print("\n" + "=" * 70)
    print(f"Overall: {'All checks passed!' if all_passed else 'Some checks failed!'}")
    return all_passed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="limbvault",
        description="Arbitrary-precision unsigned integer arithmetic",
    )
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("modpow", help="(BASE^EXP) mod MOD")
    p.add_argument("base", type=int)
    p.add_argument("exponent", type=int)
    p.add_argument("modulus", type=int)

    p = sub.add_parser("isprime", help="Fermat probable-prime test")
    p.add_argument("n", type=int)

    p = sub.add_parser("divmod", help="Quotient and remainder")
    p.add_argument("a", type=int)
    p.add_argument("b", type=int)

    p = sub.add_parser("bytes", help="Big-endian byte export")
    p.add_argument("n", type=int)

    sub.add_parser("demo", help="Walk through every operation")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for limbvault."""
    args = build_parser().parse_args(argv)

    if args.command is None:
        print_banner()
        return 0

    try:
        if args.command == "modpow":
            result = mod_pow(args.base, args.exponent, args.modulus)
            print(to_decimal(result))
        elif args.command == "isprime":
            verdict = is_probable_prime(BigUint.from_int(args.n))
            print("probably prime" if verdict else "composite")
        elif args.command == "divmod":
            q, r = divmod_(BigUint.from_int(args.a), BigUint.from_int(args.b))
            print(f"{to_decimal(q)} {to_decimal(r)}")
        elif args.command == "bytes":
            print(BigUint.from_int(args.n).to_bytes().hex())
        elif args.command == "demo":
            return 0 if run_demo() else 1
    except (BigUintError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
