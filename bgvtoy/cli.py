"""Command line demonstration of encryption and homomorphic operations."""

from __future__ import annotations

import argparse
import re
import sys
from functools import reduce

from .decrypt import decrypt
from .encrypt import encrypt
from .keys import KeyGenError, generate_keys
from .ops import homomorphic_add, homomorphic_multiply
from .poly import Polynomial

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U64_MAX = 2**64 - 1

_OPERATIONS = {
    "add": ("Sum", homomorphic_add),
    "multiply": ("Product", homomorphic_multiply),
}


def _parse_u64(text: str) -> int | None:
    text = text.strip()
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U64_MAX else None


def parse_integers(text: str) -> list[int]:
    """Parse a comma-separated list, silently skipping entries that are not u64."""
    values = (_parse_u64(part) for part in text.split(","))
    return [v for v in values if v is not None]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bgv_cli", description="Performs FHE operations using the BGV scheme"
    )
    parser.add_argument("--version", action="version", version="%(prog)s 1.0")
    parser.add_argument(
        "-i",
        "--integers",
        metavar="INTEGERS",
        help="A comma-separated list of integers to encrypt",
    )
    args = parser.parse_args(argv)

    integers = parse_integers(args.integers) if args.integers is not None else [1, 2]

    try:
        pk, sk = generate_keys()
    except KeyGenError as exc:
        print(f"Error during key generation: {exc}", file=sys.stderr)
        return 1

    ciphertexts = [
        encrypt(Polynomial.from_u64([value, 0, 0, 0], pk.modulus), pk) for value in integers
    ]

    print("How many operations do you want to perform?")
    count = _parse_u64(sys.stdin.readline())
    if count is None:
        count = 1

    for _ in range(count):
        print("Choose operation: add or multiply")
        operation = sys.stdin.readline().strip()
        chosen = _OPERATIONS.get(operation)
        if chosen is None:
            print("Invalid operation. Please choose 'add' or 'multiply'.")
            continue
        label, combine = chosen
        if not ciphertexts:
            print("No integers to operate on.", file=sys.stderr)
            return 1
        result = reduce(combine, ciphertexts)
        print(f"Decrypted {label}: {decrypt(result, sk).coefficients}")
    return 0