"""Key generation for the toy BGV scheme."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .poly import Polynomial

DEGREE = 4
MODULUS = 97
PLAINTEXT_MODULUS = 2


class KeyGenError(Exception):
    """Raised when key generation cannot obtain randomness."""

    def __init__(self, message: str = "Failed to generate random values for key generation"):
        super().__init__(message)


@dataclass
class PublicKey:
    a: Polynomial
    b: Polynomial
    modulus: int


@dataclass
class SecretKey:
    s: Polynomial
    modulus: int


def generate_keys() -> tuple[PublicKey, SecretKey]:
    """Generate a keypair with b = -a*s + t*e."""
    rng = random.SystemRandom()
    try:
        s = Polynomial([rng.randint(0, 1) for _ in range(DEGREE)], MODULUS)
        a = Polynomial.random(DEGREE, MODULUS, rng)
        e = Polynomial([rng.randint(0, 1) for _ in range(DEGREE)], MODULUS)
    except (OSError, NotImplementedError) as exc:
        raise KeyGenError() from exc

    neg_as = Polynomial([(MODULUS - c) % MODULUS for c in (a * s).coefficients], MODULUS)
    te = Polynomial([c * PLAINTEXT_MODULUS % MODULUS for c in e.coefficients], MODULUS)
    b = neg_as + te
    return PublicKey(a, b, MODULUS), SecretKey(s, MODULUS)