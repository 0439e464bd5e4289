"""Encryption for the toy BGV scheme."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .keys import PublicKey
from .poly import Polynomial


@dataclass
class Ciphertext:
    c0: Polynomial
    c1: Polynomial


def encrypt(plaintext: Polynomial, pk: PublicKey) -> Ciphertext:
    """Encrypt ``plaintext`` as (a*r + m, b*r) for a fresh random r."""
    r = Polynomial.random(plaintext.degree(), pk.modulus, random.SystemRandom())
    c0 = pk.a * r + plaintext
    c1 = pk.b * r
    return Ciphertext(c0, c1)