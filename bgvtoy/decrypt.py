"""Decryption for the toy BGV scheme."""

from __future__ import annotations

from .encrypt import Ciphertext
from .keys import PLAINTEXT_MODULUS, SecretKey
from .poly import Polynomial


def decrypt(ct: Ciphertext, sk: SecretKey) -> Polynomial:
    """Return (c0 + c1*s) with coefficients reduced modulo the plaintext modulus."""
    m = ct.c0 + ct.c1 * sk.s
    return Polynomial([c % PLAINTEXT_MODULUS for c in m.coefficients], m.modulus)