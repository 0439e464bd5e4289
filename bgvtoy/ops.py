"""Homomorphic operations on ciphertexts."""

from __future__ import annotations

from .encrypt import Ciphertext

__all__ = ["Ciphertext", "homomorphic_add", "homomorphic_multiply"]


def homomorphic_add(a: Ciphertext, b: Ciphertext) -> Ciphertext:
    """Add two ciphertexts component by component."""
    return Ciphertext(a.c0 + b.c0, a.c1 + b.c1)


def homomorphic_multiply(a: Ciphertext, b: Ciphertext) -> Ciphertext:
    """Multiply two ciphertexts, dropping the c1*d1 term (no relinearisation)."""
    return Ciphertext(a.c0 * b.c0, a.c0 * b.c1 + a.c1 * b.c0)