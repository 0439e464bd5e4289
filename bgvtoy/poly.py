"""Polynomials with coefficients reduced modulo an integer modulus."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable

_U64_MAX = 2**64 - 1
_I64_MAX = 2**63 - 1


def _as_u64(values: Iterable[int]) -> list[int]:
    checked = []
    for value in values:
        if not isinstance(value, int) or not 0 <= value <= _U64_MAX:
            raise ValueError(f"value is not an unsigned 64-bit integer: {value!r}")
        checked.append(value)
    return checked


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return whole if value >= 0 else -whole


@dataclass
class Polynomial:
    """A polynomial whose coefficients are kept reduced modulo ``modulus``.

    Multiplication is cyclic: indices wrap around the length of the left operand.
    """

    coefficients: list[int]
    modulus: int

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError("modulus must be positive")
        self.coefficients = list(self.coefficients)
        self.reduce()

    @classmethod
    def zero(cls, degree: int, modulus: int) -> Polynomial:
        """Return the all-zero polynomial with ``degree`` coefficients."""
        return cls([0] * degree, modulus)

    @classmethod
    def random(cls, degree: int, modulus: int, rng: random.Random) -> Polynomial:
        """Return a polynomial with coefficients drawn uniformly below ``modulus``."""
        return cls([rng.randrange(modulus) for _ in range(degree)], modulus)

    def reduce(self) -> None:
        """Reduce every coefficient modulo the modulus, in place."""
        self.coefficients = [c % self.modulus for c in self.coefficients]

    def degree(self) -> int:
        """Return the number of coefficients."""
        return len(self.coefficients)

    @classmethod
    def encode(cls, data: Iterable[int], modulus: int) -> Polynomial:
        """Encode unsigned 64-bit integers as coefficients."""
        return cls([value % modulus for value in _as_u64(data)], modulus)

    def decode(self) -> list[int]:
        """Return the coefficients as unsigned 64-bit integers."""
        for c in self.coefficients:
            if c > _U64_MAX:
                raise OverflowError(f"Coefficient exceeds u64 range: {c}")
        return list(self.coefficients)

    @classmethod
    def encode_real(cls, data: float, precision: int, modulus: int) -> Polynomial:
        """Encode the magnitude of a real number as a fixed-point constant term."""
        scale = 10**precision
        scaled = data * float(scale)
        if math.isnan(scaled):
            fixed = 0
        else:
            fixed = abs(max(-_I64_MAX, min(_I64_MAX, _round_half_away(scaled)
                                           if math.isfinite(scaled)
                                           else int(math.copysign(_I64_MAX, scaled)))))
        return cls([fixed % modulus], modulus)

    def decode_real(self, precision: int) -> float:
        """Decode the constant term as a fixed-point real number."""
        if not self.coefficients:
            return 0.0
        value = self.coefficients[0]
        if value > _U64_MAX:
            raise OverflowError(f"Coefficient exceeds u64 range: {value}")
        return float(value) / float(10**precision)

    @classmethod
    def from_u64(cls, coeffs: Iterable[int], modulus: int) -> Polynomial:
        """Build a polynomial from unsigned 64-bit coefficients."""
        return cls([c % modulus for c in _as_u64(coeffs)], modulus)

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        coeffs = [
            (a + b) % self.modulus
            for a, b in zip_longest(self.coefficients, other.coefficients, fillvalue=0)
        ]
        return Polynomial(coeffs, self.modulus)

    def __sub__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        coeffs = [
            (a + self.modulus - b) % self.modulus
            for a, b in zip_longest(self.coefficients, other.coefficients, fillvalue=0)
        ]
        return Polynomial(coeffs, self.modulus)

    def __mul__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        n = len(self.coefficients)
        if len(other.coefficients) < n:
            raise ValueError("right operand has fewer coefficients than the left one")
        coeffs = [0] * n
        for i, a in enumerate(self.coefficients):
            for j, b in enumerate(other.coefficients[:n]):
                k = (i + j) % n
                coeffs[k] = (coeffs[k] + a * b) % self.modulus
        return Polynomial(coeffs, self.modulus)