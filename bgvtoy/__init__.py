"""Toy BGV homomorphic encryption over a small polynomial ring, with a demo command."""

__version__ = "0.1.0"
__all__ = ["poly", "keys", "encrypt", "decrypt", "ops", "cli"]