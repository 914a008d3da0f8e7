"""Greatest common divisor and least common multiple."""

from __future__ import annotations


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; both arguments zero raises ZeroDivisionError."""
    return a * b // gcd(a, b)