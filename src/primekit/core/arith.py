"""Extended Euclid and the helpers built on it."""

from __future__ import annotations

from typing import Tuple


def egcd(a: int, b: int) -> Tuple[int, int, int]:
    """Extended Euclidean algorithm.

    Returns:
        ``(x, y, g)`` with ``a*x + b*y == g == gcd(a, b)``.
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    if old_r < 0:
        old_r, old_x, old_y = -old_r, -old_x, -old_y
    return old_x, old_y, old_r


def is_coprime(a: int, b: int) -> bool:
    """Return True if ``a`` and ``b`` are relatively prime.

    >>> is_coprime(6, 35)
    True
    >>> is_coprime(6, 27)
    False
    """
    x, y, _ = egcd(a, b)
    return a * x + b * y == 1


def mod_inverse(a: int, m: int) -> int:
    """Return ``a**-1 mod m``."""
    x, _, g = egcd(a, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m
