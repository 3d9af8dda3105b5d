"""Modular arithmetic on raw Python ints.

These helpers know nothing about fields or element types; the modulus is
passed explicitly.  Inputs to ``add_mod``, ``sub_mod`` and ``mul_mod`` are
expected to be residues already reduced into [0, modulus).
"""

from __future__ import annotations

import logging

from finite_element import config
from finite_element.errors import DivisionByZeroError

logger = logging.getLogger(__name__)


def rem_euclid(a: int, m: int) -> int:
    """Euclidean remainder: always in [0, |m|), whatever the signs."""
    if m == 0:
        raise ZeroDivisionError("Euclidean remainder with modulus 0")
    return a % abs(m)


def add_mod(a: int, b: int, modulus: int) -> int:
    """Modular addition without growing past 2 * (modulus - 1)."""
    # subtract instead of adding when the sum would wrap
    if a >= modulus - b:
        return a - (modulus - b)
    return a + b


def sub_mod(a: int, b: int, modulus: int) -> int:
    """Modular subtraction; the raw difference may be negative."""
    return rem_euclid(a - b, modulus)


def mul_mod(a: int, b: int, modulus: int) -> int:
    """Modular multiplication."""
    return (a * b) % modulus


def pow_mod(base: int, exponent: int, modulus: int) -> int:
    """Square-and-multiply modular exponentiation.

    Every product is reduced immediately, so no intermediate value exceeds
    (modulus - 1) ** 2 no matter how large *exponent* is.
    """
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    if modulus < 1:
        raise ValueError(f"Modulus must be positive, got {modulus}")

    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


def inv_mod(a: int, p: int) -> int:
    """Multiplicative inverse via Fermat's little theorem (p is prime)."""
    if a % p == 0:
        logger.debug("inverse of zero requested in F_%d", p)
        raise DivisionByZeroError(f"Cannot invert zero in F_{p}")
    return pow_mod(a, p - 2, p)


def is_probable_prime(n: int) -> bool:
    """Miller-Rabin primality test over ``config.MILLER_RABIN_BASES``.

    Deterministic for n < 3.3 * 10**24; above that a composite passes with
    probability at most 4 ** -len(bases).
    """
    if n < 2:
        return False
    for p in config.MILLER_RABIN_BASES:
        if n % p == 0:
            return n == p

    # n - 1 = d * 2**s with d odd
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for a in config.MILLER_RABIN_BASES:
        x = pow_mod(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = mul_mod(x, x, n)
            if x == n - 1:
                break
        else:
            return False
    return True
