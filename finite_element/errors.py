"""Errors raised by prime-field arithmetic.

None of these derive from ``ValueError``: pydantic wraps ``ValueError``
raised inside validators into ``ValidationError``, and construction must
surface ``RangeError`` itself.
"""

from __future__ import annotations


class FieldError(ArithmeticError):
    """Base class for all field arithmetic errors."""


class RangeError(FieldError):
    """Residue outside [0, prime) or an unusable modulus."""


class FieldMismatchError(FieldError):
    """Binary operation between elements of different fields."""

    def __init__(self, op: str, left_prime: int, right_prime: int) -> None:
        super().__init__(
            f"Cannot {op} two nums in different fields "
            f"(F_{left_prime} and F_{right_prime})"
        )
        self.op = op
        self.left_prime = left_prime
        self.right_prime = right_prime


class DivisionByZeroError(FieldError, ZeroDivisionError):
    """Zero has no multiplicative inverse."""
