"""Elements of the prime field GF(p).

A ``FieldElement`` is an immutable ``(num, prime)`` pair with
``0 <= num < prime``.  Every operation builds its result through the
validating constructor, so any element that exists is in range.

Binary operations require both operands to share the same ``prime`` and
raise ``FieldMismatchError`` otherwise.  Python operators are the primary
interface; the named methods (``add``, ``sub``, ``mul``, ``div``, ``pow``)
are equivalent.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from finite_element import config
from finite_element.errors import DivisionByZeroError, FieldMismatchError, RangeError
from finite_element.field import modular

logger = logging.getLogger(__name__)


class FieldElement(BaseModel):
    """An element of GF(prime)."""

    model_config = ConfigDict(frozen=True, strict=True)

    num: int
    prime: int

    def __init__(self, num: int, prime: int) -> None:
        super().__init__(num=num, prime=prime)

    @classmethod
    def new(cls, num: int, prime: int) -> FieldElement:
        """Validating constructor; same as calling the class."""
        return cls(num, prime)

    @classmethod
    def model_construct(cls, _fields_set: Any = None, **values: Any) -> FieldElement:
        """Same as calling the class; unvalidated construction is not allowed."""
        return cls(**values)

    def model_copy(
        self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False
    ) -> FieldElement:
        """Copy with *update* applied, re-validated through the constructor."""
        return type(self)(**{**self.model_dump(), **(update or {})})

    @model_validator(mode="after")
    def _check_range(self) -> FieldElement:
        if self.prime < 2:
            logger.debug("rejected modulus %d", self.prime)
            raise RangeError(f"Prime {self.prime} must be at least 2")
        if not 0 <= self.num < self.prime:
            logger.debug("rejected residue %d for F_%d", self.num, self.prime)
            raise RangeError(
                f"Num {self.num} not in field range 0 to {self.prime - 1}"
            )
        if config.CHECK_PRIMALITY and not modular.is_probable_prime(self.prime):
            logger.debug("rejected composite modulus %d", self.prime)
            raise RangeError(f"Modulus {self.prime} is not prime")
        return self

    # ---- helpers ----

    def _check_field(self, other: FieldElement, op: str) -> None:
        if other.prime != self.prime:
            logger.debug("%s across fields F_%d and F_%d", op, self.prime, other.prime)
            raise FieldMismatchError(op, self.prime, other.prime)

    def _new(self, num: int) -> FieldElement:
        return type(self)(num, self.prime)

    # ---- named operations ----

    def add(self, other: FieldElement) -> FieldElement:
        """Field addition."""
        self._check_field(other, "add")
        return self._new(modular.add_mod(self.num, other.num, self.prime))

    def sub(self, other: FieldElement) -> FieldElement:
        """Field subtraction."""
        self._check_field(other, "subtract")
        return self._new(modular.sub_mod(self.num, other.num, self.prime))

    def mul(self, other: FieldElement) -> FieldElement:
        """Field multiplication."""
        self._check_field(other, "multiply")
        return self._new(modular.mul_mod(self.num, other.num, self.prime))

    def div(self, other: FieldElement) -> FieldElement:
        """Field division: ``self * other ** (prime - 2)``."""
        self._check_field(other, "divide")
        if other.num == 0:
            logger.debug("division by zero in F_%d", self.prime)
            raise DivisionByZeroError(f"Cannot divide by zero in F_{self.prime}")
        inv = modular.pow_mod(other.num, self.prime - 2, self.prime)
        return self._new(modular.mul_mod(self.num, inv, self.prime))

    def pow(self, exponent: int) -> FieldElement:
        """Raise to a signed integer power.

        The exponent is first reduced mod (prime - 1) with a Euclidean
        remainder, so negative exponents are always defined.
        """
        n = modular.rem_euclid(exponent, self.prime - 1)
        return self._new(modular.pow_mod(self.num, n, self.prime))

    def scale(self, k: int) -> FieldElement:
        """Multiply by a plain integer (the element added to itself k times)."""
        k = modular.rem_euclid(k, self.prime)
        return self._new(modular.mul_mod(self.num, k, self.prime))

    def inverse(self) -> FieldElement:
        """Multiplicative inverse."""
        if self.num == 0:
            logger.debug("inverse of zero in F_%d", self.prime)
            raise DivisionByZeroError(f"Cannot invert zero in F_{self.prime}")
        return self._new(modular.inv_mod(self.num, self.prime))

    def is_zero(self) -> bool:
        return self.num == 0

    # ---- operators ----

    def __add__(self, other: Any) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Any) -> FieldElement:
        if isinstance(other, FieldElement):
            return self.mul(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> FieldElement:
        if isinstance(other, int) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.div(other)

    def __pow__(self, exponent: Any, modulo: Any = None) -> FieldElement:
        if modulo is not None:
            return NotImplemented
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> FieldElement:
        return self._new(modular.rem_euclid(-self.num, self.prime))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.num == other.num and self.prime == other.prime

    def __hash__(self) -> int:
        return hash((self.num, self.prime))

    def __repr__(self) -> str:
        return f"FieldElement_{self.prime}({self.num})"

    __str__ = __repr__
