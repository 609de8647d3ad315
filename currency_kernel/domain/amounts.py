"""Amount adaptation -- one explicit Decimal conversion per numeric type."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from functools import singledispatch
from typing import Any

from currency_kernel.exceptions import InvalidAmountError


@singledispatch
def to_decimal(value: Any) -> Decimal:
    """Convert a numeric amount to the kernel's canonical Decimal."""
    raise InvalidAmountError(value, f"unsupported amount type {type(value).__name__}")


@to_decimal.register
def _(value: Decimal) -> Decimal:
    return _finite(value, value)


@to_decimal.register
def _(value: bool) -> Decimal:
    raise InvalidAmountError(value, "booleans are not amounts")


@to_decimal.register
def _(value: int) -> Decimal:
    return Decimal(value)


@to_decimal.register
def _(value: float) -> Decimal:
    # str() gives the shortest repr, so 0.1 becomes Decimal("0.1")
    return _finite(Decimal(str(value)), value)


@to_decimal.register
def _(value: Fraction) -> Decimal:
    return Decimal(value.numerator) / Decimal(value.denominator)


def _finite(result: Decimal, original: Any) -> Decimal:
    if not result.is_finite():
        raise InvalidAmountError(original)
    return result
