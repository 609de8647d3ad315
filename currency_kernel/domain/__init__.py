"""
Pure domain layer.

Currency definitions, the dual-keyed registry, locale number rules and
amount adaptation, with NO dependencies on:
- Configuration files or environment variables
- I/O

All domain objects are immutable once built.
"""

from currency_kernel.domain.amounts import to_decimal
from currency_kernel.domain.currency import (
    CurrencyDefinition,
    validate_alpha_code,
    validate_numeric_code,
)
from currency_kernel.domain.defaults import BUILTIN_CURRENCIES
from currency_kernel.domain.number_format import CURRENCY_SIGN, NumberFormatRules
from currency_kernel.domain.registry import CurrencyRegistry

__all__ = [
    "BUILTIN_CURRENCIES",
    "CURRENCY_SIGN",
    "CurrencyDefinition",
    "CurrencyRegistry",
    "NumberFormatRules",
    "to_decimal",
    "validate_alpha_code",
    "validate_numeric_code",
]
