"""
Currency Kernel

ISO 4217 currency registry and formatter with:
- Lookup by alpha code (case-insensitive) or numeric code
- Per-currency symbol, precision and decimal separator overrides
- Locale baseline rules from CLDR
- Build-once, read-many registry lifecycle
"""

__version__ = "0.1.0"

from currency_kernel.context import CurrencyContext
from currency_kernel.domain import (
    CurrencyDefinition,
    CurrencyRegistry,
    NumberFormatRules,
)
from currency_kernel.exceptions import (
    CurrencyKernelError,
    InvalidAmountError,
    RegistryAlreadyInitializedError,
    UnknownCurrencyCodeError,
    UnknownLocaleError,
    ValidationError,
)

__all__ = [
    "CurrencyContext",
    "CurrencyDefinition",
    "CurrencyKernelError",
    "CurrencyRegistry",
    "InvalidAmountError",
    "NumberFormatRules",
    "RegistryAlreadyInitializedError",
    "UnknownCurrencyCodeError",
    "UnknownLocaleError",
    "ValidationError",
]
