"""
Typed Exception Hierarchy for the Currency Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers formatting money must be able to tell a bad configuration apart
from an unknown code or a malformed amount without parsing messages:
  1. Every error has a TYPED exception class (catch by type, not message)
  2. Every exception has a CODE attribute (machine-readable, API-safe)
  3. Exceptions carry structured DATA (not just a message string)

Example:
    try:
        context.format_currency(amount, "XYZ")
    except UnknownCurrencyCodeError as e:
        log.warning("unknown code", extra={"iso_code": e.iso_code})
        api_response(code=e.code)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    CurrencyKernelError (base)
    |
    +-- CurrencyError
    |   +-- ValidationError
    |   +-- UnknownCurrencyCodeError
    |
    +-- FormattingError
    |   +-- InvalidAmountError
    |   +-- UnknownLocaleError
    |
    +-- RegistryError
        +-- RegistryAlreadyInitializedError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category   | Code                          | When Raised
-----------|-------------------------------|-----------------------------------
Currency   | CURRENCY_VALIDATION_ERROR     | Bad alpha/numeric code or precision
           | UNKNOWN_CURRENCY_CODE         | Code not present in the registry
-----------|-------------------------------|-----------------------------------
Formatting | INVALID_AMOUNT                | Amount not convertible / not finite
           | UNKNOWN_LOCALE                | Locale identifier not in CLDR
-----------|-------------------------------|-----------------------------------
Registry   | REGISTRY_ALREADY_INITIALIZED  | initialize() called a second time

None of these are retryable: every operation in the kernel is in-memory
and deterministic.
"""

from typing import Any


class CurrencyKernelError(Exception):
    """
    Base exception for all currency kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "CURRENCY_KERNEL_ERROR"


# Currency-related exceptions


class CurrencyError(CurrencyKernelError):
    """Base exception for currency definition and lookup errors."""

    code: str = "CURRENCY_ERROR"


class ValidationError(CurrencyError):
    """
    A currency definition field violates ISO 4217 constraints.

    Raised at construction time so an invalid definition never reaches
    a registry.
    """

    code: str = "CURRENCY_VALIDATION_ERROR"

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class UnknownCurrencyCodeError(CurrencyError):
    """No currency is registered under the given alpha or numeric code."""

    code: str = "UNKNOWN_CURRENCY_CODE"

    def __init__(self, iso_code: str | int):
        self.iso_code = iso_code
        numeric = isinstance(iso_code, int) and not isinstance(iso_code, bool)
        display = f"{iso_code:03d}" if numeric else iso_code
        super().__init__(f"No currency specified for ISO code '{display}'.")


# Formatting-related exceptions


class FormattingError(CurrencyKernelError):
    """Base exception for amount and locale formatting errors."""

    code: str = "FORMATTING_ERROR"


class InvalidAmountError(FormattingError):
    """Amount cannot be represented as a finite decimal value."""

    code: str = "INVALID_AMOUNT"

    def __init__(self, amount: Any, reason: str = "not a finite decimal amount"):
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid amount {amount!r}: {reason}")


class UnknownLocaleError(FormattingError):
    """Locale identifier is not known to the CLDR data."""

    code: str = "UNKNOWN_LOCALE"

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Unknown locale: '{locale}'")


# Registry-related exceptions


class RegistryError(CurrencyKernelError):
    """Base exception for registry lifecycle errors."""

    code: str = "REGISTRY_ERROR"


class RegistryAlreadyInitializedError(RegistryError):
    """
    The registry was asked to initialize twice.

    A registry transitions from uninitialized to initialized exactly once
    for the life of the process.
    """

    code: str = "REGISTRY_ALREADY_INITIALIZED"

    def __init__(self, definition_count: int):
        self.definition_count = definition_count
        super().__init__(
            f"Currency registry already initialized with {definition_count} "
            f"alpha code(s)"
        )
