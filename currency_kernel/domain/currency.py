"""
Currency -- ISO 4217 currency definitions and their formatting overrides.

Responsibility:
    Represents one validated currency definition: the alpha and numeric
    ISO 4217 codes plus the display overrides (symbol, precision, decimal
    separator) that are layered on top of locale number formatting.

Architecture position:
    Kernel > Domain -- pure, zero I/O. Stored by CurrencyRegistry and
    produced by the currency_config loader.

Invariants enforced:
    - alpha_code is always exactly 3 characters (upper-cased)
    - numeric_code is always an int in [100, 999]
    - precision is always an int in [0, 3]
    - Validation runs in __post_init__, so an invalid definition is never
      visible to a registry

Failure modes:
    - ValidationError on construction with any out-of-range field
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from currency_kernel.exceptions import ValidationError

if TYPE_CHECKING:
    from currency_kernel.domain.number_format import NumberFormatRules

ALPHA_CODE_LENGTH = 3
MIN_NUMERIC_CODE = 100
MAX_NUMERIC_CODE = 999
MIN_PRECISION = 0
MAX_PRECISION = 3
DEFAULT_PRECISION = 2


def validate_alpha_code(value: Any) -> str:
    """Validate an alpha ISO code and return it upper-cased."""
    if value is None or not isinstance(value, str):
        raise ValidationError(
            "alpha_code", value, "alpha ISO codes must be a 3 character string"
        )
    # upper() can lengthen a string ("ß" -> "SS"), so check the normalized form
    code = value.upper()
    if len(value) != ALPHA_CODE_LENGTH or len(code) != ALPHA_CODE_LENGTH:
        raise ValidationError(
            "alpha_code", value, "alpha ISO codes must be 3 characters long, see ISO 4217"
        )
    return code


def validate_numeric_code(value: Any) -> int:
    """Validate a numeric ISO code (an int, not a bool, in [100, 999])."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("numeric_code", value, "numeric ISO codes must be integers")
    if not MIN_NUMERIC_CODE <= value <= MAX_NUMERIC_CODE:
        raise ValidationError(
            "numeric_code", value, "numeric ISO codes must be 3 digits long, see ISO 4217"
        )
    return value


def validate_precision(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("precision", value, "precision must be an integer")
    if not MIN_PRECISION <= value <= MAX_PRECISION:
        raise ValidationError(
            "precision", value, "ISO 4217 precision must be between 0 and 3, inclusive"
        )
    return value


@dataclass(frozen=True, slots=True)
class CurrencyDefinition:
    """
    A single ISO 4217 currency definition.

    Contract:
        Holds both ISO identifiers and the per-currency display overrides.
        ``symbol`` and ``decimal_separator`` are optional: an empty value
        defers to the alpha code and to the locale respectively.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - Every field satisfies the ISO 4217 ranges listed above

    Non-goals:
        - Does NOT know its display name or country
        - Does NOT convert between currencies
    """

    alpha_code: str
    numeric_code: int
    symbol: str = ""
    precision: int = DEFAULT_PRECISION
    decimal_separator: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "alpha_code", validate_alpha_code(self.alpha_code))
        validate_numeric_code(self.numeric_code)
        validate_precision(self.precision)
        if not isinstance(self.symbol, str):
            raise ValidationError("symbol", self.symbol, "symbol must be a string")
        if not isinstance(self.decimal_separator, str):
            raise ValidationError(
                "decimal_separator", self.decimal_separator, "decimal separator must be a string"
            )

    @property
    def effective_symbol(self) -> str:
        """The configured symbol, falling back to the alpha code when empty."""
        return self.symbol or self.alpha_code

    def format(self, amount: Decimal, rules: NumberFormatRules) -> str:
        """
        Format ``amount`` using ``rules`` overridden by this currency.

        Preconditions:
            - ``amount`` is a finite Decimal.
        Postconditions:
            - ``rules`` is not modified; a private copy carries the
              overrides.
            - The result has no leading or trailing whitespace.
        """
        overrides: dict[str, Any] = {
            "currency_symbol": self.effective_symbol,
            "currency_decimal_digits": self.precision,
        }
        if self.decimal_separator:
            overrides["currency_decimal_separator"] = self.decimal_separator

        return rules.clone(**overrides).render(amount).strip()

    def __str__(self) -> str:
        return f"{self.alpha_code}/{self.numeric_code:03d}"
