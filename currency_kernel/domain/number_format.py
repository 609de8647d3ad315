"""
Number format rules -- locale baseline for currency rendering.

Responsibility:
    Holds the locale-derived rules (symbol, separators, grouping, digit
    count, sign affixes) that a CurrencyDefinition selectively overrides,
    and renders a Decimal under those rules.

Architecture position:
    Kernel > Domain. The only module that talks to Babel / CLDR data.

Invariants enforced:
    - Rules are immutable; overrides always produce a copy (clone)
    - Rounding is half away from zero at currency_decimal_digits

Failure modes:
    - InvalidAmountError when rendering a non-finite or non-Decimal amount
    - UnknownLocaleError when a locale identifier is not in CLDR
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from babel import Locale
from babel import UnknownLocaleError as BabelUnknownLocaleError
from babel.numbers import (
    get_currency_precision,
    get_currency_symbol,
    get_decimal_symbol,
    get_group_symbol,
    get_minus_sign_symbol,
    get_territory_currencies,
)

from currency_kernel.exceptions import InvalidAmountError, UnknownLocaleError

# CLDR placeholder for the currency symbol inside pattern affixes.
CURRENCY_SIGN = "¤"

# Babel reports this grouping width when a pattern has no grouping separator.
_NO_GROUPING = 1000


@dataclass(frozen=True, slots=True)
class NumberFormatRules:
    """
    Baseline currency formatting rules for one locale.

    Affixes use ``CURRENCY_SIGN`` as the symbol placeholder, so
    ``positive_prefix="¤"`` renders ``$1.00`` and ``positive_suffix=" ¤"``
    renders ``1,00 €``. ``currency_group_sizes`` lists group widths from the
    decimal point outward; the last width repeats, and an empty tuple
    disables grouping.
    """

    currency_symbol: str = CURRENCY_SIGN
    currency_decimal_separator: str = "."
    currency_group_separator: str = ","
    currency_group_sizes: tuple[int, ...] = (3,)
    currency_decimal_digits: int = 2
    positive_prefix: str = CURRENCY_SIGN
    positive_suffix: str = ""
    negative_prefix: str = "-" + CURRENCY_SIGN
    negative_suffix: str = ""

    def __post_init__(self) -> None:
        if self.currency_decimal_digits < 0:
            raise ValueError(
                f"currency_decimal_digits must be >= 0, got {self.currency_decimal_digits}"
            )
        if any(size <= 0 for size in self.currency_group_sizes):
            raise ValueError(
                f"currency_group_sizes must be positive, got {self.currency_group_sizes}"
            )

    def clone(self, **overrides: Any) -> NumberFormatRules:
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)

    @classmethod
    def for_locale(cls, locale: str | Locale, currency: str | None = None) -> NumberFormatRules:
        """
        Baseline rules for a CLDR locale (``en_US``, ``de-DE``, ...).

        The symbol and digit count come from ``currency`` when given,
        otherwise from the locale territory's current tender.
        """
        return _rules_for_locale(str(locale), currency.upper() if currency else None)

    def render(self, amount: Decimal) -> str:
        """Render ``amount`` as a currency string under these rules."""
        if not isinstance(amount, Decimal) or not amount.is_finite():
            raise InvalidAmountError(amount)

        digits = self.currency_decimal_digits
        quantum = Decimal(1).scaleb(-digits)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, amount.adjusted() + digits + 2)
            rounded = amount.quantize(quantum, rounding=ROUND_HALF_UP)

        integer_part, _, fraction = f"{rounded.copy_abs():f}".partition(".")
        number = self._group(integer_part)
        if digits:
            number = f"{number}{self.currency_decimal_separator}{fraction}"

        if rounded.is_signed() and rounded != 0:
            prefix, suffix = self.negative_prefix, self.negative_suffix
        else:
            prefix, suffix = self.positive_prefix, self.positive_suffix

        symbol = self.currency_symbol
        return prefix.replace(CURRENCY_SIGN, symbol) + number + suffix.replace(CURRENCY_SIGN, symbol)

    def _group(self, integer_part: str) -> str:
        sizes = self.currency_group_sizes
        if not sizes:
            return integer_part

        groups: list[str] = []
        end = len(integer_part)
        index = 0
        while end > sizes[index]:
            groups.append(integer_part[end - sizes[index]:end])
            end -= sizes[index]
            index = min(index + 1, len(sizes) - 1)
        groups.append(integer_part[:end])
        return self.currency_group_separator.join(reversed(groups))


def _territory_currency(locale: Locale) -> str | None:
    if not locale.territory:
        return None
    codes = get_territory_currencies(locale.territory)
    return codes[0] if codes else None


@functools.lru_cache(maxsize=128)
def _rules_for_locale(identifier: str, currency: str | None) -> NumberFormatRules:
    try:
        locale = Locale.parse(identifier.replace("-", "_"))
    except (BabelUnknownLocaleError, ValueError) as e:
        raise UnknownLocaleError(identifier) from e

    pattern = locale.currency_formats["standard"]
    primary, secondary = pattern.grouping
    if primary >= _NO_GROUPING:
        group_sizes: tuple[int, ...] = ()
    elif primary == secondary:
        group_sizes = (primary,)
    else:
        group_sizes = (primary, secondary)

    minus = get_minus_sign_symbol(locale)
    code = currency or _territory_currency(locale)

    return NumberFormatRules(
        currency_symbol=get_currency_symbol(code, locale) if code else CURRENCY_SIGN,
        currency_decimal_separator=get_decimal_symbol(locale),
        currency_group_separator=get_group_symbol(locale),
        currency_group_sizes=group_sizes,
        currency_decimal_digits=get_currency_precision(code) if code else 2,
        positive_prefix=pattern.prefix[0],
        positive_suffix=pattern.suffix[0],
        negative_prefix=pattern.prefix[1].replace("-", minus),
        negative_suffix=pattern.suffix[1].replace("-", minus),
    )
