"""
CurrencyContext -- the application-wide handle for currency formatting.

Build one context at startup and pass it to whatever formats money. It
owns a single CurrencyRegistry (initialized lazily, at most once) and the
default locale rules used when a caller does not supply its own.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from currency_kernel.domain.amounts import to_decimal
from currency_kernel.domain.currency import CurrencyDefinition
from currency_kernel.domain.number_format import NumberFormatRules
from currency_kernel.domain.registry import CurrencyRegistry
from currency_kernel.logging_config import LogContext

DEFAULT_LOCALE = "en_US"


class CurrencyContext:
    """Registry plus default locale rules, constructed once and shared."""

    def __init__(
        self,
        registry: CurrencyRegistry,
        default_rules: NumberFormatRules | None = None,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.registry = registry
        self.locale = locale
        self.default_rules = (
            default_rules if default_rules is not None else NumberFormatRules.for_locale(locale)
        )

    @classmethod
    def from_definitions(
        cls,
        definitions: Iterable[CurrencyDefinition],
        locale: str = DEFAULT_LOCALE,
        default_rules: NumberFormatRules | None = None,
    ) -> CurrencyContext:
        """Context whose registry is built from defaults plus ``definitions``."""
        registry = CurrencyRegistry()
        registry.initialize(definitions)
        return cls(registry, default_rules=default_rules, locale=locale)

    def lookup(self, code: str | int) -> CurrencyDefinition | None:
        return self.registry.lookup(code)

    def format_currency(
        self,
        amount: Any,
        code: str | int | None = None,
        rules: NumberFormatRules | None = None,
    ) -> str:
        """
        Format ``amount`` (Decimal, int, float or Fraction) for ``code``.

        Without a ``code`` the amount is rendered with the baseline rules
        alone, i.e. in the locale's own currency.

        Raises:
            InvalidAmountError: if ``amount`` cannot become a finite Decimal.
            UnknownCurrencyCodeError: if ``code`` is not registered.
        """
        value = to_decimal(amount)
        baseline = rules if rules is not None else self.default_rules
        if code is None:
            return baseline.render(value).strip()
        with LogContext.bind(locale=self.locale, currency_code=str(code)):
            return self.registry.format_currency(value, code, baseline)
