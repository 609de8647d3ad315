"""End-to-end formatting through CurrencyContext."""

from decimal import Decimal
from fractions import Fraction

import pytest

from currency_kernel import CurrencyContext, CurrencyDefinition, CurrencyRegistry
from currency_kernel.exceptions import InvalidAmountError, UnknownCurrencyCodeError


class TestCurrencyContext:
    def test_format_decimal(self, usd_context):
        assert usd_context.format_currency(Decimal("1000.5"), "USD") == "$1,000.50"

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (1000.5, "$1,000.50"),
            (1000, "$1,000.00"),
            (-10000.57, "-$10,000.57"),
            (Fraction(1, 8), "$0.13"),
        ],
    )
    def test_numeric_types_adapted(self, usd_context, amount, expected):
        assert usd_context.format_currency(amount, 840) == expected

    def test_explicit_rules_override_default(self, usd_context, german_rules):
        assert usd_context.format_currency(1234.5, "usd", german_rules) == "1.234,50 $"

    def test_unknown_code(self, usd_context):
        with pytest.raises(UnknownCurrencyCodeError, match="007"):
            usd_context.format_currency(1, 7)

    def test_boolean_code_not_rendered_as_number(self, usd_context):
        with pytest.raises(UnknownCurrencyCodeError, match="'True'") as exc_info:
            usd_context.format_currency(1, True)
        assert exc_info.value.iso_code is True

    def test_invalid_amount(self, usd_context):
        with pytest.raises(InvalidAmountError):
            usd_context.format_currency("1000", "USD")

    def test_lookup_passthrough(self, usd_context, usd):
        assert usd_context.lookup("usd") is usd

    def test_from_definitions_layers_on_defaults(self, us_rules):
        context = CurrencyContext.from_definitions(
            [CurrencyDefinition("EUR", 978, symbol="EUR ", decimal_separator=",")],
            default_rules=us_rules,
        )
        assert context.format_currency(1234.5, "EUR") == "EUR 1,234,50"
        assert context.format_currency(1234.5, "USD") == "$1,234.50"
        assert context.format_currency(1234.5, 392) == "¥1,235"

    def test_default_rules_from_locale(self):
        context = CurrencyContext.from_definitions([], locale="en_US")
        assert context.default_rules.currency_symbol == "$"
        assert context.format_currency(Decimal("1000.5"), "USD") == "$1,000.50"
        assert context.format_currency(Decimal("1000.5"), "GBP") == "£1,000.50"


class TestFormatWithoutCode:
    """Without a code the locale's own currency rules apply."""

    def test_uses_default_rules(self, usd_context):
        assert usd_context.format_currency(Decimal("1000.5")) == "$1,000.50"
        assert usd_context.format_currency(-10000.57) == "-$10,000.57"

    def test_explicit_rules(self, usd_context, german_rules):
        assert usd_context.format_currency(1234.5, rules=german_rules) == "1.234,50 €"

    def test_locale_baseline(self):
        context = CurrencyContext.from_definitions([], locale="ja_JP")
        symbol = context.default_rules.currency_symbol
        assert context.default_rules.currency_decimal_digits == 0
        assert context.format_currency(Decimal("1234.5")) == f"{symbol}1,235"

    def test_registry_not_consulted(self, us_rules):
        context = CurrencyContext(CurrencyRegistry(defaults=()), default_rules=us_rules)
        assert context.format_currency(5) == "$5.00"
        assert not context.registry.is_initialized

    def test_invalid_amount_still_rejected(self, usd_context):
        with pytest.raises(InvalidAmountError):
            usd_context.format_currency(float("nan"))
