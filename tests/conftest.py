"""
Pytest fixtures for the currency kernel test suite.

Provides:
- Baseline number format rules (hand-built, no CLDR lookup)
- Sample currency definitions
- Registries and contexts built from them
- Structured log capture
"""

import json
import logging
from io import StringIO

import pytest

from currency_kernel.context import CurrencyContext
from currency_kernel.domain.currency import CurrencyDefinition
from currency_kernel.domain.number_format import NumberFormatRules
from currency_kernel.domain.registry import CurrencyRegistry
from currency_kernel.logging_config import (
    LogContext,
    configure_logging,
    reset_logging,
)


@pytest.fixture
def us_rules() -> NumberFormatRules:
    """US-style baseline: $1,234.56 / -$1,234.56."""
    return NumberFormatRules(
        currency_symbol="$",
        currency_decimal_separator=".",
        currency_group_separator=",",
        currency_group_sizes=(3,),
        currency_decimal_digits=2,
        positive_prefix="¤",
        positive_suffix="",
        negative_prefix="-¤",
        negative_suffix="",
    )


@pytest.fixture
def german_rules() -> NumberFormatRules:
    """German-style baseline: 1.234,56 ¤ with the symbol after the number."""
    return NumberFormatRules(
        currency_symbol="€",
        currency_decimal_separator=",",
        currency_group_separator=".",
        currency_group_sizes=(3,),
        currency_decimal_digits=2,
        positive_prefix="",
        positive_suffix=" ¤",
        negative_prefix="-",
        negative_suffix=" ¤",
    )


@pytest.fixture
def usd() -> CurrencyDefinition:
    return CurrencyDefinition("USD", 840, symbol="$", precision=2)


@pytest.fixture
def empty_registry() -> CurrencyRegistry:
    """Uninitialized registry with no built-in defaults."""
    return CurrencyRegistry(defaults=())


@pytest.fixture
def usd_registry(usd) -> CurrencyRegistry:
    registry = CurrencyRegistry(defaults=())
    registry.initialize([usd])
    return registry


@pytest.fixture
def usd_context(usd_registry, us_rules) -> CurrencyContext:
    return CurrencyContext(usd_registry, default_rules=us_rules)


@pytest.fixture
def log_stream():
    """Capture currency_kernel logs as parsed JSON records."""
    reset_logging()
    LogContext.clear()
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    configure_logging(level=logging.DEBUG, handler=handler)

    def _records() -> list[dict]:
        return [json.loads(line) for line in stream.getvalue().splitlines() if line]

    yield _records

    LogContext.clear()
    reset_logging()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow_locks: mark test as exercising thread synchronization"
    )
