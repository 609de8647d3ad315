"""
currency_config -- single public entrypoint for external currency definitions.

Responsibility:
    The ONLY place that reads configuration files or environment variables.
    Produces the ordered tuple of ``CurrencyDefinition``s that the kernel
    registry layers on top of its built-in defaults.

Architecture position:
    Sits above ``currency_kernel``. The kernel never imports from this
    package; it only receives definitions (or a callable producing them).

Path resolution:
    1. ``config_path`` argument
    2. ``CURRENCY_REGISTRY_CONFIG`` environment variable
    3. none -> no external definitions

Failure modes:
    - ``FileNotFoundError`` -- a configured path does not exist.
    - ``yaml.YAMLError`` / ``KeyError`` / ``ValueError`` -- malformed file.
    - ``ValidationError`` -- an entry violates ISO 4217 constraints.

Every successful load emits a ``CURRENCY_CONFIG_TRACE`` log entry with the
path, checksum and definition count.
"""

from __future__ import annotations

import os
from functools import partial
from pathlib import Path

from currency_config.loader import (
    compute_checksum,
    load_yaml_file,
    parse_currency_definitions,
)
from currency_kernel.context import DEFAULT_LOCALE, CurrencyContext
from currency_kernel.domain.currency import CurrencyDefinition
from currency_kernel.domain.registry import CurrencyRegistry
from currency_kernel.logging_config import LogContext, get_logger

_logger = get_logger("config")

CONFIG_PATH_ENV = "CURRENCY_REGISTRY_CONFIG"


def resolve_config_path(config_path: Path | str | None = None) -> Path | None:
    """Return the configuration file to read, or None when none is configured."""
    if config_path is not None:
        return Path(config_path)
    env_value = os.environ.get(CONFIG_PATH_ENV)
    return Path(env_value) if env_value else None


def load_active_definitions(
    config_path: Path | str | None = None,
) -> tuple[CurrencyDefinition, ...]:
    """Load the external currency definitions, in file order."""
    path = resolve_config_path(config_path)
    if path is None:
        _logger.debug("no currency configuration file configured")
        return ()

    with LogContext.bind(config_source=str(path)):
        data = load_yaml_file(path)
        definitions = parse_currency_definitions(data)

        _logger.info(
            "CURRENCY_CONFIG_TRACE",
            extra={
                "trace_type": "CURRENCY_CONFIG_TRACE",
                "config_path": str(path),
                "checksum": compute_checksum(data),
                "definition_count": len(definitions),
            },
        )

    return definitions


def build_currency_context(
    config_path: Path | str | None = None,
    locale: str = DEFAULT_LOCALE,
) -> CurrencyContext:
    """
    Context whose registry reads the configuration on first use.

    The file is not touched until the first lookup or format call.
    """
    registry = CurrencyRegistry(source=partial(load_active_definitions, config_path))
    return CurrencyContext(registry, locale=locale)


__all__ = [
    "CONFIG_PATH_ENV",
    "build_currency_context",
    "load_active_definitions",
    "resolve_config_path",
]
