"""
Configuration Loader (``currency_config.loader``).

Responsibility
--------------
Loads a YAML currency file and parses it into ``CurrencyDefinition``
instances, preserving document order.  Callers outside this package use
``currency_config.load_active_definitions()`` instead.

Expected document shape::

    currencies:
      - alpha_code: USD
        numeric_code: 840
        symbol: "$"
        precision: 2
        decimal_separator: "."

``alphaCode``, ``numericCode`` and ``decimalSeparator`` are accepted as
aliases for the snake_case keys.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing required keys  -> ``KeyError`` propagates.
* Wrong document structure  -> ``ValueError``.
* Out-of-range values  -> ``ValidationError`` from ``CurrencyDefinition``.

One bad entry fails the whole file; nothing is silently skipped.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from currency_kernel.domain.currency import DEFAULT_PRECISION, CurrencyDefinition

_ALIASES = {
    "alpha_code": "alphaCode",
    "numeric_code": "numericCode",
    "decimal_separator": "decimalSeparator",
}

_MISSING = object()


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _field(data: dict[str, Any], name: str, default: Any = _MISSING) -> Any:
    if name in data:
        return data[name]
    alias = _ALIASES.get(name)
    if alias is not None and alias in data:
        return data[alias]
    if default is _MISSING:
        raise KeyError(name)
    return default


def _as_int(value: Any) -> Any:
    # Quoted YAML numbers ("840") arrive as strings
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value)
    return value


def parse_currency_definition(data: dict[str, Any]) -> CurrencyDefinition:
    """
    Parse a ``CurrencyDefinition`` from a dict.

    Preconditions:
        - ``data`` must contain ``alpha_code`` and ``numeric_code``.
    Raises:
        KeyError: if required keys are missing.
        ValidationError: if any value violates ISO 4217 constraints.
    """
    precision = _field(data, "precision", None)
    return CurrencyDefinition(
        alpha_code=_field(data, "alpha_code"),
        numeric_code=_as_int(_field(data, "numeric_code")),
        symbol=_field(data, "symbol", None) or "",
        precision=DEFAULT_PRECISION if precision is None else _as_int(precision),
        decimal_separator=_field(data, "decimal_separator", None) or "",
    )


def parse_currency_definitions(data: dict[str, Any]) -> tuple[CurrencyDefinition, ...]:
    """Parse the ``currencies`` list of a document, in order."""
    entries = data.get("currencies", [])
    if entries is None:
        return ()
    if not isinstance(entries, list):
        raise ValueError(
            f"'currencies' must be a list, got {type(entries).__name__}"
        )
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"currencies[{index}] must be a mapping, got {entry!r}")
    return tuple(parse_currency_definition(entry) for entry in entries)


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Identical ``data`` always produces identical checksums.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
