"""
CurrencyRegistry -- dual-keyed, build-once store of currency definitions.

Responsibility:
    Resolves an alpha code (case-insensitive) or a numeric code to its
    CurrencyDefinition and formats amounts through it.

Architecture position:
    Kernel > Domain. Fed by built-in defaults plus an external source
    (currency_config) exactly once; read-only afterwards.

Invariants enforced:
    - Two independent key spaces: alpha code and numeric code
    - UNINITIALIZED -> INITIALIZED happens once; a second explicit
      initialize() fails fast
    - Both maps are built off to the side and published together, so no
      reader ever sees a partially populated registry
    - Later definitions overwrite earlier ones under each key they touch.
      When a definition collides with different entries on its two keys
      the maps diverge (e.g. alpha USD -> 841 while 840 still maps to the
      older USD); this is kept as-is and logged as currency_keys_diverged

Failure modes:
    - UnknownCurrencyCodeError from format_currency for unregistered codes
    - RegistryAlreadyInitializedError on a second initialize()
    - Any error raised by the external source (e.g. ValidationError)
      propagates and leaves the registry uninitialized
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from decimal import Decimal
from itertools import chain

from currency_kernel.domain.currency import ALPHA_CODE_LENGTH, CurrencyDefinition
from currency_kernel.domain.defaults import BUILTIN_CURRENCIES
from currency_kernel.domain.number_format import NumberFormatRules
from currency_kernel.exceptions import (
    RegistryAlreadyInitializedError,
    UnknownCurrencyCodeError,
)
from currency_kernel.logging_config import get_logger

logger = get_logger("registry")

DefinitionSource = Callable[[], Iterable[CurrencyDefinition]]


class CurrencyRegistry:
    """
    In-memory registry keyed by ISO 4217 alpha and numeric codes.

    Initialization is lazy: the first read builds the registry from
    ``defaults`` followed by whatever ``source`` returns. Call
    ``initialize()`` to build it eagerly (for example at application
    startup) or to supply the external definitions directly.
    """

    def __init__(
        self,
        defaults: Iterable[CurrencyDefinition] = BUILTIN_CURRENCIES,
        source: DefinitionSource | None = None,
    ) -> None:
        self._defaults = tuple(defaults)
        self._source = source
        self._by_alpha: dict[str, CurrencyDefinition] = {}
        self._by_numeric: dict[int, CurrencyDefinition] = {}
        self._initialized = False
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(
        self, external_definitions: Iterable[CurrencyDefinition] | None = None
    ) -> None:
        """
        Populate the registry: built-in defaults, then external definitions.

        When ``external_definitions`` is None the configured ``source`` is
        consulted instead.

        Raises:
            RegistryAlreadyInitializedError: if the registry is already built.
        """
        with self._lock:
            if self._initialized:
                raise RegistryAlreadyInitializedError(len(self._by_alpha))
            self._populate(external_definitions)

    def _ensure_initialized(self) -> None:
        if self._initialized:
            return
        with self._lock:
            if not self._initialized:
                self._populate(None)

    def _populate(self, external: Iterable[CurrencyDefinition] | None) -> None:
        if external is None:
            external = self._source() if self._source is not None else ()
        external = tuple(external)

        by_alpha: dict[str, CurrencyDefinition] = {}
        by_numeric: dict[int, CurrencyDefinition] = {}
        for definition in chain(self._defaults, external):
            self._add(by_alpha, by_numeric, definition)

        self._by_alpha = by_alpha
        self._by_numeric = by_numeric
        self._initialized = True

        logger.info(
            "currency_registry_initialized",
            extra={
                "default_count": len(self._defaults),
                "external_count": len(external),
                "alpha_count": len(by_alpha),
                "numeric_count": len(by_numeric),
            },
        )

    @staticmethod
    def _add(
        by_alpha: dict[str, CurrencyDefinition],
        by_numeric: dict[int, CurrencyDefinition],
        definition: CurrencyDefinition,
    ) -> None:
        """Register ``definition`` under both of its keys in one step."""
        if not isinstance(definition, CurrencyDefinition):
            raise TypeError(
                f"Expected CurrencyDefinition, got {type(definition).__name__}"
            )

        replaced = (
            by_alpha.get(definition.alpha_code),
            by_numeric.get(definition.numeric_code),
        )
        by_alpha[definition.alpha_code] = definition
        by_numeric[definition.numeric_code] = definition

        for old in {id(d): d for d in replaced if d is not None}.values():
            still_reachable = (
                by_alpha.get(old.alpha_code) is old
                or by_numeric.get(old.numeric_code) is old
            )
            if still_reachable:
                logger.warning(
                    "currency_keys_diverged",
                    extra={
                        "replaced": str(old),
                        "replacement": str(definition),
                    },
                )
            else:
                logger.debug(
                    "currency_definition_replaced",
                    extra={"replaced": str(old), "replacement": str(definition)},
                )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def lookup(self, key: str | int) -> CurrencyDefinition | None:
        """
        Find the definition for an alpha code (str) or numeric code (int).

        Alpha codes match case-insensitively. Any other key type is
        simply not found.
        """
        self._ensure_initialized()
        if isinstance(key, str):
            if len(key) != ALPHA_CODE_LENGTH:
                return None
            return self._by_alpha.get(key.upper())
        if isinstance(key, int) and not isinstance(key, bool):
            return self._by_numeric.get(key)
        return None

    def format_currency(
        self, amount: Decimal, key: str | int, rules: NumberFormatRules
    ) -> str:
        """
        Format ``amount`` for the currency registered under ``key``.

        Raises:
            UnknownCurrencyCodeError: if no definition matches ``key``.
        """
        definition = self.lookup(key)
        if definition is None:
            logger.warning("unknown_currency_code", extra={"iso_code": key})
            raise UnknownCurrencyCodeError(key)
        return definition.format(amount, rules)

    def is_registered(self, key: str | int) -> bool:
        return self.lookup(key) is not None

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, int)):
            return False
        return self.is_registered(key)

    def __len__(self) -> int:
        self._ensure_initialized()
        return len(self._by_alpha)

    def alpha_codes(self) -> frozenset[str]:
        self._ensure_initialized()
        return frozenset(self._by_alpha)

    def numeric_codes(self) -> frozenset[int]:
        self._ensure_initialized()
        return frozenset(self._by_numeric)

    def definitions(self) -> tuple[CurrencyDefinition, ...]:
        """Every distinct definition reachable by either key."""
        self._ensure_initialized()
        reachable = chain(self._by_alpha.values(), self._by_numeric.values())
        return tuple({id(d): d for d in reachable}.values())
