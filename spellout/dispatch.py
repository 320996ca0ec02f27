"""
Locale/number-type dispatch for spellout strategies.

Each (language, number type) pair maps to one strategy, a pure function from
magnitude to un-cased phrase. Supporting a new locale means adding entries to
STRATEGIES, not adding branches anywhere else.

The table is read-only once the module is imported, so lookups from any
number of threads need no locking.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping

from .engine import spellout_en_cardinal, spellout_en_ordinal, spellout_sv_cardinal
from .exceptions import UnsupportedLocale, UnsupportedNumberType
from .models import Locale, NumberType

logger = logging.getLogger(__name__)

Strategy = Callable[[int], str]

# ─── Strategy Table ─────────────────────────────────────────────────

STRATEGIES: Mapping[tuple[str, NumberType], Strategy] = MappingProxyType({
    ("en", NumberType.CARDINAL): spellout_en_cardinal,
    ("en", NumberType.ORDINAL): spellout_en_ordinal,
    ("sv", NumberType.CARDINAL): spellout_sv_cardinal,
})

_LOCALES: tuple[str, ...] = tuple(sorted({language for language, _ in STRATEGIES}))


# ─── Lookup ─────────────────────────────────────────────────────────


def resolve(locale: Locale, number_type: NumberType) -> Strategy:
    """Find the strategy for a locale and number type.

    Raises:
        UnsupportedLocale: Nothing is registered for the language.
        UnsupportedNumberType: The language is known but not for this type.
    """
    language = locale.language
    number_type = NumberType(number_type)

    strategy = STRATEGIES.get((language, number_type))
    if strategy is not None:
        logger.debug("Resolved %s/%s -> %s", language, number_type.value, strategy.__name__)
        return strategy

    if language not in _LOCALES:
        raise unsupported_locale(language)
    raise UnsupportedNumberType(
        f"Locale {language!r} does not support {number_type.value} numbers",
        details={
            "locale": language,
            "number_type": number_type.value,
            "supported": [t.value for t in supported_number_types(language)],
        },
    )


def unsupported_locale(tag: str) -> UnsupportedLocale:
    """Build the error for a tag that names no supported locale."""
    return UnsupportedLocale(
        f"Locale {tag!r} is not supported",
        details={"locale": tag, "supported": list(_LOCALES)},
    )


def supported_locales() -> tuple[str, ...]:
    """Languages with at least one registered strategy, sorted."""
    return _LOCALES


def supported_number_types(language: str) -> tuple[NumberType, ...]:
    """Number types registered for a language, in declaration order."""
    types = tuple(t for t in NumberType if (language, t) in STRATEGIES)
    if not types:
        raise unsupported_locale(language)
    return types
