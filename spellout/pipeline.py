"""
Spellout orchestration — resolve, decompose, fold.

Flow:
  ┌──────────────────────┐
  │ Locale + Modifier    │
  └──────────┬───────────┘
             │
      ┌──────▼──────┐
      │  Dispatch   │   ← UnsupportedLocale / UnsupportedNumberType
      └──────┬──────┘
             │
      ┌──────▼──────┐
      │  Strategy   │   ← NumberOutOfRange
      └──────┬──────┘
             │
      ┌──────▼──────┐
      │ Case fold   │   ← once, on the finished phrase
      └──────┬──────┘
             │
      ┌──────▼──────┐
      │   Phrase    │
      └─────────────┘

The strategy is resolved when the SpelloutFunction is built, so locale and
number-type errors surface before any magnitude is supplied. A built
SpelloutFunction holds only frozen values and can be called any number of
times, from any thread.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from .dispatch import Strategy, resolve, unsupported_locale
from .models import Case, Locale, NumberModifier, NumberType, SpelloutResult
from .modifiers import apply_case

logger = logging.getLogger(__name__)


class SpelloutFunction:
    """A magnitude -> phrase mapping bound to one locale and modifier.

    Usage:
        fn = spellout_number(Locale(language="en"), NumberModifier(number_type="cardinal"))
        fn(21)          # "Twenty-One"
        fn.result(21)   # SpelloutResult(..., phrase="Twenty-One")
    """

    __slots__ = ("locale", "modifier", "_strategy")

    def __init__(self, locale: Locale, modifier: NumberModifier, strategy: Strategy):
        self.locale = locale
        self.modifier = modifier
        self._strategy = strategy

    def __call__(self, magnitude: int) -> str:
        """Spell a magnitude.

        Raises:
            NumberOutOfRange: The strategy cannot spell this magnitude.
        """
        phrase = self._strategy(magnitude)
        return apply_case(phrase, self.modifier.case)

    def result(self, magnitude: int) -> SpelloutResult:
        """Spell a magnitude and return it with the request parameters."""
        return SpelloutResult(
            magnitude=magnitude,
            locale=self.locale.language,
            number_type=self.modifier.number_type,
            case=self.modifier.case,
            format=self.modifier.format,
            phrase=self(magnitude),
        )

    def __repr__(self) -> str:
        m = self.modifier
        return (
            f"SpelloutFunction(locale={self.locale.language!r}, "
            f"number_type={m.number_type.value!r}, case={m.case.value!r}, format={m.format!r})"
        )


def parse_locale(tag: str) -> Locale:
    """Build a Locale from a tag such as "en" or "sv-SE".

    Raises:
        UnsupportedLocale: The tag is malformed, so it names no supported locale.
    """
    try:
        return Locale.parse(tag)
    except ValidationError:
        raise unsupported_locale(tag) from None


def spellout_number(locale: Locale, modifier: NumberModifier) -> SpelloutFunction:
    """Build a reusable spellout function for a locale and modifier.

    Raises:
        UnsupportedLocale: Nothing is registered for the locale.
        UnsupportedNumberType: The locale does not support the number type.
    """
    strategy = resolve(locale, modifier.number_type)
    logger.debug("Built spellout function for %s/%s", locale.language, modifier.number_type.value)
    return SpelloutFunction(locale, modifier, strategy)


def spellout(
    magnitude: int,
    locale: Locale | str,
    number_type: NumberType = NumberType.CARDINAL,
    case: Case = Case.TITLE,
    format: str = "",
) -> str:
    """One-shot spellout of a single magnitude.

    Args:
        magnitude: Non-negative integer to spell.
        locale: A Locale, or a tag such as "en" or "en-US".
        number_type: Cardinal or ordinal.
        case: Letter case of the result.
        format: Reserved; carried through but not interpreted.

    Returns:
        The phrase, e.g. "Four Thousand and Three Hundred and Twenty-One".

    Raises:
        UnsupportedLocale: Nothing is registered for the locale.
        UnsupportedNumberType: The locale does not support the number type.
        NumberOutOfRange: The magnitude is outside the supported range.
    """
    if isinstance(locale, str):
        locale = parse_locale(locale)
    modifier = NumberModifier(number_type=number_type, case=case, format=format)
    return spellout_number(locale, modifier)(magnitude)
