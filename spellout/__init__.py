"""
Spellout — locale-aware number-to-words engine.

Architecture: Dispatch (locale, number type) → Recursive decomposition → Case folding
Philosophy:  Spell exactly what the tables cover. Fail closed on everything else.
"""

from .exceptions import NumberOutOfRange, SpelloutError, UnsupportedLocale, UnsupportedNumberType
from .models import Case, Locale, NumberModifier, NumberType, SpelloutResult
from .pipeline import SpelloutFunction, parse_locale, spellout, spellout_number

__version__ = "1.0.0"

__all__ = [
    "Case",
    "Locale",
    "NumberModifier",
    "NumberOutOfRange",
    "NumberType",
    "SpelloutError",
    "SpelloutFunction",
    "SpelloutResult",
    "UnsupportedLocale",
    "UnsupportedNumberType",
    "parse_locale",
    "spellout",
    "spellout_number",
]
