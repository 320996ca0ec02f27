"""
Decomposition engine — turns a magnitude into an un-cased phrase.

English cardinals are built by band-based recursion over half-open ranges:

    0 – 19              table lookup (base case)
    20 – 99             "{Tens}" or "{Tens}-{Units}"
    100 – 999           "{count} Hundred"  [+ " and {remainder}"]
    1e3 – 1e6 - 1       "{count} Thousand" [+ " and {remainder}"]
    1e6 – 1e9 - 1       "{count} Million"  [+ " and {remainder}"]
    1e9 – 1e12 - 1      "{count} Billion"  [+ " and {remainder}"]

Every scale band shares one combinator, _beyond(). Each recursive call works
on n // divisor or n % divisor, both strictly smaller than n, so recursion
always bottoms out in the 0–19 table.

The other strategies are stubs over explicitly enumerated values. They fail
with NumberOutOfRange for anything else instead of extrapolating.
"""

from __future__ import annotations

from typing import Callable, Mapping

from .exceptions import NumberOutOfRange
from .tables import EN_ORDINALS, EN_SCALES, EN_TENS, EN_UNITS, SV_CARDINALS

# ─── Bands ──────────────────────────────────────────────────────────

EN_CARDINAL_MAX = 999_999_999_999

# Band divisors, largest first; a band runs from its divisor up to the next one.
# The scale word is EN_SCALES[divisor]. The top band ends at EN_CARDINAL_MAX.
_EN_SCALE_DIVISORS: tuple[int, ...] = (1_000_000_000, 1_000_000, 1_000, 100)


# ─── Helpers ────────────────────────────────────────────────────────


def _require_int(magnitude: object) -> None:
    # bool is an int subclass but True is not a magnitude
    if isinstance(magnitude, bool) or not isinstance(magnitude, int):
        raise TypeError(f"Magnitude must be an integer, got {type(magnitude).__name__}")


def _out_of_range(magnitude: int, locale: str, number_type: str, **extra) -> NumberOutOfRange:
    return NumberOutOfRange(
        f"Cannot spell {magnitude} as a {locale} {number_type}",
        details={"magnitude": magnitude, "locale": locale, "number_type": number_type, **extra},
    )


def _beyond(n: int, divisor: int, scale_word: str, recurse: Callable[[int], str]) -> str:
    """Spell n as "{count} {scale_word}" with an optional " and {remainder}"."""
    count, remainder = divmod(n, divisor)
    phrase = f"{recurse(count)} {scale_word}"
    if remainder:
        phrase += f" and {recurse(remainder)}"
    return phrase


def _lookup(table: Mapping[int, str], magnitude: int, locale: str, number_type: str) -> str:
    """Spell a magnitude from an enumerated table, failing closed on gaps."""
    _require_int(magnitude)
    try:
        return table[magnitude]
    except KeyError:
        raise _out_of_range(
            magnitude, locale, number_type, supported=sorted(table)
        ) from None


# ─── English Cardinal ───────────────────────────────────────────────


def _en_cardinal(n: int) -> str:
    if n < 20:
        return EN_UNITS[n]

    if n < 100:
        tens, units = divmod(n, 10)
        word = EN_TENS[tens]
        if units == 0:
            return word
        return f"{word}-{_en_cardinal(units)}"

    # n >= 100 here, so some divisor always matches
    divisor = next(d for d in _EN_SCALE_DIVISORS if n >= d)
    return _beyond(n, divisor, EN_SCALES[divisor], _en_cardinal)


def spellout_en_cardinal(magnitude: int) -> str:
    """Spell an English cardinal, 0 through 999,999,999,999.

    Examples:
        21   -> "Twenty-One"
        4321 -> "Four Thousand and Three Hundred and Twenty-One"

    Raises:
        NumberOutOfRange: magnitude is negative or at least one trillion.
        TypeError: magnitude is not an int.
    """
    _require_int(magnitude)
    if magnitude < 0 or magnitude > EN_CARDINAL_MAX:
        raise _out_of_range(magnitude, "en", "cardinal", max=EN_CARDINAL_MAX)
    return _en_cardinal(magnitude)


# ─── Stubs ──────────────────────────────────────────────────────────


def spellout_en_ordinal(magnitude: int) -> str:
    """English ordinal; only the enumerated values in EN_ORDINALS."""
    return _lookup(EN_ORDINALS, magnitude, "en", "ordinal")


def spellout_sv_cardinal(magnitude: int) -> str:
    """Swedish cardinal; only the enumerated values in SV_CARDINALS."""
    return _lookup(SV_CARDINALS, magnitude, "sv", "cardinal")
