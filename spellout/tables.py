"""
Static word tables for every supported locale.

All entries are stored in title case. Case folding happens once, on the
finished phrase, so Case.TITLE can pass phrases through untouched.

Tables are tuples and read-only mappings: they are built at import time and
never change afterwards, which is what lets spellout functions run
concurrently without locking.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# ─── English ────────────────────────────────────────────────────────

# Indexed by value, 0–19
EN_UNITS: tuple[str, ...] = (
    "Zero",
    "One",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Ten",
    "Eleven",
    "Twelve",
    "Thirteen",
    "Fourteen",
    "Fifteen",
    "Sixteen",
    "Seventeen",
    "Eighteen",
    "Nineteen",
)

# Indexed by n // 10; slots 0 and 1 are covered by EN_UNITS
EN_TENS: tuple[str | None, ...] = (
    None,
    None,
    "Twenty",
    "Thirty",
    "Forty",
    "Fifty",
    "Sixty",
    "Seventy",
    "Eighty",
    "Ninety",
)

EN_SCALES: Mapping[int, str] = MappingProxyType({
    100: "Hundred",
    1_000: "Thousand",
    1_000_000: "Million",
    1_000_000_000: "Billion",
})

EN_ORDINALS: Mapping[int, str] = MappingProxyType({
    2: "Second",
})


# ─── Swedish ────────────────────────────────────────────────────────

SV_CARDINALS: Mapping[int, str] = MappingProxyType({
    2: "Två",
    3: "Tre",
})
