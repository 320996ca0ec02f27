"""Case folding, applied once to a fully assembled phrase."""

from __future__ import annotations

from .models import Case


def apply_case(phrase: str, case: Case) -> str:
    """Fold a phrase to the requested case.

    Case.TITLE returns the phrase unchanged: word tables are stored
    pre-capitalized, so an assembled phrase is already in title case.
    """
    case = Case(case)
    if case is Case.LOWER:
        return phrase.lower()
    if case is Case.UPPER:
        return phrase.upper()
    return phrase
