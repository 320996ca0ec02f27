"""
Custom exception hierarchy for number spellout.

Each exception type maps to one unmet precondition of a spellout request,
checked in a fixed order: locale support, then number-type support, then
magnitude range. Callers catch SpelloutError to handle all three.
"""

from __future__ import annotations


class SpelloutError(Exception):
    """Base exception for all spellout failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class UnsupportedLocale(SpelloutError):
    """No strategy of any number type is registered for the locale."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_LOCALE", message, details)


class UnsupportedNumberType(SpelloutError):
    """The locale is known but has no strategy for the requested number type."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_NUMBER_TYPE", message, details)


class NumberOutOfRange(SpelloutError):
    """The magnitude falls outside what the resolved strategy can spell."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NUMBER_OUT_OF_RANGE", message, details)
