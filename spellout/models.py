"""
Pydantic models for spellout requests — immutable values at the boundary.

A Locale and a NumberModifier are built once per request and frozen; nothing
downstream can mutate them, so a SpelloutFunction bound to them stays pure.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field, field_validator

_LANGUAGE_RE = re.compile(r"^[a-z]{2,3}$")


# ─── Modifier Variants ──────────────────────────────────────────────


class NumberType(str, Enum):
    """Counting number vs. ranking number."""

    CARDINAL = "cardinal"  # "three"
    ORDINAL = "ordinal"  # "third"


class Case(str, Enum):
    """Letter case applied to the assembled phrase."""

    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"


# ─── Locale ─────────────────────────────────────────────────────────


class Locale(BaseModel):
    """A primary language subtag such as "en" or "sv".

    Region and script are not modelled; the engine never looks at them.
    """

    model_config = {"frozen": True}

    language: str

    @field_validator("language")
    @classmethod
    def _check_language(cls, value: str) -> str:
        if not _LANGUAGE_RE.match(value):
            raise ValueError(
                f"Expected a lowercase primary language subtag, got {value!r}"
            )
        return value

    @classmethod
    def parse(cls, tag: str) -> Locale:
        """Build a Locale from a tag, keeping only its primary subtag.

        "en-US" and "sv_SE" become "en" and "sv".
        """
        primary = tag.strip().replace("_", "-").split("-", 1)[0]
        return cls(language=primary.lower())

    def __str__(self) -> str:
        return self.language


# ─── Modifier ───────────────────────────────────────────────────────


class NumberModifier(BaseModel):
    """How a magnitude should be spelled: number type, case, and format.

    `format` is reserved for locale-specific numbering conventions. No
    registered strategy interprets it yet; it is carried through unchanged.
    """

    model_config = {"frozen": True}

    number_type: NumberType
    case: Case = Case.TITLE
    format: str = ""


# ─── Result ─────────────────────────────────────────────────────────


class SpelloutResult(BaseModel):
    """A spelled-out magnitude together with the request that produced it."""

    magnitude: int = Field(ge=0)
    locale: str
    number_type: NumberType
    case: Case
    format: str = ""
    phrase: str
