"""
Spellout — FastAPI Server
=========================

Thin HTTP wrapper around the pure spellout library.

Endpoints:
    POST /spellout          Spell out a magnitude
    GET  /locales           Supported locales and their number types
    GET  /health            Health check / readiness probe

Configuration (environment or .env):
    SPELLOUT_DEFAULT_LOCALE   Locale used when a request omits one (default "en")
    SPELLOUT_LOG_LEVEL        Logging level (default "INFO")

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from spellout import __version__
from spellout.dispatch import supported_locales, supported_number_types
from spellout.exceptions import SpelloutError
from spellout.models import Case, NumberModifier, NumberType, SpelloutResult
from spellout.pipeline import parse_locale, spellout_number

load_dotenv()

logging.basicConfig(level=os.environ.get("SPELLOUT_LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

DEFAULT_LOCALE = os.environ.get("SPELLOUT_DEFAULT_LOCALE", "en")


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Spellout API",
    description=(
        "Locale-aware number-to-words spellout. "
        "Cardinal and ordinal numbers, lower/upper/title case, "
        "typed errors for unsupported locales, number types, and ranges."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class SpelloutRequest(BaseModel):
    """Request body for the /spellout endpoint."""

    magnitude: int = Field(..., ge=0, description="Non-negative integer to spell out.")
    locale: Optional[str] = Field(
        default=None,
        description="Locale tag; only the primary language subtag is used.",
        json_schema_extra={"example": "en"},
    )
    number_type: NumberType = NumberType.CARDINAL
    case: Case = Case.TITLE
    format: str = Field(default="", description="Reserved numbering style; not interpreted yet.")

    model_config = {"json_schema_extra": {"example": {
        "magnitude": 4321,
        "locale": "en",
        "number_type": "cardinal",
        "case": "title",
        "format": "",
    }}}


class LocaleOut(BaseModel):
    locale: str
    number_types: list[NumberType]


class HealthResponse(BaseModel):
    status: str
    version: str
    locales_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _error_detail(exc: SpelloutError) -> dict:
    return {"code": exc.code, "message": str(exc), "details": exc.details}


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/spellout",
    summary="Spell out a number",
    tags=["Spellout"],
    responses={422: {"description": "Unsupported locale, number type, or magnitude"}},
)
def spellout_endpoint(request: SpelloutRequest) -> SpelloutResult:
    """Spell out a magnitude in the requested locale.

    Failures carry a machine-readable `code`:
    - **UNSUPPORTED_LOCALE**: nothing is registered for the locale
    - **UNSUPPORTED_NUMBER_TYPE**: the locale lacks the number type
    - **NUMBER_OUT_OF_RANGE**: the magnitude is outside the supported range
    """
    tag = DEFAULT_LOCALE if request.locale is None else request.locale
    modifier = NumberModifier(
        number_type=request.number_type, case=request.case, format=request.format
    )
    try:
        return spellout_number(parse_locale(tag), modifier).result(request.magnitude)
    except SpelloutError as exc:
        logger.info("Spellout rejected: %s (%s)", exc.code, exc)
        raise HTTPException(status_code=422, detail=_error_detail(exc))


@app.get("/locales", summary="List supported locales", tags=["Spellout"])
def list_locales() -> list[LocaleOut]:
    """Every supported locale with the number types it can spell."""
    return [
        LocaleOut(locale=language, number_types=list(supported_number_types(language)))
        for language in supported_locales()
    ]


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        locales_loaded=len(supported_locales()),
    )
