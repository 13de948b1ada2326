"""
Arabic Amount API Server
========================

HTTP front end for writing monetary amounts out in Arabic words.

Endpoints:
    POST /convert           Convert one amount
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Environment (optionally via .env):
    ARABIC_AMOUNT_THREE_DECIMALS   fils-style 1/1000 subunits by default
    ARABIC_AMOUNT_FORMAL           classical case endings by default
    ARABIC_AMOUNT_LIMITER          wrap results in "فقط ... لا غير" by default
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from arabic_amount import __version__
from arabic_amount.converter import OUT_OF_RANGE_TEXT, ArabicAmountConverter
from arabic_amount.exceptions import AmountConversionError
from arabic_amount.models import ConverterConfig, CurrencyUnit

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def load_default_config() -> ConverterConfig:
    """Server-wide defaults, read from the environment."""
    return ConverterConfig(
        use_three_decimal_digits=_env_flag("ARABIC_AMOUNT_THREE_DECIMALS"),
        use_formal_arabic=_env_flag("ARABIC_AMOUNT_FORMAL"),
        use_amount_limiter=_env_flag("ARABIC_AMOUNT_LIMITER"),
    )


# ─── Application Lifespan (pre-build default converter) ─────────────

_converter: ArabicAmountConverter | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the default converter from the environment on startup."""
    global _converter  # noqa: PLW0603
    _converter = ArabicAmountConverter(load_default_config())
    yield
    _converter = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Arabic Amount API",
    description=(
        "Writes monetary amounts out in Arabic words with singular/dual/plural "
        "agreement, optional classical case endings and an optional "
        "\"فقط ... لا غير\" wrapper."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint.

    Any field left out falls back to the server's default configuration.
    """

    amount: Decimal = Field(..., ge=0, description="Non-negative amount, e.g. 100.75")
    main_unit: Optional[CurrencyUnit] = None
    sub_unit: Optional[CurrencyUnit] = None
    use_three_decimal_digits: Optional[bool] = None
    use_formal_arabic: Optional[bool] = None
    use_amount_limiter: Optional[bool] = None

    model_config = {"json_schema_extra": {"example": {
        "amount": "1234.75",
        "main_unit": {"singular": "ريال", "dual": "ريالان", "plural": "ريالات"},
        "sub_unit": {"singular": "هللة", "dual": "هللتان", "plural": "هللات"},
        "use_amount_limiter": True,
    }}}

    def overrides(self) -> dict:
        """Config fields explicitly set by the caller."""
        fields = (
            "main_unit",
            "sub_unit",
            "use_three_decimal_digits",
            "use_formal_arabic",
            "use_amount_limiter",
        )
        return {name: getattr(self, name) for name in fields if getattr(self, name) is not None}


class ConvertResponse(BaseModel):
    """Converted text for one amount."""

    amount: Decimal
    text: str
    out_of_range: bool = Field(description="True when text is the 'value too large' notice")


class HealthResponse(BaseModel):
    status: str
    version: str
    default_main_unit: str
    default_sub_unit: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converter() -> ArabicAmountConverter:
    if _converter is None:
        raise HTTPException(status_code=503, detail="Converter not initialised")
    return _converter


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Write an amount out in Arabic words",
    tags=["Conversion"],
    responses={
        422: {"description": "Amount is negative or not a number"},
        503: {"description": "Converter not yet initialised"},
    },
)
def convert(request: ConvertRequest) -> ConvertResponse:
    """Convert a single amount.

    An amount above 999,999,999,999.99 (or .999 with three decimals) is not
    an error: the response carries the "قيمة كبيرة جداً" notice with
    **out_of_range** set.
    """
    default = _get_converter()
    config = default.config.model_copy(update=request.overrides())

    try:
        text = ArabicAmountConverter(config).convert(request.amount)
    except AmountConversionError as e:
        raise HTTPException(status_code=422, detail={"code": e.code, "message": str(e)})

    return ConvertResponse(
        amount=request.amount,
        text=text,
        out_of_range=text == OUT_OF_RANGE_TEXT,
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and default currency."""
    config = _get_converter().config
    return HealthResponse(
        status="healthy",
        version=__version__,
        default_main_unit=config.main_unit.singular,
        default_sub_unit=config.sub_unit.singular,
    )
