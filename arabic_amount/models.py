"""
Pydantic models for conversion input: immutable values only.

A converter never mutates its configuration. Every "setter" builds a new
ConverterConfig, so one instance can be shared across threads and requests
without locking.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, model_validator

# Largest amounts that still fit in four thousand-groups (up to billions)
MAX_AMOUNT_TWO_DIGITS = Decimal("999999999999.99")
MAX_AMOUNT_THREE_DIGITS = Decimal("999999999999.999")


# ─── Currency Unit ───────────────────────────────────────────────────


class CurrencyUnit(BaseModel):
    """A currency noun in its three grammatical number forms.

    Omitted dual/plural forms fall back to the singular, so a caller that
    only knows "ريال" still gets a defined (if ungrammatical) result.
    """

    model_config = {"frozen": True}

    singular: str
    dual: str = ""
    plural: str = ""

    @model_validator(mode="before")
    @classmethod
    def _fall_back_to_singular(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            for form in ("dual", "plural"):
                if data.get(form) is None:
                    data[form] = data.get("singular")
        return data


DINAR = CurrencyUnit(singular="دينار", dual="ديناران", plural="دنانير")
FILS = CurrencyUnit(singular="فلس", dual="فلسان", plural="فلوس")


# ─── Converter Configuration ────────────────────────────────────────


class ConverterConfig(BaseModel):
    """Currency forms and formatting switches for one conversion."""

    model_config = {"frozen": True}

    main_unit: CurrencyUnit = Field(default=DINAR)
    sub_unit: CurrencyUnit = Field(default=FILS)
    use_three_decimal_digits: bool = False  # fils-style 1/1000 instead of 1/100
    use_formal_arabic: bool = False
    use_amount_limiter: bool = False

    @property
    def fraction_digits(self) -> int:
        return 3 if self.use_three_decimal_digits else 2

    @property
    def max_amount(self) -> Decimal:
        return MAX_AMOUNT_THREE_DIGITS if self.use_three_decimal_digits else MAX_AMOUNT_TWO_DIGITS

    def with_currency_forms(
        self,
        singular: str,
        dual: str,
        plural: str,
        sub_singular: str,
        sub_dual: str,
        sub_plural: str,
    ) -> ConverterConfig:
        """Return a copy using all six currency forms."""
        return self.model_copy(update={
            "main_unit": CurrencyUnit(singular=singular, dual=dual, plural=plural),
            "sub_unit": CurrencyUnit(singular=sub_singular, dual=sub_dual, plural=sub_plural),
        })

    def with_default_currency(
        self, main_unit: str, sub_unit: str, use_three_decimal: bool = False
    ) -> ConverterConfig:
        """Return a copy using singular-only units (dual/plural fall back)."""
        return self.model_copy(update={
            "main_unit": CurrencyUnit(singular=main_unit),
            "sub_unit": CurrencyUnit(singular=sub_unit),
            "use_three_decimal_digits": use_three_decimal,
        })

    def with_formal_arabic(self, enable: bool) -> ConverterConfig:
        return self.model_copy(update={"use_formal_arabic": enable})

    def with_amount_limiter(self, enable: bool) -> ConverterConfig:
        return self.model_copy(update={"use_amount_limiter": enable})


# ─── Transient Values ───────────────────────────────────────────────


class NumberGroup(BaseModel):
    """One base-1000 slice of an integer and the scale it sits at."""

    model_config = {"frozen": True}

    value: int = Field(ge=0, le=999)
    scale_index: int = Field(ge=0, le=3)  # 0=units, 1=thousand, 2=million, 3=billion


class SplitAmount(BaseModel):
    """An amount rounded to the configured precision and split in two."""

    model_config = {"frozen": True}

    integer_part: int = Field(ge=0)
    fractional_part: int = Field(ge=0, le=999)
