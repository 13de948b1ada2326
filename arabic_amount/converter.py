"""
Amount-to-text conversion: the public entry point.

Flow:
  amount ─► range / zero checks ─► round to 2 or 3 decimals
         ─► integer words + main unit   (number_words + agreement)
         ─► fraction words + subunit    (same machinery, never scaled)
         ─► formal Arabic endings       (optional)
         ─► "فقط ... لا غير" wrapper    (optional)

The converter never raises for an amount that is merely too large; it
returns OUT_OF_RANGE_TEXT so that a document-rendering pipeline always gets
some text back. Input that is not an amount at all (negative, NaN, garbage
strings) does raise.

Usage:
    converter = ArabicAmountConverter().use_amount_limiter(True)
    converter.convert("100.75")
    # "فقط مئة دينار وخمسة وسبعون فلس لا غير"
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .agreement import select_sub_unit_form, select_unit_form
from .exceptions import AmountOutOfRangeError, InvalidAmountError, NegativeAmountError
from .formatting import apply_amount_limiter, apply_formal_arabic
from .models import ConverterConfig, SplitAmount
from .number_words import ZERO_WORD, render_number

logger = logging.getLogger(__name__)

AmountLike = int | float | Decimal | str

OUT_OF_RANGE_TEXT = "قيمة كبيرة جداً"

_ONE_WORD = "واحد"


# ─── Amount Parsing ─────────────────────────────────────────────────


def parse_amount(amount: AmountLike) -> Decimal:
    """Read a caller-supplied amount as a finite, non-negative Decimal.

    Floats go through ``str()`` so 100.75 stays 100.75 rather than its
    binary approximation.

    Raises:
        InvalidAmountError: For booleans, unparseable strings, NaN or infinity.
        NegativeAmountError: For amounts below zero.
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal, str)):
        raise InvalidAmountError(
            f"Unsupported amount type: {type(amount).__name__}",
            {"amount": repr(amount)},
        )

    try:
        value = Decimal(str(amount).strip())
    except InvalidOperation:
        raise InvalidAmountError(f"Not a number: {amount!r}", {"amount": repr(amount)}) from None

    if not value.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {amount!r}", {"amount": repr(amount)})
    if value < 0:
        raise NegativeAmountError(f"Amount must not be negative, got {value}", {"amount": str(value)})
    return value


def split_amount(amount: AmountLike, fraction_digits: int) -> SplitAmount:
    """Round half-up to ``fraction_digits`` places and split at the point.

    >>> split_amount("100.755", 2)
    SplitAmount(integer_part=100, fractional_part=76)
    """
    value = parse_amount(amount)
    quantum = Decimal(1).scaleb(-fraction_digits)
    try:
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise AmountOutOfRangeError(
            f"Amount {value} is too large to round to {fraction_digits} digits",
            {"amount": str(value)},
        ) from None

    integer_part = int(rounded)
    fractional_part = int((rounded - integer_part).scaleb(fraction_digits))
    return SplitAmount(integer_part=integer_part, fractional_part=fractional_part)


# ─── Conversion ─────────────────────────────────────────────────────


def convert_amount(amount: AmountLike, config: ConverterConfig) -> str:
    """Write ``amount`` out in Arabic words using ``config``.

    Returns:
        The phrase, or OUT_OF_RANGE_TEXT when the amount exceeds
        ``config.max_amount``.
    """
    value = parse_amount(amount)

    if value == 0:
        return _post_process(f"{ZERO_WORD} {config.main_unit.singular}", config)

    # Compared before rounding: 999999999999.995 is out of range, not 10^12
    if value > config.max_amount:
        logger.info("Amount %s exceeds %s, returning out-of-range text", value, config.max_amount)
        return OUT_OF_RANGE_TEXT

    split = split_amount(value, config.fraction_digits)
    main_word = select_unit_form(split.integer_part, config.main_unit)

    match split.integer_part:
        case 1:
            phrase = f"{main_word} {_ONE_WORD}"
        case 2:
            phrase = main_word  # dual form already means "two"
        case integer_part:
            phrase = f"{render_number(integer_part)} {main_word}"

    if split.fractional_part > 0:
        sub_word = select_sub_unit_form(split.fractional_part, config.sub_unit)
        phrase = f"{phrase} و{render_number(split.fractional_part)} {sub_word}"

    logger.debug("Converted %s → %s + %s", value, split.integer_part, split.fractional_part)
    return _post_process(phrase, config)


def _post_process(phrase: str, config: ConverterConfig) -> str:
    if config.use_formal_arabic:
        phrase = apply_formal_arabic(phrase)
    if config.use_amount_limiter:
        phrase = apply_amount_limiter(phrase)
    return phrase


# ─── Fluent Converter ───────────────────────────────────────────────


class ArabicAmountConverter:
    """Converts amounts using a fixed ConverterConfig.

    The fluent methods return a NEW converter; the original keeps its
    configuration, so converters can be shared between threads freely:

        base = ArabicAmountConverter()
        formal = base.use_formal_arabic(True)   # base is unchanged
    """

    def __init__(self, config: ConverterConfig | None = None):
        self._config = config or ConverterConfig()

    @property
    def config(self) -> ConverterConfig:
        return self._config

    def __repr__(self) -> str:
        return f"ArabicAmountConverter({self._config!r})"

    # ─── Conversion ─────────────────────────────────────────────────

    def convert(self, amount: AmountLike) -> str:
        """Convert using the stored currency forms and switches."""
        return convert_amount(amount, self._config)

    def convert_with_forms(
        self,
        amount: AmountLike,
        main_singular: str,
        main_dual: str,
        main_plural: str,
        sub_singular: str,
        sub_dual: str,
        sub_plural: str,
    ) -> str:
        """Convert with currency forms for this call only.

        Decimal precision and the formatting switches still come from the
        stored configuration.
        """
        config = self._config.with_currency_forms(
            main_singular, main_dual, main_plural, sub_singular, sub_dual, sub_plural
        )
        return convert_amount(amount, config)

    # ─── Configuration ──────────────────────────────────────────────

    def set_currency_forms(
        self,
        singular: str,
        dual: str,
        plural: str,
        sub_singular: str,
        sub_dual: str,
        sub_plural: str,
    ) -> ArabicAmountConverter:
        return ArabicAmountConverter(
            self._config.with_currency_forms(singular, dual, plural, sub_singular, sub_dual, sub_plural)
        )

    def set_default_currency(
        self, main_unit: str, sub_unit: str, use_three_decimal: bool = False
    ) -> ArabicAmountConverter:
        """Singular-only currency; dual and plural fall back to the singular."""
        return ArabicAmountConverter(
            self._config.with_default_currency(main_unit, sub_unit, use_three_decimal)
        )

    def use_formal_arabic(self, enable: bool = True) -> ArabicAmountConverter:
        return ArabicAmountConverter(self._config.with_formal_arabic(enable))

    def use_amount_limiter(self, enable: bool = True) -> ArabicAmountConverter:
        return ArabicAmountConverter(self._config.with_amount_limiter(enable))
