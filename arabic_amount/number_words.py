"""
Render non-negative integers as Arabic words.

Two steps:
  1. decompose() splits the integer into base-1000 groups, most significant
     first, dropping empty groups ("zero thousand" is never spoken).
  2. render_group() spells out each 0..999 group; agreement.attach_scale_word()
     adds ألف / مليون / مليار with the right number form.

Groups are joined with " و" ("and"):

    1_234_567 → "مليون ومئتان وأربعة وثلاثون ألف وخمسمائة وسبعة وستون"
"""

from __future__ import annotations

from .agreement import SCALE_WORDS, attach_scale_word
from .exceptions import AmountOutOfRangeError, NegativeAmountError
from .models import NumberGroup

ZERO_WORD = "صفر"

# ─── Word Lookup Tables (indexed by digit) ───────────────────────────

_UNITS: tuple[str, ...] = (
    "", "واحد", "اثنان", "ثلاثة", "أربعة",
    "خمسة", "ستة", "سبعة", "ثمانية", "تسعة",
)

_TENS: tuple[str, ...] = (
    "", "عشرة", "عشرون", "ثلاثون", "أربعون",
    "خمسون", "ستون", "سبعون", "ثمانون", "تسعون",
)

_HUNDREDS: tuple[str, ...] = (
    "", "مئة", "مئتان", "ثلاثمائة", "أربعمائة",
    "خمسمائة", "ستمائة", "سبعمائة", "ثمانمائة", "تسعمائة",
)

_ELEVEN = "أحد عشر"
_TWELVE = "اثنا عشر"
_TEEN_SUFFIX = "عشر"

_JOINER = " و"

# One past the largest integer part with a scale word (999 billion ...)
_LIMIT = 1000 ** len(SCALE_WORDS)


# ─── Group Rendering ─────────────────────────────────────────────────


def render_group(value: int) -> str:
    """Spell out a number in 0..999.

    A lone one or two in the units position (1, 2, 101, 202 ...) is left
    unspoken: the counted noun carries it ("دينار واحد", "ديناران", "ألف",
    "ألفان").

    Raises:
        ValueError: If value is outside 0..999.
    """
    if not 0 <= value <= 999:
        raise ValueError(f"Group value must be within 0..999, got {value}")

    hundreds, remainder = divmod(value, 100)
    tens, units = divmod(remainder, 10)

    parts: list[str] = []
    if hundreds:
        parts.append(_HUNDREDS[hundreds])

    match remainder:
        case 0:
            pass
        case 11:
            parts.append(_ELEVEN)
        case 12:
            parts.append(_TWELVE)
        case n if 13 <= n <= 19:
            parts.append(f"{_UNITS[units]} {_TEEN_SUFFIX}")
        case _:
            # Arabic reads the units before the tens: "واحد وعشرون"
            if units and not (tens == 0 and units in (1, 2)):
                parts.append(_UNITS[units])
            if tens:
                parts.append(_TENS[tens])

    return _JOINER.join(parts)


# ─── Scale Decomposition ─────────────────────────────────────────────


def decompose(number: int) -> list[NumberGroup]:
    """Split an integer into non-zero base-1000 groups, most significant first.

    Raises:
        NegativeAmountError: If number is negative.
        AmountOutOfRangeError: If number needs a scale beyond billions.
    """
    if number < 0:
        raise NegativeAmountError(
            f"Cannot decompose a negative number: {number}",
            {"number": number},
        )
    if number >= _LIMIT:
        raise AmountOutOfRangeError(
            f"{number} exceeds the largest supported scale (billions)",
            {"number": number, "limit": _LIMIT - 1},
        )

    groups: list[NumberGroup] = []
    scale_index = 0
    while number > 0:
        number, value = divmod(number, 1000)
        if value:
            groups.append(NumberGroup(value=value, scale_index=scale_index))
        scale_index += 1

    groups.reverse()
    return groups


def render_number(number: int) -> str:
    """Spell out a whole number below one trillion."""
    if number == 0:
        return ZERO_WORD

    return _JOINER.join(
        attach_scale_word(render_group(group.value), group)
        for group in decompose(number)
    )
