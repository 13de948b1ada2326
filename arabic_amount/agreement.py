"""
Arabic grammatical number agreement for scale words and currency nouns.

The counted noun takes one of three forms depending on the count:

    0, 1   → singular   (دينار)
    2      → dual       (ديناران)
    3..10  → plural     (دنانير)
    11+    → singular   (أحد عشر دينار)

Scale words (ألف / مليون / مليار) follow the same bands, except that the
values 1 and 2 replace the spoken number entirely: 1000 is "ألف", never
"واحد ألف", and 2000 is "ألفان".
"""

from __future__ import annotations

from .models import CurrencyUnit, NumberGroup

# ─── Scale Word Tables (indexed by scale: units/thousand/million/billion) ──

SCALE_WORDS: tuple[str, ...] = ("", "ألف", "مليون", "مليار")
SCALE_DUALS: tuple[str, ...] = ("", "ألفان", "مليونان", "ملياران")
SCALE_PLURALS: tuple[str, ...] = ("", "آلاف", "ملايين", "مليارات")


# ─── Form Selection ─────────────────────────────────────────────────


def select_form(value: int, singular: str, dual: str, plural: str) -> str:
    """Pick the noun form that agrees with ``value``."""
    match value:
        case 0 | 1:
            return singular
        case 2:
            return dual
        case n if 3 <= n <= 10:
            return plural
        case _:
            return singular


def select_unit_form(value: int, unit: CurrencyUnit) -> str:
    return select_form(value, unit.singular, unit.dual, unit.plural)


def select_sub_unit_form(value: int, unit: CurrencyUnit) -> str:
    """Subunit form for a fractional count (0..999).

    Counts of eleven and above always govern a singular noun. The general
    table already says so; the guard stays so the subunit rule holds even
    if the main-unit bands are ever changed.
    """
    if value >= 11:
        return unit.singular
    return select_unit_form(value, unit)


# ─── Scale Agreement ────────────────────────────────────────────────


def attach_scale_word(group_text: str, group: NumberGroup) -> str:
    """Combine a rendered 0..999 group with the scale word it multiplies.

    Args:
        group_text: Words for ``group.value`` as produced by render_group.
        group: The group value and its scale position.

    Returns:
        "ألف" for a single thousand, "ألفان" for two, "خمسة آلاف" for
        three to ten and "أحد عشر ألف" style text otherwise.
    """
    if group.scale_index == 0:
        return group_text

    match group.value:
        case 1:
            return SCALE_WORDS[group.scale_index]
        case 2:
            return SCALE_DUALS[group.scale_index]
        case n if 3 <= n <= 10:
            return f"{group_text} {SCALE_PLURALS[group.scale_index]}"
        case _:
            return f"{group_text} {SCALE_WORDS[group.scale_index]}"
