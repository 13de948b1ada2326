"""
Post-processing applied to a composed amount phrase.

Formal Arabic here is a cosmetic lookup, not a grammar engine: a currency
noun listed in FORMAL_ARABIC_SUFFIXES gets its tanwīn ending, anything else
is left exactly as the caller spelled it.
"""

from __future__ import annotations

import re

AMOUNT_LIMITER_PREFIX = "فقط"
AMOUNT_LIMITER_SUFFIX = "لا غير"

# ─── Formal Arabic Case Endings ──────────────────────────────────────
# Bare currency noun → noun with its accusative tanwīn.

FORMAL_ARABIC_SUFFIXES: dict[str, str] = {
    "دينار": "دينارًا",
    "فلس": "فلسًا",
    "ريال": "ريالًا",
    "هللة": "هللةً",
    "قرش": "قرشًا",
    "جنيه": "جنيهًا",
    "ليرة": "ليرةً",
    "درهم": "درهمًا",
    "دراهم": "دراهمًا",
    "سنت": "سنتًا",
    "سنتات": "سنتاتٍ",
    "دولار": "دولاراً",
    "يورو": "يوروًا",
}

# Whole words only, and never the first word of the phrase: "ديناران" and
# the leading "دينار" of "دينار واحد" stay untouched.
_FORMAL_ARABIC_PATTERN = re.compile(
    r"(?<= )("
    + "|".join(re.escape(word) for word in sorted(FORMAL_ARABIC_SUFFIXES, key=len, reverse=True))
    + r")(?= |$)"
)


def apply_formal_arabic(text: str) -> str:
    """Add classical case endings to every recognised currency noun."""
    return _FORMAL_ARABIC_PATTERN.sub(lambda m: FORMAL_ARABIC_SUFFIXES[m.group(1)], text)


def apply_amount_limiter(text: str) -> str:
    """Wrap the phrase as "فقط ... لا غير" ("only ... and no more")."""
    return f"{AMOUNT_LIMITER_PREFIX} {text} {AMOUNT_LIMITER_SUFFIX}"
