#!/usr/bin/env python3
"""
Arabic Amount Demo Report
=========================

Converts a fixed set of sample amounts (every grammatical band and scale),
prints them, and saves a UTF-8 report. Terminals often render Arabic
right-to-left badly; open the saved file in an editor to read it properly.

Usage:
    python main.py                      # writes CurrencyTestResults.txt
    python main.py results/arabic.txt   # custom output path
"""

from __future__ import annotations

import logging
import sys
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv

from arabic_amount.converter import ArabicAmountConverter

load_dotenv()

DEFAULT_REPORT_PATH = Path("CurrencyTestResults.txt")

# ─── Sample Amounts ─────────────────────────────────────────────────

SAMPLE_AMOUNTS: list[tuple[str, str]] = [
    ("0", "Zero value"),
    ("1", "Single"),
    ("2", "Dual"),
    ("3", "Few"),
    ("11", "11-19 range"),
    ("21", "Compound 21"),
    ("99", "Tens compound"),
    ("100", "Hundred"),
    ("200", "Two hundred"),
    ("300", "Three hundred"),
    ("1000", "One thousand"),
    ("2000", "Two thousand"),
    ("5000", "Few thousands"),
    ("11000", "Thousands 11"),
    ("25000", "Thousands 25"),
    ("125000", "Hundred-thousand"),
    ("1000000", "One million"),
    ("2000000", "Two millions"),
    ("5500000", "Multi-million"),
    ("1234567.89", "Full complex with decimal"),
    ("1000000000", "One billion"),
    ("2000000000", "Two billions"),
    ("987654321.75", "All groups used"),
    ("100.05", "Subunit <10"),
    ("500.5", "Subunit in tens"),
    ("100.75", "Subunit compound"),
    ("1500.75", "Thousands + decimal"),
    ("100000000000.99", "Upper range valid"),
    ("1000000000000.00", "Overflow limit"),
    ("0.5", "Fractional only"),
]

# (amount, main singular/dual/plural, sub singular/dual/plural)
CUSTOM_CURRENCY_SAMPLES: list[tuple[str, tuple[str, ...]]] = [
    ("1234.75", ("ريال", "ريالان", "ريالات", "هللة", "هللتان", "هللات")),
    ("987654.32", ("جنيه", "جنيهان", "جنيهات", "قرش", "قرشان", "قروش")),
]

_WIDTH = 60


def default_converter() -> ArabicAmountConverter:
    """Dinar/fils converter with the "فقط ... لا غير" wrapper."""
    return (
        ArabicAmountConverter()
        .set_currency_forms("دينار", "ديناران", "دنانير", "فلس", "فلسان", "فلوس")
        .use_amount_limiter(True)
    )


# ─── Report Builder ─────────────────────────────────────────────────


def build_report(converter: ArabicAmountConverter) -> str:
    """Render every sample amount into one plain-text report."""
    lines = [
        "Arabic Currency Converter Test Results",
        "=" * _WIDTH,
        "",
    ]
    for amount, _description in SAMPLE_AMOUNTS:
        lines.append(f"{amount:<15} → {converter.convert(Decimal(amount))}")

    lines += ["", "Custom Currency Examples:", "-" * 26]
    for amount, forms in CUSTOM_CURRENCY_SAMPLES:
        lines.append(f"{amount} → {converter.convert_with_forms(Decimal(amount), *forms)}")

    return "\n".join(lines) + "\n"


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Print the report and save it next to the working directory."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0]) if args else DEFAULT_REPORT_PATH

    report = build_report(default_converter())
    print(report)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(report, encoding="utf-8")
    print(f"Test results saved to: {path.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
