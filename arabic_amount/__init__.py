"""
Arabic Amount: write monetary amounts out in Arabic words.

Architecture: Decompose (base-1000 groups) → Render groups → Agreement
(singular/dual/plural) → Compose → Formal Arabic / "فقط ... لا غير"
"""

from .converter import OUT_OF_RANGE_TEXT, ArabicAmountConverter, convert_amount
from .models import ConverterConfig, CurrencyUnit

__version__ = "1.0.0"

__all__ = [
    "OUT_OF_RANGE_TEXT",
    "ArabicAmountConverter",
    "ConverterConfig",
    "CurrencyUnit",
    "convert_amount",
]
