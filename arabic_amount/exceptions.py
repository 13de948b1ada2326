"""
Custom exception hierarchy for amount conversion.

The converter is a text formatter: an amount that is merely too large is
answered with a fixed sentinel string, not an exception. These exceptions
cover input that is not an amount at all, plus the range check of the
low-level decomposer that ``convert`` guards before it is ever reached.
"""

from __future__ import annotations


class AmountConversionError(Exception):
    """Base exception for all amount conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidAmountError(AmountConversionError):
    """The value cannot be read as a finite decimal number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_AMOUNT", message, details)


class NegativeAmountError(AmountConversionError):
    """Monetary amounts written out in words are never negative."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NEGATIVE_AMOUNT", message, details)


class AmountOutOfRangeError(AmountConversionError):
    """The integer part needs a scale word beyond billions."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("AMOUNT_OUT_OF_RANGE", message, details)
