"""
Domain models and value objects.

Contains NumeralBase, the digit alphabet, conversion request/result models
and the error taxonomy.
"""

from src.core.domain.conversion import ConversionRequest, ConversionResult
from src.core.domain.errors import ConversionError, MalformedNumber, UnknownBase
from src.core.domain.numeral_base import DIGIT_ALPHABET, DIGIT_VALUES, NumeralBase

__all__ = [
    # Numeral base
    "DIGIT_ALPHABET",
    "DIGIT_VALUES",
    "NumeralBase",
    # Conversion models
    "ConversionRequest",
    "ConversionResult",
    # Errors
    "ConversionError",
    "MalformedNumber",
    "UnknownBase",
]
