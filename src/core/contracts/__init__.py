"""
Contract Validation Module

Модуль для валидации JSON контрактов запроса и результата конверсии.
"""

from .validators import (
    ContractValidator,
    ConversionRequestValidator,
    ConversionResultValidator,
    load_schema,
    validate_conversion_request,
    validate_conversion_result,
)

__all__ = [
    # Classes
    "ContractValidator",
    "ConversionRequestValidator",
    "ConversionResultValidator",
    # Functions
    "load_schema",
    "validate_conversion_request",
    "validate_conversion_result",
]
