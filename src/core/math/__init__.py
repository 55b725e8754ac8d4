"""
Core math modules

Арифметика произвольной точности для конверсии систем счисления.
"""

from src.core.math.big_number import BigNumber

__all__ = [
    "BigNumber",
]
