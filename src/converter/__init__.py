"""Converter: снятие префикса, конверсия и форматирование строки цифр.

Control flow:
    raw → strip_prefix → convert_base(src, target) → set_width → group_digits
"""

from .base_converter import convert_base
from .formatter import group_digits, set_width
from .normalizer import strip_prefix
from .pipeline import convert_labels, run_conversion

__all__ = [
    "strip_prefix",
    "convert_base",
    "set_width",
    "group_digits",
    "run_conversion",
    "convert_labels",
]
