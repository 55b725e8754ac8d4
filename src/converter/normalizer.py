"""Normalizer: снятие префикса системы счисления перед разбором.

Распознаются только литеральные префиксы "0x", "0b", "0o" (case-sensitive).
Префикс не проверяется на соответствие исходной системе счисления:
"0b" перед hex-строкой тоже снимается.
"""

from typing import Final

PREFIX_LEN: Final[int] = 2

KNOWN_PREFIXES: Final[frozenset[str]] = frozenset({"0x", "0b", "0o"})


def strip_prefix(raw: str) -> str:
    """Снятие распознанного префикса.

    Чистая и тотальная функция: никогда не падает.
    Строки длиной <= 2 возвращаются без изменений ("0x" остаётся "0x").

    Examples:
        >>> strip_prefix("0xDEADBEEF")
        'DEADBEEF'
        >>> strip_prefix("0X1F")
        '0X1F'
        >>> strip_prefix("0b")
        '0b'
    """
    if len(raw) <= PREFIX_LEN:
        return raw

    if raw[:PREFIX_LEN] in KNOWN_PREFIXES:
        return raw[PREFIX_LEN:]
    return raw
