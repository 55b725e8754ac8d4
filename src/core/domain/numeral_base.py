"""
NumeralBase — Поддерживаемые системы счисления

Ровно четыре варианта: bin (2), oct (8), dec (10), hex (16).
Конструирование только через валидированный lookup по метке;
невалидная метка → UnknownBase, без приведения регистра и без default.

Алфавит цифр "0123456789ABCDEF": значение цифры = индекс в алфавите.
На входе буквы принимаются в любом регистре, на выходе всегда uppercase.
"""

from enum import Enum
from typing import Final, Mapping

from src.core.domain.errors import UnknownBase


# =============================================================================
# ALPHABET
# =============================================================================

# Упорядоченный алфавит цифр (значение цифры = индекс)
DIGIT_ALPHABET: Final[str] = "0123456789ABCDEF"

# Обратный lookup символ → значение (оба регистра для букв)
DIGIT_VALUES: Final[Mapping[str, int]] = {
    **{char: value for value, char in enumerate(DIGIT_ALPHABET)},
    **{char.lower(): value for value, char in enumerate(DIGIT_ALPHABET) if char.isalpha()},
}


# =============================================================================
# ENUMS
# =============================================================================


class NumeralBase(str, Enum):
    """
    Система счисления.

    Значение enum совпадает с меткой из CLI ("bin", "oct", "dec", "hex").
    """

    BIN = "bin"
    OCT = "oct"
    DEC = "dec"
    HEX = "hex"

    @property
    def label(self) -> str:
        """Метка системы счисления."""
        return self.value

    @property
    def radix(self) -> int:
        """Основание системы счисления."""
        return _RADIX_BY_BASE[self]

    @property
    def alphabet(self) -> str:
        """Первые radix символов DIGIT_ALPHABET."""
        return DIGIT_ALPHABET[: self.radix]

    def digit_value(self, char: str) -> int:
        """
        Значение одной цифры в данной системе счисления.

        Args:
            char: Один символ

        Returns:
            Значение цифры в диапазоне [0, radix)

        Raises:
            KeyError: Если символ не является цифрой этой системы
        """
        value = DIGIT_VALUES[char]
        if value >= self.radix:
            raise KeyError(char)
        return value

    @classmethod
    def from_label(cls, label: str) -> "NumeralBase":
        """
        Валидированный lookup по метке.

        Сравнение case-sensitive и точное: "HEX" или " hex" невалидны.

        Args:
            label: Одна из меток "bin", "dec", "oct", "hex"

        Returns:
            Соответствующий NumeralBase

        Raises:
            UnknownBase: Если метка не распознана
        """
        try:
            return _BASE_BY_LABEL[label]
        except (KeyError, TypeError):
            raise UnknownBase(label) from None


_RADIX_BY_BASE: Final[Mapping[NumeralBase, int]] = {
    NumeralBase.BIN: 2,
    NumeralBase.OCT: 8,
    NumeralBase.DEC: 10,
    NumeralBase.HEX: 16,
}

_BASE_BY_LABEL: Final[Mapping[str, NumeralBase]] = {base.value: base for base in NumeralBase}
