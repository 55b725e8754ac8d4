"""
BigNumber — Неотрицательное целое произвольной точности

Модуль обеспечивает разбор строки цифр в заданной системе счисления и
обратный рендеринг в строку цифр другой системы счисления.

Внутреннее представление: нативный int Python (произвольная точность),
но разбор и рендеринг выполняются явными циклами по цифрам:
- parse:  acc = acc * radix + digit_value(char), слева направо
- render: повторный divmod на radix, младшая цифра первой, затем reverse

Циклы по цифрам не зависят от лимита int/str конверсии CPython
(sys.set_int_max_str_digits), поэтому длина числа ограничена только памятью.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение всегда >= 0
2. Вся арифметика точная, переполнение невозможно
3. Любой символ вне алфавита системы счисления → MalformedNumber
4. Равенство числовое, не по представлению
"""

from dataclasses import dataclass

from src.core.domain.errors import MalformedNumber
from src.core.domain.numeral_base import NumeralBase


@dataclass(frozen=True)
class BigNumber:
    """
    Immutable неотрицательное целое.

    Создаётся через BigNumber.parse(...) или напрямую из int >= 0.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"BigNumber value must be int, got {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"BigNumber cannot be negative: {self.value}")

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def parse(cls, digits: str, base: NumeralBase) -> "BigNumber":
        """
        Разбор строки цифр в системе счисления base.

        Ведущие нули допустимы и не влияют на значение.
        Буквы hex принимаются в любом регистре.

        Args:
            digits: Непустая строка цифр (без префикса)
            base: Система счисления входной строки

        Returns:
            BigNumber с разобранным значением

        Raises:
            MalformedNumber: Если строка пустая или содержит символ
                вне алфавита base (например '8' для oct, 'G' для hex)

        Examples:
            >>> BigNumber.parse("DEADBEEF", NumeralBase.HEX).value
            3735928559
            >>> BigNumber.parse("0017", NumeralBase.OCT).value
            15
        """
        if not digits:
            raise MalformedNumber(digits)

        radix = base.radix
        acc = 0
        for position, char in enumerate(digits):
            try:
                digit = base.digit_value(char)
            except KeyError:
                raise MalformedNumber(digits, char=char, position=position, radix=radix) from None
            acc = acc * radix + digit

        return cls(acc)

    # =========================================================================
    # RENDERING
    # =========================================================================

    def render(self, base: NumeralBase) -> str:
        """
        Минимальное представление в системе счисления base (без ведущих нулей).

        Ноль рендерится как пустая строка: решение о выводе "0"
        принимает вызывающий код (convert_base).

        Args:
            base: Целевая система счисления

        Returns:
            Строка цифр в uppercase, старшая цифра первой

        Examples:
            >>> BigNumber(255).render(NumeralBase.HEX)
            'FF'
            >>> BigNumber(0).render(NumeralBase.DEC)
            ''
        """
        radix = base.radix
        alphabet = base.alphabet
        remaining = self.value
        digits = []
        while remaining > 0:
            remaining, remainder = divmod(remaining, radix)
            digits.append(alphabet[remainder])
        digits.reverse()
        return "".join(digits)

    # =========================================================================
    # VALUE PROTOCOL
    # =========================================================================

    @property
    def is_zero(self) -> bool:
        return self.value == 0
