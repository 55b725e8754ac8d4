"""
Errors — Типизированные ошибки конверсии

Все ошибки ядра наследуются от ConversionError, чтобы внешний слой (CLI)
мог перехватывать их одним except-блоком.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибки никогда не исправляются молча (невалидная цифра не отбрасывается)
2. Ошибка содержит контекст, достаточный для сообщения пользователю
3. Частичных результатов нет: конверсия либо успешна, либо падает целиком
"""

from typing import Optional


class ConversionError(ValueError):
    """Базовая ошибка конверсии."""

    pass


class UnknownBase(ConversionError):
    """
    Метка системы счисления не входит в {"bin", "dec", "oct", "hex"}.

    Attributes:
        label: Невалидная метка (как была передана)
    """

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown base label: {label!r}")


class MalformedNumber(ConversionError):
    """
    Строка цифр пустая или содержит символ вне алфавита системы счисления.

    Attributes:
        number: Исходная строка цифр
        char: Первый невалидный символ (None для пустой строки)
        position: Индекс невалидного символа (None для пустой строки)
    """

    def __init__(
        self,
        number: str,
        char: Optional[str] = None,
        position: Optional[int] = None,
        radix: Optional[int] = None,
    ):
        self.number = number
        self.char = char
        self.position = position
        self.radix = radix

        if char is None:
            message = "Number is empty"
        else:
            message = f"Invalid digit {char!r} at position {position} in {number!r}"
            if radix is not None:
                message += f" for base {radix}"

        super().__init__(message)
