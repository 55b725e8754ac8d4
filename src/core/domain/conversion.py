"""
Conversion — Модели запроса и результата конверсии

Immutable Pydantic модели, которыми ядро обменивается с внешним слоем (CLI).
Полная совместимость с JSON Schema (src/core/contracts/schema/conversion_*.json).
"""

from pydantic import BaseModel, Field

from src.core.domain.numeral_base import NumeralBase


# =============================================================================
# REQUEST
# =============================================================================


class ConversionRequest(BaseModel):
    """
    Запрос на конверсию.

    Immutable модель (frozen=True). Содержит:
    - Исходную и целевую системы счисления
    - Строку цифр (возможно с префиксом 0x/0b/0o)
    - Параметры форматирования (width, grouping; 0 = выключено)
    """

    src_base: NumeralBase = Field(..., description="Исходная система счисления")
    tgt_base: NumeralBase = Field(..., description="Целевая система счисления")
    number: str = Field(..., description="Строка цифр в исходной системе счисления")

    # Форматирование
    width: int = Field(0, ge=0, description="Минимальное количество цифр (0 = выключено)")
    grouping: int = Field(0, ge=0, description="Размер группы цифр (0 = выключено)")

    model_config = {"frozen": True}

    @classmethod
    def from_labels(
        cls,
        src_label: str,
        tgt_label: str,
        number: str,
        width: int = 0,
        grouping: int = 0,
    ) -> "ConversionRequest":
        """
        Создание запроса из меток систем счисления.

        Метки проверяются через NumeralBase.from_label, поэтому невалидная
        метка даёт UnknownBase, а не pydantic ValidationError.

        Raises:
            UnknownBase: Если одна из меток не распознана
            ValidationError: Если width или grouping отрицательные
        """
        return cls(
            src_base=NumeralBase.from_label(src_label),
            tgt_base=NumeralBase.from_label(tgt_label),
            number=number,
            width=width,
            grouping=grouping,
        )


# =============================================================================
# RESULT
# =============================================================================


class ConversionResult(BaseModel):
    """
    Результат конверсии.

    Immutable модель (frozen=True):
    - request: исходный запрос
    - digits: строка цифр после снятия префикса
    - converted: минимальное представление в целевой системе ("0" для нуля)
    - formatted: converted после set_width и group_digits
    """

    request: ConversionRequest = Field(..., description="Исходный запрос")
    digits: str = Field(..., min_length=1, description="Цифры после снятия префикса")
    converted: str = Field(..., min_length=1, description="Минимальное представление")
    formatted: str = Field(..., min_length=1, description="Представление для вывода")

    model_config = {"frozen": True}
