"""Pipeline — полный цикл конверсии одного запроса.

Порядок шагов:
1. strip_prefix: снятие префикса 0x/0b/0o
2. convert_base: parse(src) → BigNumber → render(target)
3. set_width: дополнение нулями
4. group_digits: группировка (всегда после set_width)

Любая ошибка шага пробрасывается вызывающему коду без изменений.
"""

import logging

from src.converter.base_converter import convert_base
from src.converter.formatter import group_digits, set_width
from src.converter.normalizer import strip_prefix
from src.core.domain.conversion import ConversionRequest, ConversionResult

logger = logging.getLogger(__name__)


def run_conversion(request: ConversionRequest) -> ConversionResult:
    """Выполнение запроса конверсии.

    Args:
        request: Валидированный запрос

    Returns:
        ConversionResult с промежуточными и итоговым представлениями

    Raises:
        MalformedNumber: Если строка цифр невалидна для src_base
    """
    logger.debug(
        "Conversion request: %s -> %s (width=%d, grouping=%d)",
        request.src_base.label,
        request.tgt_base.label,
        request.width,
        request.grouping,
    )

    digits = strip_prefix(request.number)
    converted = convert_base(digits, request.src_base, request.tgt_base)
    formatted = group_digits(set_width(converted, request.width), request.grouping)

    return ConversionResult(
        request=request,
        digits=digits,
        converted=converted,
        formatted=formatted,
    )


def convert_labels(
    src_label: str,
    tgt_label: str,
    number: str,
    width: int = 0,
    grouping: int = 0,
) -> str:
    """Конверсия по меткам систем счисления, интерфейс для CLI.

    Examples:
        >>> convert_labels("hex", "dec", "0xDEADBEEF")
        '3735928559'
        >>> convert_labels("dec", "hex", "3735928559", width=12, grouping=4)
        '0000 DEAD BEEF'

    Raises:
        UnknownBase: Невалидная метка системы счисления
        MalformedNumber: Невалидная строка цифр
    """
    request = ConversionRequest.from_labels(src_label, tgt_label, number, width, grouping)
    return run_conversion(request).formatted
