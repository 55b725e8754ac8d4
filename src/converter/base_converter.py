"""BaseConverter — конверсия строки цифр между системами счисления.

convert_base(num, src, target) == BigNumber.parse(num, src).render(target),
за исключением нуля: ноль всегда возвращается как "0", чтобы
последующие set_width/group_digits работали с непустой строкой.
"""

import logging

from src.core.domain.numeral_base import NumeralBase
from src.core.math.big_number import BigNumber

logger = logging.getLogger(__name__)

ZERO_DIGITS = "0"


def convert_base(num: str, src: NumeralBase, target: NumeralBase) -> str:
    """Конверсия num из системы src в систему target.

    Чистая и детерминированная. При src == target сохраняется значение,
    но не литерал: ведущие нули отбрасываются.

    Args:
        num: Строка цифр в системе src (без префикса)
        src: Исходная система счисления
        target: Целевая система счисления

    Returns:
        Минимальная строка цифр в target (uppercase), "0" для нуля

    Raises:
        MalformedNumber: Ошибка разбора num (пробрасывается без изменений)
    """
    number = BigNumber.parse(num, src)
    converted = ZERO_DIGITS if number.is_zero else number.render(target)

    logger.debug(
        "Converted %d-digit %s number to %d-digit %s number",
        len(num),
        src.label,
        len(converted),
        target.label,
    )
    return converted
