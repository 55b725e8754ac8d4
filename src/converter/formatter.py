"""Formatter — дополнение нулями до ширины и группировка цифр.

Порядок применения фиксирован: сначала set_width, затем group_digits
(дополнение меняет длину, а значит и границы групп).
"""

from typing import Final

PAD_CHAR: Final[str] = "0"

GROUP_SEPARATOR: Final[str] = " "


def set_width(num: str, width: int) -> str:
    """Дополнение ведущими нулями до минимальной ширины width.

    width <= 0 или width <= len(num) → num без изменений. Никогда не обрезает.

    Examples:
        >>> set_width("12345", 10)
        '0000012345'
        >>> set_width("12345", 4)
        '12345'
    """
    if width <= 0 or width <= len(num):
        return num
    return num.rjust(width, PAD_CHAR)


def group_digits(num: str, grouping: int) -> str:
    """Группировка цифр по grouping символов, считая справа.

    grouping <= 0 или grouping >= len(num) → num без изменений.
    Остаток (если длина не делится нацело) образует более короткую
    ведущую группу слева.

    Examples:
        >>> group_digits("123456789", 3)
        '123 456 789'
        >>> group_digits("123456789", 2)
        '1 23 45 67 89'
    """
    if grouping <= 0 or grouping >= len(num):
        return num

    # Длина ведущей (неполной) группы
    head = len(num) % grouping
    groups = [num[:head]] if head else []
    groups.extend(num[start : start + grouping] for start in range(head, len(num), grouping))
    return GROUP_SEPARATOR.join(groups)
