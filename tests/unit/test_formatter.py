"""
Тесты для Normalizer и Formatter

Проверяет:
1. Снятие префиксов 0x/0b/0o (case-sensitive, только для длины > 2)
2. set_width: граничные случаи и дополнение нулями
3. group_digits: граничные случаи, группы справа, неполная ведущая группа
4. Порядок применения: set_width, затем group_digits
"""

from src.converter import group_digits, set_width, strip_prefix


# =============================================================================
# NORMALIZER
# =============================================================================


class TestStripPrefix:
    """Тесты для strip_prefix"""

    def test_known_prefixes_stripped(self) -> None:
        assert strip_prefix("0xDEADBEEF") == "DEADBEEF"
        assert strip_prefix("0b11110000") == "11110000"
        assert strip_prefix("0o12") == "12"

    def test_no_prefix_unchanged(self) -> None:
        assert strip_prefix("1") == "1"
        assert strip_prefix("DEADBEEF") == "DEADBEEF"
        assert strip_prefix("0012") == "0012"

    def test_short_strings_unchanged(self) -> None:
        """Строки длиной <= 2 возвращаются как есть"""
        assert strip_prefix("0x") == "0x"
        assert strip_prefix("0b") == "0b"
        assert strip_prefix("0") == "0"
        assert strip_prefix("") == ""

    def test_prefix_is_case_sensitive(self) -> None:
        assert strip_prefix("0XFF") == "0XFF"
        assert strip_prefix("0B101") == "0B101"

    def test_prefix_not_matched_to_base(self) -> None:
        """Префикс снимается независимо от исходной системы"""
        assert strip_prefix("0b1F") == "1F"

    def test_only_one_prefix_stripped(self) -> None:
        assert strip_prefix("0x0x12") == "0x12"


# =============================================================================
# SET WIDTH
# =============================================================================


class TestSetWidth:
    """Тесты для set_width"""

    def test_non_positive_width_unchanged(self) -> None:
        assert set_width("12345", 0) == "12345"
        assert set_width("12345", -1) == "12345"

    def test_width_not_exceeding_length_unchanged(self) -> None:
        """Никогда не обрезает"""
        assert set_width("12345", 5) == "12345"
        assert set_width("12345", 4) == "12345"

    def test_pads_with_zeros(self) -> None:
        result = set_width("12345", 10)
        assert result == "0000012345"
        assert len(result) == 10
        assert result.endswith("12345")
        assert result.startswith("00000")

    def test_pads_empty_string(self) -> None:
        assert set_width("", 3) == "000"


# =============================================================================
# GROUP DIGITS
# =============================================================================


class TestGroupDigits:
    """Тесты для group_digits"""

    def test_non_positive_grouping_unchanged(self) -> None:
        assert group_digits("12345", 0) == "12345"
        assert group_digits("12345", -1) == "12345"

    def test_grouping_not_less_than_length_unchanged(self) -> None:
        assert group_digits("12345", 6) == "12345"
        assert group_digits("12345", 5) == "12345"

    def test_even_groups(self) -> None:
        assert group_digits("123456789", 3) == "123 456 789"

    def test_leading_remainder_group(self) -> None:
        """Неполная группа слева"""
        assert group_digits("123456789", 2) == "1 23 45 67 89"
        assert group_digits("123456789", 4) == "1 2345 6789"

    def test_group_of_one(self) -> None:
        assert group_digits("1010", 1) == "1 0 1 0"

    def test_digit_order_preserved(self) -> None:
        digits = "11011110101011011011111011101111"
        assert group_digits(digits, 8).replace(" ", "") == digits

    def test_single_space_separator(self) -> None:
        result = group_digits("DEADBEEF", 4)
        assert result == "DEAD BEEF"
        assert "  " not in result

    def test_empty_string_unchanged(self) -> None:
        assert group_digits("", 3) == ""


class TestPadThenGroup:
    """Порядок применения: set_width, затем group_digits"""

    def test_pad_then_group(self) -> None:
        assert group_digits(set_width("DEADBEEF", 12), 4) == "0000 DEAD BEEF"

    def test_group_then_pad_differs(self) -> None:
        """Обратный порядок даёт другой результат"""
        assert set_width(group_digits("DEADBEEF", 4), 12) != "0000 DEAD BEEF"
