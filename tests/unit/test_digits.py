"""
Тесты для Digit Codec

Проверяет:
1. Конверсию символ → цифра и цифра → символ
2. Ошибки InvalidDigit / DigitOutOfRange
3. Сложение десятичных строк "в столбик" (carry, неравные длины)
"""

import pytest

from bigint.core.math.digits import (
    add_decimal_strings,
    char_of,
    digit_of,
    double_decimal_string,
)
from bigint.core.math.errors import BigIntError, DigitOutOfRange, InvalidDigit

# =============================================================================
# ТЕСТЫ DIGIT CODEC
# =============================================================================


class TestDigitOf:
    """Тесты для digit_of"""

    def test_all_digits(self) -> None:
        """Все символы '0'..'9' конвертируются в 0..9"""
        for value, char in enumerate("0123456789"):
            assert digit_of(char) == value

    @pytest.mark.parametrize("char", ["a", "/", ":", " ", "-", "+", "٣"])
    def test_non_digit_raises(self, char: str) -> None:
        """Символы вне '0'..'9' вызывают InvalidDigit"""
        with pytest.raises(InvalidDigit, match="out of range"):
            digit_of(char)

    @pytest.mark.parametrize("text", ["", "12"])
    def test_not_single_character_raises(self, text: str) -> None:
        """Строка не из одного символа вызывает InvalidDigit"""
        with pytest.raises(InvalidDigit):
            digit_of(text)

    def test_invalid_digit_is_value_error(self) -> None:
        """InvalidDigit ловится как ValueError и как BigIntError"""
        with pytest.raises(ValueError):
            digit_of("x")
        with pytest.raises(BigIntError):
            digit_of("x")


class TestCharOf:
    """Тесты для char_of"""

    def test_all_digits(self) -> None:
        """0..9 конвертируются в '0'..'9'"""
        assert "".join(char_of(value) for value in range(10)) == "0123456789"

    def test_round_trip(self) -> None:
        """char_of(digit_of(c)) == c"""
        for char in "0123456789":
            assert char_of(digit_of(char)) == char

    @pytest.mark.parametrize("digit", [10, 11, 19, -1])
    def test_out_of_range_raises(self, digit: int) -> None:
        """Значения вне 0..9 вызывают DigitOutOfRange"""
        with pytest.raises(DigitOutOfRange, match=f"integer {digit} out of range"):
            char_of(digit)


# =============================================================================
# ТЕСТЫ СЛОЖЕНИЯ ДЕСЯТИЧНЫХ СТРОК
# =============================================================================


class TestAddDecimalStrings:
    """Тесты для add_decimal_strings"""

    def test_simple_sum(self) -> None:
        """Сложение без переноса"""
        assert add_decimal_strings("123", "456") == "579"

    def test_carry_chain(self) -> None:
        """Перенос через все разряды добавляет ведущую '1'"""
        assert add_decimal_strings("999", "1") == "1000"
        assert add_decimal_strings("1", "999") == "1000"

    def test_unequal_lengths_right_aligned(self) -> None:
        """Короткая строка выравнивается по правому краю"""
        assert add_decimal_strings("100000", "25") == "100025"
        assert add_decimal_strings("25", "100000") == "100025"

    def test_zero_operand(self) -> None:
        """Сложение с нулём"""
        assert add_decimal_strings("0", "0") == "0"
        assert add_decimal_strings("0", "42") == "42"

    def test_beyond_native_width(self) -> None:
        """Суммы за пределами 64 бит совпадают с точной арифметикой"""
        first = "18446744073709551615"  # 2^64 - 1
        second = "9223372036854775808"  # 2^63
        assert add_decimal_strings(first, second) == str(2**64 - 1 + 2**63)

    def test_commutative(self) -> None:
        """Сложение коммутативно"""
        pairs = [("5", "7"), ("12345", "987"), ("99999999999999999999", "1")]
        for first, second in pairs:
            assert add_decimal_strings(first, second) == add_decimal_strings(second, first)

    def test_matches_exact_arithmetic(self) -> None:
        """Совпадает с точной арифметикой на сетке значений"""
        for first in (0, 1, 9, 10, 99, 12345, 10**20 - 1):
            for second in (0, 1, 9, 11, 999, 10**19):
                assert add_decimal_strings(str(first), str(second)) == str(first + second)

    def test_non_digit_raises(self) -> None:
        """Не-цифра в любом операнде вызывает InvalidDigit"""
        with pytest.raises(InvalidDigit):
            add_decimal_strings("12a", "1")
        with pytest.raises(InvalidDigit):
            add_decimal_strings("1", "-1")


class TestDoubleDecimalString:
    """Тесты для double_decimal_string"""

    def test_powers_of_two(self) -> None:
        """Последовательное удвоение даёт степени двойки"""
        value = "1"
        for exponent in range(1, 130):
            value = double_decimal_string(value)
            assert value == str(2**exponent)
