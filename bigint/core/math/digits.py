"""
Digit Codec - Десятичные цифры и сложение десятичных строк

Модуль содержит листовые примитивы десятичного представления:
- Конверсия одного символа '0'..'9' в значение цифры и обратно
- Сложение двух строк десятичных цифр "в столбик" (carry от младшего разряда)

Сложение строк используется конвертером magnitude → decimal, чтобы накопление
больших значений никогда не опиралось на нативную арифметику фиксированной
ширины.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digit_of принимает ровно один символ из '0'..'9', иначе InvalidDigit
2. char_of принимает только 0..9, иначе DigitOutOfRange
3. add_decimal_strings работает только в пространстве десятичных строк
"""

from typing import Final

from bigint.core.math.errors import DigitOutOfRange, InvalidDigit

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Код символа '0' (база для конверсии символ ⇄ цифра)
ZERO_CODE: Final[int] = ord("0")

# Максимальное значение одной десятичной цифры
MAX_DIGIT: Final[int] = 9

# Основание десятичной системы (для carry при сложении и halving)
DECIMAL_BASE: Final[int] = 10


# =============================================================================
# DIGIT CODEC
# =============================================================================


def digit_of(char: str) -> int:
    """
    Конверсия символа в значение десятичной цифры.

    Args:
        char: Один символ

    Returns:
        Значение цифры 0..9

    Raises:
        InvalidDigit: Если char не является одним символом '0'..'9'

    Examples:
        >>> digit_of("7")
        7
        >>> digit_of("a")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidDigit: ...
    """
    if not isinstance(char, str) or len(char) != 1:
        raise InvalidDigit(f"Expected a single decimal character, got {char!r}")

    code = ord(char)
    if code < ZERO_CODE or code > ZERO_CODE + MAX_DIGIT:
        raise InvalidDigit(f"Cannot cast {char!r} to a digit: character out of range")

    return code - ZERO_CODE


def char_of(digit: int) -> str:
    """
    Конверсия значения цифры в символ.

    Args:
        digit: Значение 0..9

    Returns:
        Символ '0'..'9'

    Raises:
        DigitOutOfRange: Если digit вне 0..9 (нарушение инварианта)
    """
    if digit < 0 or digit > MAX_DIGIT:
        raise DigitOutOfRange(f"Cannot cast, integer {digit} out of range")

    return chr(ZERO_CODE + digit)


# =============================================================================
# DECIMAL BIG-ADDITION
# =============================================================================


def add_decimal_strings(first: str, second: str) -> str:
    """
    Сложение двух строк десятичных цифр "в столбик".

    Строки выравниваются по правому краю, недостающие старшие разряды
    короткой строки считаются '0'. Carry распространяется от младшего
    разряда к старшему; финальный carry добавляет ведущую '1'.

    Args:
        first: Первое слагаемое (только '0'..'9')
        second: Второе слагаемое (только '0'..'9')

    Returns:
        Сумма как строка десятичных цифр

    Raises:
        InvalidDigit: Если любая из строк содержит не-цифру

    Examples:
        >>> add_decimal_strings("999", "1")
        '1000'
        >>> add_decimal_strings("4611686018427387904", "4611686018427387904")
        '9223372036854775808'
    """
    if len(first) >= len(second):
        longer, shorter = first, second
    else:
        longer, shorter = second, first

    length_difference = len(longer) - len(shorter)
    carry = 0
    result: list[str] = []

    for index in range(len(longer) - 1, -1, -1):
        longer_digit = digit_of(longer[index])
        shorter_digit = digit_of(shorter[index - length_difference]) if index >= length_difference else 0

        column_sum = longer_digit + shorter_digit + carry
        if column_sum >= DECIMAL_BASE:
            result.append(char_of(column_sum - DECIMAL_BASE))
            carry = 1
        else:
            result.append(char_of(column_sum))
            carry = 0

    if carry:
        result.append("1")

    result.reverse()
    return "".join(result)


def double_decimal_string(value: str) -> str:
    """Удвоение десятичной строки: value + value."""
    return add_decimal_strings(value, value)
