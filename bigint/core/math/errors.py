"""
Errors - Исключения арифметики произвольной точности

Все ошибки синхронно пропагируют к вызывающему коду, без fallback-значений.
Каждое исключение дополнительно наследует встроенный аналог, чтобы вызывающий
код мог ловить их привычным образом (ValueError, ZeroDivisionError, IndexError).
"""


class BigIntError(Exception):
    """Базовое исключение для всех ошибок bigint."""

    pass


class InvalidDigit(BigIntError, ValueError):
    """
    Символ вне диапазона '0'..'9' там, где ожидалась десятичная цифра.

    Возникает при разборе десятичной строки и в digit codec.
    """

    pass


class DigitOutOfRange(BigIntError, ValueError):
    """
    Значение цифры вне диапазона 0..9.

    Нарушение внутреннего инварианта: в корректном коде недостижимо.
    """

    pass


class DivisionByZero(BigIntError, ZeroDivisionError):
    """Делитель имеет нулевую magnitude."""

    pass


class OffsetOutOfRange(BigIntError, IndexError):
    """
    Смещение вычитаемого выходит за пределы уменьшаемого.

    Нарушение внутреннего инварианта вычитания со смещением.
    Через публичный SignedInteger наблюдаться не должно.
    """

    pass
