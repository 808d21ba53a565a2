"""
Magnitude - Беззнаковая двоичная арифметика над списками битов

Magnitude представлена как list[int] из битов {0, 1}, порядок MSB-first
(индекс 0 - старший бит). Один и тот же порядок используется во всех
примитивах: сравнение, сложение, вычитание, умножение, деление.

Модуль обеспечивает:
- Строгое сравнение "больше" с учётом незначащих ведущих нулей
- Ripple-carry сложение
- Вычитание с borrow и опциональным смещением (основа long division)
- Shift-and-add умножение
- Binary long division (частное + остаток)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные списки никогда не мутируются, результат всегда новый список
2. Вычитание никогда не даёт отрицательную magnitude
3. Деление на нулевую magnitude → DivisionByZero, проверка выполняется первой
4. Все биты результата принадлежат алфавиту {0, 1}
"""

from bigint.core.math.errors import DivisionByZero, OffsetOutOfRange

# MSB-first список битов
Magnitude = list[int]


# =============================================================================
# ЗНАЧИМОСТЬ И НОРМАЛИЗАЦИЯ
# =============================================================================


def is_zero_magnitude(bits: Magnitude) -> bool:
    """
    Проверка, что magnitude равна нулю.

    Пустой список и список из одних нулей любой длины - это ноль.
    """
    return not any(bits)


def trim_magnitude(bits: Magnitude) -> Magnitude:
    """
    Удаление незначащих ведущих нулей.

    Args:
        bits: Magnitude (возможно с ведущими нулями)

    Returns:
        Новый список без ведущих нулей; [0] для нуля

    Examples:
        >>> trim_magnitude([0, 0, 1, 0])
        [1, 0]
        >>> trim_magnitude([0, 0])
        [0]
    """
    for index, bit in enumerate(bits):
        if bit:
            return list(bits[index:])
    return [0]


def magnitudes_equal(first: Magnitude, second: Magnitude) -> bool:
    """Численное равенство двух magnitude (ведущие нули игнорируются)."""
    return trim_magnitude(first) == trim_magnitude(second)


def is_greater(first: Magnitude, second: Magnitude) -> bool:
    """
    Строгое сравнение: first > second.

    Сначала сравниваются длины значащих частей (длиннее - больше), при равной
    длине решает первый различающийся бит, начиная со старшего.

    Args:
        first: Первая magnitude
        second: Вторая magnitude

    Returns:
        True если first строго больше second

    Examples:
        >>> is_greater([1, 0, 1], [1, 1])
        True
        >>> is_greater([0, 0, 1, 1], [1, 1])
        False
    """
    first_significant = trim_magnitude(first)
    second_significant = trim_magnitude(second)

    if len(first_significant) != len(second_significant):
        return len(first_significant) > len(second_significant)

    for first_bit, second_bit in zip(first_significant, second_significant):
        if first_bit != second_bit:
            return first_bit > second_bit

    return False


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def shift_left(bits: Magnitude) -> Magnitude:
    """Сдвиг влево на один разряд: добавление младшего нуля."""
    return list(bits) + [0]


def add_magnitudes(first: Magnitude, second: Magnitude) -> Magnitude:
    """
    Ripple-carry сложение двух magnitude.

    Операнды выравниваются по правому краю. Длина результата равна длине
    более длинного операнда, плюс один бит при финальном carry-out.

    Args:
        first: Первое слагаемое
        second: Второе слагаемое

    Returns:
        Сумма (MSB-first)

    Examples:
        >>> add_magnitudes([1, 1], [1])
        [1, 0, 0]
        >>> add_magnitudes([1, 0, 0], [1])
        [1, 0, 1]
    """
    if len(first) >= len(second):
        longer, shorter = first, second
    else:
        longer, shorter = second, first

    length_difference = len(longer) - len(shorter)
    carry = 0
    result: Magnitude = []

    for index in range(len(longer) - 1, -1, -1):
        shorter_bit = shorter[index - length_difference] if index >= length_difference else 0
        column_sum = longer[index] + shorter_bit + carry
        result.append(column_sum & 1)
        carry = column_sum >> 1

    if carry:
        result.append(1)

    result.reverse()
    return result


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def _subtract_aligned(minuend: Magnitude, subtrahend: Magnitude, offset: int) -> Magnitude:
    """
    Вычитание subtrahend << offset из minuend без переупорядочивания операндов.

    Младшие offset битов minuend остаются без изменений. Длина результата
    равна длине minuend.

    Raises:
        OffsetOutOfRange: Если сдвинутое вычитаемое больше уменьшаемого
    """
    result = list(minuend)
    borrow = 0

    # Разряды считаются от младшего: significance 0 - последний элемент списка
    for significance in range(offset, len(minuend)):
        position = len(minuend) - 1 - significance
        subtrahend_significance = significance - offset
        if subtrahend_significance < len(subtrahend):
            subtrahend_bit = subtrahend[len(subtrahend) - 1 - subtrahend_significance]
        else:
            subtrahend_bit = 0

        difference = minuend[position] - subtrahend_bit - borrow
        if difference < 0:
            result[position] = difference + 2
            borrow = 1
        else:
            result[position] = difference
            borrow = 0

    if borrow:
        raise OffsetOutOfRange(
            f"Aligned subtrahend exceeds minuend at offset {offset}: "
            f"minuend length {len(minuend)}, subtrahend length {len(subtrahend)}"
        )

    return result


def subtract_magnitudes(first: Magnitude, second: Magnitude, offset: int = 0) -> Magnitude:
    """
    Вычитание меньшей magnitude из большей: |larger - smaller|.

    Порядок операндов определяется is_greater. Опциональное смещение offset
    выравнивает меньший операнд на offset разрядов выше младшего разряда
    большего (вычитается smaller << offset). Это примитив, на котором
    построено деление.

    Args:
        first: Первый операнд
        second: Второй операнд
        offset: Смещение меньшего операнда в сторону старших разрядов

    Returns:
        Разность (длина равна длине большего операнда, возможны ведущие нули)

    Raises:
        OffsetOutOfRange: Если offset отрицателен или превышает разницу
            значащих длин операндов

    Examples:
        >>> subtract_magnitudes([1, 0, 0], [1])
        [0, 1, 1]
        >>> subtract_magnitudes([1], [1, 0, 0])
        [0, 1, 1]
        >>> subtract_magnitudes([1, 1, 0], [1, 1], offset=1)
        [0, 0, 0]
    """
    if is_greater(second, first):
        larger, smaller = second, first
    else:
        larger, smaller = first, second

    length_difference = len(trim_magnitude(larger)) - len(trim_magnitude(smaller))
    if offset < 0 or offset > length_difference:
        raise OffsetOutOfRange(
            f"Offset {offset} greater than length difference {length_difference}"
        )

    return _subtract_aligned(larger, trim_magnitude(smaller), offset)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(multiplicand: Magnitude, multiplier: Magnitude) -> Magnitude:
    """
    Shift-and-add умножение.

    Биты multiplier просматриваются от младшего к старшему. Сдвинутая копия
    multiplicand после каждого шага сдвигается влево на один разряд; при
    установленном бите она прибавляется к аккумулятору.

    Стоимость пропорциональна произведению длин операндов.

    Args:
        multiplicand: Множимое
        multiplier: Множитель

    Returns:
        Точное произведение (возможны ведущие нули)
    """
    result: Magnitude = [0]
    addend = list(multiplicand)

    for bit in reversed(multiplier):
        if bit:
            result = add_magnitudes(result, addend)
        addend = shift_left(addend)

    return result


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def can_divide(dividend: Magnitude, divisor: Magnitude, position: int) -> bool:
    """
    Проверка делимости окна dividend[position : position + len(divisor)].

    Если бит непосредственно над окном уже установлен (старший разряд не был
    поглощён предыдущим шагом), окно заведомо не меньше делителя.

    Args:
        dividend: Текущий (частично уменьшенный) делимый
        divisor: Делитель без ведущих нулей
        position: Индекс старшего бита окна в dividend

    Returns:
        True если divisor, выровненный на position, не больше окна
    """
    if position >= 1 and dividend[position - 1] == 1:
        return True

    for index, divisor_bit in enumerate(divisor):
        dividend_bit = dividend[position + index]
        if dividend_bit > divisor_bit:
            return True
        if dividend_bit < divisor_bit:
            return False

    return True


def divmod_magnitudes(dividend: Magnitude, divisor: Magnitude) -> tuple[Magnitude, Magnitude]:
    """
    Binary long division: частное (с усечением) и остаток.

    Порядок проверок:
    1. Нулевой делитель → DivisionByZero (всегда, до любых ранних выходов)
    2. divisor > dividend → частное [] (ноль), остаток = копия dividend
    3. Иначе - long division от старших разрядов к младшим

    Args:
        dividend: Делимое
        divisor: Делитель

    Returns:
        (quotient, remainder)

    Raises:
        DivisionByZero: Если divisor равен нулю

    Examples:
        >>> divmod_magnitudes([1, 1, 1], [1, 0])
        ([1, 1], [0, 0, 1])
        >>> divmod_magnitudes([1], [1, 0])
        ([], [1])
    """
    if is_zero_magnitude(divisor):
        raise DivisionByZero("Cannot divide by zero")

    if is_greater(divisor, dividend):
        return [], list(dividend)

    remainder = trim_magnitude(dividend)
    divisor_significant = trim_magnitude(divisor)

    dividend_length = len(remainder)
    divisor_length = len(divisor_significant)
    quotient: Magnitude = []

    for position in range(dividend_length - divisor_length + 1):
        if can_divide(remainder, divisor_significant, position):
            offset = dividend_length - (position + divisor_length)
            remainder = _subtract_aligned(remainder, divisor_significant, offset)
            quotient.append(1)
        else:
            quotient.append(0)

    return quotient, remainder


def divide_magnitudes(dividend: Magnitude, divisor: Magnitude) -> Magnitude:
    """Частное binary long division (остаток отбрасывается)."""
    quotient, _ = divmod_magnitudes(dividend, divisor)
    return quotient
