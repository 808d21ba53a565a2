"""
Conversion - Decimal ⇄ Binary конверсия magnitude

Модуль обеспечивает конверсию между строками десятичных цифр и magnitude:
- decimal → magnitude: многократное деление десятичной строки пополам
- magnitude → decimal: накопление в нативном аккумуляторе для младших
  разрядов и накопление в пространстве десятичных строк для старших
- magnitude → binary string: только значащие биты

Разряды magnitude делятся на два диапазона:
- "safe" (significance <= native_safe_bits): суммарный вес помещается
  в знаковый 64-битный аккумулятор
- "high" (significance > native_safe_bits): вес добавляется к результату
  через add_decimal_strings

Для high-диапазона доступны две стратегии (HighBitStrategy):
- DOUBLING: вес 2^significance как десятичная строка, удваиваемая один раз
  на каждый разряд (линейное число сложений строк)
- REPEATED_ADDITION: к результату добавляется 2^native_safe_bits ровно
  2^(significance - native_safe_bits) раз (экспоненциально, только для
  небольших значений и перекрёстной проверки)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Обе стратегии дают идентичные строки
2. Нативный аккумулятор никогда не превышает 2^63 - 1 (native_safe_bits <= 62)
3. Ноль всегда конвертируется в "0" и из "0" в [0]
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

from bigint.core.math.digits import (
    DECIMAL_BASE,
    add_decimal_strings,
    digit_of,
    double_decimal_string,
)
from bigint.core.math.magnitude import Magnitude, is_zero_magnitude, trim_magnitude

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Старший разряд, вес которого ещё безопасно накапливается в нативном
# знаковом 64-битном аккумуляторе: 2^0 + ... + 2^62 = 2^63 - 1
NATIVE_SAFE_BITS: Final[int] = 62


# =============================================================================
# CONFIG
# =============================================================================


class HighBitStrategy(str, Enum):
    """Стратегия накопления разрядов выше native_safe_bits."""

    DOUBLING = "doubling"
    REPEATED_ADDITION = "repeated_addition"


@dataclass(frozen=True)
class ConversionConfig:
    """Конфигурация конверсии magnitude → decimal.

    native_safe_bits: старший разряд нативного аккумулятора (1..62)
    high_bit_strategy: стратегия накопления старших разрядов
    """

    native_safe_bits: int = NATIVE_SAFE_BITS
    high_bit_strategy: HighBitStrategy = HighBitStrategy.DOUBLING

    def __post_init__(self) -> None:
        if self.native_safe_bits < 1 or self.native_safe_bits > NATIVE_SAFE_BITS:
            raise ValueError(
                f"native_safe_bits must be in [1, {NATIVE_SAFE_BITS}], "
                f"got {self.native_safe_bits}"
            )


DEFAULT_CONVERSION_CONFIG: Final[ConversionConfig] = ConversionConfig()


# =============================================================================
# СТЕПЕНИ ДВОЙКИ
# =============================================================================


def power_of_two(exponent: int, limit: int = NATIVE_SAFE_BITS) -> int:
    """
    Ограниченная степень двойки в нативном целом.

    Args:
        exponent: Показатель (значения < 1 дают 1)
        limit: Максимально допустимый показатель

    Returns:
        2^exponent

    Raises:
        ValueError: Если exponent > limit (результат не помещается
            в нативный аккумулятор)

    Examples:
        >>> power_of_two(10)
        1024
        >>> power_of_two(-3)
        1
    """
    if exponent < 1:
        return 1
    if exponent > limit:
        raise ValueError(f"Exponent {exponent} exceeds native limit {limit}")

    return 1 << exponent


# =============================================================================
# MAGNITUDE → DECIMAL
# =============================================================================


def _add_weight_repeatedly(result: str, native_safe_bits: int, significance: int) -> str:
    """
    Добавление веса 2^significance повторным сложением 2^native_safe_bits.

    Число повторов 2^(significance - native_safe_bits) экспоненциально
    по позиции бита.
    """
    unit = str(power_of_two(native_safe_bits))
    repetitions = power_of_two(significance - native_safe_bits)

    for _ in range(repetitions):
        result = add_decimal_strings(result, unit)

    return result


def magnitude_to_decimal(bits: Magnitude, config: Optional[ConversionConfig] = None) -> str:
    """
    Конверсия magnitude в каноническую строку десятичных цифр.

    Args:
        bits: Magnitude (MSB-first, возможны ведущие нули)
        config: Конфигурация конверсии (default: DEFAULT_CONVERSION_CONFIG)

    Returns:
        Строка десятичных цифр без ведущих нулей; "0" для нуля

    Examples:
        >>> magnitude_to_decimal([1, 0, 1, 0])
        '10'
        >>> magnitude_to_decimal([0, 0])
        '0'
    """
    config = config or DEFAULT_CONVERSION_CONFIG
    threshold = config.native_safe_bits

    if config.high_bit_strategy is HighBitStrategy.REPEATED_ADDITION and len(bits) > threshold + 1:
        logger.debug(
            "Repeated addition strategy for %d-bit magnitude is exponential in bit position",
            len(bits),
        )

    accumulator = 0
    result: Optional[str] = None
    weight = ""

    for significance, bit in enumerate(reversed(bits)):
        if significance <= threshold:
            if bit:
                accumulator += power_of_two(significance)
            continue

        if result is None:
            # Первый high-разряд: фиксируем аккумулятор как десятичную строку
            result = str(accumulator)
            weight = str(power_of_two(threshold))

        if config.high_bit_strategy is HighBitStrategy.DOUBLING:
            weight = double_decimal_string(weight)
            if bit:
                result = add_decimal_strings(result, weight)
        elif bit:
            result = _add_weight_repeatedly(result, threshold, significance)

    if result is None:
        result = str(accumulator)

    return result


# =============================================================================
# DECIMAL → MAGNITUDE
# =============================================================================


def decimal_to_magnitude(digits: str) -> Magnitude:
    """
    Конверсия строки десятичных цифр в magnitude.

    Алгоритм: строка цифр многократно делится пополам "на месте" - каждая
    цифра слева направо делится на 2, остаток (0 или 1) переносится в
    следующую цифру как +10. Остаток полного прохода - очередной бит
    (от младшего к старшему). Проход повторяется, пока значение не станет
    нулём; собранные биты разворачиваются в MSB-first.

    Args:
        digits: Строка '0'..'9' без знака (ведущие нули допустимы)

    Returns:
        Magnitude без ведущих нулей; [0] для пустой строки или нуля

    Raises:
        InvalidDigit: Если строка содержит не-цифру

    Examples:
        >>> decimal_to_magnitude("10")
        [1, 0, 1, 0]
        >>> decimal_to_magnitude("000")
        [0]
    """
    values = [digit_of(char) for char in digits]

    while values and values[0] == 0:
        del values[0]

    if not values:
        return [0]

    bits: Magnitude = []
    while values:
        remainder = 0
        for index, value in enumerate(values):
            current = value + remainder * DECIMAL_BASE
            values[index] = current // 2
            remainder = current % 2
        bits.append(remainder)

        while values and values[0] == 0:
            del values[0]

    bits.reverse()
    return bits


# =============================================================================
# MAGNITUDE → BINARY STRING
# =============================================================================


def magnitude_to_binary_string(bits: Magnitude) -> str:
    """
    Строка значащих битов magnitude (MSB-first).

    Examples:
        >>> magnitude_to_binary_string([0, 0, 1, 1, 0])
        '110'
        >>> magnitude_to_binary_string([])
        '0'
    """
    if is_zero_magnitude(bits):
        return "0"
    return "".join("1" if bit else "0" for bit in trim_magnitude(bits))
