"""
Тесты для Conversion - Decimal ⇄ Binary

Проверяет:
1. decimal → magnitude (многократное деление пополам)
2. magnitude → decimal для safe и high диапазонов
3. Идентичность стратегий DOUBLING и REPEATED_ADDITION
4. ConversionConfig валидацию
5. Ограниченную степень двойки
6. Двоичную строку значащих битов
"""

import pytest

from bigint.core.math.conversion import (
    DEFAULT_CONVERSION_CONFIG,
    NATIVE_SAFE_BITS,
    ConversionConfig,
    HighBitStrategy,
    decimal_to_magnitude,
    magnitude_to_binary_string,
    magnitude_to_decimal,
    power_of_two,
)
from bigint.core.math.errors import InvalidDigit


def to_bits(value: int) -> list[int]:
    """Python int → MSB-first список битов."""
    return [int(char) for char in bin(value)[2:]]


# =============================================================================
# ТЕСТЫ СТЕПЕНИ ДВОЙКИ
# =============================================================================


class TestPowerOfTwo:
    """Тесты для power_of_two"""

    def test_small_exponents(self) -> None:
        """Степени двойки до предела"""
        for exponent in range(NATIVE_SAFE_BITS + 1):
            assert power_of_two(exponent) == 2**exponent

    def test_non_positive_exponent_is_one(self) -> None:
        """Показатель < 1 даёт 1"""
        assert power_of_two(0) == 1
        assert power_of_two(-5) == 1

    def test_exponent_above_limit_raises(self) -> None:
        """Показатель выше предела вызывает ValueError"""
        with pytest.raises(ValueError, match="exceeds native limit"):
            power_of_two(NATIVE_SAFE_BITS + 1)

    def test_custom_limit(self) -> None:
        """Предел настраивается"""
        assert power_of_two(8, limit=8) == 256
        with pytest.raises(ValueError):
            power_of_two(9, limit=8)


# =============================================================================
# ТЕСТЫ DECIMAL → MAGNITUDE
# =============================================================================


class TestDecimalToMagnitude:
    """Тесты для decimal_to_magnitude"""

    def test_zero(self) -> None:
        """Ноль, пустая строка и нули дают [0]"""
        assert decimal_to_magnitude("0") == [0]
        assert decimal_to_magnitude("0000") == [0]
        assert decimal_to_magnitude("") == [0]

    def test_small_values(self) -> None:
        """Малые значения совпадают с bin()"""
        for value in range(300):
            assert decimal_to_magnitude(str(value)) == to_bits(value)

    def test_leading_zeros_stripped(self) -> None:
        """Ведущие нули не дают ведущих нулевых битов"""
        assert decimal_to_magnitude("00010") == [1, 0, 1, 0]

    def test_large_value(self) -> None:
        """Значение из 73 девяток"""
        digits = "9" * 73
        assert decimal_to_magnitude(digits) == to_bits(int(digits))

    def test_powers_of_ten(self) -> None:
        """Степени десяти (цепочки нулей при делении пополам)"""
        for exponent in range(0, 60, 7):
            assert decimal_to_magnitude(str(10**exponent)) == to_bits(10**exponent)

    def test_non_digit_raises(self) -> None:
        """Не-цифра вызывает InvalidDigit"""
        with pytest.raises(InvalidDigit):
            decimal_to_magnitude("12x4")
        with pytest.raises(InvalidDigit):
            decimal_to_magnitude("-12")


# =============================================================================
# ТЕСТЫ MAGNITUDE → DECIMAL
# =============================================================================


class TestMagnitudeToDecimal:
    """Тесты для magnitude_to_decimal"""

    def test_zero(self) -> None:
        """Ноль любой длины даёт "0" """
        assert magnitude_to_decimal([0]) == "0"
        assert magnitude_to_decimal([0, 0, 0]) == "0"
        assert magnitude_to_decimal([]) == "0"

    def test_safe_range(self) -> None:
        """Значения в пределах нативного аккумулятора"""
        for value in (1, 2, 255, 1023, 2**62, 2**63 - 1):
            assert magnitude_to_decimal(to_bits(value)) == str(value)

    def test_threshold_boundary(self) -> None:
        """Границы между safe и high диапазонами"""
        for value in (2**63, 2**63 + 1, 2**64 - 1, 2**64, 2**65 + 2**62):
            assert magnitude_to_decimal(to_bits(value)) == str(value)

    def test_high_range(self) -> None:
        """Значения далеко за пределами 64 бит"""
        values = [
            int("990000009999990099999999"),
            int("9" * 73),
            8 * 10**54,
            2**300 + 7,
        ]
        for value in values:
            assert magnitude_to_decimal(to_bits(value)) == str(value)

    def test_leading_zero_bits(self) -> None:
        """Ведущие нулевые биты не дают ведущих нулей"""
        bits = [0] * 80 + to_bits(12345)
        assert magnitude_to_decimal(bits) == "12345"

    def test_round_trip(self) -> None:
        """decimal → magnitude → decimal сохраняет каноническую строку"""
        for text in ("1", "42", "18446744073709551616", "7999999999999999999999549999999954545500000000000000000"):
            assert magnitude_to_decimal(decimal_to_magnitude(text)) == text


class TestHighBitStrategies:
    """Тесты стратегий накопления старших разрядов"""

    @pytest.mark.parametrize("native_safe_bits", [1, 3, 8])
    def test_strategies_identical(self, native_safe_bits: int) -> None:
        """DOUBLING и REPEATED_ADDITION дают одинаковые строки"""
        doubling = ConversionConfig(native_safe_bits=native_safe_bits)
        repeated = ConversionConfig(
            native_safe_bits=native_safe_bits,
            high_bit_strategy=HighBitStrategy.REPEATED_ADDITION,
        )
        for value in range(0, 2**10, 13):
            bits = to_bits(value)
            expected = str(value)
            assert magnitude_to_decimal(bits, doubling) == expected
            assert magnitude_to_decimal(bits, repeated) == expected

    def test_reference_strategy_beyond_native_threshold(self) -> None:
        """REPEATED_ADDITION на стандартном пороге для бита 2^66"""
        config = ConversionConfig(high_bit_strategy=HighBitStrategy.REPEATED_ADDITION)
        value = 2**66 + 2**40 + 5
        assert magnitude_to_decimal(to_bits(value), config) == str(value)

    def test_default_config(self) -> None:
        """Конфигурация по умолчанию"""
        assert DEFAULT_CONVERSION_CONFIG.native_safe_bits == NATIVE_SAFE_BITS
        assert DEFAULT_CONVERSION_CONFIG.high_bit_strategy is HighBitStrategy.DOUBLING


class TestConversionConfig:
    """Тесты для ConversionConfig"""

    @pytest.mark.parametrize("native_safe_bits", [0, -1, NATIVE_SAFE_BITS + 1])
    def test_invalid_native_safe_bits(self, native_safe_bits: int) -> None:
        """native_safe_bits вне [1, 62] вызывает ValueError"""
        with pytest.raises(ValueError, match="native_safe_bits must be in"):
            ConversionConfig(native_safe_bits=native_safe_bits)

    def test_frozen(self) -> None:
        """Конфигурация неизменяема"""
        config = ConversionConfig()
        with pytest.raises(AttributeError):
            config.native_safe_bits = 10  # type: ignore[misc]


# =============================================================================
# ТЕСТЫ ДВОИЧНОЙ СТРОКИ
# =============================================================================


class TestMagnitudeToBinaryString:
    """Тесты для magnitude_to_binary_string"""

    def test_significant_bits_only(self) -> None:
        """Только значащие биты"""
        assert magnitude_to_binary_string([0, 0, 1, 0, 1]) == "101"

    def test_zero(self) -> None:
        """Ноль даёт "0" """
        assert magnitude_to_binary_string([0, 0]) == "0"
        assert magnitude_to_binary_string([]) == "0"

    def test_matches_bin(self) -> None:
        """Совпадает с bin() для большого значения"""
        value = int("9" * 73)
        assert magnitude_to_binary_string(to_bits(value)) == bin(value)[2:]
