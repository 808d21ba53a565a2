"""
Core math modules для bigint

Беззнаковая двоичная арифметика и десятичная конверсия без опоры
на нативную арифметику фиксированной ширины.
"""

# Errors
from bigint.core.math.errors import (
    BigIntError,
    DigitOutOfRange,
    DivisionByZero,
    InvalidDigit,
    OffsetOutOfRange,
)

# Digit Codec
from bigint.core.math.digits import (
    DECIMAL_BASE,
    MAX_DIGIT,
    add_decimal_strings,
    char_of,
    digit_of,
    double_decimal_string,
)

# Magnitude primitives
from bigint.core.math.magnitude import (
    Magnitude,
    add_magnitudes,
    can_divide,
    divide_magnitudes,
    divmod_magnitudes,
    is_greater,
    is_zero_magnitude,
    magnitudes_equal,
    multiply_magnitudes,
    shift_left,
    subtract_magnitudes,
    trim_magnitude,
)

# Decimal ⇄ Binary conversion
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

__all__ = [
    # Errors
    "BigIntError",
    "DigitOutOfRange",
    "DivisionByZero",
    "InvalidDigit",
    "OffsetOutOfRange",
    # Digit Codec - Constants
    "DECIMAL_BASE",
    "MAX_DIGIT",
    # Digit Codec - Functions
    "add_decimal_strings",
    "char_of",
    "digit_of",
    "double_decimal_string",
    # Magnitude - Types
    "Magnitude",
    # Magnitude - Functions
    "add_magnitudes",
    "can_divide",
    "divide_magnitudes",
    "divmod_magnitudes",
    "is_greater",
    "is_zero_magnitude",
    "magnitudes_equal",
    "multiply_magnitudes",
    "shift_left",
    "subtract_magnitudes",
    "trim_magnitude",
    # Conversion - Constants
    "DEFAULT_CONVERSION_CONFIG",
    "NATIVE_SAFE_BITS",
    # Conversion - Types
    "ConversionConfig",
    "HighBitStrategy",
    # Conversion - Functions
    "decimal_to_magnitude",
    "magnitude_to_binary_string",
    "magnitude_to_decimal",
    "power_of_two",
]
