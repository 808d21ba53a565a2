"""
SignedInteger - Целое произвольной точности со знаком

Pydantic модель-значение: флаг знака + MSB-first двоичная magnitude.
Вся арифметика делегируется примитивам bigint.core.math.magnitude,
отображение - конвертерам bigint.core.math.conversion.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Magnitude всегда без ведущих нулей, [0] для нуля
2. Ноль всегда несёт положительный знак ("+0" ≡ "-0")
3. Нормализация выполняется при каждом создании и каждой in-place мутации
4. Копия никогда не разделяет список битов с оригиналом
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from bigint.core.contracts import validate_signed_integer
from bigint.core.math.conversion import (
    ConversionConfig,
    decimal_to_magnitude,
    magnitude_to_binary_string,
    magnitude_to_decimal,
)
from bigint.core.math.errors import InvalidDigit
from bigint.core.math.magnitude import (
    Magnitude,
    add_magnitudes,
    divide_magnitudes,
    is_greater,
    is_zero_magnitude,
    magnitudes_equal,
    multiply_magnitudes,
    subtract_magnitudes,
    trim_magnitude,
)

logger = logging.getLogger(__name__)

# Префикс отрицательного значения в десятичной и двоичной форме
NEGATIVE_PREFIX = "-"


# =============================================================================
# SIGNED INTEGER MODEL
# =============================================================================


class SignedInteger(BaseModel):
    """
    Целое со знаком произвольной длины.

    Создание:
    - SignedInteger.parse("-123") из десятичной строки (-?[0-9]+)
    - SignedInteger.from_parts(is_positive, bits) из знака и magnitude
    - SignedInteger.copy_of(other), copy.copy, copy.deepcopy

    Модель не frozen: составные присваивания (+=, -=, *=, /=) полностью
    пересчитывают знак и magnitude левого операнда на месте.
    """

    is_positive: bool = Field(default=True, description="Флаг знака (значим только для ненулевой magnitude)")
    magnitude: list[int] = Field(
        default_factory=lambda: [0], description="Двоичная magnitude, MSB-first"
    )

    model_config = {"frozen": False}

    @field_validator("magnitude")
    @classmethod
    def validate_binary_alphabet(cls, v: list[int]) -> list[int]:
        """Magnitude содержит только биты 0 и 1."""
        for bit in v:
            if bit not in (0, 1):
                raise ValueError(f"magnitude must contain only 0 and 1, got {bit!r}")
        return v

    @model_validator(mode="after")
    def normalize(self) -> "SignedInteger":
        """Удаление ведущих нулей и канонический знак нуля."""
        self.magnitude = trim_magnitude(self.magnitude)
        if is_zero_magnitude(self.magnitude):
            self.is_positive = True
        return self

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def from_parts(cls, is_positive: bool, magnitude: Magnitude) -> "SignedInteger":
        """Создание из явной пары (знак, magnitude)."""
        return cls(is_positive=is_positive, magnitude=list(magnitude))

    @classmethod
    def parse(cls, text: str) -> "SignedInteger":
        """
        Создание из десятичной строки.

        Формат: -?[0-9]+. Ведущие нули отбрасываются, "-0" даёт ноль
        с положительным знаком.

        Args:
            text: Десятичная строка

        Returns:
            Нормализованный SignedInteger

        Raises:
            InvalidDigit: Если строка пуста, состоит из одного '-' или
                содержит символ вне '0'..'9'

        Examples:
            >>> SignedInteger.parse("-007").to_decimal_string()
            '-7'
        """
        is_positive = not text.startswith(NEGATIVE_PREFIX)
        body = text if is_positive else text[len(NEGATIVE_PREFIX):]
        if not body:
            raise InvalidDigit(f"Expected at least one decimal digit, got {text!r}")

        return cls.from_parts(is_positive, decimal_to_magnitude(body))

    @classmethod
    def copy_of(cls, other: "SignedInteger") -> "SignedInteger":
        """Независимая копия (собственный список битов)."""
        return cls.from_parts(other.is_positive, other.magnitude)

    def __copy__(self) -> "SignedInteger":
        return self.copy_of(self)

    def __deepcopy__(self, memo: Optional[Dict[int, Any]] = None) -> "SignedInteger":
        return self.copy_of(self)

    def _assign(self, result: "SignedInteger") -> "SignedInteger":
        # Составное присваивание: значение пересчитывается целиком
        self.is_positive = result.is_positive
        self.magnitude = list(result.magnitude)
        return self

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return is_zero_magnitude(self.magnitude)

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __neg__(self) -> "SignedInteger":
        return SignedInteger.from_parts(not self.is_positive, self.magnitude)

    def __pos__(self) -> "SignedInteger":
        return self.copy_of(self)

    def __abs__(self) -> "SignedInteger":
        return SignedInteger.from_parts(True, self.magnitude)

    def __add__(self, other: "SignedInteger") -> "SignedInteger":
        """
        Сложение.

        Одинаковые знаки: сложение magnitude, знак сохраняется.
        Разные знаки: вычитание меньшей magnitude из большей, знак берётся
        у операнда с большей magnitude.
        """
        if not isinstance(other, SignedInteger):
            return NotImplemented

        if self.is_positive == other.is_positive:
            return SignedInteger.from_parts(
                self.is_positive, add_magnitudes(self.magnitude, other.magnitude)
            )

        if is_greater(self.magnitude, other.magnitude):
            is_positive = self.is_positive
        else:
            is_positive = other.is_positive

        return SignedInteger.from_parts(
            is_positive, subtract_magnitudes(self.magnitude, other.magnitude)
        )

    def __sub__(self, other: "SignedInteger") -> "SignedInteger":
        """Вычитание: a - b ≡ a + (-b)."""
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: "SignedInteger") -> "SignedInteger":
        """Умножение: знак положительный тогда и только тогда, когда знаки совпадают."""
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return SignedInteger.from_parts(
            self.is_positive == other.is_positive,
            multiply_magnitudes(self.magnitude, other.magnitude),
        )

    def __truediv__(self, other: "SignedInteger") -> "SignedInteger":
        """
        Деление с усечением к нулю.

        Остаток отбрасывается. Знак положительный тогда и только тогда,
        когда знаки совпадают.

        Raises:
            DivisionByZero: Если делитель равен нулю (в том числе 0 / 0)
        """
        if not isinstance(other, SignedInteger):
            return NotImplemented
        if other.is_zero():
            logger.debug("Division of %s by zero", self.to_decimal_string())
        return SignedInteger.from_parts(
            self.is_positive == other.is_positive,
            divide_magnitudes(self.magnitude, other.magnitude),
        )

    def __iadd__(self, other: "SignedInteger") -> "SignedInteger":
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self._assign(self + other)

    def __isub__(self, other: "SignedInteger") -> "SignedInteger":
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self._assign(self - other)

    def __imul__(self, other: "SignedInteger") -> "SignedInteger":
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self._assign(self * other)

    def __itruediv__(self, other: "SignedInteger") -> "SignedInteger":
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self._assign(self / other)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Равенство: нули равны независимо от знака, иначе совпадают знак и magnitude."""
        if not isinstance(other, SignedInteger):
            return NotImplemented
        if self.is_zero() and other.is_zero():
            return True
        return self.is_positive == other.is_positive and magnitudes_equal(
            self.magnitude, other.magnitude
        )

    def __gt__(self, other: "SignedInteger") -> bool:
        """
        Строгое "больше".

        Два нуля никогда не больше друг друга. Разные знаки решаются сразу
        (положительный > отрицательного). При одинаковых знаках сравниваются
        magnitude, для отрицательных сравнение инвертируется.
        """
        if not isinstance(other, SignedInteger):
            return NotImplemented
        if self.is_zero() and other.is_zero():
            return False
        if self.is_positive != other.is_positive:
            return self.is_positive
        if self.is_positive:
            return is_greater(self.magnitude, other.magnitude)
        return is_greater(other.magnitude, self.magnitude)

    def __lt__(self, other: "SignedInteger") -> bool:
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return other > self

    def __ge__(self, other: "SignedInteger") -> bool:
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self > other or self == other

    def __le__(self, other: "SignedInteger") -> bool:
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self < other or self == other

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def to_decimal_string(self, config: Optional[ConversionConfig] = None) -> str:
        """
        Каноническая десятичная строка.

        Без ведущих нулей, "0" для нуля, '-' только для строго
        отрицательных значений.
        """
        if self.is_zero():
            return "0"
        prefix = "" if self.is_positive else NEGATIVE_PREFIX
        return prefix + magnitude_to_decimal(self.magnitude, config)

    def to_binary_string(self) -> str:
        """Значащие биты MSB-first с тем же соглашением о знаке; "0" для нуля."""
        if self.is_zero():
            return "0"
        prefix = "" if self.is_positive else NEGATIVE_PREFIX
        return prefix + magnitude_to_binary_string(self.magnitude)

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return f"SignedInteger({self.to_decimal_string()!r})"

    def __int__(self) -> int:
        return int(self.to_decimal_string())

    # -------------------------------------------------------------------------
    # Контракт сериализации
    # -------------------------------------------------------------------------

    def to_contract(self) -> Dict[str, str]:
        """
        Сериализация в документ signed_integer контракта.

        Returns:
            {"sign": "+"|"-", "magnitude": "<bits>", "decimal": "<decimal>"}
        """
        return {
            "sign": "+" if self.is_positive else NEGATIVE_PREFIX,
            "magnitude": magnitude_to_binary_string(self.magnitude),
            "decimal": self.to_decimal_string(),
        }

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "SignedInteger":
        """
        Десериализация документа signed_integer контракта.

        Args:
            data: Документ контракта

        Returns:
            SignedInteger

        Raises:
            ValidationError (jsonschema): Если документ не соответствует схеме
            ValueError: Если поле decimal не совпадает со значением magnitude
        """
        validate_signed_integer(data)

        value = cls.from_parts(
            data["sign"] == "+",
            [1 if char == "1" else 0 for char in data["magnitude"]],
        )

        if "decimal" in data and cls.parse(data["decimal"]) != value:
            logger.debug(
                "Contract mismatch: decimal=%s, magnitude=%s", data["decimal"], data["magnitude"]
            )
            raise ValueError(
                f"decimal {data['decimal']!r} does not match magnitude "
                f"{data['sign']}{data['magnitude']}"
            )

        return value
