"""
BigDecimal — Десятичное число произвольной точности

Immutable value type: value = digits × 10^(-scale), где digits — Python int
произвольной точности, scale — int (может быть отрицательным).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каноническая форма: digits == 0 → scale == 0; иначе digits не делится на 10
2. Два канонических значения равны математически ⟺ пары (digits, scale) равны
3. Экземпляр не изменяется после конструктора; каждая операция возвращает новое значение
4. Все пути конструирования проходят через normalize()

Арифметика точная (add/sub/mul/rem/half). Деление округляет до
max_places десятичных знаков по правилу half-away-from-zero.
"""

import math
import sys
from collections.abc import Mapping
from typing import Any, Final, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic_core import core_schema

from bigdecimal.core.contracts import schema_for_json
from bigdecimal.core.domain.components import DecimalComponents, coerce_components
from bigdecimal.core.domain.formatting import (
    format_canonical,
    format_exponential,
    format_fixed,
)
from bigdecimal.core.domain.identity import (
    BIGDECIMAL_MARKER_ATTR,
    BIGDECIMAL_MARKER_VERSION,
    DecimalIdentityMeta,
    PrimitiveHint,
    is_big_decimal,
)
from bigdecimal.core.errors import DecimalError, DivisionByZero, InvalidArgument
from bigdecimal.core.math.integers import cmp_int, div_rem, pow10, sign_of
from bigdecimal.core.math.rounding import (
    DEFAULT_DIV_PLACES,
    ScaledDigits,
    long_divide,
    round_digits,
    rounding_term,
    validate_places,
)

DecimalLike = Union["BigDecimal", DecimalComponents, Mapping[str, int], str, int, float]

# Модуль хеширования числовых типов CPython (hash(BigDecimal) == hash(равного int/float))
_HASH_MODULUS: Final[int] = sys.hash_info.modulus


# =============================================================================
# НОРМАЛИЗАЦИЯ И ВЫРАВНИВАНИЕ
# =============================================================================


def normalize(digits: int, scale: int) -> ScaledDigits:
    """
    Приведение пары (digits, scale) к канонической форме.

    Examples:
        >>> normalize(3000, 0)
        ScaledDigits(digits=3, scale=-3)
        >>> normalize(0, 7)
        ScaledDigits(digits=0, scale=0)
    """
    if digits == 0:
        return ScaledDigits(0, 0)

    while True:
        quotient, remainder = divmod(digits, 10)
        if remainder != 0:
            break
        digits = quotient
        scale -= 1

    return ScaledDigits(digits, scale)


def align(
    left_digits: int, left_scale: int, right_digits: int, right_scale: int
) -> tuple[int, int, int]:
    """
    Приведение двух пар к общему (большему) scale.

    Returns:
        (left_digits', right_digits', common_scale)
    """
    if left_scale < right_scale:
        return left_digits * pow10(right_scale - left_scale), right_digits, right_scale
    if left_scale > right_scale:
        return left_digits, right_digits * pow10(left_scale - right_scale), left_scale
    return left_digits, right_digits, left_scale


def _serialize(value: "BigDecimal") -> str:
    return value.to_json()


# =============================================================================
# BIGDECIMAL
# =============================================================================


class BigDecimal(metaclass=DecimalIdentityMeta):
    """
    Десятичное число произвольной точности.

    Конструирование:
        BigDecimal(digits: int, scale: int) — явная пара
        BigDecimal(value: DecimalLike)      — из str/int/float/записи/BigDecimal

    Examples:
        >>> BigDecimal(-101, 2)
        BigDecimal('-1.01')
        >>> BigDecimal("0.1") + BigDecimal("0.2") == BigDecimal("0.3")
        True
        >>> BigDecimal(2).div(3, 5)
        BigDecimal('0.66667')
    """

    __slots__ = ("_digits", "_scale", "__bigdecimal__")

    def __init__(self, value: DecimalLike, scale: int | None = None):
        if scale is not None:
            if isinstance(scale, bool) or not isinstance(scale, int):
                raise InvalidArgument("Argument 'scale' must be an integer")
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgument("Argument 'digits' must be an arbitrary-precision integer")
            digits = value
        else:
            digits, scale = coerce_components(value)

        digits, scale = normalize(digits, scale)

        object.__setattr__(self, "_digits", digits)
        object.__setattr__(self, "_scale", scale)
        object.__setattr__(self, BIGDECIMAL_MARKER_ATTR, BIGDECIMAL_MARKER_VERSION)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"BigDecimal is immutable, cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"BigDecimal is immutable, cannot delete '{name}'")

    def __reduce__(self):
        return (type(self), (self._digits, self._scale))

    # -------------------------------------------------------------------------
    # Компоненты
    # -------------------------------------------------------------------------

    @property
    def digits(self) -> int:
        """Значащие цифры (каноническая форма)."""
        return self._digits

    @property
    def scale(self) -> int:
        """Степень десяти, на которую делятся digits."""
        return self._scale

    @property
    def dp(self) -> int:
        """Количество десятичных знаков: max(scale, 0)."""
        return self._scale if self._scale > 0 else 0

    @property
    def sign(self) -> int:
        """Знак: -1, 0 или 1."""
        return sign_of(self._digits)

    def to_components(self) -> DecimalComponents:
        """Структурная запись (digits, scale)."""
        return DecimalComponents(digits=self._digits, scale=self._scale)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_integer(self) -> bool:
        return self._scale <= 0

    def is_negative(self) -> bool:
        return self._digits < 0

    def is_positive(self) -> bool:
        return self._digits > 0

    def is_zero(self) -> bool:
        return self._digits == 0

    def is_one(self) -> bool:
        return self._scale == 0 and self._digits == 1

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def equals(self, other: DecimalLike) -> bool:
        """Математическое равенство (через канонические пары)."""
        digits, scale = normalize(*coerce_components(other))
        return self._digits == digits and self._scale == scale

    def compare(self, other: DecimalLike) -> int:
        """
        Порядок этого значения относительно other.

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other
        """
        n = BigDecimal(other)

        s1 = self.sign
        s2 = n.sign

        if s1 == 0 or s2 == 0:
            return s1 if s1 != 0 else -s2

        if s1 != s2:
            return s1

        left, right, _ = align(self._digits, self._scale, n._digits, n._scale)
        return cmp_int(left, right)

    def lt(self, other: DecimalLike) -> bool:
        return self.compare(other) < 0

    def le(self, other: DecimalLike) -> bool:
        return self.compare(other) <= 0

    def gt(self, other: DecimalLike) -> bool:
        return self.compare(other) > 0

    def ge(self, other: DecimalLike) -> bool:
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def negate(self) -> "BigDecimal":
        return BigDecimal(-self._digits, self._scale)

    def abs(self) -> "BigDecimal":
        return self.negate() if self.is_negative() else self

    def add(self, other: DecimalLike) -> "BigDecimal":
        rd, rs = coerce_components(other)
        left, right, scale = align(self._digits, self._scale, rd, rs)
        return BigDecimal(left + right, scale)

    def sub(self, other: DecimalLike) -> "BigDecimal":
        rd, rs = coerce_components(other)
        left, right, scale = align(self._digits, self._scale, rd, rs)
        return BigDecimal(left - right, scale)

    def mul(self, other: DecimalLike) -> "BigDecimal":
        rd, rs = coerce_components(other)
        return BigDecimal(self._digits * rd, self._scale + rs)

    def div(self, other: DecimalLike, max_places: int = DEFAULT_DIV_PLACES) -> "BigDecimal":
        """
        Деление с ограничением точности.

        Результат округляется до max_places десятичных знаков
        (half-away-from-zero), если точное частное длиннее.

        Args:
            other: Делитель
            max_places: Максимум десятичных знаков результата (default: 20)

        Raises:
            DivisionByZero: Если делитель равен 0
            DecimalRangeError: Если max_places < 0
        """
        max_places = validate_places(max_places, "max_places")

        n = BigDecimal(other)
        if n.is_zero():
            raise DivisionByZero()
        if self.is_zero() or n.is_one():
            return self

        scale = self._scale - n._scale
        if abs(self._digits) == abs(n._digits):
            return BigDecimal(1 if self._digits == n._digits else -1, scale)

        digits, scale = long_divide(self._digits, n._digits, scale, max_places)
        return BigDecimal(digits, scale)

    def rem(self, other: DecimalLike) -> "BigDecimal":
        """
        Остаток от деления с усечением частного к нулю (знак = знак делимого).

        Raises:
            DivisionByZero: Если делитель равен 0
        """
        rd, rs = coerce_components(other)
        if rd == 0:
            raise DivisionByZero()

        left, right, scale = align(self._digits, self._scale, rd, rs)
        _, remainder = div_rem(left, right)
        return BigDecimal(remainder, scale)

    def half(self) -> "BigDecimal":
        """Деление на 2 без общего алгоритма деления: x/2 = 5x/10 для нечётных."""
        if self.is_zero():
            return self
        if self._digits % 2 == 0:
            return BigDecimal(self._digits // 2, self._scale)
        return BigDecimal(self._digits * 5, self._scale + 1)

    # -------------------------------------------------------------------------
    # Округление и конверсии
    # -------------------------------------------------------------------------

    def round_to_places(self, dp: int) -> "BigDecimal":
        """
        Округление до dp десятичных знаков (half-away-from-zero).

        Examples:
            >>> BigDecimal("1.25").round_to_places(1)
            BigDecimal('1.3')
            >>> BigDecimal("1.24").round_to_places(1)
            BigDecimal('1.2')
        """
        dp = validate_places(dp, "dp")

        if dp >= self._scale:
            return self

        digits, scale = round_digits(self._digits, self._scale, dp)
        return BigDecimal(digits, scale)

    def to_int(self) -> int:
        """Ближайшее целое (half-away-from-zero)."""
        if self._scale <= 0:
            return self._digits * pow10(-self._scale)

        factor = pow10(self._scale)
        quotient, remainder = div_rem(self._digits, factor)
        return quotient + rounding_term(remainder, factor)

    def to_float(self) -> float:
        """Ближайший binary64 float (с потерей точности)."""
        return float(self.to_string())

    def to_primitive(self, hint: PrimitiveHint | str = PrimitiveHint.DEFAULT) -> str | float:
        """
        Приведение к примитиву по контексту.

        Args:
            hint: "string"/"default" → str, "number" → float

        Raises:
            InvalidArgument: Если hint неизвестен
        """
        if PrimitiveHint.coerce(hint) is PrimitiveHint.NUMBER:
            return self.to_float()
        return self.to_string()

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        return format_canonical(self._digits, self._scale)

    def to_fixed(self, dp: int = 0) -> str:
        """Fixed-point строка с ровно dp знаками после точки."""
        return format_fixed(self._digits, self._scale, dp)

    def to_exponential(self, dp: int | None = None) -> str:
        """Экспоненциальная строка d.dddde±N."""
        return format_exponential(self._digits, self._scale, dp)

    def to_json(self) -> str:
        """Каноническая строка для JSON экспорта."""
        return self.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigDecimal('{self.to_string()}')"

    # -------------------------------------------------------------------------
    # Протоколы Python
    # -------------------------------------------------------------------------

    @staticmethod
    def _operand(other: Any) -> bool:
        if isinstance(other, bool):
            return False
        return is_big_decimal(other) or isinstance(other, (int, float, DecimalComponents))

    def __eq__(self, other: object) -> bool:
        if not self._operand(other):
            return NotImplemented
        if isinstance(other, float) and not math.isfinite(other):
            return False
        return self.equals(other)

    def __hash__(self) -> int:
        # Числовой хеш CPython: digits × 10^(-scale) по модулю P
        value = abs(self._digits) * pow(10, -self._scale, _HASH_MODULUS) % _HASH_MODULUS
        if self._digits < 0:
            value = -value
        return -2 if value == -1 else value

    def __lt__(self, other: object) -> bool:
        if not self._operand(other):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: object) -> bool:
        if not self._operand(other):
            return NotImplemented
        return self.le(other)

    def __gt__(self, other: object) -> bool:
        if not self._operand(other):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: object) -> bool:
        if not self._operand(other):
            return NotImplemented
        return self.ge(other)

    def __neg__(self) -> "BigDecimal":
        return self.negate()

    def __pos__(self) -> "BigDecimal":
        return self

    def __abs__(self) -> "BigDecimal":
        return self.abs()

    def __add__(self, other: object) -> "BigDecimal":
        if not self._operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> "BigDecimal":
        if not self._operand(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "BigDecimal":
        if not self._operand(other):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: object) -> "BigDecimal":
        if not self._operand(other):
            return NotImplemented
        return BigDecimal(other).sub(self)

    def __mul__(self, other: object) -> "BigDecimal":
        if not self._operand(other):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: object) -> "BigDecimal":
        if not self._operand(other):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object) -> "BigDecimal":
        if not self._operand(other):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: object) -> "BigDecimal":
        if not self._operand(other):
            return NotImplemented
        return BigDecimal(other).div(self)

    def __mod__(self, other: object) -> "BigDecimal":
        if not self._operand(other):
            return NotImplemented
        return self.rem(other)

    def __rmod__(self, other: object) -> "BigDecimal":
        if not self._operand(other):
            return NotImplemented
        return BigDecimal(other).rem(self)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        # int() усекает к нулю, как у float и decimal.Decimal; to_int() округляет
        if self._scale <= 0:
            return self._digits * pow10(-self._scale)
        quotient, _ = div_rem(self._digits, pow10(self._scale))
        return quotient

    def __float__(self) -> float:
        return self.to_float()

    def __round__(self, ndigits: int | None = None) -> "int | BigDecimal":
        """
        round(x) → int, round(x, n) → BigDecimal (half-away-from-zero).

        Отрицательный n округляет до 10^(-n), как round() для int и float:
        round(BigDecimal("1250"), -2) == BigDecimal("1300").
        """
        if ndigits is None:
            return self.to_int()
        if isinstance(ndigits, int) and not isinstance(ndigits, bool) and ndigits < 0:
            digits, scale = round_digits(self._digits, self._scale, ndigits)
            return BigDecimal(digits, scale)
        return self.round_to_places(ndigits)

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def _validate(cls, value: Any) -> "BigDecimal":
        if type(value) is cls:
            return value
        try:
            return cls(value)
        except DecimalError as err:
            raise ValueError(str(err)) from err

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize, info_arg=False, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> dict[str, Any]:
        if handler.mode == "serialization":
            return schema_for_json("decimal_string")
        return {"anyOf": [schema_for_json("decimal_literal"), {"type": "number"}]}
