"""
DecimalComponents — Структурная запись (digits, scale) и приведение DecimalLike

DecimalLike — любой из входов, допускаемых конструкторами и операциями:
- BigDecimal (любой копии пакета)
- DecimalComponents / Mapping / объект с полями digits: int и scale: int
- int (целое произвольной точности)
- float (конечный)
- str (десятичный литерал)

coerce_components сводит любой DecimalLike к ненормализованной паре
(digits, scale). Нормализацию выполняет конструктор BigDecimal.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from bigdecimal.core.domain.identity import is_big_decimal
from bigdecimal.core.domain.parse import ParsedDecimal, parse_decimal_literal
from bigdecimal.core.errors import DecimalParseError, DecimalRangeError, InvalidArgument
from bigdecimal.core.math.integers import MAX_SAFE_INTEGER

logger = logging.getLogger(__name__)


# =============================================================================
# STRUCTURAL RECORD
# =============================================================================


class DecimalComponents(BaseModel):
    """
    Структурная запись десятичного значения: value = digits × 10^(-scale).

    Immutable модель (frozen=True). Типы строгие: bool и строки с цифрами
    не принимаются ни для digits, ни для scale.
    """

    digits: int = Field(..., strict=True, description="Значащие цифры (знаковое целое)")
    scale: int = Field(..., strict=True, description="Степень десяти делителя (может быть < 0)")

    model_config = {"frozen": True}


def _looks_like_record(value: Any) -> bool:
    if isinstance(value, Mapping):
        return "digits" in value and "scale" in value
    return hasattr(value, "digits") and hasattr(value, "scale")


def _record_components(value: Any) -> ParsedDecimal | None:
    try:
        record = DecimalComponents.model_validate(
            value, from_attributes=not isinstance(value, Mapping)
        )
    except ValidationError:
        return None
    return ParsedDecimal(record.digits, record.scale)


# =============================================================================
# COERCION
# =============================================================================


def float_components(value: float) -> ParsedDecimal:
    """
    Пара (digits, scale) для конечного float.

    Точные safe-целые берутся напрямую, остальные значения разбираются
    из кратчайшего round-trip представления (repr).

    Raises:
        DecimalRangeError: Если value — NaN или бесконечность
    """
    if not math.isfinite(value):
        raise DecimalRangeError(f"BigDecimal must be finite: {value}")

    if value.is_integer() and abs(value) <= MAX_SAFE_INTEGER:
        return ParsedDecimal(int(value), 0)

    return parse_decimal_literal(repr(value))


def coerce_components(value: Any) -> ParsedDecimal:
    """
    Приведение DecimalLike к ненормализованной паре (digits, scale).

    Args:
        value: Любой DecimalLike

    Returns:
        ParsedDecimal(digits, scale)

    Raises:
        DecimalParseError: Некорректный строковый литерал
        DecimalRangeError: Бесконечный/NaN float
        InvalidArgument: Неподдерживаемый тип входа
    """
    if not isinstance(value, bool):
        if is_big_decimal(value):
            return ParsedDecimal(value.digits, value.scale)

        if isinstance(value, DecimalComponents):
            return ParsedDecimal(value.digits, value.scale)

        if isinstance(value, int):
            return ParsedDecimal(value, 0)

        if isinstance(value, float):
            return float_components(value)

        if isinstance(value, str):
            return parse_decimal_literal(value)

        if _looks_like_record(value):
            components = _record_components(value)
            if components is not None:
                return components

    # Неподдерживаемый тип: последняя попытка через строковое представление
    text = str(value)
    logger.debug("Coercing %s to BigDecimal via str(): %r", type(value).__name__, text)
    try:
        return parse_decimal_literal(text)
    except DecimalParseError as err:
        raise InvalidArgument(f"Cannot convert '{text}' to a BigDecimal") from err
