"""
Decimal String Parser — Разбор десятичных литералов

Преобразует литерал вида [+-]?digits[.digits][(e|E)[+-]?digits] в пару
(digits, scale), где value = digits × 10^(-scale).

Пробелы, подчёркивания и разделители групп разрядов не допускаются.
Нормализация (удаление хвостовых нулей) здесь НЕ выполняется.
"""

from typing import NamedTuple

from bigdecimal.core.errors import DecimalParseError, ParseFailure
from bigdecimal.core.math.integers import is_strict_integer, parse_strict_integer


class ParsedDecimal(NamedTuple):
    """Результат парсинга: ненормализованная пара (digits, scale)."""

    digits: int
    scale: int


def _find_exponent_marker(text: str) -> int:
    lower = text.find("e")
    upper = text.find("E")
    if lower == -1:
        return upper
    if upper == -1:
        return lower
    return min(lower, upper)


def parse_decimal_literal(text: str) -> ParsedDecimal:
    """
    Парсинг десятичного литерала в (digits, scale).

    Args:
        text: Литерал, например "-123.456e-7", ".5", "10."

    Returns:
        ParsedDecimal(digits, scale), scale = (длина дробной части) - exponent

    Raises:
        DecimalParseError: С причиной EMPTY_EXPONENT, INVALID_EXPONENT,
            EMPTY_MANTISSA или INVALID_DIGITS

    Examples:
        >>> parse_decimal_literal("123.456e789")
        ParsedDecimal(digits=123456, scale=-786)
        >>> parse_decimal_literal(".050")
        ParsedDecimal(digits=50, scale=3)
    """
    mantissa = text
    exponent = 0

    marker = _find_exponent_marker(text)
    if marker != -1:
        mantissa = text[:marker]
        exponent_text = text[marker + 1 :]

        if not exponent_text:
            raise DecimalParseError(text, ParseFailure.EMPTY_EXPONENT)
        if not is_strict_integer(exponent_text):
            raise DecimalParseError(exponent_text, ParseFailure.INVALID_EXPONENT)

        exponent = parse_strict_integer(exponent_text)

    if not mantissa:
        raise DecimalParseError(text, ParseFailure.EMPTY_MANTISSA)

    digit_text = mantissa
    fraction_length = 0

    point = mantissa.find(".")
    if point != -1:
        fraction = mantissa[point + 1 :]
        digit_text = mantissa[:point] + fraction
        fraction_length = len(fraction)

    # Вторая точка остаётся в digit_text и отсекается грамматикой целого
    if not is_strict_integer(digit_text):
        raise DecimalParseError(digit_text, ParseFailure.INVALID_DIGITS)

    return ParsedDecimal(parse_strict_integer(digit_text), fraction_length - exponent)
