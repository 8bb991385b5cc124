"""
Integer Utilities — Примитивы над целыми произвольной точности

Модуль содержит низкоуровневые операции над Python int, на которых
построена вся десятичная арифметика:
- Строгий парсинг целых чисел из строки (без пробелов и разделителей)
- Деление с остатком с усечением к нулю (truncating division)
- Знак и сравнение целых

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. div_rem усекает частное к нулю, остаток имеет знак числителя (или 0)
2. parse_strict_integer принимает только [+-]?[0-9]+ (ASCII)
3. Все функции чистые и детерминированы
"""

import re
from typing import Final

from bigdecimal.core.errors import DivisionByZero, IntegerParseError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Грамматика строгого целого: опциональный знак и хотя бы одна ASCII цифра
STRICT_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+", re.ASCII)

# Максимальное целое, точно представимое в binary64 (2^53 - 1)
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1

# Длина фрагмента при конверсии int <-> str (лимит интерпретатора: 4300 цифр)
CONVERSION_CHUNK_DIGITS: Final[int] = 4000

_CONVERSION_CHUNK_BASE: Final[int] = 10**CONVERSION_CHUNK_DIGITS


# =============================================================================
# ПАРСИНГ
# =============================================================================


def is_strict_integer(text: str) -> bool:
    """Проверка, соответствует ли строка грамматике строгого целого."""
    return STRICT_INTEGER_PATTERN.fullmatch(text) is not None


def parse_strict_integer(text: str) -> int:
    """
    Строгий парсинг целого числа произвольной точности.

    В отличие от int(), не допускает пробелы, подчёркивания и не-ASCII цифры.

    Args:
        text: Строка вида [+-]?[0-9]+

    Returns:
        Распарсенное целое

    Raises:
        IntegerParseError: Если строка не соответствует грамматике

    Examples:
        >>> parse_strict_integer("-0042")
        -42
        >>> parse_strict_integer("1_000")
        Traceback (most recent call last):
        ...
        IntegerParseError: Cannot parse integer: 1_000
    """
    if not is_strict_integer(text):
        raise IntegerParseError(text)

    magnitude = int_from_digits(text.lstrip("+-"))
    return -magnitude if text.startswith("-") else magnitude


def int_from_digits(text: str) -> int:
    """
    Целое из строки ASCII цифр без знака любой длины.

    Длинные строки разбираются пополам рекурсивно, чтобы ни один вызов
    int() не превышал лимит интерпретатора на конверсию str -> int.
    """
    if len(text) <= CONVERSION_CHUNK_DIGITS:
        return int(text)

    split = len(text) // 2
    low_text = text[split:]
    return int_from_digits(text[:split]) * pow10(len(low_text)) + int_from_digits(low_text)


def int_to_digits(value: int) -> str:
    """
    Десятичная запись модуля целого любой длины.

    Examples:
        >>> int_to_digits(-120)
        '120'
        >>> len(int_to_digits(10**5000))
        5001
    """
    value = abs(value)
    if value < _CONVERSION_CHUNK_BASE:
        return str(value)

    chunks = []
    while value >= _CONVERSION_CHUNK_BASE:
        value, low = divmod(value, _CONVERSION_CHUNK_BASE)
        chunks.append(str(low).zfill(CONVERSION_CHUNK_DIGITS))
    chunks.append(str(value))

    return "".join(reversed(chunks))


# =============================================================================
# ДЕЛЕНИЕ И СРАВНЕНИЕ
# =============================================================================


def div_rem(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Деление с остатком с усечением к нулю.

    Python // и % округляют к минус бесконечности, здесь же частное
    усекается к нулю (как у машинного деления), а остаток наследует
    знак числителя.

    Args:
        numerator: Числитель
        denominator: Знаменатель (ненулевой)

    Returns:
        (quotient, remainder), где numerator == quotient * denominator + remainder

    Raises:
        DivisionByZero: Если denominator == 0

    Examples:
        >>> div_rem(7, 2)
        (3, 1)
        >>> div_rem(-7, 2)
        (-3, -1)
        >>> div_rem(7, -2)
        (-3, 1)
    """
    if denominator == 0:
        raise DivisionByZero()

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient

    return quotient, numerator - quotient * denominator


def sign_of(value: int) -> int:
    """Знак целого: -1, 0 или 1."""
    if value == 0:
        return 0
    return -1 if value < 0 else 1


def cmp_int(x: int, y: int) -> int:
    """
    Полный порядок над целыми.

    Returns:
        -1 если x < y, 0 если x == y, 1 если x > y
    """
    if x == y:
        return 0
    return -1 if x < y else 1


def pow10(exponent: int) -> int:
    """10 в неотрицательной степени."""
    return 10**exponent
