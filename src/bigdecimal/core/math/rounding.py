"""
Rounding & Long Division — Округление и деление значащих цифр

Модуль реализует алгоритмы над парой (digits, scale), где
value = digits × 10^(-scale):
- rounding_term: поправка округления half-away-from-zero
- round_digits: отбрасывание младших десятичных разрядов с округлением
- long_divide: деление в столбик с ограничением числа десятичных знаков

ПРАВИЛО ОКРУГЛЕНИЯ:
    Смотрится первая десятичная цифра отброшенной дроби |remainder / denominator|.
    Цифра >= 5 → модуль частного увеличивается на 1 (от нуля), иначе без изменений.
    1.25 → 1.3, 1.24 → 1.2, -1.25 → -1.3 (не banker's rounding).

ЗАМЕЧАНИЕ О ПРОИЗВОДИТЕЛЬНОСТИ:
    Значащие цифры растут без ограничений при цепочках умножений.
    Это вопрос производительности, а не корректности; деление ограничено
    max_places (по умолчанию 20), чтобы не раздувать точность.
"""

from typing import Final, NamedTuple

from bigdecimal.core.errors import DecimalRangeError, InvalidArgument
from bigdecimal.core.math.integers import div_rem, pow10

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимум десятичных знаков результата деления по умолчанию
DEFAULT_DIV_PLACES: Final[int] = 20


class ScaledDigits(NamedTuple):
    """Пара (digits, scale) без нормализации."""

    digits: int
    scale: int


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_places(places: int, name: str = "dp") -> int:
    """
    Проверка аргумента "количество десятичных знаков".

    Args:
        places: Количество знаков
        name: Имя аргумента (для сообщения об ошибке)

    Returns:
        places без изменений

    Raises:
        InvalidArgument: Если places не целое (bool тоже не допускается)
        DecimalRangeError: Если places < 0
    """
    if isinstance(places, bool) or not isinstance(places, int):
        raise InvalidArgument(f"Argument '{name}' must be an integer, got {places!r}")

    if places < 0:
        raise DecimalRangeError(f"Argument '{name}' must be >= 0")

    return places


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def rounding_term(remainder: int, denominator: int) -> int:
    """
    Поправка округления half-away-from-zero для отброшенной дроби.

    Args:
        remainder: Остаток от усекающего деления (знак = знак числителя)
        denominator: Делитель, давший этот остаток

    Returns:
        -1, 0 или 1 — прибавляется к усечённому частному

    Examples:
        >>> rounding_term(5, 10)    # 0.5
        1
        >>> rounding_term(-5, 10)   # -0.5
        -1
        >>> rounding_term(5, 100)   # 0.05
        0
        >>> rounding_term(2, 3)     # 0.66...
        1
    """
    if remainder == 0:
        return 0

    # Первая цифра дроби |remainder| / |denominator|
    leading_digit = abs(remainder) * 10 // abs(denominator)
    if leading_digit < 5:
        return 0

    return -1 if (remainder < 0) != (denominator < 0) else 1


def round_digits(digits: int, scale: int, places: int) -> ScaledDigits:
    """
    Округление (digits, scale) до places десятичных знаков.

    Если точность уже не превышает places, пара возвращается как есть.

    Args:
        digits: Значащие цифры
        scale: Текущий scale
        places: Целевое количество десятичных знаков (>= 0)

    Returns:
        ScaledDigits со scale == places (или исходная пара)
    """
    if places >= scale:
        return ScaledDigits(digits, scale)

    factor = pow10(scale - places)
    quotient, remainder = div_rem(digits, factor)
    return ScaledDigits(quotient + rounding_term(remainder, factor), places)


# =============================================================================
# ДЕЛЕНИЕ В СТОЛБИК
# =============================================================================


def long_divide(numerator: int, denominator: int, scale: int, max_places: int) -> ScaledDigits:
    """
    Деление значащих цифр в столбик с ограничением точности.

    Результат совпадает с точным частным, округлённым до max_places
    десятичных знаков по правилу half-away-from-zero.

    Алгоритм:
        1. Знак результата = XOR знаков, дальше работаем с модулями
        2. Домножаем numerator на 10, пока он меньше denominator (scale += 1)
        3. Первое деление с остатком
        4a. scale > max_places: отбрасываем цифры частного до scale == max_places
        4b. иначе: дописываем цифры частного, пока остаток != 0 и scale < max_places
        5. Округление по первой отброшенной цифре, восстановление знака

    Args:
        numerator: Значащие цифры делимого
        denominator: Значащие цифры делителя (ненулевые)
        scale: scale делимого минус scale делителя
        max_places: Максимум десятичных знаков результата

    Returns:
        ScaledDigits (не нормализованная пара)
    """
    if numerator == 0:
        return ScaledDigits(0, 0)

    negative = (numerator < 0) != (denominator < 0)
    numerator = abs(numerator)
    denominator = abs(denominator)

    # Выравниваем numerator, чтобы первая цифра частного была ненулевой
    while numerator < denominator:
        numerator *= 10
        scale += 1

    quotient, remainder = div_rem(numerator, denominator)

    if scale > max_places:
        while scale > max_places:
            quotient, remainder = div_rem(quotient, 10)
            scale -= 1

        # remainder — старшая отброшенная цифра
        quotient += rounding_term(remainder, 10)
    else:
        remainder *= 10

        while remainder != 0 and scale < max_places:
            digit, remainder = div_rem(remainder, denominator)
            quotient = quotient * 10 + digit
            remainder *= 10
            scale += 1

        # remainder здесь уже домножен на 10
        quotient += rounding_term(remainder, denominator * 10)

    return ScaledDigits(-quotient if negative else quotient, scale)
