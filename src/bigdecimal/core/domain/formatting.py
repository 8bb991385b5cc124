"""
Formatter — Строковые представления пары (digits, scale)

Три формы, все locale-независимые (только ASCII цифры):
- canonical:   "-12.345", "0.001", "1000" (без округления)
- fixed:       ровно dp знаков после точки, с округлением half-away-from-zero
- exponential: "d.ddde+N" с одной ненулевой цифрой до точки
"""

from bigdecimal.core.math.integers import div_rem, int_to_digits, pow10
from bigdecimal.core.math.rounding import round_digits, rounding_term, validate_places


def _split_digits(magnitude: str, scale: int) -> tuple[str, str]:
    """Разбиение строки цифр модуля на целую и дробную части."""
    length = len(magnitude)

    if scale >= length:
        return "0", "0" * (scale - length) + magnitude

    if scale < 0:
        return magnitude + "0" * -scale, ""

    point = length - scale
    return magnitude[:point], magnitude[point:]


def _join(negative: bool, integer_part: str, fraction_part: str) -> str:
    text = f"{integer_part}.{fraction_part}" if fraction_part else integer_part
    return f"-{text}" if negative else text


def format_canonical(digits: int, scale: int) -> str:
    """
    Каноническая строка без округления.

    Examples:
        >>> format_canonical(-101, 2)
        '-1.01'
        >>> format_canonical(3, -3)
        '3000'
        >>> format_canonical(1, 3)
        '0.001'
    """
    integer_part, fraction_part = _split_digits(int_to_digits(digits), scale)
    return _join(digits < 0, integer_part, fraction_part)


def format_fixed(digits: int, scale: int, dp: int = 0) -> str:
    """
    Fixed-point строка с ровно dp десятичными знаками.

    Args:
        digits: Значащие цифры
        scale: scale
        dp: Количество десятичных знаков (>= 0)

    Returns:
        Строка, дробная часть дополнена нулями справа до dp

    Raises:
        DecimalRangeError: Если dp < 0

    Examples:
        >>> format_fixed(123456789, 7, 5)
        '12.34568'
        >>> format_fixed(0, 0, 5)
        '0.00000'
    """
    dp = validate_places(dp, "dp")

    digits, scale = round_digits(digits, scale, dp)

    integer_part, fraction_part = _split_digits(int_to_digits(digits), scale)
    fraction_part = fraction_part.ljust(dp, "0")

    return _join(digits < 0, integer_part, fraction_part)


def format_exponential(digits: int, scale: int, dp: int | None = None) -> str:
    """
    Экспоненциальная строка d.dddde±N.

    Args:
        digits: Значащие цифры
        scale: scale
        dp: Количество цифр после точки; None — естественная точность

    Returns:
        Строка вида "1.23456789e+1", "-5e-3", "0e+0"

    Raises:
        DecimalRangeError: Если dp < 0

    Examples:
        >>> format_exponential(123456789, 7)
        '1.23456789e+1'
        >>> format_exponential(123456789, 7, 2)
        '1.23e+1'
        >>> format_exponential(-5, 3)
        '-5e-3'
    """
    if dp is not None:
        dp = validate_places(dp, "dp")

    magnitude = int_to_digits(digits)
    exponent = len(magnitude) - 1 - scale if digits != 0 else 0

    if dp is not None:
        extra = len(magnitude) - 1 - dp
        if extra > 0:
            factor = pow10(extra)
            quotient, remainder = div_rem(abs(digits), factor)
            magnitude = int_to_digits(quotient + rounding_term(remainder, factor))
            # Перенос при округлении (9.99 → 10.0) даёт лишнюю цифру
            if len(magnitude) > dp + 1:
                magnitude = magnitude[: dp + 1]
                exponent += 1
        else:
            magnitude = magnitude.ljust(dp + 1, "0")

    mantissa = _join(False, magnitude[0], magnitude[1:])
    text = f"{mantissa}e{'-' if exponent < 0 else '+'}{abs(exponent)}"
    return f"-{text}" if digits < 0 else text
