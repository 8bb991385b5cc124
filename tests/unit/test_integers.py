"""
Тесты для модуля Integer Utilities

Проверяет:
1. Строгий парсинг целых (без пробелов, подчёркиваний, не-ASCII цифр)
2. Деление с остатком с усечением к нулю
3. Знак и сравнение целых
4. Конверсию int <-> str длиннее лимита интерпретатора (4300 цифр)
"""

import pytest

from bigdecimal.core.errors import DivisionByZero, IntegerParseError
from bigdecimal.core.math.integers import (
    CONVERSION_CHUNK_DIGITS,
    MAX_SAFE_INTEGER,
    cmp_int,
    div_rem,
    int_from_digits,
    int_to_digits,
    is_strict_integer,
    parse_strict_integer,
    pow10,
    sign_of,
)

# =============================================================================
# ТЕСТЫ ПАРСИНГА
# =============================================================================


class TestParseStrictInteger:
    """Тесты для parse_strict_integer"""

    def test_plain_digits(self) -> None:
        """Простые цифры парсятся"""
        assert parse_strict_integer("0") == 0
        assert parse_strict_integer("42") == 42

    def test_signs(self) -> None:
        """Опциональный знак + или -"""
        assert parse_strict_integer("+7") == 7
        assert parse_strict_integer("-7") == -7

    def test_leading_zeros(self) -> None:
        """Ведущие нули допустимы"""
        assert parse_strict_integer("-0042") == -42

    def test_huge_integer(self) -> None:
        """Произвольная точность"""
        assert parse_strict_integer("1" + "0" * 50) == 10**50

    @pytest.mark.parametrize(
        "text",
        ["", "+", "-", " 1", "1 ", "1_000", "1.0", "0x10", "+-1", "١٢", "1e3"],
    )
    def test_rejects_invalid(self, text: str) -> None:
        """Всё, кроме [+-]?[0-9]+, отклоняется"""
        with pytest.raises(IntegerParseError) as exc_info:
            parse_strict_integer(text)
        assert exc_info.value.text == text
        assert str(exc_info.value) == f"Cannot parse integer: {text}"

    def test_error_is_value_error(self) -> None:
        """IntegerParseError — это ValueError"""
        with pytest.raises(ValueError):
            parse_strict_integer("abc")

    def test_is_strict_integer(self) -> None:
        """Предикат без исключений"""
        assert is_strict_integer("-12") is True
        assert is_strict_integer("12a") is False
        assert is_strict_integer("1\n") is False


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ
# =============================================================================


class TestDivRem:
    """Тесты для div_rem"""

    @pytest.mark.parametrize(
        "numerator,denominator,expected",
        [
            (7, 2, (3, 1)),
            (-7, 2, (-3, -1)),
            (7, -2, (-3, 1)),
            (-7, -2, (3, -1)),
            (6, 3, (2, 0)),
            (0, 5, (0, 0)),
            (1, 10, (0, 1)),
        ],
    )
    def test_truncates_toward_zero(self, numerator, denominator, expected) -> None:
        """Частное усекается к нулю, остаток со знаком числителя"""
        assert div_rem(numerator, denominator) == expected

    def test_identity_holds(self) -> None:
        """numerator == quotient * denominator + remainder"""
        for n in (-101, -10, -1, 0, 1, 9, 101):
            for d in (-7, -3, 1, 4, 11):
                q, r = div_rem(n, d)
                assert q * d + r == n
                assert abs(r) < abs(d)

    def test_division_by_zero(self) -> None:
        """Деление на ноль"""
        with pytest.raises(DivisionByZero, match="Division by zero"):
            div_rem(1, 0)


# =============================================================================
# ТЕСТЫ ЗНАКА И СРАВНЕНИЯ
# =============================================================================


class TestSignAndCompare:
    """Тесты для sign_of, cmp_int, pow10"""

    def test_sign_of(self) -> None:
        assert sign_of(-(10**40)) == -1
        assert sign_of(0) == 0
        assert sign_of(10**40) == 1

    def test_cmp_int(self) -> None:
        assert cmp_int(1, 2) == -1
        assert cmp_int(2, 2) == 0
        assert cmp_int(3, 2) == 1
        assert cmp_int(-(10**30), 10**30) == -1

    def test_pow10(self) -> None:
        assert pow10(0) == 1
        assert pow10(3) == 1000

    def test_max_safe_integer(self) -> None:
        """2^53 - 1"""
        assert MAX_SAFE_INTEGER == 9007199254740991


# =============================================================================
# ТЕСТЫ ДЛИННЫХ ЦЕЛЫХ
# =============================================================================


class TestLongDigitStrings:
    """Тесты конверсии целых длиннее лимита int <-> str интерпретатора"""

    def test_parse_5000_digits(self) -> None:
        assert parse_strict_integer("1" * 5000) == (10**5000 - 1) // 9

    def test_parse_negative_long(self) -> None:
        assert parse_strict_integer("-" + "9" * 5000) == -(10**5000 - 1)
        assert parse_strict_integer("+" + "9" * 5000) == 10**5000 - 1

    def test_format_5000_digits(self) -> None:
        assert int_to_digits((10**5000 - 1) // 9) == "1" * 5000

    def test_format_drops_sign(self) -> None:
        assert int_to_digits(-(10**5000 - 1)) == "9" * 5000

    def test_chunk_boundaries_zero_padded(self) -> None:
        """Внутренние фрагменты дополняются нулями слева"""
        assert int_to_digits(10**CONVERSION_CHUNK_DIGITS) == "1" + "0" * CONVERSION_CHUNK_DIGITS
        assert int_to_digits(10**8001 + 7) == "1" + "0" * 8000 + "7"

    def test_roundtrip(self) -> None:
        text = "12345678" * 700
        assert int_to_digits(int_from_digits(text)) == text

    def test_leading_zeros_long(self) -> None:
        assert int_from_digits("0" * 5000 + "42") == 42

    def test_short_values(self) -> None:
        assert int_to_digits(0) == "0"
        assert int_from_digits("007") == 7
