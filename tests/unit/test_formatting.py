"""
Тесты строковых представлений BigDecimal

Проверяет:
1. to_string / str / to_json — каноническая форма
2. to_fixed — ровно dp знаков с округлением half-away-from-zero
3. to_exponential — d.dddde±N, естественная точность и фиксированная dp
"""

import pytest

from bigdecimal import BigDecimal, DecimalRangeError, InvalidArgument
from bigdecimal.core.domain.formatting import format_canonical, format_exponential, format_fixed

# =============================================================================
# CANONICAL
# =============================================================================


class TestToString:
    """Тесты to_string"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1", "1"),
            ("-1", "-1"),
            ("0", "0"),
            ("-0", "0"),
            ("12.345", "12.345"),
            ("-12.345", "-12.345"),
            ("0.001", "0.001"),
            ("-0.001", "-0.001"),
            ("1000", "1000"),
            ("1e3", "1000"),
            ("1.50", "1.5"),
            ("123.456e-7", "0.0000123456"),
            ("+.5", "0.5"),
            ("5.", "5"),
        ],
    )
    def test_canonical(self, text: str, expected: str) -> None:
        assert BigDecimal(text).to_string() == expected

    def test_str_and_json_match(self) -> None:
        n = BigDecimal("-98.7600")
        assert str(n) == n.to_string() == n.to_json() == "-98.76"

    def test_large_exponent_written_out(self) -> None:
        assert BigDecimal("1e25").to_string() == "1" + "0" * 25
        assert BigDecimal("1e-25").to_string() == "0." + "0" * 24 + "1"

    def test_no_exponent_notation(self) -> None:
        for text in ("1e-7", "1.5e21", "-3e-30"):
            assert "e" not in BigDecimal(text).to_string()

    def test_format_canonical_unnormalized(self) -> None:
        """Ненормализованная пара форматируется как есть"""
        assert format_canonical(1500, 3) == "1.500"
        assert format_canonical(-5, 0) == "-5"


# =============================================================================
# FIXED
# =============================================================================


class TestToFixed:
    """Тесты to_fixed"""

    def test_positive(self) -> None:
        n = BigDecimal("12.3456789")
        assert n.to_fixed(9) == "12.345678900"
        assert n.to_fixed(5) == "12.34568"
        assert n.to_fixed(1) == "12.3"
        assert n.to_fixed(0) == "12"
        assert n.to_fixed() == "12"

    def test_negative(self) -> None:
        n = BigDecimal("-12.3456789")
        assert n.to_fixed(9) == "-12.345678900"
        assert n.to_fixed(5) == "-12.34568"
        assert n.to_fixed(1) == "-12.3"
        assert n.to_fixed(0) == "-12"
        assert n.to_fixed() == "-12"

    def test_zero(self) -> None:
        n = BigDecimal("0")
        assert n.to_fixed(5) == "0.00000"
        assert n.to_fixed(0) == "0"
        assert n.to_fixed() == "0"

    def test_small_positive(self) -> None:
        n = BigDecimal("0.0012345")
        assert n.to_fixed(9) == "0.001234500"
        assert n.to_fixed(6) == "0.001235"
        assert n.to_fixed(4) == "0.0012"
        assert n.to_fixed(2) == "0.00"
        assert n.to_fixed(0) == "0"

    def test_small_negative(self) -> None:
        """Округление к нулю не оставляет знак минус"""
        n = BigDecimal("-0.0012345")
        assert n.to_fixed(9) == "-0.001234500"
        assert n.to_fixed(6) == "-0.001235"
        assert n.to_fixed(4) == "-0.0012"
        assert n.to_fixed(2) == "0.00"
        assert n.to_fixed(0) == "0"

    def test_positive_normalized(self) -> None:
        n = BigDecimal("100")
        assert n.to_fixed(2) == "100.00"
        assert n.to_fixed(0) == "100"

    def test_negative_normalized(self) -> None:
        n = BigDecimal("-100")
        assert n.to_fixed(2) == "-100.00"
        assert n.to_fixed(0) == "-100"

    def test_carry(self) -> None:
        assert BigDecimal("9.995").to_fixed(2) == "10.00"
        assert BigDecimal("-0.5").to_fixed(0) == "-1"

    def test_dp_less_than_zero(self) -> None:
        with pytest.raises(DecimalRangeError, match="Argument 'dp' must be >= 0"):
            BigDecimal("1.23").to_fixed(-1)

    def test_dp_not_integer(self) -> None:
        with pytest.raises(InvalidArgument, match="Argument 'dp' must be an integer"):
            BigDecimal("1.23").to_fixed(2.5)

    def test_format_fixed_direct(self) -> None:
        assert format_fixed(123456789, 7, 5) == "12.34568"
        assert format_fixed(123, -3, 1) == "123000.0"


# =============================================================================
# EXPONENTIAL
# =============================================================================


class TestToExponential:
    """Тесты to_exponential"""

    def test_natural_precision(self) -> None:
        assert BigDecimal("12.3456789").to_exponential() == "1.23456789e+1"
        assert BigDecimal("-12.3456789").to_exponential() == "-1.23456789e+1"
        assert BigDecimal("1e100").to_exponential() == "1e+100"
        assert BigDecimal("-0.005").to_exponential() == "-5e-3"
        assert BigDecimal("7").to_exponential() == "7e+0"

    def test_fixed_precision(self) -> None:
        n = BigDecimal("12.3456789")
        assert n.to_exponential(2) == "1.23e+1"
        assert n.to_exponential(0) == "1e+1"
        assert BigDecimal("0.000123456").to_exponential(2) == "1.23e-4"

    def test_padding(self) -> None:
        assert BigDecimal("123").to_exponential(5) == "1.23000e+2"

    def test_rounding(self) -> None:
        assert BigDecimal("1.5").to_exponential(0) == "2e+0"
        assert BigDecimal("-1.5").to_exponential(0) == "-2e+0"
        assert BigDecimal("1.249").to_exponential(1) == "1.2e+0"

    def test_carry_bumps_exponent(self) -> None:
        assert BigDecimal("9.99").to_exponential(1) == "1.0e+1"
        assert BigDecimal("9.5").to_exponential(0) == "1e+1"
        assert BigDecimal("-0.0999").to_exponential(1) == "-1.0e-1"

    def test_zero(self) -> None:
        assert BigDecimal("0").to_exponential() == "0e+0"
        assert BigDecimal("0").to_exponential(2) == "0.00e+0"

    def test_dp_less_than_zero(self) -> None:
        with pytest.raises(DecimalRangeError, match="Argument 'dp' must be >= 0"):
            BigDecimal("1").to_exponential(-1)

    def test_format_exponential_direct(self) -> None:
        assert format_exponential(123456789, 7) == "1.23456789e+1"
        assert format_exponential(-5, 3) == "-5e-3"


# =============================================================================
# ДЛИННЫЕ ЗНАЧЕНИЯ
# =============================================================================


class TestLongValues:
    """Тесты значений длиннее лимита int <-> str интерпретатора (4300 цифр)"""

    def test_literal_roundtrip(self) -> None:
        text = "1" * 5000
        n = BigDecimal(text)
        assert n.to_string() == text
        assert BigDecimal(n.to_string()) == n

    def test_product_to_string(self) -> None:
        n = BigDecimal(3) * BigDecimal(10**4999 + 1, 0)
        assert n.to_string() == "3" + "0" * 4998 + "3"

    def test_long_fraction(self) -> None:
        text = "-0." + "7" * 5000
        assert BigDecimal(text).to_string() == text

    def test_to_fixed(self) -> None:
        assert BigDecimal("1" * 5000 + ".555").to_fixed(2) == "1" * 5000 + ".56"

    def test_to_exponential(self) -> None:
        n = BigDecimal("1" * 5000)
        assert n.to_exponential() == "1." + "1" * 4999 + "e+4999"
        assert n.to_exponential(2) == "1.11e+4999"

    def test_repr(self) -> None:
        assert repr(BigDecimal("2" * 5000)) == "BigDecimal('" + "2" * 5000 + "')"
