"""
Core math modules для bigdecimal

Целочисленные примитивы и алгоритмы округления/деления над парой (digits, scale).
"""

# Integer Utilities
from bigdecimal.core.math.integers import (
    CONVERSION_CHUNK_DIGITS,
    MAX_SAFE_INTEGER,
    STRICT_INTEGER_PATTERN,
    cmp_int,
    div_rem,
    int_from_digits,
    int_to_digits,
    is_strict_integer,
    parse_strict_integer,
    pow10,
    sign_of,
)

# Rounding & Long Division
from bigdecimal.core.math.rounding import (
    DEFAULT_DIV_PLACES,
    ScaledDigits,
    long_divide,
    round_digits,
    rounding_term,
    validate_places,
)

__all__ = [
    # Integer Utilities — Constants
    "CONVERSION_CHUNK_DIGITS",
    "MAX_SAFE_INTEGER",
    "STRICT_INTEGER_PATTERN",
    # Integer Utilities — Functions
    "cmp_int",
    "div_rem",
    "int_from_digits",
    "int_to_digits",
    "is_strict_integer",
    "parse_strict_integer",
    "pow10",
    "sign_of",
    # Rounding — Constants
    "DEFAULT_DIV_PLACES",
    # Rounding — Types
    "ScaledDigits",
    # Rounding — Functions
    "long_divide",
    "round_digits",
    "rounding_term",
    "validate_places",
]
