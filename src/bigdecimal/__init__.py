"""
bigdecimal — arbitrary-precision decimal numbers.

Exact base-10 arithmetic without binary floating-point rounding error.
"""

from bigdecimal.core.domain import (
    BigDecimal,
    DecimalComponents,
    DecimalLike,
    PrimitiveHint,
    is_big_decimal,
)
from bigdecimal.core.errors import (
    DecimalError,
    DecimalParseError,
    DecimalRangeError,
    DivisionByZero,
    IntegerParseError,
    InvalidArgument,
    ParseFailure,
)

__version__ = "1.0.0"

__all__ = [
    "BigDecimal",
    "DecimalComponents",
    "DecimalLike",
    "PrimitiveHint",
    "is_big_decimal",
    # Errors
    "DecimalError",
    "DecimalParseError",
    "DecimalRangeError",
    "DivisionByZero",
    "IntegerParseError",
    "InvalidArgument",
    "ParseFailure",
]
