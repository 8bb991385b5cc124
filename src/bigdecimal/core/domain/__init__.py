"""
Domain models and value objects.

Contains the BigDecimal value type, its literal parser, formatter,
structural record and type-identity helpers.
"""

from bigdecimal.core.domain.big_decimal import BigDecimal, DecimalLike, align, normalize
from bigdecimal.core.domain.components import (
    DecimalComponents,
    coerce_components,
    float_components,
)
from bigdecimal.core.domain.formatting import (
    format_canonical,
    format_exponential,
    format_fixed,
)
from bigdecimal.core.domain.identity import (
    BIGDECIMAL_MARKER_ATTR,
    BIGDECIMAL_MARKER_PREFIX,
    BIGDECIMAL_MARKER_VERSION,
    DecimalIdentityMeta,
    PrimitiveHint,
    is_big_decimal,
)
from bigdecimal.core.domain.parse import ParsedDecimal, parse_decimal_literal

__all__ = [
    # Value type
    "BigDecimal",
    "DecimalLike",
    "align",
    "normalize",
    # Structural record
    "DecimalComponents",
    "coerce_components",
    "float_components",
    # Formatter
    "format_canonical",
    "format_exponential",
    "format_fixed",
    # Type identity
    "BIGDECIMAL_MARKER_ATTR",
    "BIGDECIMAL_MARKER_PREFIX",
    "BIGDECIMAL_MARKER_VERSION",
    "DecimalIdentityMeta",
    "PrimitiveHint",
    "is_big_decimal",
    # Parser
    "ParsedDecimal",
    "parse_decimal_literal",
]
