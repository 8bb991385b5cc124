"""
Type Identity & Primitive Coercion

Распознавание экземпляров BigDecimal без опоры на идентичность класса:
две независимо загруженные копии пакета (например, vendored копия и
установленная) должны признавать значения друг друга.

Каждый экземпляр несёт версионированный маркер в атрибуте с
интернированным именем; is_big_decimal проверяет его префикс
"bigdecimal:BigDecimal:", а не номер версии.
"""

import sys
from enum import Enum
from typing import Any, Final

from bigdecimal.core.errors import InvalidArgument

# =============================================================================
# МАРКЕР
# =============================================================================

# Имя атрибута-маркера (одинаково во всех копиях пакета)
BIGDECIMAL_MARKER_ATTR: Final[str] = sys.intern("__bigdecimal__")

# Префикс значения маркера, общий для всех версий формата
BIGDECIMAL_MARKER_PREFIX: Final[str] = "bigdecimal:BigDecimal:"

# Версия формата маркера: значение атрибута на каждом экземпляре
BIGDECIMAL_MARKER_VERSION: Final[str] = f"{BIGDECIMAL_MARKER_PREFIX}1"


def is_big_decimal(obj: Any) -> bool:
    """
    Проверка, является ли obj экземпляром BigDecimal (любой копии пакета).

    Args:
        obj: Проверяемый объект

    Returns:
        True если obj несёт маркер BigDecimal любой версии формата
    """
    if isinstance(obj, type):
        return False
    marker = getattr(obj, BIGDECIMAL_MARKER_ATTR, None)
    return isinstance(marker, str) and marker.startswith(BIGDECIMAL_MARKER_PREFIX)


class DecimalIdentityMeta(type):
    """Метакласс: isinstance(x, BigDecimal) через маркер, а не через MRO."""

    def __instancecheck__(cls, instance: Any) -> bool:
        return is_big_decimal(instance)


# =============================================================================
# ПРИВЕДЕНИЕ К ПРИМИТИВУ
# =============================================================================


class PrimitiveHint(str, Enum):
    """Контекст приведения значения к примитиву"""

    STRING = "string"
    NUMBER = "number"
    DEFAULT = "default"

    @classmethod
    def coerce(cls, hint: "PrimitiveHint | str") -> "PrimitiveHint":
        """
        Приведение hint (enum или строка) к PrimitiveHint.

        Raises:
            InvalidArgument: Если hint не входит в {"string", "number", "default"}
        """
        if isinstance(hint, cls):
            return hint
        if isinstance(hint, str):
            for member in cls:
                if member.value == hint:
                    return member
        raise InvalidArgument(f"Invalid hint: {hint!r}")
