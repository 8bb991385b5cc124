"""
Error Taxonomy — Иерархия исключений bigdecimal

Все ошибки пакета наследуют DecimalError и дополнительно встроенное
исключение соответствующего рода (ValueError, TypeError, ZeroDivisionError),
чтобы вызывающий код мог ловить их привычным способом.

Ошибки поднимаются синхронно в точке обнаружения и никогда не
перехватываются внутри пакета.
"""

from enum import Enum


class DecimalError(Exception):
    """Базовый класс всех ошибок bigdecimal."""


class ParseFailure(str, Enum):
    """Причина отказа парсинга десятичного литерала"""

    EMPTY_MANTISSA = "empty mantissa"
    EMPTY_EXPONENT = "empty exponent"
    INVALID_EXPONENT = "invalid exponent"
    INVALID_DIGITS = "invalid digits"


_PARSE_MESSAGES = {
    ParseFailure.EMPTY_MANTISSA: "Cannot parse empty mantissa",
    ParseFailure.EMPTY_EXPONENT: "Cannot parse empty exponent",
    ParseFailure.INVALID_EXPONENT: "Cannot parse integer exponent",
    ParseFailure.INVALID_DIGITS: "Cannot parse integer digits",
}


class IntegerParseError(DecimalError, ValueError):
    """
    Некорректный целочисленный литерал.

    Attributes:
        text: Строка, которую не удалось распарсить
    """

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Cannot parse integer: {text}")


class DecimalParseError(DecimalError, ValueError):
    """
    Некорректный десятичный литерал.

    Attributes:
        text: Проблемная подстрока (весь литерал для empty mantissa/exponent,
            экспонента или строка цифр для invalid exponent/digits)
        reason: Конкретная причина отказа (ParseFailure)
    """

    def __init__(self, text: str, reason: ParseFailure):
        self.text = text
        self.reason = reason
        super().__init__(f"{_PARSE_MESSAGES[reason]}: {text}")


class InvalidArgument(DecimalError, TypeError):
    """
    Структурно неверный аргумент.

    Неверный тип поля, нецелый scale, неподдерживаемый тип входа,
    неизвестный hint примитивного приведения.
    """


class DecimalRangeError(DecimalError, ValueError):
    """
    Значение вне допустимого диапазона.

    Бесконечный/NaN float на входе конструктора или отрицательное
    количество десятичных знаков.
    """


class DivisionByZero(DecimalRangeError, ZeroDivisionError):
    """Делитель (его digits) равен нулю в div или rem."""

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)
