"""
Errors — Таксономия ошибок калькулятора

Все ошибки, которые пользователь может увидеть на дисплее, наследуются от
CalculatorError и несут:
- kind: ErrorKind (машиночитаемый тип)
- label: текст для дисплея

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна CalculatorError не выходит за границу CalculatorEngine
   (ловится в evaluate/apply_function и превращается в error state)
2. Все ошибки терминальны для текущей попытки (без retry)
"""

from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Тип ошибки вычисления"""

    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    MATH_ERROR = "MATH_ERROR"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    GENERIC_ERROR = "GENERIC_ERROR"


# Тексты для дисплея
ERROR_LABELS: Final[dict[ErrorKind, str]] = {
    ErrorKind.INVALID_CHARACTERS: "Invalid characters",
    ErrorKind.MATH_ERROR: "Math error",
    ErrorKind.INVALID_ARGUMENT: "Invalid input",
    ErrorKind.GENERIC_ERROR: "Error",
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CalculatorError(Exception):
    """
    Базовая ошибка калькулятора, видимая пользователю.

    Подклассы фиксируют kind; label берётся из ERROR_LABELS.
    """

    kind: ErrorKind = ErrorKind.GENERIC_ERROR

    def __init__(self, message: str = ""):
        super().__init__(message or self.label)

    @property
    def label(self) -> str:
        return ERROR_LABELS[self.kind]


class InvalidCharactersError(CalculatorError):
    """Выражение содержит недопустимый символ после нормализации"""

    kind = ErrorKind.INVALID_CHARACTERS


class MathError(CalculatorError):
    """
    Результат ±Inf/NaN, деление на ноль, reciprocal(0),
    выход из области определения математической функции.
    """

    kind = ErrorKind.MATH_ERROR


class InvalidArgumentError(CalculatorError):
    """Недопустимый аргумент функции (factorial от отрицательного/дробного)"""

    kind = ErrorKind.INVALID_ARGUMENT


class GenericEvaluationError(CalculatorError):
    """Синтаксис выражения отвергнут парсером (например, несбалансированные скобки)"""

    kind = ErrorKind.GENERIC_ERROR


class UnknownFunctionError(ValueError):
    """
    Имя функции вне закрытого набора.

    Это ошибка программирования хоста (неизвестная кнопка), а не ошибка
    пользователя, поэтому она НЕ наследуется от CalculatorError.
    """

    pass
