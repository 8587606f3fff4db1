"""
Scientific — Научные функции калькулятора

Чистые функции над float:
- Конверсия углов с учётом AngleMode
- Прямая и обратная тригонометрия
- Логарифмы, степени, корень, exp, abs
- reciprocal (MathError при точном нуле)
- factorial (InvalidArgumentError при отрицательном/дробном аргументе)

Проверка результата на NaN/Inf выполняется вызывающим кодом
(FunctionApplicator) через numerical_safeguards.guarded_call.
"""

import math
from typing import Callable, Final

from src.core.domain.errors import InvalidArgumentError, MathError
from src.core.domain.expression import AngleMode
from src.core.math.numerical_safeguards import is_integral

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Каноническая десятичная запись констант (кратчайшая round-trip запись)
PI_TEXT: Final[str] = repr(math.pi)
E_TEXT: Final[str] = repr(math.e)


# =============================================================================
# КОНВЕРСИЯ УГЛОВ
# =============================================================================


def to_radians(value: float, mode: AngleMode) -> float:
    """
    Аргумент в радианах.

    DEGREES: x·π/180, RADIANS: x
    """
    if mode == AngleMode.DEGREES:
        return value * math.pi / 180.0
    return value


def from_radians(value: float, mode: AngleMode) -> float:
    """
    Результат из радиан в текущий режим.

    DEGREES: x·180/π, RADIANS: x
    """
    if mode == AngleMode.DEGREES:
        return value * 180.0 / math.pi
    return value


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sin(value: float, mode: AngleMode) -> float:
    return math.sin(to_radians(value, mode))


def cos(value: float, mode: AngleMode) -> float:
    return math.cos(to_radians(value, mode))


def tan(value: float, mode: AngleMode) -> float:
    return math.tan(to_radians(value, mode))


def asin(value: float, mode: AngleMode) -> float:
    return from_radians(math.asin(value), mode)


def acos(value: float, mode: AngleMode) -> float:
    return from_radians(math.acos(value), mode)


def atan(value: float, mode: AngleMode) -> float:
    return from_radians(math.atan(value), mode)


TRIG_FUNCTIONS: Final[dict[str, Callable[[float, AngleMode], float]]] = {
    "sin": sin,
    "cos": cos,
    "tan": tan,
    "asin": asin,
    "acos": acos,
    "atan": atan,
}


# =============================================================================
# ОСТАЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def pow2(value: float) -> float:
    return value * value


def pow3(value: float) -> float:
    return value * value * value


def reciprocal(value: float) -> float:
    """
    1/x.

    Raises:
        MathError: Если value точно равен нулю
    """
    if value == 0:
        raise MathError("reciprocal of zero")
    return 1.0 / value


def factorial(value: float) -> float:
    """
    Факториал как итеративное произведение 2·3·…·n.

    factorial(0) = factorial(1) = 1. Вычисление в float: при переполнении
    (n >= 171) произведение становится inf, цикл прерывается досрочно,
    а inf превращается в MathError проверкой результата.

    Raises:
        InvalidArgumentError: Если value отрицательное или не целое

    Examples:
        >>> factorial(5.0)
        120.0
        >>> factorial(0.0)
        1.0
    """
    if value < 0 or not is_integral(value):
        raise InvalidArgumentError(f"factorial needs a non-negative integer, got {value}")

    result = 1.0
    for k in range(2, int(value) + 1):
        result *= k
        if math.isinf(result):
            break
    return result


UNARY_FUNCTIONS: Final[dict[str, Callable[[float], float]]] = {
    "ln": math.log,
    "log10": math.log10,
    "sqrt": math.sqrt,
    "pow2": pow2,
    "pow3": pow3,
    "exp": math.exp,
    "abs": abs,
    "reciprocal": reciprocal,
    "factorial": factorial,
}
