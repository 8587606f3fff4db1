"""
Numerical Safeguards — Проверки конечности и целочисленности

Модуль обеспечивает единые численные проверки для движка калькулятора:
- NaN/Inf детекция и превращение в MathError
- Перевод исключений математических примитивов (ValueError/OverflowError/
  ZeroDivisionError) в MathError
- Проверка целочисленности float без epsilon-допусков (точная)
- Валидация параметров конфигурации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в буфер выражения
2. Целочисленность проверяется точно: 3.0000000001 НЕ целое
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Callable, Final, TypeVar

from src.core.domain.errors import MathError

T = TypeVar("T")

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Знаков после точки в научном варианте калькулятора
RESULT_PRECISION_SCIENTIFIC: Final[int] = 12

# Знаков после точки в базовом варианте калькулятора
RESULT_PRECISION_BASIC: Final[int] = 10

# Допустимый диапазон precision (float даёт ~15-17 значащих цифр)
PRECISION_MIN: Final[int] = 1
PRECISION_MAX: Final[int] = 15


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def ensure_finite(value: float, context: str = "result") -> float:
    """
    Возвращает value, если оно конечно, иначе поднимает MathError.

    Args:
        value: Проверяемое значение
        context: Имя операции (для сообщения об ошибке)

    Returns:
        value как float

    Raises:
        MathError: Если value NaN или ±Inf

    Examples:
        >>> ensure_finite(4.0)
        4.0
        >>> ensure_finite(float('inf'))
        Traceback (most recent call last):
        ...
        MathError: result is not finite: inf
    """
    value = float(value)
    if not is_valid_float(value):
        raise MathError(f"{context} is not finite: {value}")
    return value


def guarded_call(func: Callable[..., float], *args: float, context: str = "") -> float:
    """
    Вызов математического примитива с переводом его ошибок в MathError.

    math.sqrt(-1), math.log(0), math.exp(1000) и т.п. в Python поднимают
    исключения вместо возврата NaN/Inf. Для пользователя это одна и та же
    ситуация: Math error.

    Args:
        func: Математический примитив
        *args: Аргументы
        context: Имя операции (для сообщения об ошибке)

    Returns:
        Конечный результат func(*args)

    Raises:
        MathError: Если примитив упал или вернул NaN/Inf
    """
    name = context or getattr(func, "__name__", "function")
    try:
        result = func(*args)
    except (ValueError, OverflowError, ZeroDivisionError) as exc:
        raise MathError(f"{name} failed: {exc}") from exc
    return ensure_finite(result, name)


# =============================================================================
# ЦЕЛОЧИСЛЕННОСТЬ
# =============================================================================


def is_integral(value: float) -> bool:
    """
    Точная проверка, что конечный float — целое число.

    Args:
        value: Проверяемое значение

    Returns:
        True если value конечно и без дробной части

    Examples:
        >>> is_integral(5.0)
        True
        >>> is_integral(5.5)
        False
        >>> is_integral(float('inf'))
        False
    """
    return is_valid_float(value) and float(value).is_integer()


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_precision(value: int, name: str = "precision") -> None:
    """
    Валидация числа знаков после точки.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value вне [PRECISION_MIN, PRECISION_MAX]
    """
    if not (PRECISION_MIN <= value <= PRECISION_MAX):
        raise ValueError(
            f"{name} must be in [{PRECISION_MIN}, {PRECISION_MAX}], got {value}"
        )
