"""
Result Formatter — Каноническое текстовое представление числа

- format_result(): результат вычисления, округление до precision знаков,
  без хвостовых нулей
- number_to_text(): «простая» строковая запись числа без округления
  (используется percent)

Обе функции никогда не выдают экспоненциальную запись (1e-05) и "-0":
результат пишется обратно в буфер выражения, а 'e' не проходит валидацию
символов.
"""

from decimal import Decimal

from src.core.math.numerical_safeguards import (
    RESULT_PRECISION_SCIENTIFIC,
    ensure_finite,
    is_integral,
    validate_precision,
)


def _strip_fraction_zeros(text: str) -> str:
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def format_result(value: float, precision: int = RESULT_PRECISION_SCIENTIFIC) -> str:
    """
    Форматирование конечного числа для дисплея.

    Целые — без десятичной точки. Дробные — round(value, precision),
    затем удаление незначащих нулей и висящей точки.

    Args:
        value: Конечное число
        precision: Знаков после точки

    Returns:
        Минимальная десятичная строка, которая парсится обратно
        в округлённое значение

    Raises:
        MathError: Если value NaN или ±Inf
        ValueError: Если precision вне допустимого диапазона

    Examples:
        >>> format_result(4.0)
        '4'
        >>> format_result(0.1 + 0.2)
        '0.3'
        >>> format_result(2.0 / 3.0)
        '0.666666666667'
        >>> format_result(1000000.1)
        '1000000.1'
    """
    validate_precision(precision)
    value = ensure_finite(value)

    if is_integral(value):
        return str(int(value))

    # Кратчайшие round-trip цифры округлённого значения, без двоичного шума
    return number_to_text(round(value, precision))


def number_to_text(value: float) -> str:
    """
    Простая строковая запись числа (без округления до precision).

    Кратчайшие round-trip цифры (repr), развёрнутые в позиционную запись.

    Examples:
        >>> number_to_text(0.5)
        '0.5'
        >>> number_to_text(5.0)
        '5'
        >>> number_to_text(0.00001)
        '0.00001'
    """
    value = ensure_finite(value)

    if is_integral(value):
        return str(int(value))

    return _strip_fraction_zeros(format(Decimal(repr(value)), "f"))
