"""Symbol Normalizer — визуальные глифы → канонические операторы.

Два уровня:
- canonicalize_symbol(): посимвольная таблица (×, ÷, −, –), применяется
  сразу при append
- normalize(): таблица + переписывание '^' в '**', применяется только
  при чтении перед вычислением и никогда не меняет хранимый буфер
"""

from typing import Final

POWER_MARKER: Final[str] = "^"
POWER_OPERATOR: Final[str] = "**"

SYMBOL_MAP: Final[dict[str, str]] = {
    "×": "*",  # × multiplication sign
    "÷": "/",  # ÷ division sign
    "−": "-",  # − minus sign
    "–": "-",  # – en dash
}


def canonicalize_symbol(value: str) -> str:
    """Посимвольная замена визуальных глифов, без переписывания степени."""
    return "".join(SYMBOL_MAP.get(ch, ch) for ch in value)


def normalize(text: str) -> str:
    """
    Полная нормализация выражения перед вычислением.

    Examples:
        >>> normalize("2×3÷4")
        '2*3/4'
        >>> normalize("2^3")
        '2**3'
    """
    return canonicalize_symbol(text).replace(POWER_MARKER, POWER_OPERATOR)
