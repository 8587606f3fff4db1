"""
Expression — Модели выражения и результата вычисления

- AngleMode: единицы углов для тригонометрии (DEGREES/RADIANS)
- TrailingToken: производное представление хвостового числа выражения
- Success / Failure: результат вычисления (EvaluationOutcome)

TrailingToken НЕ кэшируется: выражение меняется между чтениями,
поэтому представление пересчитывается при каждом обращении.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from src.core.domain.errors import ERROR_LABELS, ErrorKind


# =============================================================================
# ENUMS
# =============================================================================


class AngleMode(str, Enum):
    """Режим углов для sin/cos/tan и обратных функций"""

    DEGREES = "DEGREES"
    RADIANS = "RADIANS"

    def toggled(self) -> "AngleMode":
        """Противоположный режим"""
        if self == AngleMode.DEGREES:
            return AngleMode.RADIANS
        return AngleMode.DEGREES


# =============================================================================
# TRAILING TOKEN
# =============================================================================


@dataclass(frozen=True)
class TrailingToken:
    """
    Разбиение выражения на prefix и хвостовое число.

    numeric_text: необязательный ведущий '-', цифры, не более одной '.', цифры.
    Может быть пустой строкой, если выражение пустое или заканчивается
    оператором/скобкой. Может быть "-", "." или "-." — текст есть,
    но числом не парсится (value is None).
    """

    prefix: str
    numeric_text: str

    @property
    def is_empty(self) -> bool:
        return not self.numeric_text

    @property
    def is_negative(self) -> bool:
        return self.numeric_text.startswith("-")

    @property
    def value(self) -> Optional[float]:
        """Числовое значение хвоста или None, если хвост не парсится"""
        digits = self.numeric_text.lstrip("-")
        if not any(ch.isdigit() for ch in digits):
            return None
        return float(self.numeric_text)

    def replace(self, numeric_text: str) -> str:
        """Выражение с заменённым хвостовым числом"""
        return self.prefix + numeric_text


# =============================================================================
# EVALUATION OUTCOME
# =============================================================================


@dataclass(frozen=True)
class Success:
    """Успешное вычисление: конечное вещественное значение"""

    value: float

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Неуспешное вычисление с типом ошибки"""

    kind: ErrorKind
    message: str = ""

    @property
    def ok(self) -> bool:
        return False

    @property
    def label(self) -> str:
        return ERROR_LABELS[self.kind]


EvaluationOutcome = Union[Success, Failure]
