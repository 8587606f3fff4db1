"""
EngineConfig — Конфигурация движка калькулятора

Immutable Pydantic модель. Значения по умолчанию соответствуют научному
варианту калькулятора; load_engine_config() читает переопределения из
переменных окружения CALC_*.
"""

import os
from enum import Enum
from typing import Final, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.domain.expression import AngleMode
from src.core.math.numerical_safeguards import (
    RESULT_PRECISION_SCIENTIFIC,
    validate_precision,
)

DEFAULT_ERROR_RESET_DELAY_MS: Final[float] = 900.0
DEFAULT_ANGLE_MODE_STORAGE_KEY: Final[str] = "calc_angle_mode"


# =============================================================================
# ENUMS
# =============================================================================


class ExpressionGrammar(str, Enum):
    """
    Допустимый набор символов выражения.

    SCIENTIFIC: цифры, + - * / % ^ ( ) . и пробелы
    BASIC: то же без '^' (степень недоступна)
    """

    SCIENTIFIC = "SCIENTIFIC"
    BASIC = "BASIC"


class TrailingStripRule(str, Enum):
    """
    Какой висящий хвост отбрасывается перед вычислением.

    OPERATOR: ровно один хвостовой оператор (* + - / % или маркер степени)
    NON_TERMINAL: любой один символ, не являющийся цифрой, '.' или ')'
    """

    OPERATOR = "OPERATOR"
    NON_TERMINAL = "NON_TERMINAL"


# =============================================================================
# CONFIG MODEL
# =============================================================================


class EngineConfig(BaseModel):
    """Конфигурация CalculatorEngine"""

    precision: int = Field(
        RESULT_PRECISION_SCIENTIFIC, description="Знаков после точки в результате"
    )
    error_reset_delay_ms: float = Field(
        DEFAULT_ERROR_RESET_DELAY_MS, gt=0, description="Задержка сброса ошибки (мс)"
    )
    grammar: ExpressionGrammar = Field(
        ExpressionGrammar.SCIENTIFIC, description="Допустимый набор символов"
    )
    trailing_strip_rule: TrailingStripRule = Field(
        TrailingStripRule.OPERATOR, description="Правило отбрасывания висящего хвоста"
    )
    default_angle_mode: AngleMode = Field(
        AngleMode.DEGREES, description="Режим углов, если в storage ничего нет"
    )
    angle_mode_storage_key: str = Field(
        DEFAULT_ANGLE_MODE_STORAGE_KEY, min_length=1, description="Ключ режима углов в storage"
    )

    model_config = {"frozen": True}

    @field_validator("precision")
    @classmethod
    def validate_precision_range(cls, v: int) -> int:
        validate_precision(v)
        return v

    @property
    def power_enabled(self) -> bool:
        return self.grammar == ExpressionGrammar.SCIENTIFIC


# =============================================================================
# ENVIRONMENT LOADER
# =============================================================================


def _get(environ: Mapping[str, str], name: str) -> Optional[str]:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def load_engine_config(environ: Optional[Mapping[str, str]] = None) -> EngineConfig:
    """
    Построение EngineConfig из переменных окружения.

    Переменные (все необязательные):
        CALC_PRECISION, CALC_ERROR_RESET_DELAY_MS, CALC_GRAMMAR,
        CALC_TRAILING_STRIP_RULE, CALC_DEFAULT_ANGLE_MODE,
        CALC_ANGLE_MODE_STORAGE_KEY

    Args:
        environ: Источник переменных (default: os.environ)

    Returns:
        Провалидированный EngineConfig

    Raises:
        pydantic.ValidationError: Если значение переменной невалидно
    """
    env = os.environ if environ is None else environ
    overrides: dict[str, str] = {}

    for field_name, var_name in (
        ("precision", "CALC_PRECISION"),
        ("error_reset_delay_ms", "CALC_ERROR_RESET_DELAY_MS"),
        ("grammar", "CALC_GRAMMAR"),
        ("trailing_strip_rule", "CALC_TRAILING_STRIP_RULE"),
        ("default_angle_mode", "CALC_DEFAULT_ANGLE_MODE"),
        ("angle_mode_storage_key", "CALC_ANGLE_MODE_STORAGE_KEY"),
    ):
        value = _get(env, var_name)
        if value is not None:
            overrides[field_name] = value

    for enum_field in ("grammar", "trailing_strip_rule", "default_angle_mode"):
        if enum_field in overrides:
            overrides[enum_field] = overrides[enum_field].upper()

    return EngineConfig(**overrides)
