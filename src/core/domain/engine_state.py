"""
EngineSnapshot — Наблюдаемое состояние калькулятора

Immutable Pydantic модель, представляющая снапшот состояния движка для хоста
(рендеринг дисплея, отладка, сохранение). Полная совместимость с JSON Schema
(src/core/contracts/schema/engine_snapshot.json).
"""

from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.domain.expression import AngleMode

SNAPSHOT_SCHEMA_VERSION: Final[str] = "1"


class EngineSnapshot(BaseModel):
    """
    Снапшот состояния CalculatorEngine.

    display_text всегда совпадает с тем, что показывает дисплей:
    - error_label при error_state
    - "0" при пустом выражении
    - иначе expression
    """

    schema_version: str = Field(SNAPSHOT_SCHEMA_VERSION, description="Версия контракта")
    expression: str = Field(..., description="Текущее выражение (может быть пустым)")
    display_text: str = Field(..., min_length=1, description="Текст дисплея")
    angle_mode: AngleMode = Field(..., description="Режим углов")
    error_state: bool = Field(..., description="Показывается ли ошибка")
    error_label: Optional[str] = Field(
        None, validate_default=True, description="Текст ошибки при error_state"
    )
    precision: int = Field(..., ge=1, le=15, description="Знаков после точки в результате")

    model_config = {"frozen": True}

    @field_validator("error_label")
    @classmethod
    def validate_error_label(cls, v: Optional[str], info) -> Optional[str]:
        """error_label задан тогда и только тогда, когда error_state"""
        if "error_state" in info.data:
            error_state = info.data["error_state"]
            if error_state and not v:
                raise ValueError("error_label is required when error_state is set")
            if not error_state and v is not None:
                raise ValueError("error_label must be None outside error_state")
        return v
