"""
CalculatorEngine — Фасад движка для хоста (UI / ввод)

Явный объект сессии вместо глобального состояния: хост создаёт движок и
вызывает его операции на каждое событие ввода, затем перерисовывает дисплей
по get_display_text() / is_error_state().

Граница ошибок:
- evaluate() и операции редактирования ловят CalculatorError, переводят
  буфер в error state (label на дисплее) и планируют сброс
- UnknownFunctionError (ошибка хоста) пробрасывается

Поток вычисления:
1. Evaluator.evaluate(buffer.text)
2. Success → буфер ПОЛНОСТЬЮ заменяется format_result(value)
3. Failure → error state + отложенный сброс (ErrorResetScheduler)
"""

import logging
from typing import Any, Callable, Dict, Optional

from src.core.contracts import validate_engine_snapshot
from src.core.domain.engine_state import EngineSnapshot
from src.core.domain.errors import ERROR_LABELS, CalculatorError
from src.core.domain.expression import AngleMode, EvaluationOutcome, Failure
from src.engine.config import EngineConfig
from src.engine.error_reset import ErrorResetScheduler, ManualTimer, Timer
from src.engine.evaluator import Evaluator
from src.engine.expression_buffer import ExpressionBuffer
from src.engine.function_applicator import FunctionApplicator
from src.engine.key_bindings import APPEND, CLEAR, DELETE, EVALUATE, resolve_key
from src.engine.result_formatter import format_result
from src.engine.storage import InMemoryStorage, KeyValueStorage

logger = logging.getLogger(__name__)


class CalculatorEngine:
    """Движок калькулятора: буфер выражения, режим углов, ошибки"""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        storage: Optional[KeyValueStorage] = None,
        timer: Optional[Timer] = None,
    ):
        """
        Args:
            config: конфигурация (default: EngineConfig())
            storage: хранилище режима углов (default: InMemoryStorage)
            timer: таймер для сброса ошибки (default: ManualTimer)
        """
        self.config = config or EngineConfig()
        self.storage = storage if storage is not None else InMemoryStorage()
        self.timer = timer if timer is not None else ManualTimer()

        self.buffer = ExpressionBuffer()
        self._angle_mode = self._load_angle_mode()

        self.evaluator = Evaluator(
            grammar=self.config.grammar,
            trailing_strip_rule=self.config.trailing_strip_rule,
        )
        self.applicator = FunctionApplicator(
            buffer=self.buffer,
            angle_mode_provider=self.get_angle_mode,
            precision=self.config.precision,
            power_enabled=self.config.power_enabled,
        )
        self.error_reset = ErrorResetScheduler(
            buffer=self.buffer,
            timer=self.timer,
            delay_ms=self.config.error_reset_delay_ms,
        )

    # -------------------------------------------------------------------------
    # Angle mode
    # -------------------------------------------------------------------------

    def _load_angle_mode(self) -> AngleMode:
        raw = self.storage.get(self.config.angle_mode_storage_key)
        if raw is None:
            return self.config.default_angle_mode

        try:
            return AngleMode(raw)
        except ValueError:
            logger.warning(
                "Unknown stored angle mode %r, falling back to %s",
                raw,
                self.config.default_angle_mode.value,
            )
            return self.config.default_angle_mode

    def get_angle_mode(self) -> AngleMode:
        return self._angle_mode

    def set_angle_mode(self, mode: AngleMode) -> None:
        """Установка режима углов с сохранением в storage."""
        mode = AngleMode(mode)
        self._angle_mode = mode
        self.storage.set(self.config.angle_mode_storage_key, mode.value)
        logger.info("angle mode set to %s", mode.value)

    def toggle_angle_mode(self) -> AngleMode:
        self.set_angle_mode(self._angle_mode.toggled())
        return self._angle_mode

    # -------------------------------------------------------------------------
    # Редактирование
    # -------------------------------------------------------------------------

    def append(self, value: str) -> None:
        self.buffer.append(value)

    def clear(self) -> None:
        self.buffer.clear()

    def delete_last(self) -> None:
        self.buffer.delete_last()

    def negate_last(self) -> None:
        self.buffer.negate_last()

    def percent_last(self) -> Optional[Failure]:
        return self._guarded(self.buffer.percent_last)

    def apply_function(self, name: str) -> Optional[Failure]:
        """
        Применение научной функции.

        Ошибки функции показываются на дисплее; буфер не меняется.

        Returns:
            Failure с типом ошибки, иначе None

        Raises:
            UnknownFunctionError: Имя вне закрытого набора
        """
        return self._guarded(lambda: self.applicator.apply(name))

    # -------------------------------------------------------------------------
    # Вычисление
    # -------------------------------------------------------------------------

    def evaluate(self) -> Optional[EvaluationOutcome]:
        """
        Вычисление текущего выражения.

        Returns:
            None для пустого выражения, иначе Success или Failure
        """
        outcome = self.evaluator.evaluate(self.buffer.text)
        if outcome is None:
            return None

        if isinstance(outcome, Failure):
            self._surface_error(outcome.label)
            return outcome

        self.buffer.replace_all(format_result(outcome.value, self.config.precision))
        return outcome

    # -------------------------------------------------------------------------
    # Ввод с клавиатуры
    # -------------------------------------------------------------------------

    def handle_key(self, key: str, code: Optional[str] = None) -> bool:
        """
        Обработка клавиши.

        Returns:
            True если клавиша обработана (хост подавляет поведение по умолчанию)
        """
        action = resolve_key(key, code)
        if action is None:
            return False

        if action.action == EVALUATE:
            self.evaluate()
        elif action.action == DELETE:
            self.delete_last()
        elif action.action == CLEAR:
            self.clear()
        elif action.action == APPEND:
            self.append(action.value)
        return True

    # -------------------------------------------------------------------------
    # Наблюдаемое состояние
    # -------------------------------------------------------------------------

    def get_display_text(self) -> str:
        if self.buffer.error_label is not None:
            return self.buffer.error_label
        return self.buffer.text or "0"

    def is_error_state(self) -> bool:
        return self.buffer.is_error

    @property
    def error_label(self) -> Optional[str]:
        return self.buffer.error_label

    @property
    def expression(self) -> str:
        return self.buffer.text

    def snapshot(self) -> Dict[str, Any]:
        """
        Снапшот наблюдаемого состояния (JSON-ready dict).

        Raises:
            jsonschema.ValidationError: Если снапшот нарушает контракт
        """
        snapshot = EngineSnapshot(
            expression=self.buffer.text,
            display_text=self.get_display_text(),
            angle_mode=self._angle_mode,
            error_state=self.buffer.is_error,
            error_label=self.buffer.error_label,
            precision=self.config.precision,
        )
        data = snapshot.model_dump(mode="json")
        validate_engine_snapshot(data)
        return data

    # -------------------------------------------------------------------------
    # Ошибки
    # -------------------------------------------------------------------------

    def _guarded(self, operation: Callable[[], None]) -> Optional[Failure]:
        try:
            operation()
        except CalculatorError as exc:
            logger.info("operation failed: %s (%s)", exc.kind.value, exc)
            self._surface_error(ERROR_LABELS[exc.kind])
            return Failure(kind=exc.kind, message=str(exc))
        return None

    def _surface_error(self, label: str) -> None:
        logger.warning("calculator error shown: %s", label)
        self.buffer.mark_error(label)
        self.error_reset.schedule()
