"""
Function Applicator — Применение научных функций к хвостовому числу

Две категории функций:

1. Вставка (без вычисления):
   - power: добавить маркер степени '^' (безусловно)
   - pi, e: ЗАМЕНИТЬ хвостовое число (возможно пустое) константой
   - percent, negate: делегируются ExpressionBuffer

2. Вычисление (требуют парсящееся хвостовое число, иначе silent no-op):
   - sin, cos, tan: аргумент переводится из AngleMode в радианы
   - asin, acos, atan: результат переводится из радиан в AngleMode
   - ln, log10, sqrt, pow2, pow3, exp, abs, reciprocal, factorial

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. При ошибке (MathError, InvalidArgumentError) буфер НЕ меняется
2. NaN/Inf результата → MathError, в буфер не пишется
3. Успешный результат пишется через format_result (precision из config)
4. Имя вне закрытого набора → UnknownFunctionError (ошибка хоста)
"""

import logging
from typing import Callable, Final, Optional

from src.core.domain.errors import UnknownFunctionError
from src.core.domain.expression import AngleMode
from src.core.math.numerical_safeguards import RESULT_PRECISION_SCIENTIFIC, guarded_call
from src.core.math.scientific import E_TEXT, PI_TEXT, TRIG_FUNCTIONS, UNARY_FUNCTIONS
from src.engine.expression_buffer import ExpressionBuffer
from src.engine.result_formatter import format_result
from src.engine.symbol_normalizer import POWER_MARKER

logger = logging.getLogger(__name__)

INSERTION_FUNCTIONS: Final[frozenset[str]] = frozenset({"power", "pi", "e", "percent", "negate"})
EVALUATING_FUNCTIONS: Final[frozenset[str]] = frozenset(TRIG_FUNCTIONS) | frozenset(UNARY_FUNCTIONS)
SUPPORTED_FUNCTIONS: Final[frozenset[str]] = INSERTION_FUNCTIONS | EVALUATING_FUNCTIONS


class FunctionApplicator:
    """
    Диспетчер функций над ExpressionBuffer.

    AngleMode читается через angle_mode_provider при каждом вызове, чтобы
    переключение режима хостом сразу влияло на тригонометрию.
    """

    def __init__(
        self,
        buffer: ExpressionBuffer,
        angle_mode_provider: Callable[[], AngleMode],
        precision: int = RESULT_PRECISION_SCIENTIFIC,
        power_enabled: bool = True,
    ):
        """
        Args:
            buffer: буфер выражения, который редактируется
            angle_mode_provider: источник текущего AngleMode
            precision: знаков после точки в результате
            power_enabled: False для базовой грамматики без '^'
        """
        self.buffer = buffer
        self.angle_mode_provider = angle_mode_provider
        self.precision = precision
        self.power_enabled = power_enabled

    def apply(self, name: str) -> None:
        """
        Применение функции по имени.

        Raises:
            UnknownFunctionError: Имя вне закрытого набора
            MathError: Результат NaN/Inf или вне области определения
            InvalidArgumentError: factorial от отрицательного/дробного
        """
        if name not in SUPPORTED_FUNCTIONS:
            raise UnknownFunctionError(f"unknown function: {name!r}")

        if name in INSERTION_FUNCTIONS:
            self._apply_insertion(name)
        else:
            self._apply_evaluating(name)

    def _apply_insertion(self, name: str) -> None:
        if name == "power":
            if self.power_enabled:
                self.buffer.append(POWER_MARKER)
        elif name == "pi":
            self.buffer.replace_trailing(PI_TEXT)
        elif name == "e":
            self.buffer.replace_trailing(E_TEXT)
        elif name == "percent":
            self.buffer.percent_last()
        elif name == "negate":
            self.buffer.negate_last()

    def _apply_evaluating(self, name: str) -> None:
        operand = self.buffer.trailing().value
        if operand is None:
            logger.debug("%s skipped: no trailing number", name)
            return

        result = self._compute(name, operand)
        text = format_result(result, self.precision)
        self.buffer.replace_trailing(text)
        logger.debug("%s(%r) -> %s", name, operand, text)

    def _compute(self, name: str, operand: float) -> float:
        trig: Optional[Callable[[float, AngleMode], float]] = TRIG_FUNCTIONS.get(name)
        if trig is not None:
            return guarded_call(trig, operand, self.angle_mode_provider(), context=name)
        return guarded_call(UNARY_FUNCTIONS[name], operand, context=name)
