"""
Evaluator — Нормализация, валидация и вычисление выражения

Порядок проверок:
1. Пустое выражение → None (no-op)
2. Нормализация (× ÷ − – → * / -, '^' → '**' только в SCIENTIFIC)
3. Валидация набора символов (грамматика SCIENTIFIC или BASIC)
4. Отбрасывание одного висящего хвоста (TrailingStripRule)
5. Вычисление собственным парсером (без исполнения кода хоста)
6. ±Inf/NaN или арифметическая ошибка → MATH_ERROR
7. Success(value)

Все ошибки возвращаются как Failure; исключения наружу не выходят.
"""

import logging
import re
from typing import Final, Optional, Pattern

from src.core.domain.errors import (
    CalculatorError,
    GenericEvaluationError,
    InvalidCharactersError,
    MathError,
)
from src.core.domain.expression import EvaluationOutcome, Failure, Success
from src.core.math.expression_parser import (
    ArithmeticFault,
    ExpressionSyntaxError,
    evaluate_arithmetic,
)
from src.core.math.numerical_safeguards import ensure_finite
from src.engine.config import ExpressionGrammar, TrailingStripRule
from src.engine.symbol_normalizer import POWER_OPERATOR, canonicalize_symbol, normalize

logger = logging.getLogger(__name__)

# =============================================================================
# ГРАММАТИКИ
# =============================================================================

ALLOWED_CHARACTERS: Final[dict[ExpressionGrammar, Pattern[str]]] = {
    ExpressionGrammar.SCIENTIFIC: re.compile(r"[0-9+\-*/%^().\s]+"),
    ExpressionGrammar.BASIC: re.compile(r"[0-9+\-*/%.()\s]+"),
}

# Хвостовые операторы для TrailingStripRule.OPERATOR ('^' уже переписан в '**')
_TRAILING_OPERATORS: Final[tuple[str, ...]] = (POWER_OPERATOR, "*", "+", "-", "/", "%")


def strip_trailing(text: str, rule: TrailingStripRule) -> str:
    """
    Отбрасывание одного висящего хвоста перед вычислением.

    OPERATOR: ровно один хвостовой оператор; '**' считается одним оператором.
    NON_TERMINAL: один любой символ, кроме цифры, '.' и ')'.

    Examples:
        >>> strip_trailing("3+", TrailingStripRule.OPERATOR)
        '3'
        >>> strip_trailing("2**", TrailingStripRule.OPERATOR)
        '2'
        >>> strip_trailing("3+(", TrailingStripRule.NON_TERMINAL)
        '3+'
    """
    if not text:
        return text

    if rule == TrailingStripRule.OPERATOR:
        for operator in _TRAILING_OPERATORS:
            if text.endswith(operator):
                return text[: -len(operator)]
        return text

    last = text[-1]
    if last.isdigit() or last in ".)":
        return text
    return text[:-1]


# =============================================================================
# EVALUATOR
# =============================================================================


class Evaluator:
    """Вычисление выражения в EvaluationOutcome"""

    def __init__(
        self,
        grammar: ExpressionGrammar = ExpressionGrammar.SCIENTIFIC,
        trailing_strip_rule: TrailingStripRule = TrailingStripRule.OPERATOR,
    ):
        self.grammar = grammar
        self.trailing_strip_rule = trailing_strip_rule
        self._allowed = ALLOWED_CHARACTERS[grammar]

    def evaluate(self, expression: str) -> Optional[EvaluationOutcome]:
        """
        Вычисление выражения.

        Args:
            expression: Хранимое (ненормализованное) выражение

        Returns:
            None для пустого выражения, иначе Success или Failure
        """
        if not expression:
            return None

        try:
            value = self.compute(expression)
        except CalculatorError as exc:
            logger.info("evaluate %r failed: %s (%s)", expression, exc.kind.value, exc)
            return Failure(kind=exc.kind, message=str(exc))

        logger.info("evaluate %r -> %r", expression, value)
        return Success(value=value)

    def compute(self, expression: str) -> float:
        """
        Вычисление с исключениями вместо Failure.

        Raises:
            InvalidCharactersError: Недопустимый символ после нормализации
            GenericEvaluationError: Парсер отверг синтаксис
            MathError: Деление на ноль, overflow, NaN/Inf
        """
        # В BASIC степени нет: '^' не переписывается и отсекается валидацией
        if self.grammar == ExpressionGrammar.SCIENTIFIC:
            normalized = normalize(expression)
        else:
            normalized = canonicalize_symbol(expression)

        if not self._allowed.fullmatch(normalized):
            raise InvalidCharactersError(f"invalid characters in {expression!r}")

        prepared = strip_trailing(normalized, self.trailing_strip_rule)

        try:
            value = evaluate_arithmetic(prepared)
        except ExpressionSyntaxError as exc:
            raise GenericEvaluationError(str(exc)) from exc
        except RecursionError as exc:
            raise GenericEvaluationError("expression nested too deeply") from exc
        except (ArithmeticFault, OverflowError, ZeroDivisionError) as exc:
            raise MathError(str(exc)) from exc

        return ensure_finite(value, "result")
