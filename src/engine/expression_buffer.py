"""
Expression Buffer — Изменяемое состояние выражения

Хранит:
- text: каноническое выражение ("" означает «показать 0»)
- error_label: текст показываемой ошибки (None вне error state)
- generation: счётчик правок, увеличивается при КАЖДОЙ мутации text

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. text никогда не None
2. text никогда не нормализуется частично ('^' хранится как '^')
3. "0" + цифра → цифра (без ведущих "00")
4. Любая мутация text (и delete_last на пустом) снимает error state
5. generation растёт монотонно; отложенный сброс ошибки с устаревшим
   generation игнорируется
"""

import logging
from typing import Optional

from src.core.domain.expression import TrailingToken
from src.engine.result_formatter import number_to_text
from src.engine.symbol_normalizer import canonicalize_symbol
from src.engine.token_accessor import split_trailing_number

logger = logging.getLogger(__name__)


def _is_single_digit(value: str) -> bool:
    return len(value) == 1 and "0" <= value <= "9"


class ExpressionBuffer:
    """Буфер выражения с токенными операциями редактирования"""

    def __init__(self, text: str = ""):
        self._text = text
        self._error_label: Optional[str] = None
        self._generation = 0

    # -------------------------------------------------------------------------
    # Наблюдаемое состояние
    # -------------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def error_label(self) -> Optional[str]:
        return self._error_label

    @property
    def is_error(self) -> bool:
        return self._error_label is not None

    def trailing(self) -> TrailingToken:
        """Хвостовое число текущего выражения (пересчитывается при каждом вызове)"""
        return split_trailing_number(self._text)

    # -------------------------------------------------------------------------
    # Запись
    # -------------------------------------------------------------------------

    def _write(self, text: str) -> None:
        self._text = text
        self._error_label = None
        self._generation += 1

    def mark_error(self, label: str) -> None:
        """Показать ошибку. Текст выражения не меняется."""
        self._error_label = label

    def clear_error(self) -> None:
        self._error_label = None

    def replace_all(self, text: str) -> None:
        """Полная замена выражения (результат вычисления, сброс)."""
        self._write(text)

    def replace_trailing(self, numeric_text: str) -> None:
        """Замена хвостового числа (может быть пустым) на numeric_text."""
        self._write(self.trailing().replace(numeric_text))

    # -------------------------------------------------------------------------
    # Операции редактирования
    # -------------------------------------------------------------------------

    def append(self, value: str) -> None:
        """
        Добавление цифры/оператора/точки.

        Визуальные глифы канонизируются сразу. Если всё выражение — ровно "0",
        а value — одна цифра, выражение заменяется (нет "00").
        """
        value = canonicalize_symbol(value)

        if self._text == "0" and _is_single_digit(value):
            self._write(value)
        else:
            self._write(self._text + value)

        logger.debug("append %r -> %r", value, self._text)

    def clear(self) -> None:
        self._write("")
        logger.debug("clear")

    def delete_last(self) -> None:
        """Удаление последнего символа; на пустом выражении — no-op."""
        self.clear_error()
        if not self._text:
            return
        self._write(self._text[:-1])
        logger.debug("delete_last -> %r", self._text)

    def negate_last(self) -> None:
        """
        Переключение знака хвостового числа.

        Нет хвостового числа → добавить '-' (начало ввода отрицательного).
        Иначе → снять ведущий '-', если он есть, или добавить его.
        Больше одного знака не бывает.
        """
        token = self.trailing()

        if token.is_empty:
            self._write(self._text + "-")
        elif token.is_negative:
            self._write(token.replace(token.numeric_text[1:]))
        else:
            self._write(token.replace("-" + token.numeric_text))

        logger.debug("negate_last -> %r", self._text)

    def percent_last(self) -> None:
        """
        Замена хвостового числа n на n/100.

        Нет парсящегося хвостового числа → no-op. Запись — простая
        строковая конверсия (number_to_text), без округления до precision.
        """
        token = self.trailing()
        value = token.value
        if value is None:
            return

        self._write(token.replace(number_to_text(value / 100)))
        logger.debug("percent_last -> %r", self._text)
