"""
Error Reset — Отложенный сброс ошибки, привязанный к generation

После показа ошибки через error_reset_delay_ms выполняется one-shot сброс:
снять error state и очистить выражение. Сброс запоминает generation буфера
на момент ошибки; если до срабатывания была хоть одна правка (generation
изменился), сброс устаревший и ничего не делает.

Таймер предоставляет хост (Timer protocol). ManualTimer — кооперативная
реализация для однопоточного event loop: хост вызывает run_due() из своего
цикла, время берётся из инжектируемых монотонных часов.
"""

import heapq
import itertools
import logging
import time
from typing import Callable, List, Protocol, Tuple

from src.engine.expression_buffer import ExpressionBuffer

logger = logging.getLogger(__name__)


# =============================================================================
# TIMER
# =============================================================================


class Timer(Protocol):
    """Примитив таймера хоста"""

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        ...


class ManualTimer:
    """
    Кооперативный one-shot таймер.

    Задачи не отменяются и не объединяются; каждая срабатывает ровно один
    раз при первом run_due() после наступления срока.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            clock: монотонные часы в секундах
        """
        self.clock = clock
        self._sequence = itertools.count()
        self._pending: List[Tuple[float, int, Callable[[], None]]] = []

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        due = self.clock() + delay_ms / 1000.0
        heapq.heappush(self._pending, (due, next(self._sequence), callback))

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def run_due(self) -> int:
        """
        Выполнение всех задач, срок которых наступил.

        Returns:
            Количество выполненных задач
        """
        now = self.clock()
        executed = 0
        while self._pending and self._pending[0][0] <= now:
            _, _, callback = heapq.heappop(self._pending)
            callback()
            executed += 1
        return executed


# =============================================================================
# ERROR RESET SCHEDULER
# =============================================================================


class ErrorResetScheduler:
    """Планирование сброса ошибки с защитой от устаревших срабатываний"""

    def __init__(self, buffer: ExpressionBuffer, timer: Timer, delay_ms: float):
        self.buffer = buffer
        self.timer = timer
        self.delay_ms = delay_ms

    def schedule(self) -> None:
        """Запланировать сброс для текущего generation буфера."""
        generation = self.buffer.generation
        self.timer.call_later(self.delay_ms, lambda: self._reset(generation))

    def _reset(self, generation: int) -> None:
        if generation != self.buffer.generation:
            logger.debug(
                "stale error reset dropped (generation %d, current %d)",
                generation,
                self.buffer.generation,
            )
            return

        self.buffer.clear()
        logger.debug("error reset applied (generation %d)", generation)
