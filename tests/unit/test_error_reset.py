"""
Тесты для Error Reset

Проверяет:
1. ManualTimer: срабатывание по сроку, порядок, one-shot
2. ErrorResetScheduler: сброс после ошибки
3. Устаревший сброс (была правка) ничего не делает
"""

import pytest

from src.engine.error_reset import ErrorResetScheduler, ManualTimer
from src.engine.expression_buffer import ExpressionBuffer


class FakeClock:
    """Управляемые монотонные часы (секунды)"""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000.0


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def timer(clock: FakeClock) -> ManualTimer:
    return ManualTimer(clock=clock)


# =============================================================================
# MANUAL TIMER
# =============================================================================


class TestManualTimer:
    """Тесты для ManualTimer"""

    def test_not_due_yet(self, timer: ManualTimer, clock: FakeClock) -> None:
        fired = []
        timer.call_later(900, lambda: fired.append(1))
        clock.advance_ms(899)
        assert timer.run_due() == 0
        assert fired == []
        assert timer.pending_count == 1

    def test_fires_once_when_due(self, timer: ManualTimer, clock: FakeClock) -> None:
        fired = []
        timer.call_later(900, lambda: fired.append(1))
        clock.advance_ms(900)
        assert timer.run_due() == 1
        assert timer.run_due() == 0
        assert fired == [1]
        assert timer.pending_count == 0

    def test_order_by_due_time(self, timer: ManualTimer, clock: FakeClock) -> None:
        fired = []
        timer.call_later(500, lambda: fired.append("late"))
        timer.call_later(100, lambda: fired.append("early"))
        clock.advance_ms(1000)
        timer.run_due()
        assert fired == ["early", "late"]

    def test_same_due_time_keeps_insertion_order(self, timer: ManualTimer, clock: FakeClock) -> None:
        fired = []
        timer.call_later(100, lambda: fired.append("first"))
        timer.call_later(100, lambda: fired.append("second"))
        clock.advance_ms(100)
        timer.run_due()
        assert fired == ["first", "second"]


# =============================================================================
# ERROR RESET SCHEDULER
# =============================================================================


class TestErrorResetScheduler:
    """Тесты для ErrorResetScheduler"""

    @pytest.fixture
    def buffer(self) -> ExpressionBuffer:
        buffer = ExpressionBuffer()
        buffer.replace_all("1/0")
        return buffer

    @pytest.fixture
    def scheduler(self, buffer: ExpressionBuffer, timer: ManualTimer) -> ErrorResetScheduler:
        return ErrorResetScheduler(buffer=buffer, timer=timer, delay_ms=900)

    def test_reset_clears_error_and_expression(
        self, buffer: ExpressionBuffer, scheduler: ErrorResetScheduler, timer: ManualTimer, clock: FakeClock
    ) -> None:
        buffer.mark_error("Math error")
        scheduler.schedule()
        clock.advance_ms(900)
        timer.run_due()
        assert not buffer.is_error
        assert buffer.text == ""

    def test_error_visible_until_due(
        self, buffer: ExpressionBuffer, scheduler: ErrorResetScheduler, timer: ManualTimer, clock: FakeClock
    ) -> None:
        buffer.mark_error("Math error")
        scheduler.schedule()
        clock.advance_ms(500)
        timer.run_due()
        assert buffer.error_label == "Math error"
        assert buffer.text == "1/0"

    def test_stale_reset_dropped(
        self, buffer: ExpressionBuffer, scheduler: ErrorResetScheduler, timer: ManualTimer, clock: FakeClock
    ) -> None:
        """Правка до срабатывания отменяет сброс"""
        buffer.mark_error("Math error")
        scheduler.schedule()
        buffer.append("7")
        clock.advance_ms(900)
        assert timer.run_due() == 1
        assert buffer.text == "1/07"

    def test_only_latest_error_resets(
        self, buffer: ExpressionBuffer, scheduler: ErrorResetScheduler, timer: ManualTimer, clock: FakeClock
    ) -> None:
        buffer.mark_error("Math error")
        scheduler.schedule()
        clock.advance_ms(300)
        buffer.replace_all("2/0")
        buffer.mark_error("Math error")
        scheduler.schedule()

        clock.advance_ms(600)
        timer.run_due()  # первый сброс устарел
        assert buffer.is_error

        clock.advance_ms(400)
        timer.run_due()
        assert not buffer.is_error
        assert buffer.text == ""
