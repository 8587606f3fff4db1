"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf детекцию и MathError
2. Перевод исключений примитивов в MathError
3. Точную проверку целочисленности
4. Валидацию precision
"""

import math

import pytest

from src.core.domain.errors import MathError
from src.core.math.numerical_safeguards import (
    PRECISION_MAX,
    PRECISION_MIN,
    ensure_finite,
    guarded_call,
    is_integral,
    is_valid_float,
    validate_precision,
)

# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)
        assert is_valid_float(5e-324)

    def test_nan_inf_invalid(self) -> None:
        """NaN и ±Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestEnsureFinite:
    """Тесты для ensure_finite"""

    def test_returns_value_as_float(self) -> None:
        """Конечное значение возвращается как float"""
        assert ensure_finite(4) == 4.0
        assert isinstance(ensure_finite(4), float)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_raises_math_error(self, value: float) -> None:
        """NaN/Inf → MathError"""
        with pytest.raises(MathError, match="not finite"):
            ensure_finite(value)

    def test_context_in_message(self) -> None:
        """Имя операции попадает в сообщение"""
        with pytest.raises(MathError, match="sqrt is not finite"):
            ensure_finite(float("nan"), "sqrt")


class TestGuardedCall:
    """Тесты для guarded_call"""

    def test_passes_through_result(self) -> None:
        assert guarded_call(math.sqrt, 16.0) == 4.0

    def test_domain_error_becomes_math_error(self) -> None:
        """math.sqrt(-1) поднимает ValueError → MathError"""
        with pytest.raises(MathError, match="sqrt failed"):
            guarded_call(math.sqrt, -1.0)

    def test_log_of_zero_becomes_math_error(self) -> None:
        with pytest.raises(MathError):
            guarded_call(math.log, 0.0)

    def test_overflow_becomes_math_error(self) -> None:
        with pytest.raises(MathError):
            guarded_call(math.exp, 1000.0)

    def test_infinite_result_becomes_math_error(self) -> None:
        """Примитив вернул inf без исключения"""
        with pytest.raises(MathError):
            guarded_call(lambda x: x * x, 1e200, context="pow2")

    def test_original_exception_chained(self) -> None:
        with pytest.raises(MathError) as exc_info:
            guarded_call(math.sqrt, -4.0)
        assert isinstance(exc_info.value.__cause__, ValueError)


# =============================================================================
# ТЕСТЫ ЦЕЛОЧИСЛЕННОСТИ
# =============================================================================


class TestIsIntegral:
    """Тесты для is_integral"""

    def test_integral_values(self) -> None:
        assert is_integral(0.0)
        assert is_integral(-0.0)
        assert is_integral(120.0)
        assert is_integral(-3.0)

    def test_fractional_values(self) -> None:
        """Проверка точная, без epsilon-допуска"""
        assert not is_integral(0.5)
        assert not is_integral(3.0000000001)

    def test_non_finite_not_integral(self) -> None:
        assert not is_integral(float("inf"))
        assert not is_integral(float("nan"))


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidatePrecision:
    """Тесты для validate_precision"""

    def test_bounds_accepted(self) -> None:
        validate_precision(PRECISION_MIN)
        validate_precision(PRECISION_MAX)
        validate_precision(12)

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError, match="precision must be in"):
            validate_precision(0)

        with pytest.raises(ValueError, match="precision must be in"):
            validate_precision(PRECISION_MAX + 1)
