"""
Тесты для научных функций

Проверяет:
1. Конверсию углов с учётом AngleMode
2. Прямую и обратную тригонометрию в DEGREES/RADIANS
3. reciprocal и factorial (включая ошибки аргумента)
"""

import math

import pytest

from src.core.domain.errors import InvalidArgumentError, MathError
from src.core.domain.expression import AngleMode
from src.core.math.scientific import (
    E_TEXT,
    PI_TEXT,
    UNARY_FUNCTIONS,
    acos,
    asin,
    atan,
    cos,
    factorial,
    from_radians,
    pow2,
    pow3,
    reciprocal,
    sin,
    tan,
    to_radians,
)


class TestAngleConversion:
    """Тесты для to_radians / from_radians"""

    def test_degrees_to_radians(self) -> None:
        assert to_radians(180.0, AngleMode.DEGREES) == pytest.approx(math.pi)

    def test_radians_passthrough(self) -> None:
        assert to_radians(1.5, AngleMode.RADIANS) == 1.5
        assert from_radians(1.5, AngleMode.RADIANS) == 1.5

    def test_radians_to_degrees(self) -> None:
        assert from_radians(math.pi / 2, AngleMode.DEGREES) == pytest.approx(90.0)


class TestTrigonometry:
    """Прямая и обратная тригонометрия"""

    def test_sin_90_degrees(self) -> None:
        assert sin(90.0, AngleMode.DEGREES) == pytest.approx(1.0)

    def test_sin_radians(self) -> None:
        assert sin(math.pi / 2, AngleMode.RADIANS) == pytest.approx(1.0)

    def test_cos_and_tan_degrees(self) -> None:
        assert cos(60.0, AngleMode.DEGREES) == pytest.approx(0.5)
        assert tan(45.0, AngleMode.DEGREES) == pytest.approx(1.0)

    def test_inverse_in_degrees(self) -> None:
        """Результат обратных функций — в текущем режиме"""
        assert asin(1.0, AngleMode.DEGREES) == pytest.approx(90.0)
        assert acos(0.5, AngleMode.DEGREES) == pytest.approx(60.0)
        assert atan(1.0, AngleMode.DEGREES) == pytest.approx(45.0)

    def test_inverse_in_radians(self) -> None:
        assert asin(1.0, AngleMode.RADIANS) == pytest.approx(math.pi / 2)

    def test_asin_out_of_domain(self) -> None:
        """Сам примитив поднимает ValueError; в MathError его переводит guarded_call"""
        with pytest.raises(ValueError):
            asin(2.0, AngleMode.DEGREES)


class TestPowersAndReciprocal:
    """pow2 / pow3 / reciprocal"""

    def test_powers(self) -> None:
        assert pow2(-3.0) == 9.0
        assert pow3(-2.0) == -8.0

    def test_reciprocal(self) -> None:
        assert reciprocal(4.0) == 0.25
        assert reciprocal(-0.5) == -2.0

    def test_reciprocal_of_zero(self) -> None:
        with pytest.raises(MathError, match="reciprocal of zero"):
            reciprocal(0.0)


class TestFactorial:
    """Тесты для factorial"""

    @pytest.mark.parametrize("n, expected", [(0.0, 1.0), (1.0, 1.0), (5.0, 120.0), (10.0, 3628800.0)])
    def test_values(self, n: float, expected: float) -> None:
        assert factorial(n) == expected

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="non-negative integer"):
            factorial(-1.0)

    def test_fraction_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            factorial(2.5)

    def test_overflow_becomes_inf(self) -> None:
        """171! не помещается в float; цикл прерывается досрочно"""
        assert math.isinf(factorial(171.0))
        assert math.isinf(factorial(1e7))


class TestConstantsAndTable:
    """Константы и таблица унарных функций"""

    def test_constant_text(self) -> None:
        assert PI_TEXT == "3.141592653589793"
        assert E_TEXT == "2.718281828459045"

    def test_unary_table_is_closed(self) -> None:
        assert set(UNARY_FUNCTIONS) == {
            "ln", "log10", "sqrt", "pow2", "pow3", "exp", "abs", "reciprocal", "factorial",
        }
