"""
Тесты для текстовых преобразований выражения

Проверяет:
1. Symbol Normalizer: глифы → канонические операторы, '^' → '**'
2. Token Accessor: разбиение на prefix и хвостовое число
3. Result Formatter: целые, округление, хвостовые нули, round-trip
"""

import math

import pytest

from src.core.domain.errors import MathError
from src.engine.result_formatter import format_result, number_to_text
from src.engine.symbol_normalizer import canonicalize_symbol, normalize
from src.engine.token_accessor import split_trailing_number

# =============================================================================
# SYMBOL NORMALIZER
# =============================================================================


class TestNormalize:
    """Тесты для normalize / canonicalize_symbol"""

    def test_visual_glyphs(self) -> None:
        assert normalize("6×2÷3") == "6*2/3"
        assert normalize("5−2–1") == "5-2-1"

    def test_power_rewritten(self) -> None:
        assert normalize("2^3^2") == "2**3**2"

    def test_canonical_text_unchanged(self) -> None:
        assert normalize("(1+2)*3/4%5") == "(1+2)*3/4%5"

    def test_canonicalize_keeps_power_marker(self) -> None:
        """При append '^' хранится как есть"""
        assert canonicalize_symbol("^") == "^"
        assert canonicalize_symbol("×") == "*"

    def test_already_normalized_is_stable(self) -> None:
        once = normalize("2^3×4")
        assert normalize(once) == once


# =============================================================================
# TOKEN ACCESSOR
# =============================================================================


class TestSplitTrailingNumber:
    """Тесты для split_trailing_number"""

    def test_simple_number(self) -> None:
        token = split_trailing_number("12+3.5")
        assert token.prefix == "12+"
        assert token.numeric_text == "3.5"
        assert token.value == 3.5

    def test_whole_expression_is_number(self) -> None:
        token = split_trailing_number("-42")
        assert token.prefix == ""
        assert token.numeric_text == "-42"

    def test_empty_expression(self) -> None:
        token = split_trailing_number("")
        assert token.is_empty
        assert token.value is None

    def test_trailing_operator(self) -> None:
        token = split_trailing_number("7*")
        assert token.prefix == "7*"
        assert token.is_empty

    def test_trailing_parenthesis(self) -> None:
        assert split_trailing_number("(1+2)").is_empty

    def test_sign_after_operator(self) -> None:
        token = split_trailing_number("2*-7")
        assert token.prefix == "2*"
        assert token.numeric_text == "-7"
        assert token.is_negative

    def test_binary_minus_is_not_sign(self) -> None:
        """В "3-5" минус — бинарный оператор"""
        token = split_trailing_number("3-5")
        assert token.prefix == "3-"
        assert token.numeric_text == "5"

    def test_minus_after_parenthesis_is_binary(self) -> None:
        assert split_trailing_number("(3)-5").numeric_text == "5"

    def test_bare_sign_is_text_without_value(self) -> None:
        token = split_trailing_number("5+-")
        assert token.numeric_text == "-"
        assert token.value is None

    def test_single_decimal_point(self) -> None:
        """Не более одной точки: в "1.2.3" хвост — "2.3" """
        token = split_trailing_number("1.2.3")
        assert token.prefix == "1."
        assert token.numeric_text == "2.3"

    def test_partial_decimals(self) -> None:
        assert split_trailing_number("4+5.").value == 5.0
        assert split_trailing_number("4+.5").value == 0.5
        assert split_trailing_number("4+.").value is None

    def test_input_not_mutated(self) -> None:
        expr = "1+2"
        token = split_trailing_number(expr)
        assert token.replace(token.numeric_text) == expr


# =============================================================================
# RESULT FORMATTER
# =============================================================================


class TestFormatResult:
    """Тесты для format_result"""

    def test_integers_without_point(self) -> None:
        assert format_result(4.0) == "4"
        assert format_result(-120.0) == "-120"
        assert format_result(1e20) == "100000000000000000000"

    def test_float_noise_removed(self) -> None:
        assert format_result(0.1 + 0.2) == "0.3"

    def test_rounded_to_precision(self) -> None:
        assert format_result(2.0 / 3.0) == "0.666666666667"
        assert format_result(2.0 / 3.0, precision=10) == "0.6666666667"

    def test_trailing_zeros_stripped(self) -> None:
        assert format_result(1.5) == "1.5"
        assert format_result(-0.25) == "-0.25"

    def test_rounds_to_integer(self) -> None:
        assert format_result(2.9999999999999996) == "3"

    def test_tiny_values_collapse_to_zero(self) -> None:
        """Никакого "-0" и экспоненциальной записи"""
        assert format_result(6.123233995736766e-17) == "0"
        assert format_result(-1e-15) == "0"
        assert format_result(-0.0) == "0"

    def test_small_values_positional(self) -> None:
        assert format_result(0.00001) == "0.00001"

    def test_large_integer_part_without_noise(self) -> None:
        """Кратчайшая запись, а не двоичное разложение до precision знаков"""
        assert format_result(1000000.1) == "1000000.1"
        assert format_result(123456789.123456789) == "123456789.12345679"
        assert format_result(-98765.4321) == "-98765.4321"

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(MathError):
            format_result(math.inf)

    def test_invalid_precision_rejected(self) -> None:
        with pytest.raises(ValueError):
            format_result(1.5, precision=0)

    @pytest.mark.parametrize(
        "value", [1 / 3, -2 / 7, 123456.789012345678, 0.000123456789, math.pi * 1e6]
    )
    def test_round_trip(self, value: float) -> None:
        """Текст парсится обратно в округлённое значение"""
        assert float(format_result(value)) == round(value, 12)


class TestNumberToText:
    """Тесты для number_to_text"""

    def test_integer_values(self) -> None:
        assert number_to_text(5.0) == "5"
        assert number_to_text(-0.0) == "0"

    def test_plain_stringification(self) -> None:
        """Без округления до precision"""
        assert number_to_text(0.05) == "0.05"
        assert number_to_text(1 / 3) == "0.3333333333333333"

    def test_no_exponent(self) -> None:
        assert number_to_text(0.00001) == "0.00001"
        assert number_to_text(1.5e-7) == "0.00000015"
