"""
Core math modules калькулятора

Математические примитивы: численные проверки, безопасный парсер
арифметических выражений, научные функции.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    PRECISION_MAX,
    PRECISION_MIN,
    RESULT_PRECISION_BASIC,
    RESULT_PRECISION_SCIENTIFIC,
    ensure_finite,
    guarded_call,
    is_integral,
    is_valid_float,
    validate_precision,
)

# Expression Parser
from src.core.math.expression_parser import (
    ArithmeticFault,
    ExpressionParser,
    ExpressionSyntaxError,
    evaluate_arithmetic,
    tokenize,
)

# Scientific
from src.core.math.scientific import (
    E_TEXT,
    PI_TEXT,
    TRIG_FUNCTIONS,
    UNARY_FUNCTIONS,
    factorial,
    from_radians,
    reciprocal,
    to_radians,
)

__all__ = [
    # Numerical Safeguards — Constants
    "PRECISION_MAX",
    "PRECISION_MIN",
    "RESULT_PRECISION_BASIC",
    "RESULT_PRECISION_SCIENTIFIC",
    # Numerical Safeguards — Functions
    "ensure_finite",
    "guarded_call",
    "is_integral",
    "is_valid_float",
    "validate_precision",
    # Expression Parser — Exceptions
    "ArithmeticFault",
    "ExpressionSyntaxError",
    # Expression Parser — Types / Functions
    "ExpressionParser",
    "evaluate_arithmetic",
    "tokenize",
    # Scientific — Constants
    "E_TEXT",
    "PI_TEXT",
    "TRIG_FUNCTIONS",
    "UNARY_FUNCTIONS",
    # Scientific — Functions
    "factorial",
    "from_radians",
    "reciprocal",
    "to_radians",
]
