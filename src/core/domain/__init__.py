"""
Domain models and value objects.

Contains the calculator's fundamental types: AngleMode, TrailingToken,
evaluation outcomes, the error taxonomy and the engine snapshot.
"""

from src.core.domain.engine_state import SNAPSHOT_SCHEMA_VERSION, EngineSnapshot
from src.core.domain.errors import (
    ERROR_LABELS,
    CalculatorError,
    ErrorKind,
    GenericEvaluationError,
    InvalidArgumentError,
    InvalidCharactersError,
    MathError,
    UnknownFunctionError,
)
from src.core.domain.expression import (
    AngleMode,
    EvaluationOutcome,
    Failure,
    Success,
    TrailingToken,
)

__all__ = [
    # Expression model
    "AngleMode",
    "TrailingToken",
    "EvaluationOutcome",
    "Success",
    "Failure",
    # Errors
    "ErrorKind",
    "ERROR_LABELS",
    "CalculatorError",
    "InvalidCharactersError",
    "MathError",
    "InvalidArgumentError",
    "GenericEvaluationError",
    "UnknownFunctionError",
    # Snapshot
    "EngineSnapshot",
    "SNAPSHOT_SCHEMA_VERSION",
]
