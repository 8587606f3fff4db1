"""Engine — движок выражения калькулятора.

- CalculatorEngine: фасад для хоста
- ExpressionBuffer, FunctionApplicator, Evaluator: компоненты движка
- EngineConfig: конфигурация
"""

from .calculator import CalculatorEngine
from .config import EngineConfig, ExpressionGrammar, TrailingStripRule, load_engine_config
from .error_reset import ErrorResetScheduler, ManualTimer, Timer
from .evaluator import Evaluator, strip_trailing
from .expression_buffer import ExpressionBuffer
from .function_applicator import SUPPORTED_FUNCTIONS, FunctionApplicator
from .result_formatter import format_result, number_to_text
from .storage import InMemoryStorage, JsonFileStorage, KeyValueStorage
from .symbol_normalizer import canonicalize_symbol, normalize
from .token_accessor import split_trailing_number

__all__ = [
    "CalculatorEngine",
    "EngineConfig",
    "ExpressionGrammar",
    "TrailingStripRule",
    "load_engine_config",
    "ErrorResetScheduler",
    "ManualTimer",
    "Timer",
    "Evaluator",
    "strip_trailing",
    "ExpressionBuffer",
    "FunctionApplicator",
    "SUPPORTED_FUNCTIONS",
    "format_result",
    "number_to_text",
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
    "canonicalize_symbol",
    "normalize",
    "split_trailing_number",
]
