"""
Expression Parser — Безопасный разбор арифметических выражений

Небольшой tokenizer + recursive descent parser. Поддерживает ТОЛЬКО:
- числа: 12, 1.5, .5, 5.
- бинарные операторы: + - * / % **
- унарные + и -
- скобки

Код хоста никогда не исполняется (никаких eval/exec/ast.parse).

ГРАММАТИКА:
    expr    := term (('+' | '-') term)*             левая ассоциативность
    term    := unary (('*' | '/' | '%') unary)*     левая ассоциативность
    unary   := ('+' | '-') unary | power
    power   := atom ('**' unary)?                   правая ассоциативность
    atom    := NUMBER | '(' expr ')'

'**' связывает сильнее ведущего знака: -2**2 == -4, 2**-1 == 0.5.
'%' — остаток с усечением (math.fmod): знак результата следует делимому.
"""

import math
from dataclasses import dataclass
from typing import Callable, Final, List

# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExpressionSyntaxError(ValueError):
    """Выражение не соответствует грамматике"""

    pass


class ArithmeticFault(ArithmeticError):
    """Арифметическая операция не определена (деление на ноль, overflow)"""

    pass


# =============================================================================
# TOKENIZER
# =============================================================================

NUMBER: Final[str] = "NUMBER"
OPERATOR: Final[str] = "OPERATOR"
LPAREN: Final[str] = "LPAREN"
RPAREN: Final[str] = "RPAREN"
END: Final[str] = "END"

_SINGLE_CHAR_OPERATORS: Final[frozenset[str]] = frozenset("+-*/%")


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    position: int


def tokenize(text: str) -> List[Token]:
    """
    Разбиение текста на токены.

    Args:
        text: Нормализованное выражение

    Returns:
        Список токенов, последний всегда END

    Raises:
        ExpressionSyntaxError: Неизвестный символ или число с двумя точками
    """
    tokens: List[Token] = []
    i = 0
    length = len(text)

    while i < length:
        ch = text[i]

        if ch.isspace():
            i += 1
            continue

        if ch.isdigit() or ch == ".":
            start = i
            seen_dot = False
            while i < length and (text[i].isdigit() or text[i] == "."):
                if text[i] == ".":
                    if seen_dot:
                        raise ExpressionSyntaxError(f"unexpected '.' at position {i}")
                    seen_dot = True
                i += 1
            literal = text[start:i]
            if literal == ".":
                raise ExpressionSyntaxError(f"dangling '.' at position {start}")
            tokens.append(Token(NUMBER, literal, start))
            continue

        if ch == "*" and text.startswith("**", i):
            tokens.append(Token(OPERATOR, "**", i))
            i += 2
            continue

        if ch in _SINGLE_CHAR_OPERATORS:
            tokens.append(Token(OPERATOR, ch, i))
            i += 1
            continue

        if ch == "(":
            tokens.append(Token(LPAREN, ch, i))
            i += 1
            continue

        if ch == ")":
            tokens.append(Token(RPAREN, ch, i))
            i += 1
            continue

        raise ExpressionSyntaxError(f"unexpected character {ch!r} at position {i}")

    tokens.append(Token(END, "", length))
    return tokens


# =============================================================================
# ARITHMETIC
# =============================================================================


def _divide(left: float, right: float) -> float:
    if right == 0:
        raise ArithmeticFault("division by zero")
    return left / right


def _remainder(left: float, right: float) -> float:
    if right == 0:
        raise ArithmeticFault("modulo by zero")
    return math.fmod(left, right)


def _power(left: float, right: float) -> float:
    try:
        result = math.pow(left, right)
    except ValueError as exc:
        # (-8) ** (1/3) и 0 ** -1
        raise ArithmeticFault(f"power undefined: {left} ** {right}") from exc
    except OverflowError as exc:
        raise ArithmeticFault(f"power overflow: {left} ** {right}") from exc
    return result


_BINARY_OPERATORS: Final[dict[str, Callable[[float, float], float]]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
    "%": _remainder,
}


# =============================================================================
# PARSER
# =============================================================================


class ExpressionParser:
    """
    Recursive descent parser, вычисляющий значение во время разбора.

    Экземпляр одноразовый: один текст — один вызов parse().
    """

    def __init__(self, text: str):
        self.text = text
        self._tokens = tokenize(text)
        self._index = 0

    def parse(self) -> float:
        """
        Разбор и вычисление всего выражения.

        Raises:
            ExpressionSyntaxError: Текст не соответствует грамматике
            ArithmeticFault: Арифметическая операция не определена
        """
        value = self._expr()
        token = self._peek()
        if token.kind != END:
            raise ExpressionSyntaxError(
                f"unexpected {token.text!r} at position {token.position}"
            )
        return value

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        self._index += 1
        return token

    def _at_operator(self, *operators: str) -> bool:
        token = self._peek()
        return token.kind == OPERATOR and token.text in operators

    def _expr(self) -> float:
        value = self._term()
        while self._at_operator("+", "-"):
            op = self._advance().text
            value = _BINARY_OPERATORS[op](value, self._term())
        return value

    def _term(self) -> float:
        value = self._unary()
        while self._at_operator("*", "/", "%"):
            op = self._advance().text
            value = _BINARY_OPERATORS[op](value, self._unary())
        return value

    def _unary(self) -> float:
        if self._at_operator("+", "-"):
            op = self._advance().text
            operand = self._unary()
            return -operand if op == "-" else operand
        return self._power()

    def _power(self) -> float:
        base = self._atom()
        if self._at_operator("**"):
            self._advance()
            exponent = self._unary()
            return _power(base, exponent)
        return base

    def _atom(self) -> float:
        token = self._advance()

        if token.kind == NUMBER:
            return float(token.text)

        if token.kind == LPAREN:
            value = self._expr()
            closing = self._advance()
            if closing.kind != RPAREN:
                raise ExpressionSyntaxError(
                    f"expected ')' at position {closing.position}"
                )
            return value

        if token.kind == END:
            raise ExpressionSyntaxError("unexpected end of expression")

        raise ExpressionSyntaxError(
            f"unexpected {token.text!r} at position {token.position}"
        )


def evaluate_arithmetic(text: str) -> float:
    """
    Вычисление арифметического выражения.

    Args:
        text: Нормализованное выражение ('**' для степени)

    Returns:
        Значение как float (может быть ±Inf/NaN только при overflow
        сложения/умножения — проверяется вызывающим кодом)

    Raises:
        ExpressionSyntaxError: Текст не соответствует грамматике
        ArithmeticFault: Деление/остаток на ноль, неопределённая степень

    Examples:
        >>> evaluate_arithmetic("2+3*4")
        14.0
        >>> evaluate_arithmetic("(2+3)*4")
        20.0
        >>> evaluate_arithmetic("2**3**2")
        512.0
    """
    return ExpressionParser(text).parse()
