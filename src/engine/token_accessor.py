"""Token Accessor — поиск хвостового числа в выражении.

Явный обратный проход по символам вместо regex:
    [-] digits [. digits]   справа налево: цифры, не более одной '.', цифры,
                            затем необязательный '-'

'-' считается знаком числа только в позиции знака: в начале выражения или
после оператора/открывающей скобки. В "3-5" хвост — "5" (а '-' — бинарный
оператор), в "3*-5" и "-5" — "-5".
"""

from src.core.domain.expression import TrailingToken

_SIGN_CONTEXT = frozenset("+-*/%^(")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def split_trailing_number(expr: str) -> TrailingToken:
    """
    Разбиение выражения на prefix и хвостовое число.

    Никогда не падает и не меняет вход. Отсутствие хвостового числа —
    пустой numeric_text, а не ошибка.

    Examples:
        >>> split_trailing_number("12+3.5")
        TrailingToken(prefix='12+', numeric_text='3.5')
        >>> split_trailing_number("12+")
        TrailingToken(prefix='12+', numeric_text='')
        >>> split_trailing_number("2*-7")
        TrailingToken(prefix='2*', numeric_text='-7')
    """
    start = len(expr)
    seen_dot = False

    while start > 0:
        ch = expr[start - 1]
        if _is_digit(ch):
            start -= 1
        elif ch == "." and not seen_dot:
            seen_dot = True
            start -= 1
        else:
            break

    if start > 0 and expr[start - 1] == "-":
        sign_position = start - 1
        if sign_position == 0 or expr[sign_position - 1] in _SIGN_CONTEXT:
            start = sign_position

    return TrailingToken(prefix=expr[:start], numeric_text=expr[start:])
