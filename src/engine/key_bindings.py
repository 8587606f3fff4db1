"""Key Bindings — клавиатурные события → операции движка.

Хост передаёт key (и, для цифрового блока, code) из события клавиатуры.
Результат — имя действия и значение для append; None, если клавиша не
обрабатывается и хост должен оставить поведение по умолчанию.
"""

from dataclasses import dataclass
from typing import Final, Optional

EVALUATE: Final[str] = "evaluate"
DELETE: Final[str] = "delete"
CLEAR: Final[str] = "clear"
APPEND: Final[str] = "append"

CONTROL_KEYS: Final[dict[str, str]] = {
    "Enter": EVALUATE,
    "Backspace": DELETE,
    "Escape": CLEAR,
}

# Клавиша → символ для append
APPEND_KEYS: Final[dict[str, str]] = {
    "/": "/",
    "*": "*",
    "+": "+",
    "-": "-",
    ".": ".",
    "%": "%",
    "(": "(",
    ")": ")",
    "×": "*",
    "÷": "/",
}


@dataclass(frozen=True)
class KeyAction:
    action: str
    value: str = ""


def resolve_key(key: str, code: Optional[str] = None) -> Optional[KeyAction]:
    """
    Сопоставление клавиши с действием.

    Examples:
        >>> resolve_key("Enter")
        KeyAction(action='evaluate', value='')
        >>> resolve_key("7")
        KeyAction(action='append', value='7')
        >>> resolve_key("Delete", code="NumpadDecimal")
        KeyAction(action='append', value='.')
    """
    if key in CONTROL_KEYS:
        return KeyAction(CONTROL_KEYS[key])

    if key in APPEND_KEYS:
        return KeyAction(APPEND, APPEND_KEYS[key])

    if len(key) == 1 and "0" <= key <= "9":
        return KeyAction(APPEND, key)

    # NumLock выключен: key не цифра, но code указывает на цифровой блок
    if code == "NumpadDecimal":
        return KeyAction(APPEND, ".")

    return None
