"""
Errors — таксономия ошибок реконструкции свободного члена

Все ошибки терминальны: первая обнаруженная ошибка прерывает вычисление,
частичный результат не формируется, повторов нет.

Иерархия:
    ConstantTermError
    ├── InvalidInputFormat   (документ не является корректным JSON-объектом)
    ├── MissingParameter     (нет keys.k)
    ├── InvalidParameter     (k не положительное целое)
    ├── InsufficientRoots    (корней меньше, чем k)
    ├── MalformedRoot        (выбранная запись корня некорректна)
    └── BaseNParseError
        ├── InvalidBase      (основание вне [2, 36])
        ├── InvalidDigit     (символ не является цифрой)
        └── DigitOutOfRange  (значение цифры >= основания)
"""

from typing import Any, Optional


class ConstantTermError(Exception):
    """
    Базовая ошибка пакета.

    exit_code: код завершения процесса для CLI.
    """

    exit_code: int = 1


# =============================================================================
# ОШИБКИ ВХОДНОГО ДОКУМЕНТА
# =============================================================================


class InvalidInputFormat(ConstantTermError):
    """Вход не является корректным структурированным документом."""


class MissingParameter(ConstantTermError):
    """В документе отсутствует параметр степени keys.k."""

    def __init__(self, name: str = "keys.k"):
        self.name = name
        super().__init__(
            f'missing parameter {name}: JSON must include "keys": {{"k": <number>, ...}}'
        )


class InvalidParameter(ConstantTermError):
    """Параметр степени не является положительным целым."""

    def __init__(self, value: Any, name: str = "k"):
        self.name = name
        self.value = value
        super().__init__(f"invalid {name}: expected a positive integer, got {value!r}")


class InsufficientRoots(ConstantTermError):
    """Корней в документе меньше, чем требует k."""

    def __init__(self, required: int, found: int):
        self.required = required
        self.found = found
        super().__init__(
            f"not enough roots provided: need at least k={required}, found {found}"
        )


class MalformedRoot(ConstantTermError):
    """
    Выбранная запись корня некорректна.

    Причина (ошибка разбора или валидации) доступна через __cause__
    и атрибут reason.
    """

    def __init__(self, identifier: int, reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"malformed root entry at key {identifier}: {reason}")


# =============================================================================
# ОШИБКИ РАЗБОРА BASE-N
# =============================================================================


class BaseNParseError(ConstantTermError):
    """Базовая ошибка разбора строки цифр."""


class InvalidBase(BaseNParseError):
    """Основание вне диапазона [2, 36] или не целое."""

    def __init__(self, base: Any, identifier: Optional[int] = None):
        self.base = base
        self.identifier = identifier
        where = f" (root {identifier})" if identifier is not None else ""
        super().__init__(f"base must be between 2 and 36, found {base!r}{where}")


class InvalidDigit(BaseNParseError):
    """Символ не отображается ни в одну цифру 0-9, a-z."""

    def __init__(self, char: str, position: Optional[int] = None):
        self.char = char
        self.position = position
        if not char:
            message = "empty digit string"
        elif position is None:
            message = f"invalid digit {char!r}"
        else:
            message = f"invalid digit {char!r} at position {position}"
        super().__init__(message)


class DigitOutOfRange(BaseNParseError):
    """Значение цифры не меньше основания."""

    def __init__(self, char: str, value: int, base: int):
        self.char = char
        self.value = value
        self.base = base
        super().__init__(f"digit {char!r} (value {value}) not valid for base {base}")
