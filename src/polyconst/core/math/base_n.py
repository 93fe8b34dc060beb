"""
Base-N Integer Parser — разбор строки цифр в произвольном основании

Позиционная запись: строка обрабатывается слева направо,
    acc = 0
    acc = acc * base + digit_value(ch)   для каждого символа ch

Точность не ограничена (Python int), поэтому строки из сотен двоичных
разрядов разбираются точно.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Основание строго в [MIN_BASE, MAX_BASE], иначе InvalidBase
2. Цифры регистронезависимы: 'a' == 'A' == 10
3. Символ группировки пропускается, но строка без цифр недопустима
4. Десятичная цифра >= base → DigitOutOfRange; буква вне алфавита
   основания ("g" при base=16) → InvalidDigit
5. Функции чистые, без побочных эффектов
"""

from typing import Any

from polyconst.core.config import DEFAULT_GROUPING_SEPARATOR, MAX_BASE, MIN_BASE
from polyconst.core.errors import DigitOutOfRange, InvalidBase, InvalidDigit

_DIGIT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_base(base: Any) -> int:
    """
    Проверка основания системы счисления.

    Args:
        base: Основание (ожидается int в [2, 36]; bool не допускается)

    Returns:
        base без изменений

    Raises:
        InvalidBase: Если base не int или вне диапазона
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base)
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBase(base)
    return base


def digit_value(ch: str) -> int:
    """
    Значение одного цифрового символа.

    '0'-'9' → 0-9, 'a'-'z' / 'A'-'Z' → 10-35. Только ASCII: символы вроде
    арабско-индийских цифр или знака Кельвина отклоняются.

    Raises:
        InvalidDigit: Если символ не является цифрой ни в одном основании

    Examples:
        >>> digit_value("7")
        7
        >>> digit_value("F")
        15
    """
    if len(ch) != 1 or not ch.isascii():
        raise InvalidDigit(ch)
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    lower = ch.lower()
    if "a" <= lower <= "z":
        return 10 + ord(lower) - ord("a")
    raise InvalidDigit(ch)


# =============================================================================
# РАЗБОР И ФОРМАТИРОВАНИЕ
# =============================================================================


def parse_base_n(
    digits: str,
    base: int,
    separator: str = DEFAULT_GROUPING_SEPARATOR,
) -> int:
    """
    Разбор строки цифр в основании base.

    Args:
        digits: Строка цифр, допускает символ группировки (например "1010_1010")
        base: Основание в [2, 36]
        separator: Игнорируемый символ группировки

    Returns:
        Неотрицательное целое произвольной величины

    Raises:
        InvalidBase: Основание вне [2, 36]
        InvalidDigit: Недопустимый символ, буква вне алфавита основания
            или строка без цифр
        DigitOutOfRange: Десятичная цифра со значением >= base

    Examples:
        >>> parse_base_n("ff", 16)
        255
        >>> parse_base_n("1_0", 2)
        2
    """
    validate_base(base)
    if not isinstance(digits, str):
        raise TypeError(f"digits must be a string, got {type(digits).__name__}")

    acc = 0
    seen = 0
    for position, ch in enumerate(digits):
        if ch == separator:
            continue
        try:
            value = digit_value(ch)
        except InvalidDigit:
            raise InvalidDigit(ch, position) from None
        if value >= base:
            # Буква за пределами алфавита основания не является его цифрой
            if value >= 10:
                raise InvalidDigit(ch, position)
            raise DigitOutOfRange(ch, value, base)
        acc = acc * base + value
        seen += 1

    if seen == 0:
        raise InvalidDigit("")

    return acc


def format_base_n(value: int, base: int) -> str:
    """
    Обратное преобразование: неотрицательное целое → строка цифр (нижний регистр).

    Examples:
        >>> format_base_n(255, 16)
        'ff'
        >>> format_base_n(0, 2)
        '0'
    """
    validate_base(base)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    if value == 0:
        return "0"

    out = []
    while value:
        value, rem = divmod(value, base)
        out.append(_DIGIT_ALPHABET[rem])
    return "".join(reversed(out))
