"""Конфигурация реконструкции свободного члена."""

from dataclasses import dataclass
from typing import Final


# Допустимый диапазон оснований
MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36

# Символ группировки разрядов по умолчанию ("1_000_000")
DEFAULT_GROUPING_SEPARATOR: Final[str] = "_"


@dataclass(frozen=True)
class ReconstructionConfig:
    """Параметры разбора корней.

    grouping_separator: один символ, игнорируемый внутри строки цифр.
    Не может совпадать с цифровым символом (0-9, a-z, A-Z).
    """
    grouping_separator: str = DEFAULT_GROUPING_SEPARATOR

    def __post_init__(self) -> None:
        sep = self.grouping_separator
        if not isinstance(sep, str) or len(sep) != 1:
            raise ValueError(f"grouping_separator must be a single character, got {sep!r}")
        if sep.isascii() and sep.isalnum():
            raise ValueError(f"grouping_separator cannot be a digit symbol, got {sep!r}")


DEFAULT_CONFIG: Final[ReconstructionConfig] = ReconstructionConfig()
