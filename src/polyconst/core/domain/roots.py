"""
Root models — типизированные записи корней полинома

Immutable Pydantic модели входного документа:
- RootEntry: пара (base, digits), готовая к разбору
- RootRecord: одно числовое поле документа (identifier → сырой payload)
- RootDocument: параметр степени k + упорядоченная коллекция RootRecord

Payload записи остаётся сырым, пока запись не выбрана реконструктором:
некорректные, но невыбранные записи не приводят к ошибке.
"""

import math
from typing import Any, List, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

from polyconst.core.errors import InvalidBase, MalformedRoot
from polyconst.core.math.base_n import validate_base


# =============================================================================
# ROOT ENTRY
# =============================================================================


class RootEntry(BaseModel):
    """
    Корень, закодированный строкой цифр в основании base.

    В JSON поле digits называется "value". Основание принимается числом,
    целочисленным float или десятичной строкой ("16"); диапазон [2, 36]
    проверяется отдельно (check_base), чтобы отличать InvalidBase от
    структурных ошибок записи.
    """

    base: int = Field(..., description="Основание системы счисления (2-36)")
    digits: str = Field(..., alias="value", description="Строка цифр корня")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("base", mode="before")
    @classmethod
    def coerce_base(cls, v: Any) -> int:
        """Приведение основания к int без потери точности."""
        if isinstance(v, bool):
            raise ValueError(f"base must be an integer, got {v!r}")
        if isinstance(v, int):
            return v
        if isinstance(v, float):
            if not v.is_integer():
                raise ValueError(f"base must be an integer, got {v!r}")
            return int(v)
        if isinstance(v, str):
            text = v.strip()
            try:
                return int(text, 10)
            except ValueError:
                pass
            try:
                as_float = float(text)
            except ValueError:
                raise ValueError(f"base must be an integer, got {v!r}") from None
            if math.isfinite(as_float) and as_float.is_integer():
                return int(as_float)
            raise ValueError(f"base must be an integer, got {v!r}")
        raise ValueError(f"base must be an integer, got {type(v).__name__}")

    @field_validator("digits", mode="before")
    @classmethod
    def coerce_digits(cls, v: Any) -> str:
        """Числовое значение приводится к тексту; пробелы по краям отбрасываются."""
        if isinstance(v, bool):
            raise ValueError(f"value must be a digit string, got {v!r}")
        if isinstance(v, int):
            v = str(v)
        if not isinstance(v, str):
            raise ValueError(f"value must be a digit string, got {type(v).__name__}")
        return v.strip()

    def check_base(self, identifier: Any = None) -> int:
        """
        Проверка диапазона основания.

        Raises:
            InvalidBase: Если base вне [2, 36]
        """
        try:
            return validate_base(self.base)
        except InvalidBase:
            raise InvalidBase(self.base, identifier) from None


# =============================================================================
# ROOT RECORD
# =============================================================================


_REQUIRED_FIELDS: Tuple[str, ...] = ("base", "value")


class RootRecord(BaseModel):
    """Числовое поле входного документа: identifier → сырой payload."""

    identifier: int = Field(..., ge=0, description="Числовой идентификатор корня")
    payload: Any = Field(None, description="Сырое значение поля (ожидается объект)")

    model_config = {"frozen": True}

    def to_entry(self) -> RootEntry:
        """
        Построение RootEntry из payload.

        Raises:
            MalformedRoot: payload не объект, нет base/value, value не строка
            InvalidBase: base присутствует, но не является целым в [2, 36]
        """
        payload = self.payload
        if not isinstance(payload, dict):
            raise MalformedRoot(self.identifier, "entry must be an object with base and value")

        missing = [name for name in _REQUIRED_FIELDS if payload.get(name) is None]
        if missing:
            raise MalformedRoot(self.identifier, f"missing field(s): {', '.join(missing)}")

        try:
            entry = RootEntry.model_validate(
                {"base": payload["base"], "value": payload["value"]}
            )
        except ValidationError as e:
            if any(err["loc"] and err["loc"][0] == "base" for err in e.errors()):
                raise InvalidBase(payload["base"], self.identifier) from e
            raise MalformedRoot(self.identifier, _first_message(e)) from e

        entry.check_base(self.identifier)
        return entry


def _first_message(error: ValidationError) -> str:
    errors = error.errors()
    if not errors:
        return str(error)
    return errors[0]["msg"]


# =============================================================================
# ROOT DOCUMENT
# =============================================================================


class RootDocument(BaseModel):
    """
    Типизированный входной документ.

    k: параметр степени (степень полинома m = k - 1). Положительность k
    проверяет реконструктор. roots всегда упорядочены по возрастанию
    identifier, идентификаторы уникальны.
    """

    k: int = Field(..., description="Параметр степени полинома")
    roots: Tuple[RootRecord, ...] = Field(
        default_factory=tuple, description="Записи корней по возрастанию identifier"
    )

    model_config = {"frozen": True}

    @field_validator("roots")
    @classmethod
    def order_roots(cls, v: Tuple[RootRecord, ...]) -> Tuple[RootRecord, ...]:
        """Сортировка по identifier и проверка уникальности."""
        ordered = tuple(sorted(v, key=lambda r: r.identifier))
        for prev, cur in zip(ordered, ordered[1:]):
            if prev.identifier == cur.identifier:
                raise ValueError(f"duplicate root identifier {cur.identifier}")
        return ordered

    @property
    def identifiers(self) -> List[int]:
        return [r.identifier for r in self.roots]

    @property
    def degree(self) -> int:
        """Степень полинома m = k - 1."""
        return self.k - 1
