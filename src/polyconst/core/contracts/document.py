"""
Document boundary — JSON текст → RootDocument

Единственное место, где документ обрабатывается как нетипизированный dict:
1. Декодирование JSON
2. Проверка формы по JSON Schema (root_document.json)
3. Приведение keys.k к int
4. Извлечение числовых полей в RootRecord (по возрастанию identifier)

Поля с нечисловыми именами (кроме keys) игнорируются. Содержимое записей
корней здесь не проверяется: это делает реконструктор для выбранных записей.
"""

import json
import logging
import math
import re
from typing import Any, Dict, List, Union

from jsonschema import ValidationError

from polyconst.core.contracts.validators import RootDocumentValidator
from polyconst.core.domain.roots import RootDocument, RootRecord
from polyconst.core.errors import (
    ConstantTermError,
    InvalidInputFormat,
    InvalidParameter,
    MissingParameter,
)

_logger = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"[0-9]+")

PARAMETERS_FIELD = "keys"


# =============================================================================
# ПРИВЕДЕНИЕ ЗНАЧЕНИЙ
# =============================================================================


def coerce_degree_parameter(raw: Any) -> int:
    """
    Приведение keys.k к int.

    Допускаются: int, целочисленный float (3.0), десятичная строка ("3", " 3.0 ").
    Знак не проверяется: положительность k проверяет реконструктор.

    Raises:
        InvalidParameter: Если значение не является целым
    """
    if isinstance(raw, bool):
        raise InvalidParameter(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isfinite(raw) and raw.is_integer():
            return int(raw)
        raise InvalidParameter(raw)
    if isinstance(raw, str):
        text = raw.strip()
        try:
            return int(text, 10)
        except ValueError:
            pass
        try:
            as_float = float(text)
        except ValueError:
            raise InvalidParameter(raw) from None
        if math.isfinite(as_float) and as_float.is_integer():
            return int(as_float)
    raise InvalidParameter(raw)


def parse_identifier(name: str) -> Union[int, None]:
    """Числовой identifier поля или None, если имя не десятичное число."""
    text = name.strip()
    if not _IDENTIFIER_RE.fullmatch(text):
        return None
    return int(text, 10)


def _schema_error(error: ValidationError) -> ConstantTermError:
    """Отображение ошибки JSON Schema на таксономию ошибок."""
    path = list(error.absolute_path)

    if not path:
        if error.validator == "required":
            return MissingParameter(PARAMETERS_FIELD)
        return InvalidInputFormat("top-level JSON value must be an object")
    if path == [PARAMETERS_FIELD]:
        return MissingParameter(f"{PARAMETERS_FIELD}.k")
    if path == [PARAMETERS_FIELD, "k"]:
        return InvalidParameter(error.instance)
    return InvalidInputFormat(error.message)


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================


def parse_document(data: Any) -> RootDocument:
    """
    Построение RootDocument из декодированного JSON.

    Raises:
        InvalidInputFormat: Не объект, дублирующиеся identifier
        MissingParameter: Нет keys или keys.k
        InvalidParameter: keys.k не целое
    """
    errors = list(RootDocumentValidator().iter_errors(data))
    if errors:
        raise _schema_error(errors[0]) from errors[0]

    k = coerce_degree_parameter(data[PARAMETERS_FIELD]["k"])

    seen: Dict[int, str] = {}
    records: List[RootRecord] = []
    for name, payload in data.items():
        if name == PARAMETERS_FIELD:
            continue
        identifier = parse_identifier(name)
        if identifier is None:
            _logger.debug("ignoring non-numeric field %r", name)
            continue
        if identifier in seen:
            raise InvalidInputFormat(
                f"duplicate root identifier {identifier} (fields {seen[identifier]!r} and {name!r})"
            )
        seen[identifier] = name
        records.append(RootRecord(identifier=identifier, payload=payload))

    _logger.debug("document: k=%d, %d root record(s)", k, len(records))
    return RootDocument(k=k, roots=tuple(records))


def load_document(text: Union[str, bytes]) -> RootDocument:
    """
    Разбор JSON текста во RootDocument.

    Raises:
        InvalidInputFormat: Пустой вход или некорректный JSON
        MissingParameter / InvalidParameter: см. parse_document
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise InvalidInputFormat(f"input is not valid UTF-8: {e}") from e

    text = text.strip()
    if not text:
        raise InvalidInputFormat("no input provided")

    try:
        data = json.loads(text)
    except ValueError as e:
        raise InvalidInputFormat(f"invalid JSON: {e}") from e

    return parse_document(data)
