"""
Vieta — реконструкция свободного члена по корням

Для монического полинома степени m с корнями r_1..r_m:

    P(x) = (x - r_1)(x - r_2)...(x - r_m)
    P(0) = (-1)^m × Π r_i

Корни не проверяются на согласованность с каким-либо реальным полиномом:
предполагается, что выбранные m значений и есть все его корни.

ПРАВИЛА ВЫБОРА:
1. k: положительное целое, степень m = k - 1
2. m == 0 → свободный член равен 0, корни не читаются
3. Корней должно быть не меньше k (не m): один лишний корень допустим
   и не используется
4. Берутся первые m корней по возрастанию identifier
5. Ошибка разбора корня → MalformedRoot с identifier корня
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Sequence, Tuple

from polyconst.core.config import DEFAULT_CONFIG, ReconstructionConfig
from polyconst.core.errors import (
    BaseNParseError,
    InsufficientRoots,
    InvalidParameter,
    MalformedRoot,
)
from polyconst.core.math.base_n import parse_base_n

if TYPE_CHECKING:
    from polyconst.core.domain.roots import RootDocument, RootRecord

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReconstructionResult:
    """Результат реконструкции с диагностикой."""

    k: int
    degree: int
    used_identifiers: Tuple[int, ...]
    product: int
    sign: int
    constant_term: int


# =============================================================================
# ШАГИ РЕКОНСТРУКЦИИ
# =============================================================================


def validate_degree_parameter(k: Any) -> int:
    """
    Проверка параметра степени.

    Raises:
        InvalidParameter: Если k не int (bool не допускается) или k <= 0
    """
    if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
        raise InvalidParameter(k)
    return k


def vieta_sign(degree: int) -> int:
    """
    Знак свободного члена: (-1)^m.

    Examples:
        >>> vieta_sign(2)
        1
        >>> vieta_sign(3)
        -1
    """
    if degree < 0:
        raise ValueError(f"degree must be non-negative, got {degree}")
    return 1 if degree % 2 == 0 else -1


def select_roots(k: int, roots: Sequence["RootRecord"]) -> Tuple["RootRecord", ...]:
    """
    Выбор корней для степени m = k - 1.

    Args:
        k: Параметр степени (положительное целое)
        roots: Записи корней (порядок появления не важен)

    Returns:
        Первые m записей по возрастанию identifier

    Raises:
        InvalidParameter: k не положительное целое
        InsufficientRoots: len(roots) < k
    """
    validate_degree_parameter(k)
    degree = k - 1
    if degree == 0:
        return ()

    ordered = sorted(roots, key=lambda r: r.identifier)
    if len(ordered) < k:
        raise InsufficientRoots(required=k, found=len(ordered))

    return tuple(ordered[:degree])


def root_value(
    record: "RootRecord",
    config: ReconstructionConfig = DEFAULT_CONFIG,
) -> int:
    """
    Значение одного корня.

    Диапазон основания проверяет record.to_entry(), поэтому parse_base_n
    здесь может отклонить только строку цифр.

    Raises:
        MalformedRoot: Запись некорректна или строка цифр не разбирается
        InvalidBase: Основание вне [2, 36] (из to_entry)
    """
    entry = record.to_entry()
    try:
        return parse_base_n(entry.digits, entry.base, config.grouping_separator)
    except BaseNParseError as e:
        raise MalformedRoot(record.identifier, str(e)) from e


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================


def reconstruct_constant_term(
    k: int,
    roots: Sequence["RootRecord"],
    config: Optional[ReconstructionConfig] = None,
) -> int:
    """
    Свободный член монического полинома степени k - 1.

    Args:
        k: Параметр степени
        roots: Записи корней
        config: Параметры разбора (default: DEFAULT_CONFIG)

    Returns:
        (-1)^m × Π r_i, либо 0 при k == 1

    Examples:
        k=3, корни 4 и 21 (base 10) → 84
        k=2, корень "1010" (base 2) → -10
    """
    return _reconstruct(k, roots, config).constant_term


def reconstruct(
    document: "RootDocument",
    config: Optional[ReconstructionConfig] = None,
) -> ReconstructionResult:
    """Реконструкция по типизированному документу с полной диагностикой."""
    return _reconstruct(document.k, document.roots, config)


def _reconstruct(
    k: int,
    roots: Sequence["RootRecord"],
    config: Optional[ReconstructionConfig],
) -> ReconstructionResult:
    config = config or DEFAULT_CONFIG
    selected = select_roots(k, roots)
    degree = k - 1

    if degree == 0:
        _logger.debug("degree 0 polynomial: constant term is 0 by convention")
        return ReconstructionResult(
            k=k, degree=0, used_identifiers=(), product=1, sign=1, constant_term=0
        )

    _logger.debug(
        "degree=%d, using roots %s of %d provided",
        degree,
        [r.identifier for r in selected],
        len(roots),
    )

    product = 1
    for record in selected:
        product *= root_value(record, config)

    sign = vieta_sign(degree)
    _logger.debug("product bit length=%d, sign=%+d", product.bit_length(), sign)

    return ReconstructionResult(
        k=k,
        degree=degree,
        used_identifiers=tuple(r.identifier for r in selected),
        product=product,
        sign=sign,
        constant_term=sign * product,
    )
