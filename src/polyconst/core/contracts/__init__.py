"""
Contract Validation Module

Модуль для валидации входного JSON документа и его преобразования
в типизированный RootDocument.
"""

from .document import (
    coerce_degree_parameter,
    load_document,
    parse_document,
    parse_identifier,
)
from .validators import (
    ContractValidator,
    RootDocumentValidator,
    SchemaLoader,
    validate_root_document,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RootDocumentValidator",
    # Functions
    "validate_root_document",
    "coerce_degree_parameter",
    "load_document",
    "parse_document",
    "parse_identifier",
]
