"""
Core math modules для polyconst

Разбор целых в произвольном основании и реконструкция свободного члена.
"""

# Base-N Integer Parser
from polyconst.core.math.base_n import (
    digit_value,
    format_base_n,
    parse_base_n,
    validate_base,
)

# Constant-Term Reconstructor
from polyconst.core.math.vieta import (
    ReconstructionResult,
    reconstruct,
    reconstruct_constant_term,
    root_value,
    select_roots,
    validate_degree_parameter,
    vieta_sign,
)

__all__ = [
    # Base-N — Functions
    "digit_value",
    "format_base_n",
    "parse_base_n",
    "validate_base",
    # Vieta — Types
    "ReconstructionResult",
    # Vieta — Functions
    "reconstruct",
    "reconstruct_constant_term",
    "root_value",
    "select_roots",
    "validate_degree_parameter",
    "vieta_sign",
]
