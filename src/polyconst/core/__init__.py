"""
Core domain models, mathematical primitives, and invariants.

This module contains the building blocks that are independent of the
command-line transport: base-N parsing, constant-term reconstruction,
the error taxonomy and the input document contract.
"""
