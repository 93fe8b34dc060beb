"""
Test suite for polyconst

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
