"""
polyconst — constant term of a monic polynomial from base-N encoded roots.
"""

__version__ = "0.1.0"
