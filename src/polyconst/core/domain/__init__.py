"""
Domain models and value objects.

Contains the typed records of the input document: RootEntry, RootRecord,
RootDocument.
"""

from polyconst.core.domain.roots import RootDocument, RootEntry, RootRecord

__all__ = [
    "RootEntry",
    "RootRecord",
    "RootDocument",
]
