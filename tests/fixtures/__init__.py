"""
Shared test fixtures for factorio_luadoc.

Maps to: N/A (shared test fixtures)
"""

from .documents import (
    PROTOTYPE_DOCUMENT,
    RUNTIME_DOCUMENT,
    prototype_document,
    runtime_document,
)

__all__ = [
    "RUNTIME_DOCUMENT",
    "PROTOTYPE_DOCUMENT",
    "runtime_document",
    "prototype_document",
]
