"""
factorio_luadoc exceptions.

This module defines the exception hierarchy for factorio_luadoc:

    LuaDocError (base)
    ├── SchemaError - Input outside the documentation grammar
    │   └── MissingFieldError - A required field is absent
    └── ValidationError - Invalid configuration value
"""

from .exceptions import (
    LuaDocError,
    MissingFieldError,
    SchemaError,
    ValidationError,
)

__all__ = [
    # Base
    "LuaDocError",
    # Schema
    "SchemaError",
    "MissingFieldError",
    # Validation
    "ValidationError",
]
