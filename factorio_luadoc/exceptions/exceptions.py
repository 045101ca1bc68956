"""
factorio_luadoc exceptions.

This module defines the exception hierarchy for factorio_luadoc:

    LuaDocError (base)
    ├── SchemaError - Input outside the documentation grammar
    │   └── MissingFieldError - A required field is absent
    └── ValidationError - Invalid configuration value

Parsing is permissive: absent optional fields fall back to typed defaults and
never raise. Only input that breaks the grammar itself (an entity without a
name, a type object without ``complex_type``) raises, so that upstream schema
changes surface immediately instead of being masked.

Usage:
    try:
        api = parse_document(data)
    except factorio_luadoc.MissingFieldError as e:
        print(f"{e.details['path']}: missing {e.details['field']}")
    except factorio_luadoc.LuaDocError as e:
        print(f"Error {e.code}: {e}")
"""

from typing import Any

__all__ = [
    "LuaDocError",
    "SchemaError",
    "MissingFieldError",
    "ValidationError",
]


class LuaDocError(Exception):
    """
    Base exception for all factorio_luadoc errors.

    Attributes
    ----------
    message : str
        Human-readable error description.
    code : str
        Stable, string-based error code (e.g., "MISSING_FIELD").
        Use this for programmatic error handling.
    details : dict[str, Any]
        Structured context (e.g., {"path": "LuaEntity.teleport", "field": "name"}).

    Example
    -------
    >>> try:
    ...     Method.from_dict({"order": 0})
    ... except LuaDocError as e:
    ...     print(f"Error code: {e.code}")
    Error code: MISSING_FIELD
    """

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}

    @property
    def message(self) -> str:
        return self.args[0]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, code={self.code!r})"


# =============================================================================
# Schema Errors
# =============================================================================


class SchemaError(LuaDocError, ValueError):
    """
    Input does not follow the documentation grammar.

    Raised for out-of-contract input only: a type expression that is neither
    a string nor an object with ``complex_type``, a composite type missing a
    structural field, or a document with an unknown ``stage``.

    Inherits from ValueError, so ``except ValueError`` also works.
    """

    def __init__(
        self,
        message: str,
        code: str = "SCHEMA_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class MissingFieldError(SchemaError):
    """
    A field the grammar treats as required is absent.

    Attributes
    ----------
        field: Name of the missing JSON field.
        path: Dotted path of the entity being parsed (may be empty at the root).

    Example:
        >>> Class.from_dict({"methods": []})
        MissingFieldError: Missing required field 'name' at <root>
    """

    def __init__(
        self,
        field: str,
        path: str = "",
        code: str = "MISSING_FIELD",
        details: dict[str, Any] | None = None,
    ):
        location = path or "<root>"
        merged = {"field": field, "path": path}
        if details:
            merged.update(details)
        super().__init__(f"Missing required field {field!r} at {location}", code, merged)
        self.field = field
        self.path = path


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(LuaDocError, ValueError):
    """
    Invalid parameter value.

    Raised when a configuration setting receives a value of the wrong type or
    shape (e.g., ``config.stripped_prefixes = "defines."``).

    This exception inherits from both LuaDocError and ValueError, so both work::

        except factorio_luadoc.LuaDocError:   # catches all library errors
        except ValueError:                    # catches validation errors (Pythonic)
    """

    def __init__(
        self,
        message: str,
        code: str = "INVALID_ARGUMENT",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)
