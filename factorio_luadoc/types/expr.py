"""
Type expressions from the API documentation.

Every type in the documentation JSON is either a plain string naming a
builtin or another documented entity (``"string"``, ``"LuaEntity"``), or an
object whose ``complex_type`` field selects a composite form:

    complex_type    fields                  class
    ====================================================
    (plain string)  -                       NameType
    array           value                   ArrayType
    dictionary      key, value              DictionaryType
    tuple           values                  TupleType
    union           options, full_format    UnionType
    literal         value, description      LiteralType
    type            value, description      AliasType

Composite forms nest to any depth. Object-valued fields are parsed
recursively; primitive values in the ``value``/``key`` positions are kept
as-is, since a leaf may terminate without wrapping.

Example:
    >>> parse_type({"complex_type": "array", "value": "string"})
    ArrayType(element='string')
    >>> parse_type("LuaEntity")
    NameType(name='LuaEntity')
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .._logging import scoped_logger
from ..exceptions import MissingFieldError, SchemaError

__all__ = [
    "TypeKind",
    "NameType",
    "ArrayType",
    "DictionaryType",
    "TupleType",
    "UnionType",
    "LiteralType",
    "AliasType",
    "TypeExpr",
    "TypeValue",
    "LiteralValue",
    "parse_type",
]

_log = scoped_logger("types")


class TypeKind(str, Enum):
    """Type expression discriminator (``complex_type`` values)."""

    NAME = "name"
    ARRAY = "array"
    DICTIONARY = "dictionary"
    TUPLE = "tuple"
    UNION = "union"
    LITERAL = "literal"
    ALIAS = "type"


# =============================================================================
# Variants
# =============================================================================


@dataclass(frozen=True, slots=True)
class NameType:
    """A builtin type name or a reference to a documented entity."""

    name: str
    kind: TypeKind = field(default=TypeKind.NAME, init=False, repr=False)


@dataclass(frozen=True, slots=True)
class ArrayType:
    """Homogeneous sequence of ``element``."""

    element: TypeValue
    kind: TypeKind = field(default=TypeKind.ARRAY, init=False, repr=False)


@dataclass(frozen=True, slots=True)
class DictionaryType:
    """Mapping from ``key`` to ``value``; both are always present."""

    key: TypeValue
    value: TypeValue
    kind: TypeKind = field(default=TypeKind.DICTIONARY, init=False, repr=False)


@dataclass(frozen=True, slots=True)
class TupleType:
    """Fixed-arity sequence; ``elements`` is never empty."""

    elements: tuple[TypeValue, ...]
    kind: TypeKind = field(default=TypeKind.TUPLE, init=False, repr=False)


@dataclass(frozen=True, slots=True)
class UnionType:
    """
    One of several alternatives.

    Attributes
    ----------
        options: Alternatives in documentation order; never empty.
        full_format: Whether the options carry their own descriptions.
    """

    options: tuple[TypeValue, ...]
    full_format: bool = False
    kind: TypeKind = field(default=TypeKind.UNION, init=False, repr=False)


@dataclass(frozen=True, slots=True)
class LiteralType:
    """
    A fixed value.

    The Python type of ``value`` selects how the literal renders: ``str``,
    ``int``/``float``, ``bool``, or anything else (including ``None``).
    """

    value: LiteralValue = None
    description: str | None = None
    kind: TypeKind = field(default=TypeKind.LITERAL, init=False, repr=False)


@dataclass(frozen=True, slots=True)
class AliasType:
    """A named wrapper (``complex_type: "type"``) that renders as its inner type."""

    inner: TypeValue
    description: str | None = None
    kind: TypeKind = field(default=TypeKind.ALIAS, init=False, repr=False)


TypeExpr = NameType | ArrayType | DictionaryType | TupleType | UnionType | LiteralType | AliasType

# Value positions may hold a bare primitive instead of a nested expression
TypeValue = TypeExpr | str | int | float | bool

LiteralValue = str | int | float | bool | None


# =============================================================================
# Parsing
# =============================================================================


def _child(value: Any, path: str) -> TypeValue:
    """Parse an object-valued field; keep primitives as-is."""
    if isinstance(value, Mapping):
        return parse_type(value, path)
    return value


def _required_child(data: Mapping[str, Any], key: str, path: str) -> TypeValue:
    value = data.get(key)
    if value is None:
        raise MissingFieldError(key, path, details={"complex_type": data.get("complex_type")})
    return _child(value, f"{path}.{key}" if path else key)


def _member(item: Any, path: str) -> TypeValue:
    # numbers and booleans stay raw leaves, like value positions
    if isinstance(item, (int, float)):
        return item
    return parse_type(item, path)


def _member_list(data: Mapping[str, Any], key: str, path: str) -> tuple[TypeValue, ...]:
    """Parse a tuple's ``values`` or a union's ``options`` (must be a non-empty list)."""
    items = data.get(key)
    if not isinstance(items, list) or not items:
        raise SchemaError(
            f"{data.get('complex_type')} type requires a non-empty {key!r} list",
            details={"path": path, "field": key, "value": repr(items)},
        )
    prefix = f"{path}.{key}" if path else key
    return tuple(_member(item, f"{prefix}[{i}]") for i, item in enumerate(items))


def _description(data: Mapping[str, Any]) -> str | None:
    value = data.get("description")
    return value if isinstance(value, str) and value else None


def parse_type(data: Any, path: str = "") -> TypeExpr:
    """
    Build a type expression from documentation JSON.

    Args:
        data: A type name string, or an object carrying ``complex_type``.
        path: Location of ``data`` in the document, used in error details.

    Returns
    -------
        The parsed expression. Unknown ``complex_type`` values degrade to a
        ``NameType`` of that value rather than failing.

    Raises
    ------
    SchemaError
        If ``data`` is neither a string nor an object, or a composite type
        lacks the fields that define its structure.
    MissingFieldError
        If an object has no ``complex_type``.
    """
    if isinstance(data, str):
        return NameType(data)

    if not isinstance(data, Mapping):
        raise SchemaError(
            f"Type must be a string or an object, got {type(data).__name__}",
            details={"path": path, "value": repr(data)},
        )

    complex_type = data.get("complex_type")
    if not isinstance(complex_type, str):
        raise MissingFieldError("complex_type", path)

    if complex_type == "array":
        return ArrayType(_required_child(data, "value", path))

    if complex_type == "dictionary":
        return DictionaryType(
            key=_required_child(data, "key", path),
            value=_required_child(data, "value", path),
        )

    if complex_type == "tuple":
        return TupleType(_member_list(data, "values", path))

    if complex_type == "union":
        return UnionType(
            options=_member_list(data, "options", path),
            full_format=bool(data.get("full_format", False)),
        )

    if complex_type == "literal":
        value = data.get("value")
        if isinstance(value, Mapping):
            value = None
        return LiteralType(value=value, description=_description(data))

    if complex_type == "type":
        return AliasType(
            inner=_required_child(data, "value", path),
            description=_description(data),
        )

    _log.debug(
        "Unrecognised complex_type, treating as a type name",
        extra={"path": path, "complex_type": complex_type},
    )
    return NameType(complex_type)
