"""
Type expression model.

Two layers:

1. **Expressions** - frozen dataclasses, one per ``complex_type``:
   ``NameType``, ``ArrayType``, ``DictionaryType``, ``TupleType``,
   ``UnionType``, ``LiteralType``, ``AliasType``; built with ``parse_type``.

2. **Rendering** - ``render_type`` turns any expression into the single-line
   annotation grammar read by the Lua language server.

Example:
    >>> from factorio_luadoc.types import parse_type, render_type
    >>> render_type(parse_type({"complex_type": "dictionary", "key": "string", "value": "uint"}))
    'table<string, uint>'
"""

from .expr import (
    AliasType,
    ArrayType,
    DictionaryType,
    LiteralType,
    LiteralValue,
    NameType,
    TupleType,
    TypeExpr,
    TypeKind,
    TypeValue,
    UnionType,
    parse_type,
)
from .render import render_literal, render_optional, render_type

__all__ = [
    # Discriminator
    "TypeKind",
    # Variants
    "NameType",
    "ArrayType",
    "DictionaryType",
    "TupleType",
    "UnionType",
    "LiteralType",
    "AliasType",
    # Type aliases
    "TypeExpr",
    "TypeValue",
    "LiteralValue",
    # Functions
    "parse_type",
    "render_type",
    "render_optional",
    "render_literal",
]
