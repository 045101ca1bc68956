"""Render type expressions into LuaLS annotation syntax."""

from __future__ import annotations

from .expr import (
    AliasType,
    ArrayType,
    DictionaryType,
    LiteralType,
    NameType,
    TupleType,
    TypeValue,
    UnionType,
)

__all__ = ["render_type", "render_optional", "render_literal"]

ANY = "any"


def _render_primitive(value: str | int | float | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_literal(literal: LiteralType) -> str:
    """
    Render a literal type.

    String literals render as ``string``, a space, three double quotes, the
    text and one closing double quote, where the text is the description when
    present, else the value. The extra leading quotes work around the editor's
    string-literal display; keep them.

    Number and boolean literals render as their kind, followed by the
    description when there is one. Anything else renders as ``any``.
    """
    value = literal.value
    if isinstance(value, str):
        text = literal.description or value
        return f'string """{text}"'
    # bool first: bool is an int subclass
    if isinstance(value, bool):
        kind = "boolean"
    elif isinstance(value, (int, float)):
        kind = "number"
    else:
        return ANY
    if literal.description:
        return f"{kind} {literal.description}"
    return kind


def render_type(expr: TypeValue) -> str:
    """
    Render ``expr`` as a single-line type string.

    Args:
        expr: A parsed type expression, or a bare primitive leaf.

    Returns
    -------
        The canonical string, e.g. ``table<string, LuaEntity[]>``.
        Unions are never parenthesized, even when nested.
    """
    if isinstance(expr, NameType):
        return expr.name
    if isinstance(expr, ArrayType):
        return render_type(expr.element) + "[]"
    if isinstance(expr, DictionaryType):
        return f"table<{render_type(expr.key)}, {render_type(expr.value)}>"
    if isinstance(expr, TupleType):
        return "tuple<" + ", ".join(render_type(e) for e in expr.elements) + ">"
    if isinstance(expr, UnionType):
        return " | ".join(render_type(o) for o in expr.options)
    if isinstance(expr, LiteralType):
        return render_literal(expr)
    if isinstance(expr, AliasType):
        return render_type(expr.inner)
    if isinstance(expr, (str, int, float, bool)):
        return _render_primitive(expr)
    raise TypeError(f"Cannot render type of {type(expr).__name__}")


def render_optional(expr: TypeValue | None) -> str:
    """Render ``expr``, or ``any`` when there is no type."""
    if expr is None:
        return ANY
    return render_type(expr)
