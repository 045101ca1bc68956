"""
LuaLS annotation lines for documented entities.

Two single-line shapes cover every entity:

- class line: ``---@class <name>`` for concepts, defines, prototypes,
  classes and events
- field line: ``---@field <name> <type> <first description line>`` for
  properties, define values, attributes and methods

Only the first line of a description goes into a declaration; the full text
stays on the entity.

Declaration blocks and ``render_document`` string these lines together for
whole entities and documents. Writing them anywhere is left to the caller.

Example:
    >>> attr = Attribute.from_dict({"name": "health", "read_type": "float", "description": "HP"})
    >>> attribute_field(attr)
    '---@field health float HP'
"""

from __future__ import annotations

import re

from ._logging import scoped_logger
from .config import config
from .model import (
    Attribute,
    Class,
    Concept,
    Define,
    DefineValue,
    Event,
    GlobalObject,
    Method,
    Parameter,
    PrototypeApi,
    Property,
    Prototype,
    RuntimeApi,
)
from .types import render_optional, render_type

__all__ = [
    "first_line",
    "class_line",
    "field_line",
    "class_declaration",
    "property_field",
    "define_value_field",
    "attribute_type",
    "attribute_field",
    "strip_type_prefixes",
    "method_signature",
    "method_field",
    "parameter_field",
    "field_declaration",
    "param_declarations",
    "return_declarations",
    "declaration_block",
    "render_document",
]

_log = scoped_logger("render")

ClassLike = Concept | Define | Prototype | Class | Event
FieldLike = Property | DefineValue | Attribute | Method | Parameter


# =============================================================================
# Line primitives
# =============================================================================


def first_line(text: str) -> str:
    """First line of a possibly multi-line description."""
    return text.splitlines()[0] if text else ""


def class_line(name: str) -> str:
    return "---@class " + name


def field_line(name: str, type_segment: str, description: str) -> str:
    return "---@field " + name + " " + type_segment + " " + first_line(description)


# =============================================================================
# Single declarations
# =============================================================================


def class_declaration(entity: ClassLike) -> str:
    """``---@class`` line for a container-like entity."""
    return class_line(entity.name)


def property_field(prop: Property) -> str:
    return field_line(prop.name, render_optional(prop.type), prop.description)


def define_value_field(value: DefineValue) -> str:
    """A define value is typed as the string literal of its own name."""
    return field_line(value.name, f'"{value.name}"', value.description)


def attribute_type(attr: Attribute) -> str:
    """``read | write`` when both are documented, the one present otherwise, else ``any``."""
    if attr.read_type is not None and attr.write_type is not None:
        return render_type(attr.read_type) + " | " + render_type(attr.write_type)
    if attr.read_type is not None:
        return render_type(attr.read_type)
    if attr.write_type is not None:
        return render_type(attr.write_type)
    return "any"


def attribute_field(attr: Attribute) -> str:
    return field_line(attr.name, attribute_type(attr), attr.description)


def strip_type_prefixes(text: str, prefixes: tuple[str, ...] | None = None) -> str:
    """
    Remove namespace prefixes from every type token in ``text``.

    ``prefixes`` defaults to ``config.stripped_prefixes``; a prefix only
    matches at the start of a token, so ``mydefines.x`` is left alone.
    """
    prefixes = config.stripped_prefixes if prefixes is None else prefixes
    if not prefixes:
        return text
    pattern = r"(?<![\w.])(?:" + "|".join(re.escape(p) for p in prefixes) + ")"
    return re.sub(pattern, "", text)


def method_signature(method: Method) -> str:
    """``fun(a:T, b:U)`` from the method's positional parameters."""
    params = ", ".join(
        f"{param.name}:{strip_type_prefixes(render_optional(param.type))}"
        for param in method.parameters or ()
    )
    return f"fun({params})"


def method_field(method: Method) -> str:
    return field_line(method.name, method_signature(method), method.description)


def parameter_field(param: Parameter) -> str:
    """Field line for an event payload parameter."""
    return field_line(param.name, render_optional(param.type), param.description)


def field_declaration(member: FieldLike) -> str:
    """Dispatch to the field builder for ``member``'s kind."""
    if isinstance(member, Property):
        return property_field(member)
    if isinstance(member, DefineValue):
        return define_value_field(member)
    if isinstance(member, Attribute):
        return attribute_field(member)
    if isinstance(member, Method):
        return method_field(member)
    if isinstance(member, Parameter):
        return parameter_field(member)
    raise TypeError(f"No field declaration for {type(member).__name__}")


# =============================================================================
# Function annotations
# =============================================================================


def _param_line(name: str, optional: bool, type_text: str, description: str) -> str:
    marker = "?" if optional else ""
    return f"---@param {name}{marker} {type_text} {first_line(description)}".rstrip()


def param_declarations(method: Method) -> list[str]:
    """
    ``---@param`` lines for a method.

    Table-taking methods get a single ``param`` table whose fields carry the
    optional markers; a variadic parameter becomes a trailing ``...`` line.
    """
    params = method.parameters or ()
    if method.format.takes_table:
        fields = ", ".join(
            f"{p.name}{'?' if p.optional else ''}: {render_optional(p.type)}" for p in params
        )
        return [_param_line("param", bool(method.format.table_optional), f"{{{fields}}}", "")]

    lines = [
        _param_line(p.name, p.optional, render_optional(p.type), p.description) for p in params
    ]
    if method.variadic_parameter is not None:
        variadic = method.variadic_parameter
        lines.append(
            f"---@param ... {render_optional(variadic.type)} "
            f"{first_line(variadic.description)}".rstrip()
        )
    return lines


def return_declarations(method: Method) -> list[str]:
    """``---@return`` lines, one per return value."""
    lines = []
    for value in method.return_values or ():
        marker = "?" if value.optional else ""
        type_text = render_optional(value.type) + marker
        lines.append(f"---@return {type_text} {first_line(value.description)}".rstrip())
    return lines


# =============================================================================
# Blocks and documents
# =============================================================================


def _define_block(define: Define, prefix: str) -> list[str]:
    qualified = f"{prefix}.{define.name}" if prefix else define.name
    lines = [class_line(qualified)]
    lines.extend(define_value_field(v) for v in define.values or ())
    for subkey in define.subkeys or ():
        lines.append("")
        lines.extend(_define_block(subkey, qualified))
    return lines


def declaration_block(entity: ClassLike, prefix: str = "") -> list[str]:
    """
    Class line followed by the entity's field lines.

    ``prefix`` qualifies define names (``defines`` gives
    ``---@class defines.direction``); nested sub-defines are qualified by
    their parent and follow after a blank line.
    """
    if isinstance(entity, Define):
        return _define_block(entity, prefix)

    lines = [class_declaration(entity)]
    if isinstance(entity, (Concept, Prototype)):
        lines.extend(property_field(p) for p in entity.properties or ())
    elif isinstance(entity, Class):
        lines.extend(attribute_field(a) for a in entity.attributes)
        lines.extend(method_field(m) for m in entity.methods)
    elif isinstance(entity, Event):
        lines.extend(parameter_field(p) for p in entity.data)
    return lines


def _global_object_lines(obj: GlobalObject) -> list[str]:
    return [f"---@type {render_optional(obj.type)}", f"{obj.name} = nil"]


def _global_function_lines(method: Method) -> list[str]:
    lines = param_declarations(method)
    lines.extend(return_declarations(method))
    if method.format.takes_table:
        args = "param"
    else:
        names = [p.name for p in method.parameters or ()]
        if method.variadic_parameter is not None:
            names.append("...")
        args = ", ".join(names)
    lines.append(f"function {method.name}({args}) end")
    return lines


def _join_blocks(blocks: list[list[str]]) -> list[str]:
    lines: list[str] = []
    for block in blocks:
        if lines:
            lines.append("")
        lines.extend(block)
    return lines


def render_document(document: RuntimeApi | PrototypeApi) -> list[str]:
    """
    Annotation lines for every entity of a parsed document.

    Runtime documents emit defines, concepts, classes, events, global
    objects and global functions in that order; prototype documents emit
    types then prototypes. Blocks are separated by one blank line.
    """
    blocks: list[list[str]] = []
    if isinstance(document, RuntimeApi):
        blocks.extend(declaration_block(d, "defines") for d in document.defines)
        blocks.extend(declaration_block(c) for c in document.concepts)
        blocks.extend(declaration_block(c) for c in document.classes)
        blocks.extend(declaration_block(e) for e in document.events)
        blocks.extend(_global_object_lines(g) for g in document.global_objects)
        blocks.extend(_global_function_lines(f) for f in document.global_functions)
    else:
        blocks.extend(declaration_block(t) for t in document.types)
        blocks.extend(declaration_block(p) for p in document.prototypes)

    lines = _join_blocks(blocks)
    _log.debug(
        "Rendered document",
        extra={"stage": document.stage, "blocks": len(blocks), "lines": len(lines)},
    )
    return lines
