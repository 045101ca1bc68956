"""
factorio_luadoc - LuaLS annotations from the engine's JSON API reference.

The engine publishes its scripting API as JSON. This package parses those
documents into an immutable object model and renders LuaLS annotation lines
(``---@class``, ``---@field``, ``---@param``, ``---@return``) for a Lua
language server. Fetching the JSON and writing the output are up to you.

Quick Start
-----------

    >>> import json
    >>> from factorio_luadoc import parse_document, render_document
    >>>
    >>> api = parse_document(json.loads(Path("runtime-api.json").read_text()))
    >>> lines = render_document(api)
    >>> Path("runtime.lua").write_text("\\n".join(lines))

Single entities:

    >>> from factorio_luadoc import Method, method_field
    >>> method = Method.from_dict({
    ...     "name": "rotate",
    ...     "description": "Rotate the entity.",
    ...     "parameters": [{"name": "direction", "type": "defines.direction"}],
    ... })
    >>> method_field(method)
    '---@field rotate fun(direction:direction) Rotate the entity.'

Type expressions:

    >>> from factorio_luadoc import parse_type, render_type
    >>> render_type(parse_type({"complex_type": "array", "value": "LuaEntity"}))
    'LuaEntity[]'


Modules
-------

- `factorio_luadoc.types` - type expressions and their rendering
- `factorio_luadoc.model` - documentation entities and whole documents
- `factorio_luadoc.declarations` - annotation lines and blocks
- `factorio_luadoc.exceptions` - error hierarchy
- `factorio_luadoc.config` - runtime settings
"""

from ._logging import setup_logging
from .config import config
from .declarations import (
    attribute_field,
    class_declaration,
    declaration_block,
    define_value_field,
    field_declaration,
    method_field,
    method_signature,
    param_declarations,
    property_field,
    render_document,
    return_declarations,
)
from .exceptions import LuaDocError, MissingFieldError, SchemaError, ValidationError
from .model import (
    Attribute,
    Class,
    Concept,
    Define,
    DefineValue,
    Event,
    GlobalObject,
    Image,
    MemberInfo,
    Method,
    Parameter,
    Property,
    Prototype,
    PrototypeApi,
    RuntimeApi,
    parse_document,
)
from .types import TypeExpr, parse_type, render_type

__all__ = [
    # Parsing
    "parse_document",
    "parse_type",
    # Rendering
    "render_type",
    "render_document",
    "declaration_block",
    "class_declaration",
    "field_declaration",
    "property_field",
    "define_value_field",
    "attribute_field",
    "method_field",
    "method_signature",
    "param_declarations",
    "return_declarations",
    # Model
    "TypeExpr",
    "Image",
    "MemberInfo",
    "Concept",
    "Property",
    "Define",
    "DefineValue",
    "Prototype",
    "Class",
    "Method",
    "Attribute",
    "Parameter",
    "Event",
    "GlobalObject",
    "RuntimeApi",
    "PrototypeApi",
    # Errors
    "LuaDocError",
    "SchemaError",
    "MissingFieldError",
    "ValidationError",
    # Settings
    "config",
    "setup_logging",
]
