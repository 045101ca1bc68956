"""
Documentation entity model.

Every entity is a frozen dataclass built from its JSON object with
``from_dict``. Named entities embed a ``MemberInfo`` (name, order,
description, lists, examples, images) as ``info``.

Entities:

- ``Concept``, ``Property`` - documented types and their fields
- ``Define``, ``DefineValue`` - ``defines`` enumerations
- ``Prototype`` - prototype definitions
- ``Class``, ``Method``, ``Attribute`` and their parameter/event helpers
- ``Event``, ``GlobalObject`` - runtime events and globals
- ``RuntimeApi``, ``PrototypeApi`` - whole documents (``parse_document``)

Example:
    >>> from factorio_luadoc.model import Attribute
    >>> attr = Attribute.from_dict({"name": "health", "order": 3, "read_type": "float"})
    >>> attr.read_type
    NameType(name='float')
"""

from .base import Image, MemberInfo
from .concepts import BUILTIN, Concept, Property
from .defines import Define, DefineValue
from .document import ApiDocument, PrototypeApi, RuntimeApi, parse_document
from .members import (
    OPERATOR_NAMES,
    Attribute,
    Class,
    Event,
    EventRaised,
    GlobalObject,
    Method,
    MethodFormat,
    Operator,
    Parameter,
    ParameterGroup,
    Timeframe,
    VariadicParameter,
)
from .prototypes import Prototype

__all__ = [
    # Shared
    "Image",
    "MemberInfo",
    # Concepts
    "BUILTIN",
    "Concept",
    "Property",
    # Defines
    "Define",
    "DefineValue",
    # Prototypes
    "Prototype",
    # Classes
    "Class",
    "Method",
    "Attribute",
    "Operator",
    "OPERATOR_NAMES",
    "Parameter",
    "ParameterGroup",
    "VariadicParameter",
    "MethodFormat",
    "Timeframe",
    "EventRaised",
    # Events and globals
    "Event",
    "GlobalObject",
    # Documents
    "RuntimeApi",
    "PrototypeApi",
    "ApiDocument",
    "parse_document",
]
