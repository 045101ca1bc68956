"""
Runtime API members: classes, their methods, attributes and operators.

Architecture:
    JSON object                        Python (frozen dataclasses)
    ========================================================
    classes[]                     -->  Class
      methods[]                   -->    Method
        parameters[]              -->      Parameter
        variant_parameter_groups  -->      ParameterGroup
        variadic_parameter        -->      VariadicParameter
        format                    -->      MethodFormat
        raises[]                  -->      EventRaised
      attributes[]                -->    Attribute
      operators[]                 -->    Method | Attribute
    events[]                      -->  Event
    global_objects[]              -->  GlobalObject
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .._logging import scoped_logger
from ..types import TypeExpr
from ._parse import (
    join_path,
    member_path,
    opt_bool,
    opt_int,
    opt_list,
    opt_str,
    opt_strings,
    opt_text,
    opt_type,
    require,
)
from .base import Documented, MemberInfo

__all__ = [
    "Parameter",
    "ParameterGroup",
    "VariadicParameter",
    "MethodFormat",
    "Timeframe",
    "EventRaised",
    "Attribute",
    "Method",
    "Operator",
    "OPERATOR_NAMES",
    "Class",
    "Event",
    "GlobalObject",
]

_log = scoped_logger("parse")

OPERATOR_NAMES = frozenset({"call", "index", "length"})


# =============================================================================
# Parameters
# =============================================================================


@dataclass(frozen=True, slots=True)
class Parameter:
    """A method parameter, event payload field, or return value."""

    name: str
    order: int | None = None
    description: str = ""
    type: TypeExpr | None = None
    optional: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> Parameter:
        name = require(data, "name", path)
        return cls._build(name, data, member_path(path, name))

    @classmethod
    def from_return_dict(cls, data: Mapping[str, Any], path: str = "") -> Parameter:
        """Build a return value; these carry no meaningful name."""
        return cls._build(opt_str(data, "name") or "", data, path)

    @classmethod
    def _build(cls, name: str, data: Mapping[str, Any], path: str) -> Parameter:
        return cls(
            name=name,
            order=opt_int(data, "order"),
            description=opt_text(data, "description", path),
            type=opt_type(data, "type", path),
            optional=opt_bool(data, "optional"),
        )


@dataclass(frozen=True, slots=True)
class ParameterGroup:
    """A named group of variant parameters (used by table-taking methods)."""

    name: str
    order: int | None = None
    description: str = ""
    parameters: tuple[Parameter, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> ParameterGroup:
        name = require(data, "name", path)
        here = member_path(path, name)
        return cls(
            name=name,
            order=opt_int(data, "order"),
            description=opt_text(data, "description", path),
            parameters=opt_list(data, "parameters", Parameter.from_dict, here) or (),
        )


@dataclass(frozen=True, slots=True)
class VariadicParameter:
    """Trailing ``...`` parameter of a method."""

    type: TypeExpr | None = None
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> VariadicParameter:
        return cls(
            type=opt_type(data, "type", path),
            description=opt_text(data, "description", path),
        )


@dataclass(frozen=True, slots=True)
class MethodFormat:
    """
    How a method takes its arguments.

    Attributes
    ----------
        takes_table: Whether the arguments are passed as a single table.
        table_optional: Whether that table may be omitted; None when the
            document doesn't say.
    """

    takes_table: bool = False
    table_optional: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> MethodFormat:
        if not isinstance(data, Mapping):
            return cls()
        table_optional = data.get("table_optional")
        return cls(
            takes_table=opt_bool(data, "takes_table"),
            table_optional=table_optional if isinstance(table_optional, bool) else None,
        )


# =============================================================================
# Raised events
# =============================================================================


class Timeframe(str, Enum):
    """When a raised event fires relative to the call."""

    INSTANTLY = "instantly"
    CURRENT_TICK = "current_tick"
    FUTURE_TICK = "future_tick"
    UNKNOWN = "unknown"  # forward compatibility

    @classmethod
    def parse(cls, value: Any) -> Timeframe:
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True, slots=True)
class EventRaised:
    """An event that a method or attribute write may raise."""

    name: str
    order: int | None = None
    description: str = ""
    timeframe: Timeframe = Timeframe.UNKNOWN
    optional: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> EventRaised:
        return cls(
            name=require(data, "name", path),
            order=opt_int(data, "order"),
            description=opt_text(data, "description", path),
            timeframe=Timeframe.parse(data.get("timeframe")),
            optional=opt_bool(data, "optional"),
        )


# =============================================================================
# Class members
# =============================================================================


@dataclass(frozen=True, slots=True)
class Attribute(Documented):
    """
    A class attribute.

    At least one of ``read_type``/``write_type`` is normally set; a read-only
    attribute has no write type and vice versa.
    """

    info: MemberInfo
    visibility: tuple[str, ...] | None = None
    raises: tuple[EventRaised, ...] | None = None
    subclasses: tuple[str, ...] | None = None
    read_type: TypeExpr | None = None
    write_type: TypeExpr | None = None
    optional: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> Attribute:
        info = MemberInfo.from_dict(data, path)
        here = member_path(path, info.name)
        return cls(
            info=info,
            visibility=opt_strings(data, "visibility", here),
            raises=opt_list(data, "raises", EventRaised.from_dict, here),
            subclasses=opt_strings(data, "subclasses", here),
            read_type=opt_type(data, "read_type", here),
            write_type=opt_type(data, "write_type", here),
            optional=opt_bool(data, "optional"),
        )


@dataclass(frozen=True, slots=True)
class Method(Documented):
    """
    A class method or global function.

    Attributes
    ----------
        info: Shared member fields.
        visibility: Game expansions required to use the method, if any.
        raises: Events the method may raise.
        subclasses: Subclasses the method is restricted to.
        parameters: Positional (or table) parameters in order.
        variant_parameter_groups: Extra parameter groups that apply
            depending on the value of another parameter.
        variant_parameter_description: Text introducing the groups.
        variadic_parameter: Trailing ``...`` parameter, if any.
        format: How arguments are passed.
        return_values: Returned values in order; their names are empty.
    """

    info: MemberInfo
    visibility: tuple[str, ...] | None = None
    raises: tuple[EventRaised, ...] | None = None
    subclasses: tuple[str, ...] | None = None
    parameters: tuple[Parameter, ...] | None = None
    variant_parameter_groups: tuple[ParameterGroup, ...] | None = None
    variant_parameter_description: str | None = None
    variadic_parameter: VariadicParameter | None = None
    format: MethodFormat = field(default_factory=MethodFormat)
    return_values: tuple[Parameter, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> Method:
        info = MemberInfo.from_dict(data, path)
        here = member_path(path, info.name)
        variadic = data.get("variadic_parameter")
        return cls(
            info=info,
            visibility=opt_strings(data, "visibility", here),
            raises=opt_list(data, "raises", EventRaised.from_dict, here),
            subclasses=opt_strings(data, "subclasses", here),
            parameters=opt_list(data, "parameters", Parameter.from_dict, here),
            variant_parameter_groups=opt_list(
                data, "variant_parameter_groups", ParameterGroup.from_dict, here
            ),
            variant_parameter_description=opt_str(data, "variant_parameter_description"),
            variadic_parameter=(
                VariadicParameter.from_dict(variadic, join_path(here, "variadic_parameter"))
                if isinstance(variadic, Mapping)
                else None
            ),
            format=MethodFormat.from_dict(data.get("format")),
            return_values=opt_list(data, "return_values", Parameter.from_return_dict, here),
        )


# An operator is shaped like a method when it takes or returns values
Operator = Method | Attribute


def _parse_operator(data: Mapping[str, Any], path: str) -> Operator | None:
    name = data.get("name")
    if not isinstance(name, str) or name not in OPERATOR_NAMES:
        _log.debug("Dropping unknown operator", extra={"path": path, "operator": name})
        return None
    if "parameters" in data or "return_values" in data:
        return Method.from_dict(data, path)
    return Attribute.from_dict(data, path)


@dataclass(frozen=True, slots=True)
class Class(Documented):
    """
    A runtime class.

    Attributes
    ----------
        info: Shared member fields.
        visibility: Game expansions required to use the class, if any.
        parent: Name of the parent class. Never resolved.
        abstract: Whether the class is never instantiated directly.
        methods: Methods in documentation order.
        attributes: Attributes in documentation order.
        operators: ``call``/``index``/``length`` operators, each either a
            Method or an Attribute.
    """

    info: MemberInfo
    visibility: tuple[str, ...] | None = None
    parent: str | None = None
    abstract: bool = False
    methods: tuple[Method, ...] = ()
    attributes: tuple[Attribute, ...] = ()
    operators: tuple[Operator, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> Class:
        info = MemberInfo.from_dict(data, path)
        here = member_path(path, info.name)
        operators = opt_list(data, "operators", _parse_operator, here) or ()
        return cls(
            info=info,
            visibility=opt_strings(data, "visibility", here),
            parent=opt_str(data, "parent"),
            abstract=opt_bool(data, "abstract"),
            methods=opt_list(data, "methods", Method.from_dict, here) or (),
            attributes=opt_list(data, "attributes", Attribute.from_dict, here) or (),
            operators=tuple(op for op in operators if op is not None),
        )

    def operator(self, name: str) -> Operator | None:
        """Look up an operator by name (``call``, ``index`` or ``length``)."""
        for op in self.operators:
            if op.name == name:
                return op
        return None


# =============================================================================
# Events and globals
# =============================================================================


@dataclass(frozen=True, slots=True)
class Event(Documented):
    """A runtime event with the fields of its payload table."""

    info: MemberInfo
    data: tuple[Parameter, ...] = ()
    filter: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> Event:
        info = MemberInfo.from_dict(data, path)
        here = member_path(path, info.name)
        return cls(
            info=info,
            data=opt_list(data, "data", Parameter.from_dict, here) or (),
            filter=opt_str(data, "filter"),
        )


@dataclass(frozen=True, slots=True)
class GlobalObject:
    """A global variable such as ``game`` or ``script``."""

    name: str
    order: int | None = None
    description: str = ""
    type: TypeExpr | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> GlobalObject:
        name = require(data, "name", path)
        return cls(
            name=name,
            order=opt_int(data, "order"),
            description=opt_text(data, "description", path),
            type=opt_type(data, "type", member_path(path, name)),
        )
