"""Concepts and the properties they (and prototypes) declare."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from ..types import LiteralType, TypeExpr, parse_type
from ._parse import member_path, opt_bool, opt_list, opt_str, opt_strings, opt_type
from .base import Documented, MemberInfo

__all__ = ["BUILTIN", "Property", "Concept"]

# Concept.type value for fundamental types such as ``string`` or ``double``
BUILTIN: Literal["builtin"] = "builtin"


def _parse_default(data: Mapping[str, Any], path: str) -> str | LiteralType | None:
    value = data.get("default")
    if isinstance(value, str):
        return value or None
    if isinstance(value, Mapping):
        parsed = parse_type(value, f"{path}.default")
        if isinstance(parsed, LiteralType):
            return parsed
    return None


@dataclass(frozen=True, slots=True)
class Property(Documented):
    """
    A property of a concept or prototype.

    Attributes
    ----------
        info: Shared member fields.
        visibility: Game expansions required to use the property, if any.
        alt_name: Alternative name that can be used instead of ``name``.
        override: Whether it overrides a parent's property of the same name.
        type: The property's type.
        optional: Whether the property can be omitted.
        default: Default value, as a textual description or a literal.
    """

    info: MemberInfo
    visibility: tuple[str, ...] | None = None
    alt_name: str | None = None
    override: bool = False
    type: TypeExpr | None = None
    optional: bool = False
    default: str | LiteralType | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> Property:
        info = MemberInfo.from_dict(data, path)
        here = member_path(path, info.name)
        return cls(
            info=info,
            visibility=opt_strings(data, "visibility", here),
            alt_name=opt_str(data, "alt_name"),
            override=opt_bool(data, "override"),
            type=opt_type(data, "type", here),
            optional=opt_bool(data, "optional"),
            default=_parse_default(data, here),
        )


@dataclass(frozen=True, slots=True)
class Concept(Documented):
    """
    A documented type (runtime concept or prototype ``types`` entry).

    Attributes
    ----------
        info: Shared member fields.
        parent: Name of the parent type. Never resolved.
        abstract: Whether the type can't be created directly.
        inline: Whether the type is inlined in another property's description.
        type: The concept's type, or ``BUILTIN`` for fundamental types.
        properties: Properties, if the type includes a struct.
    """

    info: MemberInfo
    parent: str | None = None
    abstract: bool = False
    inline: bool = False
    type: TypeExpr | Literal["builtin"] | None = None
    properties: tuple[Property, ...] | None = None

    @property
    def is_builtin(self) -> bool:
        return self.type == BUILTIN

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> Concept:
        info = MemberInfo.from_dict(data, path)
        here = member_path(path, info.name)
        concept_type: TypeExpr | Literal["builtin"] | None
        if data.get("type") == BUILTIN:
            concept_type = BUILTIN
        else:
            concept_type = opt_type(data, "type", here)
        return cls(
            info=info,
            parent=opt_str(data, "parent"),
            abstract=opt_bool(data, "abstract"),
            inline=opt_bool(data, "inline"),
            type=concept_type,
            properties=opt_list(data, "properties", Property.from_dict, here),
        )
