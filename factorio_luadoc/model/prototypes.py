"""Prototypes from the prototype-stage documentation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ._parse import member_path, opt_bool, opt_int, opt_list, opt_str, opt_strings
from .base import Documented, MemberInfo
from .concepts import Property

__all__ = ["Prototype"]


@dataclass(frozen=True, slots=True)
class Prototype(Documented):
    """
    A prototype definition.

    Attributes
    ----------
        info: Shared member fields.
        visibility: Game expansions required to use the prototype, if any.
        parent: Name of the parent prototype. Never resolved.
        abstract: Whether the prototype can't be created directly.
        typename: Type name such as ``"boiler"``; None for abstract prototypes.
        instance_limit: Maximum number of instances, if limited.
        deprecated: Whether the prototype shouldn't be used anymore.
        properties: Properties of the prototype; may be empty, never None.
        custom_properties: Raw ``custom_properties`` object, kept opaque.
    """

    info: MemberInfo
    visibility: tuple[str, ...] | None = None
    parent: str | None = None
    abstract: bool = False
    typename: str | None = None
    instance_limit: int | None = None
    deprecated: bool = False
    properties: tuple[Property, ...] = ()
    custom_properties: Mapping[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> Prototype:
        info = MemberInfo.from_dict(data, path)
        here = member_path(path, info.name)
        custom = data.get("custom_properties")
        return cls(
            info=info,
            visibility=opt_strings(data, "visibility", here),
            parent=opt_str(data, "parent"),
            abstract=opt_bool(data, "abstract"),
            typename=opt_str(data, "typename"),
            instance_limit=opt_int(data, "instance_limit"),
            deprecated=opt_bool(data, "deprecated"),
            properties=opt_list(data, "properties", Property.from_dict, here) or (),
            custom_properties=custom if isinstance(custom, Mapping) else None,
        )
