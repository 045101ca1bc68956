"""
Global ``defines`` enumerations.

Defines can be recursive: a define may hold sub-defines with the same
structure. These are listed as ``subkeys`` rather than ``values``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ._parse import member_path, opt_int, opt_list, opt_text, require
from .base import Documented, MemberInfo

__all__ = ["DefineValue", "Define"]


@dataclass(frozen=True, slots=True)
class DefineValue:
    """One member of a define; its value is its own name as a string."""

    name: str
    order: int | None = None
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> DefineValue:
        return cls(
            name=require(data, "name", path),
            order=opt_int(data, "order"),
            description=opt_text(data, "description", path),
        )


@dataclass(frozen=True, slots=True)
class Define(Documented):
    """A define with its values and nested sub-defines."""

    info: MemberInfo
    values: tuple[DefineValue, ...] | None = None
    subkeys: tuple[Define, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> Define:
        info = MemberInfo.from_dict(data, path)
        here = member_path(path, info.name)
        return cls(
            info=info,
            values=opt_list(data, "values", DefineValue.from_dict, here),
            subkeys=opt_list(data, "subkeys", Define.from_dict, here),
        )
