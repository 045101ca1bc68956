"""
Fields shared by every documented member.

Entities embed a ``MemberInfo`` rather than inheriting from a common base;
``Documented`` exposes the most used fields directly on the entity.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ._parse import opt_int, opt_list, opt_str, opt_strings, opt_text, require

__all__ = ["Image", "MemberInfo", "Documented"]


@dataclass(frozen=True, slots=True)
class Image:
    """
    An illustrative image shown next to a member.

    Attributes
    ----------
        filename: Image file name; callers decide where the file lives.
        caption: Explanatory text attached to the image, if any.
    """

    filename: str
    caption: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> Image:
        return cls(
            filename=require(data, "filename", path),
            caption=opt_str(data, "caption"),
        )


@dataclass(frozen=True, slots=True)
class MemberInfo:
    """
    Common documentation fields.

    Attributes
    ----------
        name: Name of the member, unique within its scope.
        order: Display order in the HTML docs. Only meaningful for sorting;
            None when the document omits it.
        description: Markdown description. Can be ``""``, never None.
        lists: Markdown lists with additional information.
        examples: Code-only examples.
        images: Illustrative images.
    """

    name: str
    order: int | None = None
    description: str = ""
    lists: tuple[str, ...] | None = None
    examples: tuple[str, ...] | None = None
    images: tuple[Image, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> MemberInfo:
        """
        Extract the shared fields from a member object.

        Raises
        ------
        MissingFieldError
            If ``name`` is absent.
        """
        return cls(
            name=require(data, "name", path),
            order=opt_int(data, "order"),
            description=opt_text(data, "description", path),
            lists=opt_strings(data, "lists", path),
            examples=opt_strings(data, "examples", path),
            images=opt_list(data, "images", Image.from_dict, path),
        )


class Documented:
    """Accessors for entities that embed a ``MemberInfo`` as ``info``."""

    __slots__ = ()

    info: MemberInfo

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def order(self) -> int | None:
        return self.info.order

    @property
    def description(self) -> str:
        return self.info.description
