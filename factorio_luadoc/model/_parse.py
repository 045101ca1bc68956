"""
Field extraction helpers shared by the entity constructors.

Optional fields never raise: an absent field, or one present with the wrong
JSON shape, resolves to its typed default (``None``, ``""``, ``False`` or an
empty tuple). Only ``require`` raises.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from .._logging import scoped_logger
from ..config import config
from ..exceptions import MissingFieldError
from ..types import TypeExpr, parse_type

T = TypeVar("T")

_log = scoped_logger("parse")


def _defaulted(data: Mapping[str, Any], key: str, path: str) -> None:
    if config.debug and key in data:
        _log.debug(
            "Field has unexpected shape, using default",
            extra={"path": path, "field": key},
        )


def join_path(path: str, name: Any) -> str:
    """Extend a dotted entity path."""
    if not path:
        return str(name)
    return f"{path}.{name}"


def member_path(path: str, name: str) -> str:
    """
    Path of a named member, replacing its list position with its name.

    ``member_path("LuaEntity.methods[2]", "teleport")`` is ``"LuaEntity.teleport"``.
    """
    if path.endswith("]"):
        path = path.rsplit(".", 1)[0] if "." in path else ""
    return join_path(path, name)


def require(data: Mapping[str, Any], key: str, path: str = "") -> Any:
    """Return ``data[key]``, raising MissingFieldError when absent or null."""
    value = data.get(key)
    if value is None:
        raise MissingFieldError(key, path)
    return value


def opt_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def opt_text(data: Mapping[str, Any], key: str, path: str = "") -> str:
    """Markdown text field; ``""`` when absent or not a string."""
    value = data.get(key)
    if isinstance(value, str):
        return value
    if value is not None:
        _defaulted(data, key, path)
    return ""


def opt_bool(data: Mapping[str, Any], key: str) -> bool:
    return bool(data.get(key) or False)


def opt_int(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    # bool is an int subclass but never a count
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def opt_strings(data: Mapping[str, Any], key: str, path: str = "") -> tuple[str, ...] | None:
    """A list of strings, or None when absent or not a list."""
    value = data.get(key)
    if not isinstance(value, list):
        _defaulted(data, key, path)
        return None
    return tuple(str(item) for item in value)


def opt_list(
    data: Mapping[str, Any],
    key: str,
    factory: Callable[[Mapping[str, Any], str], T],
    path: str = "",
) -> tuple[T, ...] | None:
    """
    Build each object of a list field with ``factory(item, item_path)``.

    Returns None when the field is absent or not a list. Non-object items in
    the list are skipped.
    """
    value = data.get(key)
    if not isinstance(value, list):
        _defaulted(data, key, path)
        return None
    prefix = join_path(path, key)
    return tuple(
        factory(item, f"{prefix}[{i}]")
        for i, item in enumerate(value)
        if isinstance(item, Mapping)
    )


def opt_type(data: Mapping[str, Any], key: str, path: str = "") -> TypeExpr | None:
    """Parse a type field when it is a string or an object; None otherwise."""
    value = data.get(key)
    if (isinstance(value, str) and value) or isinstance(value, Mapping):
        return parse_type(value, join_path(path, key))
    _defaulted(data, key, path)
    return None
