"""
Whole documentation documents.

The engine publishes two JSON documents, told apart by their ``stage``:

- ``runtime``: classes, events, concepts, defines, global objects/functions
- ``prototype``: prototypes and prototype types (concepts)

Each is parsed into one immutable tree. Documents are never merged.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .._logging import scoped_logger
from ..exceptions import SchemaError
from ._parse import opt_int, opt_list, opt_str
from .concepts import Concept
from .defines import Define
from .members import Class, Event, GlobalObject, Method
from .prototypes import Prototype

__all__ = ["RuntimeApi", "PrototypeApi", "ApiDocument", "parse_document"]

_log = scoped_logger("parse")


@dataclass(frozen=True, slots=True)
class RuntimeApi:
    """The runtime-stage API reference."""

    application: str
    application_version: str | None = None
    api_version: int | None = None
    stage: str = "runtime"
    classes: tuple[Class, ...] = ()
    events: tuple[Event, ...] = ()
    concepts: tuple[Concept, ...] = ()
    defines: tuple[Define, ...] = ()
    global_objects: tuple[GlobalObject, ...] = ()
    global_functions: tuple[Method, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RuntimeApi:
        return cls(
            application=opt_str(data, "application") or "",
            application_version=opt_str(data, "application_version"),
            api_version=opt_int(data, "api_version"),
            stage="runtime",
            classes=opt_list(data, "classes", Class.from_dict) or (),
            events=opt_list(data, "events", Event.from_dict) or (),
            concepts=opt_list(data, "concepts", Concept.from_dict) or (),
            defines=opt_list(data, "defines", Define.from_dict) or (),
            global_objects=opt_list(data, "global_objects", GlobalObject.from_dict) or (),
            global_functions=opt_list(data, "global_functions", Method.from_dict) or (),
        )


@dataclass(frozen=True, slots=True)
class PrototypeApi:
    """The prototype-stage API reference."""

    application: str
    application_version: str | None = None
    api_version: int | None = None
    stage: str = "prototype"
    prototypes: tuple[Prototype, ...] = ()
    types: tuple[Concept, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PrototypeApi:
        return cls(
            application=opt_str(data, "application") or "",
            application_version=opt_str(data, "application_version"),
            api_version=opt_int(data, "api_version"),
            stage="prototype",
            prototypes=opt_list(data, "prototypes", Prototype.from_dict) or (),
            types=opt_list(data, "types", Concept.from_dict) or (),
        )


ApiDocument = RuntimeApi | PrototypeApi


def parse_document(data: Mapping[str, Any]) -> ApiDocument:
    """
    Parse a full documentation document.

    Args:
        data: The already-decoded JSON document.

    Returns
    -------
        A ``RuntimeApi`` or ``PrototypeApi`` depending on ``stage``.

    Raises
    ------
    SchemaError
        If ``data`` is not an object or its ``stage`` is not recognised.
    MissingFieldError
        If any entity in the document lacks its ``name``.

    Example:
        >>> api = parse_document(json.loads(path.read_text()))
        >>> [c.name for c in api.classes][:2]
        ['LuaAISettings', 'LuaAccumulatorControlBehavior']
    """
    if not isinstance(data, Mapping):
        raise SchemaError(
            f"Document must be an object, got {type(data).__name__}",
            details={"value": type(data).__name__},
        )

    stage = data.get("stage")
    if stage == "runtime":
        api: ApiDocument = RuntimeApi.from_dict(data)
        _log.info(
            "Parsed runtime API",
            extra={
                "api_version": api.api_version,
                "classes": len(api.classes),
                "concepts": len(api.concepts),
                "defines": len(api.defines),
                "events": len(api.events),
            },
        )
        return api
    if stage == "prototype":
        api = PrototypeApi.from_dict(data)
        _log.info(
            "Parsed prototype API",
            extra={
                "api_version": api.api_version,
                "prototypes": len(api.prototypes),
                "types": len(api.types),
            },
        )
        return api

    raise SchemaError(
        f"Unknown documentation stage: {stage!r}",
        details={"field": "stage", "value": repr(stage)},
    )
