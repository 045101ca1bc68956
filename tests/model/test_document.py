"""
Tests for factorio_luadoc/model/document.py.
"""

import logging

import pytest

from factorio_luadoc.exceptions import MissingFieldError, SchemaError
from factorio_luadoc.model import (
    BUILTIN,
    Class,
    PrototypeApi,
    RuntimeApi,
    parse_document,
)


class TestRuntimeDocument:
    """Tests for parsing a runtime document."""

    def test_stage_dispatch(self, runtime_json):
        """stage 'runtime' yields RuntimeApi."""
        api = parse_document(runtime_json)
        assert isinstance(api, RuntimeApi)
        assert api.stage == "runtime"
        assert api.application == "factorio"
        assert api.application_version == "2.0.28"
        assert api.api_version == 6

    def test_sections(self, runtime_json):
        """Every section is built in order."""
        api = parse_document(runtime_json)
        assert [c.name for c in api.classes] == ["LuaEntity"]
        assert [e.name for e in api.events] == ["on_built_entity"]
        assert [c.name for c in api.concepts] == ["BoundingBox", "double"]
        assert [d.name for d in api.defines] == ["direction", "inventory"]
        assert [g.name for g in api.global_objects] == ["game"]
        assert [f.name for f in api.global_functions] == ["log"]
        assert isinstance(api.classes[0], Class)
        assert api.concepts[1].type == BUILTIN

    def test_missing_sections_empty(self):
        """Absent sections are empty tuples."""
        api = parse_document({"stage": "runtime"})
        assert api.classes == ()
        assert api.defines == ()
        assert api.global_functions == ()
        assert api.application == ""
        assert api.api_version is None

    def test_error_path_in_section(self, runtime_json):
        """A nameless class reports its list position."""
        runtime_json["classes"].append({"order": 99})
        with pytest.raises(MissingFieldError) as exc_info:
            parse_document(runtime_json)
        assert exc_info.value.path == "classes[1]"
        assert exc_info.value.field == "name"

    def test_logs_summary(self, runtime_json, caplog):
        """A summary with counts is logged at INFO."""
        caplog.set_level(logging.INFO, logger="factorio_luadoc")
        parse_document(runtime_json)
        (record,) = [r for r in caplog.records if r.getMessage() == "Parsed runtime API"]
        assert record.classes == 1
        assert record.concepts == 2
        assert record.scope == "parse"


class TestPrototypeDocument:
    """Tests for parsing a prototype document."""

    def test_stage_dispatch(self, prototype_json):
        """stage 'prototype' yields PrototypeApi."""
        api = parse_document(prototype_json)
        assert isinstance(api, PrototypeApi)
        assert [p.name for p in api.prototypes] == ["BoilerPrototype", "UtilityConstants"]
        assert [t.name for t in api.types] == ["Color"]

    def test_no_runtime_sections(self, prototype_json):
        """Prototype documents carry no classes."""
        api = parse_document(prototype_json)
        assert not hasattr(api, "classes")


class TestInvalidDocument:
    """Tests for rejected documents."""

    def test_unknown_stage(self):
        """An unrecognised stage raises SchemaError."""
        with pytest.raises(SchemaError, match="stage"):
            parse_document({"stage": "data"})

    def test_missing_stage(self):
        """A document without stage is rejected."""
        with pytest.raises(SchemaError) as exc_info:
            parse_document({"classes": []})
        assert exc_info.value.details["field"] == "stage"

    def test_not_an_object(self):
        """Non-object input raises SchemaError, also a ValueError."""
        with pytest.raises(ValueError):
            parse_document(["runtime"])  # type: ignore[arg-type]
