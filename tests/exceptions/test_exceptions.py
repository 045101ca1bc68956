"""
Tests for the exception hierarchy.

Tests that:
1. Every error is reachable from the package root
2. Codes and details are populated
3. Schema and validation errors are also ValueErrors
"""

import pytest

import factorio_luadoc
from factorio_luadoc.exceptions import (
    LuaDocError,
    MissingFieldError,
    SchemaError,
    ValidationError,
)


class TestErrorTypes:
    """Tests for error type hierarchy and accessibility."""

    def test_importable_from_root(self):
        """Errors are re-exported from factorio_luadoc."""
        assert factorio_luadoc.LuaDocError is LuaDocError
        assert factorio_luadoc.MissingFieldError is MissingFieldError

    def test_inheritance_chain(self):
        """Schema errors nest under LuaDocError and ValueError."""
        assert issubclass(SchemaError, LuaDocError)
        assert issubclass(SchemaError, ValueError)
        assert issubclass(MissingFieldError, SchemaError)
        assert issubclass(ValidationError, LuaDocError)
        assert issubclass(ValidationError, ValueError)
        assert not issubclass(LuaDocError, ValueError)


class TestErrorAttributes:
    """Tests for code, details and message."""

    def test_base_defaults(self):
        """LuaDocError defaults to INTERNAL_ERROR with empty details."""
        err = LuaDocError("boom")
        assert err.code == "INTERNAL_ERROR"
        assert err.details == {}
        assert err.message == "boom"
        assert str(err) == "boom"

    def test_repr(self):
        """repr shows class, message and code."""
        assert repr(SchemaError("bad")) == "SchemaError('bad', code='SCHEMA_ERROR')"

    def test_missing_field(self):
        """MissingFieldError names the field and path."""
        err = MissingFieldError("name", "LuaEntity.methods[2]")
        assert err.code == "MISSING_FIELD"
        assert err.field == "name"
        assert err.path == "LuaEntity.methods[2]"
        assert err.details == {"field": "name", "path": "LuaEntity.methods[2]"}
        assert str(err) == "Missing required field 'name' at LuaEntity.methods[2]"

    def test_missing_field_at_root(self):
        """An empty path reads as <root>."""
        assert str(MissingFieldError("complex_type")).endswith("at <root>")

    def test_missing_field_extra_details(self):
        """Extra details merge with field and path."""
        err = MissingFieldError("value", "x", details={"complex_type": "array"})
        assert err.details["complex_type"] == "array"
        assert err.details["field"] == "value"

    def test_validation_code(self):
        """ValidationError uses INVALID_ARGUMENT."""
        assert ValidationError("bad").code == "INVALID_ARGUMENT"


class TestRaisedErrors:
    """Errors raised by the library carry usable context."""

    def test_caught_as_value_error(self):
        """Missing names are catchable as ValueError."""
        with pytest.raises(ValueError):
            factorio_luadoc.Class.from_dict({"methods": []})

    def test_caught_as_base(self):
        """Every library error is a LuaDocError."""
        with pytest.raises(LuaDocError) as exc_info:
            factorio_luadoc.parse_type({"complex_type": "array"})
        assert exc_info.value.code == "MISSING_FIELD"
