"""
Tests for factorio_luadoc/model/prototypes.py.
"""

from factorio_luadoc.model import Prototype
from factorio_luadoc.types import LiteralType, UnionType


class TestPrototype:
    """Tests for Prototype."""

    def test_from_dict(self, prototype_json):
        """Fields and properties are extracted."""
        proto = Prototype.from_dict(prototype_json["prototypes"][0])
        assert proto.name == "BoilerPrototype"
        assert proto.parent == "EntityWithOwnerPrototype"
        assert proto.typename == "boiler"
        assert proto.instance_limit is None
        mode, target = proto.properties
        assert isinstance(mode.type, UnionType)
        assert mode.default == LiteralType("heat-water-inside")
        assert target.override is True

    def test_custom_properties_opaque(self, prototype_json):
        """custom_properties is kept as the raw mapping."""
        proto = Prototype.from_dict(prototype_json["prototypes"][1])
        assert proto.custom_properties["key_type"] == "string"
        assert proto.instance_limit == 1
        assert proto.properties == ()

    def test_properties_never_none(self):
        """Missing properties is an empty tuple."""
        proto = Prototype.from_dict({"name": "AbstractPrototype", "abstract": True})
        assert proto.properties == ()
        assert proto.abstract is True
        assert proto.typename is None
        assert proto.deprecated is False
        assert proto.custom_properties is None

    def test_wrong_shape_custom_properties(self):
        """Non-object custom_properties resolves to None."""
        proto = Prototype.from_dict({"name": "P", "custom_properties": "nope"})
        assert proto.custom_properties is None
