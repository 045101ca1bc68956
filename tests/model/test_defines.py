"""
Tests for factorio_luadoc/model/defines.py.
"""

from factorio_luadoc.model import Define, DefineValue


class TestDefine:
    """Tests for Define and DefineValue."""

    def test_values(self, runtime_json):
        """Values keep order and description."""
        define = Define.from_dict(runtime_json["defines"][0])
        assert define.name == "direction"
        assert define.values == (
            DefineValue("north", 0, "North.\nUp."),
            DefineValue("east", 1, ""),
        )
        assert define.subkeys is None

    def test_recursive_subkeys(self, runtime_json):
        """Sub-defines are Defines themselves."""
        define = Define.from_dict(runtime_json["defines"][1])
        assert define.values is None
        (chest,) = define.subkeys
        assert isinstance(chest, Define)
        assert chest.values[0].name == "main"

    def test_missing_lists(self):
        """A bare define has None values and subkeys."""
        define = Define.from_dict({"name": "empty", "order": 0})
        assert define.values is None
        assert define.subkeys is None
        assert define.info.images is None

    def test_value_description_default(self):
        """DefineValue description defaults to ''."""
        assert DefineValue.from_dict({"name": "x"}).description == ""
