"""
Tests for multi-line output in factorio_luadoc/declarations.py.

``---@param``/``---@return`` lines, declaration blocks and whole documents.
"""

import logging

from factorio_luadoc.declarations import (
    declaration_block,
    param_declarations,
    render_document,
    return_declarations,
)
from factorio_luadoc.model import (
    Class,
    Concept,
    Define,
    Event,
    Method,
    Prototype,
    parse_document,
)


class TestParamDeclarations:
    """Tests for param_declarations and return_declarations."""

    def test_positional(self, entity_json):
        """One line per parameter with optional markers."""
        method = Method.from_dict(entity_json["methods"][0])
        assert param_declarations(method) == [
            "---@param direction defines.direction",
            "---@param by_player? PlayerIdentification Who rotated it.",
        ]

    def test_table(self, entity_json):
        """Table-taking methods get one param table."""
        method = Method.from_dict(entity_json["methods"][1])
        assert param_declarations(method) == [
            "---@param param {inventory_index: defines.inventory, size_override: uint16 | nil}"
        ]

    def test_optional_table(self):
        """An optional table is marked on the param name."""
        method = Method.from_dict(
            {
                "name": "f",
                "parameters": [{"name": "a", "type": "uint", "optional": True}],
                "format": {"takes_table": True, "table_optional": True},
            }
        )
        assert param_declarations(method) == ["---@param param? {a?: uint}"]

    def test_variadic(self):
        """A variadic parameter is a trailing ... line."""
        method = Method.from_dict(
            {
                "name": "print",
                "parameters": [{"name": "fmt", "type": "string"}],
                "variadic_parameter": {"type": "Any", "description": "Values.\nMore."},
            }
        )
        assert param_declarations(method) == [
            "---@param fmt string",
            "---@param ... Any Values.",
        ]

    def test_no_parameters(self):
        """A bare method has no param lines."""
        assert param_declarations(Method.from_dict({"name": "f"})) == []

    def test_returns(self, entity_json):
        """Return values carry type and first description line."""
        method = Method.from_dict(entity_json["methods"][0])
        assert return_declarations(method) == [
            "---@return boolean Whether the rotation was successful."
        ]

    def test_optional_return(self):
        """Optional return types get a ? suffix."""
        method = Method.from_dict(
            {"name": "f", "return_values": [{"type": "LuaEntity", "optional": True}]}
        )
        assert return_declarations(method) == ["---@return LuaEntity?"]


class TestDeclarationBlock:
    """Tests for declaration_block."""

    def test_class(self, entity_json):
        """Attributes then methods; operators are not listed."""
        block = declaration_block(Class.from_dict(entity_json))
        assert block == [
            "---@class LuaEntity",
            "---@field health float | float The current health of the entity, if any.",
            "---@field unit_number uint64 A unique number identifying this entity.",
            "---@field direction defines.direction ",
            "---@field rotate fun(direction:direction, by_player:PlayerIdentification) "
            "Rotates this entity as if the player rotated it.",
            "---@field set_inventory_size_override "
            "fun(inventory_index:inventory, size_override:uint16 | nil) "
            "Sets inventory size override.",
        ]

    def test_concept(self, runtime_json):
        """Concept properties become fields."""
        block = declaration_block(Concept.from_dict(runtime_json["concepts"][0]))
        assert block == [
            "---@class BoundingBox",
            "---@field left_top MapPosition ",
            "---@field orientation RealOrientation The orientation of the box.",
        ]

    def test_builtin_concept(self, runtime_json):
        """A builtin concept is only a class line."""
        block = declaration_block(Concept.from_dict(runtime_json["concepts"][1]))
        assert block == ["---@class double"]

    def test_prototype(self, prototype_json):
        """Prototype properties become fields."""
        block = declaration_block(Prototype.from_dict(prototype_json["prototypes"][0]))
        assert block[0] == "---@class BoilerPrototype"
        assert block[2] == "---@field target_temperature float "

    def test_event(self, runtime_json):
        """Event payload fields become fields."""
        block = declaration_block(Event.from_dict(runtime_json["events"][0]))
        assert block == [
            "---@class on_built_entity",
            "---@field entity LuaEntity ",
            "---@field player_index uint ",
        ]

    def test_define_qualified(self, runtime_json):
        """Define names are qualified by the prefix."""
        block = declaration_block(Define.from_dict(runtime_json["defines"][0]), "defines")
        assert block == [
            "---@class defines.direction",
            '---@field north "north" North.',
            '---@field east "east" ',
        ]

    def test_define_subkeys(self, runtime_json):
        """Sub-defines follow after a blank line, qualified by their parent."""
        block = declaration_block(Define.from_dict(runtime_json["defines"][1]), "defines")
        assert block == [
            "---@class defines.inventory",
            "",
            "---@class defines.inventory.chest",
            '---@field main "main" Main slots.',
        ]

    def test_define_unqualified(self):
        """Without a prefix the bare name is used."""
        assert declaration_block(Define.from_dict({"name": "x"})) == ["---@class x"]


class TestRenderDocument:
    """Tests for render_document."""

    def test_runtime(self, runtime_json):
        """Sections are emitted in order, separated by blank lines."""
        lines = render_document(parse_document(runtime_json))
        assert lines[:5] == [
            "---@class defines.direction",
            '---@field north "north" North.',
            '---@field east "east" ',
            "",
            "---@class defines.inventory",
        ]

    def test_runtime_full(self, runtime_json):
        """Every block appears exactly once in section order."""
        lines = render_document(parse_document(runtime_json))
        class_lines = [line for line in lines if line.startswith("---@class ")]
        assert class_lines == [
            "---@class defines.direction",
            "---@class defines.inventory",
            "---@class defines.inventory.chest",
            "---@class BoundingBox",
            "---@class double",
            "---@class LuaEntity",
            "---@class on_built_entity",
        ]
        game = lines.index("---@type LuaGameScript")
        assert lines[game + 1] == "game = nil"
        assert lines[game - 1] == ""
        assert lines[-3:] == [
            "",
            "---@param string LocalisedString",
            "function log(string) end",
        ]

    def test_blocks_separated(self, runtime_json):
        """A blank line precedes every block but the first."""
        lines = render_document(parse_document(runtime_json))
        for i, line in enumerate(lines):
            if line.startswith("---@class ") and i > 0:
                assert lines[i - 1] == ""

    def test_prototype(self, prototype_json):
        """Types come before prototypes."""
        lines = render_document(parse_document(prototype_json))
        assert lines == [
            "---@class Color",
            "",
            "---@class BoilerPrototype",
            '---@field mode string """heat-water-inside" | '
            'string """output-to-separate-pipe" How the boiler operates.',
            "---@field target_temperature float ",
            "",
            "---@class UtilityConstants",
        ]

    def test_empty_document(self):
        """An empty document renders no lines."""
        assert render_document(parse_document({"stage": "runtime"})) == []

    def test_logs_render(self, prototype_json, caplog):
        """Rendering is logged at DEBUG under the render scope."""
        caplog.set_level(logging.DEBUG, logger="factorio_luadoc")
        render_document(parse_document(prototype_json))
        (record,) = [r for r in caplog.records if r.getMessage() == "Rendered document"]
        assert record.scope == "render"
        assert record.blocks == 3
