"""
Tests for factorio_luadoc.declarations - LuaLS annotation lines.

Maps to: factorio_luadoc/declarations.py
"""
