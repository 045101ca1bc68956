"""
Tests for factorio_luadoc.model - documentation entities.

Maps to: factorio_luadoc/model/
"""
