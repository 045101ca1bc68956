"""
Tests for factorio_luadoc.types - type expressions and rendering.

- test_expr.py: parse_type for every complex_type, permissive degrade, contract errors
- test_render.py: canonical string form of every variant

Maps to: factorio_luadoc/types/
"""
