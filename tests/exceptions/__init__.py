"""
Exception hierarchy tests.

Maps to: factorio_luadoc/exceptions/
"""
