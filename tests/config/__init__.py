"""
Configuration tests.

Maps to: factorio_luadoc/config.py
"""
