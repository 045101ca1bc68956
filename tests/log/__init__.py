"""
Logging tests.

Maps to: factorio_luadoc/_logging.py
"""
