"""
Root pytest configuration.

This file registers shared fixture plugins at the package root level,
as required by pytest for pytest_plugins declarations.
"""

pytest_plugins = ["tests.fixtures.documents"]
