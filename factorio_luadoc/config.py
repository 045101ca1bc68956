"""
Module configuration.

Provides runtime configuration for parsing and rendering. Settings can be
modified programmatically without environment variables.

Example:
    >>> from factorio_luadoc import config
    >>> config.stripped_prefixes = ("defines.", "LuaGui")
    >>> config.debug = True  # Log every defaulted field while parsing
"""

from __future__ import annotations

from .exceptions import ValidationError

DEFAULT_STRIPPED_PREFIXES: tuple[str, ...] = ("defines.",)


class _LuaDocConfig:
    """
    Singleton configuration for factorio_luadoc settings.

    This is a singleton - import and modify `config` directly:

        from factorio_luadoc import config
        config.debug = True

    Attributes
    ----------
        stripped_prefixes: Prefixes removed from parameter types when building
            ``fun(...)`` signatures for methods.
        debug: When True, parse helpers log each optional field that fell
            back to its default.
    """

    __slots__ = ("_stripped_prefixes", "_debug")

    def __init__(self) -> None:
        self._stripped_prefixes = DEFAULT_STRIPPED_PREFIXES
        self._debug = False

    @property
    def stripped_prefixes(self) -> tuple[str, ...]:
        """Prefixes stripped from parameter types in method signatures."""
        return self._stripped_prefixes

    @stripped_prefixes.setter
    def stripped_prefixes(self, value: tuple[str, ...] | list[str]) -> None:
        if isinstance(value, str) or not isinstance(value, (tuple, list)):
            raise ValidationError(
                f"stripped_prefixes must be a tuple of str, got {type(value).__name__}",
                code="INVALID_ARGUMENT",
                details={"param": "stripped_prefixes", "type": type(value).__name__},
            )
        for prefix in value:
            if not isinstance(prefix, str) or not prefix:
                raise ValidationError(
                    f"stripped_prefixes entries must be non-empty str, got {prefix!r}",
                    code="INVALID_ARGUMENT",
                    details={"param": "stripped_prefixes", "value": repr(prefix)},
                )
        self._stripped_prefixes = tuple(value)

    @property
    def debug(self) -> bool:
        """Log defaulted fields during parsing."""
        return self._debug

    @debug.setter
    def debug(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise ValidationError(
                f"debug must be bool, got {type(value).__name__}",
                code="INVALID_ARGUMENT",
                details={"param": "debug", "type": type(value).__name__},
            )
        self._debug = value

    def reset(self) -> None:
        """Restore default settings."""
        self._stripped_prefixes = DEFAULT_STRIPPED_PREFIXES
        self._debug = False

    def __repr__(self) -> str:
        return f"LuaDocConfig(stripped_prefixes={self._stripped_prefixes!r}, debug={self._debug})"


# Module-level singleton
config = _LuaDocConfig()
