"""Exception types raised by cssmodules."""

from __future__ import annotations

from typing import Hashable


class CssModulesError(RuntimeError):
    """Base class for cssmodules failures."""


class ConfigError(CssModulesError):
    """Raised when configuration or an identifier template is invalid."""


class InternalError(CssModulesError):
    """Raised when the module graph disagrees with the parsed exports.

    This points at an upstream inconsistency rather than a user mistake and
    only aborts serialization of the module it names.
    """

    def __init__(self, module: Hashable, message: str) -> None:
        super().__init__(f"{module}: {message}")
        self.module = module
        self.detail = message


__all__ = ["ConfigError", "CssModulesError", "InternalError"]
