"""Core data models shared across cssmodules components."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Dict, Iterable, List, Optional, Union

from .errors import ConfigError


@dataclass(frozen=True)
class LocalClassName:
    """Class name scoped to the file that declares it."""

    name: str


@dataclass(frozen=True)
class GlobalClassName:
    """Class name declared with ``:global`` and left untouched."""

    name: str


@dataclass(frozen=True)
class ImportClassName:
    """Class name composed from another stylesheet (``composes: x from "./a.css"``)."""

    name: str
    from_request: str


ClassName = Union[LocalClassName, GlobalClassName, ImportClassName]

# Insertion order is the emission order.
ExportsTable = Dict[str, List[ClassName]]


_CONVENTION_ALIASES = {
    "asis": "as_is",
    "as_is": "as_is",
    "camelcase": "camel_case",
    "camel_case": "camel_case",
    "dashes": "dashes",
    "kebabcase": "dashes",
    "kebab_case": "dashes",
}


@dataclass(frozen=True)
class LocalsConvention:
    """Naming conventions applied to exported keys; any subset may be active."""

    as_is: bool = True
    camel_case: bool = False
    dashes: bool = False

    @classmethod
    def from_name(cls, name: str) -> "LocalsConvention":
        """Build flags from a webpack-style ``exportLocalsConvention`` value."""
        key = name.strip()
        if key == "asIs":
            return cls(as_is=True)
        if key == "camelCase":
            return cls(as_is=True, camel_case=True)
        if key == "camelCaseOnly":
            return cls(as_is=False, camel_case=True)
        if key == "dashes":
            return cls(as_is=True, dashes=True)
        if key == "dashesOnly":
            return cls(as_is=False, dashes=True)
        raise ConfigError(f"Unknown locals convention: {name!r}")

    @classmethod
    def from_flags(cls, flags: Iterable[str]) -> "LocalsConvention":
        """Build flags from an explicit list such as ``["asIs", "dashes"]``."""
        enabled = set()
        for flag in flags:
            normalized = _CONVENTION_ALIASES.get(str(flag).strip().replace("-", "_").lower())
            if normalized is None:
                raise ConfigError(f"Unknown locals convention flag: {flag!r}")
            enabled.add(normalized)
        return cls(
            as_is="as_is" in enabled,
            camel_case="camel_case" in enabled,
            dashes="dashes" in enabled,
        )

    @classmethod
    def parse(cls, value: object) -> "LocalsConvention":
        if value is None:
            return cls()
        if isinstance(value, str):
            return cls.from_name(value)
        if isinstance(value, (list, tuple)):
            return cls.from_flags(value)
        raise ConfigError("locals_convention must be a name or a list of flags")


@dataclass(frozen=True)
class IdentityContext:
    """Per-file inputs for local identifier generation."""

    filename: Union[str, PurePath]
    local_ident_name: str = "[hash]"
    hash_function: str = "md5"
    hash_digest: str = "hex"
    hash_digest_length: int = 8
    hash_salt: Optional[str] = None


__all__ = [
    "ClassName",
    "ExportsTable",
    "GlobalClassName",
    "IdentityContext",
    "ImportClassName",
    "LocalClassName",
    "LocalsConvention",
]
