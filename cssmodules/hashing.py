"""Salted, configurable hashing used for generated identifiers."""

from __future__ import annotations

import base64
import hashlib
from typing import Optional

from .errors import ConfigError

SUPPORTED_DIGESTS = ("hex", "base64", "base64url")


class IdentHasher:
    """Incremental hash state: feed bytes, then render a truncated digest."""

    def __init__(self, function: str, salt: Optional[str] = None) -> None:
        if function.lower().startswith("shake_"):
            raise ConfigError(f"Variable-length hash function {function!r} is not supported")
        try:
            self._state = hashlib.new(function)
        except (ValueError, TypeError) as exc:
            raise ConfigError(f"Unsupported hash function: {function!r}") from exc
        if salt:
            self._state.update(salt.encode("utf-8"))

    def update(self, data: bytes) -> "IdentHasher":
        self._state.update(data)
        return self

    def digest(self, kind: str = "hex") -> str:
        raw = self._state.digest()
        if kind == "hex":
            return raw.hex()
        if kind == "base64":
            return base64.b64encode(raw).decode("ascii").rstrip("=")
        if kind == "base64url":
            return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")
        raise ConfigError(
            f"Unsupported hash digest {kind!r}; expected one of {', '.join(SUPPORTED_DIGESTS)}"
        )

    def rendered(self, kind: str, length: int) -> str:
        """Return the digest truncated to ``length`` characters."""
        return self.digest(kind)[:length]


__all__ = ["IdentHasher", "SUPPORTED_DIGESTS"]
