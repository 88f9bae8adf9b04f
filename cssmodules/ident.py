"""Deterministic local identifier generation for CSS Modules."""

from __future__ import annotations

from dataclasses import replace
from pathlib import PurePath
from typing import Union

from .config import CssModulesConfig
from .hashing import IdentHasher
from .logging import get_logger
from .models import IdentityContext
from .template import render_local_ident

logger = get_logger("ident")


def local_ident_hash(local: str, context: IdentityContext) -> str:
    """Return the rendered hash for ``local``, prefixed with ``_`` when it starts with a digit."""
    hasher = IdentHasher(context.hash_function, context.hash_salt)
    hasher.update(str(context.filename).encode("utf-8"))
    hasher.update(local.encode("utf-8"))
    rendered = hasher.rendered(context.hash_digest, context.hash_digest_length)
    if rendered[:1].isdigit() and rendered[:1].isascii():
        return f"_{rendered}"
    return rendered


def generate_local_ident(local: str, context: IdentityContext) -> str:
    """Return the scoped identifier for ``local`` declared in ``context.filename``."""
    return render_local_ident(
        context.local_ident_name,
        path=context.filename,
        hash=local_ident_hash(local, context),
        local=local,
    )


class LocalIdentGenerator:
    """Generates identifiers for many files using one configuration."""

    def __init__(self, config: CssModulesConfig | None = None) -> None:
        self._base = (config or CssModulesConfig()).identity_context("")

    def context_for(self, filename: Union[str, PurePath]) -> IdentityContext:
        return replace(self._base, filename=filename)

    def generate(self, local: str, filename: Union[str, PurePath]) -> str:
        ident = generate_local_ident(local, self.context_for(filename))
        logger.debug("Renamed .%s in %s to .%s", local, filename, ident)
        return ident


__all__ = ["LocalIdentGenerator", "generate_local_ident", "local_ident_hash"]
