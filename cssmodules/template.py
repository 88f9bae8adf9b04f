"""Rendering of ``local_ident_name`` templates such as ``[name]__[local]--[hash:6]``."""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Dict, Union

from .errors import ConfigError

_PLACEHOLDER = re.compile(r"\[(\w+)(?::([^\[\]]*))?\]")


def render_local_ident(
    template: str,
    *,
    path: Union[str, PurePath],
    hash: str,
    local: str,
) -> str:
    """Substitute known placeholders; unknown ``[tokens]`` are left as written."""
    _validate(template)
    values = _path_values(path)
    values["hash"] = hash
    values["local"] = local

    def _substitute(match: re.Match[str]) -> str:
        name, argument = match.group(1), match.group(2)
        if argument is None:
            return values.get(name, match.group(0))
        if name == "hash":
            return hash[: _parse_length(argument, template)]
        return match.group(0)

    return _PLACEHOLDER.sub(_substitute, template)


def _validate(template: str) -> None:
    if not template:
        raise ConfigError("local_ident_name must not be empty")
    last_open = template.rfind("[")
    if last_open != -1 and "]" not in template[last_open:]:
        raise ConfigError(f"Unterminated placeholder in local_ident_name: {template!r}")


def _parse_length(argument: str, template: str) -> int:
    try:
        length = int(argument)
    except ValueError:
        length = 0
    if length <= 0:
        raise ConfigError(
            f"Hash length must be a positive integer in local_ident_name: {template!r}"
        )
    return length


def _path_values(path: Union[str, PurePath]) -> Dict[str, str]:
    file = str(path)
    pure = PurePath(file)
    parent = pure.parent.as_posix()
    return {
        "file": file,
        "path": "" if parent in {"", "."} else f"{parent.rstrip('/')}/",
        "name": pure.stem,
        "ext": pure.suffix,
    }


__all__ = ["render_local_ident"]
