"""Configuration loading for cssmodules (.cssmodules.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigError
from .hashing import SUPPORTED_DIGESTS
from .models import IdentityContext, LocalsConvention

CONFIG_FILENAME = ".cssmodules.yml"


@dataclass
class ModulesConfig:
    """CSS Modules naming settings."""

    local_ident_name: str = "[hash]"
    locals_convention: LocalsConvention = field(default_factory=LocalsConvention)


@dataclass
class OutputConfig:
    """Hash settings shared with the bundler's output options."""

    hash_function: str = "md5"
    hash_digest: str = "hex"
    hash_digest_length: int = 8
    hash_salt: Optional[str] = None


@dataclass
class CssModulesConfig:
    """Represents the settings defined in .cssmodules.yml."""

    root: Path = field(default_factory=Path.cwd)
    modules: ModulesConfig = field(default_factory=ModulesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def identity_context(self, filename: Union[str, PurePath]) -> IdentityContext:
        return IdentityContext(
            filename=filename,
            local_ident_name=self.modules.local_ident_name,
            hash_function=self.output.hash_function,
            hash_digest=self.output.hash_digest,
            hash_digest_length=self.output.hash_digest_length,
            hash_salt=self.output.hash_salt,
        )


def load_config(config_path: Path) -> CssModulesConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return CssModulesConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    modules = ModulesConfig()
    modules_data = _as_dict(data.get("modules"))
    if modules_data:
        template = _as_str(modules_data.get("local_ident_name"))
        if template is not None:
            if not template:
                raise ConfigError("modules.local_ident_name must not be empty")
            modules.local_ident_name = template
        if "locals_convention" in modules_data:
            modules.locals_convention = LocalsConvention.parse(
                modules_data.get("locals_convention")
            )

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        hash_function = _as_str(output_data.get("hash_function"))
        if hash_function:
            output.hash_function = hash_function
        hash_digest = _as_str(output_data.get("hash_digest"))
        if hash_digest:
            if hash_digest not in SUPPORTED_DIGESTS:
                raise ConfigError(f"Unsupported output.hash_digest: {hash_digest!r}")
            output.hash_digest = hash_digest
        if output_data.get("hash_digest_length") is not None:
            length = _as_int(output_data.get("hash_digest_length"))
            if length is None or length <= 0:
                raise ConfigError("output.hash_digest_length must be a positive integer")
            output.hash_digest_length = length
        output.hash_salt = _as_str(output_data.get("hash_salt"))

    return CssModulesConfig(root=root, modules=modules, output=output)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "CssModulesConfig",
    "ModulesConfig",
    "OutputConfig",
    "load_config",
]
