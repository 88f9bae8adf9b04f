"""CSS Modules identifier generation, export serialization and url normalization."""

from .config import CssModulesConfig, load_config
from .errors import ConfigError, CssModulesError, InternalError
from .exports import SerializationReport, serialize_exports, serialize_modules
from .graph import ModuleGraph, StaticModuleGraph
from .ident import LocalIdentGenerator, generate_local_ident
from .models import (
    ClassName,
    ExportsTable,
    GlobalClassName,
    IdentityContext,
    ImportClassName,
    LocalClassName,
    LocalsConvention,
)
from .runtime import REQUIRE_HELPER, replace_auto_public_path
from .url import normalize_url

__all__ = [
    "ClassName",
    "ConfigError",
    "CssModulesConfig",
    "CssModulesError",
    "ExportsTable",
    "GlobalClassName",
    "IdentityContext",
    "ImportClassName",
    "InternalError",
    "LocalClassName",
    "LocalIdentGenerator",
    "LocalsConvention",
    "ModuleGraph",
    "REQUIRE_HELPER",
    "SerializationReport",
    "StaticModuleGraph",
    "generate_local_ident",
    "load_config",
    "normalize_url",
    "replace_auto_public_path",
    "serialize_exports",
    "serialize_modules",
]
