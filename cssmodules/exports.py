"""Serialization of CSS Modules exports into CommonJS module code."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Mapping

from .errors import InternalError
from .graph import ModuleGraph
from .logging import get_logger
from .models import (
    ClassName,
    ExportsTable,
    GlobalClassName,
    ImportClassName,
    LocalClassName,
    LocalsConvention,
)
from .naming import to_kebab_case, to_lower_camel_case
from .runtime import REQUIRE_HELPER

logger = get_logger("exports")

_JOINER = ' + " " + '


def _json(value: object) -> str:
    return json.dumps(value, ensure_ascii=False)


def resolve_import_id(
    request: str, module: Hashable, graph: ModuleGraph
) -> object:
    """Return the id of the module ``module`` imports as ``request``."""
    matched = False
    for dependency in graph.dependencies_of(module):
        if graph.request_of(dependency) != request:
            continue
        matched = True
        target = graph.target_module_of(dependency)
        if target is not None:
            return graph.chunk_id_of(target)
    if matched:
        raise InternalError(module, f"dependency {request!r} did not resolve to a module")
    raise InternalError(module, f"no dependency matches composed request {request!r}")


def class_name_expression(
    entry: ClassName, module: Hashable, graph: ModuleGraph
) -> str:
    if isinstance(entry, (LocalClassName, GlobalClassName)):
        return _json(entry.name)
    if isinstance(entry, ImportClassName):
        target_id = resolve_import_id(entry.from_request, module, graph)
        return f"{REQUIRE_HELPER}({_json(target_id)})[{_json(entry.name)}]"
    raise TypeError(f"Unsupported class name entry: {entry!r}")


def exported_keys(key: str, conventions: LocalsConvention) -> List[str]:
    """Return the keys emitted for ``key``; duplicates are kept."""
    keys: List[str] = []
    if conventions.as_is:
        keys.append(key)
    if conventions.camel_case:
        keys.append(to_lower_camel_case(key))
    if conventions.dashes:
        keys.append(to_kebab_case(key))
    return keys


def serialize_exports(
    exports: ExportsTable,
    module: Hashable,
    graph: ModuleGraph,
    conventions: LocalsConvention,
) -> str:
    """Render ``module.exports = {...}`` for one stylesheet.

    Keys keep the table's insertion order and, per key, the convention order
    as-is, camelCase, dashes. Composed entries are concatenated with a space.
    Raises :class:`InternalError` when a composed request is missing from the
    module's dependencies.
    """
    lines = ["module.exports = {"]
    for key, entries in exports.items():
        content = _JOINER.join(
            class_name_expression(entry, module, graph) for entry in entries
        )
        for exported in exported_keys(key, conventions):
            lines.append(f"  {_json(exported)}: {content},")
    lines.append("};")
    return "\n".join(lines) + "\n"


@dataclass
class SerializationReport:
    """Per-module outcome of :func:`serialize_modules`."""

    outputs: Dict[Hashable, str] = field(default_factory=dict)
    errors: Dict[Hashable, InternalError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def serialize_modules(
    tables: Mapping[Hashable, ExportsTable],
    graph: ModuleGraph,
    conventions: LocalsConvention,
) -> SerializationReport:
    """Serialize several modules; an internal error only fails its own module."""
    report = SerializationReport()
    for module, exports in tables.items():
        try:
            report.outputs[module] = serialize_exports(exports, module, graph, conventions)
        except InternalError as exc:
            logger.error("Failed to serialize CSS module exports for %s: %s", module, exc.detail)
            report.errors[module] = exc
    logger.debug(
        "Serialized %d CSS module(s), %d failed", len(report.outputs), len(report.errors)
    )
    return report


def exports_from_payload(payload: Mapping[str, object]) -> ExportsTable:
    """Build an exports table from JSON such as ``{"btn": ["btn_x", {"import": "a", "from": "./a.css"}]}``.

    Plain strings are local class names; objects use ``local``, ``global`` or
    ``import`` + ``from``.
    """
    if not isinstance(payload, Mapping):
        raise ValueError("exports payload must be a mapping of key -> entries")
    table: ExportsTable = {}
    for key, raw_entries in payload.items():
        if isinstance(raw_entries, (str, Mapping)):
            raw_entries = [raw_entries]
        if not isinstance(raw_entries, list):
            raise ValueError(f"exports entry {key!r} must be a list")
        table[str(key)] = [_entry_from_payload(key, raw) for raw in raw_entries]
    return table


def _entry_from_payload(key: str, raw: object) -> ClassName:
    if isinstance(raw, str):
        return LocalClassName(raw)
    if isinstance(raw, Mapping):
        if isinstance(raw.get("local"), str):
            return LocalClassName(raw["local"])
        if isinstance(raw.get("global"), str):
            return GlobalClassName(raw["global"])
        if isinstance(raw.get("import"), str) and isinstance(raw.get("from"), str):
            return ImportClassName(raw["import"], raw["from"])
    raise ValueError(f"unrecognised class name entry for {key!r}: {raw!r}")


__all__ = [
    "SerializationReport",
    "class_name_expression",
    "exported_keys",
    "exports_from_payload",
    "resolve_import_id",
    "serialize_exports",
    "serialize_modules",
]
