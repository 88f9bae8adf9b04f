"""Read-only view of the bundler's module and chunk graph."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Hashable, Mapping, Optional, Protocol, Sequence, Tuple, Union

from .errors import InternalError

ChunkId = Union[str, int]


class ModuleGraph(Protocol):
    """What the export serializer needs from the build graph."""

    def dependencies_of(self, module: Hashable) -> Sequence[Any]:
        ...

    def request_of(self, dependency: Any) -> str:
        ...

    def target_module_of(self, dependency: Any) -> Optional[Hashable]:
        ...

    def chunk_id_of(self, module: Hashable) -> ChunkId:
        ...


@dataclass(frozen=True)
class Dependency:
    """A request made by a module and the module it resolved to."""

    request: str
    module: Optional[str] = None


@dataclass(frozen=True)
class ModuleRecord:
    id: Optional[ChunkId]
    dependencies: Tuple[Dependency, ...] = ()


class StaticModuleGraph:
    """Immutable in-memory graph, typically built from a JSON payload.

    The payload maps module identifiers to their assigned id and ordered
    dependency list::

        {
            "src/app.css": {
                "id": "./src/app.css",
                "dependencies": [{"request": "./base.css", "module": "src/base.css"}],
            },
            "src/base.css": {"id": "./src/base.css"},
        }
    """

    def __init__(self, modules: Mapping[str, ModuleRecord]) -> None:
        self._modules = MappingProxyType(dict(modules))

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "StaticModuleGraph":
        if not isinstance(payload, Mapping):
            raise ValueError("graph payload must be a mapping of module -> record")
        modules: Dict[str, ModuleRecord] = {}
        for module, raw in payload.items():
            if not isinstance(raw, Mapping):
                raise ValueError(f"graph entry for {module!r} must be a mapping")
            chunk_id = raw.get("id")
            if chunk_id is not None and (
                isinstance(chunk_id, bool) or not isinstance(chunk_id, (str, int))
            ):
                raise ValueError(f"graph entry for {module!r} has an invalid id")
            dependencies = []
            for dep in raw.get("dependencies") or []:
                if not isinstance(dep, Mapping) or not isinstance(dep.get("request"), str):
                    raise ValueError(f"dependency of {module!r} must have a string request")
                target = dep.get("module")
                dependencies.append(
                    Dependency(request=dep["request"], module=None if target is None else str(target))
                )
            modules[str(module)] = ModuleRecord(id=chunk_id, dependencies=tuple(dependencies))
        return cls(modules)

    @property
    def modules(self) -> Tuple[str, ...]:
        return tuple(self._modules)

    def dependencies_of(self, module: Hashable) -> Sequence[Dependency]:
        record = self._modules.get(module)  # type: ignore[arg-type]
        return record.dependencies if record else ()

    def request_of(self, dependency: Dependency) -> str:
        return dependency.request

    def target_module_of(self, dependency: Dependency) -> Optional[str]:
        if dependency.module is None or dependency.module not in self._modules:
            return None
        return dependency.module

    def chunk_id_of(self, module: Hashable) -> ChunkId:
        record = self._modules.get(module)  # type: ignore[arg-type]
        if record is None or record.id is None:
            raise InternalError(module, "module has no assigned id")
        return record.id


__all__ = ["ChunkId", "Dependency", "ModuleGraph", "ModuleRecord", "StaticModuleGraph"]
