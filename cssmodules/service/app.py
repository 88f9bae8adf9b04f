"""FastAPI application entrypoint for cssmodules service mode."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..config import CssModulesConfig
from ..errors import ConfigError, InternalError
from ..exports import exports_from_payload, serialize_exports
from ..graph import StaticModuleGraph
from ..ident import LocalIdentGenerator
from ..logging import get_logger
from ..models import LocalsConvention
from ..url import normalize_url

logger = get_logger("service")


class IdentRequest(BaseModel):
    file: str
    locals: List[str]


class IdentResponse(BaseModel):
    identifiers: Dict[str, str]


class ExportsRequest(BaseModel):
    module: str
    exports: Dict[str, Any]
    graph: Dict[str, Any] = Field(default_factory=dict)
    convention: Optional[str] = None


class ExportsResponse(BaseModel):
    code: str


class NormalizeUrlRequest(BaseModel):
    values: List[str]


class NormalizeUrlResponse(BaseModel):
    values: List[str]


class HealthResponse(BaseModel):
    status: str


def create_app(
    config_factory: Callable[[], CssModulesConfig] = CssModulesConfig,
) -> FastAPI:
    """Create the FastAPI application exposing cssmodules operations."""

    app = FastAPI(title="CSS Modules Service", version="1.0.0")

    async def get_config() -> CssModulesConfig:
        return config_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/ident", response_model=IdentResponse)
    async def ident(
        payload: IdentRequest,
        config: CssModulesConfig = Depends(get_config),
    ) -> IdentResponse:
        generator = LocalIdentGenerator(config)
        identifiers = {local: generator.generate(local, payload.file) for local in payload.locals}
        return IdentResponse(identifiers=identifiers)

    @app.post("/exports", response_model=ExportsResponse)
    async def exports(
        payload: ExportsRequest,
        config: CssModulesConfig = Depends(get_config),
    ) -> ExportsResponse:
        conventions = (
            LocalsConvention.from_name(payload.convention)
            if payload.convention
            else config.modules.locals_convention
        )
        graph = StaticModuleGraph.from_payload(payload.graph)
        table = exports_from_payload(payload.exports)
        code = serialize_exports(table, payload.module, graph, conventions)
        return ExportsResponse(code=code)

    @app.post("/normalize-url", response_model=NormalizeUrlResponse)
    async def normalize(payload: NormalizeUrlRequest) -> NormalizeUrlResponse:
        return NormalizeUrlResponse(values=[normalize_url(value) for value in payload.values])

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(_: Any, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(InternalError)
    async def internal_error_handler(_: Any, exc: InternalError) -> JSONResponse:
        logger.error("Export serialization failed for %s: %s", exc.module, exc.detail)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1",
    port: int = 8000,
    config: CssModulesConfig | None = None,
) -> None:  # pragma: no cover - integration path
    resolved = config or CssModulesConfig()
    app = create_app(lambda: resolved)
    uvicorn.run(app, host=host, port=port)
