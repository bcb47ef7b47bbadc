# api/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from api.infrastructure.config import get_settings
from api.interfaces.api.middleware.rate_limit import RateLimitMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from api.infrastructure.duckdb_connection import get_connection
    get_connection()  # valida conexao no startup
    yield


app = FastAPI(
    title="Pontos de Captacao API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Routers: /pontos/derivar (POST) antes de /pontos/{ponto_id}
from api.interfaces.api.routes.dashboard_routes import router as dashboard_router  # noqa: E402
from api.interfaces.api.routes.empreendimento_routes import router as empreendimento_router  # noqa: E402
from api.interfaces.api.routes.ponto_routes import router as ponto_router  # noqa: E402
from api.interfaces.api.routes.relatorio_routes import router as relatorio_router  # noqa: E402

app.include_router(ponto_router, prefix="/api")
app.include_router(empreendimento_router, prefix="/api")
app.include_router(dashboard_router, prefix="/api")
app.include_router(relatorio_router, prefix="/api")
