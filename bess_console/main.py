"""
Ponto de entrada principal da API do console BESS Solar.

Este módulo configura a aplicação FastAPI com todas as rotas,
middlewares e handlers de exceção.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bess_console.api.v1.router import api_router
from bess_console.core.config import settings
from bess_console.core.logging import setup_logging
from bess_console.core.middleware import RequestContextMiddleware, setup_exception_handlers

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia o ciclo de vida da aplicação."""
    # Startup
    setup_logging()
    logger.info("Iniciando BESS Solar API", version=settings.VERSION, environment=settings.ENVIRONMENT)

    yield

    # Shutdown
    logger.info("Encerrando BESS Solar API")


def create_application() -> FastAPI:
    """Factory para criar a aplicação FastAPI."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Console de gestão de sistemas de armazenamento de energia solar (BESS)",
        version=settings.VERSION,
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        redoc_url=f"{settings.API_V1_PREFIX}/redoc",
        lifespan=lifespan,
    )

    # CORS (credenciais liberadas para o cookie de sessão)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    setup_exception_handlers(app)

    # Rotas
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    return app


app = create_application()


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Endpoint de health check."""
    return {"status": "healthy", "version": settings.VERSION}
