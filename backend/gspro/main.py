"""
Gestão Sucata Pro - FastAPI Application Entry Point

This module initializes the FastAPI application with all middleware,
routes, and lifecycle event handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gspro import __version__
from gspro.core.config import settings
from gspro.core.database import init_db, close_db
from gspro.core.logging_config import setup_logging
from gspro.middleware.request_id import RequestIDMiddleware
from gspro.middleware.logging import LoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
        - Set up logging
        - Initialize database

    Shutdown:
        - Close database connections
    """
    setup_logging(level=settings.log_level, json_format=settings.log_json)

    await init_db()

    yield

    await close_db()


app = FastAPI(
    title=settings.project_name,
    version=__version__,
    description="Estoque, vendas, financeiro e etiquetas QR para ferro-velho e autopeças",
    openapi_url=f"{settings.api_v1_prefix}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# Middleware is executed in reverse order of registration
# (last registered = first executed)

# Logging middleware (runs after RequestID to access request_id)
app.add_middleware(LoggingMiddleware)

# Request ID middleware (sets correlation ID)
app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


from gspro.api.v1 import (  # noqa: E402
    health,
    auth,
    products,
    clients,
    registry,
    sales,
    finance,
    dashboard,
    qrcode,
)

app.include_router(health.router, prefix=settings.api_v1_prefix, tags=["health"])
app.include_router(auth.router, prefix=f"{settings.api_v1_prefix}/auth", tags=["auth"])
app.include_router(products.router, prefix=settings.api_v1_prefix)
app.include_router(clients.router, prefix=settings.api_v1_prefix)
app.include_router(registry.router, prefix=settings.api_v1_prefix)
app.include_router(sales.router, prefix=settings.api_v1_prefix)
app.include_router(finance.router, prefix=settings.api_v1_prefix)
app.include_router(dashboard.router, prefix=settings.api_v1_prefix)
app.include_router(qrcode.router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root():
    """
    Root endpoint.

    Returns basic API information.
    """
    return {
        "message": f"{settings.project_name} API",
        "version": __version__,
        "docs": "/docs",
    }
