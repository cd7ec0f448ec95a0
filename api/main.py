#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
FastAPI Web Server - REST API for the Catalog Builder.

Thin orchestration shell: app creation, middleware, router includes,
startup, static mounts.

Usage:
    uvicorn api.main:app --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

from config.logging_config import get_logger
from config.settings import settings

logger = get_logger(__name__)

from api.deps import storage
from api.routes.businesses import router as businesses_router
from api.routes.catalogs import router as catalogs_router
from api.routes.dashboard import router as dashboard_router
from api.routes.health import router as health_router
from api.routes.products import router as products_router
from api.routes.templates import router as templates_router
from core.sample_data import load_sample_data


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info("%s v%s starting", settings.app_name, settings.app_version)
    if settings.load_sample_data and not storage.list_businesses():
        load_sample_data(storage)
    yield
    logger.info("Shutting down")


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title=f"{settings.app_name} API",
    description="Businesses, products, templates and catalogs rendered to HTML and PDF",
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS middleware: origins from settings (env var) or dev defaults
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


app.add_middleware(SecurityHeadersMiddleware)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": str(exc),
            "type": type(exc).__name__,
            "path": str(request.url.path),
        },
    )


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router)
app.include_router(businesses_router)
app.include_router(products_router)
app.include_router(templates_router)
app.include_router(catalogs_router)
app.include_router(dashboard_router)

# =============================================================================
# Static files: generated documents and template assets
# =============================================================================

templates_dir = settings.public_dir / "templates"
templates_dir.mkdir(parents=True, exist_ok=True)

app.mount(
    settings.generated_url_prefix,
    StaticFiles(directory=str(settings.generated_dir)),
    name="generated",
)
app.mount("/templates", StaticFiles(directory=str(templates_dir)), name="templates")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True)
