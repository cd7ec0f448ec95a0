"""
Health check endpoint.
"""

import time

from fastapi import APIRouter

from api.deps import exporter, start_time
from config.settings import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "timestamp": time.time(),
        "uptime_seconds": round(time.time() - start_time, 1),
        "pdf_backends": [backend.name for backend in exporter.backends],
    }
