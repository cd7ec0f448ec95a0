"""
Dashboard statistics endpoint.
"""

from fastapi import APIRouter, Depends

from api.deps import get_storage
from core.models import CatalogStatus, DashboardStats
from core.storage import MemStorage

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_stats(storage: MemStorage = Depends(get_storage)):
    """Entity counts for the dashboard."""
    products = storage.get_products()
    catalogs = storage.list_catalogs()
    return DashboardStats(
        total_businesses=len(storage.list_businesses()),
        total_products=len(products),
        total_catalogs=len(catalogs),
        total_templates=len(storage.list_templates()),
        active_products=sum(1 for p in products if p.active),
        published_catalogs=sum(1 for c in catalogs if c.status == CatalogStatus.PUBLISHED),
    )
