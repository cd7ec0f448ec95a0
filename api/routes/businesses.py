"""
Business CRUD endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from api.deps import get_storage
from api.models import BusinessUpdate
from config.logging_config import get_logger
from core.models import Business, BusinessBase
from core.storage import MemStorage

logger = get_logger(__name__)

router = APIRouter(prefix="/api/businesses", tags=["Businesses"])


@router.get("", response_model=List[Business])
async def list_businesses(storage: MemStorage = Depends(get_storage)):
    return storage.list_businesses()


@router.get("/{business_id}", response_model=Business)
async def get_business(business_id: int, storage: MemStorage = Depends(get_storage)):
    business = storage.get_business(business_id)
    if not business:
        raise HTTPException(status_code=404, detail="Business not found")
    return business


@router.post("", response_model=Business, status_code=201)
async def create_business(body: BusinessBase, storage: MemStorage = Depends(get_storage)):
    business = storage.create_business(body)
    logger.info("Created business %s (%s)", business.id, business.name)
    return business


@router.put("/{business_id}", response_model=Business)
async def update_business(
    business_id: int,
    body: BusinessUpdate,
    storage: MemStorage = Depends(get_storage),
):
    try:
        business = storage.update_business(business_id, **body.model_dump(exclude_unset=True))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not business:
        raise HTTPException(status_code=404, detail="Business not found")
    return business


@router.delete("/{business_id}", status_code=204)
async def delete_business(business_id: int, storage: MemStorage = Depends(get_storage)):
    """Delete a business together with its products and catalogs."""
    if not storage.delete_business(business_id):
        raise HTTPException(status_code=404, detail="Business not found")
