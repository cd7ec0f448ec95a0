"""
Product CRUD endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from api.deps import get_storage
from api.models import ProductUpdate
from config.logging_config import get_logger
from core.models import Product, ProductBase
from core.storage import MemStorage

logger = get_logger(__name__)

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=List[Product])
async def list_products(
    business_id: Optional[int] = Query(default=None, alias="businessId"),
    storage: MemStorage = Depends(get_storage),
):
    """All products, or the products of one business."""
    return storage.get_products(business_id)


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: int, storage: MemStorage = Depends(get_storage)):
    product = storage.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=Product, status_code=201)
async def create_product(body: ProductBase, storage: MemStorage = Depends(get_storage)):
    if not storage.get_business(body.business_id):
        raise HTTPException(status_code=404, detail="Business not found")
    product = storage.create_product(body)
    logger.info("Created product %s (%s) for business %s", product.id, product.name, product.business_id)
    return product


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: int,
    body: ProductUpdate,
    storage: MemStorage = Depends(get_storage),
):
    changes = body.model_dump(exclude_unset=True)
    if changes.get("business_id") is not None and not storage.get_business(changes["business_id"]):
        raise HTTPException(status_code=404, detail="Business not found")
    try:
        product = storage.update_product(product_id, **changes)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: int, storage: MemStorage = Depends(get_storage)):
    if not storage.delete_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
