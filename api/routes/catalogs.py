"""
Catalog CRUD endpoints and document generation.

Thin routing layer; rendering lives in core/catalog_service.py.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from api.deps import get_catalog_service, get_storage
from api.models import CatalogUpdate
from config.logging_config import get_logger
from core.catalog_service import CatalogDocumentResult, CatalogDocumentService, ResourceNotFoundError
from core.models import Catalog, CatalogBase
from core.storage import MemStorage

logger = get_logger(__name__)

router = APIRouter(prefix="/api/catalogs", tags=["Catalogs"])


def _check_references(storage: MemStorage, business_id: Optional[int], template_id: Optional[int]) -> None:
    if business_id is not None and not storage.get_business(business_id):
        raise HTTPException(status_code=404, detail="Business not found")
    if template_id is not None and not storage.get_template(template_id):
        raise HTTPException(status_code=404, detail="Template not found")


@router.get("", response_model=List[Catalog])
async def list_catalogs(
    business_id: Optional[int] = Query(default=None, alias="businessId"),
    storage: MemStorage = Depends(get_storage),
):
    return storage.list_catalogs(business_id)


@router.get("/{catalog_id}", response_model=Catalog)
async def get_catalog(catalog_id: int, storage: MemStorage = Depends(get_storage)):
    catalog = storage.get_catalog(catalog_id)
    if not catalog:
        raise HTTPException(status_code=404, detail="Catalog not found")
    return catalog


@router.post("", response_model=Catalog, status_code=201)
async def create_catalog(body: CatalogBase, storage: MemStorage = Depends(get_storage)):
    _check_references(storage, body.business_id, body.template_id)
    catalog = storage.create_catalog(body)
    logger.info("Created catalog %s (%s) with %d products", catalog.id, catalog.name, len(catalog.product_ids))
    return catalog


@router.put("/{catalog_id}", response_model=Catalog)
async def update_catalog(
    catalog_id: int,
    body: CatalogUpdate,
    storage: MemStorage = Depends(get_storage),
):
    changes = body.model_dump(exclude_unset=True)
    _check_references(storage, changes.get("business_id"), changes.get("template_id"))
    try:
        catalog = storage.update_catalog(catalog_id, **changes)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not catalog:
        raise HTTPException(status_code=404, detail="Catalog not found")
    return catalog


@router.delete("/{catalog_id}", status_code=204)
async def delete_catalog(catalog_id: int, storage: MemStorage = Depends(get_storage)):
    if not storage.delete_catalog(catalog_id):
        raise HTTPException(status_code=404, detail="Catalog not found")


@router.get("/{catalog_id}/pdf", response_model=CatalogDocumentResult)
async def generate_catalog_pdf(
    catalog_id: int,
    service: CatalogDocumentService = Depends(get_catalog_service),
):
    """Render the catalog to HTML and PDF and publish it.

    When no PDF backend succeeds the HTML file is returned as ``pdfUrl`` and
    ``error`` says so; the catalog is published either way.
    """
    try:
        return await run_in_threadpool(service.generate, catalog_id)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("PDF generation error for catalog %s", catalog_id)
        raise HTTPException(status_code=500, detail="Failed to generate PDF")
