"""
Template CRUD endpoints.

Listing templates also registers any new custom template files found in the
custom templates directory.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from api.deps import get_storage, get_template_registry
from api.models import TemplateUpdate
from config.logging_config import get_logger
from core.models import Template, TemplateBase
from core.storage import MemStorage, ReferencedEntityError
from core.templating.custom_template import sync_custom_templates
from core.templating.registry import TemplateRegistry

logger = get_logger(__name__)

router = APIRouter(prefix="/api/templates", tags=["Templates"])


@router.get("", response_model=List[Template])
async def list_templates(
    storage: MemStorage = Depends(get_storage),
    registry: TemplateRegistry = Depends(get_template_registry),
):
    try:
        created = sync_custom_templates(storage, registry)
    except OSError as e:
        # Listing still works from storage when the directory is unreadable
        logger.warning("Could not scan custom templates: %s", e)
    else:
        if created:
            logger.info("Registered %d custom template(s)", len(created))
    return storage.list_templates()


@router.get("/{template_id}", response_model=Template)
async def get_template(template_id: int, storage: MemStorage = Depends(get_storage)):
    template = storage.get_template(template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")
    return template


@router.post("", response_model=Template, status_code=201)
async def create_template(body: TemplateBase, storage: MemStorage = Depends(get_storage)):
    template = storage.create_template(body)
    logger.info("Created template %s (%s, %s layout)", template.id, template.name, template.layout.type)
    return template


@router.put("/{template_id}", response_model=Template)
async def update_template(
    template_id: int,
    body: TemplateUpdate,
    storage: MemStorage = Depends(get_storage),
):
    try:
        template = storage.update_template(template_id, **body.model_dump(exclude_unset=True))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")
    return template


@router.delete("/{template_id}", status_code=204)
async def delete_template(template_id: int, storage: MemStorage = Depends(get_storage)):
    """Delete a template. Refused with 409 while catalogs still use it."""
    try:
        deleted = storage.delete_template(template_id)
    except ReferencedEntityError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Template not found")
