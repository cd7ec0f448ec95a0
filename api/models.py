"""
Pydantic models for the API.

Create requests reuse the ``*Base`` models from ``core.models``; the update
models below make every field optional so PUT bodies can be partial.
"""

from typing import List, Optional

from pydantic import Field, field_validator

from core.models import (
    BusinessSettings,
    CamelModel,
    CatalogStatus,
    Layout,
    Variation,
)


class BusinessUpdate(CamelModel):
    """Partial update of a business"""
    name: Optional[str] = None
    logo: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    settings: Optional[BusinessSettings] = None


class ProductUpdate(CamelModel):
    """Partial update of a product"""
    business_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    sku: Optional[str] = None
    price: Optional[str] = None
    images: Optional[List[str]] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    variations: Optional[List[Variation]] = None
    active: Optional[bool] = None

    @field_validator("price", mode="before")
    @classmethod
    def _price_as_text(cls, value):
        return None if value is None else str(value)


class TemplateUpdate(CamelModel):
    """Partial update of a template"""
    name: Optional[str] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    layout: Optional[Layout] = None
    is_default: Optional[bool] = None


class CatalogSettingsUpdate(CamelModel):
    """Catalog settings to change; omitted keys keep their value"""
    page_size: Optional[str] = Field(default=None, pattern="^(A4|Letter|Legal)$")
    orientation: Optional[str] = Field(default=None, pattern="^(portrait|landscape)$")
    show_header: Optional[bool] = None
    show_footer: Optional[bool] = None
    show_page_numbers: Optional[bool] = None


class CatalogUpdate(CamelModel):
    """Partial update of a catalog"""
    business_id: Optional[int] = None
    template_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[CatalogStatus] = None
    product_ids: Optional[List[int]] = None
    settings: Optional[CatalogSettingsUpdate] = None
    pdf_url: Optional[str] = None
