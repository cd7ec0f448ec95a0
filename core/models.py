"""Pydantic models for businesses, products, templates and catalogs.

JSON uses camelCase field names (``businessId``, ``showSKU``, ``pdfUrl``);
Python code uses the snake_case attributes. Both spellings are accepted on
input.
"""
from datetime import datetime
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising to camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============ Business ============

class BrandTheme(CamelModel):
    primary: Optional[str] = None
    secondary: Optional[str] = None


class PdfDefaults(CamelModel):
    default_size: str = "A4"
    default_orientation: str = "portrait"


class BusinessSettings(CamelModel):
    """Per-business preferences"""
    default_template_id: Optional[int] = None
    theme: BrandTheme = Field(default_factory=BrandTheme)
    pdf_settings: PdfDefaults = Field(default_factory=PdfDefaults)


class BusinessBase(CamelModel):
    name: str
    logo: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    settings: BusinessSettings = Field(default_factory=BusinessSettings)


class Business(BusinessBase):
    id: int


# ============ Product ============

class Variation(CamelModel):
    name: str
    options: List[str] = Field(default_factory=list)


class ProductBase(CamelModel):
    business_id: int
    name: str
    description: Optional[str] = None
    sku: Optional[str] = None
    price: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    variations: List[Variation] = Field(default_factory=list)
    active: bool = True

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, tags: List[str]) -> List[str]:
        # Tags behave as a set; keep first-seen order
        return list(dict.fromkeys(tags))

    @field_validator("price", mode="before")
    @classmethod
    def _price_as_text(cls, value):
        if value is None:
            return None
        return str(value)

    @property
    def primary_image(self) -> Optional[str]:
        return self.images[0] if self.images else None


class Product(ProductBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ============ Template layouts ============

class LayoutType(str, Enum):
    """Layout families understood by the dynamic composer"""
    GRID = "grid"
    FEATURED = "featured"
    LIST = "list"
    SHOWCASE = "showcase"
    CUSTOM = "custom"


class GridLayout(CamelModel):
    type: Literal["grid"] = "grid"
    columns: int = Field(default=2, ge=1)
    rows: int = Field(default=2, ge=1)
    show_price: bool = False
    show_sku: bool = Field(default=False, alias="showSKU")
    show_description: bool = False
    show_image: bool = True


class FeaturedLayout(CamelModel):
    type: Literal["featured"] = "featured"
    image_position: Literal["left", "right", "top"] = "left"
    show_price: bool = False
    show_description: bool = False
    show_features: bool = False
    highlight_features: bool = False
    show_image: bool = True


class ListLayout(CamelModel):
    type: Literal["list"] = "list"
    compact: bool = False
    show_image: bool = True
    show_price: bool = False
    show_sku: bool = Field(default=False, alias="showSKU")
    show_description: bool = False


class ShowcaseLayout(CamelModel):
    type: Literal["showcase"] = "showcase"
    show_image: bool = True
    show_bullet_points: bool = False
    highlight_features: bool = False


class CustomLayout(CamelModel):
    type: Literal["custom"] = "custom"
    custom_template: Optional[str] = None
    show_price: bool = True
    show_sku: bool = Field(default=True, alias="showSKU")
    show_description: bool = True
    show_image: bool = True


class GenericLayout(CamelModel):
    """Any layout tag this version does not know; rendered as a grid."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    type: str
    columns: int = 2
    show_price: bool = False
    show_sku: bool = Field(default=False, alias="showSKU")
    show_description: bool = False
    show_image: bool = True

    @field_validator("type")
    @classmethod
    def _unknown_tags_only(cls, value: str) -> str:
        # A known tag that failed its own model is an invalid layout, not an unknown one
        if value in {kind.value for kind in LayoutType}:
            raise ValueError(f"invalid {value} layout")
        return value


Layout = Annotated[
    Union[GridLayout, FeaturedLayout, ListLayout, ShowcaseLayout, CustomLayout, GenericLayout],
    Field(union_mode="left_to_right"),
]


class TemplateBase(CamelModel):
    name: str
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    layout: Layout
    is_default: bool = False


class Template(TemplateBase):
    id: int


# ============ Catalog ============

class CatalogStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class CatalogSettings(CamelModel):
    """Rendering settings for a catalog document"""
    page_size: Literal["A4", "Letter", "Legal"] = "A4"
    orientation: Literal["portrait", "landscape"] = "portrait"
    show_header: bool = True
    show_footer: bool = True
    show_page_numbers: bool = True


class CatalogBase(CamelModel):
    business_id: int
    template_id: int
    name: str
    description: Optional[str] = None
    status: CatalogStatus = CatalogStatus.DRAFT
    product_ids: List[int] = Field(default_factory=list)
    settings: CatalogSettings = Field(default_factory=CatalogSettings)
    pdf_url: Optional[str] = None


class Catalog(CatalogBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DashboardStats(CamelModel):
    total_businesses: int
    total_products: int
    total_catalogs: int
    total_templates: int
    active_products: int
    published_catalogs: int

