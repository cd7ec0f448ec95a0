"""In-memory store for businesses, products, templates and catalogs"""
import threading
from datetime import datetime
from typing import Dict, List, Optional

from config.logging_config import get_logger
from core.models import (
    Business,
    BusinessBase,
    Catalog,
    CatalogBase,
    CatalogSettings,
    FeaturedLayout,
    GridLayout,
    ListLayout,
    Product,
    ProductBase,
    ShowcaseLayout,
    Template,
    TemplateBase,
)

logger = get_logger(__name__)


class ReferencedEntityError(Exception):
    """Raised when deleting a record that other records still point at."""

    def __init__(self, kind: str, entity_id: int, referenced_by: List[int]):
        self.kind = kind
        self.entity_id = entity_id
        self.referenced_by = referenced_by
        super().__init__(
            f"{kind} {entity_id} is used by catalog(s) {', '.join(map(str, referenced_by))}"
        )


DEFAULT_TEMPLATES: List[TemplateBase] = [
    TemplateBase(
        name="Product Grid",
        description="2x2 grid with product details",
        thumbnail="/templates/product-grid.svg",
        layout=GridLayout(columns=2, rows=2, show_price=True, show_sku=True, show_description=True),
        is_default=True,
    ),
    TemplateBase(
        name="Lookbook",
        description="Featured product with description",
        thumbnail="/templates/lookbook.svg",
        layout=FeaturedLayout(image_position="left", show_price=True, show_description=True, show_features=True),
    ),
    TemplateBase(
        name="Price List",
        description="Compact list with prices",
        thumbnail="/templates/price-list.svg",
        layout=ListLayout(show_image=True, show_price=True, show_sku=True, compact=True),
    ),
    TemplateBase(
        name="Feature Showcase",
        description="Highlight product features",
        thumbnail="/templates/feature-showcase.svg",
        layout=ShowcaseLayout(show_image=True, show_bullet_points=True, highlight_features=True),
    ),
]


class MemStorage:
    """Thread-safe in-memory store.

    Lookups return ``None`` for unknown ids; callers branch on that.

    Referential policy:
    - deleting a template still used by a catalog raises ``ReferencedEntityError``;
    - deleting a business also deletes its products and catalogs;
    - at most one template is flagged ``is_default``; saving a default
      template clears the flag on the others.
    """

    def __init__(self, seed_templates: bool = True):
        self._lock = threading.Lock()
        self._businesses: Dict[int, Business] = {}
        self._products: Dict[int, Product] = {}
        self._templates: Dict[int, Template] = {}
        self._catalogs: Dict[int, Catalog] = {}
        self._next_ids = {"business": 1, "product": 1, "template": 1, "catalog": 1}

        if seed_templates:
            for template in DEFAULT_TEMPLATES:
                self.create_template(template)

    def _next_id(self, kind: str) -> int:
        value = self._next_ids[kind]
        self._next_ids[kind] += 1
        return value

    # ---------------------------------------------------------------------------
    # Businesses
    # ---------------------------------------------------------------------------

    def get_business(self, business_id: int) -> Optional[Business]:
        return self._businesses.get(business_id)

    def list_businesses(self) -> List[Business]:
        return list(self._businesses.values())

    def create_business(self, data: BusinessBase) -> Business:
        with self._lock:
            business = Business(id=self._next_id("business"), **data.model_dump())
            self._businesses[business.id] = business
        return business

    def update_business(self, business_id: int, **changes) -> Optional[Business]:
        with self._lock:
            existing = self._businesses.get(business_id)
            if not existing:
                return None
            business = Business.model_validate({**existing.model_dump(), **changes})
            self._businesses[business_id] = business
        return business

    def delete_business(self, business_id: int) -> bool:
        with self._lock:
            if business_id not in self._businesses:
                return False
            del self._businesses[business_id]
            orphan_products = [p for p, prod in self._products.items() if prod.business_id == business_id]
            orphan_catalogs = [c for c, cat in self._catalogs.items() if cat.business_id == business_id]
            for product_id in orphan_products:
                del self._products[product_id]
            for catalog_id in orphan_catalogs:
                del self._catalogs[catalog_id]
        if orphan_products or orphan_catalogs:
            logger.info(
                "Deleted business %s with %d products and %d catalogs",
                business_id, len(orphan_products), len(orphan_catalogs),
            )
        return True

    # ---------------------------------------------------------------------------
    # Products
    # ---------------------------------------------------------------------------

    def get_product(self, product_id: int) -> Optional[Product]:
        return self._products.get(product_id)

    def get_products(self, business_id: Optional[int] = None) -> List[Product]:
        """All products, or only those of ``business_id`` when given."""
        products = list(self._products.values())
        if business_id is not None:
            products = [p for p in products if p.business_id == business_id]
        return products

    def create_product(self, data: ProductBase) -> Product:
        now = datetime.utcnow()
        with self._lock:
            product = Product(
                id=self._next_id("product"),
                created_at=now,
                updated_at=now,
                **data.model_dump(),
            )
            self._products[product.id] = product
        return product

    def update_product(self, product_id: int, **changes) -> Optional[Product]:
        with self._lock:
            existing = self._products.get(product_id)
            if not existing:
                return None
            merged = {**existing.model_dump(), **changes, "updated_at": datetime.utcnow()}
            product = Product.model_validate(merged)
            self._products[product_id] = product
        return product

    def delete_product(self, product_id: int) -> bool:
        with self._lock:
            return self._products.pop(product_id, None) is not None

    # ---------------------------------------------------------------------------
    # Templates
    # ---------------------------------------------------------------------------

    def get_template(self, template_id: int) -> Optional[Template]:
        return self._templates.get(template_id)

    def list_templates(self) -> List[Template]:
        return list(self._templates.values())

    def get_default_template(self) -> Optional[Template]:
        for template in self._templates.values():
            if template.is_default:
                return template
        return None

    def create_template(self, data: TemplateBase) -> Template:
        with self._lock:
            template = Template(id=self._next_id("template"), **data.model_dump())
            self._templates[template.id] = template
            if template.is_default:
                self._clear_other_defaults(template.id)
        return template

    def update_template(self, template_id: int, **changes) -> Optional[Template]:
        with self._lock:
            existing = self._templates.get(template_id)
            if not existing:
                return None
            template = Template.model_validate({**existing.model_dump(), **changes})
            self._templates[template_id] = template
            if template.is_default:
                self._clear_other_defaults(template_id)
        return template

    def delete_template(self, template_id: int) -> bool:
        with self._lock:
            if template_id not in self._templates:
                return False
            users = [c.id for c in self._catalogs.values() if c.template_id == template_id]
            if users:
                raise ReferencedEntityError("Template", template_id, users)
            del self._templates[template_id]
        return True

    def _clear_other_defaults(self, keep_id: int) -> None:
        for other_id, other in self._templates.items():
            if other_id != keep_id and other.is_default:
                self._templates[other_id] = other.model_copy(update={"is_default": False})

    # ---------------------------------------------------------------------------
    # Catalogs
    # ---------------------------------------------------------------------------

    def get_catalog(self, catalog_id: int) -> Optional[Catalog]:
        return self._catalogs.get(catalog_id)

    def list_catalogs(self, business_id: Optional[int] = None) -> List[Catalog]:
        catalogs = list(self._catalogs.values())
        if business_id is not None:
            catalogs = [c for c in catalogs if c.business_id == business_id]
        return catalogs

    def create_catalog(self, data: CatalogBase) -> Catalog:
        now = datetime.utcnow()
        with self._lock:
            catalog = Catalog(
                id=self._next_id("catalog"),
                created_at=now,
                updated_at=now,
                **data.model_dump(),
            )
            self._catalogs[catalog.id] = catalog
        return catalog

    def update_catalog(self, catalog_id: int, **changes) -> Optional[Catalog]:
        """Apply a partial update. ``settings`` is merged, not replaced."""
        with self._lock:
            existing = self._catalogs.get(catalog_id)
            if not existing:
                return None
            current = existing.model_dump()
            if "settings" in changes:
                settings = changes["settings"]
                if isinstance(settings, CatalogSettings):
                    settings = settings.model_dump(exclude_unset=True)
                changes["settings"] = {**current["settings"], **(settings or {})}
            if "product_ids" in changes:
                changes["product_ids"] = list(changes["product_ids"] or [])
            merged = {**current, **changes, "updated_at": datetime.utcnow()}
            catalog = Catalog.model_validate(merged)
            self._catalogs[catalog_id] = catalog
        return catalog

    def delete_catalog(self, catalog_id: int) -> bool:
        with self._lock:
            return self._catalogs.pop(catalog_id, None) is not None
