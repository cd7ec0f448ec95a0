"""
Custom (marketing-team) templates.

A custom template is a hand-written HTML page dropped into the custom
templates directory. It wins over the template's generated layout when
either:

1. the template layout is ``custom`` and names the file explicitly, or
2. a file named after the template exists (``"Modern Minimal"`` ->
   ``modern-minimal.html``).

Page placeholders: ``{{catalogName}}``, ``{{catalogDescription}}``,
``{{businessName}}``, ``{{generatedDate}}``, ``{{products}}``.
Product fragment placeholders: ``{{productName}}``, ``{{productImage}}``,
``{{productSku}}``, ``{{productPrice}}``, ``{{productDescription}}``.
"""
from datetime import datetime
from typing import List, Optional

from config.logging_config import get_logger
from core.models import Business, Catalog, CustomLayout, Product, Template, TemplateBase
from core.templating.composer import format_timestamp
from core.templating.layouts import description_block, image_html, price_block, sku_block
from core.templating.registry import TemplateFiles, TemplateRegistry, normalize_name, slugify
from core.templating.substitution import substitute

logger = get_logger(__name__)

CUSTOM_TEMPLATE_DESCRIPTION = "Custom template from marketing team"

DEFAULT_PRODUCT_BLOCK = """
  <div class="product">
    <div class="product-image">{{productImage}}</div>
    <div class="product-details">
      <div class="product-name">{{productName}}</div>
      {{productSku}}
      {{productPrice}}
      {{productDescription}}
    </div>
  </div>
"""


class CustomTemplateResolver:
    """Finds the custom template, if any, that overrides a stored template."""

    def __init__(self, registry: TemplateRegistry):
        self.registry = registry

    def resolve(self, template: Template) -> Optional[TemplateFiles]:
        layout = template.layout
        if getattr(layout, "type", None) == "custom" and getattr(layout, "custom_template", None):
            files = self.registry.resolve(layout.custom_template)
            if files:
                return files
            logger.warning(
                "Custom template file %s for template %s not found",
                layout.custom_template, template.id,
            )

        return self.registry.resolve(slugify(template.name))


def _render_products(files: TemplateFiles, products: List[Product]) -> str:
    fragment = files.product or DEFAULT_PRODUCT_BLOCK
    # Custom fragments bring their own image styling
    image_style = "" if files.product else "max-width: 100%; max-height: 100%;"

    blocks = []
    for product in products:
        image = image_html(product, style=image_style)
        blocks.append(substitute(fragment, {
            "productName": product.name,
            "productImage": image,
            "productSku": sku_block(product),
            "productPrice": price_block(product),
            "productDescription": description_block(product),
        }))
    return "".join(blocks)


def render_custom_template(
    files: TemplateFiles,
    catalog: Catalog,
    products: List[Product],
    business: Business,
    generated_at: Optional[datetime] = None,
) -> str:
    """Fill a custom page template with catalog, business and product data."""
    return substitute(files.page, {
        "catalogName": catalog.name,
        "catalogDescription": catalog.description or "",
        "businessName": business.name,
        "generatedDate": format_timestamp(generated_at),
        "products": _render_products(files, products),
    })


def sync_custom_templates(storage, registry: TemplateRegistry) -> List[Template]:
    """Register a ``custom`` template for every page template not yet in storage.

    A file is considered known when a stored template's name slugifies to the
    file name or a stored ``custom`` layout already points at it.
    Returns the templates created by this call.
    """
    known = set()
    for stored in storage.list_templates():
        known.add(slugify(stored.name))
        custom_file = getattr(stored.layout, "custom_template", None)
        if custom_file:
            known.add(normalize_name(custom_file))
    created = []

    for name in registry.list_names():
        if name in known:
            continue
        template = storage.create_template(TemplateBase(
            name=name.replace("-", " ").title(),
            description=CUSTOM_TEMPLATE_DESCRIPTION,
            thumbnail=f"/templates/custom/{name}.svg",
            layout=CustomLayout(custom_template=f"{name}.html"),
        ))
        known.add(name)
        created.append(template)
        logger.info("Registered custom template %s as template %s", name, template.id)

    return created
