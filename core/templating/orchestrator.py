"""
Catalog HTML rendering entry point.

Tiers, first success wins:
1. custom template file (registry lookup),
2. page generated from the template layout,
3. minimal fallback page, when either of the above raised.
"""
from datetime import datetime
from typing import List, Optional

from config.logging_config import get_logger
from core.models import Business, Catalog, Product, Template
from core.templating.composer import compose_dynamic_template
from core.templating.custom_template import CustomTemplateResolver, render_custom_template
from core.templating.fallback import render_fallback_template
from core.templating.registry import TemplateRegistry

logger = get_logger(__name__)


def render_catalog_html(
    catalog: Catalog,
    products: List[Product],
    template: Template,
    business: Business,
    *,
    registry: TemplateRegistry,
    generated_at: Optional[datetime] = None,
) -> str:
    """Render *catalog* to a complete HTML document.

    Args:
        catalog: Catalog being rendered (name, description, page settings).
        products: Products to include, already filtered and ordered.
        template: Stored template; its layout drives the generated page.
        business: Owning business, shown in the header.
        registry: Where custom template files are looked up.
        generated_at: Timestamp printed in the page. Fixing it makes the
            output byte-identical for identical inputs.

    Returns:
        HTML string. Errors from the custom and generated tiers are logged
        and answered with the fallback page; only a failure of the fallback
        page itself propagates.
    """
    generated_at = generated_at or datetime.now()

    try:
        files = CustomTemplateResolver(registry).resolve(template)
        if files:
            return render_custom_template(files, catalog, products, business, generated_at)

        logger.info(
            "No custom template found for %s, generating %s layout",
            template.name, getattr(template.layout, "type", "unknown"),
        )
        return compose_dynamic_template(catalog, products, template, business, generated_at)
    except Exception:
        logger.exception("Error rendering catalog %s, using fallback template", catalog.id)
        return render_fallback_template(catalog, products, business, generated_at)
