"""Last-resort catalog page: raw fields, inline styles, no layout settings."""
from datetime import datetime
from typing import List, Optional

from core.models import Business, Catalog, Product
from core.templating.composer import format_timestamp
from core.templating.layouts import image_html
from core.templating.substitution import substitute

FALLBACK_PAGE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{{catalogName}}</title>
  <style>
    body { font-family: Arial, sans-serif; margin: 20px; }
  </style>
</head>
<body>
  <div style="text-align: center; margin-bottom: 30px;">
    <h1>{{catalogName}}</h1>
    <p>{{catalogDescription}}</p>
    <p>{{businessName}}</p>
  </div>
  <div>{{products}}
  </div>
  <div style="text-align: center; margin-top: 30px; font-size: 12px; color: #999;">
    <p>Generated on {{generatedDate}}</p>
  </div>
</body>
</html>
"""

FALLBACK_PRODUCT = """
    <div style="border: 1px solid #eee; padding: 15px; margin-bottom: 15px;">
      <div style="width: 100px; height: 100px; background: #f0f0f0; display: flex; align-items: center; justify-content: center; float: left; margin-right: 15px;">
        {{image}}
      </div>
      <div>
        <div style="font-weight: bold;">{{name}}</div>
        {{sku}}
        {{price}}
        {{description}}
      </div>
      <div style="clear: both;"></div>
    </div>"""


def _optional(value: Optional[str], markup: str) -> str:
    return substitute(markup, {"value": value}) if value else ""


def render_fallback_template(
    catalog: Catalog,
    products: List[Product],
    business: Business,
    generated_at: Optional[datetime] = None,
) -> str:
    products_html = "".join(
        substitute(FALLBACK_PRODUCT, {
            "image": image_html(product),
            "name": product.name,
            "sku": _optional(product.sku, '<div style="font-size: 12px; color: #777;">SKU: {{value}}</div>'),
            "price": _optional(product.price, '<div style="color: #e63946; font-weight: bold;">${{value}}</div>'),
            "description": _optional(
                product.description,
                '<div style="color: #666; margin-top: 5px; font-size: 14px;">{{value}}</div>',
            ),
        })
        for product in products
    )

    return substitute(FALLBACK_PAGE, {
        "catalogName": catalog.name,
        "catalogDescription": catalog.description or "",
        "businessName": business.name,
        "generatedDate": format_timestamp(generated_at),
        "products": products_html,
    })
